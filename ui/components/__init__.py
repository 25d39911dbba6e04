# -*- coding: utf-8 -*-
"""
BnOverseas Admin UI Components
"""

from .action_button import ActionButton
from .base_table_model import BaseTableModel
from .filter_panel import FilterPanel
from .pagination_bar import PaginationBar
from .row_menu import OutsideClickCloser, RowActionMenu, RowMenuState
from .toast import Toast

__all__ = [
    "ActionButton",
    "BaseTableModel",
    "FilterPanel",
    "PaginationBar",
    "OutsideClickCloser",
    "RowActionMenu",
    "RowMenuState",
    "Toast",
]
