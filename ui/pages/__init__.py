# -*- coding: utf-8 -*-
"""
BnOverseas Admin UI Pages
"""

from .catalog_list_page import CatalogListPage
from .pages_management_page import PagesManagementPage

__all__ = [
    "CatalogListPage",
    "PagesManagementPage",
]
