# -*- coding: utf-8 -*-
"""
BnOverseas Admin Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_date, format_number, slugify

__all__ = [
    "get_logger",
    "setup_logger",
    "format_date",
    "format_number",
    "slugify",
]
