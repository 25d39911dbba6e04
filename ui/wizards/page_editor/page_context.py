# -*- coding: utf-8 -*-
"""
Page Context - Aggregate of the page editor.
"""

from typing import Any, Dict

from models.page import Page
from ui.wizards.framework.wizard_context import WizardContext


class PageContext(WizardContext):
    """Page being created or edited. The slug follows the title until typed by hand."""

    record_type = Page
    slug_source = "title"

    def default_data(self) -> Dict[str, Any]:
        return Page().to_aggregate()
