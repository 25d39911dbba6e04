# -*- coding: utf-8 -*-
"""
BnOverseas Controllers
======================
Controller layer between the screens and the REST API.

Controllers provide:
- Wizard state, gated navigation and submission (WizardController)
- Filtered, paginated lists with last-write-wins fetching (ListFilterController)
- Qt signals for UI updates; remote errors become state, never exceptions

Usage:
    from controllers import ListFilterController
    from controllers.catalog_filters import universities_schema

    controller = ListFilterController(universities_schema())
    controller.results_changed.connect(on_results)
    controller.set_field("discipline", "Engineering")
"""

# Base controller
from controllers.base_controller import BaseController

from controllers.list_controller import (
    FilterField,
    FilterSchema,
    FilterState,
    ListFilterController,
    ListResult,
    Pagination,
)

from controllers.wizard_controller import (
    PublishableWizardController,
    SubmissionStatus,
    WizardController,
)

from controllers.pages_controller import PagesManagementController

# All public exports
__all__ = [
    # Base
    "BaseController",

    # Lists
    "FilterField",
    "FilterSchema",
    "FilterState",
    "ListFilterController",
    "ListResult",
    "Pagination",

    # Wizards
    "PublishableWizardController",
    "SubmissionStatus",
    "WizardController",

    # Screens
    "PagesManagementController",
]
