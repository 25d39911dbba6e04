# -*- coding: utf-8 -*-
"""
Page Editor Wizard Package.

Create and edit CMS pages of the public site.

This package contains:
- PageContext: Wizard context for pages
- PAGE_STEPS: Content and settings steps
- PageEditorWizard / PageEditorDialog: Wizard widget and its dialog host
"""

from .page_context import PageContext
from .steps import PAGE_STEPS
from .page_editor_wizard import (
    PageEditorDialog,
    PageEditorWizard,
    create_page_editor_controller,
)

__all__ = [
    'PageContext',
    'PAGE_STEPS',
    'PageEditorDialog',
    'PageEditorWizard',
    'create_page_editor_controller'
]
