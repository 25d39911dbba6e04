# -*- coding: utf-8 -*-
"""
Page Editor Wizard - create or edit a CMS page.

POST /api/admin/pages for a new page, PUT /api/admin/pages/{id} for an
existing one. The server wraps the page as {"page": {...}}.
"""

from typing import Any, Dict, Optional

from controllers.wizard_controller import WizardController
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from ui.wizards.framework.base_wizard import BaseWizard, WizardDialog
from .page_context import PageContext
from .steps import PAGE_STEPS

PAGES_COLLECTION = "/api/admin/pages"


def create_page_editor_controller(entity: Optional[Dict[str, Any]] = None,
                                  api_client=None, runner=None,
                                  parent=None) -> WizardController:
    """
    Build the controller of a page editor.

    Args:
        entity: Existing page (edit mode) or None for a new page
    """
    context = PageContext.from_entity(entity) if entity else PageContext()
    sync = RemoteSync(PAGES_COLLECTION, api_client=api_client, entity_key="page")
    return WizardController(context, PAGE_STEPS, sync, runner=runner, parent=parent)


class PageEditorWizard(BaseWizard):
    """Two-step page editor."""

    def get_wizard_title(self) -> str:
        if self.controller.context.is_edit_mode:
            return tr("wizard.page_editor.title_edit")
        return tr("wizard.page_editor.title_create")

    def get_submit_button_text(self) -> str:
        return tr("button.save")


class PageEditorDialog(WizardDialog):
    """Modal page editor. result_entity holds the saved page after accept()."""

    def __init__(self, entity: Optional[Dict[str, Any]] = None, api_client=None,
                 runner=None, parent=None):
        controller = create_page_editor_controller(entity, api_client=api_client, runner=runner)
        super().__init__(PageEditorWizard(controller), parent)
        self.controller = controller
        controller.setParent(self)
