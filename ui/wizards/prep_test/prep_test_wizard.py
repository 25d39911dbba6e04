# -*- coding: utf-8 -*-
"""
Test Builder Wizard - POST/PUT /api/admin/tests.
"""

from typing import Any, Dict, Optional

from controllers.wizard_controller import PublishableWizardController
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from ui.wizards.framework.base_wizard import PublishableWizard
from .prep_test_context import PrepTestContext
from .steps import TEST_STEPS

TESTS_COLLECTION = "/api/admin/tests"


def create_test_controller(entity: Optional[Dict[str, Any]] = None, api_client=None,
                           runner=None, parent=None) -> PublishableWizardController:
    context = PrepTestContext.from_entity(entity) if entity else PrepTestContext()
    sync = RemoteSync(TESTS_COLLECTION, api_client=api_client, entity_key="test")
    return PublishableWizardController(context, TEST_STEPS, sync, runner=runner, parent=parent)


class TestBuilderWizard(PublishableWizard):
    """Test builder: basic info, sections, settings, SEO."""

    __test__ = False

    def get_wizard_title(self) -> str:
        if self.controller.context.is_edit_mode:
            return tr("wizard.test.title_edit")
        return tr("wizard.test.title")
