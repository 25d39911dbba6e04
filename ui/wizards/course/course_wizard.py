# -*- coding: utf-8 -*-
"""
Course Builder Wizard.

The last step offers "Save Draft" and "Publish"; both submit the whole
course and differ only in is_published.
"""

from typing import Any, Dict, Optional

from controllers.wizard_controller import PublishableWizardController
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from ui.wizards.framework.base_wizard import PublishableWizard
from .course_context import CourseContext
from .steps import COURSE_STEPS

COURSES_COLLECTION = "/api/admin/courses"


class CourseBuilderController(PublishableWizardController):
    """Controller of the course builder."""


def create_course_controller(entity: Optional[Dict[str, Any]] = None, api_client=None,
                             runner=None, parent=None) -> CourseBuilderController:
    context = CourseContext.from_entity(entity) if entity else CourseContext()
    sync = RemoteSync(COURSES_COLLECTION, api_client=api_client, entity_key="course")
    return CourseBuilderController(context, COURSE_STEPS, sync, runner=runner, parent=parent)


class CourseBuilderWizard(PublishableWizard):
    """Course builder: basic info, content, curriculum, pricing."""

    def get_wizard_title(self) -> str:
        if self.controller.context.is_edit_mode:
            return tr("wizard.course.title_edit")
        return tr("wizard.course.title")
