# -*- coding: utf-8 -*-
"""
Course Context - Aggregate of the course builder.
"""

from typing import Any, Dict

from models.course import Course
from ui.wizards.framework.wizard_context import GroupSchema, WizardContext


class CourseContext(WizardContext):
    """Course being built: flat course fields plus modules holding lessons."""

    record_type = Course
    slug_source = "title"
    group_schemas = {
        "modules": GroupSchema(
            items_key="lessons",
            group_defaults={"title": "", "description": ""},
            item_defaults={"title": "", "description": "", "type": "video",
                           "content_url": "", "duration": None},
        ),
    }

    def default_data(self) -> Dict[str, Any]:
        return Course().to_aggregate()
