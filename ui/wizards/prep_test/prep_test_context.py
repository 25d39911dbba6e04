# -*- coding: utf-8 -*-
"""
Prep Test Context - Aggregate of the test builder.
"""

from typing import Any, Dict

from models.prep_test import DEFAULT_QUESTION_COUNT, DEFAULT_TIME_LIMIT, PrepTest
from ui.wizards.framework.wizard_context import GroupSchema, WizardContext


class PrepTestContext(WizardContext):
    """Test being built: settings plus sections holding questions. Tests have no slug."""

    record_type = PrepTest
    group_schemas = {
        "sections": GroupSchema(
            items_key="questions",
            group_defaults={
                "section_name": "",
                "description": "",
                "question_count": DEFAULT_QUESTION_COUNT,
                "time_limit": DEFAULT_TIME_LIMIT,
                "instructions": "",
            },
            item_defaults={
                "question_text": "",
                "question_type": "MCQ",
                "options": [],
                "correct_answer": "",
                "explanation": "",
                "difficulty": "MEDIUM",
                "points": 1,
            },
        ),
    }

    def default_data(self) -> Dict[str, Any]:
        return PrepTest().to_aggregate()
