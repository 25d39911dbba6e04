# -*- coding: utf-8 -*-
"""
Course builder steps.

Module and lesson titles are checked by a custom validator so the message
names the module the lesson belongs to.
"""

from typing import Any, Dict

from models.course import COURSE_LEVELS, LESSON_TYPES
from models.record import optional_number
from services.translation_manager import tr
from ui.wizards.framework.base_step import FieldSpec, StepDefinition, StepValidationResult

COURSE_CATEGORIES = [
    ("test-prep", "Test Preparation"),
    ("language", "Language Learning"),
    ("academic", "Academic Skills"),
    ("study-abroad", "Study Abroad"),
    ("career", "Career Development"),
]
CURRENCIES = ("USD", "EUR", "GBP", "INR")


def validate_curriculum(data: Dict[str, Any], result: StepValidationResult):
    for module_no, module in enumerate(data.get("modules") or [], start=1):
        module_title = (module.get("title") or "").strip()
        if not module_title:
            result.add_error(tr("course.module_title_required", index=module_no), "modules")
        for lesson_no, lesson in enumerate(module.get("lessons") or [], start=1):
            if not (lesson.get("title") or "").strip():
                result.add_error(
                    tr("course.lesson_title_required", index=lesson_no,
                       module=module_title or f"Module {module_no}"),
                    "modules"
                )


def validate_pricing(data: Dict[str, Any], result: StepValidationResult):
    # Malformed numbers were already reported by the field checks
    if "price" in result.fields or "original_price" in result.fields:
        return
    price = optional_number(data.get("price")) or 0
    original_price = optional_number(data.get("original_price"))
    if original_price is not None and original_price < price:
        result.add_error(tr("course.original_price_lower"), "original_price")


BASIC_STEP = StepDefinition(
    id="basic",
    label="Basic Info",
    description="Title, category and instructor of the course.",
    fields=[
        FieldSpec("title", "Course Title", required=True),
        FieldSpec("slug", "Slug", required=True, placeholder="ielts-masterclass",
                  rules={"pattern": r"^[a-z0-9]+(?:-[a-z0-9]+)*$"}),
        FieldSpec("category", "Category", kind="choice", required=True, choices=COURSE_CATEGORIES),
        FieldSpec("level", "Difficulty Level", kind="choice", required=True,
                  choices=[(level, level.title()) for level in COURSE_LEVELS]),
        FieldSpec("language", "Language"),
        FieldSpec("instructor_name", "Instructor Name", required=True),
        FieldSpec("short_description", "Short Description", kind="multiline", required=True,
                  rules={"max_length": 300}),
        FieldSpec("tags", "Tags (one per line)", kind="list"),
    ],
)

CONTENT_STEP = StepDefinition(
    id="content",
    label="Content",
    fields=[
        FieldSpec("description", "Full Description", kind="multiline", required=True),
        FieldSpec("requirements", "Requirements (one per line)", kind="list"),
        FieldSpec("learning_objectives", "What students will learn (one per line)", kind="list"),
        FieldSpec("thumbnail_url", "Thumbnail URL"),
        FieldSpec("video_url", "Preview Video URL"),
        FieldSpec("duration", "Duration (hours)", kind="float", rules={"min": 0}),
    ],
)

CURRICULUM_STEP = StepDefinition(
    id="curriculum",
    label="Curriculum",
    description="Modules and the lessons inside them.",
    fields=[
        FieldSpec(
            "modules", "Modules", kind="groups",
            group_label="Module", item_label="Lesson", items_key="lessons",
            group_fields=[
                FieldSpec("title", "Module Title"),
                FieldSpec("description", "Description", kind="multiline"),
            ],
            item_fields=[
                FieldSpec("title", "Lesson Title"),
                FieldSpec("type", "Type", kind="choice",
                          choices=[(t, t.title()) for t in LESSON_TYPES]),
                FieldSpec("content_url", "Content URL"),
                FieldSpec("duration", "Duration (minutes)", kind="int", rules={"min": 0}),
            ],
        ),
    ],
    validator=validate_curriculum,
)

PRICING_STEP = StepDefinition(
    id="pricing",
    label="Pricing",
    fields=[
        FieldSpec("price", "Price", kind="float", rules={"min": 0}),
        FieldSpec("original_price", "Original Price", kind="float", rules={"min": 0}),
        FieldSpec("currency", "Currency", kind="choice", required=True, choices=CURRENCIES),
        FieldSpec("max_students", "Max Students", kind="int", rules={"min": 0}),
        FieldSpec("is_featured", "Featured course", kind="bool"),
    ],
    validator=validate_pricing,
)

COURSE_STEPS = [BASIC_STEP, CONTENT_STEP, CURRICULUM_STEP, PRICING_STEP]
