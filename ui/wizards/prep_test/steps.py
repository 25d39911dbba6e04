# -*- coding: utf-8 -*-
"""
Test builder steps: basic info, sections, settings and SEO.
"""

from typing import Any, Dict

from models.prep_test import QUESTION_DIFFICULTIES, QUESTION_TYPES, TEST_DIFFICULTIES, TEST_TYPES
from models.record import clean_strings, optional_number
from services.translation_manager import tr
from ui.wizards.framework.base_step import FieldSpec, StepDefinition, StepValidationResult


def validate_sections(data: Dict[str, Any], result: StepValidationResult):
    """Sections need a name; questions need text, and MCQs need valid options."""
    for section_no, section in enumerate(data.get("sections") or [], start=1):
        name = (section.get("section_name") or "").strip()
        if not name:
            result.add_error(tr("test.section_name_required", index=section_no), "sections")
        label = name or f"Section {section_no}"

        for question_no, question in enumerate(section.get("questions") or [], start=1):
            if not (question.get("question_text") or "").strip():
                result.add_error(tr("test.question_text_required", index=question_no,
                                    section=label), "sections")
            if question.get("question_type") != "MCQ":
                continue
            options = clean_strings(question.get("options"))
            if len(options) < 2:
                result.add_error(tr("test.mcq_needs_options", index=question_no,
                                    section=label), "sections")
            elif (question.get("correct_answer") or "").strip() not in options:
                result.add_error(tr("test.mcq_bad_answer", index=question_no,
                                    section=label), "sections")


def validate_settings(data: Dict[str, Any], result: StepValidationResult):
    if "price" in result.fields:
        return
    if not data.get("is_free") and not (optional_number(data.get("price")) or 0) > 0:
        result.add_error(tr("test.price_required"), "price")


BASIC_STEP = StepDefinition(
    id="basic",
    label="Basic Info",
    fields=[
        FieldSpec("title", "Test Title", required=True),
        FieldSpec("description", "Description", kind="multiline", required=True),
        FieldSpec("type", "Test Type", kind="choice", required=True, choices=TEST_TYPES),
        FieldSpec("difficulty_level", "Difficulty", kind="choice", required=True,
                  choices=[(d, d.title()) for d in TEST_DIFFICULTIES]),
        FieldSpec("instructions", "Instructions", kind="multiline"),
    ],
)

SECTIONS_STEP = StepDefinition(
    id="sections",
    label="Test Sections",
    description="Sections (Listening, Reading, ...) and their questions.",
    fields=[
        FieldSpec(
            "sections", "Sections", kind="groups",
            group_label="Section", item_label="Question", items_key="questions",
            group_fields=[
                FieldSpec("section_name", "Section Name"),
                FieldSpec("description", "Description", kind="multiline"),
                FieldSpec("question_count", "Questions", kind="int", rules={"min": 0}),
                FieldSpec("time_limit", "Time Limit (minutes)", kind="int", rules={"min": 0}),
                FieldSpec("instructions", "Instructions", kind="multiline"),
            ],
            item_fields=[
                FieldSpec("question_text", "Question", kind="multiline"),
                FieldSpec("question_type", "Type", kind="choice", choices=QUESTION_TYPES),
                FieldSpec("options", "Options (one per line)", kind="list"),
                FieldSpec("correct_answer", "Correct Answer"),
                FieldSpec("explanation", "Explanation", kind="multiline"),
                FieldSpec("difficulty", "Difficulty", kind="choice",
                          choices=[(d, d.title()) for d in QUESTION_DIFFICULTIES]),
                FieldSpec("points", "Points", kind="int", rules={"min": 0}),
            ],
        ),
    ],
    validator=validate_sections,
)

SETTINGS_STEP = StepDefinition(
    id="settings",
    label="Settings",
    fields=[
        FieldSpec("duration", "Duration (minutes)", kind="int", required=True, rules={"min": 1}),
        FieldSpec("total_questions", "Total Questions", kind="int", rules={"min": 0}),
        FieldSpec("passing_score", "Passing Score (%)", kind="int", rules={"min": 0, "max": 100}),
        FieldSpec("is_free", "Free test", kind="bool"),
        FieldSpec("price", "Price", kind="float", rules={"min": 0}),
    ],
    validator=validate_settings,
)

SEO_STEP = StepDefinition(
    id="seo",
    label="SEO & Meta",
    fields=[
        FieldSpec("meta_title", "Meta Title", rules={"max_length": 60}),
        FieldSpec("meta_description", "Meta Description", kind="multiline",
                  rules={"max_length": 160}),
        FieldSpec("meta_keywords", "Meta Keywords"),
    ],
)

TEST_STEPS = [BASIC_STEP, SECTIONS_STEP, SETTINGS_STEP, SEO_STEP]
