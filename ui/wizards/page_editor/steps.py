# -*- coding: utf-8 -*-
"""
Page editor steps: content, then settings.
"""

from models.page import PAGE_TEMPLATES
from ui.wizards.framework.base_step import FieldSpec, StepDefinition

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

CONTENT_STEP = StepDefinition(
    id="content",
    label="Content",
    description="Title, address and body of the page.",
    fields=[
        FieldSpec("title", "Title", required=True, rules={"max_length": 200}),
        FieldSpec("slug", "Slug", required=True, placeholder="about-us",
                  rules={"pattern": SLUG_PATTERN}),
        FieldSpec("excerpt", "Excerpt", kind="multiline"),
        FieldSpec("content", "Content", kind="multiline", required=True),
    ],
)

SETTINGS_STEP = StepDefinition(
    id="settings",
    label="Settings",
    description="Template, publishing and SEO.",
    fields=[
        FieldSpec("template", "Template", kind="choice", required=True,
                  choices=[(t, t.title()) for t in PAGE_TEMPLATES]),
        FieldSpec("is_published", "Published", kind="bool"),
        FieldSpec("order", "Order", kind="int", rules={"min": 0}),
        FieldSpec("meta_title", "Meta Title", rules={"max_length": 60}),
        FieldSpec("meta_description", "Meta Description", kind="multiline",
                  rules={"max_length": 160}),
        FieldSpec("custom_css", "Custom CSS", kind="multiline"),
        FieldSpec("custom_js", "Custom JS", kind="multiline"),
    ],
)

PAGE_STEPS = [CONTENT_STEP, SETTINGS_STEP]
