# -*- coding: utf-8 -*-
"""
Test Builder Wizard Package.

Builds test-preparation exams (IELTS, TOEFL, ...) with sections and questions.
"""

from .prep_test_context import PrepTestContext
from .steps import TEST_STEPS
from .prep_test_wizard import TestBuilderWizard, create_test_controller

__all__ = [
    'PrepTestContext',
    'TEST_STEPS',
    'TestBuilderWizard',
    'create_test_controller'
]
