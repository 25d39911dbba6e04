# -*- coding: utf-8 -*-
"""
Course Builder Wizard Package.

This package contains:
- CourseContext: Wizard context for courses (modules and lessons)
- COURSE_STEPS: Basic info, content, curriculum and pricing steps
- CourseBuilderController: Adds save_draft() / publish()
- CourseBuilderWizard: Main wizard class
"""

from .course_context import CourseContext
from .steps import COURSE_STEPS
from .course_wizard import (
    CourseBuilderController,
    CourseBuilderWizard,
    create_course_controller,
)

__all__ = [
    'CourseContext',
    'COURSE_STEPS',
    'CourseBuilderController',
    'CourseBuilderWizard',
    'create_course_controller'
]
