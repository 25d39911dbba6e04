# -*- coding: utf-8 -*-
"""
BnOverseas Data Models
"""

from .page import Page
from .course import Course, CourseModule, CourseLesson
from .prep_test import PrepTest, TestSection, TestQuestion
from .setup import SetupConfig
from .appointment import AppointmentBooking

__all__ = [
    "Page",
    "Course",
    "CourseModule",
    "CourseLesson",
    "PrepTest",
    "TestSection",
    "TestQuestion",
    "SetupConfig",
    "AppointmentBooking",
]
