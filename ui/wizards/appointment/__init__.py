# -*- coding: utf-8 -*-
"""
Appointment Booking Wizard Package.

Books a consultation: type, consultant and time, contact details, review.
"""

from .appointment_context import AppointmentContext
from .steps import build_appointment_steps
from .appointment_wizard import (
    AppointmentController,
    AppointmentWizard,
    create_appointment_controller,
)

__all__ = [
    'AppointmentContext',
    'build_appointment_steps',
    'AppointmentController',
    'AppointmentWizard',
    'create_appointment_controller'
]
