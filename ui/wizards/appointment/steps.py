# -*- coding: utf-8 -*-
"""
Booking steps.

The schedule check depends on the current date, so the steps are built per
wizard with an injectable clock.
"""

from datetime import date
from typing import Any, Callable, Dict, List

from models.appointment import MEETING_TYPES, TIME_SLOTS
from services.translation_manager import tr
from ui.wizards.framework.base_step import FieldSpec, StepDefinition, StepValidationResult

SUNDAY = 6

MEETING_TYPE_LABELS = {
    "VIDEO": "Video Call",
    "PHONE": "Phone Call",
    "IN_PERSON": "In Person",
    "CHAT": "Chat",
}


def schedule_validator(today: Callable[[], date]):
    def validate(data: Dict[str, Any], result: StepValidationResult):
        scheduled = data.get("scheduled_date")
        if isinstance(scheduled, date):
            if scheduled < today():
                result.add_error(tr("appointment.date_in_past"), "scheduled_date")
            elif scheduled.weekday() == SUNDAY:
                result.add_error(tr("appointment.date_sunday"), "scheduled_date")
        slot = data.get("time_slot")
        if slot and slot not in TIME_SLOTS:
            result.add_error(tr("appointment.invalid_slot"), "time_slot")
    return validate


def validate_terms(data: Dict[str, Any], result: StepValidationResult):
    if not data.get("agree_to_terms"):
        result.add_error(tr("appointment.terms_required"), "agree_to_terms")


def build_appointment_steps(today: Callable[[], date] = date.today) -> List[StepDefinition]:
    """
    Build the booking steps.

    Consultation types, consultants and time slots are offered at runtime
    through the controller's field_options().
    """
    return [
        StepDefinition(
            id="type",
            label="Consultation Type",
            fields=[
                FieldSpec("type_id", "Consultation Type", kind="choice", required=True),
            ],
        ),
        StepDefinition(
            id="schedule",
            label="Consultant & Time",
            description="Consultations run Monday to Saturday.",
            fields=[
                FieldSpec("consultant_id", "Consultant", kind="choice", required=True),
                FieldSpec("scheduled_date", "Date", kind="date", required=True),
                FieldSpec("time_slot", "Time", kind="choice", required=True),
                FieldSpec("meeting_type", "Meeting Type", kind="choice", required=True,
                          choices=[(m, MEETING_TYPE_LABELS[m]) for m in MEETING_TYPES]),
            ],
            validator=schedule_validator(today),
        ),
        StepDefinition(
            id="contact",
            label="Your Details",
            fields=[
                FieldSpec("first_name", "First Name", required=True),
                FieldSpec("last_name", "Last Name", required=True),
                FieldSpec("email", "Email", required=True, rules={"email": True}),
                FieldSpec("phone", "Phone", required=True, rules={"min_length": 7}),
                FieldSpec("notes", "What would you like to discuss?", kind="multiline"),
                FieldSpec("special_requests", "Special Requests", kind="multiline"),
            ],
        ),
        StepDefinition(
            id="review",
            label="Review",
            fields=[
                FieldSpec("agree_to_terms", "Terms", kind="bool",
                          placeholder="I agree to the terms and conditions"),
            ],
            validator=validate_terms,
        ),
    ]
