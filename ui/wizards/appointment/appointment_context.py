# -*- coding: utf-8 -*-
"""
Appointment Context - Aggregate of the booking wizard.
"""

from typing import Any, Dict

from models.appointment import AppointmentBooking
from ui.wizards.framework.wizard_context import WizardContext


class AppointmentContext(WizardContext):
    """Booking being prepared. Picking another date clears the chosen slot."""

    record_type = AppointmentBooking
    reset_on_change = {
        "scheduled_date": {"time_slot": ""},
    }

    def default_data(self) -> Dict[str, Any]:
        return AppointmentBooking().to_aggregate()
