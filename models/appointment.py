# -*- coding: utf-8 -*-
"""
Consultation appointment booking model.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from models.record import Record
from utils.helpers import parse_time_slot

MEETING_TYPES = ("VIDEO", "PHONE", "IN_PERSON", "CHAT")

# Bookable slots: mornings 9:00-11:30 and afternoons 2:00-7:30, every 30 minutes
TIME_SLOTS = tuple(
    [f"{h}:{m} AM" for h in (9, 10, 11) for m in ("00", "30")]
    + [f"{h}:{m} PM" for h in (2, 3, 4, 5, 6, 7) for m in ("00", "30")]
)


@dataclass
class AppointmentBooking(Record):
    """
    A consultation request.

    Required: type_id, consultant_id, scheduled_date, time_slot,
    first_name, last_name, email, phone, agree_to_terms.
    """

    type_id: str = ""
    consultant_id: str = ""
    scheduled_date: Optional[date] = None
    time_slot: str = ""
    meeting_type: str = "VIDEO"
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    notes: str = ""
    special_requests: str = ""
    agree_to_terms: bool = False

    @property
    def scheduled_time(self) -> str:
        """24-hour HH:MM of the chosen slot."""
        return parse_time_slot(self.time_slot)

    def to_api_payload(self) -> Dict[str, Any]:
        return {
            "typeId": self.type_id,
            "consultantId": self.consultant_id,
            "scheduledDate": self.scheduled_date.isoformat() if self.scheduled_date else None,
            "scheduledTime": self.scheduled_time,
            "meetingType": self.meeting_type or "VIDEO",
            "notes": self.notes,
            "specialRequests": self.special_requests,
            "firstName": self.first_name.strip(),
            "lastName": self.last_name.strip(),
            "email": self.email.strip(),
            "phone": self.phone.strip(),
        }
