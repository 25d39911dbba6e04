# -*- coding: utf-8 -*-
"""
Appointment Booking Wizard.

Catalog endpoints:
    GET /api/appointment-types -> {success, appointmentTypes: [...]}
    GET /api/consultants       -> {success, consultants: [...], pagination}
Booking:
    POST /api/appointments     -> {success, message, data: {id, scheduledDate, ...}}
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QLabel, QWidget

from controllers.wizard_controller import WizardController
from models.appointment import TIME_SLOTS, AppointmentBooking
from services.error_mapper import is_auth_error, map_exception
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from ui.wizards.framework.base_step import StepDefinition
from ui.wizards.framework.base_wizard import BaseWizard
from utils.helpers import format_date
from utils.logger import get_logger
from .appointment_context import AppointmentContext
from .steps import MEETING_TYPE_LABELS, build_appointment_steps

logger = get_logger(__name__)

APPOINTMENTS_COLLECTION = "/api/appointments"
APPOINTMENT_TYPES_ENDPOINT = "/api/appointment-types"
CONSULTANTS_ENDPOINT = "/api/consultants"


class AppointmentController(WizardController):
    """
    Booking controller. Owns the catalogs the choices are built from.

    Signals:
        catalogs_failed(message): a catalog could not be loaded
    """

    catalogs_failed = pyqtSignal(str)

    def __init__(self, context, steps, sync, runner=None, parent=None):
        super().__init__(context, steps, sync, runner=runner, parent=parent)
        self.appointment_types: List[Dict[str, Any]] = []
        self.consultants: List[Dict[str, Any]] = []

    # ==================== Catalogs ====================

    def load_catalogs(self):
        """Fetch consultation types and consultants."""
        self._log_operation("load_catalogs")
        self.runner.submit(
            lambda: self.sync.api_client.get(APPOINTMENT_TYPES_ENDPOINT),
            lambda body: self._on_catalog("appointment_types", body, "appointmentTypes"),
            self._on_catalog_error
        )
        self.runner.submit(
            lambda: self.sync.api_client.get(CONSULTANTS_ENDPOINT),
            lambda body: self._on_catalog("consultants", body, "consultants"),
            self._on_catalog_error
        )

    def _on_catalog(self, attribute: str, body: Any, key: str):
        rows = body.get(key) if isinstance(body, dict) else None
        setattr(self, attribute, [row for row in rows or [] if isinstance(row, dict)])
        logger.info(f"Loaded {len(getattr(self, attribute))} {attribute}")
        self.options_changed.emit()

    def _on_catalog_error(self, error: Exception):
        logger.warning(f"Catalog request failed: {map_exception(error, context='load_catalogs')}")
        self._emit_error("load_catalogs", tr("appointment.load_failed"))
        if is_auth_error(error):
            self.login_required.emit()
        else:
            self.catalogs_failed.emit(tr("appointment.load_failed"))

    def field_options(self) -> Dict[str, list]:
        return {
            "type_id": [(str(t["id"]), self._type_label(t)) for t in self.appointment_types],
            "consultant_id": [(str(c["id"]), c.get("name") or str(c["id"])) for c in self.consultants],
            "time_slot": [(slot, slot) for slot in TIME_SLOTS],
        }

    @staticmethod
    def _type_label(appointment_type: Dict[str, Any]) -> str:
        name = appointment_type.get("name") or str(appointment_type["id"])
        price = appointment_type.get("price")
        if not price:
            return f"{name} (Free)"
        return f"{name} ({price} {appointment_type.get('currency') or 'USD'})"

    def find_type(self, type_id: str) -> Optional[Dict[str, Any]]:
        for appointment_type in self.appointment_types:
            if str(appointment_type.get("id")) == type_id:
                return appointment_type
        return None

    def find_consultant(self, consultant_id: str) -> Optional[Dict[str, Any]]:
        for consultant in self.consultants:
            if str(consultant.get("id")) == consultant_id:
                return consultant
        return None

    # ==================== Fields ====================

    def update_field(self, name: str, value: Any) -> Dict[str, Any]:
        """Choosing a consultation type also picks its meeting type."""
        changes = super().update_field(name, value)
        if name == "type_id":
            appointment_type = self.find_type(value) or {}
            changes.update(super().update_field(
                "meeting_type", appointment_type.get("meetingType") or "VIDEO"))
        return changes


def create_appointment_controller(api_client=None, runner=None,
                                  today: Callable[[], date] = date.today,
                                  parent=None) -> AppointmentController:
    sync = RemoteSync(APPOINTMENTS_COLLECTION, api_client=api_client, entity_key="data")
    return AppointmentController(AppointmentContext(), build_appointment_steps(today), sync,
                                 runner=runner, parent=parent)


class AppointmentWizard(BaseWizard):
    """Booking wizard. Loads the catalogs on open."""

    def __init__(self, controller: AppointmentController, parent: Optional[QWidget] = None):
        super().__init__(controller, parent)
        controller.catalogs_failed.connect(self._show_error)
        controller.load_catalogs()

    def get_wizard_title(self) -> str:
        return tr("wizard.appointment.title")

    def get_submit_button_text(self) -> str:
        return tr("wizard.appointment.submit")

    def create_step_extras(self, step: StepDefinition) -> Optional[QWidget]:
        if step.id != "review":
            return None
        self.summary_label = QLabel("")
        self.summary_label.setWordWrap(True)
        self.summary_label.setContentsMargins(20, 0, 20, 0)
        return self.summary_label

    def refresh_current(self):
        super().refresh_current()
        if self.controller.current_step.id == "review":
            self.summary_label.setText(self._summary())

    def _summary(self) -> str:
        c = self.controller
        booking = AppointmentBooking.from_aggregate(c.aggregate)
        appointment_type = c.find_type(booking.type_id) or {}
        consultant = c.find_consultant(booking.consultant_id) or {}
        lines = [
            f"Consultation: {appointment_type.get('name', '')}",
            f"Consultant: {consultant.get('name', '')}",
            f"Date: {format_date(booking.scheduled_date)}",
            f"Time: {booking.time_slot}",
            f"Meeting: {MEETING_TYPE_LABELS.get(booking.meeting_type, booking.meeting_type)}",
            f"Name: {booking.first_name} {booking.last_name}",
            f"Email: {booking.email}",
            f"Phone: {booking.phone}",
        ]
        return "\n".join(lines)
