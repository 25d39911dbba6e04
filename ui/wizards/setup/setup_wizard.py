# -*- coding: utf-8 -*-
"""
Setup Wizard - first-run configuration.

Besides the usual steps the wizard talks to three setup endpoints:
    GET  /api/setup/check-requirements -> {check: bool | version string}
    POST /api/setup/test-database      -> {success, message | error}
    POST /api/setup/complete           -> {success, message, adminUser}
"""

from typing import Any, Dict, Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from app.config import Config
from controllers.wizard_controller import WizardController
from models.setup import REQUIREMENT_IGNORED_KEYS, REQUIREMENT_VERSION_KEYS
from services.error_mapper import is_auth_error, map_exception
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.wizards.framework.base_step import StepDefinition
from ui.wizards.framework.base_wizard import BaseWizard
from utils.helpers import generate_secure_key
from utils.logger import get_logger
from .setup_context import SetupContext
from .steps import SETUP_STEPS

logger = get_logger(__name__)

COMPLETE_ENDPOINT = "/api/setup/complete"
REQUIREMENTS_ENDPOINT = "/api/setup/check-requirements"
TEST_DATABASE_ENDPOINT = "/api/setup/test-database"

# Generated key length per field
SECRET_LENGTHS = {
    "security_jwt_secret": 64,
    "security_encryption_key": 32,
}


class SetupController(WizardController):
    """
    Setup wizard controller.

    Signals:
        requirements_checked(report): check-requirements answered
        connection_tested(ok, message): database test finished
        action_failed(message): a helper request failed
    """

    requirements_checked = pyqtSignal(dict)
    connection_tested = pyqtSignal(bool, str)
    action_failed = pyqtSignal(str)

    @property
    def api_client(self):
        return self.sync.api_client

    # ==================== Requirements ====================

    def check_requirements(self):
        """Ask the server for its requirement report."""
        self._log_operation("check_requirements")
        self.runner.submit(
            lambda: self.api_client.get(REQUIREMENTS_ENDPOINT),
            self._on_requirements,
            lambda error: self._on_action_error("check_requirements", error)
        )

    def _on_requirements(self, report: Any):
        report = report if isinstance(report, dict) else {}
        self.update_field("system_check", report)
        self.requirements_checked.emit(report)

    # ==================== Database ====================

    def test_database_connection(self):
        """Test the entered database URL; only a success marks it tested."""
        url = (self.aggregate.get("database_url") or "").strip()
        if not url:
            self.connection_tested.emit(False, tr("validation.required", field="Database URL"))
            return

        self._log_operation("test_database_connection")
        self.runner.submit(
            lambda: self.api_client.post(TEST_DATABASE_ENDPOINT, json_data={"url": url}),
            lambda body: self._on_database_tested(url, body),
            self._on_database_error
        )

    def _on_database_tested(self, url: str, body: Any):
        if (self.aggregate.get("database_url") or "").strip() != url:
            logger.debug("Database URL changed during the connection test; result ignored")
            return

        body = body if isinstance(body, dict) else {}
        if body.get("success"):
            self.update_field("database_tested", True)
            self.connection_tested.emit(True, body.get("message") or tr("setup.database_ok"))
        else:
            self.update_field("database_tested", False)
            self.connection_tested.emit(False, body.get("error") or tr("setup.database_failed"))

    def _on_database_error(self, error: Exception):
        self.update_field("database_tested", False)
        message = map_exception(error, context="test_database_connection")
        if is_auth_error(error):
            self.login_required.emit()
        else:
            self.connection_tested.emit(False, message)

    # ==================== Security ====================

    def generate_secret(self, field_name: str) -> str:
        """Fill a security key field with a random alphanumeric key."""
        if field_name not in SECRET_LENGTHS:
            raise ValueError(f"'{field_name}' is not a generated secret")
        key = generate_secure_key(SECRET_LENGTHS[field_name])
        self.update_field(field_name, key)
        return key

    def _on_action_error(self, operation: str, error: Exception):
        message = map_exception(error, context=operation)
        self._emit_error(operation, message)
        if is_auth_error(error):
            self.login_required.emit()
        else:
            self.action_failed.emit(message)


def create_setup_controller(api_client=None, runner=None, parent=None) -> SetupController:
    sync = RemoteSync(COMPLETE_ENDPOINT, api_client=api_client)
    return SetupController(SetupContext(), SETUP_STEPS, sync, runner=runner, parent=parent)


class SetupWizard(BaseWizard):
    """Setup wizard: checks requirements on open."""

    def __init__(self, controller: SetupController, parent: Optional[QWidget] = None):
        super().__init__(controller, parent)
        controller.requirements_checked.connect(self._show_requirements)
        controller.connection_tested.connect(self._show_connection_result)
        controller.action_failed.connect(self._show_error)
        controller.check_requirements()

    def get_wizard_title(self) -> str:
        return tr("wizard.setup.title")

    def get_submit_button_text(self) -> str:
        return tr("wizard.setup.submit")

    def create_step_extras(self, step: StepDefinition) -> Optional[QWidget]:
        if step.id == "requirements":
            return self._create_requirements_panel()
        if step.id == "database":
            return self._create_database_panel()
        if step.id == "security":
            return self._create_security_panel()
        return None

    def _create_requirements_panel(self) -> QWidget:
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(20, 0, 20, 0)

        self.requirements_label = QLabel(tr("setup.requirements_unknown"))
        self.requirements_label.setWordWrap(True)
        layout.addWidget(self.requirements_label)

        btn_recheck = ActionButton(tr("button.check_requirements"), variant="outline")
        btn_recheck.clicked.connect(self.controller.check_requirements)
        layout.addWidget(btn_recheck)
        return panel

    def _create_database_panel(self) -> QWidget:
        panel = QWidget()
        layout = QHBoxLayout(panel)
        layout.setContentsMargins(20, 0, 20, 0)

        self.btn_test_connection = ActionButton(tr("button.test_connection"), variant="outline", width=220)
        self.btn_test_connection.clicked.connect(self.controller.test_database_connection)
        layout.addWidget(self.btn_test_connection)

        self.connection_label = QLabel("")
        self.connection_label.setWordWrap(True)
        layout.addWidget(self.connection_label, 1)
        return panel

    def _create_security_panel(self) -> QWidget:
        panel = QWidget()
        layout = QHBoxLayout(panel)
        layout.setContentsMargins(20, 0, 20, 0)

        for field_name, label in (("security_jwt_secret", "JWT Secret"),
                                  ("security_encryption_key", "Encryption Key")):
            button = ActionButton(f"{tr('button.generate')} {label}", variant="outline", width=200)
            button.clicked.connect(lambda _checked, name=field_name: self.controller.generate_secret(name))
            layout.addWidget(button)
        layout.addStretch()
        return panel

    def _show_requirements(self, report: Dict[str, Any]):
        lines = []
        for name, value in report.items():
            if name in REQUIREMENT_IGNORED_KEYS:
                continue
            if name in REQUIREMENT_VERSION_KEYS:
                lines.append(f"{name}: {value}")
            else:
                lines.append(f"{'✓' if value is not False else '✗'} {name}")
        self.requirements_label.setText("\n".join(lines) or tr("setup.requirements_unknown"))

    def _show_connection_result(self, ok: bool, message: str):
        color = Config.SUCCESS_COLOR if ok else Config.ERROR_COLOR
        self.connection_label.setStyleSheet(f"color: {color};")
        self.connection_label.setText(message)
