# -*- coding: utf-8 -*-
"""
Login dialog - signs in against the admin API.

Shown at start-up and whenever a request reports the session as expired.
"""

from typing import Any

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QDialog, QFormLayout, QLabel, QLineEdit, QVBoxLayout

from app.config import Config
from services.error_mapper import is_auth_error, map_exception
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from utils.helpers import is_valid_email
from utils.logger import get_logger

logger = get_logger(__name__)


class LoginDialog(QDialog):
    """Email/password sign in. Accepted once the server takes the credentials."""

    login_successful = pyqtSignal(object)

    def __init__(self, api_client=None, runner=None, parent=None):
        super().__init__(parent)
        self._api_client = api_client
        self._runner = runner
        self.user = None
        self.setWindowTitle(tr("login.title"))
        self.setModal(True)
        self.setMinimumWidth(380)
        self._setup_ui()

    @property
    def api_client(self):
        if self._api_client is None:
            from services.api_client import get_api_client
            self._api_client = get_api_client()
        return self._api_client

    @property
    def runner(self):
        if self._runner is None:
            from services.request_runner import get_request_runner
            self._runner = get_request_runner()
        return self._runner

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(Config.APP_NAME)
        title.setStyleSheet(f"font-size: 15pt; font-weight: 600; color: {Config.PRIMARY_DARK};")
        layout.addWidget(title)

        form = QFormLayout()
        self.email_input = QLineEdit()
        self.email_input.textEdited.connect(self._hide_error)
        form.addRow(tr("login.email"), self.email_input)

        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.textEdited.connect(self._hide_error)
        self.password_input.returnPressed.connect(self._on_login)
        form.addRow(tr("login.password"), self.password_input)
        layout.addLayout(form)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.login_btn = ActionButton(tr("button.sign_in"), variant="primary")
        self.login_btn.clicked.connect(self._on_login)
        layout.addWidget(self.login_btn)

    def _on_login(self):
        """Handle login attempt"""
        email = self.email_input.text().strip()
        password = self.password_input.text()

        if not email or not password:
            self._show_error(tr("validation.required", field=tr("login.email")) if not email
                             else tr("validation.required", field=tr("login.password")))
            return
        if not is_valid_email(email):
            self._show_error(tr("validation.email", field=tr("login.email")))
            return

        self.login_btn.setEnabled(False)
        self.runner.submit(
            lambda: self.api_client.login(email, password),
            lambda body: self._on_login_succeeded(email, body),
            self._on_login_failed
        )

    def _on_login_succeeded(self, email: str, body: Any):
        logger.info(f"Login successful: {email}")
        self.login_btn.setEnabled(True)
        self.user = body.get("user", body) if isinstance(body, dict) else {"email": email}
        self.password_input.clear()
        self.login_successful.emit(self.user)
        self.accept()

    def _on_login_failed(self, error: Exception):
        logger.warning(f"Login failed: {error}")
        self.login_btn.setEnabled(True)
        if is_auth_error(error):
            self._show_error(tr("error.auth.login_failed"))
        else:
            self._show_error(map_exception(error, context="login"))

    def _show_error(self, message: str):
        """Show error message"""
        self.error_label.setText(message)
        self.error_label.show()

    def _hide_error(self):
        if self.error_label.isVisible():
            self.error_label.hide()
