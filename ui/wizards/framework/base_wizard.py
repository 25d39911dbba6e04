# -*- coding: utf-8 -*-
"""
Base Wizard - Shared wizard UI driven by a WizardController.

Provides unified wizard UI with:
- Header with title, progress and clickable step indicators
- Step container (one StepForm per step)
- Navigation buttons (Cancel, Previous, Next, Submit)
- Inline validation and submission errors

The widget holds no wizard state of its own: it forwards user input to the
controller and redraws from the controller's signals.
"""

from typing import Dict, List, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QDialog, QFrame, QHBoxLayout, QLabel, QProgressBar, QPushButton,
    QScrollArea, QStackedWidget, QVBoxLayout, QWidget
)

from app.config import Config
from services.exceptions import InvalidTransition
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from utils.logger import get_logger
from .base_step import StepDefinition, StepValidationResult
from .step_renderer import StepForm, render_step

logger = get_logger(__name__)


class BaseWizard(QWidget):
    """
    Base class for wizards.

    Subclasses may override:
    - get_wizard_title() / get_submit_button_text()
    - create_step_extras(step): extra widgets under a step's form
    - create_footer_actions(layout): extra footer buttons
    - on_cancel(): veto cancellation
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Entity returned by the server
    wizard_cancelled = pyqtSignal()
    login_required = pyqtSignal()

    def __init__(self, controller, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.forms: List[StepForm] = []
        self.indicator_buttons: List[QPushButton] = []
        self._validation: Dict[str, StepValidationResult] = {}

        self._setup_ui()
        self._connect_controller()
        self._on_step_changed(0, self.controller.current_index)

    @property
    def steps(self) -> List[StepDefinition]:
        return self.controller.steps

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return ""

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return tr("button.submit")

    def create_step_extras(self, step: StepDefinition) -> Optional[QWidget]:
        """Extra widgets shown under a step's fields (e.g. a test-connection button)."""
        return None

    def create_footer_actions(self, layout: QHBoxLayout):
        """Add extra buttons to the left side of the footer."""

    def on_cancel(self) -> bool:
        """
        Handle wizard cancellation.

        Returns:
            True if cancellation should proceed, False to prevent
        """
        return True

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(self._create_step_page(step))
        main_layout.addWidget(self.step_container, 1)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; padding: 6px 20px;")
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet("background-color: #f8f9fa;")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        indicators = QHBoxLayout()
        indicators.setSpacing(6)
        for index, step in enumerate(self.steps):
            button = QPushButton(f"{index + 1}. {step.label}")
            button.setCheckable(True)
            button.setFlat(True)
            button.setCursor(Qt.PointingHandCursor)
            button.clicked.connect(lambda _checked, i=index: self._on_indicator_clicked(i))
            self.indicator_buttons.append(button)
            indicators.addWidget(button)
        indicators.addStretch()
        layout.addLayout(indicators)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel(tr("wizard.progress", current=1, total=len(self.steps)))
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)
        layout.addLayout(progress_layout)

        return header

    def _create_step_page(self, step: StepDefinition) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)

        form = StepForm(step)
        form.field_edited.connect(self.controller.update_field)
        form.group_action.connect(self.controller.apply_group_action)
        self.forms.append(form)
        layout.addWidget(form)

        extras = self.create_step_extras(step)
        if extras is not None:
            layout.addWidget(extras)
        layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(page)
        return scroll

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setStyleSheet("background-color: #f8f9fa;")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = ActionButton(tr("button.cancel"), variant="secondary")
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        self.create_footer_actions(layout)
        layout.addStretch()

        self.btn_previous = ActionButton(tr("button.previous"), variant="secondary")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(tr("button.next"), variant="primary")
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        self.btn_submit = ActionButton(self.get_submit_button_text(), variant="primary", width=140)
        self.btn_submit.clicked.connect(self._handle_submit)
        layout.addWidget(self.btn_submit)

        return footer

    def _connect_controller(self):
        c = self.controller
        c.field_changed.connect(self._on_data_changed)
        c.group_changed.connect(self._on_data_changed)
        c.options_changed.connect(self.refresh_current)
        c.step_changed.connect(self._on_step_changed)
        c.validation_failed.connect(self._on_validation_failed)
        c.submission_status_changed.connect(self._on_status_changed)
        c.submission_succeeded.connect(self._on_submission_succeeded)
        c.submission_failed.connect(self._show_error)
        c.login_required.connect(self.login_required)

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.controller.go_previous()

    def _handle_next(self):
        self.controller.go_next()

    def _handle_submit(self):
        self._clear_error()
        self.controller.submit()

    def _handle_cancel(self):
        if self.on_cancel():
            self.wizard_cancelled.emit()
            self.close()

    def _on_indicator_clicked(self, index: int):
        try:
            self.controller.jump_to(index)
        except InvalidTransition as e:
            blocking = self.steps[e.blocking_index]
            self._show_error(tr("validation.step_blocked", step=blocking.label))
        self._update_indicators()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def refresh_current(self):
        """Redraw the active step from the aggregate."""
        index = self.controller.current_index
        step = self.steps[index]
        view = render_step(step, self.controller.aggregate,
                           self._validation.get(step.id),
                           self.controller.field_options())
        self.forms[index].refresh(view)

    def _on_data_changed(self, *args):
        step_id = self.steps[self.controller.current_index].id
        if step_id in self._validation:
            # Re-check so fixed fields lose their error flag
            result = self.controller.validate_current()
            if result.is_valid:
                self._validation.pop(step_id)
                self._clear_error()
            else:
                self._validation[step_id] = result
        self.refresh_current()

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        self._clear_error()
        self._update_progress()
        self._update_navigation_buttons()
        self.refresh_current()

    def _update_progress(self):
        current = self.controller.current_index + 1
        total = len(self.steps)
        self.progress_label.setText(tr("wizard.progress", current=current, total=total))
        self.progress_bar.setValue(int(self.controller.navigator.get_progress_percentage()))
        self._update_indicators()

    def _update_indicators(self):
        for index, button in enumerate(self.indicator_buttons):
            button.setChecked(index == self.controller.current_index)

    def _update_navigation_buttons(self):
        busy = self.controller.is_submitting
        is_last = self.controller.navigator.is_last_step()
        self.btn_previous.setEnabled(self.controller.navigator.can_go_previous() and not busy)
        self.btn_next.setVisible(not is_last)
        self.btn_submit.setVisible(is_last)
        self.btn_submit.setEnabled(not busy)
        self.btn_cancel.setEnabled(not busy)

    def _on_validation_failed(self, result: StepValidationResult):
        step_id = self.steps[self.controller.current_index].id
        self._validation[step_id] = result
        errors = "\n".join(f"• {error}" for error in result.errors)
        self._show_error(errors or tr("validation.fix_errors"))
        self.refresh_current()

    def _on_status_changed(self, status: str):
        if status == "submitting":
            self.btn_submit.setText(tr("wizard.submitting"))
        else:
            self.btn_submit.setText(self.get_submit_button_text())
        self._update_navigation_buttons()

    def _on_submission_succeeded(self, entity: dict):
        logger.info(f"{self.__class__.__name__} completed")
        self.wizard_completed.emit(entity)
        self.close()

    def _show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def _clear_error(self):
        self.error_label.clear()
        self.error_label.hide()


class WizardDialog(QDialog):
    """Hosts a wizard in a dialog: accepted on completion, rejected on cancel."""

    def __init__(self, wizard: BaseWizard, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.wizard = wizard
        self.result_entity: Optional[dict] = None
        self.setWindowTitle(wizard.get_wizard_title())
        self.setMinimumSize(820, 640)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(wizard)

        wizard.wizard_completed.connect(self._on_completed)
        wizard.wizard_cancelled.connect(self.reject)

    def _on_completed(self, entity: dict):
        self.result_entity = entity
        self.accept()


class PublishableWizard(BaseWizard):
    """
    Wizard with "Save Draft" next to the submit button.

    Needs a controller offering save_draft() and publish().
    """

    def get_submit_button_text(self) -> str:
        return tr("button.publish")

    def create_footer_actions(self, layout: QHBoxLayout):
        self.btn_save_draft = ActionButton(tr("button.save_draft"), variant="outline", width=120)
        self.btn_save_draft.clicked.connect(self._handle_save_draft)
        layout.addWidget(self.btn_save_draft)

    def _handle_save_draft(self):
        self._clear_error()
        self.controller.save_draft()

    def _handle_submit(self):
        self._clear_error()
        self.controller.publish()

    def _update_navigation_buttons(self):
        super()._update_navigation_buttons()
        self.btn_save_draft.setEnabled(not self.controller.is_submitting)
