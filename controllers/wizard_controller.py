# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
Drives a multi-step wizard: field updates on one aggregate, gated
navigation and a single terminal submission through RemoteSync.

Remote failures never raise; they become a FAILED status plus signals.
The one synchronous error a caller sees is InvalidTransition from jump_to.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController
from services.error_mapper import is_auth_error, map_exception
from services.remote_sync import RemoteSync, SyncResult
from ui.wizards.framework.base_step import StepDefinition, StepValidationResult
from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.framework.wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionStatus(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class WizardController(BaseController):
    """
    Controller for one wizard instance.

    Signals:
        field_changed(name, value): emitted for every written key, derived ones included
        group_changed(field_name): a group or item was added, edited or removed
        options_changed(): choices loaded at runtime changed (see field_options)
        step_changed(old_index, new_index)
        validation_failed(StepValidationResult)
        submission_status_changed(status value)
        submission_succeeded(entity)
        submission_failed(message)
        login_required(): the server asked for a new sign-in
    """

    field_changed = pyqtSignal(str, object)
    group_changed = pyqtSignal(str)
    options_changed = pyqtSignal()
    step_changed = pyqtSignal(int, int)
    validation_failed = pyqtSignal(object)
    submission_status_changed = pyqtSignal(str)
    submission_succeeded = pyqtSignal(dict)
    submission_failed = pyqtSignal(str)
    login_required = pyqtSignal()

    def __init__(self, context: WizardContext, steps: List[StepDefinition],
                 sync: RemoteSync, runner=None, parent=None):
        super().__init__(runner=runner, parent=parent)
        self.context = context
        self.sync = sync
        self.navigator = StepNavigator(context, steps, parent=self)
        self.navigator.step_changed.connect(self.step_changed)
        self.navigator.validation_failed.connect(self.validation_failed)

        self.status = SubmissionStatus.IDLE
        self.failure_reason = ""

    # ==================== State ====================

    @property
    def steps(self) -> List[StepDefinition]:
        return self.navigator.steps

    @property
    def current_index(self) -> int:
        return self.navigator.current_index

    @property
    def current_step(self) -> StepDefinition:
        return self.navigator.get_current_step()

    @property
    def aggregate(self) -> Dict[str, Any]:
        return self.context.data

    @property
    def is_submitting(self) -> bool:
        return self.status == SubmissionStatus.SUBMITTING

    # ==================== Fields ====================

    def field_options(self) -> Dict[str, list]:
        """Choices loaded at runtime, by field name. Override in subclasses."""
        return {}

    def update_field(self, name: str, value: Any) -> Dict[str, Any]:
        """Merge one value (and anything derived from it) into the aggregate."""
        changes = self.context.update_field(name, value)
        for key, new_value in changes.items():
            self.field_changed.emit(key, new_value)
        return changes

    def append_list_value(self, name: str, value: Any = "") -> int:
        index = self.context.append_list_value(name, value)
        self.field_changed.emit(name, self.context.data[name])
        return index

    def set_list_value(self, name: str, index: int, value: Any):
        self.context.set_list_value(name, index, value)
        self.field_changed.emit(name, self.context.data[name])

    def remove_list_value(self, name: str, index: int):
        self.context.remove_list_value(name, index)
        self.field_changed.emit(name, self.context.data[name])

    # ==================== Groups ====================

    def add_group(self, field_name: str, values: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        group = self.context.add_group(field_name, values)
        self.group_changed.emit(field_name)
        return group

    def update_group(self, field_name: str, group_id: str, **values):
        self.context.update_group(field_name, group_id, **values)
        self.group_changed.emit(field_name)

    def remove_group(self, field_name: str, group_id: str):
        self.context.remove_group(field_name, group_id)
        self.group_changed.emit(field_name)

    def add_item(self, field_name: str, group_id: str,
                 values: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        item = self.context.add_item(field_name, group_id, values)
        self.group_changed.emit(field_name)
        return item

    def update_item(self, field_name: str, group_id: str, item_id: str, **values):
        self.context.update_item(field_name, group_id, item_id, **values)
        self.group_changed.emit(field_name)

    def remove_item(self, field_name: str, group_id: str, item_id: str):
        self.context.remove_item(field_name, group_id, item_id)
        self.group_changed.emit(field_name)

    def apply_group_action(self, field_name: str, action: str, args: Dict[str, Any]):
        """Dispatch an edit requested by a GroupListEditor."""
        if action == "add_group":
            self.add_group(field_name)
        elif action == "remove_group":
            self.remove_group(field_name, args["group_id"])
        elif action == "update_group":
            self.update_group(field_name, args["group_id"], **{args["name"]: args["value"]})
        elif action == "add_item":
            self.add_item(field_name, args["group_id"])
        elif action == "remove_item":
            self.remove_item(field_name, args["group_id"], args["item_id"])
        elif action == "update_item":
            self.update_item(field_name, args["group_id"], args["item_id"],
                             **{args["name"]: args["value"]})
        else:
            raise ValueError(f"Unknown group action '{action}'")

    # ==================== Navigation ====================

    def go_next(self) -> StepValidationResult:
        return self.navigator.go_next()

    def go_previous(self) -> bool:
        return self.navigator.go_previous()

    def jump_to(self, index: int):
        """Jump to a step. Raises InvalidTransition when an earlier step is invalid."""
        self.navigator.jump_to(index)

    def validate_current(self) -> StepValidationResult:
        return self.navigator.validate_current()

    # ==================== Submission ====================

    def build_payload(self) -> Dict[str, Any]:
        return self.context.to_payload()

    def submit(self) -> bool:
        """
        Send the aggregate to the server.

        Calls made while a submission is in flight join it instead of sending
        a second request. Invalid steps block submission locally and the
        wizard moves to the first of them.

        Returns:
            True if a submission is in flight (or already finished inline)
        """
        if self.status == SubmissionStatus.SUBMITTING:
            logger.debug("Submission already in flight; joining it")
            return True

        invalid_index, result = self.navigator.first_invalid_step()
        if invalid_index is not None:
            logger.warning(f"Submission blocked by step {invalid_index}: {result.errors}")
            if invalid_index != self.current_index:
                self.navigator.jump_to(invalid_index)
            self.validation_failed.emit(result)
            return False

        payload = self.build_payload()
        entity_id = self.context.entity_id
        self._log_operation("submit", entity_id=entity_id, collection=self.sync.collection)

        self.failure_reason = ""
        self._set_status(SubmissionStatus.SUBMITTING)
        self._emit_started("submit")
        self.runner.submit(
            lambda: self.sync.save(entity_id, payload),
            self._on_submit_finished,
            self._on_submit_error
        )
        return True

    def _on_submit_finished(self, result: SyncResult):
        if result.ok:
            self.context.mark_persisted(result.entity)
            self._set_status(SubmissionStatus.SUCCEEDED)
            self._emit_completed("submit", True)
            self.submission_succeeded.emit(result.entity or {})
            return

        self._fail(result.message, auth_required=result.auth_required)

    def _on_submit_error(self, error: Exception):
        self._fail(map_exception(error, context="submit"), auth_required=is_auth_error(error))

    def _fail(self, message: str, auth_required: bool = False):
        self.failure_reason = message
        self._set_status(SubmissionStatus.FAILED)
        self._emit_error("submit", message)
        # An expired session goes to the login prompt instead of the inline error
        if auth_required:
            self.login_required.emit()
        else:
            self.submission_failed.emit(message)

    def _set_status(self, status: SubmissionStatus):
        if self.status != status:
            self.status = status
            logger.info(f"{self.__class__.__name__} submission {status.value}")
            self.submission_status_changed.emit(status.value)


class PublishableWizardController(WizardController):
    """Wizard whose entity is saved either as a draft or published."""

    publish_field = "is_published"

    def save_draft(self) -> bool:
        return self._submit_as(published=False)

    def publish(self) -> bool:
        return self._submit_as(published=True)

    def _submit_as(self, published: bool) -> bool:
        if not self.is_submitting:
            self.update_field(self.publish_field, published)
        return self.submit()
