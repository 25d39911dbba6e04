# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous) with a validation gate on next
- Direct jumps from the step indicator, guarded by earlier steps
- Progress tracking
"""

from typing import List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import StepDefinition, StepValidationResult
from .wizard_context import WizardContext
from services.exceptions import InvalidTransition
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step
    - Validate before moving forward
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(object)  # StepValidationResult

    def __init__(self, context: WizardContext, steps: List[StepDefinition], parent=None):
        super().__init__(parent)
        if not steps:
            raise ValueError("A wizard needs at least one step")
        self.context = context
        self.steps = steps
        self.current_index = context.current_step_index

    def get_current_step(self) -> StepDefinition:
        """Get the current step."""
        return self.steps[self.current_index]

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.current_index > 0

    def validate_step(self, index: int) -> StepValidationResult:
        return self.steps[index].validate(self.context.data)

    def validate_current(self) -> StepValidationResult:
        return self.validate_step(self.current_index)

    def first_invalid_step(self, before: Optional[int] = None):
        """
        Find the first step that fails validation.

        Args:
            before: Only consider steps strictly before this index

        Returns:
            (index, result) of the first failing step, or (None, None)
        """
        limit = len(self.steps) if before is None else before
        for index in range(limit):
            result = self.validate_step(index)
            if not result.is_valid:
                return index, result
        return None, None

    def go_next(self) -> StepValidationResult:
        """
        Validate the current step and advance when it passes.

        On the last step a valid result is returned and the index stays put:
        submission is a separate action.
        """
        result = self.validate_current()
        if not result.is_valid:
            logger.warning(f"Step {self.current_index} validation failed: {result.errors}")
            self.validation_failed.emit(result)
            return result

        self.context.mark_step_completed(self.current_index)

        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return result

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        self._navigate_to(self.current_index + 1)
        return result

    def go_previous(self) -> bool:
        """Navigate to the previous step. Never validates."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        self._navigate_to(self.current_index - 1)
        return True

    def jump_to(self, index: int):
        """
        Navigate directly to a step.

        Raises:
            IndexError: index outside the step list
            InvalidTransition: a step before index fails validation
        """
        if index < 0 or index >= len(self.steps):
            raise IndexError(f"Invalid step index: {index} (valid range: 0-{len(self.steps) - 1})")

        blocking_index, result = self.first_invalid_step(before=index)
        if blocking_index is not None:
            logger.warning(f"Jump to step {index} blocked by step {blocking_index}: {result.errors}")
            self.validation_failed.emit(result)
            raise InvalidTransition(index, blocking_index, result.errors)

        for completed in range(index):
            self.context.mark_step_completed(completed)

        if index != self.current_index:
            logger.info(f"Jumping: Step {self.current_index} → {index}")
            self._navigate_to(index)

    def _navigate_to(self, new_index: int):
        old_index = self.current_index
        self.current_index = new_index
        self.context.current_step_index = new_index

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

    def reset(self):
        """Reset navigator to first step."""
        if self.current_index != 0:
            self._navigate_to(0)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.steps) <= 1:
            return 100.0
        return (self.current_index / (len(self.steps) - 1)) * 100.0

    def get_completed_steps_count(self) -> int:
        """Get number of completed steps."""
        return len(self.context.completed_steps)
