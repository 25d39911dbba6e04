# -*- coding: utf-8 -*-
"""
Row action menu.

At most one row menu is open per table. Its state is a single open_id
(None when closed) and one application-wide event filter closes it on any
click outside the menu.
"""

from typing import Callable, List, Optional, Tuple

from PyQt5.QtCore import QEvent, QObject, QPoint, pyqtSignal
from PyQt5.QtWidgets import QApplication, QFrame, QPushButton, QVBoxLayout, QWidget

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class RowMenuState(QObject):
    """Which row's action menu is open, if any."""

    changed = pyqtSignal(object)  # open row id or None

    def __init__(self, parent=None):
        super().__init__(parent)
        self.open_id: Optional[str] = None

    def is_open(self, row_id: str) -> bool:
        return self.open_id is not None and self.open_id == row_id

    def toggle(self, row_id: str):
        self._set(None if self.open_id == row_id else row_id)

    def open(self, row_id: str):
        self._set(row_id)

    def close(self):
        self._set(None)

    def _set(self, row_id: Optional[str]):
        if row_id != self.open_id:
            self.open_id = row_id
            self.changed.emit(row_id)


class OutsideClickCloser(QObject):
    """
    Application event filter closing a RowMenuState when the user clicks
    anywhere outside the menu widget (and outside the toggle buttons).
    """

    def __init__(self, state: RowMenuState, is_inside: Callable[[QWidget], bool], parent=None):
        super().__init__(parent)
        self.state = state
        self.is_inside = is_inside

    def install(self, app: Optional[QApplication] = None):
        app = app or QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    def uninstall(self, app: Optional[QApplication] = None):
        app = app or QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)

    def eventFilter(self, watched, event):
        if (event.type() == QEvent.MouseButtonPress
                and self.state.open_id is not None
                and isinstance(watched, QWidget)
                and not self.is_inside(watched)):
            self.state.close()
        return False


class RowActionMenu(QFrame):
    """
    Popup list of row actions, shown for RowMenuState.open_id.

    Signals:
        action_triggered(action, row_id)
    """

    action_triggered = pyqtSignal(str, str)

    def __init__(self, state: RowMenuState, actions: List[Tuple[str, str]], parent=None):
        """
        Args:
            state: Shared open-state of the table
            actions: (action, label) pairs, e.g. [("edit", "Edit"), ("delete", "Delete")]
        """
        super().__init__(parent)
        self.state = state
        self.setObjectName("rowActionMenu")
        self.setStyleSheet(f"""
            QFrame#rowActionMenu {{
                background-color: white;
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 6px;
            }}
            QPushButton {{ border: none; text-align: left; padding: 6px 14px; }}
            QPushButton:hover {{ background-color: {Config.BACKGROUND_COLOR}; }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(0)
        self.buttons = {}
        for action, label in actions:
            button = QPushButton(label)
            button.clicked.connect(lambda _checked, a=action: self._trigger(a))
            self.buttons[action] = button
            layout.addWidget(button)

        self.hide()
        state.changed.connect(self._on_state_changed)

    def show_at(self, position: QPoint):
        self.move(position)
        self.adjustSize()
        self.show()
        self.raise_()

    def _on_state_changed(self, row_id):
        if row_id is None:
            self.hide()

    def _trigger(self, action: str):
        row_id = self.state.open_id
        self.state.close()
        if row_id is not None:
            logger.debug(f"Row action {action} on {row_id}")
            self.action_triggered.emit(action, row_id)
