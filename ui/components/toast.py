# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from app.config import Config


class Toast(QLabel):
    """Short-lived notification shown at the bottom of its parent."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    COLORS = {
        SUCCESS: Config.SUCCESS_COLOR,
        ERROR: Config.ERROR_COLOR,
        WARNING: Config.WARNING_COLOR,
        INFO: Config.PRIMARY_COLOR,
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(500)

        # Opacity effect for fade animation
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self._fade_out)
        self.hide()

    def show_message(self, message: str, toast_type: str = INFO,
                     duration: int = Config.TOAST_DURATION_MS):
        """
        Show a toast message.

        Args:
            message: Message text
            toast_type: Type (success, error, warning, info)
            duration: Display duration in milliseconds
        """
        self.setText(message)
        color = self.COLORS.get(toast_type, Config.TEXT_COLOR)
        self.setStyleSheet(f"""
            QLabel#toast {{
                background-color: {color};
                color: white;
                padding: 12px 24px;
                border-radius: 6px;
                font-size: 11pt;
            }}
        """)

        # Position at bottom center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            x = (parent_rect.width() - self.width()) // 2
            y = parent_rect.height() - self.height() - 50
            self.move(x, y)

        self.show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        self._hide_timer.start(duration)

    def _fade_out(self):
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, message: str, toast_type: str = INFO,
               duration: int = Config.TOAST_DURATION_MS) -> 'Toast':
        """Show a toast on a widget, reusing the widget's toast if it has one."""
        toast = parent.findChild(Toast, "toast")
        if toast is None:
            toast = Toast(parent)
        toast.show_message(message, toast_type, duration)
        return toast
