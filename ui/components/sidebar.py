# -*- coding: utf-8 -*-
"""
Side navigation bar.
"""

from PyQt5.QtWidgets import (
    QFrame, QLabel, QPushButton, QSizePolicy, QSpacerItem, QVBoxLayout
)
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config, Pages


# Catalog and CMS screens
NAV_ITEMS = [
    (Pages.UNIVERSITIES, "Universities"),
    (Pages.PROGRAMS, "Programs"),
    (Pages.EVENTS, "Events"),
    (Pages.COURSES, "Courses"),
    (Pages.PAGES, "Pages"),
]

# Wizards opened in a dialog
ACTION_ITEMS = [
    (Pages.COURSE_BUILDER, "New Course"),
    (Pages.TEST_BUILDER, "New Test"),
    (Pages.BOOK_APPOINTMENT, "Book Appointment"),
    (Pages.SETUP, "Platform Setup"),
]


class Sidebar(QFrame):
    """Side navigation bar. Emits navigate(page_id)."""

    navigate = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._buttons = {}
        self._selected_page = None
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("sidebar")
        self.setFixedWidth(Config.SIDEBAR_WIDTH)
        self.setStyleSheet(f"""
            QFrame#sidebar {{
                background-color: {Config.SIDEBAR_BG};
                border: none;
            }}
            QPushButton {{
                color: white;
                background: transparent;
                border: none;
                text-align: left;
                padding: 10px 20px;
                font-size: 10pt;
            }}
            QPushButton:hover {{ background: rgba(255, 255, 255, 0.08); }}
            QPushButton:checked {{
                background-color: {Config.SIDEBAR_ACTIVE};
                font-weight: 600;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 24, 0, 16)
        layout.setSpacing(2)

        title = QLabel(Config.APP_NAME)
        title.setStyleSheet("color: white; font-size: 13pt; font-weight: 700; padding: 0 20px 16px 20px;")
        layout.addWidget(title)

        for page_id, label in NAV_ITEMS:
            btn = self._create_nav_button(page_id, label, checkable=True)
            layout.addWidget(btn)

        section = QLabel("Create")
        section.setStyleSheet(f"color: {Config.TEXT_LIGHT}; padding: 18px 20px 6px 20px;")
        layout.addWidget(section)

        for page_id, label in ACTION_ITEMS:
            btn = self._create_nav_button(page_id, label, checkable=False)
            layout.addWidget(btn)

        layout.addSpacerItem(QSpacerItem(20, 40, QSizePolicy.Minimum, QSizePolicy.Expanding))

        self.user_label = QLabel("")
        self.user_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; padding: 0 20px;")
        layout.addWidget(self.user_label)

    def _create_nav_button(self, page_id: str, label: str, checkable: bool) -> QPushButton:
        btn = QPushButton(label)
        btn.setObjectName(f"nav_{page_id}")
        btn.setCheckable(checkable)
        btn.setCursor(Qt.PointingHandCursor)
        btn.clicked.connect(lambda _checked, pid=page_id: self.navigate.emit(pid))
        self._buttons[page_id] = btn
        return btn

    def button(self, page_id: str) -> QPushButton:
        return self._buttons[page_id]

    def set_current_page(self, page_id: str):
        """Highlight the active list screen."""
        self._selected_page = page_id
        for pid, btn in self._buttons.items():
            if btn.isCheckable():
                btn.setChecked(pid == page_id)

    def set_user(self, user):
        if isinstance(user, dict):
            self.user_label.setText(user.get("email") or user.get("name") or "")
        else:
            self.user_label.setText("")
