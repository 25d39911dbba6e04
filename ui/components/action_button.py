# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer, list toolbars and dialogs so every action
button shares one size and palette.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QPushButton

from app.config import Config


class ActionButton(QPushButton):
    """
    Reusable action button.

    Variants:
    - primary: solid brand colour, for the main action (Next, Save, Submit)
    - secondary: grey, for Cancel and Previous
    - outline: light background with a brand-coloured border
    - danger: red, for destructive actions (Delete)

    Usage:
        btn = ActionButton(tr("button.next"), variant="primary")
        btn = ActionButton(tr("button.cancel"), variant="secondary", width=120)
    """

    VARIANTS = ("primary", "secondary", "outline", "danger")

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 114,
        height: int = 40,
        parent=None
    ):
        super().__init__(text, parent)
        if variant not in self.VARIANTS:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {', '.join(self.VARIANTS)}")

        self.variant = variant
        self.setMinimumSize(width, height)
        self.setCursor(Qt.PointingHandCursor)
        self._apply_style(variant)

    def _apply_style(self, variant: str):
        if variant == "primary":
            background, hover, color, border = Config.PRIMARY_COLOR, Config.PRIMARY_DARK, "white", "none"
        elif variant == "secondary":
            background, hover, color, border = "#6c757d", "#5c636a", "white", "none"
        elif variant == "danger":
            background, hover, color, border = Config.ERROR_COLOR, "#B91C1C", "white", "none"
        else:
            background, hover, color = "#F0F7FF", "#E0EAFF", Config.PRIMARY_COLOR
            border = f"1px solid {Config.PRIMARY_COLOR}"

        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {color};
                border: {border};
                padding: 8px 12px;
                border-radius: 4px;
                font-size: 10pt;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:disabled {{
                background-color: #adb5bd;
                color: #f8f9fa;
            }}
        """)
