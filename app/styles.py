# -*- coding: utf-8 -*-
"""
Application stylesheet with BnOverseas branding.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet."""
    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        font-family: "Segoe UI", "Helvetica Neue", sans-serif;
        font-size: 10pt;
        color: {Config.TEXT_COLOR};
    }}

    QMainWindow, QDialog {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    /* ===== Inputs ===== */
    QLineEdit, QTextEdit, QPlainTextEdit, QComboBox, QSpinBox, QDoubleSpinBox, QDateEdit {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 6px;
        padding: 6px 10px;
    }}

    QLineEdit:focus, QTextEdit:focus, QPlainTextEdit:focus, QComboBox:focus {{
        border: 1px solid {Config.PRIMARY_COLOR};
    }}

    /* ===== Tables ===== */
    QTableView {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 8px;
        gridline-color: {Config.BACKGROUND_COLOR};
        selection-background-color: #DBEAFE;
        selection-color: {Config.TEXT_COLOR};
    }}

    QHeaderView::section {{
        background-color: {Config.BACKGROUND_COLOR};
        color: {Config.TEXT_LIGHT};
        font-weight: 600;
        border: none;
        border-bottom: 1px solid {Config.BORDER_COLOR};
        padding: 8px;
    }}

    /* ===== Progress ===== */
    QProgressBar {{
        background-color: {Config.BORDER_COLOR};
        border: none;
        border-radius: 3px;
        max-height: 6px;
    }}

    QProgressBar::chunk {{
        background-color: {Config.PRIMARY_COLOR};
        border-radius: 3px;
    }}

    /* ===== Scroll Areas ===== */
    QScrollArea {{
        border: none;
        background: transparent;
    }}
    """
