# -*- coding: utf-8 -*-
"""
Step Renderer - turns (step definition, aggregate) into a view.

render_step() is a pure function: it reads the aggregate and the latest
validation result and returns a StepView. StepForm builds Qt inputs for a
step once and refreshes them from successive StepViews. Neither one knows
which step is active; navigation belongs to the controller.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from PyQt5.QtCore import QDate, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QDoubleSpinBox, QFormLayout, QFrame,
    QHBoxLayout, QLabel, QLineEdit, QPlainTextEdit, QPushButton, QSpinBox,
    QVBoxLayout, QWidget
)

from app.config import Config
from services.translation_manager import tr
from .base_step import FieldSpec, StepDefinition, StepValidationResult


@dataclass
class FieldView:
    """Everything needed to draw one input."""
    name: str
    label: str
    kind: str
    value: Any
    required: bool = False
    choices: Sequence[Tuple[Any, str]] = ()
    placeholder: str = ""
    error: bool = False


@dataclass
class StepView:
    step_id: str
    title: str
    description: str = ""
    fields: List[FieldView] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def field(self, name: str) -> Optional[FieldView]:
        for field_view in self.fields:
            if field_view.name == name:
                return field_view
        return None


def render_step(step: StepDefinition, aggregate: Dict[str, Any],
                validation: Optional[StepValidationResult] = None,
                options: Optional[Dict[str, Sequence[Tuple[Any, str]]]] = None) -> StepView:
    """
    Build the view of one step.

    Args:
        step: Step definition
        aggregate: Wizard aggregate (read only)
        validation: Latest failed validation of this step, to flag fields
        options: Choices loaded at runtime, by field name
    """
    options = options or {}
    invalid = set(validation.fields) if validation else set()

    views = []
    for spec in step.fields:
        views.append(FieldView(
            name=spec.name,
            label=f"{spec.label} *" if spec.required else spec.label,
            kind=spec.kind,
            value=aggregate.get(spec.name),
            required=spec.required,
            choices=tuple(options.get(spec.name, spec.choices)),
            placeholder=spec.placeholder,
            error=spec.name in invalid,
        ))

    return StepView(
        step_id=step.id,
        title=step.label,
        description=step.description,
        fields=views,
        errors=list(validation.errors) if validation else [],
    )


_EMPTY_DATE = QDate(2000, 1, 1)
_NUMBER_LIMIT = 1_000_000


class FieldEditor(QWidget):
    """One input widget for a FieldSpec (any kind except 'groups')."""

    value_edited = pyqtSignal(object)

    def __init__(self, spec: FieldSpec, parent=None):
        super().__init__(parent)
        self.spec = spec
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.widget = self._create_widget()
        layout.addWidget(self.widget)

    def _create_widget(self) -> QWidget:
        spec = self.spec
        kind = spec.kind

        if kind == "text":
            widget = QLineEdit()
            widget.setPlaceholderText(spec.placeholder)
            if "password" in spec.name:
                widget.setEchoMode(QLineEdit.Password)
            widget.textEdited.connect(self.value_edited.emit)
        elif kind in ("multiline", "list"):
            widget = QPlainTextEdit()
            widget.setPlaceholderText(spec.placeholder)
            widget.setFixedHeight(90 if kind == "multiline" else 70)
            widget.textChanged.connect(self._on_text_changed)
        elif kind == "choice":
            widget = QComboBox()
            self._fill_choices(widget, spec.choices)
            widget.activated.connect(lambda index: self.value_edited.emit(widget.itemData(index)))
        elif kind == "bool":
            widget = QCheckBox(spec.placeholder)
            widget.clicked.connect(self.value_edited.emit)
        elif kind == "int":
            widget = QSpinBox()
            widget.setRange(int(spec.rules.get("min", 0)), int(spec.rules.get("max", _NUMBER_LIMIT)))
            widget.valueChanged.connect(self.value_edited.emit)
        elif kind == "float":
            widget = QDoubleSpinBox()
            widget.setDecimals(2)
            widget.setRange(float(spec.rules.get("min", 0)), float(spec.rules.get("max", _NUMBER_LIMIT)))
            widget.valueChanged.connect(self.value_edited.emit)
        elif kind == "date":
            widget = QDateEdit()
            widget.setCalendarPopup(True)
            widget.setDisplayFormat("yyyy-MM-dd")
            widget.setMinimumDate(_EMPTY_DATE)
            widget.setSpecialValueText(" ")
            widget.dateChanged.connect(self._on_date_changed)
        else:
            raise ValueError(f"FieldEditor cannot edit '{kind}' fields")

        widget.setObjectName(f"field_{spec.name}")
        return widget

    @staticmethod
    def _fill_choices(combo: QComboBox, choices):
        combo.clear()
        combo.addItem("", None)
        for value, label in choices:
            combo.addItem(label, value)

    def _on_text_changed(self):
        text = self.widget.toPlainText()
        if self.spec.kind == "list":
            self.value_edited.emit(text.split("\n") if text else [])
        else:
            self.value_edited.emit(text)

    def _on_date_changed(self, qdate: QDate):
        self.value_edited.emit(None if qdate == _EMPTY_DATE else qdate.toPyDate())

    def set_choices(self, choices):
        if isinstance(self.widget, QComboBox):
            current = self.widget.currentData()
            self.widget.blockSignals(True)
            self._fill_choices(self.widget, choices)
            self.widget.blockSignals(False)
            self.set_value(current)

    def set_value(self, value: Any):
        """Show a value without emitting value_edited."""
        widget = self.widget
        widget.blockSignals(True)
        try:
            kind = self.spec.kind
            if kind == "text":
                if widget.text() != (value or ""):
                    widget.setText("" if value is None else str(value))
            elif kind == "multiline":
                if widget.toPlainText() != (value or ""):
                    widget.setPlainText(value or "")
            elif kind == "list":
                text = "\n".join(value or [])
                if widget.toPlainText() != text:
                    widget.setPlainText(text)
            elif kind == "choice":
                index = widget.findData(value)
                widget.setCurrentIndex(index if index >= 0 else 0)
            elif kind == "bool":
                widget.setChecked(bool(value))
            elif kind == "int":
                widget.setValue(int(value or 0))
            elif kind == "float":
                widget.setValue(float(value or 0))
            elif kind == "date":
                widget.setDate(QDate(value.year, value.month, value.day)
                               if isinstance(value, date) else _EMPTY_DATE)
        finally:
            widget.blockSignals(False)

    def set_error(self, has_error: bool):
        if has_error:
            self.widget.setStyleSheet(f"border: 1px solid {Config.ERROR_COLOR};")
        else:
            self.widget.setStyleSheet("")


class GroupListEditor(QWidget):
    """
    Editor for a 'groups' field: groups (modules, sections) holding items
    (lessons, questions).

    Edits are not applied here; they are requested through action_requested
    so the controller stays the only writer of the aggregate:
        ("add_group", {})
        ("remove_group", {"group_id"})
        ("update_group", {"group_id", "name", "value"})
        ("add_item", {"group_id"})
        ("remove_item", {"group_id", "item_id"})
        ("update_item", {"group_id", "item_id", "name", "value"})
    """

    action_requested = pyqtSignal(str, dict)

    def __init__(self, spec: FieldSpec, parent=None):
        super().__init__(parent)
        self.spec = spec
        self._structure = None
        self._editors: Dict[Tuple[str, Optional[str], str], FieldEditor] = {}

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(10)

        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.addWidget(self.rows_container)

        self.btn_add_group = QPushButton(f"{tr('button.add_group')} {spec.group_label or spec.label}")
        self.btn_add_group.clicked.connect(lambda: self.action_requested.emit("add_group", {}))
        self.main_layout.addWidget(self.btn_add_group, alignment=Qt.AlignLeft)

    def set_groups(self, groups: List[Dict[str, Any]]):
        """Show the groups; widgets are rebuilt only when rows were added or removed."""
        groups = groups or []
        structure = [(g["id"], tuple(i["id"] for i in g.get(self.spec.items_key, []))) for g in groups]
        if structure != self._structure:
            self._rebuild(groups)
            self._structure = structure

        for group in groups:
            for sub in self.spec.group_fields:
                self._editors[(group["id"], None, sub.name)].set_value(group.get(sub.name))
            for item in group.get(self.spec.items_key, []):
                for sub in self.spec.item_fields:
                    self._editors[(group["id"], item["id"], sub.name)].set_value(item.get(sub.name))

    def _rebuild(self, groups: List[Dict[str, Any]]):
        while self.rows_layout.count():
            widget = self.rows_layout.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()
        self._editors.clear()

        for number, group in enumerate(groups, start=1):
            self.rows_layout.addWidget(self._create_group_frame(number, group))

    def _create_group_frame(self, number: int, group: Dict[str, Any]) -> QFrame:
        spec = self.spec
        group_id = group["id"]

        frame = QFrame()
        frame.setObjectName("groupFrame")
        frame.setStyleSheet(f"QFrame#groupFrame {{ border: 1px solid {Config.BORDER_COLOR}; border-radius: 6px; }}")
        layout = QVBoxLayout(frame)

        header = QHBoxLayout()
        header.addWidget(QLabel(f"<b>{spec.group_label or spec.label} {number}</b>"))
        header.addStretch()
        btn_remove = QPushButton(tr("button.remove"))
        btn_remove.clicked.connect(
            lambda: self.action_requested.emit("remove_group", {"group_id": group_id}))
        header.addWidget(btn_remove)
        layout.addLayout(header)

        form = QFormLayout()
        for sub in spec.group_fields:
            editor = FieldEditor(sub)
            editor.value_edited.connect(
                lambda value, name=sub.name: self.action_requested.emit(
                    "update_group", {"group_id": group_id, "name": name, "value": value}))
            self._editors[(group_id, None, sub.name)] = editor
            form.addRow(sub.label, editor)
        layout.addLayout(form)

        for item_no, item in enumerate(group.get(spec.items_key, []), start=1):
            layout.addWidget(self._create_item_frame(group_id, item_no, item))

        btn_add_item = QPushButton(f"{tr('button.add_item')}: {spec.item_label or spec.items_key}")
        btn_add_item.clicked.connect(
            lambda: self.action_requested.emit("add_item", {"group_id": group_id}))
        layout.addWidget(btn_add_item, alignment=Qt.AlignLeft)
        return frame

    def _create_item_frame(self, group_id: str, number: int, item: Dict[str, Any]) -> QFrame:
        item_id = item["id"]
        frame = QFrame()
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(16, 4, 0, 4)

        header = QHBoxLayout()
        header.addWidget(QLabel(f"{self.spec.item_label or self.spec.items_key} {number}"))
        header.addStretch()
        btn_remove = QPushButton(tr("button.remove"))
        btn_remove.clicked.connect(
            lambda: self.action_requested.emit("remove_item", {"group_id": group_id, "item_id": item_id}))
        header.addWidget(btn_remove)
        layout.addLayout(header)

        form = QFormLayout()
        for sub in self.spec.item_fields:
            editor = FieldEditor(sub)
            editor.value_edited.connect(
                lambda value, name=sub.name: self.action_requested.emit(
                    "update_item", {"group_id": group_id, "item_id": item_id,
                                    "name": name, "value": value}))
            self._editors[(group_id, item_id, sub.name)] = editor
            form.addRow(sub.label, editor)
        layout.addLayout(form)
        return frame


class StepForm(QWidget):
    """
    Qt form for one step.

    Signals:
        field_edited(name, value): the user changed a plain field
        group_action(field_name, action, args): the user edited a group field
    """

    field_edited = pyqtSignal(str, object)
    group_action = pyqtSignal(str, str, dict)

    def __init__(self, step: StepDefinition, parent=None):
        super().__init__(parent)
        self.step = step
        self.editors: Dict[str, QWidget] = {}
        self.labels: Dict[str, QLabel] = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        self.title_label = QLabel(self.step.label)
        self.title_label.setStyleSheet(f"font-size: 13pt; font-weight: 600; color: {Config.TEXT_COLOR};")
        layout.addWidget(self.title_label)

        self.description_label = QLabel(self.step.description)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.description_label.setVisible(bool(self.step.description))
        layout.addWidget(self.description_label)

        form = QFormLayout()
        form.setSpacing(10)
        for spec in self.step.fields:
            if spec.kind == "groups":
                editor = GroupListEditor(spec)
                editor.action_requested.connect(
                    lambda action, args, name=spec.name: self.group_action.emit(name, action, args))
            else:
                editor = FieldEditor(spec)
                editor.value_edited.connect(
                    lambda value, name=spec.name: self.field_edited.emit(name, value))
            label = QLabel(f"{spec.label} *" if spec.required else spec.label)
            self.editors[spec.name] = editor
            self.labels[spec.name] = label
            form.addRow(label, editor)
        layout.addLayout(form)
        layout.addStretch()

    def refresh(self, view: StepView):
        """Show the values and error flags of a StepView."""
        for field_view in view.fields:
            editor = self.editors.get(field_view.name)
            if editor is None:
                continue
            if isinstance(editor, GroupListEditor):
                editor.set_groups(field_view.value)
                continue
            if field_view.kind == "choice":
                editor.set_choices(field_view.choices)
            editor.set_value(field_view.value)
            editor.set_error(field_view.error)
