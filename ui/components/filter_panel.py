# -*- coding: utf-8 -*-
"""
Filter Panel - filter widgets generated from a FilterSchema.

The panel never keeps filter values of its own: edits go to the
ListFilterController and widgets are re-synced from filters_changed.
Choices of facet-backed filters are refreshed from every result.
"""

from typing import Any, Dict, List, Tuple

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QComboBox, QFormLayout, QHBoxLayout, QLineEdit, QListWidget,
    QListWidgetItem, QSpinBox, QVBoxLayout, QWidget
)

from controllers.list_controller import ALL, FilterField, FilterState, ListResult
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from utils.logger import get_logger

logger = get_logger(__name__)


def facet_values(raw: Any) -> List[Tuple[Any, str]]:
    """
    Normalize a server facet into (value, label) pairs.

    Facets arrive either as plain values or as {"value": ..., "count": n}.
    """
    values = []
    for entry in raw or []:
        if isinstance(entry, dict):
            value = entry.get("value", entry.get("name"))
            if value in (None, ""):
                continue
            count = entry.get("count")
            values.append((value, f"{value} ({count})" if count is not None else str(value)))
        elif entry not in (None, ""):
            values.append((entry, str(entry)))
    return values


class FilterPanel(QWidget):
    """Vertical panel with one input per filter field plus a reset button."""

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.schema = controller.schema
        self.widgets: Dict[str, Any] = {}
        self._setup_ui()

        controller.filters_changed.connect(self.sync_from_state)
        controller.results_changed.connect(self.update_facets)
        self.sync_from_state(controller.state)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        form = QFormLayout()
        for filter_field in self.schema.fields:
            widget = self._create_widget(filter_field)
            widget.setObjectName(f"filter_{filter_field.name}")
            self.widgets[filter_field.name] = widget
            form.addRow(filter_field.label or filter_field.name, widget)
        layout.addLayout(form)

        self.btn_reset = ActionButton(tr("button.reset_filters"), variant="secondary")
        self.btn_reset.clicked.connect(self.controller.clear_all)
        layout.addWidget(self.btn_reset)
        layout.addStretch()

    def _create_widget(self, filter_field: FilterField) -> QWidget:
        name = filter_field.name
        kind = filter_field.kind

        if kind == "text":
            widget = QLineEdit()
            widget.setPlaceholderText(filter_field.label)
            widget.textEdited.connect(lambda text: self.controller.set_field(name, text))
        elif kind == "choice":
            widget = QComboBox()
            self._fill_combo(widget, filter_field, [])
            widget.activated.connect(
                lambda index: self.controller.set_field(name, widget.itemData(index)))
        elif kind == "set":
            widget = QListWidget()
            widget.setMaximumHeight(140)
            widget.itemChanged.connect(
                lambda item: self.controller.toggle_set_member(name, item.data(Qt.UserRole)))
        elif kind == "range":
            widget = QWidget()
            row = QHBoxLayout(widget)
            row.setContentsMargins(0, 0, 0, 0)
            low, high = filter_field.bounds
            widget.low = QSpinBox()
            widget.high = QSpinBox()
            for spin in (widget.low, widget.high):
                spin.setRange(int(low), int(high))
                spin.setSingleStep(1000)
                spin.editingFinished.connect(lambda: self._on_range_edited(name))
                row.addWidget(spin)
        else:
            widget = QComboBox()
            widget.addItem(tr("list.any"), None)
            widget.addItem(tr("list.yes"), True)
            widget.addItem(tr("list.no"), False)
            widget.activated.connect(
                lambda index: self.controller.set_field(name, widget.itemData(index)))
        return widget

    def _fill_combo(self, combo: QComboBox, filter_field: FilterField, facet: List[Tuple[Any, str]]):
        combo.blockSignals(True)
        combo.clear()
        choices = list(filter_field.choices) or [(ALL, tr("list.all"))] + facet
        for value, label in choices:
            combo.addItem(label, value)
        combo.blockSignals(False)

    def _on_range_edited(self, name: str):
        widget = self.widgets[name]
        low, high = widget.low.value(), widget.high.value()
        if low > high:
            low, high = high, low
        if (low, high) != tuple(self.controller.state.fields.get(name)):
            self.controller.set_field(name, (low, high))

    # ==================== Sync ====================

    def sync_from_state(self, state: FilterState):
        """Show the controller's filter values without re-triggering fetches."""
        for filter_field in self.schema.fields:
            widget = self.widgets[filter_field.name]
            value = state.fields.get(filter_field.name, filter_field.default)
            widget.blockSignals(True)
            try:
                if filter_field.kind == "text":
                    if widget.text() != value:
                        widget.setText(value)
                elif filter_field.kind in ("choice", "flag"):
                    index = widget.findData(value)
                    widget.setCurrentIndex(max(index, 0))
                elif filter_field.kind == "set":
                    for row in range(widget.count()):
                        item = widget.item(row)
                        checked = item.data(Qt.UserRole) in value
                        item.setCheckState(Qt.Checked if checked else Qt.Unchecked)
                elif filter_field.kind == "range":
                    widget.low.setValue(int(value[0]))
                    widget.high.setValue(int(value[1]))
            finally:
                widget.blockSignals(False)

    def update_facets(self, result: ListResult):
        """Refresh facet-backed choices; current selections stay selected."""
        for filter_field in self.schema.fields:
            if not filter_field.facet or filter_field.facet not in result.facets:
                continue
            facet = facet_values(result.facets[filter_field.facet])
            widget = self.widgets[filter_field.name]
            if filter_field.kind == "choice":
                selected = self.controller.state.fields.get(filter_field.name)
                if selected not in (None, "", ALL) and selected not in [v for v, _ in facet]:
                    facet.append((selected, str(selected)))
                self._fill_combo(widget, filter_field, facet)
            elif filter_field.kind == "set":
                selected = list(self.controller.state.fields.get(filter_field.name) or [])
                # Selected values stay listed even if the facet no longer reports them
                known = [value for value, _ in facet]
                facet += [(value, str(value)) for value in selected if value not in known]
                shown = [(widget.item(row).data(Qt.UserRole), widget.item(row).text())
                         for row in range(widget.count())]
                if shown == facet:
                    continue
                widget.blockSignals(True)
                widget.clear()
                for value, label in facet:
                    item = QListWidgetItem(label)
                    item.setData(Qt.UserRole, value)
                    item.setFlags(item.flags() | Qt.ItemIsUserCheckable)
                    widget.addItem(item)
                widget.blockSignals(False)
        self.sync_from_state(self.controller.state)
