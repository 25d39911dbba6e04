# -*- coding: utf-8 -*-
"""
Catalog list page: universities, programs, events or courses.

Filters on the left, results table with paging on the right. All list
state lives in the page's ListFilterController.
"""

from typing import Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QHeaderView, QLabel, QTableView,
    QVBoxLayout, QWidget
)

from app.config import Config
from controllers.catalog_filters import CATALOG_SCHEMAS
from controllers.list_controller import ListFilterController, ListResult
from services.translation_manager import tr
from ui.components.base_table_model import BaseTableModel
from ui.components.filter_panel import FilterPanel
from ui.components.pagination_bar import PaginationBar
from utils.helpers import format_date, format_number
from utils.logger import get_logger

logger = get_logger(__name__)


def _money(value) -> str:
    return format_number(value) if value not in (None, "") else ""


CATALOG_TITLES = {
    "universities": "Universities",
    "programs": "Programs",
    "events": "Events",
    "courses": "Courses",
}

CATALOG_COLUMNS = {
    "universities": [
        ("name", "Name"),
        ("country", "Country"),
        ("city", "City"),
        ("type", "Type"),
        ("ranking", "Ranking"),
        ("tuitionFeeMin", "Tuition from", _money),
    ],
    "programs": [
        ("name", "Program"),
        ("university.name", "University"),
        ("degreeType", "Degree"),
        ("discipline", "Discipline"),
        ("duration", "Duration"),
        ("tuitionFee", "Tuition", _money),
    ],
    "events": [
        ("title", "Event"),
        ("eventType", "Type"),
        ("startDate", "Date", format_date),
        ("city", "City"),
        ("country", "Country"),
        ("isFree", "Free"),
    ],
    "courses": [
        ("title", "Course"),
        ("category", "Category"),
        ("level", "Level"),
        ("instructorName", "Instructor"),
        ("price", "Price", _money),
    ],
}


class CatalogListPage(QWidget):
    """Filterable, paginated catalog table."""

    auth_required = pyqtSignal()

    def __init__(self, catalog: str, api_client=None, runner=None, parent=None):
        super().__init__(parent)
        if catalog not in CATALOG_SCHEMAS:
            raise ValueError(f"Unknown catalog '{catalog}'")
        self.catalog = catalog
        self.controller = ListFilterController(CATALOG_SCHEMAS[catalog](), api_client=api_client,
                                               runner=runner, parent=self)
        self.model = BaseTableModel(columns=CATALOG_COLUMNS[catalog])
        self._setup_ui()

        self.controller.results_changed.connect(self._on_results)
        self.controller.error_changed.connect(self._on_error)
        self.controller.auth_required.connect(self.auth_required)

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        self.filter_panel = FilterPanel(self.controller)
        self.filter_panel.setFixedWidth(260)
        layout.addWidget(self.filter_panel)

        right = QVBoxLayout()
        title = QLabel(CATALOG_TITLES[self.catalog])
        title.setStyleSheet(f"font-size: 16pt; font-weight: 600; color: {Config.TEXT_COLOR};")
        right.addWidget(title)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        self.status_label.hide()
        right.addWidget(self.status_label)

        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        right.addWidget(self.table, 1)

        self.pagination_bar = PaginationBar(self.controller)
        right.addWidget(self.pagination_bar)
        layout.addLayout(right, 1)

    def load(self):
        """Fetch the first page (or refresh the current one)."""
        self.controller.refresh()

    def _on_results(self, result: ListResult):
        self.model.set_items(result.items)
        if result.items:
            self.status_label.hide()
        else:
            self._show_status(tr("list.empty"), Config.TEXT_LIGHT)

    def _on_error(self, message: Optional[str]):
        self._show_status(message, Config.ERROR_COLOR)

    def _show_status(self, message: str, color: str):
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(message)
        self.status_label.show()
