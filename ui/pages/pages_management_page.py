# -*- coding: utf-8 -*-
"""
Pages Management Page.

CMS pages list with filters, paging and a per-row action menu
(edit / delete). Editing opens the page editor in a dialog.
"""

from typing import Any, Dict, Optional

from PyQt5.QtCore import QPoint, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QHeaderView, QLabel, QPushButton,
    QTableView, QVBoxLayout, QWidget
)

from app.config import Config
from controllers.pages_controller import PagesManagementController
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.components.base_table_model import BaseTableModel
from ui.components.filter_panel import FilterPanel
from ui.components.pagination_bar import PaginationBar
from ui.components.row_menu import OutsideClickCloser, RowActionMenu, RowMenuState
from ui.components.toast import Toast
from ui.error_handler import ErrorHandler
from ui.wizards.page_editor import PageEditorDialog
from utils.helpers import format_date
from utils.logger import get_logger

logger = get_logger(__name__)

ACTIONS_COLUMN = "_actions"

PAGE_COLUMNS = [
    ("title", "Title"),
    ("slug", "Slug"),
    ("template", "Template"),
    ("isPublished", "Status", lambda value: "Published" if value else "Draft"),
    ("updatedAt", "Updated", format_date),
    (ACTIONS_COLUMN, ""),
]


class PagesManagementPage(QWidget):
    """Admin pages list."""

    auth_required = pyqtSignal()

    def __init__(self, api_client=None, runner=None, parent=None):
        super().__init__(parent)
        self._api_client = api_client
        self._runner = runner
        self.controller = PagesManagementController(api_client=api_client, runner=runner, parent=self)
        self.list_controller = self.controller.list
        self.model = BaseTableModel(columns=PAGE_COLUMNS)
        self.menu_state = RowMenuState(self)
        self.row_buttons: Dict[str, QPushButton] = {}
        self.editor: Optional[PageEditorDialog] = None

        self._setup_ui()

        self.outside_closer = OutsideClickCloser(self.menu_state, self._is_inside_menu, self)
        self.outside_closer.install()

        self.list_controller.results_changed.connect(self._on_results)
        self.controller.error_changed.connect(self._show_error)
        self.controller.notice.connect(self._show_notice)
        self.controller.auth_required.connect(self.auth_required)
        self.controller.editor_requested.connect(self.open_editor)
        self.menu_state.changed.connect(self._on_menu_changed)
        self.row_menu.action_triggered.connect(self._on_row_action)

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        self.filter_panel = FilterPanel(self.list_controller)
        self.filter_panel.setFixedWidth(240)
        layout.addWidget(self.filter_panel)

        right = QVBoxLayout()
        header = QHBoxLayout()
        title = QLabel("Pages")
        title.setStyleSheet(f"font-size: 16pt; font-weight: 600; color: {Config.TEXT_COLOR};")
        header.addWidget(title)
        header.addStretch()
        self.btn_new = ActionButton(tr("button.new_page"), variant="primary", width=130)
        self.btn_new.clicked.connect(self.controller.create_page)
        header.addWidget(self.btn_new)
        right.addLayout(header)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        self.status_label.hide()
        right.addWidget(self.status_label)

        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        header_view = self.table.horizontalHeader()
        header_view.setSectionResizeMode(QHeaderView.Stretch)
        header_view.setSectionResizeMode(len(PAGE_COLUMNS) - 1, QHeaderView.Fixed)
        header_view.resizeSection(len(PAGE_COLUMNS) - 1, 48)
        right.addWidget(self.table, 1)

        self.pagination_bar = PaginationBar(self.list_controller)
        right.addWidget(self.pagination_bar)
        layout.addLayout(right, 1)

        self.row_menu = RowActionMenu(
            self.menu_state,
            [("edit", tr("button.edit")), ("delete", tr("button.delete"))],
            parent=self
        )

    def load(self):
        self.controller.refresh()

    # ==================== Rows ====================

    def _on_results(self, result):
        self.menu_state.close()
        self.model.set_items(result.items)
        self.row_buttons = {}
        column = len(PAGE_COLUMNS) - 1
        for row, item in enumerate(result.items):
            page_id = str(item.get("id", ""))
            button = QPushButton("⋯")
            button.setObjectName(f"row_menu_{page_id}")
            button.setFlat(True)
            button.setCursor(Qt.PointingHandCursor)
            button.clicked.connect(lambda _checked, pid=page_id: self.menu_state.toggle(pid))
            self.table.setIndexWidget(self.model.index(row, column), button)
            self.row_buttons[page_id] = button

        if result.items:
            self.status_label.hide()
        else:
            self._show_status(tr("list.empty"), Config.TEXT_LIGHT)

    def _on_menu_changed(self, page_id):
        if page_id is None:
            return
        button = self.row_buttons.get(page_id)
        if button is None:
            self.menu_state.close()
            return
        position = button.mapTo(self, QPoint(0, button.height()))
        self.row_menu.show_at(QPoint(position.x() - 80, position.y()))

    def _is_inside_menu(self, widget: QWidget) -> bool:
        if widget is self.row_menu or self.row_menu.isAncestorOf(widget):
            return True
        # Row buttons toggle the menu themselves
        return widget in self.row_buttons.values()

    def _on_row_action(self, action: str, page_id: str):
        if action == "edit":
            self.controller.edit_page(page_id)
        elif action == "delete":
            if ErrorHandler.confirm(self, tr("pages.delete_confirm")):
                self.controller.delete_page(page_id)

    # ==================== Editor ====================

    def open_editor(self, entity: Optional[Dict[str, Any]]):
        """Open the page editor for a new page (None) or a loaded one."""
        self.menu_state.close()
        dialog = PageEditorDialog(entity, api_client=self._api_client, runner=self._runner, parent=self)
        dialog.setAttribute(Qt.WA_DeleteOnClose)
        dialog.accepted.connect(lambda: self.controller.editor_finished(True, dialog.result_entity))
        dialog.wizard.login_required.connect(self.auth_required)
        self.editor = dialog
        dialog.finished.connect(self._on_editor_closed)
        dialog.open()
        return dialog

    def _on_editor_closed(self, _result: int):
        self.editor = None

    # ==================== Feedback ====================

    def _show_notice(self, message: str):
        Toast.notify(self, message, Toast.SUCCESS)

    def _show_error(self, message: str):
        self._show_status(message, Config.ERROR_COLOR)
        Toast.notify(self, message, Toast.ERROR)

    def _show_status(self, message: str, color: str):
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(message)
        self.status_label.show()
