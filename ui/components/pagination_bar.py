# -*- coding: utf-8 -*-
"""
Pagination bar: previous / "Page x of y" / next, plus the result count.
"""

from PyQt5.QtWidgets import QHBoxLayout, QLabel, QWidget

from controllers.list_controller import ListResult
from services.translation_manager import tr
from ui.components.action_button import ActionButton


class PaginationBar(QWidget):
    """Paging controls bound to a ListFilterController."""

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.total_label = QLabel("")
        layout.addWidget(self.total_label)
        layout.addStretch()

        self.btn_previous = ActionButton(tr("button.previous"), variant="outline")
        self.btn_previous.clicked.connect(lambda: controller.set_page(controller.page - 1))
        layout.addWidget(self.btn_previous)

        self.page_label = QLabel("")
        layout.addWidget(self.page_label)

        self.btn_next = ActionButton(tr("button.next"), variant="outline")
        self.btn_next.clicked.connect(lambda: controller.set_page(controller.page + 1))
        layout.addWidget(self.btn_next)

        controller.results_changed.connect(self.update_from_result)
        self.update_from_result(controller.result)

    def update_from_result(self, result: ListResult):
        pagination = result.pagination
        self.total_label.setText(tr("list.total", total=pagination.total))
        self.page_label.setText(tr("list.page", current=pagination.current_page,
                                   total=pagination.total_pages))
        self.btn_previous.setEnabled(pagination.has_previous)
        self.btn_next.setEnabled(pagination.has_next)
