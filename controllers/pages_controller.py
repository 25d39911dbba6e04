# -*- coding: utf-8 -*-
"""
Pages Management Controller.

Admin CMS pages: filtered list, delete, and hand-off to the page editor.
Endpoints:
    GET    /api/admin/pages          -> {pages, pagination, stats}
    GET    /api/admin/pages/{id}     -> {page}
    DELETE /api/admin/pages/{id}
"""

from typing import Any, Dict, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController
from controllers.catalog_filters import admin_pages_schema
from controllers.list_controller import ListFilterController
from services.error_mapper import is_auth_error, map_exception
from services.remote_sync import RemoteSync
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

PAGES_COLLECTION = "/api/admin/pages"


class PagesManagementController(BaseController):
    """
    Signals:
        editor_requested(entity): open the editor; None means a new page
        notice(message): short success message for a toast
        error_changed(message): list, load or delete failure
        auth_required(): the session is gone
    """

    editor_requested = pyqtSignal(object)
    notice = pyqtSignal(str)
    error_changed = pyqtSignal(str)
    auth_required = pyqtSignal()

    def __init__(self, api_client=None, runner=None, parent=None):
        super().__init__(runner=runner, parent=parent)
        self.list = ListFilterController(
            admin_pages_schema(),
            api_client=api_client,
            runner=runner,
            sync=RemoteSync(PAGES_COLLECTION, api_client=api_client, entity_key="page"),
            parent=self
        )
        self.list.error_changed.connect(self.error_changed)
        self.list.auth_required.connect(self.auth_required)
        self.list.item_deleted.connect(lambda _id: self.notice.emit(tr("pages.deleted")))

    @property
    def api_client(self):
        return self.list.api_client

    def refresh(self) -> int:
        return self.list.refresh()

    # ==================== Editor ====================

    def create_page(self):
        self.editor_requested.emit(None)

    def edit_page(self, page_id: str):
        """Load the full page, then ask for the editor."""
        self._log_operation("edit_page", page_id=page_id)
        self._emit_started("edit_page")
        self.runner.submit(
            lambda: self.api_client.get(f"{PAGES_COLLECTION}/{page_id}"),
            self._on_page_loaded,
            self._on_load_error
        )

    def _on_page_loaded(self, body: Any):
        entity = body.get("page") if isinstance(body, dict) else None
        if not isinstance(entity, dict):
            self._emit_error("edit_page", tr("error.api.invalid_response"))
            self.error_changed.emit(tr("error.api.invalid_response"))
            return
        self._emit_completed("edit_page", True)
        self.editor_requested.emit(entity)

    def _on_load_error(self, error: Exception):
        message = map_exception(error, context="load page")
        self._emit_error("edit_page", message)
        if is_auth_error(error):
            self.auth_required.emit()
        else:
            self.error_changed.emit(message)

    def editor_finished(self, saved: bool, entity: Optional[Dict[str, Any]] = None):
        """Called when the editor closes; a save refreshes the list."""
        if not saved:
            return
        logger.info(f"Page saved: {(entity or {}).get('id')}")
        self.notice.emit(tr("wizard.saved"))
        self.list.refresh()

    # ==================== Deletion ====================

    def delete_page(self, page_id: str):
        self.list.delete_item(page_id)
