# -*- coding: utf-8 -*-
"""
List/Filter Controller
======================
Keeps a remote, paginated collection in step with a set of filter fields.

Handles:
- Filter field updates (any change other than the page resets to page 1)
- Query-string construction from a declarative FilterSchema
- Last-write-wins: responses older than the newest applied one are dropped
- Deleting rows through RemoteSync
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController
from services.error_mapper import is_auth_error, map_exception
from services.remote_sync import RemoteSync, SyncResult
from utils.logger import get_logger

logger = get_logger(__name__)

FILTER_KINDS = ("text", "choice", "set", "range", "flag")
ALL = "all"


@dataclass
class FilterField:
    """
    One filter of a list page.

    Kinds:
        text: sent when non-empty
        choice: ALL (or the default) means no constraint unless always_send
        set: ordered selection, sent comma-joined
        range: (low, high); both ends are sent when it differs from bounds,
            or each narrowed end on its own with split_bounds
        flag: None means no constraint, otherwise "true"/"false"
    """
    name: str
    kind: str = "text"
    default: Any = None
    param: Optional[str] = None
    min_param: Optional[str] = None
    max_param: Optional[str] = None
    bounds: Optional[Tuple[float, float]] = None
    always_send: bool = False
    split_bounds: bool = False
    label: str = ""
    facet: Optional[str] = None
    choices: Tuple = ()

    def __post_init__(self):
        if self.kind not in FILTER_KINDS:
            raise ValueError(f"Unknown filter kind '{self.kind}' for '{self.name}'")
        if self.param is None:
            self.param = self.name
        if self.default is None:
            if self.kind == "text":
                self.default = ""
            elif self.kind == "choice":
                self.default = ALL
            elif self.kind == "set":
                self.default = []
            elif self.kind == "range":
                if self.bounds is None:
                    raise ValueError(f"Range filter '{self.name}' needs bounds")
                self.default = tuple(self.bounds)
        if self.kind == "range":
            self.min_param = self.min_param or f"min{self.name[:1].upper()}{self.name[1:]}"
            self.max_param = self.max_param or f"max{self.name[:1].upper()}{self.name[1:]}"

    def serialize(self, value: Any) -> Dict[str, str]:
        """Query parameters for one value; empty when unconstrained."""
        if self.kind == "text":
            text = (value or "").strip()
            return {self.param: text} if text else {}

        if self.kind == "choice":
            if value in (None, ""):
                return {}
            if not self.always_send and (value == ALL or value == self.default):
                return {}
            return {self.param: str(value)}

        if self.kind == "set":
            return {self.param: ",".join(str(v) for v in value)} if value else {}

        if self.kind == "range":
            low, high = value
            if self.split_bounds:
                params = {}
                if low > self.bounds[0]:
                    params[self.min_param] = _number(low)
                if high < self.bounds[1]:
                    params[self.max_param] = _number(high)
                return params
            if (low, high) == tuple(self.bounds):
                return {}
            return {self.min_param: _number(low), self.max_param: _number(high)}

        # flag
        if value is None:
            return {}
        return {self.param: "true" if value else "false"}


def _number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


@dataclass
class FilterState:
    """Current filter values plus the 1-based page."""
    fields: Dict[str, Any]
    page: int = 1

    def copy(self) -> 'FilterState':
        return FilterState(fields=copy.deepcopy(self.fields), page=self.page)


@dataclass
class Pagination:
    current_page: int = 1
    total_pages: int = 1
    total: int = 0

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1


@dataclass
class ListResult:
    """One fetched page: items, pagination, facets and summary stats."""
    items: List[Dict[str, Any]] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
    facets: Dict[str, Any] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)


@dataclass
class FilterSchema:
    """Filter fields and response shape of one collection endpoint."""
    resource: str
    fields: List[FilterField]
    items_key: str = "items"
    page_size: Optional[int] = None
    send_limit: bool = True

    def __post_init__(self):
        if self.page_size is None:
            self.page_size = Config.LIST_PAGE_SIZE

    def field(self, name: str) -> FilterField:
        for filter_field in self.fields:
            if filter_field.name == name:
                return filter_field
        raise KeyError(f"{self.resource} has no filter '{name}'")

    def defaults(self) -> Dict[str, Any]:
        return {f.name: copy.deepcopy(f.default) for f in self.fields}

    def to_query_params(self, state: FilterState) -> Dict[str, str]:
        params = {"page": str(state.page)}
        if self.send_limit:
            params["limit"] = str(self.page_size)
        for filter_field in self.fields:
            params.update(filter_field.serialize(state.fields.get(filter_field.name, filter_field.default)))
        return params

    def parse_result(self, body: Any, requested_page: int = 1) -> ListResult:
        """Read items, pagination, facets and stats out of a list response."""
        if not isinstance(body, dict):
            return ListResult(pagination=Pagination(current_page=requested_page))

        items = body.get(self.items_key)
        if items is None:
            items = body.get("items") or []

        raw = body.get("pagination") or {}
        total = raw.get("total", raw.get("totalCount", len(items)))
        pagination = Pagination(
            current_page=int(raw.get("page") or raw.get("currentPage") or requested_page),
            total_pages=max(1, int(raw.get("totalPages") or 1)),
            total=int(total or 0),
        )

        return ListResult(
            items=list(items),
            pagination=pagination,
            facets=body.get("facets") or body.get("filters") or {},
            summary=body.get("stats") or body.get("statistics") or {},
        )


class ListFilterController(BaseController):
    """
    Controller for a filtered, paginated list page.

    Every mutation fetches. Results are applied in request order, never in
    arrival order.
    """

    # Signals
    results_changed = pyqtSignal(object)  # ListResult
    filters_changed = pyqtSignal(object)  # FilterState
    error_changed = pyqtSignal(str)
    auth_required = pyqtSignal()
    item_deleted = pyqtSignal(str)

    def __init__(self, schema: FilterSchema, api_client=None, runner=None,
                 sync: Optional[RemoteSync] = None, parent=None):
        super().__init__(runner=runner, parent=parent)
        self.schema = schema
        self._api_client = api_client
        self._sync = sync
        self.state = FilterState(fields=schema.defaults())
        self.result = ListResult()
        self._request_seq = 0
        self._applied_seq = 0

    @property
    def api_client(self):
        if self._api_client is None:
            from services.api_client import get_api_client
            self._api_client = get_api_client()
        return self._api_client

    @property
    def sync(self) -> RemoteSync:
        if self._sync is None:
            self._sync = RemoteSync(self.schema.resource, api_client=self.api_client)
        return self._sync

    @property
    def page(self) -> int:
        return self.state.page

    # ==================== Mutations ====================

    def set_field(self, name: str, value: Any) -> int:
        """Set one filter, go back to page 1 and fetch."""
        if name == "page":
            return self.set_page(value)
        self.schema.field(name)
        self.state.fields[name] = value
        self.state.page = 1
        self.filters_changed.emit(self.state.copy())
        return self.refresh()

    def toggle_set_member(self, name: str, value: Any) -> int:
        """Add value to a set filter if absent, else remove it."""
        members = list(self.state.fields.get(name) or [])
        if value in members:
            members.remove(value)
        else:
            members.append(value)
        return self.set_field(name, members)

    def set_page(self, page: int) -> int:
        """Move to another page, keeping the filters."""
        self.state.page = max(1, int(page))
        self.filters_changed.emit(self.state.copy())
        return self.refresh()

    def clear_all(self) -> int:
        """Reset every filter to its default and go back to page 1."""
        self.state = FilterState(fields=self.schema.defaults())
        self.filters_changed.emit(self.state.copy())
        return self.refresh()

    def has_active_filters(self) -> bool:
        defaults = self.schema.defaults()
        return any(self.state.fields.get(name) != value for name, value in defaults.items())

    # ==================== Fetching ====================

    def query_params(self) -> Dict[str, str]:
        return self.schema.to_query_params(self.state)

    def refresh(self) -> int:
        """
        Fetch the page for the current filters.

        Returns:
            Sequence number of the issued request
        """
        self._request_seq += 1
        seq = self._request_seq
        params = self.query_params()
        page = self.state.page
        self._log_operation("fetch", resource=self.schema.resource, seq=seq)
        self._emit_started("fetch")

        self.runner.submit(
            lambda: self.api_client.get(self.schema.resource, params=params),
            lambda body: self._on_fetched(seq, page, body),
            lambda error: self._on_fetch_error(seq, error)
        )
        return seq

    def _on_fetched(self, seq: int, page: int, body: Any):
        if seq <= self._applied_seq:
            logger.debug(f"Discarding stale {self.schema.resource} response #{seq} "
                         f"(#{self._applied_seq} already shown)")
            return

        self._applied_seq = seq
        self.result = self.schema.parse_result(body, requested_page=page)
        self._set_error("")
        self.results_changed.emit(self.result)
        if seq == self._request_seq:
            self._emit_completed("fetch", True)

    def _on_fetch_error(self, seq: int, error: Exception):
        if seq != self._request_seq:
            logger.debug(f"Ignoring failure of superseded {self.schema.resource} request #{seq}")
            return

        # Older responses still in flight must not replace the error
        self._applied_seq = max(self._applied_seq, seq)
        message = map_exception(error, context=f"fetch {self.schema.resource}")
        self._emit_error("fetch", message)
        self._report(message, is_auth_error(error))

    # ==================== Deletion ====================

    def delete_item(self, entity_id: str):
        """Delete one row on the server, then refetch."""
        self._log_operation("delete", entity_id=entity_id)
        self.runner.submit(
            lambda: self.sync.delete(entity_id),
            lambda result: self._on_deleted(entity_id, result),
            lambda error: self._on_delete_error(error)
        )

    def _on_deleted(self, entity_id: str, result: SyncResult):
        if not result.ok:
            self._set_error(result.message)
            self._report(result.message, result.auth_required)
            return

        self.item_deleted.emit(str(entity_id))
        self.refresh()

    def _on_delete_error(self, error: Exception):
        message = map_exception(error, context=f"delete {self.schema.resource}")
        self._set_error(message)
        self._report(message, is_auth_error(error))

    def _report(self, message: str, auth_required: bool):
        # An expired session goes to the login prompt, not the error banner
        if auth_required:
            self.auth_required.emit()
        else:
            self.error_changed.emit(message)
