# -*- coding: utf-8 -*-
"""
Remote Sync - create-or-update of one entity against a REST collection.

save(None, payload)    -> POST /collection
save("42", payload)    -> PUT  /collection/42
delete("42")           -> DELETE /collection/42

Every failure is folded into a SyncResult; nothing is raised and nothing is
retried. Retrying is the user's decision (re-submit).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from services.error_mapper import is_auth_error, map_exception
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SyncResult:
    """Normalized outcome of a remote write."""
    ok: bool
    entity: Optional[Dict[str, Any]] = None
    message: str = ""
    auth_required: bool = False
    status_code: Optional[int] = None

    @classmethod
    def success(cls, entity: Optional[Dict[str, Any]]) -> 'SyncResult':
        return cls(ok=True, entity=entity or {})

    @classmethod
    def failure(cls, message: str, auth_required: bool = False,
                status_code: Optional[int] = None) -> 'SyncResult':
        return cls(ok=False, message=message, auth_required=auth_required,
                   status_code=status_code)


class RemoteSync:
    """Writes one entity type to its REST collection."""

    def __init__(self, collection: str, api_client=None, entity_key: Optional[str] = None):
        """
        Args:
            collection: Collection path, e.g. "/api/admin/pages"
            api_client: Client exposing post/put/delete (defaults to the shared client)
            entity_key: Key wrapping the entity in responses, e.g. "page"
        """
        self.collection = collection.rstrip('/')
        self.entity_key = entity_key
        self._api_client = api_client

    @property
    def api_client(self):
        if self._api_client is None:
            from services.api_client import get_api_client
            self._api_client = get_api_client()
        return self._api_client

    def save(self, entity_id: Optional[str], payload: Dict[str, Any]) -> SyncResult:
        """POST when entity_id is None, PUT to the entity's URL otherwise."""
        if entity_id is None:
            operation = f"create {self.collection}"
            call = lambda: self.api_client.post(self.collection, json_data=payload)
        else:
            operation = f"update {self.collection}/{entity_id}"
            call = lambda: self.api_client.put(f"{self.collection}/{entity_id}", json_data=payload)

        return self._execute(operation, call)

    def delete(self, entity_id: str) -> SyncResult:
        """DELETE the entity."""
        return self._execute(
            f"delete {self.collection}/{entity_id}",
            lambda: self.api_client.delete(f"{self.collection}/{entity_id}")
        )

    def _execute(self, operation: str, call) -> SyncResult:
        try:
            body = call()
        except (ApiException, NetworkException) as e:
            message = map_exception(e, context=operation)
            auth_required = is_auth_error(e)
            status_code = getattr(e, "status_code", None)
            logger.warning(f"RemoteSync {operation} failed: {message}")
            return SyncResult.failure(message, auth_required=auth_required, status_code=status_code)

        entity = self._unwrap(body)
        logger.info(f"RemoteSync {operation} succeeded")
        return SyncResult.success(entity)

    def _unwrap(self, body: Any) -> Dict[str, Any]:
        if isinstance(body, dict):
            if self.entity_key and isinstance(body.get(self.entity_key), dict):
                return body[self.entity_key]
            return body
        return {}
