# -*- coding: utf-8 -*-
"""
Wizard Context - Owns the aggregate a wizard builds across its steps.

Provides unified interface for:
- Field updates (with derived slug and dependent-field resets)
- Nested group/item lists (modules/lessons, sections/questions)
- Edit mode (pre-populated from an existing entity)
- Reconciliation with the server after a successful save
"""

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Type

from utils.helpers import generate_temp_id, is_temp_id, slugify
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class GroupSchema:
    """Shape of one nested list field: groups that each hold items."""
    items_key: str
    group_defaults: Dict[str, Any] = field(default_factory=dict)
    item_defaults: Dict[str, Any] = field(default_factory=dict)


class WizardContext:
    """
    Base class for wizard context.

    Subclasses describe their aggregate through class attributes:
        record_type: Typed record converting aggregate <-> API payload
        slug_source: Field whose edits derive the slug (e.g. "title")
        slug_field: Field receiving the derived slug
        reset_on_change: {field: {dependent_field: value}} reset when field changes
        group_schemas: {field: GroupSchema} for nested lists
    """

    record_type: Optional[Type] = None
    slug_source: Optional[str] = None
    slug_field: str = "slug"
    reset_on_change: Dict[str, Dict[str, Any]] = {}
    group_schemas: Dict[str, GroupSchema] = {}

    def __init__(self, data: Optional[Dict[str, Any]] = None, entity_id: Optional[str] = None):
        """
        Initialize the context.

        Args:
            data: Initial aggregate values (merged over default_data())
            entity_id: Server id when editing an existing entity
        """
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.entity_id: Optional[str] = entity_id
        self.current_step_index: int = 0
        self.completed_steps: set = set()

        self.data: Dict[str, Any] = self.default_data()
        if data:
            self.data.update(copy.deepcopy(data))

        self.persisted_slug: Optional[str] = None
        if entity_id is not None and self.slug_source:
            self.persisted_slug = self.data.get(self.slug_field) or None
        self._slug_locked = False

    # =========================================================================
    # Construction
    # =========================================================================

    def default_data(self) -> Dict[str, Any]:
        """Initial aggregate of a new entity. Override in subclasses."""
        return {name: [] for name in self.group_schemas}

    @classmethod
    def from_entity(cls, entity: Dict[str, Any]) -> 'WizardContext':
        """Build a context in edit mode from an entity returned by the API."""
        if cls.record_type is None:
            raise NotImplementedError(f"{cls.__name__} has no record type for edit mode")
        record = cls.record_type.from_api(entity)
        context = cls(data=record.to_aggregate(), entity_id=entity.get("id"))
        logger.info(f"{cls.__name__} opened in edit mode for {context.entity_id}")
        return context

    @property
    def is_edit_mode(self) -> bool:
        return self.entity_id is not None

    # =========================================================================
    # Plain data access
    # =========================================================================

    def get_data(self, key: str, default: Any = None) -> Any:
        """Get data from the context."""
        return self.data.get(key, default)

    def update_data(self, key: str, value: Any):
        """Set one value with no derivation rules."""
        self.data[key] = value
        self.updated_at = datetime.now()

    def snapshot(self) -> Dict[str, Any]:
        """Deep copy of the aggregate."""
        return copy.deepcopy(self.data)

    def mark_step_completed(self, step_index: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step is completed."""
        return step_index in self.completed_steps

    # =========================================================================
    # Field updates
    # =========================================================================

    def should_derive_slug(self) -> bool:
        """Slugs follow the title only for unsaved entities whose slug was not typed by hand."""
        return self.slug_source is not None and not self.is_edit_mode and not self._slug_locked

    def update_field(self, name: str, value: Any) -> Dict[str, Any]:
        """
        Merge one value into the aggregate.

        Derived and reset fields are merged together with the source value.

        Returns:
            Every key that was written, with its new value
        """
        changes = {name: value}

        if self.slug_source and name == self.slug_field:
            # Clearing the slug hands it back to the title
            self._slug_locked = bool(value)
        elif name == self.slug_source and self.should_derive_slug():
            changes[self.slug_field] = slugify(value)

        if self.data.get(name) != value:
            for dependent, reset_value in self.reset_on_change.get(name, {}).items():
                changes[dependent] = copy.deepcopy(reset_value)

        self.data.update(changes)
        self.updated_at = datetime.now()
        return changes

    # =========================================================================
    # List fields (lists of strings)
    # =========================================================================

    def append_list_value(self, name: str, value: Any = "") -> int:
        values = list(self.data.get(name) or [])
        values.append(value)
        self.update_field(name, values)
        return len(values) - 1

    def set_list_value(self, name: str, index: int, value: Any):
        values = list(self.data.get(name) or [])
        values[index] = value
        self.update_field(name, values)

    def remove_list_value(self, name: str, index: int):
        values = list(self.data.get(name) or [])
        del values[index]
        self.update_field(name, values)

    # =========================================================================
    # Groups and items
    # =========================================================================

    def groups(self, field_name: str) -> List[Dict[str, Any]]:
        return self.data.setdefault(field_name, [])

    def add_group(self, field_name: str, values: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Append a group with a temporary id; order_index is the current group count."""
        schema = self._schema(field_name)
        groups = self.groups(field_name)
        group = copy.deepcopy(schema.group_defaults)
        group.update(values or {})
        group["id"] = generate_temp_id()
        group["order_index"] = len(groups)
        group[schema.items_key] = []
        groups.append(group)
        self.updated_at = datetime.now()
        logger.debug(f"Added {field_name} group {group['id']}")
        return group

    def update_group(self, field_name: str, group_id: str, **values):
        self._find_group(field_name, group_id).update(values)
        self.updated_at = datetime.now()

    def remove_group(self, field_name: str, group_id: str):
        """Remove a group. Remaining order_index values keep their gaps."""
        group = self._find_group(field_name, group_id)
        self.groups(field_name).remove(group)
        self.updated_at = datetime.now()

    def add_item(self, field_name: str, group_id: str,
                 values: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        schema = self._schema(field_name)
        items = self._find_group(field_name, group_id).setdefault(schema.items_key, [])
        item = copy.deepcopy(schema.item_defaults)
        item.update(values or {})
        item["id"] = generate_temp_id()
        item["order_index"] = len(items)
        items.append(item)
        self.updated_at = datetime.now()
        return item

    def update_item(self, field_name: str, group_id: str, item_id: str, **values):
        self._find_item(field_name, group_id, item_id).update(values)
        self.updated_at = datetime.now()

    def remove_item(self, field_name: str, group_id: str, item_id: str):
        schema = self._schema(field_name)
        group = self._find_group(field_name, group_id)
        group[schema.items_key].remove(self._find_item(field_name, group_id, item_id))
        self.updated_at = datetime.now()

    def _schema(self, field_name: str) -> GroupSchema:
        try:
            return self.group_schemas[field_name]
        except KeyError:
            raise KeyError(f"'{field_name}' is not a group field of {self.__class__.__name__}")

    def _find_group(self, field_name: str, group_id: str) -> Dict[str, Any]:
        for group in self.groups(field_name):
            if group["id"] == group_id:
                return group
        raise KeyError(f"No {field_name} group with id {group_id}")

    def _find_item(self, field_name: str, group_id: str, item_id: str) -> Dict[str, Any]:
        schema = self._schema(field_name)
        for item in self._find_group(field_name, group_id).get(schema.items_key, []):
            if item["id"] == item_id:
                return item
        raise KeyError(f"No item {item_id} in {field_name} group {group_id}")

    # =========================================================================
    # Server round trip
    # =========================================================================

    def to_payload(self) -> Dict[str, Any]:
        """Convert the aggregate into the API payload of record_type."""
        if self.record_type is None:
            return self.snapshot()
        return self.record_type.from_aggregate(self.data).to_api_payload()

    def mark_persisted(self, entity: Optional[Dict[str, Any]]):
        """
        Reconcile with the entity the server returned.

        Records the server id and slug, and replaces temporary group/item ids
        with server ids by position.
        """
        entity = entity or {}
        if entity.get("id") is not None:
            self.entity_id = str(entity["id"])

        if self.slug_source:
            self.persisted_slug = entity.get(self.slug_field) or self.data.get(self.slug_field) or None

        for field_name, schema in self.group_schemas.items():
            self._adopt_server_ids(self.groups(field_name), entity.get(field_name), schema.items_key)

        self.updated_at = datetime.now()
        logger.info(f"{self.__class__.__name__} persisted as {self.entity_id}")

    def _adopt_server_ids(self, local_rows, server_rows, items_key: Optional[str] = None):
        if not isinstance(server_rows, list):
            return
        for local, remote in zip(local_rows, server_rows):
            if not isinstance(remote, dict):
                continue
            if is_temp_id(local.get("id")) and remote.get("id") is not None:
                local["id"] = str(remote["id"])
            if items_key:
                self._adopt_server_ids(local.get(items_key) or [], remote.get(items_key))
