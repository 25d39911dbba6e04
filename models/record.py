# -*- coding: utf-8 -*-
"""
Helpers shared by the typed records.

Wizard aggregates use snake_case keys; the REST API speaks camelCase, and a
few admin endpoints answer with raw snake_case database rows. pick() reads a
value under either spelling.
"""

from dataclasses import asdict, fields
from typing import Any, Dict, Optional


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def pick(data: Dict[str, Any], name: str, default: Any = None) -> Any:
    """Read `name` (snake_case) or its camelCase spelling from an API dict."""
    if name in data and data[name] is not None:
        return data[name]
    camel = camel_case(name)
    if camel in data and data[camel] is not None:
        return data[camel]
    return default


def optional_number(value: Any) -> Optional[float]:
    """Blank inputs mean 'not set'."""
    if value is None or value == "":
        return None
    number = float(value)
    return int(number) if number.is_integer() else number


def clean_strings(values) -> list:
    """Drop blank rows of a free-text list (requirements, objectives...)."""
    return [v.strip() for v in values or [] if isinstance(v, str) and v.strip()]


class Record:
    """Mixin for dataclass records built from a wizard aggregate."""

    @classmethod
    def from_aggregate(cls, data: Dict[str, Any]):
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def to_aggregate(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("id", None)
        return data
