# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from typing import Any, Optional, Union
import re
import secrets
import string
import uuid


TEMP_ID_PREFIX = "tmp-"

# ECMAScript whitespace, so slugs match the ones the web site builds
_SLUG_SPACE_CLASS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_SLUG_INVALID_CHARS = re.compile(r"[^a-z0-9" + _SLUG_SPACE_CLASS + r"-]")
_SLUG_WHITESPACE = re.compile(r"[" + _SLUG_SPACE_CLASS + r"]+")
_SLUG_HYPHENS = re.compile(r"-+")
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_TIME_SLOT_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.IGNORECASE)

SECURE_KEY_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def slugify(text: Optional[str]) -> str:
    """
    Build a URL slug from a title.

    Lowercases, drops everything outside [a-z0-9], whitespace and '-',
    turns whitespace runs into a single hyphen, collapses repeated hyphens
    and trims hyphens from both ends.

    Example:
        slugify("Annual University Fair 2025!") -> "annual-university-fair-2025"
    """
    if not text:
        return ""

    slug = text.lower()
    slug = _SLUG_INVALID_CHARS.sub("", slug)
    slug = _SLUG_WHITESPACE.sub("-", slug)
    slug = _SLUG_HYPHENS.sub("-", slug)
    return slug.strip("-")


def generate_temp_id() -> str:
    """Generate a local identifier for rows not yet saved on the server."""
    return f"{TEMP_ID_PREFIX}{uuid.uuid4().hex[:12]}"


def is_temp_id(value: Any) -> bool:
    """Check if an identifier was generated locally by generate_temp_id()."""
    return isinstance(value, str) and value.startswith(TEMP_ID_PREFIX)


def generate_secure_key(length: int = 32) -> str:
    """Generate a random alphanumeric key (used for JWT/encryption secrets)."""
    return "".join(secrets.choice(SECURE_KEY_ALPHABET) for _ in range(length))


def parse_time_slot(slot: str) -> str:
    """
    Convert a 12-hour time slot label to 24-hour HH:MM.

    Args:
        slot: Label such as "9:00 AM" or "2:30 PM"

    Returns:
        "09:00", "14:30", ...

    Raises:
        ValueError: if the label is not a valid 12-hour time
    """
    match = _TIME_SLOT_PATTERN.match((slot or "").strip())
    if not match:
        raise ValueError(f"Invalid time slot: {slot!r}")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3).upper()

    if not 1 <= hours <= 12 or not 0 <= minutes < 60:
        raise ValueError(f"Invalid time slot: {slot!r}")

    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0

    return f"{hours:02d}:{minutes:02d}"


def is_valid_email(value: Optional[str]) -> bool:
    """Loose email check, same strength as the web forms."""
    if not value:
        return False
    return bool(_EMAIL_PATTERN.match(value.strip()))


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def format_number(value: Optional[Union[int, float, str]], decimals: int = 0) -> str:
    """
    Format a number with thousands separator.

    Args:
        value: Number to format (numeric strings from the API are accepted)
        decimals: Decimal places

    Returns:
        Formatted number string
    """
    if value is None or value == "":
        return ""

    try:
        if decimals == 0:
            return f"{int(float(value)):,}"
        else:
            return f"{float(value):,.{decimals}f}"
    except (ValueError, TypeError):
        return str(value)
