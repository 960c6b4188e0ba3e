from __future__ import annotations

from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, to_iso


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Any, field_name: str = "date") -> str:
    """Validate a calendar date string and return it zero-padded (YYYY-MM-DD)."""
    text = require_non_empty(value, field_name)
    try:
        parsed = parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date in YYYY-MM-DD format") from None

    normalized = to_iso(parsed)
    if normalized != text:
        # strptime accepts '2024-1-5'; lexical ordering needs zero padding.
        raise ValidationError(f"{field_name} must be a valid date in YYYY-MM-DD format")
    return normalized


def require_status(value: Any) -> AttendanceStatus:
    """Accept an AttendanceStatus, its value ('Present') or its name ('PRESENT')."""
    if isinstance(value, AttendanceStatus):
        return value
    if isinstance(value, str):
        text = value.strip()
        for status in AttendanceStatus:
            if text == status.value or text.upper() == status.name:
                return status
    allowed = ", ".join(s.value for s in AttendanceStatus)
    raise ValidationError(f"status must be one of: {allowed}")


def optional_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()
