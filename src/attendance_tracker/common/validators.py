from __future__ import annotations

import re

from ..core.constants import EMAIL_PATTERN, FIELD_DELIMITER, PERSON_ID_PATTERN
from ..core.exceptions import FormatError, ValidationError

_PERSON_ID_RE = re.compile(PERSON_ID_PATTERN)
_EMAIL_RE = re.compile(EMAIL_PATTERN)


def require_non_empty(value: str, field_name: str) -> str:
    """Reject empty or whitespace-only values; the value is returned unchanged."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def require_person_id(value: str) -> str:
    if not _PERSON_ID_RE.match(value):
        raise FormatError("Invalid ID format. Use only alphanumeric characters.")
    return value


def require_email(value: str) -> str:
    if not _EMAIL_RE.match(value):
        raise FormatError("Invalid email format")
    return value


def require_plain_field(value: str, field_name: str) -> str:
    # Stored records are unquoted, so the delimiter and line breaks cannot appear in a value.
    if FIELD_DELIMITER in value or "\n" in value or "\r" in value:
        raise FormatError(f"{field_name} must not contain commas or line breaks")
    return value
