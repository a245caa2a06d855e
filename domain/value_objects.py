"""
Domain value objects: identifiers and the timestamp wire layout.
"""

import re
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from domain.errors import (
    CANNOT_PARSE_TIME_LAYOUT,
    ID_MUST_BE_UUID,
    ID_MUST_BE_VALID_UUID,
    invalid_argument,
)

NIL_UUID = UUID(int=0)

# Fixed textual layout, e.g. 2024-01-01T00:00:00.000Z (always UTC, millisecond precision)
TIME_LAYOUT = "%Y-%m-%dT%H:%M:%S.%fZ"
_TIME_LAYOUT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

# Accepted identifier forms: canonical 8-4-4-4-12, braced, urn:uuid: prefixed, or 32 bare hex digits
_UUID_CANONICAL = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
_UUID_RE = re.compile(
    r"(?:" + _UUID_CANONICAL
    + r"|\{" + _UUID_CANONICAL + r"\}"
    + r"|urn:uuid:" + _UUID_CANONICAL
    + r"|[0-9a-fA-F]{32})"
)


def parse_uuid(raw: Optional[str]) -> UUID:
    """
    Parse an externally supplied identifier.

    Args:
        raw: Identifier as received from the caller

    Returns:
        Parsed UUID

    Raises:
        DomainError: INVALID_ARGUMENT when the value is not a UUID, or when it
            is the all-zero (nil) UUID. The two cases carry distinct messages.

    Examples:
        >>> parse_uuid("9b2f6c1e-8a43-4d4c-9f43-3f1b2a6d7e10")
        UUID('9b2f6c1e-8a43-4d4c-9f43-3f1b2a6d7e10')
    """
    if not isinstance(raw, str) or not _UUID_RE.fullmatch(raw):
        raise invalid_argument(ID_MUST_BE_UUID)

    try:
        value = UUID(raw)
    except ValueError as e:
        raise invalid_argument(ID_MUST_BE_UUID, e)

    if value == NIL_UUID:
        raise invalid_argument(ID_MUST_BE_VALID_UUID)

    return value


def parse_timestamp(raw: str) -> datetime:
    """Parse a timestamp in TIME_LAYOUT into an aware UTC datetime."""
    if not _TIME_LAYOUT_RE.match(raw):
        raise invalid_argument(CANNOT_PARSE_TIME_LAYOUT)

    try:
        parsed = datetime.strptime(raw, TIME_LAYOUT)
    except ValueError as e:
        raise invalid_argument(CANNOT_PARSE_TIME_LAYOUT, e)

    return parsed.replace(tzinfo=timezone.utc)


def parse_optional_timestamp(raw: Optional[str]) -> Optional[datetime]:
    """Blank or missing values mean "no timestamp"."""
    if raw is None or not raw.strip():
        return None
    return parse_timestamp(raw)


def format_timestamp(value: datetime) -> str:
    """Render a datetime in TIME_LAYOUT. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    # %Y does not zero-pad years before 1000
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def format_optional_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return format_timestamp(value)
