from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.exceptions import InvalidInputError


def parse_iso_date(value: Union[str, date, datetime]) -> date:
    """Parse YYYY-MM-DD string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # a timestamp suffix is allowed, trailing digits or junk are not
    if len(text) > 10 and text[10] not in "T ":
        raise InvalidInputError(f"invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidInputError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidInputError(f"invalid timestamp {value!r}") from exc


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()
