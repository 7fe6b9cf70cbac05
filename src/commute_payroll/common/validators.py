from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..core.exceptions import InvalidInputError
from .time_math import check_break_minutes, parse_time


def require_non_negative(value, field_name: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{field_name} must be a number, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{field_name} must be >= 0, got {value}")
    return float(value)


def require_amounts(values: Optional[Mapping[str, float]], allowed: Iterable[str], kind: str) -> dict[str, float]:
    """Validate an allowance/deduction map; missing keys default to 0."""
    allowed = tuple(allowed)
    values = dict(values or {})
    unknown = sorted(set(values) - set(allowed))
    if unknown:
        raise InvalidInputError(f"unknown {kind} keys: {', '.join(unknown)}")
    return {key: require_non_negative(values.get(key), f"{kind}.{key}") for key in allowed}


def validate_record(record) -> None:
    """Check one AttendanceRecord before it is used in a calculation."""
    where = f"record {record.employee_id}/{record.date}"
    if record.check_out and not record.check_in:
        raise InvalidInputError(f"{where}: check-out without check-in")
    if record.check_in:
        parse_time(record.check_in)
    if record.check_out:
        parse_time(record.check_out)
    if record.break_start is not None and record.check_out:
        raise InvalidInputError(f"{where}: open break on a checked-out record")
    try:
        check_break_minutes(record.total_break_minutes)
    except InvalidInputError as exc:
        raise InvalidInputError(f"{where}: {exc}") from exc


def ensure_unique_days(records) -> None:
    """At most one record per (employee_id, date)."""
    seen = set()
    for r in records:
        key = (r.employee_id, r.date)
        if key in seen:
            raise InvalidInputError(f"duplicate attendance record for employee {r.employee_id} on {r.date}")
        seen.add(key)
