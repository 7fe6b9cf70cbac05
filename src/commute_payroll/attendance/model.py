from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import parse_iso_date, parse_timestamp
from ..common.time_math import check_break_minutes
from ..core.exceptions import InvalidInputError

EmployeeId = Union[int, str]


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's attendance for one calendar date.

    Times are zero-padded ``HH:MM`` strings. A record is created on the first
    check-in of the day and completed by check-out; ``break_start`` marks an
    open break.
    """

    employee_id: EmployeeId
    date: date
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    total_break_minutes: int = 0
    break_start: Optional[datetime] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.check_in and self.check_out)

    @property
    def on_break(self) -> bool:
        return self.break_start is not None and not self.check_out

    @classmethod
    def from_mapping(cls, doc: Mapping[str, Any]) -> "AttendanceRecord":
        """Build from a persistence document (snake_case or camelCase keys)."""

        def pick(*keys):
            for k in keys:
                if k in doc and doc[k] is not None:
                    return doc[k]
            return None

        employee_id = pick("employee_id", "employeeId", "userName", "user_name")
        if employee_id is None:
            raise InvalidInputError("attendance document has no employee id")
        raw_date = pick("date", "work_date")
        if raw_date is None:
            raise InvalidInputError(f"attendance document for {employee_id} has no date")

        return cls(
            employee_id=employee_id,
            date=parse_iso_date(raw_date),
            check_in=pick("check_in", "checkIn") or None,
            check_out=pick("check_out", "checkOut") or None,
            total_break_minutes=_break_minutes(pick("total_break_minutes", "totalBreakMinutes")),
            break_start=parse_timestamp(pick("break_start", "breakStart")),
        )


def _break_minutes(value: Any) -> int:
    # stored documents may carry "30" or 30.0; anything fractional or non-numeric is rejected
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if not text.isdigit():
            raise InvalidInputError(f"break minutes must be an integer, got {value!r}")
        value = int(text)
    elif isinstance(value, float) and value.is_integer():
        value = int(value)
    return check_break_minutes(value)


@dataclass(frozen=True)
class Employee:
    """Employee profile as supplied by the caller (never looked up here)."""

    employee_id: EmployeeId
    name: str
    hourly_rate: Optional[float] = None
