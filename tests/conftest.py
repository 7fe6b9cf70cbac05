from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from commute_payroll.attendance.model import AttendanceRecord, Employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 31, 18, 0)


@pytest.fixture
def employee() -> Employee:
    return Employee(employee_id=1, name="A", hourly_rate=10000)


@pytest.fixture
def make_week():
    """Build consecutive-day records for one employee starting on a Monday."""

    def _make(shifts, *, employee_id=1, start=date(2025, 3, 3)):
        records = []
        for i, shift in enumerate(shifts):
            check_in, check_out, break_minutes = shift
            records.append(
                AttendanceRecord(
                    employee_id=employee_id,
                    date=start + timedelta(days=i),
                    check_in=check_in,
                    check_out=check_out,
                    total_break_minutes=break_minutes,
                )
            )
        return records

    return _make
