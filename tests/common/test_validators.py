from datetime import date, datetime

import pytest

from commute_payroll.attendance.model import AttendanceRecord
from commute_payroll.common.validators import ensure_unique_days, require_amounts, validate_record
from commute_payroll.core.exceptions import InvalidInputError


def test_check_out_without_check_in_is_invalid():
    rec = AttendanceRecord(employee_id=1, date=date(2025, 1, 1), check_out="18:00")
    with pytest.raises(InvalidInputError):
        validate_record(rec)


def test_open_break_on_checked_out_record_is_invalid():
    rec = AttendanceRecord(
        employee_id=1,
        date=date(2025, 1, 1),
        check_in="09:00",
        check_out="18:00",
        break_start=datetime(2025, 1, 1, 12, 0),
    )
    with pytest.raises(InvalidInputError):
        validate_record(rec)


def test_break_minutes_capped_at_one_day():
    rec = AttendanceRecord(employee_id=1, date=date(2025, 1, 1), check_in="09:00", total_break_minutes=1441)
    with pytest.raises(InvalidInputError):
        validate_record(rec)


def test_duplicate_employee_date_rejected():
    d = date(2025, 1, 1)
    records = [
        AttendanceRecord(employee_id=1, date=d, check_in="09:00"),
        AttendanceRecord(employee_id=1, date=d, check_in="10:00"),
    ]
    with pytest.raises(InvalidInputError):
        ensure_unique_days(records)


def test_require_amounts_defaults_and_rejects_unknown():
    assert require_amounts({"meal": 5}, ("meal", "bonus"), "allowances") == {"meal": 5.0, "bonus": 0.0}
    with pytest.raises(InvalidInputError):
        require_amounts({"tips": 1}, ("meal",), "allowances")
    with pytest.raises(InvalidInputError):
        require_amounts({"meal": -1}, ("meal",), "allowances")
