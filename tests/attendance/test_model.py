from datetime import date, datetime

import pytest

from commute_payroll.attendance.model import AttendanceRecord
from commute_payroll.core.exceptions import InvalidInputError


def test_from_mapping_reads_camel_case_document():
    rec = AttendanceRecord.from_mapping(
        {
            "date": "2025-01-02",
            "userName": "kim",
            "checkIn": "09:00",
            "checkOut": None,
            "totalBreakMinutes": 15,
            "breakStart": "2025-01-02T12:00:00",
        }
    )

    assert rec.employee_id == "kim"
    assert rec.date == date(2025, 1, 2)
    assert rec.total_break_minutes == 15
    assert rec.break_start == datetime(2025, 1, 2, 12, 0)
    assert rec.on_break
    assert not rec.is_complete


def test_from_mapping_snake_case_complete_record():
    rec = AttendanceRecord.from_mapping(
        {"employee_id": 7, "date": date(2025, 1, 2), "check_in": "09:00", "check_out": "18:00"}
    )
    assert rec.is_complete
    assert not rec.on_break
    assert rec.total_break_minutes == 0


def test_from_mapping_requires_employee_and_date():
    with pytest.raises(InvalidInputError):
        AttendanceRecord.from_mapping({"date": "2025-01-02"})
    with pytest.raises(InvalidInputError):
        AttendanceRecord.from_mapping({"employeeId": 1})
    with pytest.raises(InvalidInputError):
        AttendanceRecord.from_mapping({"employeeId": 1, "date": "02/01/2025"})


def test_from_mapping_accepts_whole_number_break_values():
    base = {"employeeId": 1, "date": "2025-01-02"}
    assert AttendanceRecord.from_mapping({**base, "totalBreakMinutes": "30"}).total_break_minutes == 30
    assert AttendanceRecord.from_mapping({**base, "totalBreakMinutes": 45.0}).total_break_minutes == 45
    assert AttendanceRecord.from_mapping({**base, "totalBreakMinutes": ""}).total_break_minutes == 0


@pytest.mark.parametrize("bad", ["abc", "30.7", 30.7, -5, 2000, True])
def test_from_mapping_rejects_bad_break_minutes(bad):
    with pytest.raises(InvalidInputError):
        AttendanceRecord.from_mapping({"employeeId": 1, "date": "2025-01-02", "totalBreakMinutes": bad})


@pytest.mark.parametrize("bad", ["2025-03-031", "2025-03-03xyz", "2025-03-03/04"])
def test_from_mapping_rejects_dates_with_trailing_text(bad):
    with pytest.raises(InvalidInputError):
        AttendanceRecord.from_mapping({"employeeId": 1, "date": bad})


def test_from_mapping_accepts_date_with_timestamp_suffix():
    rec = AttendanceRecord.from_mapping({"employeeId": 1, "date": "2025-03-03T09:15:00"})
    assert rec.date == date(2025, 3, 3)
