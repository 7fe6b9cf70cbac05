from datetime import date, timedelta

import pytest

from commute_payroll.attendance.model import AttendanceRecord
from commute_payroll.common.time_math import format_minutes
from commute_payroll.compliance.checker import ComplianceChecker
from commute_payroll.core.enums import ComplianceCode, ComplianceStatus, ContinuousDaysMode
from commute_payroll.core.exceptions import InvalidInputError
from commute_payroll.core.rules import ComplianceConfig

REGULAR = ("09:00", "18:00", 60)  # 8h


def _week_with_total(total_hours, days=3):
    """Equal-length days starting at midnight adding up to total_hours."""
    minutes = int(total_hours * 60 / days)
    return [("00:00", format_minutes(minutes), 0)] * days


def test_regular_week_is_good(make_week):
    result = ComplianceChecker().check(make_week([REGULAR] * 5), 1)

    assert result.weekly_hours == 40
    assert result.weekly_overtime == 0
    assert result.status == ComplianceStatus.GOOD
    assert result.violations == result.warnings == result.info == ()


def test_fifty_hour_week_is_warning(make_week):
    shifts = [REGULAR] * 5 + [("08:00", "19:00", 60)]  # 40h + 10h
    result = ComplianceChecker().check(make_week(shifts), 1)

    assert result.weekly_hours == 50
    assert result.weekly_overtime == 2
    assert result.continuous_work_days == 6
    assert result.status == ComplianceStatus.WARNING
    assert [i.code for i in result.issues] == [ComplianceCode.WEEKLY_HOURS_WARNING]


def test_fifty_five_hour_week_is_violation(make_week):
    result = ComplianceChecker().check(make_week([("08:00", "20:00", 60)] * 5), 1)

    assert result.weekly_hours == 55
    assert result.weekly_overtime == 15
    assert result.status == ComplianceStatus.VIOLATION
    assert ComplianceCode.WEEKLY_HOURS_EXCEEDED in [i.code for i in result.issues]
    assert len(result.violations) == 1


@pytest.mark.parametrize("total", [40.5, 45, 52])
def test_above_regular_limit_is_never_good(make_week, total):
    result = ComplianceChecker().check(make_week(_week_with_total(total)), 1)
    assert result.weekly_hours == pytest.approx(total)
    assert result.status == ComplianceStatus.WARNING


@pytest.mark.parametrize("total", [52.5, 60, 70])
def test_above_absolute_cap_is_always_violation(make_week, total):
    result = ComplianceChecker().check(make_week(_week_with_total(total)), 1)
    assert result.status == ComplianceStatus.VIOLATION


@pytest.mark.parametrize(
    "day_minutes, status",
    [
        ([300, 755, 545, 800], ComplianceStatus.GOOD),  # exactly 40h
        ([349, 797, 783, 1191], ComplianceStatus.WARNING),  # exactly 52h
        ([300, 755, 545, 801], ComplianceStatus.WARNING),  # 40h 1m
    ],
)
def test_uneven_days_summing_to_a_limit_stay_on_the_limit(make_week, day_minutes, status):
    shifts = [("00:00", format_minutes(m), 0) for m in day_minutes]
    result = ComplianceChecker().check(make_week(shifts), 1)

    assert result.weekly_hours == pytest.approx(sum(day_minutes) / 60)
    assert result.status == status


def test_late_check_out_counts_as_night_work(make_week):
    result = ComplianceChecker().check(make_week([("14:00", "23:00", 60), REGULAR]), 1)

    assert result.night_work_days == 1
    assert len(result.info) == 1
    assert result.status == ComplianceStatus.GOOD


def test_seven_records_exceed_continuous_days(make_week):
    # record count: seven complete records in the week
    result = ComplianceChecker().check(make_week([("09:00", "13:00", 0)] * 7), 1)

    assert result.weekly_hours == 28
    assert result.continuous_work_days == 7
    assert result.status == ComplianceStatus.VIOLATION
    assert [i.code for i in result.issues] == [ComplianceCode.CONTINUOUS_WORK_EXCEEDED]


def test_record_count_ignores_gaps_while_consecutive_run_does_not():
    start = date(2025, 3, 3)
    offsets = [0, 1, 3, 4, 5]
    records = [
        AttendanceRecord(employee_id=1, date=start + timedelta(days=o), check_in="09:00", check_out="18:00", total_break_minutes=60)
        for o in offsets
    ]

    simplified = ComplianceChecker().check(records, 1)
    consecutive = ComplianceChecker(ComplianceConfig(continuous_days_mode=ContinuousDaysMode.CONSECUTIVE_RUN)).check(records, 1)

    assert simplified.continuous_work_days == 5
    assert consecutive.continuous_work_days == 3


def test_optional_continuous_days_warning(make_week):
    checker = ComplianceChecker(ComplianceConfig(continuous_work_warning_days=5))
    result = checker.check(make_week([REGULAR] * 5), 1)

    assert result.status == ComplianceStatus.WARNING
    assert [i.code for i in result.issues] == [ComplianceCode.CONTINUOUS_WORK_WARNING]


def test_incomplete_records_do_not_count(make_week):
    records = make_week([REGULAR]) + [AttendanceRecord(employee_id=1, date=date(2025, 3, 4), check_in="09:00")]
    result = ComplianceChecker().check(records, 1)

    assert result.weekly_hours == 8
    assert result.continuous_work_days == 1


def test_other_employees_are_ignored_and_check_many_groups(make_week):
    records = make_week([REGULAR] * 2, employee_id="a") + make_week([("08:00", "20:00", 60)] * 5, employee_id="b")

    only_a = ComplianceChecker().check(records, "a")
    results = ComplianceChecker().check_many(records)

    assert only_a.weekly_hours == 16
    assert [r.employee_id for r in results] == ["a", "b"]
    assert [r.status for r in results] == [ComplianceStatus.GOOD, ComplianceStatus.VIOLATION]


def test_records_spanning_more_than_a_week_rejected():
    records = [
        AttendanceRecord(employee_id=1, date=date(2025, 3, 3), check_in="09:00", check_out="18:00"),
        AttendanceRecord(employee_id=1, date=date(2025, 3, 10), check_in="09:00", check_out="18:00"),
    ]
    with pytest.raises(InvalidInputError):
        ComplianceChecker().check(records, 1)


def test_check_is_idempotent(make_week):
    records = make_week([REGULAR] * 6)
    checker = ComplianceChecker()
    assert checker.check(records, 1) == checker.check(records, 1)


def test_to_dict_lists_messages(make_week):
    data = ComplianceChecker().check(make_week([("08:00", "20:00", 60)] * 5), 1).to_dict()

    assert data["status"] == "violation"
    assert data["codes"] == ["WEEKLY_HOURS_EXCEEDED"]
    assert len(data["violations"]) == 1
