from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord, EmployeeId
from ..common.time_math import is_at_or_after, worked_minutes
from ..common.validators import ensure_unique_days, validate_record
from ..core.enums import ComplianceCode, IssueLevel
from ..core.exceptions import InvalidInputError
from ..core.rules import ComplianceConfig
from .factory import ContinuousDaysStrategyFactory
from .model import ComplianceIssue, ComplianceResult

logger = logging.getLogger(__name__)

WEEK_DAYS = 7


class ComplianceChecker:
    """Check one employee-week against weekly-hour, continuous-day and
    night-work limits."""

    def __init__(
        self,
        config: Optional[ComplianceConfig] = None,
        *,
        strategy_factory: Optional[ContinuousDaysStrategyFactory] = None,
    ):
        self._config = config or ComplianceConfig()
        self._factory = strategy_factory or ContinuousDaysStrategyFactory()
        self._strategy = self._factory.for_mode(self._config.continuous_days_mode)

    @property
    def config(self) -> ComplianceConfig:
        return self._config

    def check(self, week_records: Iterable[AttendanceRecord], employee_id: EmployeeId) -> ComplianceResult:
        cfg = self._config
        records = [r for r in week_records if r.employee_id == employee_id]
        for r in records:
            validate_record(r)
        ensure_unique_days(records)
        self._ensure_single_week(records, employee_id)

        complete = [r for r in records if r.is_complete]
        daily_minutes = [worked_minutes(r.check_in, r.check_out, r.total_break_minutes) for r in complete]
        daily_cap = cfg.daily_regular_hours * 60
        # limits compared in whole minutes
        weekly_minutes = sum(daily_minutes)
        overtime_minutes = sum(max(0, m - daily_cap) for m in daily_minutes)
        weekly_hours = weekly_minutes / 60
        weekly_overtime = overtime_minutes / 60
        continuous_days = self._strategy.count(complete)
        night_days = sum(1 for r in records if r.check_out and is_at_or_after(r.check_out, cfg.night_work_start))

        issues: list[ComplianceIssue] = []

        if weekly_minutes > cfg.max_weekly_hours * 60:
            issues.append(
                ComplianceIssue(
                    ComplianceCode.WEEKLY_HOURS_EXCEEDED,
                    IssueLevel.VIOLATION,
                    f"{employee_id}: weekly hours {weekly_hours:.1f}h (limit {cfg.max_weekly_hours:g}h)",
                )
            )
        elif weekly_minutes > cfg.regular_weekly_limit * 60:
            issues.append(
                ComplianceIssue(
                    ComplianceCode.WEEKLY_HOURS_WARNING,
                    IssueLevel.WARNING,
                    f"{employee_id}: weekly overtime {weekly_hours - cfg.regular_weekly_limit:.1f}h "
                    f"over {cfg.regular_weekly_limit:g}h",
                )
            )

        if continuous_days > cfg.max_continuous_work_days:
            issues.append(
                ComplianceIssue(
                    ComplianceCode.CONTINUOUS_WORK_EXCEEDED,
                    IssueLevel.VIOLATION,
                    f"{employee_id}: continuous work days {continuous_days} (limit {cfg.max_continuous_work_days})",
                )
            )
        elif cfg.continuous_work_warning_days is not None and continuous_days >= cfg.continuous_work_warning_days:
            issues.append(
                ComplianceIssue(
                    ComplianceCode.CONTINUOUS_WORK_WARNING,
                    IssueLevel.WARNING,
                    f"{employee_id}: {continuous_days} continuous work days",
                )
            )

        if night_days > 0:
            issues.append(
                ComplianceIssue(
                    ComplianceCode.NIGHT_WORK,
                    IssueLevel.INFO,
                    f"{employee_id}: night work on {night_days} day(s)",
                )
            )

        result = ComplianceResult(
            employee_id=employee_id,
            weekly_hours=weekly_hours,
            weekly_overtime=weekly_overtime,
            continuous_work_days=continuous_days,
            night_work_days=night_days,
            issues=tuple(issues),
        )
        if result.violations:
            logger.warning("compliance violation employee=%s: %s", employee_id, "; ".join(result.violations))
        return result

    def check_many(self, week_records: Iterable[AttendanceRecord]) -> list[ComplianceResult]:
        """Check every employee present in a multi-employee week (first-seen order)."""
        records = list(week_records)
        employee_ids = list(dict.fromkeys(r.employee_id for r in records))
        return [self.check(records, employee_id) for employee_id in employee_ids]

    @staticmethod
    def _ensure_single_week(records: Sequence[AttendanceRecord], employee_id: EmployeeId) -> None:
        if not records:
            return
        days = [r.date for r in records]
        span = (max(days) - min(days)).days
        if span >= WEEK_DAYS:
            raise InvalidInputError(
                f"records for employee {employee_id} span {span + 1} days, expected at most {WEEK_DAYS}"
            )
