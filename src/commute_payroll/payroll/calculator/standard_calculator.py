from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional

from ...attendance.model import Employee
from ...common.datetime_utils import now_local
from ...common.validators import require_amounts, require_non_negative
from ...core.constants import ALLOWANCE_KEYS, CUSTOM_DEDUCTION_KEYS
from ...core.exceptions import ConfigurationError
from ...core.rules import PayrollConfig
from ..deductions import statutory_deductions
from ..model import AllowanceBreakdown, PayrollResult, WorkHoursBreakdown
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hours x hourly rate x category multiplier, plus allowances,
    minus statutory and custom deductions."""

    def __init__(self, config: Optional[PayrollConfig] = None):
        self._config = config or PayrollConfig()

    @property
    def config(self) -> PayrollConfig:
        return self._config

    def resolve_hourly_rate(self, employee: Employee) -> float:
        rate = employee.hourly_rate
        if rate is None:
            rate = self._config.default_hourly_rate
        if rate is None or rate <= 0:
            raise ConfigurationError(f"hourly rate for employee {employee.employee_id} must be > 0 (got {rate!r})")
        return float(rate)

    def calculate(
        self,
        employee: Employee,
        work_hours: WorkHoursBreakdown,
        allowances: Optional[Mapping[str, float]] = None,
        deductions: Optional[Mapping[str, float]] = None,
        *,
        period: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> PayrollResult:
        cfg = self._config
        rate = self.resolve_hourly_rate(employee)

        regular = require_non_negative(work_hours.regular_minutes, "work_hours.regular_minutes") / 60
        overtime = require_non_negative(work_hours.overtime_minutes, "work_hours.overtime_minutes") / 60
        night = require_non_negative(work_hours.night_minutes, "work_hours.night_minutes") / 60
        holiday = require_non_negative(work_hours.holiday_minutes, "work_hours.holiday_minutes") / 60

        extra = AllowanceBreakdown(**require_amounts(allowances, ALLOWANCE_KEYS, "allowances"))
        custom = require_amounts(deductions, CUSTOM_DEDUCTION_KEYS, "deductions")

        base_pay = regular * rate
        overtime_pay = overtime * rate * cfg.overtime_rate
        night_pay = night * rate * cfg.night_rate
        holiday_pay = holiday * rate * cfg.holiday_rate
        gross_pay = base_pay + overtime_pay + night_pay + holiday_pay + extra.total

        return PayrollResult(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            period=period,
            hourly_rate=rate,
            work_hours=work_hours,
            base_pay=base_pay,
            overtime_pay=overtime_pay,
            night_pay=night_pay,
            holiday_pay=holiday_pay,
            allowances=extra,
            deductions=statutory_deductions(gross_pay, cfg, **custom),
            calculated_at=now or now_local(),
        )
