from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Mapping, Optional

from ..attendance.model import AttendanceRecord, Employee
from ..common.time_math import format_minutes
from ..core.exceptions import InvalidInputError
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .hours import WorkHoursClassifier
from .model import PayrollResult

logger = logging.getLogger(__name__)


class PayrollService:
    """Period payroll for one employee from raw attendance records.

    The caller fetches the records (already filtered to the employee and the
    period) and persists the result; this service does neither.
    """

    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        classifier: Optional[WorkHoursClassifier] = None,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._classifier = classifier or WorkHoursClassifier()

    def calculate_period(
        self,
        employee: Employee,
        records: Iterable[AttendanceRecord],
        *,
        allowances: Optional[Mapping[str, float]] = None,
        deductions: Optional[Mapping[str, float]] = None,
        holidays: Optional[Iterable[date]] = None,
        period: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> PayrollResult:
        records = list(records)
        foreign = {r.employee_id for r in records if r.employee_id != employee.employee_id}
        if foreign:
            raise InvalidInputError(
                f"records for employee {employee.employee_id} include other employees: {sorted(map(str, foreign))}"
            )

        work_hours = self._classifier.classify(records, holidays=holidays)
        result = self._calculator.calculate(
            employee,
            work_hours,
            allowances,
            deductions,
            period=period,
            now=now,
        )
        logger.info(
            "payroll employee=%s period=%s worked=%s gross=%.2f net=%.2f",
            employee.employee_id,
            period or "-",
            format_minutes(work_hours.total_minutes),
            result.gross_pay,
            result.net_pay,
        )
        return result
