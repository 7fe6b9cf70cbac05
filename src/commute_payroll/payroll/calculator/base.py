from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Mapping, Optional

from ...attendance.model import Employee
from ..model import PayrollResult, WorkHoursBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
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
        raise NotImplementedError
