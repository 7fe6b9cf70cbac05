from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from ..attendance.model import EmployeeId


@dataclass(frozen=True)
class WorkHoursBreakdown:
    """Mutually exclusive categorization of worked time, in minutes."""

    regular_minutes: float = 0
    overtime_minutes: float = 0
    night_minutes: float = 0
    holiday_minutes: float = 0
    work_days: int = 0

    @classmethod
    def from_hours(cls, *, regular=0.0, overtime=0.0, night=0.0, holiday=0.0, work_days: int = 0) -> "WorkHoursBreakdown":
        return cls(
            regular_minutes=regular * 60,
            overtime_minutes=overtime * 60,
            night_minutes=night * 60,
            holiday_minutes=holiday * 60,
            work_days=work_days,
        )

    @property
    def total_minutes(self) -> float:
        return self.regular_minutes + self.overtime_minutes + self.night_minutes + self.holiday_minutes

    @property
    def regular_hours(self) -> float:
        return self.regular_minutes / 60

    @property
    def overtime_hours(self) -> float:
        return self.overtime_minutes / 60

    @property
    def night_hours(self) -> float:
        return self.night_minutes / 60

    @property
    def holiday_hours(self) -> float:
        return self.holiday_minutes / 60

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60

    def __add__(self, other: "WorkHoursBreakdown") -> "WorkHoursBreakdown":
        if not isinstance(other, WorkHoursBreakdown):
            return NotImplemented
        return WorkHoursBreakdown(
            regular_minutes=self.regular_minutes + other.regular_minutes,
            overtime_minutes=self.overtime_minutes + other.overtime_minutes,
            night_minutes=self.night_minutes + other.night_minutes,
            holiday_minutes=self.holiday_minutes + other.holiday_minutes,
            work_days=self.work_days + other.work_days,
        )


@dataclass(frozen=True)
class AllowanceBreakdown:
    bonus: float = 0.0
    incentive: float = 0.0
    transportation: float = 0.0
    meal: float = 0.0
    communication: float = 0.0
    qualification: float = 0.0

    @property
    def total(self) -> float:
        return self.bonus + self.incentive + self.transportation + self.meal + self.communication + self.qualification


@dataclass(frozen=True)
class DeductionBreakdown:
    income_tax: float = 0.0
    national_pension: float = 0.0
    health_insurance: float = 0.0
    employment_insurance: float = 0.0
    attendance: float = 0.0
    other: float = 0.0

    @property
    def statutory_total(self) -> float:
        return self.income_tax + self.national_pension + self.health_insurance + self.employment_insurance

    @property
    def custom_total(self) -> float:
        return self.attendance + self.other

    @property
    def total(self) -> float:
        return self.statutory_total + self.custom_total


@dataclass(frozen=True)
class PayrollResult:
    """Pay breakdown for one employee and one period.

    ``net_pay`` may be negative when deductions exceed gross pay.
    ``calculated_at`` is not part of equality.
    """

    employee_id: EmployeeId
    employee_name: str
    period: Optional[str]
    hourly_rate: float
    work_hours: WorkHoursBreakdown

    base_pay: float
    overtime_pay: float
    night_pay: float
    holiday_pay: float
    allowances: AllowanceBreakdown
    deductions: DeductionBreakdown

    calculated_at: Optional[datetime] = field(default=None, compare=False)

    @property
    def gross_pay(self) -> float:
        return self.base_pay + self.overtime_pay + self.night_pay + self.holiday_pay + self.allowances.total

    @property
    def net_pay(self) -> float:
        return self.gross_pay - self.deductions.total

    def to_dict(self) -> dict:
        work = self.work_hours
        allowances = asdict(self.allowances)
        allowances["total"] = self.allowances.total
        deductions = asdict(self.deductions)
        deductions["total"] = self.deductions.total
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "period": self.period,
            "hourly_rate": self.hourly_rate,
            "work_hours": {
                "regular": work.regular_hours,
                "overtime": work.overtime_hours,
                "night": work.night_hours,
                "holiday": work.holiday_hours,
                "total": work.total_hours,
                "work_days": work.work_days,
            },
            "base_pay": self.base_pay,
            "overtime_pay": self.overtime_pay,
            "night_pay": self.night_pay,
            "holiday_pay": self.holiday_pay,
            "allowances": allowances,
            "gross_pay": self.gross_pay,
            "deductions": deductions,
            "net_pay": self.net_pay,
            "calculated_at": self.calculated_at.isoformat() if self.calculated_at else None,
        }
