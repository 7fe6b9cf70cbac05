from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import EmployeeId
from ..core.enums import ComplianceCode, ComplianceStatus, IssueLevel


@dataclass(frozen=True)
class ComplianceIssue:
    code: ComplianceCode
    level: IssueLevel
    message: str


@dataclass(frozen=True)
class ComplianceResult:
    """Weekly compliance outcome for one employee.

    ``status`` follows the issues: any violation wins over any warning.
    """

    employee_id: EmployeeId
    weekly_hours: float
    weekly_overtime: float
    continuous_work_days: int
    night_work_days: int
    issues: tuple[ComplianceIssue, ...] = field(default_factory=tuple)

    def _messages(self, level: IssueLevel) -> tuple[str, ...]:
        return tuple(i.message for i in self.issues if i.level == level)

    @property
    def violations(self) -> tuple[str, ...]:
        return self._messages(IssueLevel.VIOLATION)

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._messages(IssueLevel.WARNING)

    @property
    def info(self) -> tuple[str, ...]:
        return self._messages(IssueLevel.INFO)

    @property
    def status(self) -> ComplianceStatus:
        if self.violations:
            return ComplianceStatus.VIOLATION
        if self.warnings:
            return ComplianceStatus.WARNING
        return ComplianceStatus.GOOD

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "weekly_hours": self.weekly_hours,
            "weekly_overtime": self.weekly_overtime,
            "continuous_work_days": self.continuous_work_days,
            "night_work_days": self.night_work_days,
            "status": self.status.value,
            "violations": list(self.violations),
            "warnings": list(self.warnings),
            "info": list(self.info),
            "codes": [i.code.value for i in self.issues],
        }
