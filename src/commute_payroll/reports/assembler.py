from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord, Employee
from ..common.time_math import format_minutes, worked_minutes
from ..compliance.model import ComplianceResult
from ..core.enums import ComplianceStatus
from ..core.exceptions import InvalidInputError
from ..payroll.model import PayrollResult

SORT_KEYS = ("name", "employee_id", "total_minutes", "net_pay")
TOP_CODES = 3


@dataclass(frozen=True)
class EmployeeReportEntry:
    employee: Employee
    records: Sequence[AttendanceRecord] = ()
    payroll: Optional[PayrollResult] = None
    compliance: Optional[ComplianceResult] = None


@dataclass(frozen=True)
class Report:
    """Period report: per-record rows, per-employee summary and totals."""

    period: Optional[str]
    rows: list[dict]
    summary: list[dict]
    totals: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"period": self.period, "rows": self.rows, "summary": self.summary, "totals": self.totals}


class ReportAssembler:
    """Merge per-employee payroll/compliance results into one report (no I/O)."""

    def assemble(
        self,
        entries: Iterable[EmployeeReportEntry],
        *,
        sort_key: Optional[str] = None,
        period: Optional[str] = None,
    ) -> Report:
        entries = list(entries)
        rows: list[dict] = []
        summary: list[dict] = []

        for entry in entries:
            emp = entry.employee
            total_minutes = 0
            work_days = 0
            for r in entry.records:
                minutes = worked_minutes(r.check_in, r.check_out, r.total_break_minutes) if r.is_complete else 0
                total_minutes += minutes
                work_days += 1 if r.is_complete else 0
                rows.append(
                    {
                        "date": r.date.strftime("%Y-%m-%d"),
                        "employee_id": emp.employee_id,
                        "name": emp.name,
                        "check_in": r.check_in or "",
                        "check_out": r.check_out or "",
                        "break_minutes": r.total_break_minutes,
                        "worked_minutes": minutes,
                        "worked_hours": format_minutes(minutes),
                    }
                )

            s = {
                "employee_id": emp.employee_id,
                "name": emp.name,
                "work_days": work_days,
                "total_minutes": total_minutes,
                "total_hours": format_minutes(total_minutes),
                "gross_pay": None,
                "deductions": None,
                "net_pay": None,
                "compliance_status": None,
                "weekly_hours": None,
            }
            if entry.payroll is not None:
                s["gross_pay"] = entry.payroll.gross_pay
                s["deductions"] = entry.payroll.deductions.total
                s["net_pay"] = entry.payroll.net_pay
            if entry.compliance is not None:
                s["compliance_status"] = entry.compliance.status.value
                s["weekly_hours"] = entry.compliance.weekly_hours
            summary.append(s)

        if sort_key:
            summary = self._sorted(summary, sort_key)

        return Report(period=period, rows=rows, summary=summary, totals=self._totals(entries))

    @staticmethod
    def _sorted(summary: list[dict], sort_key: str) -> list[dict]:
        reverse = sort_key.startswith("-")
        key = sort_key.lstrip("-")
        if key not in SORT_KEYS:
            raise InvalidInputError(f"unknown sort key {sort_key!r}, expected one of {', '.join(SORT_KEYS)}")
        # entries without a value (e.g. no payroll) always go last
        present = [s for s in summary if s[key] is not None]
        missing = [s for s in summary if s[key] is None]
        if key == "employee_id":
            # ids may mix int and str
            return sorted(present, key=lambda s: str(s[key]), reverse=reverse) + missing
        return sorted(present, key=lambda s: s[key], reverse=reverse) + missing

    @staticmethod
    def _totals(entries: Sequence[EmployeeReportEntry]) -> dict:
        payrolls = [e.payroll for e in entries if e.payroll is not None]
        checks = [e.compliance for e in entries if e.compliance is not None]

        statuses = Counter(c.status for c in checks)
        codes = Counter(i.code.value for c in checks for i in c.issues)

        return {
            "employees": len(entries),
            "gross_pay": sum(p.gross_pay for p in payrolls),
            "deductions": sum(p.deductions.total for p in payrolls),
            "net_pay": sum(p.net_pay for p in payrolls),
            "compliance": {
                "checked": len(checks),
                "good": statuses[ComplianceStatus.GOOD],
                "warning": statuses[ComplianceStatus.WARNING],
                "violation": statuses[ComplianceStatus.VIOLATION],
                "top_codes": [{"code": code, "count": n} for code, n in codes.most_common(TOP_CODES)],
            },
        }
