"""Example: monthly payroll, a weekly compliance check and an Excel export
without any web/desktop layer.

Run with APP_ENV=development (reads .env if present).
"""

from datetime import date, timedelta

from commute_payroll.attendance.model import AttendanceRecord, Employee
from commute_payroll.config import configure_logging, load_settings
from commute_payroll.container import build_container
from commute_payroll.reports.assembler import EmployeeReportEntry
from commute_payroll.reports.exporter import write_excel


def main():
    settings = load_settings()
    configure_logging(settings)
    container = build_container(settings=settings)

    employee = Employee(employee_id="kim", name="Kim", hourly_rate=10000)
    start = date(2025, 3, 3)
    records = [
        AttendanceRecord(employee_id="kim", date=start + timedelta(days=i), check_in="09:00", check_out="18:00", total_break_minutes=60)
        for i in range(5)
    ]

    payroll = container.payroll_service.calculate_period(
        employee, records, allowances={"meal": 100000}, period="2025-03"
    )
    compliance = container.compliance_checker.check(records, "kim")

    report = container.report_assembler.assemble(
        [EmployeeReportEntry(employee=employee, records=records, payroll=payroll, compliance=compliance)],
        period="2025-03",
    )
    write_excel(report, "payroll_2025_03.xlsx")
    print(payroll.to_dict())
    print(compliance.to_dict())


if __name__ == "__main__":
    main()
