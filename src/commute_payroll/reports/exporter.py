"""Writers for an assembled Report (Excel, CSV, JSON).

Writers only touch the target passed in (path or file-like object).
"""

from __future__ import annotations

import csv
import io
import json
import logging
from typing import BinaryIO, Union

import pandas as pd

from .assembler import Report

logger = logging.getLogger(__name__)

ROW_COLUMNS = {
    "date": "Date",
    "name": "Name",
    "check_in": "Check-in",
    "check_out": "Check-out",
    "break_minutes": "Break (min)",
    "worked_minutes": "Worked (min)",
}

SUMMARY_COLUMNS = {
    "employee_id": "Employee ID",
    "name": "Name",
    "work_days": "Work days",
    "total_hours": "Total hours",
    "gross_pay": "Gross pay",
    "deductions": "Deductions",
    "net_pay": "Net pay",
    "compliance_status": "Compliance",
}


def report_to_frames(report: Report) -> dict[str, pd.DataFrame]:
    """One DataFrame per sheet, columns in display order."""
    rows = pd.DataFrame(report.rows, columns=list(ROW_COLUMNS)).rename(columns=ROW_COLUMNS)
    summary = pd.DataFrame(report.summary, columns=list(SUMMARY_COLUMNS)).rename(columns=SUMMARY_COLUMNS)
    return {"Attendance": rows, "Summary": summary}


def write_excel(report: Report, target: Union[str, BinaryIO, None] = None):
    """Write the report as an .xlsx workbook.

    With no target, returns an in-memory BytesIO positioned at 0.
    """
    output = target if target is not None else io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for sheet, df in report_to_frames(report).items():
            df.to_excel(writer, index=False, sheet_name=sheet)
    logger.info("excel report written period=%s rows=%d", report.period or "-", len(report.rows))

    if target is None:
        output.seek(0)
        return output
    return target


def write_csv(report: Report) -> bytes:
    """Attendance rows as CSV bytes (UTF-8 with BOM so Excel opens it correctly)."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(ROW_COLUMNS), extrasaction="ignore")
    writer.writeheader()
    for row in report.rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def to_json(report: Report, *, indent: int = 2) -> str:
    return json.dumps(report.to_dict(), ensure_ascii=False, indent=indent, default=str)
