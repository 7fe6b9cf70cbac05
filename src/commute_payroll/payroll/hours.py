from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.time_math import night_overlap_minutes, worked_minutes
from ..common.validators import ensure_unique_days, validate_record
from ..core.rules import PayrollConfig
from .model import WorkHoursBreakdown

logger = logging.getLogger(__name__)


class WorkHoursClassifier:
    """Turn attendance records into a WorkHoursBreakdown.

    Per complete record: a holiday date puts every worked minute into
    holiday; otherwise minutes inside the night window go to night and the
    rest is split into regular (up to the daily cap) and overtime.
    """

    def __init__(self, config: Optional[PayrollConfig] = None):
        self._config = config or PayrollConfig()

    def classify_day(self, record: AttendanceRecord, *, holidays: frozenset[date] = frozenset()) -> WorkHoursBreakdown:
        validate_record(record)
        if not record.is_complete:
            logger.debug("skip incomplete record employee=%s date=%s", record.employee_id, record.date)
            return WorkHoursBreakdown()

        cfg = self._config
        total = worked_minutes(record.check_in, record.check_out, record.total_break_minutes)

        if record.date in holidays:
            return WorkHoursBreakdown(holiday_minutes=total, work_days=1)

        night = min(night_overlap_minutes(record.check_in, record.check_out, cfg.night_start, cfg.night_end), total)
        day_minutes = total - night
        daily_cap = cfg.daily_regular_hours * 60
        regular = min(day_minutes, daily_cap)
        return WorkHoursBreakdown(
            regular_minutes=regular,
            overtime_minutes=day_minutes - regular,
            night_minutes=night,
            work_days=1,
        )

    def classify(
        self,
        records: Iterable[AttendanceRecord],
        *,
        holidays: Optional[Iterable[date]] = None,
    ) -> WorkHoursBreakdown:
        records = list(records)
        ensure_unique_days(records)
        days = self._config.holidays | frozenset(holidays or ())

        result = WorkHoursBreakdown()
        for record in records:
            result = result + self.classify_day(record, holidays=days)
        return result
