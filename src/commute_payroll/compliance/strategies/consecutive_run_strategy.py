from __future__ import annotations

from datetime import timedelta
from typing import Sequence

from ...attendance.model import AttendanceRecord
from .base import ContinuousDaysStrategy


class ConsecutiveRunStrategy(ContinuousDaysStrategy):
    """Longest run of consecutive calendar dates with a complete record."""

    def count(self, records: Sequence[AttendanceRecord]) -> int:
        days = sorted({r.date for r in records if r.is_complete})
        longest = run = 0
        previous = None
        for d in days:
            run = run + 1 if previous is not None and d - previous == timedelta(days=1) else 1
            longest = max(longest, run)
            previous = d
        return longest
