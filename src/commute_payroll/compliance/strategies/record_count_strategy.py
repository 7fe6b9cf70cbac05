from __future__ import annotations

from typing import Sequence

from ...attendance.model import AttendanceRecord
from .base import ContinuousDaysStrategy


class RecordCountStrategy(ContinuousDaysStrategy):
    """Number of complete records in the window.

    Known simplification: gaps between dates are not detected, so five
    scattered days count the same as five days in a row.
    """

    def count(self, records: Sequence[AttendanceRecord]) -> int:
        return sum(1 for r in records if r.is_complete)
