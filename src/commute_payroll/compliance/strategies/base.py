from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord


class ContinuousDaysStrategy(ABC):
    """Strategy Pattern: encapsulate how continuous work days are counted."""

    @abstractmethod
    def count(self, records: Sequence[AttendanceRecord]) -> int:
        """``records`` are one employee's complete records for the week."""
        raise NotImplementedError
