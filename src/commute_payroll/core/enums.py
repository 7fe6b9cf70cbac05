from __future__ import annotations

from enum import Enum


class ComplianceStatus(str, Enum):
    """Weekly classification of an employee against hour limits."""

    GOOD = "good"
    WARNING = "warning"
    VIOLATION = "violation"


class IssueLevel(str, Enum):
    VIOLATION = "violation"
    WARNING = "warning"
    INFO = "info"


class ComplianceCode(str, Enum):
    WEEKLY_HOURS_EXCEEDED = "WEEKLY_HOURS_EXCEEDED"
    CONTINUOUS_WORK_EXCEEDED = "CONTINUOUS_WORK_EXCEEDED"
    WEEKLY_HOURS_WARNING = "WEEKLY_HOURS_WARNING"
    CONTINUOUS_WORK_WARNING = "CONTINUOUS_WORK_WARNING"
    NIGHT_WORK = "NIGHT_WORK"


class ContinuousDaysMode(str, Enum):
    """How continuous work days are counted for a week."""

    RECORD_COUNT = "record_count"
    CONSECUTIVE_RUN = "consecutive_run"
