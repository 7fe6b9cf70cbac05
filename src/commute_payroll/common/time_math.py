"""Time-of-day arithmetic over zero-padded ``HH:MM`` strings.

All functions are pure. A shift whose check-out is earlier than its check-in
is treated as crossing midnight (at most one day).
"""

from __future__ import annotations

import re
from datetime import time
from typing import Optional, Union

from ..core.constants import DEFAULT_NIGHT_WORK_END, DEFAULT_NIGHT_WORK_START, MAX_BREAK_MINUTES, MINUTES_PER_DAY
from ..core.exceptions import InvalidInputError

TimeOfDay = Union[str, time]

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_time(value: TimeOfDay) -> int:
    """Convert ``HH:MM`` (or a ``datetime.time``) into minutes since midnight."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        raise InvalidInputError(f"time must be an HH:MM string, got {type(value).__name__}")
    m = _HHMM.match(value.strip())
    if not m:
        raise InvalidInputError(f"invalid time {value!r}, expected zero-padded HH:MM")
    return int(m.group(1)) * 60 + int(m.group(2))


def normalize_time(value: TimeOfDay) -> str:
    minutes = parse_time(value)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_minutes(minutes: int) -> str:
    """Format a duration as HH:MM (hours may exceed 24)."""
    minutes = int(minutes)
    sign = "-" if minutes < 0 else ""
    minutes = abs(minutes)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_between(start: TimeOfDay, end: TimeOfDay) -> int:
    diff = parse_time(end) - parse_time(start)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return diff


def check_break_minutes(break_minutes) -> int:
    if break_minutes is None:
        return 0
    if isinstance(break_minutes, bool) or not isinstance(break_minutes, int):
        raise InvalidInputError(f"break minutes must be an integer, got {break_minutes!r}")
    if break_minutes < 0 or break_minutes > MAX_BREAK_MINUTES:
        raise InvalidInputError(f"break minutes must be within 0..{MAX_BREAK_MINUTES}, got {break_minutes}")
    return break_minutes


def worked_minutes(check_in: Optional[TimeOfDay], check_out: Optional[TimeOfDay], break_minutes: int = 0) -> int:
    """(check_out - check_in) - break_minutes, wrapping midnight, never below 0.

    Returns 0 when either time is missing; callers should only pass
    complete records.
    """
    if not check_in or not check_out:
        return 0
    total = minutes_between(check_in, check_out) - check_break_minutes(break_minutes)
    return max(total, 0)


def night_overlap_minutes(
    check_in: TimeOfDay,
    check_out: TimeOfDay,
    night_start: TimeOfDay = DEFAULT_NIGHT_WORK_START,
    night_end: TimeOfDay = DEFAULT_NIGHT_WORK_END,
) -> int:
    """Minutes of the check-in..check-out span that fall inside the night window."""
    start = parse_time(check_in)
    end = start + minutes_between(check_in, check_out)

    ns = parse_time(night_start)
    ne = parse_time(night_end)
    window = (ne - ns) % MINUTES_PER_DAY or MINUTES_PER_DAY

    total = 0
    # the shift spans at most [0, 2 days); check the windows starting the day before, same day and next day
    for offset in (-MINUTES_PER_DAY, 0, MINUTES_PER_DAY):
        w_start = ns + offset
        w_end = w_start + window
        total += max(0, min(end, w_end) - max(start, w_start))
    return total


def is_at_or_after(value: TimeOfDay, threshold: TimeOfDay) -> bool:
    """Same-day comparison of two times of day.

    Zero-padded HH:MM strings order lexicographically, so this matches a
    string comparison. It does not know about shifts that cross midnight.
    """
    return normalize_time(value) >= normalize_time(threshold)
