"""Immutable rule configuration passed into every calculation call.

Load/cache these at the call site (see ``commute_payroll.config.load_rules``);
the calculators never read settings on their own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Mapping, Optional

from . import constants as c
from .enums import ContinuousDaysMode
from .exceptions import ConfigurationError

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@dataclass(frozen=True)
class TaxBracket:
    """Flat income-tax rate applied to the whole gross pay up to ``upper_bound``."""

    upper_bound: Optional[float]
    rate: float


def _brackets(raw) -> tuple[TaxBracket, ...]:
    out = []
    for item in raw:
        if isinstance(item, TaxBracket):
            out.append(item)
        elif isinstance(item, Mapping):
            out.append(TaxBracket(upper_bound=item.get("upper_bound"), rate=float(item["rate"])))
        else:
            upper, rate = item
            out.append(TaxBracket(upper_bound=upper, rate=float(rate)))
    return tuple(out)


def _require_positive(name: str, value) -> None:
    if value is None or value <= 0:
        raise ConfigurationError(f"{name} must be > 0 (got {value!r})")


def _require_time(name: str, value) -> None:
    if not isinstance(value, str) or not _HHMM.match(value):
        raise ConfigurationError(f"{name} must be a zero-padded HH:MM time (got {value!r})")


def _known_overrides(cls, data: Mapping[str, Any]) -> dict:
    names = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - names)
    if unknown:
        raise ConfigurationError(f"unknown {cls.__name__} keys: {', '.join(unknown)}")
    return dict(data)


@dataclass(frozen=True)
class PayrollConfig:
    default_hourly_rate: float = c.DEFAULT_HOURLY_RATE
    overtime_rate: float = c.DEFAULT_OVERTIME_RATE
    night_rate: float = c.DEFAULT_NIGHT_RATE
    holiday_rate: float = c.DEFAULT_HOLIDAY_RATE
    daily_regular_hours: float = c.DEFAULT_DAILY_REGULAR_HOURS

    income_tax_brackets: tuple[TaxBracket, ...] = _brackets(c.DEFAULT_INCOME_TAX_BRACKETS)
    pension_rate: float = c.DEFAULT_PENSION_RATE
    pension_base_cap: float = c.DEFAULT_PENSION_BASE_CAP
    health_insurance_rate: float = c.DEFAULT_HEALTH_INSURANCE_RATE
    employment_insurance_rate: float = c.DEFAULT_EMPLOYMENT_INSURANCE_RATE

    night_start: str = c.DEFAULT_NIGHT_WORK_START
    night_end: str = c.DEFAULT_NIGHT_WORK_END
    holidays: frozenset[date] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "income_tax_brackets", _brackets(self.income_tax_brackets))
        object.__setattr__(self, "holidays", frozenset(self.holidays))

        for name in (
            "overtime_rate",
            "night_rate",
            "holiday_rate",
            "daily_regular_hours",
            "pension_rate",
            "pension_base_cap",
            "health_insurance_rate",
            "employment_insurance_rate",
        ):
            _require_positive(name, getattr(self, name))
        if self.default_hourly_rate is not None and self.default_hourly_rate <= 0:
            raise ConfigurationError("default_hourly_rate must be > 0 when set")
        _require_time("night_start", self.night_start)
        _require_time("night_end", self.night_end)
        self._check_brackets()

    def _check_brackets(self) -> None:
        brackets = self.income_tax_brackets
        if not brackets:
            raise ConfigurationError("income_tax_brackets must not be empty")
        if brackets[-1].upper_bound is not None:
            raise ConfigurationError("last income tax bracket must be open-ended (upper_bound=None)")
        previous = 0.0
        for b in brackets:
            if b.rate < 0:
                raise ConfigurationError("income tax rates must be >= 0")
            if b.upper_bound is None:
                continue
            if b.upper_bound <= previous:
                raise ConfigurationError("income tax bracket bounds must be positive and ascending")
            previous = b.upper_bound
        if any(b.upper_bound is None for b in brackets[:-1]):
            raise ConfigurationError("only the last income tax bracket may be open-ended")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "PayrollConfig":
        return cls(**_known_overrides(cls, data or {}))


@dataclass(frozen=True)
class ComplianceConfig:
    regular_weekly_limit: float = c.DEFAULT_REGULAR_WEEKLY_LIMIT
    max_weekly_overtime: float = c.DEFAULT_MAX_WEEKLY_OVERTIME
    daily_regular_hours: float = c.DEFAULT_DAILY_REGULAR_HOURS
    max_continuous_work_days: int = c.DEFAULT_MAX_CONTINUOUS_WORK_DAYS
    # None disables the continuous-days warning
    continuous_work_warning_days: Optional[int] = None
    night_work_start: str = c.DEFAULT_NIGHT_WORK_START
    continuous_days_mode: ContinuousDaysMode = ContinuousDaysMode.RECORD_COUNT

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "continuous_days_mode", ContinuousDaysMode(self.continuous_days_mode))
        except ValueError as exc:
            raise ConfigurationError(f"unknown continuous_days_mode {self.continuous_days_mode!r}") from exc

        for name in ("regular_weekly_limit", "daily_regular_hours", "max_continuous_work_days"):
            _require_positive(name, getattr(self, name))
        if self.max_weekly_overtime is None or self.max_weekly_overtime < 0:
            raise ConfigurationError("max_weekly_overtime must be >= 0")
        if self.continuous_work_warning_days is not None:
            _require_positive("continuous_work_warning_days", self.continuous_work_warning_days)
        _require_time("night_work_start", self.night_work_start)

    @property
    def max_weekly_hours(self) -> float:
        """Absolute weekly cap (regular limit + allowed overtime)."""
        return self.regular_weekly_limit + self.max_weekly_overtime

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "ComplianceConfig":
        return cls(**_known_overrides(cls, data or {}))
