"""Shared environment parsing for the settings modules.

Only variables that are actually set end up in the rule dicts, so unset
values fall back to the documented defaults in core.constants.
"""

import os

from ..core.exceptions import ConfigurationError


def _number(name: str, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"environment variable {name}={raw!r} is not a valid number") from exc


_PAYROLL_ENV = {
    "default_hourly_rate": ("PAYROLL_DEFAULT_HOURLY_RATE", float),
    "overtime_rate": ("PAYROLL_OVERTIME_RATE", float),
    "night_rate": ("PAYROLL_NIGHT_RATE", float),
    "holiday_rate": ("PAYROLL_HOLIDAY_RATE", float),
    "daily_regular_hours": ("PAYROLL_DAILY_REGULAR_HOURS", float),
    "pension_rate": ("PAYROLL_PENSION_RATE", float),
    "pension_base_cap": ("PAYROLL_PENSION_BASE_CAP", float),
    "health_insurance_rate": ("PAYROLL_HEALTH_INSURANCE_RATE", float),
    "employment_insurance_rate": ("PAYROLL_EMPLOYMENT_INSURANCE_RATE", float),
}

_COMPLIANCE_ENV = {
    "regular_weekly_limit": ("COMPLIANCE_REGULAR_WEEKLY_LIMIT", float),
    "max_weekly_overtime": ("COMPLIANCE_MAX_WEEKLY_OVERTIME", float),
    "daily_regular_hours": ("COMPLIANCE_DAILY_REGULAR_HOURS", float),
    "max_continuous_work_days": ("COMPLIANCE_MAX_CONTINUOUS_WORK_DAYS", int),
    "continuous_work_warning_days": ("COMPLIANCE_CONTINUOUS_WORK_WARNING_DAYS", int),
}


def payroll_rules_from_env() -> dict:
    rules = {key: _number(env, cast) for key, (env, cast) in _PAYROLL_ENV.items()}
    rules = {k: v for k, v in rules.items() if v is not None}
    if os.environ.get("NIGHT_WORK_START"):
        rules["night_start"] = os.environ["NIGHT_WORK_START"]
    if os.environ.get("NIGHT_WORK_END"):
        rules["night_end"] = os.environ["NIGHT_WORK_END"]
    return rules


def compliance_rules_from_env() -> dict:
    rules = {key: _number(env, cast) for key, (env, cast) in _COMPLIANCE_ENV.items()}
    rules = {k: v for k, v in rules.items() if v is not None}
    if os.environ.get("NIGHT_WORK_START"):
        rules["night_work_start"] = os.environ["NIGHT_WORK_START"]
    if os.environ.get("CONTINUOUS_DAYS_MODE"):
        rules["continuous_days_mode"] = os.environ["CONTINUOUS_DAYS_MODE"]
    return rules
