import pytest

from commute_payroll.config import get_settings_module, load_rules, load_settings
from commute_payroll.core.exceptions import ConfigurationError
from commute_payroll.core.rules import ComplianceConfig, PayrollConfig


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "commute_payroll.config.production"),
        ("prod", "commute_payroll.config.production"),
        ("testing", "commute_payroll.config.testing"),
        ("anything", "commute_payroll.config.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_testing_settings_give_defaults():
    payroll, compliance = load_rules(load_settings("commute_payroll.config.testing"))

    assert payroll == PayrollConfig()
    assert compliance.max_weekly_hours == 52
    assert compliance.night_work_start == "22:00"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAYROLL_OVERTIME_RATE", "2.0")
    monkeypatch.setenv("COMPLIANCE_MAX_WEEKLY_OVERTIME", "8")
    monkeypatch.setenv("CONTINUOUS_DAYS_MODE", "consecutive_run")

    payroll, compliance = load_rules(load_settings("commute_payroll.config.development"))

    assert payroll.overtime_rate == 2.0
    assert compliance.max_weekly_hours == 48
    assert compliance.continuous_days_mode.value == "consecutive_run"


def test_invalid_environment_value(monkeypatch):
    monkeypatch.setenv("PAYROLL_NIGHT_RATE", "fast")
    with pytest.raises(ConfigurationError):
        load_settings("commute_payroll.config.development")


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigurationError):
        PayrollConfig.from_mapping({"overtime": 2})
    with pytest.raises(ConfigurationError):
        ComplianceConfig.from_mapping({"continuous_days_mode": "calendar"})
    with pytest.raises(ConfigurationError):
        ComplianceConfig(night_work_start="10pm")
