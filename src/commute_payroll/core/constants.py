"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Every value can be overridden through PayrollConfig / ComplianceConfig.
"""

MINUTES_PER_DAY = 24 * 60
MAX_BREAK_MINUTES = MINUTES_PER_DAY

# Payroll
DEFAULT_HOURLY_RATE = 10000.0
DEFAULT_OVERTIME_RATE = 1.5
DEFAULT_NIGHT_RATE = 1.5
DEFAULT_HOLIDAY_RATE = 2.0
DEFAULT_DAILY_REGULAR_HOURS = 8

# (upper bound of gross pay, flat rate); None = no upper bound
DEFAULT_INCOME_TAX_BRACKETS = (
    (1_000_000, 0.0),
    (2_000_000, 0.06),
    (4_600_000, 0.15),
    (None, 0.24),
)
DEFAULT_PENSION_RATE = 0.045
DEFAULT_PENSION_BASE_CAP = 5_530_000
DEFAULT_HEALTH_INSURANCE_RATE = 0.0335
DEFAULT_EMPLOYMENT_INSURANCE_RATE = 0.009

# Compliance
DEFAULT_REGULAR_WEEKLY_LIMIT = 40
DEFAULT_MAX_WEEKLY_OVERTIME = 12
DEFAULT_MAX_CONTINUOUS_WORK_DAYS = 6
DEFAULT_NIGHT_WORK_START = "22:00"
DEFAULT_NIGHT_WORK_END = "06:00"

ALLOWANCE_KEYS = ("bonus", "incentive", "transportation", "meal", "communication", "qualification")
CUSTOM_DEDUCTION_KEYS = ("attendance", "other")
