"""Statutory-style deductions, each a pure function of gross pay.

Simplified rules: the income tax applies one flat rate (picked by bracket)
to the whole gross pay; insurance figures are linear percentages, with the
pension base capped.
"""

from __future__ import annotations

from ..core.rules import PayrollConfig
from .model import DeductionBreakdown


def income_tax(gross_pay: float, config: PayrollConfig) -> float:
    if gross_pay <= 0:
        return 0.0
    for bracket in config.income_tax_brackets:
        if bracket.upper_bound is None or gross_pay <= bracket.upper_bound:
            return gross_pay * bracket.rate
    # unreachable: the last bracket is open-ended
    return gross_pay * config.income_tax_brackets[-1].rate


def national_pension(gross_pay: float, config: PayrollConfig) -> float:
    base = min(max(gross_pay, 0.0), config.pension_base_cap)
    return base * config.pension_rate


def health_insurance(gross_pay: float, config: PayrollConfig) -> float:
    return max(gross_pay, 0.0) * config.health_insurance_rate


def employment_insurance(gross_pay: float, config: PayrollConfig) -> float:
    return max(gross_pay, 0.0) * config.employment_insurance_rate


def statutory_deductions(
    gross_pay: float,
    config: PayrollConfig,
    *,
    attendance: float = 0.0,
    other: float = 0.0,
) -> DeductionBreakdown:
    return DeductionBreakdown(
        income_tax=income_tax(gross_pay, config),
        national_pension=national_pension(gross_pay, config),
        health_insurance=health_insurance(gross_pay, config),
        employment_insurance=employment_insurance(gross_pay, config),
        attendance=attendance,
        other=other,
    )
