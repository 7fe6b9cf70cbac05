from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .compliance.checker import ComplianceChecker
from .compliance.factory import ContinuousDaysStrategyFactory
from .config import load_rules
from .core.rules import ComplianceConfig, PayrollConfig
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.hours import WorkHoursClassifier
from .payroll.service import PayrollService
from .reports.assembler import ReportAssembler


@dataclass(frozen=True)
class Container:
    payroll_config: PayrollConfig
    compliance_config: ComplianceConfig

    payroll_calculator: StandardPayrollCalculator
    hours_classifier: WorkHoursClassifier
    payroll_service: PayrollService
    compliance_checker: ComplianceChecker
    report_assembler: ReportAssembler


def build_container(
    *,
    settings: Optional[ModuleType] = None,
    payroll_config: Optional[PayrollConfig] = None,
    compliance_config: Optional[ComplianceConfig] = None,
) -> Container:
    """Wire the services. Explicit configs win over the settings module."""
    if payroll_config is None or compliance_config is None:
        loaded_payroll, loaded_compliance = load_rules(settings)
        payroll_config = payroll_config or loaded_payroll
        compliance_config = compliance_config or loaded_compliance

    calculator = StandardPayrollCalculator(payroll_config)
    classifier = WorkHoursClassifier(payroll_config)
    payroll_service = PayrollService(calculator=calculator, classifier=classifier)
    compliance_checker = ComplianceChecker(compliance_config, strategy_factory=ContinuousDaysStrategyFactory())

    return Container(
        payroll_config=payroll_config,
        compliance_config=compliance_config,
        payroll_calculator=calculator,
        hours_classifier=classifier,
        payroll_service=payroll_service,
        compliance_checker=compliance_checker,
        report_assembler=ReportAssembler(),
    )
