from __future__ import annotations

import importlib
import logging
import os
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from ..core.rules import ComplianceConfig, PayrollConfig


def get_settings_module() -> str:
    # APP_ENV selects the settings module, default is development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


def load_settings(module_name: Optional[str] = None) -> ModuleType:
    load_dotenv(override=False)
    module = importlib.import_module(module_name or get_settings_module())
    # settings read the environment at import time; reload so a changed APP_ENV/.env is honoured
    return importlib.reload(module)


def load_rules(settings: Optional[ModuleType] = None) -> tuple[PayrollConfig, ComplianceConfig]:
    """Build the immutable rule objects once, at the call site."""
    settings = settings or load_settings()
    payroll = PayrollConfig.from_mapping(getattr(settings, "PAYROLL_RULES", {}))
    compliance = ComplianceConfig.from_mapping(getattr(settings, "COMPLIANCE_RULES", {}))
    return payroll, compliance


def configure_logging(settings: Optional[ModuleType] = None) -> None:
    """For scripts only; the library itself never configures logging."""
    settings = settings or load_settings()
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
