import os

from .config import compliance_rules_from_env, payroll_rules_from_env

PAYROLL_RULES = payroll_rules_from_env()
COMPLIANCE_RULES = compliance_rules_from_env()

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
DEBUG = False
