# Fixed rules: tests must not depend on the developer's environment
PAYROLL_RULES = {}
COMPLIANCE_RULES = {}

LOG_LEVEL = "DEBUG"
DEBUG = False
TESTING = True
