class DomainError(Exception):
    """Base exception for payroll/compliance rule failures."""


class InvalidInputError(DomainError):
    """Raised when a record, time string, amount or option is invalid."""


class ConfigurationError(DomainError):
    """Raised when a rate or threshold is missing or not usable (e.g. hourly rate <= 0)."""
