"""Custom exceptions for digit-field."""


class ConfigurationError(ValueError):
    """Raised when a field configuration would break its bounds invariants."""
