"""
Exceptions raised at the roster input boundary and by scheduler preconditions.
"""


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""

    pass


class InvalidDateFormatError(ConfigurationError):
    """Raised when a date is not in ISO 8601 format (YYYY-MM-DD)."""

    pass


class InvalidShiftError(ConfigurationError):
    """Raised when a shift value or its HH:mm times cannot be parsed."""

    pass


class EmptyRosterError(ValueError):
    """Raised when an operation needs at least one employee and got none."""

    pass
