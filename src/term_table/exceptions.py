"""Exceptions for term-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TermTableError(Exception):
    """
    Base exception for all term-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Input Exceptions
# ---------------------------------------------------------------------------


class ValidationError(TermTableError, ValueError):
    """
    Raised when a table, row, cell or style is constructed with a value
    that cannot be normalized into a renderable one.

    Attributes:
        field: Name of the offending field (e.g., "col_span")
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class UnknownStyleError(TermTableError, KeyError):
    """Raised when a style preset is requested by a name that does not exist."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        self.message = f"Unknown table style '{name}'. Choose one of: {', '.join(known)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class ConfigurationError(TermTableError):
    """
    Raised when render defaults read from the environment are malformed.

    Attributes:
        variable: Environment variable name
        value: Raw value found in the environment
    """

    def __init__(self, variable: str, value: str, expected: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"Environment variable {variable}={value!r} is invalid: {expected}")
