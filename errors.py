"""
Exception classes shared by the calculators.

- CalculatorError: base for every user-correctable failure
- ValidationError: a required field is missing or not a usable number
- EmptyDataError: statistics requested on an empty data set
- InvalidFunctionError: the graphing smoke test rejected an expression
- ExpressionSyntaxError: the expression parser could not read the input
- UndefinedResultError: a scientific calculation has no finite value

None of these are fatal; the web and terminal layers show the message
and wait for corrected input.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CalculatorError(Exception):
    """
    Base exception for calculator errors.

    Attributes:
        message: Human-readable error message
        details: Dictionary with additional error context
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(CalculatorError, ValueError):
    """Input failed validation before any computation ran."""


class MissingFieldError(ValidationError):
    """A required form field was absent or blank."""


class InvalidNumberError(ValidationError):
    """A numeric field could not be parsed or is out of its domain."""


class NotANumberError(ValidationError):
    """A data-set entry could not be parsed as a finite number."""


class InvalidPlanError(ValidationError):
    """Unknown repayment plan identifier."""


class InvalidDomainError(ValidationError):
    """Plot window bounds are not finite or not strictly increasing."""


class EmptyDataError(CalculatorError, ValueError):
    """Statistics cannot be computed over an empty data set."""


class InvalidFunctionError(CalculatorError, ValueError):
    """The expression does not evaluate at x = 0."""


class ExpressionSyntaxError(CalculatorError, ValueError):
    """
    The expression text could not be tokenized or parsed.

    ``details['position']`` holds the 0-based offset of the offending
    character or token when known.
    """


class UndefinedResultError(CalculatorError, ValueError):
    """A calculation has no finite real value (1/0, sqrt(-1), overflow)."""
