"""Exceptions raised by the swap form.

Quote calculation never raises: missing prices and bad amounts degrade to
an empty result. Only trade submission rejects input with an exception.
"""


class SwapError(Exception):
    """Base class for swap form errors."""


class ValidationError(SwapError, ValueError):
    """An amount supplied for submission is non-numeric, zero or negative.

    Attributes:
        field: Name of the offending form field ("from_amount" or "to_amount")
        value: The raw value that failed validation
    """

    def __init__(self, field: str, value: object, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r} (must be a number > 0)")


class SubmissionInProgress(SwapError):
    """A trade is already being submitted from this form."""
