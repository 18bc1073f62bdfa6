"""Custom exceptions for utilkit.

This module provides a small hierarchy of exceptions with helpful error
messages, plus the helper used to pull a readable message out of whatever
a query executor raised.
"""

from typing import Any

# Attributes database drivers use for the server-side error text,
# checked before the generic ``message`` attribute.
DRIVER_MESSAGE_ATTRS = ("sql_message", "sqlMessage", "pgerror")


def extract_error_message(error: Any) -> str:
    """Return the most specific human-readable message for an error.

    Driver-specific detail fields win over a generic ``message`` attribute,
    which wins over ``str(error)``.

    Args:
        error: Any exception or error-like value

    Returns:
        The extracted message (never raises)
    """
    for attr in DRIVER_MESSAGE_ATTRS:
        value = getattr(error, attr, None)
        if value:
            return str(value)

    message = getattr(error, "message", None)
    if message:
        return str(message)

    return str(error)


class UtilkitError(Exception):
    """Base exception for all utilkit errors.

    All utilkit exceptions inherit from this class, making it easy
    to catch all library-specific errors.
    """

    def __init__(self, message: str, hint: str | None = None):
        """Initialize the exception.

        Args:
            message: The error message
            hint: Optional hint for resolving the error
        """
        self.message = message
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class MigrationError(UtilkitError):
    """Raised when a schema operation or a migration procedure fails.

    The message is the underlying error's message; ``operation`` records
    what was being attempted (e.g. ``"add column age"``). ``str()`` is
    exactly that message; any hint is only available as ``hint``.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        table: str | None = None,
        original_error: BaseException | None = None,
    ):
        """Initialize the migration error.

        Args:
            message: The extracted error message
            operation: The schema operation that failed
            table: The table the operation targeted
            original_error: The exception raised by the executor or procedure
        """
        self.operation = operation
        self.table = table
        self.original_error = original_error

        hint = None
        lowered = message.lower()
        if "already exists" in lowered:
            hint = "Check table_exists() before creating, or drop the table first."
        elif "does not exist" in lowered or "no such table" in lowered:
            hint = f"Check that table '{table}' has been created."

        super().__init__(message, hint)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_error(
        cls,
        error: BaseException,
        operation: str | None = None,
        table: str | None = None,
    ) -> "MigrationError":
        """Wrap an arbitrary exception, keeping its extracted message."""
        return cls(
            extract_error_message(error),
            operation=operation,
            table=table,
            original_error=error,
        )


class FieldValidationError(UtilkitError):
    """Raised when a field definition is invalid."""

    def __init__(self, message: str, field: str | None = None):
        """Initialize the validation error.

        Args:
            message: The error message
            field: The field that failed validation
        """
        self.field = field

        hint = None
        if field:
            hint = f"Give '{field}' at least one SQL type token, e.g. ['TEXT']."

        super().__init__(message, hint)


class UtilkitConfigurationError(UtilkitError):
    """Raised when utilkit configuration is invalid."""

    def __init__(self, message: str | None = None, setting: str | None = None):
        self.setting = setting
        hint = "Check your UTILKIT_* environment variables."
        if setting:
            hint = f"Check the UTILKIT_{setting.upper()} environment variable."
        super().__init__(message or "Invalid utilkit configuration", hint)
