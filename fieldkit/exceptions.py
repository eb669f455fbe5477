"""Common exceptions for fieldkit.

Validation and import failures are reported as result values, never raised.
The exceptions here cover the few places where the toolkit talks to the
outside world (definition files, the command line).
"""

from typing import Any


class FieldKitError(Exception):
    """Base exception for all fieldkit errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class LoadError(FieldKitError):
    """Raised when a field definition or data file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.file_path = file_path


class DefinitionError(LoadError):
    """Raised when a loaded document does not have the expected structure."""
