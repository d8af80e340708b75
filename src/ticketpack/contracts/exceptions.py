"""Custom exception hierarchy for ticketpack.

All ticketpack exceptions inherit from :class:`TicketPackError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations


class TicketPackError(Exception):
    """Base exception for all ticketpack errors."""


class ConfigError(TicketPackError):
    """Raised when configuration cannot be read or is invalid."""


class InputValidationError(TicketPackError):
    """Raised when a plan request fails basic shape or length checks."""


class ExtractionError(TicketPackError):
    """Raised when an uploaded file cannot be converted to text."""


class FileTooLargeError(ExtractionError):
    """Raised when an upload exceeds the configured byte limit."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when an upload has an extension no extractor handles."""


class OracleError(TicketPackError):
    """Raised when a single generation oracle call fails."""


class GenerationFailed(TicketPackError):
    """Raised when no valid plan could be generated.

    Attributes:
        message: The underlying failure message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PlanValidationError(TicketPackError):
    """Raised when an assembled plan fails strict validation.

    Attributes:
        errors: Individual validation error messages.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        joined = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Plan validation failed:\n{joined}")
