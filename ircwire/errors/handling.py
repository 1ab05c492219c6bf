from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import IRCSyntaxError, IRCValidationError, IRCWireError


def classify_error(error: Exception) -> str:
    """Return the aggregation category for an exception."""
    if isinstance(error, IRCSyntaxError):
        return "syntax"
    if isinstance(error, IRCValidationError):
        return "validation"
    if isinstance(error, IRCWireError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict = None) -> None:
    """Logs an error message with the associated exception details.

    The exception's own structured ``data`` (when it is a codec error) is
    merged under the caller supplied context so both end up in the record.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict = {}
    if isinstance(error, IRCWireError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )
