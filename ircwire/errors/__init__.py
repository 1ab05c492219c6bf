"""Codec error hierarchy and error logging helpers."""

from .handling import classify_error, log_error  # noqa: F401
from .internal import (  # noqa: F401
    InvalidHostError,
    InvalidParamError,
    IRCSyntaxError,
    IRCValidationError,
    IRCWireError,
    MissingTerminatorError,
)

__all__ = [
    "IRCWireError",
    "IRCSyntaxError",
    "IRCValidationError",
    "MissingTerminatorError",
    "InvalidHostError",
    "InvalidParamError",
    "classify_error",
    "log_error",
]
