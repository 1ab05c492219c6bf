"""Centralized codec error hierarchy.

These exceptions give callers semantic categories for failures raised by the
message codec. Every failure is raised at the point of detection; the codec
never recovers from its own errors.

Classes:
  IRCWireError           – Base for all codec errors.
  IRCSyntaxError         – The raw line does not follow the wire framing.
  MissingTerminatorError – A non-blank line lacks its CRLF terminator.
  IRCValidationError     – A field fails validation on decode or encode.
  InvalidHostError       – A source host does not satisfy the host grammar.
  InvalidParamError      – A non-final parameter contains a space.
"""

from __future__ import annotations

from collections.abc import Mapping


class IRCWireError(Exception):
    """Base class for all codec errors with metadata support.

    Attributes:
        data: Dictionary containing structured context about the failure
            (offending line, host, parameter index and so on).

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class IRCSyntaxError(IRCWireError):
    """Exception raised when a raw line cannot be tokenized."""


class MissingTerminatorError(IRCSyntaxError):
    """Exception raised when a non-blank line does not end with CRLF.

    Attributes:
        data["line"]: The offending raw line.
    """

    def __init__(self, line: str) -> None:
        super().__init__("Invalid syntax: missing CRLF terminator", data={"line": line})


class IRCValidationError(IRCWireError, ValueError):
    """Exception raised when a message field fails validation."""


class InvalidHostError(IRCValidationError):
    """Exception raised for a host outside the accepted host grammar.

    Raised both while parsing a source containing ``@host`` and while
    serializing a source that carries a host.
    """

    def __init__(self, host: str) -> None:
        super().__init__(f"Invalid host: {host!r}", data={"host": host})
        self.host = host


class InvalidParamError(IRCValidationError):
    """Exception raised when a middle parameter contains a space."""

    def __init__(self, index: int, param: str) -> None:
        super().__init__(
            f"Invalid params: parameter {index} contains a space but is not last",
            data={"index": index, "param": param},
        )
        self.index = index
        self.param = param


__all__ = [
    "IRCWireError",
    "IRCSyntaxError",
    "MissingTerminatorError",
    "IRCValidationError",
    "InvalidHostError",
    "InvalidParamError",
]
