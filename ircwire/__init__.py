r"""ircwire: codec for the IRC wire message format.

    >>> from ircwire import parse, stringify, mask
    >>> msg = parse(":john!jsmith@example.com PRIVMSG #general :hi guys\r\n")
    >>> msg.params
    ['#general', 'hi guys']
    >>> stringify({"verb": "PING"})
    'PING\r\n'
    >>> mask("gr?y!?@*").test("gray!~@example.net")
    True
"""

from .errors import (  # noqa: F401
    InvalidHostError,
    InvalidParamError,
    IRCSyntaxError,
    IRCValidationError,
    IRCWireError,
    MissingTerminatorError,
)
from .irc import (  # noqa: F401
    ERR,
    RPL,
    Mask,
    Message,
    Source,
    Verb,
    compile_mask,
    mask,
    parse,
    stringify,
)

__version__ = "1.0.0"

__all__ = [
    "ERR",
    "RPL",
    "InvalidHostError",
    "InvalidParamError",
    "IRCSyntaxError",
    "IRCValidationError",
    "IRCWireError",
    "Mask",
    "Message",
    "MissingTerminatorError",
    "Source",
    "Verb",
    "compile_mask",
    "mask",
    "parse",
    "stringify",
]
