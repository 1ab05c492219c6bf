"""Message source (prefix) parsing, host validation and serialization.

Accepted hosts are, compared case-insensitively:

* the literal ``localhost``;
* a dotted quad whose first octet is 1-299 and whose other octets are 0-299,
  written without leading zeros. Octets are not bounded at 255; three digit
  octets only need to start with 1 or 2, so ``299.1.1.1`` passes;
* a domain name of two or more labels, where no label is empty, contains
  ``_``, or starts or ends with ``-``.

A host made only of numeric labels is always checked as a dotted quad.
"""

from __future__ import annotations

import logging
import re

from ..errors.internal import InvalidHostError
from ..logs import logger
from .models import Source

_LOCALHOST = "localhost"
_DOTTED_QUAD = re.compile(
    r"(?:[12]\d{2}|[1-9]\d|[1-9])(?:\.(?:[12]\d{2}|[1-9]\d|\d)){3}", re.ASCII
)
_NUMERIC_LABEL = re.compile(r"\d+", re.ASCII)
# Labels never contain line terminators.
_DOMAIN_LABEL = re.compile(r"[^._\-\r\n\u2028\u2029](?:[^._\r\n\u2028\u2029]*[^._\-\r\n\u2028\u2029])?")


def is_valid_host(host: str) -> bool:
    if host.lower() == _LOCALHOST:
        return True
    labels = host.split(".")
    if all(_NUMERIC_LABEL.fullmatch(label) for label in labels):
        return _DOTTED_QUAD.fullmatch(host) is not None
    if len(labels) < 2:
        return False
    return all(_DOMAIN_LABEL.fullmatch(label) for label in labels)


def validate_host(host: str) -> str:
    """Return ``host`` unchanged, raising :class:`InvalidHostError` if it is rejected."""
    if not is_valid_host(host):
        logger.log_event("codec", "invalid_host", level=logging.DEBUG, host=host)
        raise InvalidHostError(host)
    return host


def parse_source(raw: str) -> Source:
    """Split ``nick[!user][@host]`` into a :class:`Source`.

    The host is taken after the first ``@`` before the user is looked for, so
    ``a!b@c`` gives nick ``a``, user ``b`` and host ``c`` while ``a@b!c``
    gives nick ``a`` and host ``b!c``.
    """
    if "!" not in raw and "@" not in raw:
        return Source(nick=raw)

    rest, at, host = raw.partition("@")
    nick, bang, user = rest.partition("!")
    source = Source(nick=nick, user=user if bang else None, host=host if at else None)
    if source.host is not None:
        validate_host(source.host)
    return source


def stringify_source(source: Source | str) -> str:
    """Format a source; plain strings are emitted as-is without validation."""
    if isinstance(source, str):
        return source
    if source.host is not None:
        validate_host(source.host)
    return str(source)
