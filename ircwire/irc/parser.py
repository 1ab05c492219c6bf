"""IRC message tokenizer and serializer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..constants import CRLF, SOURCE_PREFIX, TAG_PREFIX, TRAILING_PREFIX
from ..errors.internal import InvalidParamError, MissingTerminatorError
from ..logs import logger
from .models import Message, Source
from .source import parse_source, stringify_source
from .tags import format_tags, parse_tags


def parse(line: str) -> Message:
    """Parse one raw protocol line into a :class:`Message`.

    A blank line (empty or whitespace only) yields the empty ``Message()``.
    Any other line must end with CRLF. Runs of spaces produce empty tokens
    which are skipped. Once the verb is seen, a token starting with ``:``
    opens the trailing parameter which swallows the rest of the line
    verbatim.

    Raises:
        MissingTerminatorError: the line is not blank and lacks CRLF.
        InvalidHostError: the source carries a host outside the host grammar.
    """
    if not line.strip():
        logger.log_event("codec", "empty_line", level=logging.DEBUG)
        return Message()

    if not line.endswith(CRLF):
        logger.log_event("codec", "missing_terminator", level=logging.DEBUG, line=line)
        raise MissingTerminatorError(line)

    tokens = line[: -len(CRLF)].split(" ")
    verb = ""
    verb_captured = False
    params: list[str] = []
    tags: dict[str, str] | None = None
    source: Source | None = None

    for index, token in enumerate(tokens):
        if token.startswith(TAG_PREFIX):
            tags = parse_tags(token[1:])
        elif token.startswith(SOURCE_PREFIX):
            if verb_captured:
                params.append(" ".join(tokens[index:])[1:])
                break
            source = parse_source(token[1:])
        elif token:
            if verb_captured:
                params.append(token)
            else:
                verb = token
                verb_captured = True

    return Message(verb=verb, params=params or None, tags=tags, source=source)


def stringify(message: Message | Mapping[str, Any]) -> str:
    """Serialize a message into a CRLF terminated protocol line.

    The last parameter is always written with a leading ``:``. A mapping is
    accepted in place of a :class:`Message` and converted with
    :meth:`Message.from_dict`.

    Raises:
        InvalidParamError: a parameter other than the last contains a space.
        InvalidHostError: a structured source carries an invalid host.
    """
    if isinstance(message, Mapping):
        message = Message.from_dict(message)

    parts: list[str] = []
    if message.tags:
        parts.append(f"{TAG_PREFIX}{format_tags(message.tags)} ")
    if message.source is not None:
        parts.append(f"{SOURCE_PREFIX}{stringify_source(message.source)} ")
    parts.append(message.verb or "")

    if message.params:
        last = len(message.params) - 1
        for index, param in enumerate(message.params):
            if index == last:
                parts.append(f" {TRAILING_PREFIX}{param}")
                continue
            if " " in param:
                logger.log_event(
                    "codec", "invalid_param", level=logging.DEBUG, index=index, param=param
                )
                raise InvalidParamError(index, param)
            parts.append(f" {param}")

    parts.append(CRLF)
    return "".join(parts)
