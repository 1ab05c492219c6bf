"""IRCv3 message tag component escaping and tag string parsing."""

from __future__ import annotations

from collections.abc import Mapping

from ..constants import (
    TAG_ESCAPES,
    TAG_KEY_VALUE_SEPARATOR,
    TAG_SEPARATOR,
    TAG_UNESCAPES,
)


def escape_tag_component(value: str) -> str:
    """Escape backslash, space, semicolon, CR and LF for use inside a tag.

    Iterates by code point so non-ASCII characters pass through untouched.
    """
    return "".join(
        f"\\{TAG_ESCAPES[char]}" if char in TAG_ESCAPES else char for char in value
    )


def unescape_tag_component(value: str) -> str:
    """Reverse :func:`escape_tag_component`.

    Total over all strings: an unknown escape yields the escaped character
    itself and a lone trailing backslash is dropped.
    """
    out: list[str] = []
    chars = iter(value)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        escaped = next(chars, None)
        if escaped is None:
            break
        out.append(TAG_UNESCAPES.get(escaped, escaped))
    return "".join(out)


def parse_tags(raw_tags: str) -> dict[str, str]:
    """Parse the tag segment of a line (without its leading ``@``).

    Each ``;`` separated entry is unescaped and then split on its first
    ``=``. Entries without ``=`` get an empty value and a repeated key keeps
    the value of its last occurrence. No further validation is done.
    """
    tags: dict[str, str] = {}
    for entry in raw_tags.split(TAG_SEPARATOR):
        key, _, value = unescape_tag_component(entry).partition(TAG_KEY_VALUE_SEPARATOR)
        tags[key] = value
    return tags


def format_tags(tags: Mapping[str, str]) -> str:
    """Serialize tags as ``key[=value];...``; falsy values drop the ``=value`` part."""
    return TAG_SEPARATOR.join(
        escape_tag_component(key)
        + (f"{TAG_KEY_VALUE_SEPARATOR}{escape_tag_component(value)}" if value else "")
        for key, value in tags.items()
    )
