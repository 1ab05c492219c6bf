"""Structured IRC message models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Source:
    """Message originator split into nick, optional user and optional host."""

    nick: str
    user: str | None = None
    host: str | None = None

    def __str__(self) -> str:
        text = self.nick
        if self.user is not None:
            text += f"!{self.user}"
        if self.host is not None:
            text += f"@{self.host}"
        return text

    @classmethod
    def from_string(cls, raw: str) -> Source:
        from .source import parse_source

        return parse_source(raw)

    def to_dict(self) -> dict[str, str]:
        out = {"nick": self.nick}
        if self.user is not None:
            out["user"] = self.user
        if self.host is not None:
            out["host"] = self.host
        return out


@dataclass(slots=True)
class Message:
    """A single IRC protocol message.

    Every field is optional; ``Message()`` is the empty message produced for
    blank input lines. ``params`` is either ``None`` or a non-empty list, and
    ``source`` may be a :class:`Source` or an already formatted string.
    """

    verb: str | None = None
    params: list[str] | None = None
    tags: dict[str, str] | None = None
    source: Source | str | None = field(default=None)

    @property
    def trailing(self) -> str | None:
        return self.params[-1] if self.params else None

    def to_dict(self) -> dict[str, Any]:
        """Return only the fields that are present, source as its string form."""
        out: dict[str, Any] = {}
        if self.verb is not None:
            out["verb"] = self.verb
        if self.params:
            out["params"] = list(self.params)
        if self.tags is not None:
            out["tags"] = dict(self.tags)
        if self.source is not None:
            out["source"] = str(self.source)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        """Build a message from a mapping shaped like :meth:`to_dict` output.

        A string source is kept verbatim; a mapping source becomes a
        :class:`Source` whose host is validated when the message is serialized.
        """
        source = data.get("source")
        if isinstance(source, Mapping):
            source = Source(
                nick=source.get("nick", ""),
                user=source.get("user"),
                host=source.get("host"),
            )
        params = data.get("params")
        tags = data.get("tags")
        return cls(
            verb=data.get("verb"),
            params=list(params) if params else None,
            tags=dict(tags) if tags is not None else None,
            source=source,
        )
