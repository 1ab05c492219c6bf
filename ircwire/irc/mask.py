"""Wildcard matching of IRC source masks (``nick!user@host`` patterns)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_WILDCARDS = {"*": ".*", "?": "."}


def _translate(pattern: str) -> str:
    return "".join(_WILDCARDS.get(char) or re.escape(char) for char in pattern)


@dataclass(frozen=True)
class Mask:
    """Compiled source mask.

    ``*`` matches any run of characters (including none) and ``?`` exactly
    one character; every other character, ``[``, ``]`` and ``!`` included,
    matches itself. Matching is case-sensitive and covers the whole
    candidate. Instances are immutable and safe to share between threads.
    """

    pattern: str
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(_translate(self.pattern), re.DOTALL))

    def test(self, candidate: str) -> bool:
        return self._regex.fullmatch(candidate) is not None

    __call__ = test


def compile_mask(pattern: str) -> Mask:
    return Mask(pattern)


mask = compile_mask
