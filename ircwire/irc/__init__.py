"""IRC wire codec package.

Contains the message tokenizer/serializer, tag component escaping, source
parsing with host validation, source mask matching and verb/numeric names.
"""

from .mask import Mask, compile_mask, mask  # noqa: F401
from .models import Message, Source  # noqa: F401
from .parser import parse, stringify  # noqa: F401
from .source import is_valid_host, parse_source, stringify_source, validate_host  # noqa: F401
from .tags import (  # noqa: F401
    escape_tag_component,
    format_tags,
    parse_tags,
    unescape_tag_component,
)
from .verbs import ERR, RPL, Verb, numeric_name  # noqa: F401

__all__ = [
    "ERR",
    "Mask",
    "Message",
    "RPL",
    "Source",
    "Verb",
    "compile_mask",
    "escape_tag_component",
    "format_tags",
    "is_valid_host",
    "mask",
    "numeric_name",
    "parse",
    "parse_source",
    "parse_tags",
    "stringify",
    "stringify_source",
    "unescape_tag_component",
    "validate_host",
]
