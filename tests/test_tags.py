from __future__ import annotations

import pytest

from ircwire.irc.tags import (
    escape_tag_component,
    format_tags,
    parse_tags,
    unescape_tag_component,
)


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("", ""),
        ("plain", "plain"),
        ("a b", "a\\sb"),
        ("a;b", "a\\:b"),
        ("back\\slash", "back\\\\slash"),
        ("cr\rlf\n", "cr\\rlf\\n"),
        ("\\ ;\r\n", "\\\\\\s\\:\\r\\n"),
        ("snow☃man é", "snow☃man\\sé"),
        ("a=b", "a=b"),
    ],
)
def test_escape_tag_component(raw, escaped):  # type: ignore[no-untyped-def]
    assert escape_tag_component(raw) == escaped


@pytest.mark.parametrize(
    ("escaped", "raw"),
    [
        ("a\\sb", "a b"),
        ("a\\:b", "a;b"),
        ("a\\\\b", "a\\b"),
        ("\\r\\n", "\r\n"),
        ("value\\1", "value1"),
        ("\\b", "b"),
        ("trailing\\", "trailing"),
        ("\\", ""),
        ("\\\\\\", "\\"),
        ("", ""),
    ],
)
def test_unescape_tag_component(escaped, raw):  # type: ignore[no-untyped-def]
    assert unescape_tag_component(escaped) == raw


@pytest.mark.parametrize(
    "value",
    [
        "\\",
        " ; ",
        "mix\\ of;all\r\nkinds",
        "\\s is not a space",
        ";;;",
        "\r\n\r\n",
        "~!@#$%^&*()_+{}|:\"<>?`-=[]\\;',./",
    ],
)
def test_escape_then_unescape_restores_value(value):  # type: ignore[no-untyped-def]
    assert unescape_tag_component(escape_tag_component(value)) == value


def test_parse_tags_basic():  # type: ignore[no-untyped-def]
    assert parse_tags("a=b;c=32;k;rt=ql7") == {"a": "b", "c": "32", "k": "", "rt": "ql7"}


def test_parse_tags_last_duplicate_wins():  # type: ignore[no-untyped-def]
    assert parse_tags("tag1=1;tag2=3;tag1=5") == {"tag1": "5", "tag2": "3"}


def test_parse_tags_keeps_extra_equals_in_value():  # type: ignore[no-untyped-def]
    assert parse_tags("k=a=b=c") == {"k": "a=b=c"}


def test_parse_tags_unescapes_entries():  # type: ignore[no-untyped-def]
    assert parse_tags("c=72\\s45;d=gh\\:764") == {"c": "72 45", "d": "gh;764"}


def test_parse_tags_is_lenient():  # type: ignore[no-untyped-def]
    # Empty keys and empty entries are accepted as-is.
    assert parse_tags("=v;;x") == {"": "", "x": ""}
    assert parse_tags("") == {"": ""}


def test_format_tags_omits_falsy_values():  # type: ignore[no-untyped-def]
    assert format_tags({"a": "", "b": "x", "c": None}) == "a;b=x;c"


def test_format_tags_escapes_keys_and_values():  # type: ignore[no-untyped-def]
    assert format_tags({"k y": "v;al"}) == "k\\sy=v\\:al"
