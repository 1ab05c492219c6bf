from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from ircwire import mask
from ircwire.irc.mask import Mask, compile_mask
from tests.fixtures.parser_corpus import MASK_MATCH


@pytest.mark.parametrize(("pattern", "matches", "fails"), MASK_MATCH)
def test_mask_match(pattern, matches, fails):  # type: ignore[no-untyped-def]
    compiled = mask(pattern)
    for candidate in matches:
        assert compiled.test(candidate), candidate
    for candidate in fails:
        assert not compiled.test(candidate), candidate


def test_mask_is_anchored():  # type: ignore[no-untyped-def]
    compiled = compile_mask("nick!*@host")
    assert compiled.test("nick!u@host")
    assert not compiled.test("xnick!u@host")
    assert not compiled.test("nick!u@hostx")


def test_mask_is_case_sensitive():  # type: ignore[no-untyped-def]
    assert not compile_mask("Nick!*@*").test("nick!u@h")


def test_mask_regex_metacharacters_are_literal():  # type: ignore[no-untyped-def]
    compiled = compile_mask("a.b+(c)|d")
    assert compiled.test("a.b+(c)|d")
    assert not compiled.test("axb+(c)|d")


def test_star_matches_empty_and_newlines():  # type: ignore[no-untyped-def]
    compiled = compile_mask("a*b")
    assert compiled.test("ab")
    assert compiled.test("a\nb")


def test_each_compile_is_independent():  # type: ignore[no-untyped-def]
    first = compile_mask("a?")
    second = compile_mask("b*")
    assert first is not second
    assert isinstance(first, Mask)
    assert first.test("ax") and not first.test("bx")
    assert second.test("bxyz")


def test_matcher_is_shareable_between_threads():  # type: ignore[no-untyped-def]
    compiled = compile_mask("*!*@*.example.net")
    candidates = [f"n{i}!u@h{i}.example.net" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(compiled.test, candidates))
    assert all(results)
