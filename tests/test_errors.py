from __future__ import annotations

import logging

import pytest

from ircwire.errors import (
    InvalidHostError,
    InvalidParamError,
    IRCSyntaxError,
    IRCValidationError,
    IRCWireError,
    MissingTerminatorError,
    classify_error,
    log_error,
)
from ircwire.logging_config import error_aggregator


@pytest.fixture(autouse=True)
def _reset_aggregator():  # type: ignore[no-untyped-def]
    error_aggregator.reset()
    yield
    error_aggregator.reset()


def test_hierarchy():  # type: ignore[no-untyped-def]
    assert issubclass(MissingTerminatorError, IRCSyntaxError)
    assert issubclass(InvalidHostError, IRCValidationError)
    assert issubclass(InvalidParamError, IRCValidationError)
    assert issubclass(IRCValidationError, ValueError)
    assert issubclass(IRCSyntaxError, IRCWireError)


def test_data_is_copied():  # type: ignore[no-untyped-def]
    context = {"a": 1}
    err = IRCWireError("boom", data=context)
    context["b"] = 2
    assert err.data == {"a": 1}
    assert IRCWireError("no data").data == {}


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (MissingTerminatorError("X"), "syntax"),
        (InvalidHostError("bad"), "validation"),
        (InvalidParamError(0, "a b"), "validation"),
        (IRCWireError("x"), "internal"),
        (RuntimeError("x"), "unknown"),
    ],
)
def test_classify_error(error, category):  # type: ignore[no-untyped-def]
    assert classify_error(error) == category


def test_log_error_merges_error_data(caplog):  # type: ignore[no-untyped-def]
    caplog.set_level(logging.ERROR)
    log_error("Failed to parse line", InvalidHostError("bad_host"), context={"line_number": 3})
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage().startswith("[VALIDATION] Failed to parse line")
    assert "host='bad_host'" in record.getMessage()
    assert "line_number=3" in record.getMessage()
    summary = error_aggregator.get_error_summary()
    assert summary["validation"]["total_count"] == 1
