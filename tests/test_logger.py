from __future__ import annotations

import json
import logging

from ircwire.logs import event_catalog
from ircwire.logs.logger import CodecLogger


def test_logger_template_and_fallback(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.delenv("DEBUG", raising=False)
    log = CodecLogger("ircwire.test1")
    caplog.set_level(logging.INFO)

    log.log_event("codec", "invalid_host", host="bad_host")
    log.log_event("custom_domain", "custom_action", extra_field=123)

    msgs = [r.getMessage() for r in caplog.records]
    assert "Rejected invalid host 'bad_host'" in msgs
    assert "custom domain: custom action" in msgs


def test_logger_missing_template_field_uses_raw_template(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.delenv("DEBUG", raising=False)
    log = CodecLogger("ircwire.test2")
    caplog.set_level(logging.INFO)
    log.log_event("codec", "invalid_host")
    assert caplog.records[-1].getMessage().startswith("Rejected invalid host {host")


def test_logger_debug_alignment(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("DEBUG", "1")
    log = CodecLogger("ircwire.test3")
    caplog.set_level(logging.DEBUG)
    log.log_event("app", "start", command="parse")
    first = caplog.records[0].getMessage()
    assert first.startswith("app_start".ljust(28))
    assert "Starting ircwire parse" in first
    assert "(command='parse')" in first


def test_logger_skips_disabled_levels(caplog) -> None:  # type: ignore[no-untyped-def]
    log = CodecLogger("ircwire.test4")
    caplog.set_level(logging.INFO)
    log.log_event("codec", "empty_line", level=logging.DEBUG)
    assert not caplog.records


def test_reload_from_custom_path(tmp_path) -> None:  # type: ignore[no-untyped-def]
    path = tmp_path / "templates.json"
    path.write_text(json.dumps({"x": {"y": "custom {v}", "bad": 1}}), encoding="utf-8")
    try:
        event_catalog.reload_event_templates(path)
        assert event_catalog.EVENT_TEMPLATES == {("x", "y"): "custom {v}"}
    finally:
        event_catalog.reload_event_templates()


def test_missing_catalog_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    try:
        event_catalog.reload_event_templates(tmp_path / "nope.json")
        assert event_catalog.EVENT_TEMPLATES == {("app", "load_error"): "Event templates file missing"}
    finally:
        event_catalog.reload_event_templates()


def test_default_catalog_loads() -> None:
    event_catalog.reload_event_templates()
    assert ("codec", "missing_terminator") in event_catalog.EVENT_TEMPLATES


def test_logger_debug_flag_accepts_yes(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("DEBUG", "Yes")
    log = CodecLogger("ircwire.test5")
    caplog.set_level(logging.DEBUG)
    log.log_event("codec", "invalid_host", level=logging.DEBUG, host="x")
    assert caplog.records[-1].getMessage().startswith("codec_invalid_host")
