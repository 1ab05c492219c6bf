"""Human readable texts for codec and CLI log events.

``event_templates.json`` maps ``domain -> action -> template``. Templates are
``str.format`` strings filled from the keyword arguments of
``CodecLogger.log_event``; e.g. ``("codec", "invalid_host")`` renders with
``host=...``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

EventKey = tuple[str, str]

EVENT_TEMPLATES: dict[EventKey, str] = {}
_DEFAULT_PATH = Path(__file__).with_name("event_templates.json")
_MAX_LOAD_ERROR_LEN = 200


def _flatten(raw: Any) -> dict[EventKey, str]:
    """Keep only ``str -> str -> str`` entries; other shapes are ignored."""
    if not isinstance(raw, Mapping):
        return {}
    return {
        (domain, action): template
        for domain, actions in raw.items()
        if isinstance(domain, str) and isinstance(actions, Mapping)
        for action, template in actions.items()
        if isinstance(action, str) and isinstance(template, str)
    }


def _load_event_templates(path: Path | None = None) -> dict[EventKey, str]:
    # Load failures become a single ("app", "load_error") entry.
    path = path or _DEFAULT_PATH
    try:
        with path.open("r", encoding="utf-8") as f:
            return _flatten(json.load(f))
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        message = f"Failed to load event templates: {e}"
        return {("app", "load_error"): message[:_MAX_LOAD_ERROR_LEN]}


def reload_event_templates(path: Path | None = None) -> None:
    """Replace the catalog, from ``path`` or the packaged JSON file."""
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = _load_event_templates(path)


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "reload_event_templates"]
