"""Project logging package.

Contains internal logging utilities (event catalog + CodecLogger). Avoid
importing stdlib logging through this package name externally.
"""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates  # noqa: F401
from .logger import CodecLogger, logger  # noqa: F401

__all__ = ["CodecLogger", "logger", "EVENT_TEMPLATES", "reload_event_templates"]
