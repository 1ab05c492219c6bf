"""Event logger used by the codec and the command-line front end."""

from __future__ import annotations

import logging

from ..constants import _get_env_bool


class CodecLogger:
    """Thin event-oriented wrapper around a stdlib logger.

    Events are named ``<domain>_<action>``. Their human readable text comes
    from the event catalog; unknown events fall back to a derived
    ``"domain: action"`` text. Handlers are left to the application
    (see :class:`ircwire.logging_config.LoggerConfigurator`).
    """

    def __init__(self, name: str = "ircwire") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 28
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str | None,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        msg = (
            self._build_debug_message(event_name, human_text, kwargs, self._event_name_width)
            if self._is_debug_enabled()
            else self._build_concise_message(event_name, human_text)
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return _get_env_bool("DEBUG", False)

    @staticmethod
    def _build_debug_message(
        event_name: str,
        human_text: str | None,
        kwargs: dict[str, object],
        width: int,
    ) -> str:
        context = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        # Pad / truncate event name to a fixed column for alignment
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = ev
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @staticmethod
    def _build_concise_message(event_name: str, human_text: str | None) -> str:
        return human_text or event_name


logger = CodecLogger()
