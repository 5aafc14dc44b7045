"""Structlog configuration.

Three renderers are available: workflow commands for the Actions runner
(``::warning::`` and friends), a console renderer for local runs, and JSON.
Every pipeline redacts values registered with :func:`register_secret`.

Usage::

    from openai_costs.log import configure_logging

    configure_logging(log_level="debug", log_format="console")
    logger = structlog.get_logger()
    logger.info("event_name", key="value")
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

REDACTED = "***"

_secrets: set[str] = set()

_COMMAND_BY_LEVEL = {
    "debug": "debug",
    "warning": "warning",
    "error": "error",
    "critical": "error",
    "exception": "error",
}


def register_secret(value: str) -> None:
    """Redact ``value`` from every subsequent log event."""
    if value:
        _secrets.add(value)


def clear_secrets() -> None:
    _secrets.clear()


def _redact(value: str) -> str:
    # Longest first so a secret containing another is fully replaced.
    for secret in sorted(_secrets, key=len, reverse=True):
        value = value.replace(secret, REDACTED)
    return value


def redact_secrets(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Processor: replace registered secrets in all string values."""
    if not _secrets:
        return event_dict
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _redact(value)
        elif value is not None and not isinstance(value, (int, float, bool)):
            text = str(value)
            if any(secret in text for secret in _secrets):
                event_dict[key] = _redact(text)
    return event_dict


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandRenderer:
    """Render events as Actions workflow commands.

    ``info`` events become plain lines; other levels are prefixed with the
    matching ``::<command>::`` so the runner annotates (or hides) them.
    """

    def __call__(self, _logger: WrappedLogger, _method: str, event_dict: EventDict) -> str:
        level = str(event_dict.pop("level", "info"))
        event = str(event_dict.pop("event", ""))
        extras = " ".join(f"{key}={value}" for key, value in event_dict.items())
        line = f"{event} {extras}" if extras else event
        command = _COMMAND_BY_LEVEL.get(level)
        if command is None:
            # Plain lines must stay single lines or the runner parses the rest as commands.
            return line.replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escape_data(line)}"


def configure_logging(log_level: str = "info", log_format: str = "actions") -> None:
    """Configure structlog for one action run."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        redact_secrets,
    ]
    if log_format == "json":
        processors += [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    elif log_format == "console":
        processors += [
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]
    else:
        processors.append(WorkflowCommandRenderer())

    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )
