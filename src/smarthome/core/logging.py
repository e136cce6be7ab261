"""Structured logging for the API, the rule engine and the CLI.

Log entries are key/value events rendered by structlog: coloured console
lines in development, one JSON object per line elsewhere. Every entry is
stamped with the service, the environment and a correlation ID (the request's
when handling one). Entries written while a rule runs also carry the
``rule_id`` bound by ``LoggingContext``.
"""

import logging
import sys
import uuid
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor

from smarthome.core.config import Settings, get_settings

THIRD_PARTY_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def new_correlation_id() -> str:
    return f"cid_{uuid.uuid4().hex[:12]}"


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Give entries logged outside a request (CLI runs, startup) their own ID.

    Inside a request the middleware has already bound one through
    ``bind_correlation_id`` and it is kept.
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = new_correlation_id()
    return event_dict


def add_logger_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the logger name (``PrintLogger`` has none, so fall back to ``smarthome``)."""
    event_dict["logger"] = getattr(logger, "name", None) or "smarthome"
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def service_info(settings: Settings) -> Processor:
    """Build a processor stamping entries with the service name and environment."""

    def add_service_info(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", settings.app_name)
        event_dict.setdefault("environment", settings.environment)
        return event_dict

    return add_service_info


def _uses_console(settings: Settings) -> bool:
    return settings.is_development or settings.log_format == "console"


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain shared by both renderers, followed by the renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        service_info(settings),
        add_correlation_id,
    ]
    if _uses_console(settings):
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True, exception_formatter=structlog.dev.plain_traceback
            )
        )
    else:
        processors.append(rename_message_field)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(
    settings: Settings | None = None,
    level_name: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and the standard loggers used by uvicorn.

    Args:
        settings: Optional settings instance. If not provided, will load from environment.
        level_name: Overrides the configured log level.
        stream: Where log lines are written; stdout if omitted. The CLI passes
            stderr so command output stays machine-readable.
    """
    if settings is None:
        settings = get_settings()

    level = getattr(logging, level_name or settings.log_level)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # Console mode may be reconfigured (CLI, tests); JSON mode is fixed per process
        cache_logger_on_first_use=not _uses_console(settings),
    )

    logging.basicConfig(format="%(message)s", stream=stream or sys.stdout, level=level)
    for logger_name in THIRD_PARTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, named ``smarthome`` unless a name is given."""
    return structlog.get_logger(name or "smarthome")


class LoggingContext:
    """Bind context variables for the duration of a ``with`` block.

    Example:
        with LoggingContext(rule_id="7"):
            logger.info("Rule condition evaluated")  # carries rule_id="7"
    """

    def __init__(self, **kwargs: str) -> None:
        self.context = kwargs
        self.bound = False

    def __enter__(self) -> "LoggingContext":
        structlog.contextvars.bind_contextvars(**self.context)
        self.bound = True
        return self

    def __exit__(self, *args: Any) -> None:
        if self.bound:
            structlog.contextvars.unbind_contextvars(*self.context.keys())
            self.bound = False


def bind_correlation_id(correlation_id: str) -> None:
    """Bind the request's correlation ID to every entry logged while handling it."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_context() -> None:
    """Clear all context variables from the current logging context."""
    structlog.contextvars.clear_contextvars()
