"""Logging configuration for treeactions using structlog."""

import logging
import sys

import structlog

from treeactions.config import Settings, get_settings

_STRUCTLOG_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    return logging._nameToLevel.get(value.upper(), logging.INFO)


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool | None = None,
    json: bool | None = None,
    force: bool = False,
    settings: Settings | None = None,
) -> None:
    """Route stdlib logging of the package through a structlog formatter.

    Explicit arguments win over `settings` (which default to `get_settings()`).
    An already configured root logger is left alone unless `force` is set.
    """
    settings = settings or get_settings()
    resolved_level = _resolve_level(
        level if level is not None else settings.log_level,
        settings.debug if debug is None else debug,
    )
    resolved_json = settings.log_json if json is None else json

    renderer: structlog.types.Processor
    if resolved_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_STRUCTLOG_PROCESSORS,
    )

    structlog.configure(
        processors=[
            *_STRUCTLOG_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return
    if force:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved_level)
