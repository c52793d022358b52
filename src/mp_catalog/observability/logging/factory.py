"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from mp_catalog.observability.logging.processors import expand_errors


def shared_processors() -> list[Any]:
    """Processors applied to every event before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        expand_errors,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


class JsonLoggerFactory:
    """Route structlog through the root stdlib logger as one JSON object per line."""

    @staticmethod
    def configure(level: int = logging.INFO, *, stream: IO[str] | None = None) -> None:
        structlog.configure(
            processors=[*shared_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(default=str),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)


__all__ = ["JsonLoggerFactory", "shared_processors"]
