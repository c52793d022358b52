"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def expand_errors(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Replace catalogue errors bound to an event with their ``to_dict()`` form."""
    for key, value in event_dict.items():
        to_dict = getattr(value, "to_dict", None)
        if isinstance(value, BaseException) and callable(to_dict):
            event_dict[key] = to_dict()
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger named *name* with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["expand_errors", "get_logger"]
