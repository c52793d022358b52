"""Observability – structured logging helpers."""
from mp_catalog.observability.logging.factory import JsonLoggerFactory, shared_processors
from mp_catalog.observability.logging.processors import expand_errors, get_logger

__all__ = ["JsonLoggerFactory", "expand_errors", "get_logger", "shared_processors"]
