"""Observability – structured logging."""
from mp_catalog.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
