"""Resilience – cooperative cancellation tokens."""
from mp_catalog.resilience.cancellation.token import CancellationToken

__all__ = ["CancellationToken"]
