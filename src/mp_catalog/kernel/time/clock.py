"""Kernel time – Clock port and implementations.

Date-relative product views ("created today", "last 30 days") read the
current instant from a Clock; every instant is timezone-aware.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that always reports the same aware instant until moved."""

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware datetime")
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, delta: timedelta) -> datetime:
        self._fixed += delta
        return self._fixed


__all__ = ["Clock", "FrozenClock", "SystemClock"]
