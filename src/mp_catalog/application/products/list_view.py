"""Products – ProductListView visibility partitions."""
from __future__ import annotations

from enum import Enum


class ProductListView(str, Enum):
    ALL = "all"
    MY = "my"
    CREATED_TODAY = "created_today"
    CREATED_30_DAYS = "created_30_days"

    @property
    def requires_user(self) -> bool:
        return self is ProductListView.MY


__all__ = ["ProductListView"]
