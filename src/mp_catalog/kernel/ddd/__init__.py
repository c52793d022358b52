"""DDD building blocks – public re-export surface."""

from mp_catalog.kernel.ddd.specification import (
    AndSpecification,
    BaseSpecification,
    ContainsSpecification,
    EqualsSpecification,
    NotSpecification,
    OrSpecification,
    RangeSpecification,
    SortKey,
    TrueSpecification,
    all_of,
    sort_candidates,
)

__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "ContainsSpecification",
    "EqualsSpecification",
    "NotSpecification",
    "OrSpecification",
    "RangeSpecification",
    "SortKey",
    "TrueSpecification",
    "all_of",
    "sort_candidates",
]
