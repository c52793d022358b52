"""Specification pattern – composable boolean rules usable in memory and in SQL.

Every specification answers two questions about the same rule:

* ``is_satisfied_by(candidate)`` evaluates it against a loaded object;
* ``to_expression(model)`` renders it as a SQLAlchemy column expression
  against a mapped class, so the store does the filtering.

Both forms must agree; the in-memory form is what the fakes and unit tests
use, the expression form is what the SQLAlchemy adapter uses.
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Generic, Iterable, TypeVar

import sqlalchemy as sa

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications – provides operator overloads.

    Example::

        spec = ContainsSpecification("name", "chair") & RangeSpecification("price", upper=50)
        stmt = select(ProductRecord).where(spec.to_expression(ProductRecord))
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def to_expression(self, model: Any) -> Any:
        """Return a SQLAlchemy boolean clause for *model*."""
        raise NotImplementedError(f"{type(self).__name__} has no SQL expression form")

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


class TrueSpecification(BaseSpecification[T]):
    """Matches everything; the neutral element of ``&``."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True

    def to_expression(self, model: Any) -> Any:  # noqa: ARG002
        return sa.true()

    def __and__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:  # type: ignore[override]
        return other


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)

    def to_expression(self, model: Any) -> Any:
        return sa.and_(self._left.to_expression(model), self._right.to_expression(model))


class OrSpecification(BaseSpecification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)

    def to_expression(self, model: Any) -> Any:
        return sa.or_(self._left.to_expression(model), self._right.to_expression(model))


class NotSpecification(BaseSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: BaseSpecification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)

    def to_expression(self, model: Any) -> Any:
        return sa.not_(self._spec.to_expression(model))


class EqualsSpecification(BaseSpecification[T]):
    """``candidate.<field> == value``."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        return getattr(candidate, self.field) == self.value

    def to_expression(self, model: Any) -> Any:
        return getattr(model, self.field) == self.value

    def __repr__(self) -> str:
        return f"EqualsSpecification({self.field!r}, {self.value!r})"


class ContainsSpecification(BaseSpecification[T]):
    """Case-insensitive substring match; ``NULL`` never matches.

    LIKE wildcards in *text* are escaped, so ``"50%"`` matches literally.
    """

    def __init__(self, field: str, text: str) -> None:
        self.field = field
        self.text = text

    def is_satisfied_by(self, candidate: T) -> bool:
        value = getattr(candidate, self.field)
        return value is not None and self.text.lower() in str(value).lower()

    def to_expression(self, model: Any) -> Any:
        return getattr(model, self.field).icontains(self.text, autoescape=True)

    def __repr__(self) -> str:
        return f"ContainsSpecification({self.field!r}, {self.text!r})"


class RangeSpecification(BaseSpecification[T]):
    """``lower <= candidate.<field> <= upper`` with either bound optional.

    With ``upper_inclusive=False`` the upper bound is exclusive, which is the
    natural form for half-open time windows.
    """

    def __init__(
        self,
        field: str,
        lower: Any = None,
        upper: Any = None,
        *,
        upper_inclusive: bool = True,
    ) -> None:
        self.field = field
        self.lower = lower
        self.upper = upper
        self.upper_inclusive = upper_inclusive

    def is_satisfied_by(self, candidate: T) -> bool:
        value = getattr(candidate, self.field)
        if value is None:
            return False
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None:
            if self.upper_inclusive and value > self.upper:
                return False
            if not self.upper_inclusive and value >= self.upper:
                return False
        return True

    def to_expression(self, model: Any) -> Any:
        column = getattr(model, self.field)
        clauses = [column.is_not(None)]
        if self.lower is not None:
            clauses.append(column >= self.lower)
        if self.upper is not None:
            clauses.append(column <= self.upper if self.upper_inclusive else column < self.upper)
        return sa.and_(*clauses)

    def __repr__(self) -> str:
        return f"RangeSpecification({self.field!r}, lower={self.lower!r}, upper={self.upper!r})"


@dataclasses.dataclass(frozen=True)
class SortKey:
    """Single ordering criterion; ``NULL`` sorts before any value."""

    field: str
    descending: bool = False

    def to_expression(self, model: Any) -> Any:
        column = getattr(model, self.field)
        return column.desc().nulls_last() if self.descending else column.asc().nulls_first()


def all_of(specs: Iterable[BaseSpecification[T]]) -> BaseSpecification[T]:
    """Fold *specs* with ``&``; an empty iterable matches everything."""
    combined: BaseSpecification[T] = TrueSpecification()
    for spec in specs:
        combined = combined & spec
    return combined


def sort_candidates(candidates: Iterable[T], keys: Iterable[SortKey]) -> list[T]:
    """Sort loaded objects the same way :meth:`SortKey.to_expression` orders rows."""
    result = list(candidates)
    # Stable sorts applied from the least significant key upwards.
    for key in reversed(list(keys)):
        present = [c for c in result if getattr(c, key.field) is not None]
        missing = [c for c in result if getattr(c, key.field) is None]
        present.sort(key=lambda c, f=key.field: getattr(c, f), reverse=key.descending)
        result = present + missing if key.descending else missing + present
    return result


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
