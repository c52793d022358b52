"""Products – ProductExportSpecification built from an export query.

The specification is a pure function of the query (plus a clock for the
date-relative list views). It never touches storage: repositories either
render it to SQL (``to_expression``) or evaluate it in memory
(``is_satisfied_by``), and order results by ``order``.
"""
from __future__ import annotations

from datetime import datetime, timedelta, UTC
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from mp_catalog.application.products.list_view import ProductListView
from mp_catalog.kernel.ddd import (
    BaseSpecification,
    ContainsSpecification,
    EqualsSpecification,
    RangeSpecification,
    SortKey,
    all_of,
)
from mp_catalog.kernel.errors import UnauthorizedError
from mp_catalog.kernel.security import UserProfile
from mp_catalog.kernel.time import Clock, SystemClock

if TYPE_CHECKING:
    from mp_catalog.application.products.export_query import ExportProductsQuery

__all__ = ["ProductExportSpecification", "SORTABLE_FIELDS", "parse_sort"]

SORTABLE_FIELDS: tuple[str, ...] = ("id", "name", "brand", "description", "price", "unit")
KEYWORD_FIELDS: tuple[str, ...] = ("brand", "name", "description")
RECENT_WINDOW = timedelta(days=30)

_DESCENDING = frozenset({"desc", "descending"})


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _decimal(value: Any) -> Decimal | None:
    return None if value is None else Decimal(str(value))


def parse_sort(order_by: str | None, sort_direction: str | None) -> tuple[SortKey, ...]:
    """Map free-form ordering input onto a deterministic key list.

    Unknown fields fall back to ``id`` ascending; ``id`` always closes the
    list as a tiebreaker.
    """
    field = (_text(order_by) or "").lower()
    if field not in SORTABLE_FIELDS:
        return (SortKey("id"),)
    descending = (_text(sort_direction) or "").lower() in _DESCENDING
    keys = [SortKey(field, descending)]
    if field != "id":
        keys.append(SortKey("id"))
    return tuple(keys)


class ProductExportSpecification(BaseSpecification[Any]):
    """Filter and ordering for a product export."""

    def __init__(self, query: "ExportProductsQuery", *, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self.criteria: BaseSpecification[Any] = all_of(self._build(query))
        self.order: tuple[SortKey, ...] = parse_sort(query.order_by, query.sort_direction)

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.criteria.is_satisfied_by(candidate)

    def to_expression(self, model: Any) -> Any:
        return self.criteria.to_expression(model)

    def order_expressions(self, model: Any) -> list[Any]:
        return [key.to_expression(model) for key in self.order]

    def _build(self, query: "ExportProductsQuery") -> list[BaseSpecification[Any]]:
        specs: list[BaseSpecification[Any]] = []

        for field in ("name", "brand", "unit"):
            text = _text(getattr(query, field))
            if text is not None:
                specs.append(ContainsSpecification(field, text))

        if query.min_price is not None or query.max_price is not None:
            specs.append(RangeSpecification(
                "price",
                lower=_decimal(query.min_price),
                upper=_decimal(query.max_price),
            ))

        keyword = _text(query.keyword)
        if keyword is not None:
            brand, name, description = (ContainsSpecification(f, keyword) for f in KEYWORD_FIELDS)
            specs.append(brand | name | description)

        user = query.current_user
        if user is not None and user.tenant_id is not None:
            specs.append(EqualsSpecification("tenant_id", user.tenant_id))

        view_spec = self._list_view(ProductListView(query.list_view), user)
        if view_spec is not None:
            specs.append(view_spec)
        return specs

    def _list_view(
        self, view: ProductListView, user: UserProfile | None
    ) -> BaseSpecification[Any] | None:
        if view is ProductListView.ALL:
            return None
        if view is ProductListView.MY:
            if user is None:
                raise UnauthorizedError("The 'my' product view needs an acting user")
            return EqualsSpecification("created_by", user.user_id)

        now = self._clock.now()
        if view is ProductListView.CREATED_TODAY:
            tz = user.timezone if user is not None else UTC
            local_now = now.astimezone(tz)
            start = datetime(local_now.year, local_now.month, local_now.day, tzinfo=tz)
            return RangeSpecification(
                "created_at",
                lower=start.astimezone(UTC),
                upper=(start + timedelta(days=1)).astimezone(UTC),
                upper_inclusive=False,
            )
        return RangeSpecification("created_at", lower=(now - RECENT_WINDOW).astimezone(UTC))
