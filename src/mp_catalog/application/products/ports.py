"""Products – read-side repository port."""
from __future__ import annotations

from typing import Protocol

from mp_catalog.application.products.dtos import ProductDto
from mp_catalog.application.products.specification import ProductExportSpecification


class ProductReadRepository(Protocol):
    """Port: run one read-only, projected query for a specification.

    Implementations return rows in ``spec.order`` without duplicates and
    raise :class:`~mp_catalog.kernel.errors.DataAccessError` when the store
    cannot be queried; they never return partial results.
    """

    async def list(self, spec: ProductExportSpecification) -> list[ProductDto]: ...


__all__ = ["ProductReadRepository"]
