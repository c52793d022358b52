"""SQLAlchemy adapter – SqlAlchemyProductReadRepository."""
from __future__ import annotations

import asyncio
from typing import Any, Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mp_catalog.adapters.sqlalchemy.models import PROJECTED_COLUMNS, ProductRecord
from mp_catalog.application.products.dtos import ProductDto
from mp_catalog.application.products.specification import ProductExportSpecification
from mp_catalog.config.settings import ExportSettings
from mp_catalog.kernel.errors import DataAccessError
from mp_catalog.observability.logging import get_logger

_log = get_logger(__name__)


class SqlAlchemyProductReadRepository:
    """Runs the export specification as a single projected SELECT.

    Only the projected columns are selected, so no ORM instances are loaded
    or tracked by the session.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        *,
        timeout_seconds: float = 30.0,
        model: type[Any] = ProductRecord,
    ) -> None:
        self._session_factory = session_factory
        self._timeout = timeout_seconds
        self._model = model

    @classmethod
    def from_settings(
        cls, session_factory: Callable[[], AsyncSession], settings: ExportSettings
    ) -> "SqlAlchemyProductReadRepository":
        return cls(session_factory, timeout_seconds=settings.query_timeout_seconds)

    def build_statement(self, spec: ProductExportSpecification) -> Any:
        columns = [getattr(self._model, name) for name in PROJECTED_COLUMNS]
        return (
            select(*columns)
            .where(spec.to_expression(self._model))
            .order_by(*spec.order_expressions(self._model))
        )

    async def list(self, spec: ProductExportSpecification) -> list[ProductDto]:
        stmt = self.build_statement(spec)
        try:
            async with self._session_factory() as session:
                result = await asyncio.wait_for(session.execute(stmt), timeout=self._timeout)
                rows = result.mappings().all()
        except TimeoutError as exc:
            _log.error("products.query_timeout", timeout_seconds=self._timeout)
            raise DataAccessError.timed_out(self._timeout, cause=exc) from exc
        except (SQLAlchemyError, OSError) as exc:
            _log.error("products.query_failed", error=type(exc).__name__)
            raise DataAccessError("Product store query failed", cause=exc) from exc
        return [ProductDto.from_record(row) for row in rows]


__all__ = ["SqlAlchemyProductReadRepository"]
