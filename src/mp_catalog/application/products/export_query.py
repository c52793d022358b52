"""Products – ExportProductsQuery and its handler.

The handler runs three stages: build the filter specification and run one
read-only projected query, pick the layout for the requested format, and
render the rows through the export service. Expected caller mistakes come
back as ``Err``; store failures, unknown formats and cancellation raise.
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal, InvalidOperation
from typing import Any

from mp_catalog.application.cqrs import Query, QueryHandler
from mp_catalog.application.export import ExportService, ExportType, RenderRequest
from mp_catalog.application.localization import Localizer, NullLocalizer
from mp_catalog.application.products.layouts import resolve_layout
from mp_catalog.application.products.list_view import ProductListView
from mp_catalog.application.products.ports import ProductReadRepository
from mp_catalog.application.products.serialization import PictureSerializer
from mp_catalog.application.products.specification import ProductExportSpecification
from mp_catalog.config.settings import ExportSettings
from mp_catalog.kernel.errors import (
    BaseError,
    OperationCancelledError,
    UnauthorizedError,
    ValidationError,
)
from mp_catalog.kernel.security import UserProfile
from mp_catalog.kernel.time import Clock, SystemClock
from mp_catalog.kernel.types import Err, Ok, Result
from mp_catalog.observability.logging import get_logger
from mp_catalog.resilience.cancellation import CancellationToken

__all__ = ["ExportProductsQuery", "ExportProductsQueryHandler"]

_log = get_logger(__name__)


def _price_bound(field: str, value: Any, problems: ValidationError) -> Decimal | None:
    """Return *value* as a usable bound, or record why it is not one."""
    if value is None:
        return None
    try:
        bound = Decimal(str(value))
    except InvalidOperation:
        problems.add(field, f"{value!r} is not a number")
        return None
    if not bound.is_finite():
        problems.add(field, "Price bounds must be finite")
        return None
    if bound < 0:
        problems.add(field, "Price bounds must not be negative")
        return None
    return bound


@dataclasses.dataclass(frozen=True)
class ExportProductsQuery(Query):
    """Filter, ordering and format for one product export."""

    name: str | None = None
    brand: str | None = None
    unit: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    keyword: str | None = None
    order_by: str | None = None
    sort_direction: str | None = None
    list_view: ProductListView = ProductListView.ALL
    current_user: UserProfile | None = None
    export_type: ExportType = ExportType.EXCEL

    @property
    def specification(self) -> ProductExportSpecification:
        """Filter for this query with date-relative views measured by the system clock."""
        return self.specification_at(SystemClock())

    def specification_at(self, clock: Clock) -> ProductExportSpecification:
        return ProductExportSpecification(self, clock=clock)


class ExportProductsQueryHandler(QueryHandler[ExportProductsQuery, Result[bytes, BaseError]]):
    def __init__(
        self,
        repository: ProductReadRepository,
        export_service: ExportService,
        *,
        localizer: Localizer | None = None,
        serializer: PictureSerializer | None = None,
        settings: ExportSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._repository = repository
        self._export_service = export_service
        self._localizer = localizer or NullLocalizer()
        self._serializer = serializer or PictureSerializer()
        self._settings = settings or ExportSettings()
        self._clock = clock or SystemClock()

    async def handle(
        self,
        query: ExportProductsQuery,
        token: CancellationToken | None = None,
    ) -> Result[bytes, BaseError]:
        layout = resolve_layout(query.export_type, self._localizer, self._serializer)
        log = _log.bind(
            export_type=layout.export_type.value,
            list_view=getattr(query.list_view, "value", query.list_view),
        )

        failure = self._reject(query)
        if failure is not None:
            log.warning("product_export.rejected", code=failure.code, reason=failure.message)
            return Err(failure)

        spec = query.specification_at(self._clock)
        log.info("product_export.started")
        try:
            if token is not None:
                token.raise_if_cancelled()
                rows = await token.guard(self._repository.list(spec))
                token.raise_if_cancelled()
            else:
                rows = await self._repository.list(spec)
        except OperationCancelledError:
            log.info("product_export.cancelled")
            raise
        log.info("product_export.queried", rows=len(rows))

        request = RenderRequest(
            rows=rows,
            columns=layout.columns,
            title=self._localizer.lookup(self._settings.document_title),
            include_header_decoration=layout.include_header_decoration,
        )
        content = await self._export_service.export(layout.export_type, request)
        log.info("product_export.rendered", rows=len(rows), size_bytes=len(content))
        return Ok(content)

    @staticmethod
    def _reject(query: ExportProductsQuery) -> BaseError | None:
        problems = ValidationError("Invalid product export filter")
        try:
            view: ProductListView | None = ProductListView(query.list_view)
        except ValueError:
            problems.add("list_view", f"Unknown list view {query.list_view!r}")
            view = None

        low = _price_bound("min_price", query.min_price, problems)
        high = _price_bound("max_price", query.max_price, problems)
        if low is not None and high is not None and low > high:
            problems.add("min_price", "min_price must not exceed max_price")

        if problems.errors:
            return problems
        if view is not None and view.requires_user and query.current_user is None:
            return UnauthorizedError(f"The {view.value!r} product view needs an acting user")
        return None
