"""Unit tests for ExportProductsQueryHandler (in-memory store, real and recording exporters)."""
from __future__ import annotations

import asyncio
import io
import json
from decimal import Decimal

import openpyxl
import pytest
from structlog.testing import capture_logs

from mp_catalog.application.export import ExportService, ExportType
from mp_catalog.application.localization import CatalogLocalizer, NullLocalizer
from mp_catalog.application.products import (
    ExportProductsQuery,
    ExportProductsQueryHandler,
    PictureSerializer,
    ProductDto,
    ProductImage,
    ProductListView,
    resolve_layout,
)
from mp_catalog.config.settings import ExportSettings
from mp_catalog.kernel.errors import (
    ConfigurationError,
    DataAccessError,
    OperationCancelledError,
    UnsupportedExportTypeError,
)
from mp_catalog.kernel.security import UserProfile
from mp_catalog.resilience.cancellation import CancellationToken
from mp_catalog.testing.fakes import (
    FakeClock,
    InMemoryProductReadRepository,
    RecordingExporter,
    StoredProduct,
)

PRICES = ("5", "10", "30", "50", "75")


def _catalogue() -> list[StoredProduct]:
    return [
        StoredProduct(
            id=i,
            name=f"Widget {price}",
            brand="Acme",
            description=f"A widget costing {price}",
            price=Decimal(price),
            unit="pcs",
            pictures=[{"name": f"w{i}.png", "size": 100 * i, "url": f"/files/w{i}.png"}],
        )
        for i, price in enumerate(PRICES, start=1)
    ]


class _Harness:
    def __init__(self, products=None, **repo_kwargs) -> None:
        self.repository = InMemoryProductReadRepository(
            _catalogue() if products is None else products, **repo_kwargs
        )
        self.pdf = RecordingExporter()
        self.excel = RecordingExporter()
        self.handler = ExportProductsQueryHandler(
            self.repository,
            ExportService({ExportType.PDF: self.pdf, ExportType.EXCEL: self.excel}),
            clock=FakeClock(),
        )

    def run(self, query: ExportProductsQuery, token: CancellationToken | None = None):
        return asyncio.run(self.handler.handle(query, token))


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------
class TestLayouts:
    def test_pdf_has_five_columns_without_pictures(self) -> None:
        layout = resolve_layout(ExportType.PDF, NullLocalizer(), PictureSerializer())
        headers = [c.header for c in layout.columns]
        assert headers == ["Brand Name", "Product Name", "Description", "Price of unit", "Unit"]
        assert layout.include_header_decoration is True

    def test_excel_has_six_columns_with_pictures_last(self) -> None:
        layout = resolve_layout(ExportType.EXCEL, NullLocalizer(), PictureSerializer())
        headers = [c.header for c in layout.columns]
        assert headers == ["Brand Name", "Product Name", "Description", "Price of unit", "Unit", "Pictures"]
        assert layout.include_header_decoration is False

    def test_headers_are_localized_with_fallback(self) -> None:
        loc = CatalogLocalizer({"Brand Name": "Marke", "Unit": "Einheit"}, locale="de")
        layout = resolve_layout(ExportType.EXCEL, loc, PictureSerializer())
        headers = [c.header for c in layout.columns]
        assert headers[0] == "Marke"
        assert headers[4] == "Einheit"
        assert headers[1] == "Product Name"

    def test_pictures_column_serializes_list(self) -> None:
        layout = resolve_layout(ExportType.EXCEL, NullLocalizer(), PictureSerializer())
        row = ProductDto(1, "b", "n", None, Decimal("1"), None, (ProductImage("a.png", "/a.png", 3),))
        assert json.loads(layout.columns[-1].accessor(row)) == [{"name": "a.png", "size": 3, "url": "/a.png"}]

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(UnsupportedExportTypeError):
            resolve_layout("docx", NullLocalizer(), PictureSerializer())


# ---------------------------------------------------------------------------
# Handler scenarios
# ---------------------------------------------------------------------------
class TestExportProductsQueryHandler:
    def test_price_range_pdf_scenario(self) -> None:
        h = _Harness()
        result = h.run(ExportProductsQuery(
            min_price=Decimal("10"), max_price=Decimal("50"), export_type=ExportType.PDF,
        ))
        assert result.is_ok()
        request = h.pdf.last
        assert [r.price for r in request.rows] == [Decimal("10"), Decimal("30"), Decimal("50")]
        assert len(request.columns) == 5
        assert request.include_header_decoration is True
        assert request.title == "Products"
        assert h.excel.requests == []

    def test_unfiltered_returns_whole_collection(self) -> None:
        h = _Harness()
        h.run(ExportProductsQuery())
        assert [r.id for r in h.excel.last.rows] == [1, 2, 3, 4, 5]
        assert len(h.excel.last.columns) == 6

    def test_no_match_is_successful_empty_export(self) -> None:
        h = _Harness()
        result = h.run(ExportProductsQuery(keyword="steel", export_type=ExportType.EXCEL))
        assert result.is_ok()
        assert h.excel.last.rows == []
        assert result.value.decode().splitlines() == [
            "Brand Name|Product Name|Description|Price of unit|Unit|Pictures"
        ]

    def test_out_of_range_export_type_raises(self) -> None:
        h = _Harness()
        with pytest.raises(ConfigurationError):
            h.run(ExportProductsQuery(export_type="docx"))  # type: ignore[arg-type]
        assert h.repository.calls == 0
        assert h.pdf.requests == [] and h.excel.requests == []

    def test_inverted_price_range_is_validation_failure(self) -> None:
        h = _Harness()
        result = h.run(ExportProductsQuery(min_price=Decimal("50"), max_price=Decimal("10")))
        assert result.is_err()
        assert result.kind == "validation_error"
        assert h.repository.calls == 0

    def test_negative_price_is_validation_failure(self) -> None:
        result = _Harness().run(ExportProductsQuery(min_price=Decimal("-1")))
        assert result.is_err()
        assert result.error.errors[0]["field"] == "min_price"

    @pytest.mark.parametrize("bound", [Decimal("NaN"), Decimal("Infinity"), Decimal("sNaN")])
    def test_non_finite_price_is_validation_failure(self, bound: Decimal) -> None:
        h = _Harness()
        result = h.run(ExportProductsQuery(min_price=bound))
        assert result.is_err()
        assert result.error.fields == ["min_price"]
        assert h.repository.calls == 0

    def test_unparseable_price_is_validation_failure(self) -> None:
        result = _Harness().run(ExportProductsQuery(max_price="abc"))  # type: ignore[arg-type]
        assert result.is_err()
        assert result.error.fields == ["max_price"]

    def test_unknown_list_view_is_validation_failure(self) -> None:
        result = _Harness().run(ExportProductsQuery(list_view="everything"))  # type: ignore[arg-type]
        assert result.is_err()
        assert result.error.errors[0]["field"] == "list_view"

    def test_my_view_without_user_is_unauthorized(self) -> None:
        h = _Harness()
        result = h.run(ExportProductsQuery(list_view=ProductListView.MY))
        assert result.is_err()
        assert result.kind == "unauthorized"
        assert h.repository.calls == 0

    def test_my_view_with_user(self) -> None:
        products = _catalogue()
        products[0].created_by = "u-1"
        h = _Harness(products)
        user = UserProfile(user_id="u-1")
        h.run(ExportProductsQuery(list_view=ProductListView.MY, current_user=user))
        assert [r.id for r in h.excel.last.rows] == [1]

    def test_store_failure_propagates_unmodified(self) -> None:
        error = DataAccessError("store unreachable")
        h = _Harness(fail_with=error)
        with pytest.raises(DataAccessError) as exc_info:
            h.run(ExportProductsQuery())
        assert exc_info.value is error
        assert h.excel.requests == []

    def test_cancel_during_query_produces_nothing(self) -> None:
        h = _Harness(delay=5.0)

        async def _run() -> None:
            token = CancellationToken()
            task = asyncio.create_task(h.handler.handle(ExportProductsQuery(), token))
            await asyncio.sleep(0.01)
            token.cancel()
            await task

        with pytest.raises(OperationCancelledError):
            asyncio.run(_run())
        assert h.excel.requests == []

    def test_pre_cancelled_token_skips_query(self) -> None:
        h = _Harness()
        token = CancellationToken()
        token.cancel()
        with pytest.raises(OperationCancelledError):
            h.run(ExportProductsQuery(), token)
        assert h.repository.calls == 0

    def test_same_request_twice_yields_same_rows(self) -> None:
        h = _Harness()
        q = ExportProductsQuery(keyword="widget", order_by="price", sort_direction="desc")
        first, second = h.run(q), h.run(q)
        assert first.value == second.value
        assert h.excel.requests[0].rows == h.excel.requests[1].rows

    def test_ordering_is_applied(self) -> None:
        h = _Harness()
        h.run(ExportProductsQuery(order_by="price", sort_direction="descending"))
        assert [r.id for r in h.excel.last.rows] == [5, 4, 3, 2, 1]

    def test_title_is_localized(self) -> None:
        h = _Harness()
        h.handler = ExportProductsQueryHandler(
            h.repository,
            ExportService({ExportType.PDF: h.pdf, ExportType.EXCEL: h.excel}),
            localizer=CatalogLocalizer({"Products": "Produkte"}),
            settings=ExportSettings(document_title="Products"),
        )
        h.run(ExportProductsQuery(export_type=ExportType.PDF))
        assert h.pdf.last.title == "Produkte"

    def test_logs_pipeline_stages(self) -> None:
        with capture_logs() as logs:
            _Harness().run(ExportProductsQuery(export_type=ExportType.PDF))
        events = [e["event"] for e in logs if e["event"].startswith("product_export.")]
        assert events[:3] == ["product_export.started", "product_export.queried", "product_export.rendered"]
        queried = next(e for e in logs if e["event"] == "product_export.queried")
        assert queried["rows"] == 5
        assert queried["export_type"] == "pdf"


# ---------------------------------------------------------------------------
# End to end with the real exporters
# ---------------------------------------------------------------------------
class TestRealDocuments:
    def _handler(self, products: list[StoredProduct] | None = None) -> ExportProductsQueryHandler:
        return ExportProductsQueryHandler(
            InMemoryProductReadRepository(_catalogue() if products is None else products),
            ExportService.from_settings(ExportSettings(), clock=FakeClock()),
        )

    def test_spreadsheet_has_six_columns_and_matching_rows(self) -> None:
        result = asyncio.run(self._handler().handle(ExportProductsQuery(max_price=Decimal("30"))))
        ws = openpyxl.load_workbook(io.BytesIO(result.value)).active
        assert ws.max_column == 6
        assert ws.max_row == 4
        assert ws["B2"].value == "Widget 5"
        assert json.loads(ws["F2"].value) == [{"name": "w1.png", "size": 100, "url": "/files/w1.png"}]

    def test_zero_row_spreadsheet_is_well_formed(self) -> None:
        result = asyncio.run(self._handler().handle(ExportProductsQuery(keyword="steel")))
        ws = openpyxl.load_workbook(io.BytesIO(result.value)).active
        assert ws.max_row == 1
        assert ws["F1"].value == "Pictures"

    def test_pdf_document(self) -> None:
        result = asyncio.run(self._handler().handle(ExportProductsQuery(export_type=ExportType.PDF)))
        assert result.value.startswith(b"%PDF-")

    def test_control_characters_in_store_do_not_break_spreadsheet(self) -> None:
        products = _catalogue()
        products[0].description = "line\x0bbreak\x00"
        result = asyncio.run(self._handler(products).handle(ExportProductsQuery(max_price=Decimal("5"))))
        assert result.is_ok()
        ws = openpyxl.load_workbook(io.BytesIO(result.value)).active
        assert ws["C2"].value == "linebreak"

    def test_formula_like_names_stay_text(self) -> None:
        products = _catalogue()
        products[0].name = "=1+1"
        products[1].name = '=HYPERLINK("http://example.invalid")'
        result = asyncio.run(self._handler(products).handle(ExportProductsQuery(max_price=Decimal("10"))))
        ws = openpyxl.load_workbook(io.BytesIO(result.value)).active
        assert ws["B2"].value == "=1+1"
        assert ws["B2"].data_type == "s"
        assert ws["B3"].data_type == "s"
