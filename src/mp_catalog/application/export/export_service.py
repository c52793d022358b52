"""Application export – ExportService dispatches to the exporter for an ExportType."""
from __future__ import annotations

import time
from typing import Any, Mapping, Protocol

from mp_catalog.application.export.excel_export import ExcelExporter
from mp_catalog.application.export.pdf_export import PdfExporter
from mp_catalog.application.export.request import ExportType, RenderRequest
from mp_catalog.config.settings import ExportSettings
from mp_catalog.kernel.errors import UnsupportedExportTypeError
from mp_catalog.kernel.time import Clock
from mp_catalog.observability.logging import get_logger

__all__ = ["DocumentExporter", "ExportService"]

_log = get_logger(__name__)


class DocumentExporter(Protocol):
    """Port: render a :class:`RenderRequest` into a complete document."""

    async def export(self, request: RenderRequest[Any]) -> bytes: ...


class ExportService:
    """Dispatches a RenderRequest to the exporter registered for its ExportType."""

    def __init__(self, exporters: Mapping[ExportType, DocumentExporter]) -> None:
        self._exporters = dict(exporters)

    @classmethod
    def from_settings(cls, settings: ExportSettings, *, clock: Clock | None = None) -> "ExportService":
        return cls({
            ExportType.EXCEL: ExcelExporter(max_column_width=settings.excel_max_column_width),
            ExportType.PDF: PdfExporter(landscape_pages=settings.pdf_landscape, clock=clock),
        })

    def supports(self, export_type: ExportType) -> bool:
        return export_type in self._exporters

    async def export(self, export_type: ExportType, request: RenderRequest[Any]) -> bytes:
        export_type = ExportType.coerce(export_type)
        exporter = self._exporters.get(export_type)
        if exporter is None:
            raise UnsupportedExportTypeError(export_type)

        start = time.monotonic()
        result = await exporter.export(request)
        _log.debug(
            "export.rendered",
            export_type=export_type.value,
            rows=len(request.rows),
            columns=len(request.columns),
            size_bytes=len(result),
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        return result
