"""Application export – document rendering helpers."""
from mp_catalog.application.export.request import ColumnDef, ExportType, RenderRequest
from mp_catalog.application.export.excel_export import ExcelExporter
from mp_catalog.application.export.pdf_export import PdfExporter
from mp_catalog.application.export.export_service import DocumentExporter, ExportService

__all__ = [
    "ColumnDef",
    "DocumentExporter",
    "ExcelExporter",
    "ExportService",
    "ExportType",
    "PdfExporter",
    "RenderRequest",
]
