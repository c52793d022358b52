"""Application export – PdfExporter (reportlab platypus).

Renders a single table, one column per :class:`ColumnDef`, split across as
many pages as needed with the header row repeated on every page. With
``include_header_decoration`` the first page opens with a title banner and
the generation timestamp.
"""
from __future__ import annotations

import io
from decimal import Decimal
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from mp_catalog.application.export.request import RenderRequest
from mp_catalog.kernel.time import Clock, SystemClock

__all__ = ["PdfExporter"]

_HEADER_BG = colors.HexColor("#334155")
_HEADER_TEXT = colors.HexColor("#F8FAFC")
_ROW_ALT = colors.HexColor("#F1F5F9")
_BORDER = colors.HexColor("#CBD5E1")
_ACCENT = colors.HexColor("#3B82F6")
_MARGIN = 15 * mm


def _format(value: Any, fmt: str) -> str:
    if value is None:
        return ""
    if fmt == "currency" and isinstance(value, (int, float, Decimal)):
        return f"{value:,.2f}"
    return str(value)


class PdfExporter:
    """Exports rows to a PDF table."""

    def __init__(self, *, landscape_pages: bool = True, clock: Clock | None = None) -> None:
        self._pagesize = landscape(A4) if landscape_pages else A4
        self._clock = clock or SystemClock()
        self._styles = getSampleStyleSheet()
        self._title_style = ParagraphStyle(
            name="ExportTitle", parent=self._styles["Title"], textColor=_ACCENT, spaceAfter=4,
        )
        self._meta_style = ParagraphStyle(
            name="ExportMeta", parent=self._styles["Normal"], fontSize=8, textColor=colors.gray,
        )
        self._cell_style = ParagraphStyle(
            name="ExportCell", parent=self._styles["Normal"], fontSize=8, leading=10,
        )
        self._header_style = ParagraphStyle(
            name="ExportHeader", parent=self._cell_style,
            fontName="Helvetica-Bold", textColor=_HEADER_TEXT,
        )

    async def export(self, request: RenderRequest[Any]) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=self._pagesize,
            leftMargin=_MARGIN,
            rightMargin=_MARGIN,
            topMargin=_MARGIN,
            bottomMargin=_MARGIN,
            title=request.title,
        )

        story: list[Any] = []
        if request.include_header_decoration:
            generated = self._clock.now().strftime("%Y-%m-%d %H:%M %Z").strip()
            story.append(Paragraph(escape(request.title), self._title_style))
            story.append(Paragraph(escape(generated), self._meta_style))
            story.append(Spacer(1, 6 * mm))

        story.append(self._build_table(request, doc.width))
        doc.build(story)
        return buf.getvalue()

    def _build_table(self, request: RenderRequest[Any], width: float) -> Table:
        data: list[list[Any]] = [
            [Paragraph(escape(h), self._header_style) for h in request.headers]
        ]
        for row in request.rows:
            data.append([
                Paragraph(escape(_format(value, col.format)), self._cell_style)
                for col, value in zip(request.columns, request.cells(row))
            ])

        col_count = max(len(request.columns), 1)
        table = Table(data, colWidths=[width / col_count] * col_count, repeatRows=1)
        table.setStyle(self._table_style(len(data)))
        return table

    @staticmethod
    def _table_style(row_count: int) -> TableStyle:
        commands: list[tuple[Any, ...]] = [
            ("BACKGROUND", (0, 0), (-1, 0), _HEADER_BG),
            ("GRID", (0, 0), (-1, -1), 0.5, _BORDER),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("TOPPADDING", (0, 0), (-1, -1), 3),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ]
        for idx in range(2, row_count, 2):
            commands.append(("BACKGROUND", (0, idx), (-1, idx), _ROW_ALT))
        return TableStyle(commands)
