"""Application export – ExcelExporter (openpyxl)."""
from __future__ import annotations

import io
from decimal import Decimal
from typing import Any

import openpyxl
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from mp_catalog.application.export.request import RenderRequest

__all__ = ["ExcelExporter"]

_NUMBER_FORMATS = {"currency": "#,##0.00"}
_SHEET_NAME_LIMIT = 31
_INVALID_SHEET_CHARS = str.maketrans({c: " " for c in "[]:*?/\\"})


def _cell_value(value: Any) -> Any:
    if value is None or isinstance(value, (int, float, Decimal, bool)):
        return value
    # Control characters other than tab and newlines are not allowed in XML cells.
    return ILLEGAL_CHARACTERS_RE.sub("", str(value))


class ExcelExporter:
    """Exports rows to an .xlsx workbook with a bold header row."""

    def __init__(self, *, max_column_width: int = 50) -> None:
        self._max_column_width = max_column_width

    async def export(self, request: RenderRequest[Any]) -> bytes:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = request.title.translate(_INVALID_SHEET_CHARS)[:_SHEET_NAME_LIMIT] or "Sheet1"

        for col_idx, header in enumerate(request.headers, start=1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.font = Font(bold=True)
        ws.freeze_panes = "A2"

        for row_idx, row in enumerate(request.rows, start=2):
            for col_idx, (col_def, value) in enumerate(
                zip(request.columns, request.cells(row)), start=1
            ):
                cell = ws.cell(row=row_idx, column=col_idx, value=_cell_value(value))
                if cell.data_type == "f":
                    # Text such as "=1+1" is data, never a formula.
                    cell.data_type = "s"
                if col_def.format in _NUMBER_FORMATS:
                    cell.number_format = _NUMBER_FORMATS[col_def.format]

        # Auto-size columns
        for col_idx in range(1, len(request.columns) + 1):
            letter = get_column_letter(col_idx)
            max_len = max(len(str(cell.value or "")) for cell in ws[letter])
            ws.column_dimensions[letter].width = min(max_len + 2, self._max_column_width)

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
