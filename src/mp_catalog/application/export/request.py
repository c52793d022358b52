"""Application export – ExportType, ColumnDef and RenderRequest."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar

from mp_catalog.kernel.errors import UnsupportedExportTypeError

__all__ = ["ColumnDef", "ExportType", "RenderRequest"]

T = TypeVar("T")


class ExportType(str, Enum):
    """Document formats a query can be exported to."""

    EXCEL = "excel"
    PDF = "pdf"

    @classmethod
    def coerce(cls, value: Any) -> "ExportType":
        """Return the member named by *value* (member, value or name, any case).

        Anything else raises :class:`UnsupportedExportTypeError`; unknown
        values are never mapped to a default format.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if lowered in (member.value, member.name.lower()):
                    return member
        raise UnsupportedExportTypeError(value)


@dataclass(frozen=True)
class ColumnDef(Generic[T]):
    """Defines a single column in an export."""

    header: str                          # localized column header text
    accessor: Callable[[T], Any]         # row -> cell value
    format: str = ""                     # optional format hint, e.g. "currency"


@dataclass(frozen=True)
class RenderRequest(Generic[T]):
    """Everything a document exporter needs to produce one document.

    ``columns`` is ordered: its order is the column order of the output.
    """

    rows: Sequence[T]
    columns: tuple[ColumnDef[T], ...]
    title: str = "export"
    include_header_decoration: bool = False

    @property
    def headers(self) -> list[str]:
        return [col.header for col in self.columns]

    def cells(self, row: T) -> list[Any]:
        return [col.accessor(row) for col in self.columns]
