"""Products – per-format export layouts (ordered column tables).

Column headers are localization keys; their order is the column order of
the rendered document. PDF drops the pictures column.
"""
from __future__ import annotations

import dataclasses
from operator import attrgetter

from mp_catalog.application.export import ColumnDef, ExportType
from mp_catalog.application.localization import Localizer
from mp_catalog.application.products.dtos import ProductDto
from mp_catalog.application.products.serialization import PictureSerializer
from mp_catalog.kernel.errors import UnsupportedExportTypeError

__all__ = ["ExportLayout", "resolve_layout"]

_BASE_COLUMNS: tuple[tuple[str, str, str], ...] = (
    ("Brand Name", "brand", ""),
    ("Product Name", "name", ""),
    ("Description", "description", ""),
    ("Price of unit", "price", "currency"),
    ("Unit", "unit", ""),
)
PICTURES_KEY = "Pictures"


@dataclasses.dataclass(frozen=True)
class ExportLayout:
    """The exporter to use and the columns it renders."""

    export_type: ExportType
    columns: tuple[ColumnDef[ProductDto], ...]
    include_header_decoration: bool = False


def _base_columns(localizer: Localizer) -> list[ColumnDef[ProductDto]]:
    return [
        ColumnDef(localizer.lookup(key), attrgetter(attr), fmt)
        for key, attr, fmt in _BASE_COLUMNS
    ]


def resolve_layout(
    export_type: ExportType | str,
    localizer: Localizer,
    serializer: PictureSerializer,
) -> ExportLayout:
    """Return the layout for *export_type*; unknown types raise."""
    export_type = ExportType.coerce(export_type)

    if export_type is ExportType.PDF:
        return ExportLayout(ExportType.PDF, tuple(_base_columns(localizer)), include_header_decoration=True)

    if export_type is ExportType.EXCEL:
        pictures = ColumnDef(
            localizer.lookup(PICTURES_KEY),
            lambda item: serializer.serialize(item.pictures),
        )
        return ExportLayout(ExportType.EXCEL, (*_base_columns(localizer), pictures))

    raise UnsupportedExportTypeError(export_type)
