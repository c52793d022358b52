"""Products – export use case, specification, layouts and ports."""
from mp_catalog.application.products.dtos import ProductDto, ProductImage
from mp_catalog.application.products.export_query import ExportProductsQuery, ExportProductsQueryHandler
from mp_catalog.application.products.layouts import ExportLayout, resolve_layout
from mp_catalog.application.products.list_view import ProductListView
from mp_catalog.application.products.ports import ProductReadRepository
from mp_catalog.application.products.serialization import PictureSerializer
from mp_catalog.application.products.specification import ProductExportSpecification, parse_sort

__all__ = [
    "ExportLayout",
    "ExportProductsQuery",
    "ExportProductsQueryHandler",
    "PictureSerializer",
    "ProductDto",
    "ProductExportSpecification",
    "ProductImage",
    "ProductListView",
    "ProductReadRepository",
    "parse_sort",
    "resolve_layout",
]
