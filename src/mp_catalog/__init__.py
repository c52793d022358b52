"""
mp_catalog – Product catalogue export service.

Import path convention::

    from mp_catalog.kernel.errors import DataAccessError
    from mp_catalog.application.products import ExportProductsQuery, ExportProductsQueryHandler
    from mp_catalog.application.export import ExportType
    from mp_catalog.adapters.sqlalchemy import SqlAlchemyProductReadRepository
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
