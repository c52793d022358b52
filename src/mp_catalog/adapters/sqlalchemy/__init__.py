"""SQLAlchemy adapter – product model, sessions and read repository."""
from mp_catalog.adapters.sqlalchemy.models import AuditMixin, Base, ProductRecord
from mp_catalog.adapters.sqlalchemy.repository import SqlAlchemyProductReadRepository
from mp_catalog.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "AuditMixin",
    "Base",
    "ProductRecord",
    "SqlAlchemyProductReadRepository",
    "SqlAlchemySessionFactory",
]
