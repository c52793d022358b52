"""SQLAlchemy ORM models – the product catalogue table."""
from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


class AuditMixin:
    """Adds ``created_at`` (UTC) and ``created_by`` columns.

    ``created_at`` is stored in UTC; list-view filters compare against UTC
    bounds.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utc_now,
        nullable=False,
        index=True,
    )
    created_by: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)


class ProductRecord(AuditMixin, Base):
    """Stored product. ``pictures`` holds a JSON list of ``{name, size, url}``."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    brand: Mapped[str | None] = mapped_column(String(256), nullable=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("0"))
    unit: Mapped[str | None] = mapped_column(String(32), nullable=True)
    pictures: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)


#: Columns selected for the export projection, in ``ProductDto`` order.
PROJECTED_COLUMNS: tuple[str, ...] = ("id", "brand", "name", "description", "price", "unit", "pictures")

__all__ = ["AuditMixin", "Base", "PROJECTED_COLUMNS", "ProductRecord"]
