"""Products – read-side DTOs and the storage-to-row projection."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Any, Iterable, Mapping


@dataclasses.dataclass(frozen=True)
class ProductImage:
    """Reference to an uploaded product picture."""

    name: str
    url: str
    size: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProductImage":
        size = data.get("size")
        return cls(
            name=str(data.get("name", "")),
            url=str(data.get("url", "")),
            size=int(size) if size is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "size": self.size, "url": self.url}


@dataclasses.dataclass(frozen=True)
class ProductDto:
    """One exported row. ``None`` fields mirror ``NULL`` in the store."""

    id: int | None
    brand: str | None
    name: str | None
    description: str | None
    price: Decimal | None
    unit: str | None
    pictures: tuple[ProductImage, ...] | None = None

    @classmethod
    def from_record(cls, record: Any) -> "ProductDto":
        """Project a stored product (ORM object, row or mapping) onto a row.

        Fields are copied as-is; ``pictures`` is normalised from the stored
        list of dicts into :class:`ProductImage` values.
        """
        get = record.get if isinstance(record, Mapping) else lambda f: getattr(record, f, None)
        return cls(
            id=get("id"),
            brand=get("brand"),
            name=get("name"),
            description=get("description"),
            price=get("price"),
            unit=get("unit"),
            pictures=_project_pictures(get("pictures")),
        )


def _project_pictures(raw: Iterable[Any] | None) -> tuple[ProductImage, ...] | None:
    if raw is None:
        return None
    return tuple(p if isinstance(p, ProductImage) else ProductImage.from_dict(p) for p in raw)


__all__ = ["ProductDto", "ProductImage"]
