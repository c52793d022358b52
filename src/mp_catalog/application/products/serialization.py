"""Products – PictureSerializer: picture lists to a single display string and back."""
from __future__ import annotations

import json
from typing import Sequence

from mp_catalog.application.products.dtos import ProductImage
from mp_catalog.kernel.errors import SerializationError


class PictureSerializer:
    """JSON array of ``{"name", "size", "url"}`` objects.

    ``None`` stays ``None`` so a missing list renders as an empty cell; an
    empty list renders as ``[]``.
    """

    def serialize(self, pictures: Sequence[ProductImage] | None) -> str | None:
        if pictures is None:
            return None
        return json.dumps([p.to_dict() for p in pictures], ensure_ascii=False)

    def deserialize(self, text: str | None) -> tuple[ProductImage, ...] | None:
        if text is None:
            return None
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise SerializationError(
                "Picture list is not valid JSON", payload_type="pictures", cause=exc
            ) from exc
        if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
            raise SerializationError("Picture list must be a JSON array of objects", payload_type="pictures")
        return tuple(ProductImage.from_dict(d) for d in data)


__all__ = ["PictureSerializer"]
