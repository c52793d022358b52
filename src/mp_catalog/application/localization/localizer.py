"""Application localization – Localizer port and catalogue-backed implementation."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Protocol

from mp_catalog.kernel.errors import SerializationError
from mp_catalog.observability.logging import get_logger

_log = get_logger(__name__)


class Localizer(Protocol):
    """Port: resolve a fixed English key to display text.

    Implementations never raise for an unknown key; they return the key.
    """

    def lookup(self, key: str) -> str: ...


class NullLocalizer:
    """Returns every key unchanged."""

    def lookup(self, key: str) -> str:
        return key


class CatalogLocalizer:
    """Looks keys up in an in-memory message catalogue for one locale."""

    def __init__(self, messages: Mapping[str, str], *, locale: str = "en") -> None:
        self._messages = dict(messages)
        self.locale = locale

    @classmethod
    def from_json(cls, path: str | Path, *, locale: str = "en") -> "CatalogLocalizer":
        """Load a flat ``{"key": "text"}`` JSON catalogue."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SerializationError(
                f"Cannot read message catalogue {str(path)!r}", payload_type="catalogue", cause=exc
            ) from exc
        if not isinstance(data, dict):
            raise SerializationError(
                f"Message catalogue {str(path)!r} must be a JSON object", payload_type="catalogue"
            )
        return cls({str(k): str(v) for k, v in data.items()}, locale=locale)

    def lookup(self, key: str) -> str:
        text = self._messages.get(key)
        if not text:
            _log.debug("localizer.missing_key", key=key, locale=self.locale)
            return key
        return text

    def __getitem__(self, key: str) -> str:
        return self.lookup(key)


__all__ = ["CatalogLocalizer", "Localizer", "NullLocalizer"]
