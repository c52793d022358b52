"""Config settings – ExportSettings for the product export pipeline."""
from __future__ import annotations

import dataclasses
import logging

from mp_catalog.config.settings.base import Settings
from mp_catalog.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ExportSettings(Settings):
    """Runtime configuration, read from ``CATALOG_*`` environment variables."""

    _prefix: dataclasses.ClassVar[str] = "catalog"

    database_url: str = "sqlite+aiosqlite:///catalog.db"
    query_timeout_seconds: float = 30.0
    document_title: str = "Products"
    pdf_landscape: bool = True
    excel_max_column_width: int = 50
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.query_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "query_timeout_seconds", self.query_timeout_seconds, "must be positive"
            )
        if self.excel_max_column_width < 1:
            raise InvalidSettingValueError(
                "excel_max_column_width", self.excel_max_column_width, "must be >= 1"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["ExportSettings"]
