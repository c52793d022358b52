"""Unit tests for settings loading."""

from __future__ import annotations

import logging

import pytest

from mp_catalog.config import (
    ConfigurationError,
    EnvSettingsLoader,
    ExportSettings,
    InvalidSettingValueError,
)


class TestExportSettings:
    def test_defaults(self) -> None:
        s = ExportSettings()
        assert s.document_title == "Products"
        assert s.query_timeout_seconds == 30.0
        assert s.pdf_landscape is True
        assert s.log_level_number == logging.INFO

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExportSettings(query_timeout_seconds=0)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError):
            ExportSettings(log_level="LOUD")


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self) -> None:
        env = {
            "CATALOG_DATABASE_URL": "postgresql+asyncpg://db/catalog",
            "CATALOG_QUERY_TIMEOUT_SECONDS": "5.5",
            "CATALOG_PDF_LANDSCAPE": "false",
            "CATALOG_EXCEL_MAX_COLUMN_WIDTH": "80",
        }
        s = EnvSettingsLoader(env).load(ExportSettings)
        assert s.database_url == "postgresql+asyncpg://db/catalog"
        assert s.query_timeout_seconds == 5.5
        assert s.pdf_landscape is False
        assert s.excel_max_column_width == 80

    def test_missing_optional_values_keep_defaults(self) -> None:
        s = EnvSettingsLoader({}).load(ExportSettings)
        assert s == ExportSettings()

    def test_bad_number_raises_invalid_setting(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"CATALOG_QUERY_TIMEOUT_SECONDS": "soon"}).load(ExportSettings)
        assert exc_info.value.setting_name == "CATALOG_QUERY_TIMEOUT_SECONDS"

    def test_bad_boolean_raises_invalid_setting(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"CATALOG_PDF_LANDSCAPE": "maybe"}).load(ExportSettings)

    def test_validation_failure_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            EnvSettingsLoader({"CATALOG_QUERY_TIMEOUT_SECONDS": "-1"}).load(ExportSettings)


class TestSettingsHelpers:
    def test_env_key_uses_prefix(self) -> None:
        assert ExportSettings.env_key("log_level") == "CATALOG_LOG_LEVEL"

    def test_redacted_masks_url_password(self) -> None:
        s = ExportSettings(database_url="postgresql+asyncpg://shop:s3cret@db:5432/catalog")
        values = s.redacted()
        assert values["database_url"] == "postgresql+asyncpg://shop:***@db:5432/catalog"
        assert values["document_title"] == "Products"

    def test_redacted_leaves_urls_without_password(self) -> None:
        assert ExportSettings().redacted()["database_url"] == "sqlite+aiosqlite:///catalog.db"
