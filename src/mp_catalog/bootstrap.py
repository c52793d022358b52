"""Composition root – wires settings, logging, storage and the query bus.

Usage::

    bus, sessions = build_export_bus()
    result = await bus.ask(ExportProductsQuery(export_type=ExportType.PDF))
    if result.is_ok():
        payload = result.value
    await sessions.dispose()
"""
from __future__ import annotations

from mp_catalog.adapters.sqlalchemy import SqlAlchemyProductReadRepository, SqlAlchemySessionFactory
from mp_catalog.application.cqrs import MiddlewareAwareQueryBus
from mp_catalog.application.export import ExportService
from mp_catalog.application.localization import Localizer
from mp_catalog.application.pipeline import LoggingMiddleware, Pipeline
from mp_catalog.application.products import ExportProductsQuery, ExportProductsQueryHandler
from mp_catalog.config.settings import EnvSettingsLoader, ExportSettings
from mp_catalog.kernel.time import Clock, SystemClock
from mp_catalog.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def load_settings() -> ExportSettings:
    return EnvSettingsLoader().load(ExportSettings)


def build_export_bus(
    settings: ExportSettings | None = None,
    *,
    localizer: Localizer | None = None,
    clock: Clock | None = None,
    configure_logging: bool = True,
) -> tuple[MiddlewareAwareQueryBus, SqlAlchemySessionFactory]:
    """Return a ready query bus and the session factory the caller must dispose."""
    settings = settings or load_settings()
    clock = clock or SystemClock()
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level_number)

    _log.info("settings.loaded", **settings.redacted())

    sessions = SqlAlchemySessionFactory.from_settings(settings)
    handler = ExportProductsQueryHandler(
        SqlAlchemyProductReadRepository.from_settings(sessions, settings),
        ExportService.from_settings(settings, clock=clock),
        localizer=localizer,
        settings=settings,
        clock=clock,
    )
    bus = MiddlewareAwareQueryBus(Pipeline(LoggingMiddleware()))
    bus.register(ExportProductsQuery, handler)
    return bus, sessions


__all__ = ["build_export_bus", "load_settings"]
