"""CQRS – MiddlewareAwareQueryBus: dispatches queries via a Pipeline.

Usage::

    bus = MiddlewareAwareQueryBus(Pipeline(LoggingMiddleware()))
    bus.register(ExportProductsQuery, handler)
    result = await bus.ask(ExportProductsQuery(export_type=ExportType.PDF), token)
"""
from __future__ import annotations

from typing import Any

from mp_catalog.application.cqrs.queries import InProcessQueryBus, Query
from mp_catalog.application.pipeline.pipeline import Pipeline
from mp_catalog.resilience.cancellation import CancellationToken


class MiddlewareAwareQueryBus(InProcessQueryBus):
    """Query bus whose registered handlers run at the end of a Pipeline.

    The handler is resolved before the pipeline runs, so an unregistered
    query fails without touching any middleware.
    """

    def __init__(self, pipeline: Pipeline | None = None) -> None:
        super().__init__()
        self._pipeline = pipeline or Pipeline()

    async def ask(self, query: Query, token: CancellationToken | None = None) -> Any:
        handler = self.handler_for(query)
        return await self._pipeline.execute(query, handler.handle, token)


__all__ = ["MiddlewareAwareQueryBus"]
