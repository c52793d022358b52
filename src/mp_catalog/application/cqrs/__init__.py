"""Application CQRS – Queries and query buses."""
from mp_catalog.application.cqrs.queries import InProcessQueryBus, Query, QueryBus, QueryHandler
from mp_catalog.application.cqrs.pipeline_bus import MiddlewareAwareQueryBus

__all__ = [
    "InProcessQueryBus",
    "MiddlewareAwareQueryBus",
    "Query",
    "QueryBus",
    "QueryHandler",
]
