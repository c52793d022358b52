"""Application pipeline – middleware chain around query handlers."""
from mp_catalog.application.pipeline.middlewares import LoggingMiddleware
from mp_catalog.application.pipeline.pipeline import Handler, Middleware, Next, Pipeline

__all__ = ["Handler", "LoggingMiddleware", "Middleware", "Next", "Pipeline"]
