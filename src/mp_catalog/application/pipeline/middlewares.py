"""Application pipeline – built-in middleware implementations."""
from __future__ import annotations

import time
from typing import Any

from mp_catalog.application.pipeline.pipeline import Middleware, Next
from mp_catalog.kernel.errors import OperationCancelledError
from mp_catalog.observability.logging import get_logger
from mp_catalog.resilience.cancellation import CancellationToken


class LoggingMiddleware(Middleware):
    """Log how each query ended, with its duration.

    ``use_case.completed`` for a success, ``use_case.rejected`` for a failure
    envelope, ``use_case.cancelled`` when the caller's token tripped and
    ``use_case.failed`` for any other raised error.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger or get_logger(__name__)

    async def __call__(self, query: Any, token: CancellationToken | None, next_: Next) -> Any:
        log = self._log.bind(request=type(query).__name__)
        start = time.perf_counter()

        def elapsed() -> float:
            return round((time.perf_counter() - start) * 1000, 2)

        try:
            result = await next_(query, token)
        except OperationCancelledError:
            log.info("use_case.cancelled", duration_ms=elapsed())
            raise
        except Exception as exc:
            log.error("use_case.failed", error=type(exc).__name__, duration_ms=elapsed())
            raise
        if getattr(result, "is_err", lambda: False)():
            log.warning("use_case.rejected", kind=result.kind, error=result.error, duration_ms=elapsed())
        else:
            log.info("use_case.completed", duration_ms=elapsed())
        return result


__all__ = ["LoggingMiddleware"]
