"""Application pipeline – Middleware base and the Pipeline that chains them.

Middleware sees the query together with the caller's cancellation token and
decides whether and how to call the next stage.
"""
from __future__ import annotations

import abc
import functools
from typing import Any, Awaitable, Callable

from mp_catalog.resilience.cancellation import CancellationToken

Handler = Callable[[Any, CancellationToken | None], Awaitable[Any]]
Next = Handler


class Middleware(abc.ABC):
    """One stage wrapped around a query handler."""

    @abc.abstractmethod
    async def __call__(self, query: Any, token: CancellationToken | None, next_: Next) -> Any: ...


class Pipeline:
    """Ordered middleware chain; the first middleware added runs outermost."""

    def __init__(self, *middlewares: Middleware) -> None:
        self._middlewares: tuple[Middleware, ...] = middlewares

    def add(self, middleware: Middleware) -> "Pipeline":
        return Pipeline(*self._middlewares, middleware)

    def __len__(self) -> int:
        return len(self._middlewares)

    async def execute(self, query: Any, handler: Handler, token: CancellationToken | None = None) -> Any:
        chain = functools.reduce(
            lambda next_, middleware: functools.partial(middleware, next_=next_),
            reversed(self._middlewares),
            handler,
        )
        return await chain(query, token)


__all__ = ["Handler", "Middleware", "Next", "Pipeline"]
