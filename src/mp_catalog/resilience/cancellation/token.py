"""Resilience – CancellationToken for cooperative cancellation of use cases."""
from __future__ import annotations

import asyncio
import contextlib
from typing import Any, Awaitable, TypeVar

from mp_catalog.kernel.errors import OperationCancelledError

T = TypeVar("T")

__all__ = ["CancellationToken"]


class CancellationToken:
    """A one-shot signal a caller trips to abandon an in-flight operation.

    Handlers call :meth:`raise_if_cancelled` at stage boundaries and wrap
    their I/O waits in :meth:`guard`, which abandons the wait as soon as the
    token trips.

    Example::

        token = CancellationToken()
        task = asyncio.create_task(handler.handle(query, token))
        token.cancel()
        await task  # raises OperationCancelledError
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason = "Operation cancelled"

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str | None = None) -> None:
        if reason:
            self._reason = reason
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError(self._reason)

    async def guard(self, aw: Awaitable[T]) -> T:
        """Await *aw*, or cancel it and raise if the token trips first."""
        self.raise_if_cancelled()
        work: asyncio.Future[Any] = asyncio.ensure_future(aw)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            work.cancel()
            raise
        finally:
            waiter.cancel()
        if work.done():
            return work.result()
        work.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await work
        raise OperationCancelledError(self._reason)
