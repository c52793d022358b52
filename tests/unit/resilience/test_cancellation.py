"""Unit tests for CancellationToken."""

from __future__ import annotations

import asyncio

import pytest

from mp_catalog.kernel.errors import OperationCancelledError
from mp_catalog.resilience.cancellation import CancellationToken


class TestCancellationToken:
    def test_initially_not_cancelled(self) -> None:
        token = CancellationToken()
        assert not token.is_cancelled
        token.raise_if_cancelled()

    def test_cancel_then_raise(self) -> None:
        token = CancellationToken()
        token.cancel("client went away")
        assert token.is_cancelled
        with pytest.raises(OperationCancelledError, match="client went away"):
            token.raise_if_cancelled()

    def test_guard_returns_result(self) -> None:
        async def _run() -> int:
            async def work() -> int:
                await asyncio.sleep(0)
                return 42
            return await CancellationToken().guard(work())

        assert asyncio.run(_run()) == 42

    def test_guard_propagates_work_errors(self) -> None:
        async def _run() -> None:
            async def work() -> None:
                raise ValueError("boom")
            await CancellationToken().guard(work())

        with pytest.raises(ValueError, match="boom"):
            asyncio.run(_run())

    def test_guard_abandons_work_when_cancelled(self) -> None:
        finished: list[bool] = []

        async def _run() -> None:
            token = CancellationToken()

            async def work() -> None:
                await asyncio.sleep(10)
                finished.append(True)

            async def trip() -> None:
                await asyncio.sleep(0.01)
                token.cancel()

            tripper = asyncio.get_running_loop().create_task(trip())
            try:
                await token.guard(work())
            finally:
                await tripper

        with pytest.raises(OperationCancelledError):
            asyncio.run(_run())
        assert finished == []

    def test_guard_on_cancelled_token_does_not_start_work(self) -> None:
        started: list[bool] = []

        async def _run() -> None:
            token = CancellationToken()
            token.cancel()

            async def work() -> None:
                started.append(True)

            coro = work()
            try:
                await token.guard(coro)
            finally:
                coro.close()

        with pytest.raises(OperationCancelledError):
            asyncio.run(_run())
        assert started == []
