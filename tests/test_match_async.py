"""Tests for match_async - selection, awaiting and propagation."""

import asyncio
from typing import Any

import pytest

from variantkit import UnionBuilder
from variantkit.errors import NoHandlerError

pytestmark = pytest.mark.unit


class TestMatchAsyncDispatch:
    """Test which handler runs and what is returned."""

    @pytest.mark.asyncio
    async def test_held_handler(self, shape: UnionBuilder) -> None:
        async def area(wh: tuple) -> int:
            await asyncio.sleep(0)
            return wh[0] * wh[1]

        out = await shape.Rect((3, 4)).match_async(Rect=area, _=lambda: 0)

        assert out == 12

    @pytest.mark.asyncio
    async def test_absent_payload_handler_gets_no_args(self, shape: UnionBuilder) -> None:
        async def empty() -> str:
            return "empty"

        assert await shape.Empty().match_async({"Empty": empty}) == "empty"

    @pytest.mark.asyncio
    async def test_catch_all(self, sample_values: list) -> None:
        async def any_shape() -> str:
            return "any"

        for value in sample_values:
            assert await value.match_async(_=any_shape) == "any"

    @pytest.mark.asyncio
    async def test_sync_handler_result_returned(self, shape: UnionBuilder) -> None:
        assert await shape.Circle(2.0).match_async(Circle=lambda r: r * 3) == 6.0

    @pytest.mark.asyncio
    async def test_exactly_one_handler_runs(self, shape: UnionBuilder) -> None:
        calls: list[str] = []

        async def record(name: str) -> None:
            calls.append(name)

        await shape.Circle(1.0).match_async(
            Circle=lambda r: record("Circle"),
            Rect=lambda wh: record("Rect"),
            _=lambda: record("_"),
        )

        assert calls == ["Circle"]


class TestMatchAsyncErrors:
    """Test failure and cancellation propagation."""

    def test_no_handler_raised_before_awaiting(self, shape: UnionBuilder) -> None:
        with pytest.raises(NoHandlerError):
            shape.Circle(1.0).match_async({"Rect": lambda wh: 0})

    @pytest.mark.asyncio
    async def test_handler_not_run_until_awaited(self, shape: UnionBuilder) -> None:
        calls: list[Any] = []

        pending = shape.Circle(1.0).match_async(Circle=calls.append)
        assert calls == []

        await pending
        assert calls == [1.0]

    @pytest.mark.asyncio
    async def test_handler_exception_propagates(self, shape: UnionBuilder) -> None:
        async def boom(r: float) -> None:
            raise ValueError("bad radius")

        with pytest.raises(ValueError, match="bad radius"):
            await shape.Circle(1.0).match_async(Circle=boom)

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, shape: UnionBuilder) -> None:
        started = asyncio.Event()

        async def forever(r: float) -> None:
            started.set()
            await asyncio.sleep(3600)

        task = asyncio.create_task(shape.Circle(1.0).match_async(Circle=forever))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
