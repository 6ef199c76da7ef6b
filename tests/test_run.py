from __future__ import annotations

import asyncio
import traceback

import pytest
from kungfu import Ok

from eitherio import IO, EitherIO, FailureError
from helpers import AppError, Calls, err_value, ok_value, to_app_error


@pytest.mark.asyncio
async def test_unsafe_run_returns_value() -> None:
    assert await EitherIO.of(to_app_error, "x").unsafe_run() == "x"


@pytest.mark.asyncio
async def test_unsafe_run_wraps_non_exception_failure() -> None:
    eio: EitherIO[int, str] = EitherIO.fail(lambda: "bad")

    with pytest.raises(FailureError) as exc_info:
        await eio.unsafe_run()
    assert exc_info.value.error == "bad"


@pytest.mark.asyncio
async def test_unsafe_run_raises_exception_failure_as_is() -> None:
    def to_exc(exc: Exception) -> Exception:
        return exc

    original = LookupError("missing")

    def boom() -> int:
        raise original

    with pytest.raises(LookupError) as exc_info:
        await EitherIO.from_call(to_exc, boom).unsafe_run()
    assert exc_info.value is original


@pytest.mark.asyncio
async def test_await_and_call_are_safe_run() -> None:
    eio: EitherIO[int, AppError] = EitherIO.fail(lambda: AppError("e"))

    assert err_value(await eio) == AppError("e")
    assert err_value(await eio()) == AppError("e")
    assert ok_value(await EitherIO.of(to_app_error, 1)) == 1


@pytest.mark.asyncio
async def test_safe_run_surfaces_internal_fault() -> None:
    def broken() -> Ok[int]:
        raise RuntimeError("io defect")

    eio: EitherIO[int, AppError] = EitherIO(to_app_error, IO.from_fn(broken))

    assert err_value(await eio.safe_run()) == AppError("RuntimeError: io defect")


@pytest.mark.asyncio
async def test_safe_run_logs_internal_fault(caplog: pytest.LogCaptureFixture) -> None:
    def broken() -> Ok[int]:
        raise RuntimeError("io defect")

    eio: EitherIO[int, AppError] = EitherIO(to_app_error, IO.from_fn(broken))

    with caplog.at_level("WARNING", logger="eitherio"):
        await eio.safe_run()

    assert any(record.levelname == "WARNING" for record in caplog.records)


@pytest.mark.asyncio
async def test_unsafe_run_propagates_internal_fault() -> None:
    def broken() -> Ok[int]:
        raise RuntimeError("io defect")

    eio: EitherIO[int, AppError] = EitherIO(to_app_error, IO.from_fn(broken))

    with pytest.raises(RuntimeError, match="io defect"):
        await eio.unsafe_run()


@pytest.mark.asyncio
async def test_repeated_runs_reexecute_chain(calls: Calls) -> None:
    def produce() -> int:
        calls.record("produce")
        return calls.count

    eio = EitherIO.from_call(to_app_error, produce).map(lambda x: x * 10)

    assert await eio.unsafe_run() == 10
    assert await eio.unsafe_run() == 20
    assert ok_value(await eio.safe_run()) == 30


@pytest.mark.asyncio
async def test_repeated_runs_may_observe_different_outcomes() -> None:
    attempts = iter([ValueError("first"), None])

    def produce() -> str:
        exc = next(attempts)
        if exc is not None:
            raise exc
        return "second"

    eio = EitherIO.from_call(to_app_error, produce)

    assert err_value(await eio.safe_run()) == AppError("ValueError: first")
    assert await eio.unsafe_run() == "second"


@pytest.mark.asyncio
async def test_independent_chains_run_concurrently() -> None:
    async def slow(x: int) -> int:
        await asyncio.sleep(0.01)
        return x

    chains = [EitherIO.from_call(to_app_error, lambda x=x: slow(x)).map(lambda v: v + 1) for x in range(5)]
    results = await asyncio.gather(*(c.unsafe_run() for c in chains))

    assert results == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_cancellation_is_not_captured() -> None:
    async def cancelled() -> int:
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        await EitherIO.from_call(to_app_error, cancelled).safe_run()


@pytest.mark.asyncio
async def test_repeated_unsafe_run_does_not_grow_traceback() -> None:
    failure = ValueError("typed")
    eio: EitherIO[int, ValueError] = EitherIO.fail(lambda: failure)

    depths: list[int] = []
    for _ in range(3):
        with pytest.raises(ValueError) as exc_info:
            await eio.unsafe_run()
        depths.append(len(traceback.extract_tb(exc_info.value.__traceback__)))

    assert depths[0] == depths[1] == depths[2]


@pytest.mark.asyncio
async def test_raising_failure_fn_escapes_safe_run() -> None:
    def broken() -> AppError:
        raise RuntimeError("factory broke")

    eio: EitherIO[int, AppError] = EitherIO.fail(broken)

    with pytest.raises(RuntimeError, match="factory broke"):
        await eio.safe_run()
