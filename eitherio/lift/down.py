"""
Опускание монады в значение.

Функции для выполнения EitherIO и извлечения результата в виде Result или значения.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from ..monad import EitherIO


async def to_result[T, E](eio: EitherIO[T, E]) -> Result[T, E]:
    """
    Run EitherIO and return Result. Same as eio.safe_run().

    Example:
        result = await L.down.to_result(L.up.pure(to_api_error, 42))
        # result: Ok(42)
    """
    return await eio.safe_run()


async def unsafe[T, E](eio: EitherIO[T, E]) -> T:
    """
    Run and unwrap, raises on Error. Same as eio.unsafe_run().

    NOTE: Exception failures are raised as is, other failure values
          are wrapped in FailureError.
    """
    return await eio.unsafe_run()


async def or_else[T, E](eio: EitherIO[T, E], default: T) -> T:
    """
    Run and return value or default.

    Example:
        user = await L.down.or_else(fetch_user(42), default=User(id=0, name="Guest"))
    """
    result = await eio.safe_run()
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
