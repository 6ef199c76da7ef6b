"""
Вызов функций с автоматическим лифтингом.

Функции и декораторы для ленивого вызова функций и подъема результата в EitherIO.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from kungfu import Result

from .._types import ErrorFn, MaybeAwaitable
from ..monad import EitherIO


def call[T, E, **P](
    error_fn: ErrorFn[E],
    func: Callable[P, MaybeAwaitable[T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> EitherIO[T, E]:
    """
    Lazily call func with arguments, lift its return value into EitherIO.

    func may be sync or async and may raise: exceptions go through error_fn.

    Example:
        from eitherio import lift as L

        # Plain function, knows nothing about EitherIO
        async def fetch_user_impl(user_id: int) -> User: ...

        user = await L.call(to_api_error, fetch_user_impl, 42).unsafe_run()
    """
    return EitherIO.from_call(error_fn, lambda: func(*args, **kwargs))


def call_result[T, E, **P](
    error_fn: ErrorFn[E],
    func: Callable[P, MaybeAwaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> EitherIO[T, E]:
    """Like call(), for functions that already return Result."""
    return EitherIO.from_result(error_fn, lambda: func(*args, **kwargs))


def lifted[T, E, **P](
    error_fn: ErrorFn[E],
) -> Callable[[Callable[P, MaybeAwaitable[T]]], Callable[P, EitherIO[T, E]]]:
    """
    Decorator factory: make func return EitherIO instead of running eagerly.

    Example:
        @L.lifted(to_api_error)
        async def fetch_user(user_id: int) -> User: ...

        result = await fetch_user(42).safe_run()
    """

    def decorator(func: Callable[P, MaybeAwaitable[T]]) -> Callable[P, EitherIO[T, E]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> EitherIO[T, E]:
            return call(error_fn, func, *args, **kwargs)

        return wrapper

    return decorator


__all__ = (
    "call",
    "call_result",
    "lifted",
)
