"""
Подъем значений в монаду (EitherIO).

Функции для преобразования обычных значений, Result, Optional, LazyCoroResult
и exception-based кода в монадический контекст EitherIO.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import ErrorFn, FailureFn, MaybeAwaitable
from ..monad import EitherIO


def pure[T, E](error_fn: ErrorFn[E], value: T) -> EitherIO[T, E]:
    """
    Lift pure value into always-succeeding EitherIO.

    Short alias for EitherIO.of().

    Example:
        from eitherio import lift as L

        user = L.up.pure(to_api_error, User(id=42))
        result = await L.down.to_result(user)  # Ok(User(id=42))
    """
    return EitherIO.of(error_fn, value)


def fail[E](failure_fn: FailureFn[E]) -> EitherIO[Never, E]:
    """
    Create always-failing EitherIO. Dual of pure().

    Example:
        error = L.up.fail(lambda: ValidationError("bad input"))
        result = await L.down.to_result(error)  # Error(ValidationError(...))

    NOTE: failure_fn is a thunk, called when the EitherIO runs.
    """
    return EitherIO.fail(failure_fn)


def from_result[T, E](error_fn: ErrorFn[E], value: Result[T, E]) -> EitherIO[T, E]:
    """
    Lift already-computed Result into EitherIO.

    Example:
        def validate_score(user: User) -> Result[User, APIError]: ...

        fetch_user(42).then(lambda u: L.up.from_result(to_api_error, validate_score(u)))

    NOTE: This is NOT lazy: result is already computed.
          For lazy evaluation, use EitherIO.from_result with a thunk.
    """
    return EitherIO.from_result(error_fn, lambda: value)


def optional[T, E](
    error_fn: ErrorFn[E],
    value: T | None,
    *,
    error: FailureFn[E],
) -> EitherIO[T, E]:
    """
    Convert Optional to EitherIO. None becomes Error(error()).

    Example:
        def get_user(user_id: int) -> EitherIO[User, NotFoundError]:
            user = db.find(user_id)  # returns User | None
            return L.up.optional(to_not_found, user, error=lambda: NotFoundError(user_id))

    NOTE: error is a thunk (zero-arg callable) to avoid computing
          error message when value is present.
    """

    def run() -> Result[T, E]:
        if value is None:
            return Error(error())
        return Ok(value)

    return EitherIO.from_result(error_fn, run)


def catching[T, E](
    error_fn: ErrorFn[E],
    thunk: Callable[[], MaybeAwaitable[T]],
) -> EitherIO[T, E]:
    """
    Execute thunk, catch exceptions and convert to Error via error_fn.

    Bridge between exception-based code and EitherIO. Alias for
    EitherIO.from_call().

    Example:
        def parse_json(raw: str) -> EitherIO[dict, ParseError]:
            return L.up.catching(lambda e: ParseError(str(e)), lambda: json.loads(raw))
    """
    return EitherIO.from_call(error_fn, thunk)


def from_lazy_coro_result[T, E](
    error_fn: ErrorFn[E],
    lazy: LazyCoroResult[T, E],
) -> EitherIO[T, E]:
    """Lift kungfu LazyCoroResult into EitherIO."""
    return EitherIO.from_lazy_coro_result(error_fn, lazy)


__all__ = (
    "pure",
    "fail",
    "from_result",
    "optional",
    "catching",
    "from_lazy_coro_result",
)
