"""EitherIO Monad

Combined monad unifying:
- Lazy (deferred computations)
- Coro (asynchronous)
- Result[T, E] (success/error)
- ErrorFn[E] (default failure constructor for unexpected exceptions)

Built on top of kungfu Result and eitherio IO."""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import FailureError, NotAnEitherIOError, NotAResultError
from ._helpers import is_result, resolve
from ._types import ErrorFn, FailureFn, Handler, MaybeAwaitable, Predicate
from .io import IO

log = logging.getLogger(__name__)


async def _adopt[T, E](value: object) -> IO[Result[T, E]]:
    # EitherIO is awaitable itself, so it must not go through resolve
    if not isinstance(value, EitherIO):
        value = await resolve(value)
    if not isinstance(value, EitherIO):
        raise NotAnEitherIOError(value)
    return value.io


class EitherIO[T, E]:
    """Lazy Coroutine Result Monad with a default failure constructor.

    - Success path: flat_map / then / map / tap / filter / zip
    - Failure path: flat_map_err / map_err / recover / tap_err
    - Terminal: unsafe_run (raises) / safe_run (returns Result)

    Nothing runs until a terminal operation is awaited. Every run re-executes
    the whole chain.

    Monadic laws:
    - Left identity: of(f, a).then(g) ≡ g(a)
    - Right identity: m.then(lambda v: of(f, v)) ≡ m
    - Associativity: m.then(g).then(h) ≡ m.then(x => g(x).then(h))
    """

    __slots__ = ("_error_fn", "_io")

    def __init__(self, error_fn: ErrorFn[E], io: IO[Result[T, E]], /) -> None:
        """Create EitherIO from a failure constructor and an IO of Result."""
        self._error_fn = error_fn
        self._io = io

    @property
    def io(self) -> IO[Result[T, E]]:
        return self._io

    @property
    def error_fn(self) -> ErrorFn[E]:
        return self._error_fn

    # ========================================================================
    # Construction
    # ========================================================================

    @staticmethod
    def of[V, Err](error_fn: ErrorFn[Err], value: V) -> EitherIO[V, Err]:
        """Lift a value into always-succeeding EitherIO."""
        return EitherIO(error_fn, IO.of(Ok(value)))

    @staticmethod
    def from_call[V, Err](
        error_fn: ErrorFn[Err],
        fn: Callable[[], MaybeAwaitable[V]],
    ) -> EitherIO[V, Err]:
        """
        Wrap a producer returning a plain value (sync or async).

        Exceptions raised by the producer become Error(error_fn(exc)).
        """

        async def run() -> Result[V, Err]:
            try:
                return Ok(await resolve(fn()))
            except Exception as exc:
                log.debug("from_call: producer raised %r", exc, exc_info=True)
                return Error(error_fn(exc))

        return EitherIO(error_fn, IO(run))

    @staticmethod
    def from_result[V, Err](
        error_fn: ErrorFn[Err],
        fn: Callable[[], MaybeAwaitable[Result[V, Err]]],
    ) -> EitherIO[V, Err]:
        """
        Wrap a producer returning a Result (sync or async).

        - Raised exception -> Error(error_fn(exc))
        - Non-Result return -> Error(error_fn(NotAResultError(value)))
        - Result -> passed through unchanged
        """

        async def run() -> Result[V, Err]:
            try:
                result = await resolve(fn())
            except Exception as exc:
                log.debug("from_result: producer raised %r", exc, exc_info=True)
                return Error(error_fn(exc))
            if is_result(result):
                return result
            return Error(error_fn(NotAResultError(result)))

        return EitherIO(error_fn, IO(run))

    @staticmethod
    def fail[V, Err](failure_fn: FailureFn[Err]) -> EitherIO[V, Err]:
        """
        Create always-failing EitherIO. Dual of of().

        failure_fn is called on every run and also becomes the default
        failure constructor (the exception itself is ignored).

        NOTE: failure_fn must not raise. Its exception would escape both
              safe_run and unsafe_run, since the same function is the
              fallback failure constructor.
        """

        def error_fn(_exc: Exception) -> Err:
            return failure_fn()

        return EitherIO(error_fn, IO.from_fn(lambda: Error(failure_fn())))

    @staticmethod
    def from_lazy_coro_result[V, Err](
        error_fn: ErrorFn[Err],
        lazy: LazyCoroResult[V, Err],
    ) -> EitherIO[V, Err]:
        """Convert kungfu LazyCoroResult to EitherIO."""
        return EitherIO.from_result(error_fn, lambda: lazy())

    def to_lazy_coro_result(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult. Awaiting it runs safe_run()."""
        return LazyCoroResult(self.safe_run)

    # ========================================================================
    # Success path
    # ========================================================================

    def flat_map[U](
        self,
        f: Callable[[T, ErrorFn[E]], MaybeAwaitable[EitherIO[U, E]]],
        /,
    ) -> EitherIO[U, E]:
        """
        Monadic bind (>>=), continuation receives (value, error_fn).

        - On Ok: runs the EitherIO returned by f
        - On Error: short-circuit, f is not called
        - f raises: Error(error_fn(exc))
        """
        error_fn = self._error_fn

        async def step(result: Result[T, E]) -> IO[Result[U, E]]:
            match result:
                case Ok(value):
                    try:
                        return await _adopt(f(value, error_fn))
                    except Exception as exc:
                        log.debug("flat_map: continuation raised %r", exc, exc_info=True)
                        return IO.of(Error(error_fn(exc)))
                case Error(err):
                    return IO.of(Error(err))
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return EitherIO(error_fn, self._io.then(step))

    def then[U](
        self,
        f: Callable[[T], MaybeAwaitable[EitherIO[U, E]]],
        /,
    ) -> EitherIO[U, E]:
        """Monadic bind with a one-argument continuation."""
        return self.flat_map(lambda value, _: f(value))

    def map[U](self, f: Callable[[T], MaybeAwaitable[U]], /) -> EitherIO[U, E]:
        """Functor fmap - apply function to success value."""
        error_fn = self._error_fn

        async def step(value: T, _: ErrorFn[E]) -> EitherIO[U, E]:
            return EitherIO.of(error_fn, await resolve(f(value)))

        return self.flat_map(step)

    def tap(self, f: Callable[[T], MaybeAwaitable[object]], /) -> EitherIO[T, E]:
        """Execute side effect on Ok value, pass through unchanged. Exceptions are ignored."""
        error_fn = self._error_fn

        async def step(value: T, _: ErrorFn[E]) -> EitherIO[T, E]:
            try:
                await resolve(f(value))
            except Exception as exc:
                log.debug("tap: effect raised %r, ignored", exc, exc_info=True)
            return EitherIO.of(error_fn, value)

        return self.flat_map(step)

    def filter(self, failure_fn: FailureFn[E], predicate: Predicate[T], /) -> EitherIO[T, E]:
        """
        Turn Ok into Error(failure_fn()) if value fails predicate.

        A raising predicate counts as failed; its exception is dropped.
        """
        error_fn = self._error_fn

        async def step(value: T, _: ErrorFn[E]) -> EitherIO[T, E]:
            try:
                passed = await resolve(predicate(value))
            except Exception as exc:
                log.debug("filter: predicate raised %r", exc, exc_info=True)
                return EitherIO.fail(failure_fn)
            return EitherIO.of(error_fn, value) if passed else EitherIO.fail(failure_fn)

        return self.flat_map(step)

    def zip[U, R](
        self,
        other: EitherIO[U, E],
        f: Callable[[T, U], MaybeAwaitable[R]],
        /,
    ) -> EitherIO[R, E]:
        """
        Combine with another EitherIO.

        other runs after self produced a value (sequential, not parallel).
        Error from other is adopted and f is not called.
        """
        error_fn = self._error_fn

        async def step(value: T, _: ErrorFn[E]) -> EitherIO[R, E]:
            result = await other.safe_run()
            match result:
                case Ok(other_value):
                    return EitherIO.of(error_fn, await resolve(f(value, other_value)))
                case Error(err):
                    return EitherIO.from_result(error_fn, lambda: Error(err))
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return self.flat_map(step)

    # ========================================================================
    # Failure path
    # ========================================================================

    def flat_map_err[F](
        self,
        next_error_fn: ErrorFn[F],
        f: Callable[[E], MaybeAwaitable[EitherIO[T, F]]],
        /,
    ) -> EitherIO[T, F]:
        """
        Bind on the error branch, changing the error type.

        - On Ok: passed through unchanged
        - On Error: runs the EitherIO returned by f
        - f raises: Error(next_error_fn(exc))
        """

        async def step(result: Result[T, E]) -> IO[Result[T, F]]:
            match result:
                case Ok(value):
                    return IO.of(Ok(value))
                case Error(err):
                    try:
                        return await _adopt(f(err))
                    except Exception as exc:
                        log.debug("flat_map_err: continuation raised %r", exc, exc_info=True)
                        return IO.of(Error(next_error_fn(exc)))
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return EitherIO(next_error_fn, self._io.then(step))

    def map_err[F](
        self,
        next_error_fn: ErrorFn[F],
        f: Callable[[E], MaybeAwaitable[F]],
        /,
    ) -> EitherIO[T, F]:
        """Map over error value and type."""

        async def step(err: E) -> EitherIO[T, F]:
            next_err = await resolve(f(err))
            return EitherIO.fail(lambda: next_err)

        return self.flat_map_err(next_error_fn, step)

    def tap_err(self, f: Callable[[E], MaybeAwaitable[object]], /) -> EitherIO[T, E]:
        """Execute side effect on Error value, pass through unchanged. Exceptions are ignored."""

        async def step(result: Result[T, E]) -> IO[Result[T, E]]:
            match result:
                case Error(err):
                    try:
                        await resolve(f(err))
                    except Exception as exc:
                        log.debug("tap_err: effect raised %r, ignored", exc, exc_info=True)
                case Ok(_):
                    pass
                case _ as unreachable:
                    typing.assert_never(unreachable)
            return IO.of(result)

        return EitherIO(self._error_fn, self._io.then(step))

    def recover(self, handler: Handler[T, E], /) -> EitherIO[T, E]:
        """
        Replace Error with the Result produced by handler.

        Error type stays the same. handler raising is captured by error_fn.
        """

        async def run() -> Result[T, E]:
            result = await self.safe_run()
            match result:
                case Error(err):
                    return await resolve(handler(err))
                case Ok(_):
                    return result
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return EitherIO.from_result(self._error_fn, run)

    # ========================================================================
    # Running
    # ========================================================================

    async def unsafe_run(self) -> T:
        """
        Run and unwrap, raises on Error.

        Exception failure values are raised as is, other values wrapped
        in FailureError.
        """
        result = await self._io.unsafe_run()
        match result:
            case Ok(value):
                return value
            case Error(err):
                if isinstance(err, BaseException):
                    raise err.with_traceback(None)
                raise FailureError(err)
            case _ as unreachable:
                typing.assert_never(unreachable)

    async def safe_run(self) -> Result[T, E]:
        """Run and return Result. Never raises for Exception subclasses."""
        outcome = await self._io.safe_run()
        match outcome:
            case Ok(result):
                return result
            case Error(fault):
                log.warning("safe_run: internal fault %r converted to failure", fault)
                return Error(self._error_fn(fault))
            case _ as unreachable:
                typing.assert_never(unreachable)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Result[T, E]]:
        """Execute the lazy computation, returning coroutine of Result."""
        return self.safe_run()

    def __await__(self) -> typing.Generator[typing.Any, None, Result[T, E]]:
        """Allow direct await, same as safe_run()."""
        return self.safe_run().__await__()

    def __repr__(self) -> str:
        return f"EitherIO({self._io!r})"


__all__ = ("EitherIO",)
