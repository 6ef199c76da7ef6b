"""IO - deferred unit of work

Lazy (nothing runs until asked) + Coro (asynchronous), no caching:
every run re-invokes the wrapped thunk.

Two run modes:
- unsafe_run: exception raised by the thunk propagates
- safe_run: exception is returned as Error(exc)"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, Ok, Result

from ._helpers import resolve
from ._types import MaybeAwaitable


class IO[T]:
    """Lazy coroutine producing one value per run.

    Monadic laws:
    - Left identity: IO.of(a).then(f) ≡ f(a)
    - Right identity: m.then(IO.of) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_thunk",)

    def __init__(self, thunk: Callable[[], Coroutine[typing.Any, typing.Any, T]], /) -> None:
        """Create IO from a fn returning coroutine."""
        self._thunk = thunk

    @staticmethod
    def of[V](value: V) -> IO[V]:
        """Lift a value into IO."""

        async def wrapper() -> V:
            return value

        return IO(wrapper)

    @staticmethod
    def from_fn[V](fn: Callable[[], MaybeAwaitable[V]]) -> IO[V]:
        """Wrap a zero-arg producer, sync or async."""

        async def wrapper() -> V:
            return await resolve(fn())

        return IO(wrapper)

    # Monad operations

    def then[U](self, f: Callable[[T], MaybeAwaitable[IO[U]]], /) -> IO[U]:
        """Monadic bind: run self, feed the value to f, run the IO it returns."""

        async def wrapper() -> U:
            value = await self._thunk()
            next_io = f(value)
            # IO is awaitable itself, so it must not go through resolve
            if not isinstance(next_io, IO):
                next_io = await resolve(next_io)
            return await next_io._thunk()

        return IO(wrapper)

    def map[U](self, f: Callable[[T], MaybeAwaitable[U]], /) -> IO[U]:
        """Functor fmap."""

        async def wrapper() -> U:
            return await resolve(f(await self._thunk()))

        return IO(wrapper)

    # Running

    async def unsafe_run(self) -> T:
        """Run to completion. Exceptions raised inside propagate."""
        return await self._thunk()

    async def safe_run(self) -> Result[T, Exception]:
        """Run to completion. Exceptions raised inside are returned as Error."""
        try:
            return Ok(await self._thunk())
        except Exception as exc:
            return Error(exc)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Execute the lazy computation, returning coroutine."""
        return self.unsafe_run()

    def __await__(self) -> typing.Generator[typing.Any, None, T]:
        """Allow direct await on IO."""
        return self.unsafe_run().__await__()

    def __repr__(self) -> str:
        return f"IO({self._thunk!r})"


__all__ = (
    "IO",
)
