"""Internal helpers for eitherio.

Common functions used across modules.
These are not part of the public API."""

from __future__ import annotations

import inspect
import typing

from kungfu import Error, Ok, Result

from ._types import MaybeAwaitable


async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """
    Await value if it is awaitable, return it as is otherwise.

    Lets every callback be either a plain function or a coroutine function:
        await resolve(fn(x))
    """
    if inspect.isawaitable(value):
        return await value
    return typing.cast(T, value)


def is_result(value: object) -> typing.TypeGuard[Result[typing.Any, typing.Any]]:
    """Runtime check for kungfu Result (Ok or Error)."""
    return isinstance(value, (Ok, Error))


__all__ = (
    "is_result",
    "resolve",
)
