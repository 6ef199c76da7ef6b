"""
Core type definitions for eitherio.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# ErrorFn = default failure constructor: unexpected exception -> typed error
type ErrorFn[E] = Callable[[Exception], E]

# FailureFn = zero-arg typed error factory (used by fail/filter)
type FailureFn[E] = Callable[[], E]

# Value or awaitable of value; callbacks may be sync or async
type MaybeAwaitable[T] = T | Awaitable[T]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], MaybeAwaitable[bool]]

# Handler = recovery function producing a replacement Result
type Handler[T, E] = Callable[[E], MaybeAwaitable[Result[T, E]]]

__all__ = (
    "ErrorFn",
    "FailureFn",
    "Handler",
    "MaybeAwaitable",
    "Predicate",
)
