"""
eitherio - lazy async computations with a typed failure channel.

EitherIO[T, E] wraps an IO[Result[T, E]] together with a default failure
constructor that turns unexpected exceptions into typed errors.

Architecture:
- IO - deferred unit of work, re-executed on every run
- EitherIO - success/failure sequencing on top of IO and kungfu Result
- lift - helpers for getting values in and out of EitherIO
"""

import logging

from kungfu import Error, Ok, Result

from ._errors import EitherIOError, FailureError, NotAnEitherIOError, NotAResultError
from ._types import ErrorFn, FailureFn, Handler, MaybeAwaitable, Predicate
from .io import IO
from .monad import EitherIO

from . import lift

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("eitherio").addHandler(logging.NullHandler())

__all__ = (
    # Core
    "EitherIO",
    "IO",
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Types
    "ErrorFn",
    "FailureFn",
    "Handler",
    "MaybeAwaitable",
    "Predicate",
    # Errors
    "EitherIOError",
    "FailureError",
    "NotAResultError",
    "NotAnEitherIOError",
    # Lift
    "lift",
)
