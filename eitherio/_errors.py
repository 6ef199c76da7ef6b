from __future__ import annotations

import typing


class EitherIOError(Exception):
    """Base class for exceptions raised by eitherio."""


class FailureError(EitherIOError):
    """unsafe_run() finished on a failure value that is not an exception."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(f"Computation failed with {error!r}")


class NotAResultError(EitherIOError, TypeError):
    """from_result() producer returned something that is not a Result."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Not a valid result: {value!r}")


class NotAnEitherIOError(EitherIOError, TypeError):
    """Continuation returned something that is not an EitherIO."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Continuation must return EitherIO, got {type(value).__name__}")

__all__ = ("EitherIOError", "FailureError", "NotAResultError", "NotAnEitherIOError")
