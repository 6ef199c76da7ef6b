"""Shared helpers for eitherio tests."""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

import pytest
from kungfu import Error, Ok, Result


@dataclass(frozen=True, slots=True)
class AppError:
    message: str


@dataclass(frozen=True, slots=True)
class OtherError:
    code: int


def to_app_error(exc: Exception) -> AppError:
    return AppError(f"{type(exc).__name__}: {exc}")


def to_other_error(exc: Exception) -> OtherError:
    _ = exc
    return OtherError(500)


def ok_value[T, E](result: Result[T, E]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(err):
            pytest.fail(f"expected Ok, got Error({err!r})")
    raise AssertionError("unreachable")


def err_value[T, E](result: Result[T, E]) -> E:
    match result:
        case Error(err):
            return err
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")
    raise AssertionError("unreachable")


@dataclass(slots=True)
class Calls:
    """Records callback invocations."""

    args: list[typing.Any] = field(default_factory=list)

    def record(self, *args: typing.Any) -> None:
        self.args.append(args[0] if len(args) == 1 else args)

    @property
    def count(self) -> int:
        return len(self.args)
