from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    transient: bool = False

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


def to_failure(exc: Exception) -> Failure:
    """Default failure constructor used across the examples."""
    return Failure(f"unexpected: {exc!r}")


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


class APIException(Exception):
    """Simulates HTTP client exception (like aiohttp.ClientError)."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


@dataclass(slots=True)
class FakeHTTPClient:
    """Third-party style client: returns plain values or RAISES."""

    fail_count: int = 0
    delay_seconds: float = 0.0

    async def get_user(self, user_id: int) -> User:
        await asyncio.sleep(self.delay_seconds)
        if self.fail_count > 0:
            self.fail_count -= 1
            raise APIException(status=503, message="Service Unavailable")
        return User(id=user_id, name=f"user:{user_id}@http-api")


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeCache:
    users: dict[int, User] = field(default_factory=_empty_users)

    async def get_user(self, user_id: int) -> Result[User, Failure]:
        user = self.users.get(user_id)
        if user is None:
            return Error(Failure("cache: miss"))
        return Ok(user)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
