from __future__ import annotations

from dataclasses import dataclass

from _infra import FakeCache, FakeHTTPClient, User, banner, run, to_failure

from eitherio import EitherIO, FailureError, lift as L
from kungfu import Error, Ok


@dataclass(frozen=True, slots=True)
class HttpError:
    status: int


def to_http_error(exc: Exception) -> HttpError:
    return HttpError(status=500)


async def main() -> None:
    banner("02_recovery: recover from cache, then change the error type")

    user_id = 42
    cache = FakeCache(users={user_id: User(id=user_id, name="user:42@cache")})
    client = FakeHTTPClient(fail_count=10)

    pipeline = (
        L.call(to_failure, client.get_user, user_id)
        .tap_err(lambda e: print(f"primary failed: {e}"))
        .recover(lambda _: cache.get_user(user_id))
        .map_err(to_http_error, lambda e: HttpError(status=503 if e.transient else 404))
        .map(lambda user: user.name)
    )

    result = await pipeline
    match result:
        case Ok(name):
            print(f"ok: {name}")
        case Error(err):
            print(f"error: {err!r}")

    # Typed failure back into an exception at the outermost edge
    missing: EitherIO[str, HttpError] = (
        L.call(to_failure, client.get_user, 7)
        .recover(lambda _: cache.get_user(7))
        .map_err(to_http_error, lambda e: HttpError(status=404))
        .map(lambda user: user.name)
    )
    try:
        await missing.unsafe_run()
    except FailureError as exc:
        print(f"raised: {exc.error!r}")


if __name__ == "__main__":
    run(main)
