from __future__ import annotations

from _infra import APIException, Failure, FakeHTTPClient, User, banner, run

from eitherio import EitherIO, ErrorFn, lift as L
from kungfu import Error, Ok


def to_api_failure(exc: Exception) -> Failure:
    """Turn anything the HTTP client raises into a typed Failure."""
    return Failure(
        message=f"API error: {exc}",
        transient=isinstance(exc, APIException) and exc.status >= 500,
    )


# ============================================================================
# Approach 1: L.call (function-based lifting)
# ============================================================================


def fetch_user(client: FakeHTTPClient, user_id: int) -> EitherIO[User, Failure]:
    """Lift exception-raising call into EitherIO at the call site."""
    return L.call(to_api_failure, client.get_user, user_id)


# ============================================================================
# Approach 2: @L.lifted decorator (for your own service functions)
# ============================================================================


class UserService:
    def __init__(self, client: FakeHTTPClient) -> None:
        self.client = client

    @L.lifted(to_api_failure)
    async def get_user(self, user_id: int) -> User:
        """Raises like the client does; the decorator captures it."""
        return await self.client.get_user(user_id)


def check_active(user: User, error_fn: ErrorFn[Failure]) -> EitherIO[User, Failure]:
    if user.is_active:
        return EitherIO.of(error_fn, user)
    return EitherIO.fail(lambda: Failure(f"User {user.id} is inactive"))


async def main() -> None:
    banner("03_call_catching: lift exception-raising functions into EitherIO")

    print("\n[Demo 1: L.call]")
    result1 = await fetch_user(FakeHTTPClient(fail_count=1), 42).safe_run()
    match result1:
        case Ok(user):
            print(f"  ✓ Success: {user.name}")
        case Error(err):
            print(f"  ✗ Error: {err} (transient={err.transient})")

    print("\n[Demo 2: @L.lifted + flat_map]")
    service = UserService(FakeHTTPClient())
    result2 = await service.get_user(42).flat_map(check_active).map(lambda u: u.name.upper()).safe_run()
    match result2:
        case Ok(name):
            print(f"  ✓ Success: {name}")
        case Error(err):
            print(f"  ✗ Error: {err}")


if __name__ == "__main__":
    run(main)
