from __future__ import annotations

from _infra import Failure, FakeHTTPClient, banner, run, to_failure

from eitherio import EitherIO, lift as L
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: from_call + map + filter + zip")

    client = FakeHTTPClient(delay_seconds=0.01)

    greeting = (
        L.call(to_failure, client.get_user, 42)
        .filter(lambda: Failure("user is inactive"), lambda user: user.is_active)
        .map(lambda user: user.name)
        .zip(EitherIO.of(to_failure, "hello"), lambda name, word: f"{word}, {name}")
        .tap(print)
    )

    # Nothing has run yet: every run re-executes the whole chain
    result = await greeting.safe_run()
    match result:
        case Ok(message):
            print(f"ok: {message}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
