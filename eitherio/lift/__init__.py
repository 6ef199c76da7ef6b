"""
Lift helpers with semantic namespaces.

    from eitherio import lift as L

Architecture:
- L.up.*    - подъем значений в монаду
- L.down.*  - опускание монады в значение
- L.call()  - вызов функций с лифтингом

Examples:
    from eitherio import lift as L

    user = L.up.pure(to_api_error, User(id=42))
    error = L.up.fail(lambda: NotFoundError())
    maybe = L.up.optional(to_api_error, db_result, error=NotFoundError)

    result = L.call(to_api_error, fetch_user, 42)

    value = await L.down.to_result(result)
    value = await L.down.unsafe(result)

    @L.lifted(to_api_error)
    async def fetch(): ...
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import catching, fail, from_lazy_coro_result, from_result, optional, pure

from .call import call, call_result, lifted

from .down import or_else, to_result, unsafe

up = up_ns
down = down_ns

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_result",
    "optional",
    "catching",
    "from_lazy_coro_result",
    # Call
    "call",
    "call_result",
    "lifted",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
