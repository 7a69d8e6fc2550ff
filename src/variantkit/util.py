from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")

# handler key that catches every alternative in match / match_async
CATCH_ALL = "_"


class _Unit:
    """Payload of an alternative that carries no data."""

    _instance: _Unit | None = None

    def __new__(cls) -> _Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNIT"


UNIT = _Unit()

Handler = Callable[..., T]


def is_unit(payload: Any) -> bool:
    return payload is UNIT


def is_absent(payload_type: Any) -> bool:
    return payload_type is None or payload_type is UNIT or payload_type is type(None)


def call_with_payload(fn: Handler[T], payload: Any) -> T:
    if is_unit(payload):
        return fn()
    return fn(payload)


def or_default(result: Any, default: bool) -> Any:
    return default if result is None else result


async def settle(result: T | Awaitable[T]) -> T:
    if inspect.isawaitable(result):
        return await result
    return result
