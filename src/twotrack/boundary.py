"""
Boundary adapters — turn exception-raising code into Result-returning code.

The core Result type never catches anything. These adapters are the
sanctioned place where an exception from third-party or legacy code is
captured and moved onto the failure track, as the exception object itself:

    Before:
        try:
            config = json.loads(raw)
        except ValueError as e:
            return failure(e)
        return success(config)

    After:
        return from_computation(lambda: json.loads(raw))

Only Exception subclasses are captured. KeyboardInterrupt, SystemExit and
asyncio.CancelledError keep propagating.
"""

from __future__ import annotations

from functools import partial, wraps
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

import structlog

from twotrack.config import boundary_settings
from twotrack.result import Failure, Result, Success

T = TypeVar("T")
X = TypeVar("X")
P = ParamSpec("P")

log = structlog.get_logger()


def _describe(computation: Callable[..., Any]) -> str:
    return getattr(computation, "__qualname__", None) or repr(computation)


def _captured(name: str, exc: Exception) -> Result[Any, Exception]:
    if boundary_settings().log_captured:
        log.debug(
            "result.exception_captured",
            computation=name,
            exception_type=type(exc).__name__,
            error=str(exc),
        )
    return Failure(exc)


def _run(computation: Callable[[], T], name: str) -> Result[T, Exception]:
    try:
        return Success(computation())
    except Exception as e:
        return _captured(name, e)


async def _run_async(computation: Callable[[], Awaitable[T]], name: str) -> Result[T, Exception]:
    try:
        return Success(await computation())
    except Exception as e:
        return _captured(name, e)


def from_computation(computation: Callable[[], T]) -> Result[T, Exception]:
    """
    Run a zero-argument computation, capturing any exception as a Failure.

        from_computation(lambda: int("42"))   # → Success(42)
        from_computation(lambda: int("x"))    # → Failure(ValueError(...))
    """
    return _run(computation, _describe(computation))


async def from_async_computation(
    computation: Callable[[], Awaitable[T]],
) -> Result[T, Exception]:
    """
    Await a zero-argument coroutine function, capturing any exception as a Failure.

        result = await from_async_computation(lambda: client.get(url))
    """
    return await _run_async(computation, _describe(computation))


def from_optional(value: T | None, error: X) -> Result[T, X]:
    """
    Lift an Optional into a Result: None becomes Failure(error).

        from_optional(users.get(user_id), f"user {user_id} not found")
    """
    if value is not None:
        return Success(value)
    return Failure(error)


def safe(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """
    Decorator applying from_computation to every call of `fn`.

        @safe
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port("8080")  # → Success(8080)
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return _run(partial(fn, *args, **kwargs), _describe(fn))

    return wrapper


def safe_async(fn: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T, Exception]]]:
    """Decorator applying from_async_computation to every call of the coroutine function `fn`."""

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return await _run_async(partial(fn, *args, **kwargs), _describe(fn))

    return wrapper
