"""
Execution contexts — separate WHAT (pure logic) from HOW (side effects).

Pure functions describe what should happen and return a Result; an
execution context describes how the computation runs: with timing and
logging, inside a transaction, and so on. Business code never mixes the two.

Usage:
    def pipeline(raw: bytes) -> Result[Order, str]:
        return (
            parse(raw)
            .and_then(validate)
            .and_then(price)
        )

    result = pipeline(raw).within(LoggingExecutionContext(operation="price_order"))

    # Or using the decorator
    @with_context(LoggingExecutionContext(operation="price_order"))
    def handle(raw: bytes) -> Result[Order, str]:
        return pipeline(raw)
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import structlog

from twotrack.result import Failure, Result

T = TypeVar("T")
E = TypeVar("E")

log = structlog.get_logger()


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Protocol for execution contexts.

    Any class implementing execute(computation) satisfies this protocol
    via structural typing — no explicit inheritance needed.
    """

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Execute a Result-returning computation within this context."""
        ...


# ──────────────────────── NoOp (Testing) ────────────────────────


class NoOpExecutionContext:
    """
    Passthrough execution context — runs the computation without any wrapper.

    Use for unit tests and for pure logic that needs no surrounding effects.
    """

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Execution context that logs start, completion, duration and outcome.

    Wraps another context (decorator pattern). An exception escaping the
    computation is logged and returned as Failure(exception).

        ctx = LoggingExecutionContext(operation="import_orders")
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E | Exception]:
        log.log(self._log_level, "execution.started", operation=self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            log.error(
                "execution.failed",
                operation=self._operation,
                duration_s=round(time.monotonic() - start, 3),
                exception_type=type(e).__name__,
                error=str(e),
            )
            return Failure(e)

        log.log(
            self._log_level,
            "execution.completed",
            operation=self._operation,
            duration_s=round(time.monotonic() - start, 3),
            outcome="SUCCESS" if result.is_success() else "FAILURE",
        )
        return result


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Compose multiple execution contexts into a single one.

    The first context is outermost; the last one wraps the computation
    directly:

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="import_orders"),
            TransactionContext(session),
        )
        # Logging wraps Transaction wraps computation
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = list(contexts)

    def execute(self, computation: Callable[[], Result[T, E]]) -> Result[T, E]:
        wrapped = computation
        for ctx in reversed(self._contexts):
            wrapped = _bind(ctx, wrapped)
        return wrapped()


def _bind(
    ctx: ExecutionContext,
    computation: Callable[[], Result[T, E]],
) -> Callable[[], Result[T, E]]:
    """Bind a computation to a context, deferring execution."""
    return lambda: ctx.execute(computation)


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable[[Callable[..., Result[T, E]]], Callable[..., Result[T, E]]]:
    """
    Decorator to run a handler function's Result through an execution context.

        @with_context(LoggingExecutionContext(operation="checkout"))
        def handle(cmd: Checkout) -> Result[Receipt, str]:
            return success(cmd).and_then(validate).and_then(charge)

    Equivalent to:
        def handle(cmd):
            return pipeline(cmd).within(ctx)
    """

    def decorator(fn: Callable[..., Result[T, E]]) -> Callable[..., Result[T, E]]:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, E]:
            return ctx.execute(lambda: fn(*args, **kwargs))

        return wrapper

    return decorator
