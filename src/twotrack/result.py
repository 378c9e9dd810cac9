"""
Result — a two-track success/failure container.

A Result[T, E] is either Success(value: T) or Failure(error: E). Functions
return it instead of raising or returning None; combinators transform the
success track and short-circuit on the failure track, so callers only write
the happy path and failures propagate as data.

    ┌───────────┐   and_then    ┌───────────┐   and_then    ┌──────────┐
    │  parse    │──Success──────│ validate  │──Success──────│  build   │──→ Result[T, E]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[T, E]

Design choices:
  - Success and Failure are frozen, slotted dataclasses; the payload of the
    other variant does not exist as an attribute at all
  - Every combinator lives on the Result base and dispatches with match/case
  - Re-tagging (Success.map_failure, Failure.map, ...) returns self; the
    absent type parameter is phantom and nothing is copied
  - The only exception raised here is UnwrapError, from the unwrap pair
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    Never,
    TypeVar,
)

from twotrack._formatting import format_value
from twotrack.errors import UnwrapError

if TYPE_CHECKING:
    from twotrack.execution import ExecutionContext

T = TypeVar("T", covariant=True)
E = TypeVar("E", covariant=True)
U = TypeVar("U")
F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
V = TypeVar("V")
X = TypeVar("X")


class Result(Generic[T, E]):
    """
    Two-track Result: exactly one of Success(value) or Failure(error).

    All transformations short-circuit on failure, so you only write the
    success path and failures propagate automatically.

    Usage:
        >>> success(21).map(lambda x: x * 2)
        Success(42)

        >>> failure("bad input").map(lambda x: x * 2).is_failure()
        True
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[T, E]:
        if cls is Result:
            raise TypeError("Result cannot be instantiated directly; use success() or failure()")
        return super().__new__(cls)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    # ──────────────────────── Core Transformations ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value. Short-circuits on failure.

            success(5).map(lambda x: x * 2)   # → Success(10)
            failure("e").map(lambda x: x * 2) # → the same Failure
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """
        Transform the failure payload. Passes through success unchanged.

            failure("timeout").map_failure(str.upper)  # → Failure('TIMEOUT')
        """
        match self:
            case Success(_):
                return self  # type: ignore[return-value]
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def and_then(self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        This is the KEY operator: it connects railway segments. If `op`
        returns a Failure, the chain stays on the failure track from there.

            def positive(x: int) -> Result[int, str]:
                return success(x) if x > 0 else failure("must be positive")

            success(5).and_then(positive)   # → Success(5)
            success(-1).and_then(positive)  # → Failure('must be positive')
        """
        match self:
            case Success(v):
                return op(v)
            case Failure(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def or_else(self, op: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Recover from failure with a Result-returning function.

        Mirror of and_then for the failure track; a Success passes through
        without invoking `op`.

            failure("missing").or_else(lambda _: load_default())
        """
        match self:
            case Success(_):
                return self  # type: ignore[return-value]
            case Failure(err):
                return op(err)
        raise TypeError("unreachable")  # pragma: no cover

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        """
        Apply one of two functions depending on the variant.

        This is the fundamental destructor; exactly one handler runs.

            result.match(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_or(self, default: U, mapper: Callable[[T], U]) -> U:
        """Apply `mapper` to the success value, or return `default` on failure."""
        match self:
            case Success(v):
                return mapper(v)
            case _:
                return default

    def map_or_else(self, on_failure: Callable[[E], U], mapper: Callable[[T], U]) -> U:
        """Apply `mapper` to the success value, or `on_failure` to the failure payload."""
        return self.match(mapper, on_failure)

    # ──────────────────────── Boolean Combination ────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """
        Return `other` if this is a Success, otherwise this Failure.

            success(5).and_(success("x"))    # → Success('x')
            failure("e").and_(success("x"))  # → Failure('e')
        """
        match self:
            case Success(_):
                return other
            case _:
                return self  # type: ignore[return-value]

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """
        Return this Success, otherwise `other`.

            success(5).or_(failure(1))    # → Success(5)
            failure("e").or_(success(1))  # → Success(1)
        """
        match self:
            case Success(_):
                return self  # type: ignore[return-value]
            case _:
                return other

    # ──────────────────────── Extraction ────────────────────────

    def unwrap_success(self, message: str | None = None) -> T:
        """
        Extract the success value. Raises UnwrapError on a Failure.

        Prefer match(), unwrap_or() or match/case for safe access. The
        error carries the failure payload; `message` replaces the default
        text verbatim.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise UnwrapError(
                    message if message is not None
                    else f"Called unwrap_success on a Failure value: {format_value(err)}",
                    err,
                )
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_failure(self, message: str | None = None) -> E:
        """Extract the failure payload. Raises UnwrapError on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise UnwrapError(
                    message if message is not None
                    else f"Called unwrap_failure on a Success value: {format_value(v)}",
                    v,
                )
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_or(self, default: T) -> T:  # type: ignore[misc]
        """Extract the value or return a default on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    def unwrap_or_else(self, fallback: Callable[[E], T]) -> T:
        """Extract the value or compute one from the failure payload."""
        return self.match(lambda v: v, fallback)

    # ──────────────────────── Validation & Recovery ────────────────────────

    def ensure(self, predicate: Callable[[T], bool], error: F) -> Result[T, E | F]:
        """
        Validate the success value against a condition.
        Short-circuits on existing failure.

            success(order).ensure(lambda o: o.total > 0, "total must be positive")
        """
        match self:
            case Success(v):
                return self if predicate(v) else Failure(error)
            case _:
                return self

    def recover(self, recovery_fn: Callable[[E], U]) -> Result[T | U, Never]:
        """
        Recover from failure by producing a success value.

            failure("not cached").recover(lambda err: default_user)
        """
        match self:
            case Failure(err):
                return Success(recovery_fn(err))
            case _:
                return self  # type: ignore[return-value]

    # ──────────────────────── Side Effects ────────────────────────

    def peek(self, action: Callable[[T], Any]) -> Result[T, E]:
        """
        Execute a side effect on the success value without altering the Result.

            result.peek(lambda user: log.info("user.created", user_id=user.id))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[E], Any]) -> Result[T, E]:
        """Execute a side effect on the failure payload without altering the Result."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: ExecutionContext) -> Result[T, E]:
        """
        Hand this Result to an execution context.

        The Result already exists, so the context only observes its outcome.
        Use with_context() to time the computation and capture its exceptions.

            result = (
                success(data)
                .and_then(validate)
                .and_then(persist)
                .within(LoggingExecutionContext(operation="persist"))
            )
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: V) -> Result[V, Never]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(error: X) -> Result[Never, X]:
        """Create a failed Result wrapping the given failure payload."""
        return Failure(error)

    @staticmethod
    def combine(
        ra: Result[A, X],
        rb: Result[B, X],
        combiner: Callable[[A, B], R],
    ) -> Result[R, X]:
        """
        Combine two Results. Both must succeed for the combination to succeed;
        otherwise the first Failure wins.

            order = Result.combine(
                parse_customer(raw),
                parse_lines(raw),
                lambda customer, lines: Order(customer, lines),
            )
        """
        return ra.and_then(lambda a: rb.map(lambda b: combiner(a, b)))

    @staticmethod
    def all_of(results: Iterable[Result[V, X]]) -> Result[list[V], X]:
        """
        Collect Results into a Result of list.
        Returns the first failure encountered, or Success with all values.

            Result.all_of(parse(line) for line in lines)  # Result[list[Item], str]
        """
        values: list[V] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(_):
                    return r  # type: ignore[return-value]
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True, repr=False)
class Success(Result[T, E]):
    """The success track — wraps a value of type T."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result[T, E]):
    """The failure track — wraps a failure payload of type E."""

    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


def success(value: V) -> Result[V, Never]:
    """Wrap a value on the success track."""
    return Success(value)


def failure(error: X) -> Result[Never, X]:
    """Wrap a payload on the failure track."""
    return Failure(error)
