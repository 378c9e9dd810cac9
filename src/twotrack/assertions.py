"""
Test assertions for Result values.

Expressive assert helpers that produce clear pytest failure messages.

Usage in tests:
    from twotrack import ResultAssertions

    def test_parse_port():
        value = ResultAssertions.assert_success(parse_port("8080"))
        assert value == 8080

    def test_parse_port_rejects_text():
        error = ResultAssertions.assert_failure(parse_port("http"))
        assert isinstance(error, ValueError)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from twotrack._formatting import format_value
from twotrack.errors import UnwrapError
from twotrack.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")

_UNSET: Any = object()


def _describe(result: Result[Any, Any]) -> str:
    match result:
        case Success(v):
            return f"Success({format_value(v)})"
        case Failure(err):
            return f"Failure({format_value(err)})"
    return repr(result)  # pragma: no cover


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T, Any], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), f"Expected Success but got {_describe(result)}{context}"
        return result.unwrap_success()

    @staticmethod
    def assert_success_value(result: Result[Any, Any], expected_value: Any) -> None:
        """Assert the Result is a Success holding exactly `expected_value`."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure(
        result: Result[Any, E],
        expected_error: Any = _UNSET,
        message: str = "",
    ) -> E:
        """
        Assert the Result is a Failure, optionally checking the payload by equality.

            error = ResultAssertions.assert_failure(result, "user not found")
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), f"Expected Failure but got {_describe(result)}{context}"
        error = result.unwrap_failure()
        if expected_error is not _UNSET:
            assert error == expected_error, (
                f"Expected failure {expected_error!r} but got {error!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_matches(result: Result[Any, E], predicate: Callable[[E], bool]) -> E:
        """
        Assert the Result is a Failure whose payload satisfies `predicate`.

            ResultAssertions.assert_failure_matches(result, lambda e: isinstance(e, KeyError))
        """
        error = ResultAssertions.assert_failure(result)
        assert predicate(error), f"Failure payload {error!r} did not satisfy the predicate"
        return error

    @staticmethod
    def assert_unwrap_error(action: Callable[[], Any], expected_payload: Any = _UNSET) -> UnwrapError:
        """
        Assert that `action` raises UnwrapError and return it for inspection.

            err = ResultAssertions.assert_unwrap_error(lambda: result.unwrap_success())
        """
        try:
            outcome = action()
        except UnwrapError as e:
            if expected_payload is not _UNSET:
                assert e.payload == expected_payload, (
                    f"Expected UnwrapError payload {expected_payload!r} but got {e.payload!r}"
                )
            return e
        raise AssertionError(f"Expected UnwrapError but call returned {outcome!r}")
