"""
twotrack — a two-track Result type for explicit, composable error handling.

Functions return Success(value) or Failure(error) instead of raising;
combinators chain the success track and short-circuit on failure.

    from twotrack import Result, failure, success

    def parse_age(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return failure(f"not a number: {raw!r}")
        return success(int(raw))

    message = (
        parse_age("30")
        .and_then(lambda age: success(age) if age < 150 else failure("implausible age"))
        .map(lambda age: f"Valid age {age}")
        .unwrap_or("invalid")
    )
"""

from twotrack.result import Result, Success, Failure, success, failure
from twotrack.errors import UnwrapError
from twotrack.boundary import (
    from_computation,
    from_async_computation,
    from_optional,
    safe,
    safe_async,
)
from twotrack.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
    with_context,
)
from twotrack.assertions import ResultAssertions
from twotrack.config import TwotrackSettings, get_settings
from twotrack.logging_config import configure_structlog

__all__ = [
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "UnwrapError",
    "from_computation",
    "from_async_computation",
    "from_optional",
    "safe",
    "safe_async",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "ResultAssertions",
    "TwotrackSettings",
    "get_settings",
    "configure_structlog",
]

__version__ = "1.0.0"
