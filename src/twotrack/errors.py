"""
Misuse signal raised by forced extraction of the wrong Result variant.

Domain failures travel as data on the failure track and are never raised.
UnwrapError is the one exception the core raises on its own: it marks a
programming error (calling unwrap_success on a Failure, or unwrap_failure
on a Success) and should propagate to a top-level handler or test failure.
"""

from __future__ import annotations

from typing import Any


class UnwrapError(Exception):
    """
    Raised when a Result is unwrapped as the variant it does not hold.

    Carries the payload of the variant that *was* present, verbatim, so the
    catching code can inspect what was actually there.

    >>> from twotrack import failure
    >>> try:
    ...     failure("boom").unwrap_success()
    ... except UnwrapError as e:
    ...     e.payload
    'boom'
    """

    def __init__(self, message: str, payload: Any) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload

    def __repr__(self) -> str:
        return f"UnwrapError({self.message!r}, payload={self.payload!r})"
