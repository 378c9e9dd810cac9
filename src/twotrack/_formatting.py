"""Render arbitrary payloads for UnwrapError default messages."""

from __future__ import annotations

import json
from numbers import Number
from typing import Any

from twotrack.config import formatter_settings


def format_value(value: Any) -> str:
    """
    Short human-readable rendering of a payload. Never raises.

    Strings are double-quoted, scalars use their natural text form, and
    anything else is pretty-printed as JSON, falling back to a type tag
    when it cannot be serialized (cyclic or non-JSON structures).

    >>> format_value("boom")
    '"boom"'
    >>> format_value(None)
    'None'
    """
    if isinstance(value, str):
        return f'"{value}"'
    if value is None or isinstance(value, Number):
        return str(value)

    settings = formatter_settings()
    try:
        return json.dumps(value, indent=settings.indent, sort_keys=settings.sort_keys)
    except (TypeError, ValueError, RecursionError):
        return f"<{type(value).__name__} object>"
