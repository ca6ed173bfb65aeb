#!/usr/bin/env python3
"""
JSON formatting for display and logging.
"""

import json
import dataclasses
from typing import Any, Optional

from ..config import JSON_INDENT
from ..models import FormatResult


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def format_json(value: Any, indent: Optional[int] = JSON_INDENT) -> FormatResult:
    """
    Serialize ``value`` to JSON.

    Dataclass instances are written as their fields. NaN and infinity are
    rejected rather than written as non-standard tokens.

    Args:
        value: Any JSON-serializable value
        indent: Spaces per level, or None for compact single-line output

    Returns:
        FormatResult holding the document, or the serialization error
    """
    separators = (",", ": ") if indent is not None else (",", ":")
    try:
        text = json.dumps(value, indent=indent, separators=separators,
                          ensure_ascii=False, allow_nan=False, default=_default)
    except (TypeError, ValueError, RecursionError) as e:
        return FormatResult.failure(e)
    return FormatResult.success(text)


def json_pretty(value: Any) -> str:
    """Indented JSON, most useful for stringifying dataclasses. Errors come back as text."""
    return str(format_json(value))


def json_flat(value: Any) -> str:
    """JSON without indents and line breaks. Errors come back as text."""
    return str(format_json(value, indent=None))
