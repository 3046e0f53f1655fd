"""Strict JSON parsing for evaluation inputs.

``json.loads`` accepts ``NaN`` and ``Infinity`` and can exhaust the stack on
deeply nested arrays. Both are reported here as a plain parse failure.
"""

import json
from typing import Any


class JSONParseError(ValueError):
    """Raised when text is not strict JSON."""


def _reject_constant(name: str) -> Any:
    raise JSONParseError(f"Unexpected token {name}")


def loads_strict(text: str) -> Any:
    """Parse JSON text, rejecting non-standard constants.

    Args:
        text: The JSON text.

    Returns:
        The decoded value.

    Raises:
        JSONParseError: If the text is not valid JSON or is nested too deeply.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JSONParseError(str(e)) from e
    except RecursionError as e:
        raise JSONParseError("JSON is nested too deeply") from e
