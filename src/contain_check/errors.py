"""Errors raised by the containment engine.

Assertion outcomes (mismatches, missing values, fuzzy matches) are never
raised; they are returned as booleans plus diagnostics.  Exceptions here
signal a misconfigured engine.
"""

from __future__ import annotations

from typing import Any

from contain_check.messages import render_value

__all__ = ["NoHandlerFoundError"]


def _render_type(value: Any) -> str:
    if value is None:
        return "<null>"
    return f"<{type(value).__module__}.{type(value).__qualname__}>"


class NoHandlerFoundError(RuntimeError):
    """No registered contain handler accepts the given actual/expected pair.

    Signals a missing extension, not a failed assertion.

    Attributes:
        actual:   The actual value that could not be dispatched.
        expected: The expected value that could not be dispatched.
    """

    def __init__(self, actual: Any, expected: Any) -> None:
        self.actual = actual
        self.expected = expected
        msg = (
            "no contains handler found for\n"
            f"actual: {render_value(actual)} {_render_type(actual)}\n"
            f"expected: {render_value(expected)} {_render_type(expected)}"
        )
        super().__init__(msg)
