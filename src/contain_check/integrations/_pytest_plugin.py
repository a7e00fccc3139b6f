"""pytest plugin for contain-check.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from contain_check import ContainConfig, check_contains, check_not_contains
from contain_check.messages import render_value


@pytest.fixture(scope="session")
def assert_contains() -> Any:
    """Fixture that returns a callable containment asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to check_contains() which creates a fresh MatchSession per call).

    Usage in tests::

        def test_user_listed(assert_contains):
            assert_contains([{"id": 1, "name": "a"}], {"id": 1})

        def test_user_missing(assert_contains):
            with pytest.raises(AssertionError, match=r"expected to contain"):
                assert_contains([{"id": 1}], {"id": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that raises
        ``AssertionError`` when ``actual`` does not contain ``expected``.
    """

    def _assert(actual: Any, expected: Any, config: ContainConfig | None = None) -> None:
        """Assert that ``actual`` contains ``expected``.

        Raises:
            AssertionError: With the rendered mismatch report.
        """
        result = check_contains(actual, expected, config=config)
        if not result.matched:
            raise AssertionError(
                f"expected to contain: {render_value(expected)}\n"
                f"  actual: {render_value(actual)}\n"
                f"{result.report}"
            )

    return _assert


@pytest.fixture(scope="session")
def assert_not_contains() -> Any:
    """Fixture that returns a callable absence asserter.

    Usage in tests::

        def test_no_admins(assert_not_contains):
            assert_not_contains(["user", "guest"], "admin")

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that raises
        ``AssertionError`` when ``actual`` contains ``expected``.
    """

    def _assert(actual: Any, expected: Any, config: ContainConfig | None = None) -> None:
        result = check_not_contains(actual, expected, config=config)
        if not result.matched:
            raise AssertionError(
                f"expected not to contain: {render_value(expected)}\n"
                f"  actual: {render_value(actual)}\n"
                f"{result.report}"
            )

    return _assert
