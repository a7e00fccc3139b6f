"""Public API functions for contain-check.

This module provides the four user-facing functions: contains, not_contains,
check_contains and check_not_contains.  Each call creates a fresh
MatchSession to guarantee that no report state is shared between calls; only
the handler registry is process-wide.
"""

from __future__ import annotations

from typing import Any

from contain_check.algorithm.config import ContainConfig
from contain_check.result import ContainResult
from contain_check.session import MatchSession, match_session
from contain_check.traceable import CheckLedger
from contain_check.tree.nodes import DataNode
from contain_check.tree.path import ValuePath

__all__ = ["check_contains", "check_not_contains", "contains", "not_contains"]


def check_contains(
    actual: Any,
    expected: Any,
    config: ContainConfig | None = None,
    path: ValuePath | None = None,
    ledger: CheckLedger | None = None,
) -> ContainResult:
    """Check that ``actual`` contains ``expected`` and return a rich result.

    Args:
        actual:   Actual value: list, tuple, mapping, string, numpy array or
                  DataNode.
        expected: Expected partial value.  Mappings are partial records,
                  ``TableData`` expects every row to be present.
        config:   Comparison knobs.  Defaults to ``ContainConfig()`` when None.
        path:     Path of ``actual``.  Defaults to the DataNode's own path, or
                  ``ValuePath.root()``.
        ledger:   Check ledger to record check levels into.  Defaults to a
                  fresh ledger.

    Returns:
        A ``ContainResult``; ``report`` holds the mismatch report on failure.

    Raises:
        NoHandlerFoundError: When no handler supports the value shapes.
    """
    session = match_session(config=config, ledger=ledger)
    matched = session.contains(_actual_path(actual, path), actual, expected)
    report = "" if matched else str(session.generate_mismatch_report())
    return _result(session, matched, negative=False, report=report)


def check_not_contains(
    actual: Any,
    expected: Any,
    config: ContainConfig | None = None,
    path: ValuePath | None = None,
    ledger: CheckLedger | None = None,
) -> ContainResult:
    """Check that ``actual`` does not contain ``expected``.

    Arguments are the same as for ``check_contains``.  On failure ``report``
    lists every forbidden match.
    """
    session = match_session(config=config, ledger=ledger)
    matched = session.not_contains(_actual_path(actual, path), actual, expected)
    report = "" if matched else str(session.generate_match_report())
    return _result(session, matched, negative=True, report=report)


def contains(actual: Any, expected: Any, config: ContainConfig | None = None) -> bool:
    """Return True if ``actual`` contains ``expected``."""
    return check_contains(actual, expected, config=config).matched


def not_contains(actual: Any, expected: Any, config: ContainConfig | None = None) -> bool:
    """Return True if ``actual`` does not contain ``expected``."""
    return check_not_contains(actual, expected, config=config).matched


def _actual_path(actual: Any, path: ValuePath | None) -> ValuePath:
    if path is not None:
        return path
    if isinstance(actual, DataNode):
        return actual.path
    return ValuePath.root()


def _result(session: MatchSession, matched: bool, negative: bool, report: str) -> ContainResult:
    return ContainResult(
        matched=matched,
        negative=negative,
        match_paths=frozenset(session.generate_match_paths()),
        mismatch_paths=frozenset(session.generate_mismatch_paths()),
        report=report,
        check_levels=session.ledger.snapshot(),
    )
