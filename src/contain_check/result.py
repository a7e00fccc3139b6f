"""ContainResult dataclass for containment check output.

This module provides the rich result type returned by check_contains() and
check_not_contains() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from contain_check.traceable import CheckLevel
from contain_check.tree.path import ValuePath

__all__ = ["ContainResult"]


@dataclass(frozen=True, slots=True)
class ContainResult:
    """Rich result of a check_contains() / check_not_contains() call.

    Attributes:
        matched: True when the assertion holds (contains, or does not contain).
        negative: True for not-contains checks.
        match_paths: Paths of forbidden matches found by a not-contains check.
        mismatch_paths: Paths of mismatches and missing values found by a
            contains check.
        report: Plain-text diagnostic report; empty when ``matched`` is True.
        check_levels: Snapshot of the check ledger after the call.
    """

    matched: bool
    negative: bool
    match_paths: frozenset[ValuePath]
    mismatch_paths: frozenset[ValuePath]
    report: str
    check_levels: dict[ValuePath, CheckLevel]

    def __bool__(self) -> bool:
        return self.matched
