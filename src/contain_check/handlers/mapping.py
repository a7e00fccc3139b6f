"""MapContainHandler: mapping actual vs a partial mapping of expected entries.

contains:      every expected key must be present and its value must equal
               the expected value (partial record equality, recursively).
not contains:  no expected entry may be present with an equal value; every
               present and equal entry is reported as a forbidden match.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from contain_check.algorithm.comparator import MISSING, AssertionMode, Comparator, lookup_entry
from contain_check.messages import message
from contain_check.protocols import BaseContainHandler
from contain_check.traceable import disabled_checks
from contain_check.tree.nodes import DataNode

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["MapContainHandler"]


class MapContainHandler(BaseContainHandler):
    """Map DataNode or plain mapping actual vs ``Mapping`` expected."""

    def handle(self, actual: Any, expected: Any) -> bool:
        is_map = isinstance(actual, Mapping) or (isinstance(actual, DataNode) and actual.is_map())
        return is_map and isinstance(expected, Mapping)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        comparator = Comparator(AssertionMode.EQUAL, session.ledger, session.config, session=session)
        for key, expected_value in expected.items():
            child_path = path.property(str(key))
            actual_value = _get(actual, key)
            if actual_value is MISSING:
                session.report_missing(child_path, expected_value)
                continue
            comparator.compare_using_equal_only(child_path, actual_value, expected_value)

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        probe = Comparator(AssertionMode.EQUAL, session.ledger, session.config, registry=session.registry)
        comparator = Comparator(AssertionMode.NOT_EQUAL, session.ledger, session.config, session=session)
        max_lines = session.config.preview_max_lines

        for key, expected_value in expected.items():
            child_path = path.property(str(key))
            actual_value = _get(actual, key)
            if actual_value is MISSING:
                continue

            with disabled_checks():
                is_equal = probe.compare_is_equal(child_path, actual_value, expected_value)
            if is_equal:
                session.report_match(
                    child_path, message().error("equals").value_first_lines(actual_value, max_lines)
                )
            comparator.compare_using_equal_only(child_path, actual_value, expected_value)


def _get(actual: Any, key: Any) -> Any:
    entries = actual.properties if isinstance(actual, DataNode) else actual
    return lookup_entry(entries, key)
