"""IterableAndTableContainHandler: list actual vs a table of expected rows.

Every row is searched independently.  A row that matches no element is
recorded as a mismatched expected value together with the mismatches and
missing values collected while probing it; matched rows are confirmed on the
matched elements only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contain_check.algorithm.search import SequenceSearch
from contain_check.handlers.sequence import is_plain_iterable
from contain_check.protocols import BaseContainHandler
from contain_check.tree.nodes import DataNode
from contain_check.tree.table import TableData

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["IterableAndTableContainHandler"]


class IterableAndTableContainHandler(BaseContainHandler):
    """Built-in fallback for ``TableData`` expected values."""

    def handle(self, actual: Any, expected: Any) -> bool:
        if not isinstance(expected, TableData):
            return False
        return (isinstance(actual, DataNode) and actual.is_list()) or is_plain_iterable(actual)

    def converted_actual(self, actual: Any, expected: Any) -> Any:
        if isinstance(actual, (DataNode, list)):
            return actual
        return list(actual)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        elements = _elements(actual)
        for row in expected.rows:
            search = SequenceSearch(session, path, elements, row)
            matches = search.find_matches()
            if matches:
                search.confirm(matches)
                continue

            session.report_mismatched_value(row)
            session.report_mismatches(search.probe_mismatch_messages)
            session.report_missing_messages(search.probe_missing_messages)

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        elements = _elements(actual)
        for row in expected.rows:
            search = SequenceSearch(session, path, elements, row)
            matches = search.find_matches(negative=True)
            if matches:
                search.report_violations(matches)


def _elements(actual: Any) -> list[Any]:
    if isinstance(actual, DataNode):
        return actual.elements()
    return list(actual)
