"""Sequence contain handlers: list-shaped actual vs a single expected value.

Both handlers delegate the index search to ``SequenceSearch``; they only
differ in how elements are obtained from the actual value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from contain_check.algorithm.search import SequenceSearch
from contain_check.protocols import BaseContainHandler
from contain_check.tree.nodes import DataNode
from contain_check.tree.table import TableData

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = [
    "DataNodeListAndValueContainHandler",
    "IterableAndSingleValueContainHandler",
    "is_plain_iterable",
]


def is_plain_iterable(value: Any) -> bool:
    """Iterable actual values that are treated as ordered sequences.

    Strings, bytes, mappings and DataNodes are iterable but never sequences
    here.
    """
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, bytearray, Mapping, DataNode)
    )


class IterableAndSingleValueContainHandler(BaseContainHandler):
    """Built-in fallback: any plain iterable actual vs any expected value.

    Non-list iterables (tuples, sets, generators) are materialised once in
    ``converted_actual`` and cached by the session.
    """

    def handle(self, actual: Any, expected: Any) -> bool:
        return is_plain_iterable(actual)

    def converted_actual(self, actual: Any, expected: Any) -> Any:
        if isinstance(actual, list):
            return actual
        return list(actual)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        SequenceSearch(session, path, actual, expected).analyze_contain()

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        SequenceSearch(session, path, actual, expected).analyze_not_contain()


class DataNodeListAndValueContainHandler(BaseContainHandler):
    """List DataNode actual vs any non-table expected value."""

    def handle(self, actual: Any, expected: Any) -> bool:
        return isinstance(actual, DataNode) and actual.is_list() and not isinstance(expected, TableData)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        SequenceSearch(session, path, actual.elements(), expected).analyze_contain()

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        SequenceSearch(session, path, actual.elements(), expected).analyze_not_contain()
