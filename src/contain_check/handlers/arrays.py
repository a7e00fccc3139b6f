"""NumpyArrayContainHandler: containment checks over ``numpy.ndarray`` actuals.

Arrays are converted to nested Python lists once (``ndarray.tolist``) and
the converted value is cached by the session under the actual path; the
search itself runs over the outermost axis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from contain_check.algorithm.search import SequenceSearch
from contain_check.protocols import BaseContainHandler

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["NumpyArrayContainHandler"]


class NumpyArrayContainHandler(BaseContainHandler):
    """At least one-dimensional ``ndarray`` actual vs any expected value."""

    def handle(self, actual: Any, expected: Any) -> bool:
        return isinstance(actual, np.ndarray) and actual.ndim >= 1

    def converted_actual(self, actual: Any, expected: Any) -> Any:
        return actual.tolist()

    def converted_expected(self, actual: Any, expected: Any) -> Any:
        if isinstance(expected, np.ndarray):
            return expected.tolist()
        if isinstance(expected, np.generic):
            return expected.item()
        return expected

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        SequenceSearch(session, path, actual, expected).analyze_contain()

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        SequenceSearch(session, path, actual, expected).analyze_not_contain()
