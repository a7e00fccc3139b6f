"""algorithm subpackage: comparison and search primitives.

Provides the comparator terminal step, the two-phase sequence search and
their configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from contain_check.algorithm import AssertionMode, Comparator
    from contain_check.traceable import CheckLedger
    from contain_check.tree import ValuePath

    cmp = Comparator(AssertionMode.EQUAL, CheckLedger())
    cmp.compare_is_equal(ValuePath.root(), {"id": 1, "name": "a"}, {"id": 1})   # True
"""

from __future__ import annotations

from contain_check.algorithm.comparator import AssertionMode, Comparator, Contains, contain
from contain_check.algorithm.config import ContainConfig
from contain_check.algorithm.search import IndexedMatch, SequenceSearch

__all__ = [
    "AssertionMode",
    "Comparator",
    "ContainConfig",
    "Contains",
    "IndexedMatch",
    "SequenceSearch",
    "contain",
]
