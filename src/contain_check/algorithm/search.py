"""SequenceSearch: two-phase containment search over list-shaped actual values.

Phase 1 (speculative) probes every element with the comparator's general
predicate while check-level writes are suppressed, so probing never marks
the shared ledger.  Phase 2 (real) re-runs the equality step with writes
enabled on exactly the elements the outcome is about:

contains
    - no match: every element is compared (and marked FAILED), each mismatch
      is reported, and the expected value is recorded as a mismatched
      expected value.  Result False.
    - matches:  only matched elements are compared again (and marked PASSED).
      Non-matched elements stay untouched.  Result True.

not contains
    - no match: every element that carries a traceable value is upgraded to
      FUZZY_PASSED.  Result True.
    - matches:  every matched element produces its own "equals" violation
      and is compared again in NOT_EQUAL mode (marked FAILED).  Result False.

There is no best-match tie-break: every qualifying index participates.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from contain_check.algorithm.comparator import AssertionMode, Comparator
from contain_check.messages import ValuePathMessage, message
from contain_check.traceable import CheckLevel, disabled_checks
from contain_check.tree.nodes import DataNode

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["IndexedMatch", "SequenceSearch"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IndexedMatch:
    """An element index whose value matched the expected value."""

    idx: int
    value: Any


class SequenceSearch:
    """Containment search of one expected value inside one list of elements.

    Args:
        session:  Session that receives diagnostics and owns the ledger.
        path:     Path of the list; elements live at ``path.index(i)``.
        elements: Ordered element values (plain Python values or DataNodes).
        expected: Expected value each element is compared against.
    """

    def __init__(
        self,
        session: MatchSession,
        path: ValuePath,
        elements: Sequence[Any],
        expected: Any,
    ) -> None:
        self._session = session
        self._path = path
        self._elements = list(elements)
        self._expected = expected
        self._probe = Comparator(
            AssertionMode.EQUAL,
            session.ledger,
            session.config,
            registry=session.registry,
        )

    @property
    def probe_mismatch_messages(self) -> list[ValuePathMessage]:
        """Mismatches from the most recent ``find_matches`` (never reported automatically)."""
        return self._probe.mismatch_messages

    @property
    def probe_missing_messages(self) -> list[ValuePathMessage]:
        """Missing values from the most recent ``find_matches`` (never reported automatically)."""
        return self._probe.missing_messages

    # ------------------------------------------------------------------
    # Phase 1
    # ------------------------------------------------------------------

    def find_matches(self, negative: bool = False) -> list[IndexedMatch]:
        """Return every element index equal to the expected value.

        Runs with check-level writes disabled.  In negative mode the probe
        uses the inequality predicate, which yields the same indexes.
        """
        self._probe.clear_messages()
        matches: list[IndexedMatch] = []
        with disabled_checks():
            for idx, element in enumerate(self._elements):
                indexed_path = self._path.index(idx)
                if negative:
                    is_match = not self._probe.compare_is_not_equal(indexed_path, element, self._expected)
                else:
                    is_match = self._probe.compare_is_equal(indexed_path, element, self._expected)
                if is_match:
                    matches.append(IndexedMatch(idx, element))

        logger.debug(
            "probed %d elements at %s: %d match(es)", len(self._elements), self._path, len(matches)
        )
        return matches

    # ------------------------------------------------------------------
    # Phase 2
    # ------------------------------------------------------------------

    def analyze_contain(self) -> bool:
        """Run both phases for a contains check and report into the session."""
        matches = self.find_matches()
        if not matches:
            self._session.report_mismatched_value(self._expected)
            self.compare_all()
            return False

        self.confirm(matches)
        return True

    def analyze_not_contain(self) -> bool:
        """Run both phases for a not-contains check and report into the session."""
        matches = self.find_matches(negative=True)
        if not matches:
            self.mark_fuzzy_passed()
            return True

        self.report_violations(matches)
        return False

    def compare_all(self) -> None:
        """Equality-only comparison of every element, reporting each failure."""
        comparator = Comparator(
            AssertionMode.EQUAL, self._session.ledger, self._session.config, session=self._session
        )
        for idx, element in enumerate(self._elements):
            comparator.compare_using_equal_only(self._path.index(idx), element, self._expected)

    def confirm(self, matches: list[IndexedMatch]) -> None:
        """Equality-only comparison of the matched elements only."""
        comparator = Comparator(
            AssertionMode.EQUAL, self._session.ledger, self._session.config, session=self._session
        )
        for match in matches:
            comparator.compare_using_equal_only(self._path.index(match.idx), match.value, self._expected)

    def report_violations(self, matches: list[IndexedMatch]) -> None:
        """Report one "equals" match per matched element and mark it."""
        comparator = Comparator(
            AssertionMode.NOT_EQUAL, self._session.ledger, self._session.config, session=self._session
        )
        max_lines = self._session.config.preview_max_lines
        for match in matches:
            indexed_path = self._path.index(match.idx)
            self._session.report_match(
                indexed_path, message().error("equals").value_first_lines(match.value, max_lines)
            )
            comparator.compare_using_equal_only(indexed_path, match.value, self._expected)

    def mark_fuzzy_passed(self) -> None:
        for idx, element in enumerate(self._elements):
            if _has_traceable_value(element):
                self._session.ledger.update(self._path.index(idx), CheckLevel.FUZZY_PASSED)


def _has_traceable_value(element: Any) -> bool:
    if isinstance(element, DataNode):
        return element.has_traceable_value()
    return not isinstance(element, (Mapping, list, tuple))
