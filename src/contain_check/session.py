"""MatchSession: per-call dispatcher and diagnostics aggregator.

A session drives one top-level ``contains`` / ``not_contains`` evaluation and
its recursive descent.  Handlers report through the session's append-only
reporting API; afterwards the caller queries path sets and rendered reports.

Sessions are cheap and never shared between concurrent evaluations: create a
fresh one per top-level check with ``match_session()`` (or reuse one after
``reset_report_data()``).  Only the handler registry is shared.

Example::

    session = match_session()
    session.contains(ValuePath.root(), [1, 2, 3], 5)      # False
    str(session.generate_mismatch_report())
    # root[0]: actual: 1 <int>, expected: 5 <int>
    # root[1]: ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from contain_check.algorithm.config import ContainConfig
from contain_check.messages import Message, ValuePathMessage, message
from contain_check.registry import HandlerRegistry, default_registry
from contain_check.traceable import CheckLedger
from contain_check.tree.path import ValuePath

__all__ = ["MatchSession", "match_session"]

logger = logging.getLogger(__name__)


class MatchSession:
    """Accumulates match, mismatch and missing diagnostics for one check.

    Args:
        config:   Comparison knobs.  Defaults to ``ContainConfig()``.
        ledger:   Check-level side table.  Pass a shared ledger to accumulate
            check state across sessions; defaults to a fresh one.
        registry: Handler registry.  Defaults to the process-wide registry.
    """

    def __init__(
        self,
        config: ContainConfig | None = None,
        ledger: CheckLedger | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        self._config = config if config is not None else ContainConfig()
        self._ledger = ledger if ledger is not None else CheckLedger()
        self._registry = registry if registry is not None else default_registry

        self._match_messages: list[ValuePathMessage] = []
        self._mismatch_messages: list[ValuePathMessage] = []
        self._missing_messages: list[ValuePathMessage] = []
        self._extra_mismatch_paths: set[ValuePath] = set()
        self._mismatched_expected_values: list[Any] = []
        self._converted_actual_by_path: dict[ValuePath, Any] = {}
        self._top_level_actual_path: ValuePath | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ContainConfig:
        return self._config

    @property
    def ledger(self) -> CheckLedger:
        return self._ledger

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    @property
    def top_level_actual_path(self) -> ValuePath | None:
        return self._top_level_actual_path

    @property
    def match_messages(self) -> list[ValuePathMessage]:
        return list(self._match_messages)

    @property
    def mismatch_messages(self) -> list[ValuePathMessage]:
        return list(self._mismatch_messages)

    @property
    def missing_messages(self) -> list[ValuePathMessage]:
        return list(self._missing_messages)

    @property
    def mismatched_expected_values(self) -> list[Any]:
        return list(self._mismatched_expected_values)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def contains(self, path: ValuePath, actual: Any, expected: Any) -> bool:
        """True when ``actual`` contains ``expected``; diagnostics are recorded.

        Raises:
            NoHandlerFoundError: When no handler accepts the value shapes.
        """
        self._update_top_level_actual_path(path)
        return self._evaluate(path, actual, expected, is_negative=False)

    def not_contains(self, path: ValuePath, actual: Any, expected: Any) -> bool:
        """True when ``actual`` does not contain ``expected``; matches are recorded.

        Raises:
            NoHandlerFoundError: When no handler accepts the value shapes.
        """
        self._update_top_level_actual_path(path)
        return self._evaluate(path, actual, expected, is_negative=True)

    def _evaluate(self, path: ValuePath, actual: Any, expected: Any, is_negative: bool) -> bool:
        handler = self._registry.find(actual, expected)
        logger.debug("%s: %r selected for %s", path, handler, "not contains" if is_negative else "contains")

        convert_actual = getattr(handler, "converted_actual", None)
        convert_expected = getattr(handler, "converted_expected", None)

        converted_actual = actual if convert_actual is None else convert_actual(actual, expected)
        self._record_converted_actual(path, actual, converted_actual)
        converted_expected = expected if convert_expected is None else convert_expected(actual, expected)

        before = self._negative_evidence_count(is_negative)
        if is_negative:
            handler.analyze_not_contain(self, path, converted_actual, converted_expected)
        else:
            handler.analyze_contain(self, path, converted_actual, converted_expected)
        after = self._negative_evidence_count(is_negative)

        return after == before

    def _negative_evidence_count(self, is_negative: bool) -> int:
        if is_negative:
            return len(self._match_messages)
        return (
            len(self._mismatch_messages)
            + len(self._missing_messages)
            + len(self._mismatched_expected_values)
        )

    def _update_top_level_actual_path(self, path: ValuePath) -> None:
        if self._top_level_actual_path is None:
            self._top_level_actual_path = path

    def _record_converted_actual(self, path: ValuePath, actual: Any, converted: Any) -> None:
        if converted is actual:
            return
        self._converted_actual_by_path.setdefault(path, converted)

    # ------------------------------------------------------------------
    # Reporting API
    # ------------------------------------------------------------------

    def report_mismatch(self, path: ValuePath, mismatch: Message) -> None:
        self._mismatch_messages.append(ValuePathMessage(path, mismatch))

    def report_mismatches(self, messages: Iterable[ValuePathMessage]) -> None:
        self._mismatch_messages.extend(messages)

    def report_missing(self, path: ValuePath, value: Any) -> None:
        """Record that ``value`` was expected at ``path`` but is absent."""
        self._missing_messages.append(ValuePathMessage(path, message().value(value)))

    def report_missing_message(self, missing: ValuePathMessage) -> None:
        self._missing_messages.append(missing)

    def report_missing_messages(self, messages: Iterable[ValuePathMessage]) -> None:
        self._missing_messages.extend(messages)

    def report_mismatched_value(self, one_of_expected_values: Any) -> None:
        """Record an expected value that matched nothing anywhere."""
        self._mismatched_expected_values.append(one_of_expected_values)

    def report_match(self, path: ValuePath, match: Message) -> None:
        """Record a positive finding; used by not-contains to flag forbidden matches."""
        self._match_messages.append(ValuePathMessage(path, match))

    def register_extra_mismatch_paths(self, paths: Iterable[ValuePath]) -> None:
        self._extra_mismatch_paths.update(paths)

    def register_converted_actual_by_path(self, converted: Mapping[ValuePath, Any]) -> None:
        self._converted_actual_by_path.update(converted)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def converted_actual(self, path: ValuePath, default: Any = None) -> Any:
        return self._converted_actual_by_path.get(path, default)

    def create_value_converter(self) -> Callable[[ValuePath, Any], Any]:
        """Return ``(path, original) -> converted-or-original`` for renderers."""
        return lambda path, original: self._converted_actual_by_path.get(path, original)

    def no_mismatches(self) -> bool:
        return not (self._mismatch_messages or self._missing_messages or self._mismatched_expected_values)

    def no_matches(self) -> bool:
        return not self._match_messages

    def generate_match_paths(self) -> set[ValuePath]:
        return _extract_paths(self._match_messages)

    def generate_mismatch_paths(self) -> set[ValuePath]:
        result = set(self._extra_mismatch_paths)
        result |= _extract_paths(self._mismatch_messages)
        result |= _extract_paths(self._missing_messages)
        return result

    def generate_match_report(self) -> Message:
        """Join match messages; top-level matches render without their path."""
        return Message.join(
            "\n",
            (
                msg.message if msg.path == self._top_level_actual_path else msg.full_message
                for msg in self._match_messages
            ),
        )

    def generate_mismatch_report(self) -> Message:
        """Render mismatches, grouped and labelled when missing values exist.

        Labels are strict ("mismatches", "missing values") when at least one
        expected value was recorded as matching nothing, and tentative
        ("possible mismatches", "possible missing values") otherwise.  A
        failed check without path-level details (an empty actual list, for
        example) renders as "no match found".
        """
        details = self._generate_mismatch_report_details(
            use_strict_labels=bool(self._mismatched_expected_values)
        )
        if details.is_empty():
            return message().error("no match found")
        return details

    def _generate_mismatch_report_details(self, use_strict_labels: bool) -> Message:
        if not self._missing_messages:
            return self._report_part(self._mismatch_messages)

        mismatches_label = "mismatches" if use_strict_labels else "possible mismatches"
        missing_label = "missing values" if use_strict_labels else "possible missing values"

        parts = [
            self._labelled_report_part(mismatches_label, self._mismatch_messages),
            self._labelled_report_part(missing_label, self._missing_messages),
        ]
        return Message.join("\n\n", (part for part in parts if not part.is_empty()))

    def _report_part(self, messages: list[ValuePathMessage]) -> Message:
        return Message.join(
            "\n",
            (
                msg.message if msg.path == self._top_level_actual_path else msg.full_message
                for msg in messages
            ),
        )

    def _labelled_report_part(self, label: str, messages: list[ValuePathMessage]) -> Message:
        if not messages:
            return Message()
        return message().matcher(label).delimiter(":\n").add(self._report_part(messages))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset_report_data(self) -> None:
        """Clear reported diagnostics so the session can be reused."""
        self._mismatch_messages.clear()
        self._match_messages.clear()
        self._mismatched_expected_values.clear()
        self._extra_mismatch_paths.clear()
        self._missing_messages.clear()


def match_session(
    config: ContainConfig | None = None,
    ledger: CheckLedger | None = None,
    registry: HandlerRegistry | None = None,
) -> MatchSession:
    """Create a fresh session for one top-level check."""
    return MatchSession(config=config, ledger=ledger, registry=registry)


def _extract_paths(messages: list[ValuePathMessage]) -> set[ValuePath]:
    return {msg.path for msg in messages}
