"""Comparator: terminal equality step of the containment engine.

Evaluates a single actual value (plain Python or ``DataNode``) against an
expected value at a given path, writes the outcome of every compared leaf to
the ``CheckLedger`` and collects mismatch / missing diagnostics.

Equality rules:
- Expected mappings are partial records: every expected key must be present
  in the actual mapping, extra actual keys are ignored.
- Expected lists / tuples require an actual sequence of the same length and
  compare element-wise.
- Expected ``re.Pattern`` values match string actuals via ``search``.
- Expected ``Contains`` markers delegate to a nested containment check.
- ``bool`` never equals a non-bool; other numbers compare numerically;
  numpy scalars are unwrapped first.

A comparator constructed with a ``session`` is a *recording* comparator:
``compare_using_equal_only`` forwards its diagnostics to that session.  A
comparator without a session only collects diagnostics on itself and is used
for speculative probing.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from numbers import Number
from typing import TYPE_CHECKING, Any

import numpy as np

from contain_check.algorithm.config import ContainConfig
from contain_check.messages import Message, ValuePathMessage, message
from contain_check.traceable import CheckLedger, CheckLevel
from contain_check.tree.nodes import DataNode

if TYPE_CHECKING:
    from contain_check.registry import HandlerRegistry
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["AssertionMode", "Comparator", "Contains", "contain"]


class AssertionMode(StrEnum):
    """Which outcome of a comparison counts as success.

    - EQUAL     -> "equal"     : values are expected to be equal
    - NOT_EQUAL -> "not_equal" : values are expected to differ
    """

    EQUAL = auto()
    NOT_EQUAL = auto()


@dataclass(frozen=True, slots=True)
class Contains:
    """Expected-side marker: the actual value at this position must contain ``expected``."""

    expected: Any


def contain(expected: Any) -> Contains:
    """Build a nested containment marker for use inside expected patterns.

    Example::

        contains(users, {"name": "a", "roles": contain("admin")})
    """
    return Contains(expected)


MISSING = object()


class Comparator:
    """Equality / inequality evaluation for one actual-expected pair at a time.

    Example::

        ledger = CheckLedger()
        cmp = Comparator(AssertionMode.EQUAL, ledger)
        cmp.compare_is_equal(ValuePath.root(), {"a": 1, "b": 2}, {"a": 1})   # True
        ledger.level(ValuePath.root().property("a"))                          # PASSED
    """

    def __init__(
        self,
        mode: AssertionMode,
        ledger: CheckLedger,
        config: ContainConfig | None = None,
        session: MatchSession | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            mode:     Outcome treated as success by ``compare_using_equal_only``.
            ledger:   Side table receiving leaf check levels.
            config:   Comparison knobs.  Defaults to ``ContainConfig()``.
            session:  Active session to report into.  None for probing.
            registry: Handler registry used by nested ``Contains`` markers when
                no session is given.  Defaults to the process-wide registry.
        """
        self._mode = mode
        self._ledger = ledger
        self._config = config if config is not None else ContainConfig()
        self._session = session
        self._registry = registry if registry is not None else (
            session.registry if session is not None else None
        )
        self._mismatch_messages: list[ValuePathMessage] = []
        self._missing_messages: list[ValuePathMessage] = []

    @property
    def mode(self) -> AssertionMode:
        return self._mode

    @property
    def mismatch_messages(self) -> list[ValuePathMessage]:
        return list(self._mismatch_messages)

    @property
    def missing_messages(self) -> list[ValuePathMessage]:
        return list(self._missing_messages)

    def clear_messages(self) -> None:
        self._mismatch_messages.clear()
        self._missing_messages.clear()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare_is_equal(self, path: ValuePath, actual: Any, expected: Any) -> bool:
        """General predicate: True when ``actual`` equals ``expected``."""
        return self._compare(path, actual, expected, AssertionMode.EQUAL)

    def compare_is_not_equal(self, path: ValuePath, actual: Any, expected: Any) -> bool:
        """General predicate: True when ``actual`` differs from ``expected``."""
        return not self._compare(path, actual, expected, AssertionMode.NOT_EQUAL)

    def compare_using_equal_only(self, path: ValuePath, actual: Any, expected: Any) -> bool:
        """Compare in this comparator's mode and report through the session.

        Returns True when the comparison succeeds for the mode (equal for
        EQUAL, different for NOT_EQUAL).  In EQUAL mode, mismatch and missing
        diagnostics produced by this call are forwarded to the session.
        """
        mismatches_before = len(self._mismatch_messages)
        missing_before = len(self._missing_messages)

        is_equal = self._compare(path, actual, expected, self._mode)

        if self._session is not None and self._mode == AssertionMode.EQUAL:
            self._session.report_mismatches(self._mismatch_messages[mismatches_before:])
            self._session.report_missing_messages(self._missing_messages[missing_before:])

        return is_equal if self._mode == AssertionMode.EQUAL else not is_equal

    # ------------------------------------------------------------------
    # Recursive comparison
    # ------------------------------------------------------------------

    def _compare(self, path: ValuePath, actual: Any, expected: Any, mode: AssertionMode) -> bool:
        if isinstance(expected, DataNode):
            expected = expected.to_python()
        if isinstance(expected, np.ndarray):
            expected = expected.tolist()

        if isinstance(expected, Contains):
            return self._compare_contains(path, actual, expected, mode)
        if isinstance(expected, Mapping):
            return self._compare_mapping(path, actual, expected, mode)
        if isinstance(expected, (list, tuple)):
            return self._compare_sequence(path, actual, expected, mode)
        return self._compare_leaf(path, actual, expected, mode)

    def _compare_mapping(
        self, path: ValuePath, actual: Any, expected: Mapping[Any, Any], mode: AssertionMode
    ) -> bool:
        if isinstance(actual, DataNode) and actual.is_map():
            actual_map: Mapping[Any, Any] = actual.properties
        elif isinstance(actual, Mapping):
            actual_map = actual
        else:
            return self._shape_mismatch(path, actual, expected, "mapping", mode)

        all_equal = True
        for key, expected_value in expected.items():
            child_path = path.property(str(key))
            actual_value = lookup_entry(actual_map, key)
            if actual_value is MISSING:
                self._missing_messages.append(
                    ValuePathMessage(child_path, message().value(expected_value))
                )
                all_equal = False
                continue
            if not self._compare(child_path, actual_value, expected_value, mode):
                all_equal = False
        return all_equal

    def _compare_sequence(
        self, path: ValuePath, actual: Any, expected: list[Any] | tuple[Any, ...], mode: AssertionMode
    ) -> bool:
        if isinstance(actual, DataNode) and actual.is_list():
            actual_items: list[Any] = actual.elements()
        elif isinstance(actual, np.ndarray) and actual.ndim >= 1:
            actual_items = actual.tolist()
        elif isinstance(actual, (list, tuple)):
            actual_items = list(actual)
        else:
            return self._shape_mismatch(path, actual, expected, "list", mode)

        if len(actual_items) != len(expected):
            self._mismatch_messages.append(
                ValuePathMessage(
                    path,
                    message()
                    .error("expected list size")
                    .value(len(expected))
                    .delimiter(",")
                    .error("actual list size")
                    .value(len(actual_items)),
                )
            )
            self._mark(path, is_equal=False, mode=mode)
            return False

        all_equal = True
        for idx, (actual_value, expected_value) in enumerate(zip(actual_items, expected, strict=True)):
            if not self._compare(path.index(idx), actual_value, expected_value, mode):
                all_equal = False
        return all_equal

    def _compare_leaf(self, path: ValuePath, actual: Any, expected: Any, mode: AssertionMode) -> bool:
        if isinstance(actual, DataNode):
            if not actual.is_scalar():
                return self._shape_mismatch(path, actual, expected, "value", mode)
            actual = actual.value

        is_equal = _values_equal(actual, expected, self._config.type_coercion)
        self._mark(path, is_equal=is_equal, mode=mode)
        if not is_equal:
            self._mismatch_messages.append(ValuePathMessage(path, _mismatch_message(actual, expected)))
        return is_equal

    def _compare_contains(self, path: ValuePath, actual: Any, marker: Contains, mode: AssertionMode) -> bool:
        # Recording EQUAL comparisons report straight into the active session.
        if self._session is not None and mode == AssertionMode.EQUAL:
            return self._session.contains(path, actual, marker.expected)

        # Deferred import: session -> registry -> handlers -> search -> comparator
        from contain_check.session import MatchSession

        nested = MatchSession(config=self._config, ledger=self._ledger, registry=self._registry)
        is_contained = nested.contains(path, actual, marker.expected)
        self._mismatch_messages.extend(nested.mismatch_messages)
        self._missing_messages.extend(nested.missing_messages)
        return is_contained

    def _shape_mismatch(
        self, path: ValuePath, actual: Any, expected: Any, expected_shape: str, mode: AssertionMode
    ) -> bool:
        self._mark(path, is_equal=False, mode=mode)
        self._mismatch_messages.append(
            ValuePathMessage(
                path,
                message().error(f"expected a {expected_shape}").delimiter(",").text("actual:").value(actual),
            )
        )
        return False

    def _mark(self, path: ValuePath, is_equal: bool, mode: AssertionMode) -> None:
        succeeded = is_equal if mode == AssertionMode.EQUAL else not is_equal
        self._ledger.update(path, CheckLevel.PASSED if succeeded else CheckLevel.FAILED)


# ----------------------------------------------------------------------
# Leaf helpers
# ----------------------------------------------------------------------


def lookup_entry(actual_map: Mapping[Any, Any], key: Any) -> Any:
    """Value stored under ``key`` or its ``str`` form, else ``MISSING``."""
    if key in actual_map:
        return actual_map[key]
    # DataNode maps key their properties by str
    str_key = str(key)
    if str_key in actual_map:
        return actual_map[str_key]
    return MISSING


def _unwrap(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def _coerce_numeric(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return float(value) if any(c in value for c in ".eE") else int(value)
        except ValueError:
            return value
    return value


def _values_equal(actual: Any, expected: Any, type_coercion: bool) -> bool:
    actual = _unwrap(actual)
    expected = _unwrap(expected)

    if isinstance(expected, re.Pattern):
        return isinstance(actual, str) and expected.search(actual) is not None

    # bool subclasses int: True must not equal 1
    if isinstance(actual, bool) or isinstance(expected, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual == expected

    if type_coercion:
        actual = _coerce_numeric(actual)
        expected = _coerce_numeric(expected)

    if isinstance(actual, Number) and isinstance(expected, Number):
        return bool(actual == expected)

    if isinstance(actual, np.ndarray) or isinstance(expected, np.ndarray):
        return bool(np.array_equal(actual, expected))

    return bool(actual == expected)


def _mismatch_message(actual: Any, expected: Any) -> Message:
    return (
        message()
        .text("actual:")
        .value(actual)
        .text(_type_name(actual))
        .delimiter(",")
        .text("expected:")
        .value(expected)
        .text(_type_name(expected))
    )


def _type_name(value: Any) -> str:
    return f"<{type(value).__name__}>"
