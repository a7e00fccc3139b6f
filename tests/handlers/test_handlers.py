"""Tests for the built-in contain handlers, exercised through the default registry."""

from __future__ import annotations

import re

import numpy as np

from contain_check import TableData, build_data_node, contain, match_session
from contain_check.handlers import (
    DataNodeListAndValueContainHandler,
    IterableAndSingleValueContainHandler,
    IterableAndTableContainHandler,
    MapContainHandler,
    NullContainHandler,
    NumpyArrayContainHandler,
    StringContainHandler,
)
from contain_check.handlers.sequence import is_plain_iterable
from contain_check.traceable import CheckLevel
from contain_check.tree.path import ValuePath

ROOT = ValuePath.root()


# ---------------------------------------------------------------------------
# NullContainHandler
# ---------------------------------------------------------------------------


class TestNullHandler:
    def test_handles_only_none(self) -> None:
        handler = NullContainHandler()
        assert handler.handle(None, 1)
        assert not handler.handle(0, 1)

    def test_contains_fails(self) -> None:
        session = match_session()
        assert not session.contains(ROOT, None, [1])
        assert [str(m) for m in session.mismatch_messages] == ["root: actual is null, expected to contain: [1]"]

    def test_not_contains_holds(self) -> None:
        session = match_session()
        assert session.not_contains(ROOT, None, 1)


# ---------------------------------------------------------------------------
# Sequence handlers
# ---------------------------------------------------------------------------


class TestIterableAndSingleValueHandler:
    def test_plain_iterables(self) -> None:
        assert is_plain_iterable([1])
        assert is_plain_iterable((1,))
        assert is_plain_iterable({1})
        assert not is_plain_iterable("abc")
        assert not is_plain_iterable(b"abc")
        assert not is_plain_iterable({"a": 1})
        assert not is_plain_iterable(build_data_node([1]))

    def test_generator_is_materialised(self) -> None:
        session = match_session()
        assert session.contains(ROOT, (x for x in range(3)), 2)
        assert session.converted_actual(ROOT) == [0, 1, 2]

    def test_list_of_records(self) -> None:
        session = match_session()
        actual = [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
        assert session.contains(ROOT, actual, {"name": "b"})
        assert session.ledger.level(ROOT.index(1).property("name")) == CheckLevel.PASSED

    def test_converted_actual_keeps_lists(self) -> None:
        actual = [1]
        assert IterableAndSingleValueContainHandler().converted_actual(actual, 1) is actual


class TestDataNodeListHandler:
    def test_handles_list_nodes_but_not_tables(self) -> None:
        handler = DataNodeListAndValueContainHandler()
        node = build_data_node([1])
        assert handler.handle(node, 1)
        assert not handler.handle(node, TableData(["a"]))
        assert not handler.handle(build_data_node({"a": 1}), 1)

    def test_contains_record(self) -> None:
        session = match_session()
        node = build_data_node([{"id": 1}, {"id": 2}])
        assert session.contains(node.path, node, {"id": 2})
        assert session.ledger.level(ROOT.index(1).property("id")) == CheckLevel.PASSED
        assert session.ledger.level(ROOT.index(0).property("id")) == CheckLevel.UNCHECKED

    def test_not_contains_fuzzy_passes_scalars(self) -> None:
        session = match_session()
        node = build_data_node([1, 3])
        assert session.not_contains(node.path, node, 2)
        assert session.ledger.paths_with_level(CheckLevel.FUZZY_PASSED) == {ROOT.index(0), ROOT.index(1)}


# ---------------------------------------------------------------------------
# IterableAndTableContainHandler
# ---------------------------------------------------------------------------


class TestTableHandler:
    def test_every_row_must_match(self) -> None:
        session = match_session()
        actual = [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}, {"id": 3, "name": "c"}]
        table = TableData(["id", "name"], [(3, "c"), (1, "a")])
        assert session.contains(ROOT, actual, table)
        assert session.ledger.level(ROOT.index(1).property("id")) == CheckLevel.UNCHECKED
        assert session.ledger.level(ROOT.index(2).property("name")) == CheckLevel.PASSED

    def test_unmatched_row_is_recorded(self) -> None:
        session = match_session()
        table = TableData(["id"], [(1,), (9,)])
        assert not session.contains(ROOT, [{"id": 1}], table)
        assert session.mismatched_expected_values == [{"id": 9}]
        assert [str(m) for m in session.mismatch_messages] == [
            "root[0].id: actual: 1 <int>, expected: 9 <int>"
        ]

    def test_table_against_data_node(self) -> None:
        session = match_session()
        node = build_data_node([{"id": 1, "name": "a"}])
        assert session.contains(ROOT, node, TableData(["name"], [("a",)]))

    def test_not_contains_reports_each_matching_row(self) -> None:
        session = match_session()
        actual = [{"id": 1}, {"id": 2}]
        assert not session.not_contains(ROOT, actual, TableData(["id"], [(2,), (5,)]))
        assert session.generate_match_paths() == {ROOT.index(1)}

    def test_converted_actual_materialises_tuples(self) -> None:
        assert IterableAndTableContainHandler().converted_actual(({"a": 1},), TableData(["a"])) == [{"a": 1}]


# ---------------------------------------------------------------------------
# MapContainHandler
# ---------------------------------------------------------------------------


class TestMapHandler:
    def test_handles_mapping_pairs(self) -> None:
        handler = MapContainHandler()
        assert handler.handle({"a": 1}, {"a": 1})
        assert handler.handle(build_data_node({"a": 1}), {"a": 1})
        assert not handler.handle({"a": 1}, 1)

    def test_partial_record(self) -> None:
        session = match_session()
        assert session.contains(ROOT, {"a": 1, "b": 2}, {"b": 2})
        assert session.ledger.level(ROOT.property("b")) == CheckLevel.PASSED
        assert session.ledger.level(ROOT.property("a")) == CheckLevel.UNCHECKED

    def test_missing_key(self) -> None:
        session = match_session()
        assert not session.contains(ROOT, {"a": 1}, {"z": 1})
        assert [str(m) for m in session.missing_messages] == ["root.z: 1"]

    def test_nested_contain_marker(self) -> None:
        session = match_session()
        actual = {"user": {"roles": ["admin", "dev"]}}
        assert session.contains(ROOT, actual, {"user": {"roles": contain("dev")}})
        assert session.ledger.level(ROOT.property("user").property("roles").index(1)) == CheckLevel.PASSED

    def test_not_contains_reports_equal_entries(self) -> None:
        session = match_session()
        assert not session.not_contains(ROOT, {"a": 1, "b": 2}, {"a": 1, "b": 3})
        assert str(session.generate_match_report()) == "root.a: equals 1"
        assert session.ledger.level(ROOT.property("a")) == CheckLevel.FAILED
        assert session.ledger.level(ROOT.property("b")) == CheckLevel.PASSED

    def test_keys_resolve_by_str_form(self) -> None:
        session = match_session()
        assert session.contains(ROOT, {"1": "a"}, {1: "a"})
        assert session.ledger.level(ROOT.property("1")) == CheckLevel.PASSED

    def test_data_node_map_keys_resolve_by_str_form(self) -> None:
        session = match_session()
        assert session.contains(ROOT, build_data_node({1: "a"}), {1: "a"})

    def test_not_contains_ignores_absent_keys(self) -> None:
        session = match_session()
        assert session.not_contains(ROOT, {"a": 1}, {"z": 1})

    def test_data_node_map(self) -> None:
        session = match_session()
        node = build_data_node({"a": {"b": 1}})
        assert session.contains(ROOT, node, {"a": {"b": 1}})
        assert session.ledger.level(ROOT.property("a").property("b")) == CheckLevel.PASSED


# ---------------------------------------------------------------------------
# StringContainHandler
# ---------------------------------------------------------------------------


class TestStringHandler:
    def test_substring(self) -> None:
        session = match_session()
        assert session.contains(ROOT, "hello world", "world")

    def test_pattern(self) -> None:
        session = match_session()
        assert session.contains(ROOT, "hello", re.compile(r"h.l"))

    def test_failure_message(self) -> None:
        session = match_session()
        assert not session.contains(ROOT, "hello", "xyz")
        assert str(session.generate_mismatch_report()) == "expected to contain 'xyz', actual: 'hello'"

    def test_not_contains(self) -> None:
        session = match_session()
        assert not session.not_contains(ROOT, "hello world", "world")
        assert session.not_contains(ROOT, "hello world", "xyz")

    def test_scalar_data_node(self) -> None:
        handler = StringContainHandler()
        node = build_data_node("hello")
        assert handler.handle(node, "ell")
        assert handler.converted_actual(node, "ell") == "hello"
        assert not handler.handle(build_data_node(5), "5")


# ---------------------------------------------------------------------------
# NumpyArrayContainHandler
# ---------------------------------------------------------------------------


class TestNumpyArrayHandler:
    def test_handles_arrays_with_at_least_one_axis(self) -> None:
        handler = NumpyArrayContainHandler()
        assert handler.handle(np.array([1]), 1)
        assert not handler.handle(np.array(1), 1)

    def test_one_dimensional(self) -> None:
        session = match_session()
        assert session.contains(ROOT, np.array([1, 2, 3]), 2)
        assert session.converted_actual(ROOT) == [1, 2, 3]
        assert session.ledger.level(ROOT.index(1)) == CheckLevel.PASSED

    def test_rows_of_two_dimensional_array(self) -> None:
        session = match_session()
        assert session.contains(ROOT, np.array([[1, 2], [3, 4]]), [3, 4])
        assert not session.contains(ROOT, np.array([[1, 2], [3, 4]]), [2, 3])

    def test_numpy_expected_values(self) -> None:
        session = match_session()
        assert session.contains(ROOT, np.array([[1, 2], [3, 4]]), np.array([1, 2]))
        assert session.contains(ROOT, np.array([1.5, 2.5]), np.float64(2.5))

    def test_not_contains(self) -> None:
        session = match_session()
        assert not session.not_contains(ROOT, np.array([1, 2, 2]), 2)
        assert session.generate_match_paths() == {ROOT.index(1), ROOT.index(2)}
