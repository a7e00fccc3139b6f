"""Tests for HandlerRegistry dispatch order and registration."""

from __future__ import annotations

from typing import Any

import pytest

from contain_check import NoHandlerFoundError, TableData
from contain_check.handlers import (
    DataNodeListAndValueContainHandler,
    IterableAndSingleValueContainHandler,
    IterableAndTableContainHandler,
    MapContainHandler,
    NullContainHandler,
    NumpyArrayContainHandler,
    StringContainHandler,
)
from contain_check.messages import message
from contain_check.protocols import BaseContainHandler, ContainHandler
from contain_check.registry import HandlerRegistry, default_registry
from contain_check.session import MatchSession
from contain_check.tree.path import ValuePath


class CatchAllHandler(BaseContainHandler):
    def handle(self, actual: Any, expected: Any) -> bool:
        return True

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        session.report_mismatch(path, message().error("caught"))

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        return


class DuckHandler:
    """Satisfies ContainHandler structurally without inheriting from it."""

    def handle(self, actual: Any, expected: Any) -> bool:
        return isinstance(actual, int)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        if actual < expected:
            session.report_mismatch(path, message().error("too small"))

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        return

    def converted_actual(self, actual: Any, expected: Any) -> Any:
        return actual

    def converted_expected(self, actual: Any, expected: Any) -> Any:
        return expected


class MinimalHandler:
    """Only the three required methods; values reach it unadapted."""

    def __init__(self) -> None:
        self.seen: list[tuple[Any, Any]] = []

    def handle(self, actual: Any, expected: Any) -> bool:
        return isinstance(actual, frozenset)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        self.seen.append((actual, expected))
        if expected not in actual:
            session.report_mismatch(path, message().error("absent"))

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        if expected in actual:
            session.report_match(path, message().error("present"))


class TestDispatchOrder:
    def test_bare_registry_has_builtins_only(self) -> None:
        handlers = HandlerRegistry().handlers()
        assert [type(h) for h in handlers] == [
            NullContainHandler,
            IterableAndTableContainHandler,
            IterableAndSingleValueContainHandler,
        ]

    def test_default_registry_extension_order(self) -> None:
        handlers = default_registry.handlers()
        assert isinstance(handlers[0], NullContainHandler)
        assert [type(h) for h in handlers[1:5]] == [
            DataNodeListAndValueContainHandler,
            MapContainHandler,
            StringContainHandler,
            NumpyArrayContainHandler,
        ]
        assert isinstance(handlers[-2], IterableAndTableContainHandler)
        assert isinstance(handlers[-1], IterableAndSingleValueContainHandler)

    def test_null_wins_over_extensions(self) -> None:
        registry = HandlerRegistry([CatchAllHandler()])
        assert isinstance(registry.find(None, 1), NullContainHandler)

    def test_extensions_win_over_fallbacks(self) -> None:
        registry = HandlerRegistry([CatchAllHandler()])
        assert isinstance(registry.find([1], 1), CatchAllHandler)

    def test_table_fallback_precedes_single_value(self) -> None:
        registry = HandlerRegistry()
        assert isinstance(registry.find([{"a": 1}], TableData(["a"], [(1,)])), IterableAndTableContainHandler)
        assert isinstance(registry.find([1], 1), IterableAndSingleValueContainHandler)

    def test_registration_order_is_priority(self) -> None:
        first = CatchAllHandler()
        registry = HandlerRegistry([first, CatchAllHandler()])
        assert registry.find(1, 1) is first


class TestFind:
    def test_unsupported_pair_raises(self) -> None:
        with pytest.raises(NoHandlerFoundError) as exc_info:
            HandlerRegistry().find(42, 1)
        assert exc_info.value.expected == 1

    def test_error_message_names_types(self) -> None:
        with pytest.raises(NoHandlerFoundError, match=r"no contains handler found for") as exc_info:
            HandlerRegistry().find(42, None)
        assert "actual: 42 <builtins.int>" in str(exc_info.value)
        assert "expected: None <null>" in str(exc_info.value)


class TestRegister:
    def test_rejects_non_handlers(self) -> None:
        with pytest.raises(TypeError, match="ContainHandler"):
            HandlerRegistry().register(object())  # type: ignore[arg-type]

    def test_duplicate_instance_is_ignored(self) -> None:
        registry = HandlerRegistry()
        handler = CatchAllHandler()
        registry.register(handler)
        registry.register(handler)
        assert len(registry.handlers()) == 4

    def test_duck_typed_handler(self) -> None:
        handler = DuckHandler()
        assert isinstance(handler, ContainHandler)
        registry = HandlerRegistry([handler])
        session = MatchSession(registry=registry)
        assert session.contains(ValuePath.root(), 5, 3)
        assert not session.contains(ValuePath.root(), 1, 3)

    def test_base_handler_repr(self) -> None:
        assert repr(MapContainHandler()) == "MapContainHandler()"

    def test_handler_without_adapters(self) -> None:
        handler = MinimalHandler()
        assert isinstance(handler, ContainHandler)
        registry = HandlerRegistry()
        registry.register(handler)
        assert registry.find(frozenset({1}), 1) is handler

        session = MatchSession(registry=registry)
        actual = frozenset({1, 2})
        assert session.contains(ValuePath.root(), actual, 2)
        assert not session.contains(ValuePath.root(), actual, 3)
        assert session.not_contains(ValuePath.root(), actual, 3)
        assert handler.seen[0][0] is actual
        assert session.converted_actual(ValuePath.root()) is None
