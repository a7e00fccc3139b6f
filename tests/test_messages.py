"""Tests for Message, ValuePathMessage and value rendering."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from contain_check.messages import (
    Message,
    TokenType,
    ValuePathMessage,
    message,
    render_value,
    render_value_first_lines,
)
from contain_check.tree.builder import build_data_node
from contain_check.tree.path import ValuePath


class TestRenderValue:
    def test_string_is_quoted(self) -> None:
        assert render_value("a") == "'a'"

    def test_data_node_renders_as_plain_value(self) -> None:
        assert render_value(build_data_node({"a": [1]})) == "{'a': [1]}"

    def test_dict_keeps_insertion_order(self) -> None:
        assert render_value({"b": 1, "a": 2}) == "{'b': 1, 'a': 2}"

    def test_first_lines_short_value_unchanged(self) -> None:
        assert render_value_first_lines([1, 2], 5) == "[1, 2]"

    def test_first_lines_truncates_long_value(self) -> None:
        lines = render_value_first_lines(list(range(100)), 2).splitlines()
        assert lines == ["[0,", " 1,", "..."]


class TestMessage:
    def test_builder_returns_new_instances(self) -> None:
        base = message()
        extended = base.error("equals")
        assert base.is_empty()
        assert not extended.is_empty()

    def test_token_types(self) -> None:
        msg = message().text("a").error("b").matcher("c").delimiter(",").value(1)
        assert [token.type for token in msg.tokens] == [
            TokenType.TEXT,
            TokenType.ERROR,
            TokenType.MATCHER,
            TokenType.DELIMITER,
            TokenType.VALUE,
        ]

    def test_str_spaces_words_and_keeps_delimiters_tight(self) -> None:
        msg = message().text("actual:").value(1).delimiter(",").text("expected:").value(2)
        assert str(msg) == "actual: 1, expected: 2"

    def test_equals_preview(self) -> None:
        assert str(message().error("equals").value(42)) == "equals 42"

    def test_add_concatenates(self) -> None:
        assert str(message().error("a").add(message().error("b"))) == "a b"

    def test_join(self) -> None:
        joined = Message.join("\n", [message().text("a"), message().text("b")])
        assert str(joined) == "a\nb"

    def test_join_of_nothing_is_empty(self) -> None:
        assert Message.join("\n", []).is_empty()

    def test_frozen(self) -> None:
        msg = message()
        with pytest.raises(FrozenInstanceError):
            msg.tokens = ()  # type: ignore[misc]


class TestValuePathMessage:
    def test_full_message_prefixes_path(self) -> None:
        vpm = ValuePathMessage(ValuePath.root().index(0), message().error("equals").value(2))
        assert str(vpm.full_message) == "root[0]: equals 2"
        assert str(vpm) == "root[0]: equals 2"

    def test_message_without_path(self) -> None:
        vpm = ValuePathMessage(ValuePath.root(), message().error("equals").value(2))
        assert str(vpm.message) == "equals 2"
