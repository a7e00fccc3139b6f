"""Structured diagnostic messages.

A ``Message`` is an immutable sequence of typed tokens (error text, matcher
labels, rendered values, delimiters).  The engine only builds message
structure; ``str(message)`` gives a plain-text rendering for reports and
assertion errors.  ``ValuePathMessage`` pairs a message with the
``ValuePath`` it describes and is the atomic unit of match, mismatch and
missing reporting.
"""

from __future__ import annotations

import pprint
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from contain_check.tree.nodes import DataNode
from contain_check.tree.path import ValuePath

__all__ = [
    "Message",
    "Token",
    "TokenType",
    "ValuePathMessage",
    "message",
    "render_value",
    "render_value_first_lines",
]


class TokenType(StrEnum):
    TEXT = auto()
    ERROR = auto()
    MATCHER = auto()
    VALUE = auto()
    DELIMITER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    value: str


def render_value(value: Any) -> str:
    """Plain-text rendering of an actual or expected value."""
    if isinstance(value, DataNode):
        value = value.to_python()
    return pprint.pformat(value, width=80, sort_dicts=False)


def render_value_first_lines(value: Any, max_lines: int) -> str:
    """Render ``value`` keeping only the first ``max_lines`` lines."""
    lines = render_value(value).splitlines()
    if len(lines) <= max_lines:
        return "\n".join(lines)
    return "\n".join([*lines[:max_lines], "..."])


@dataclass(frozen=True, slots=True)
class Message:
    """Immutable tokenized message.  Builder methods return new instances.

    Example::

        message().error("equals").value(42)
        # str(...) == "equals 42"
    """

    tokens: tuple[Token, ...] = ()

    def _add(self, token_type: TokenType, text: str) -> Message:
        return Message((*self.tokens, Token(token_type, text)))

    def text(self, text: str) -> Message:
        return self._add(TokenType.TEXT, text)

    def error(self, text: str) -> Message:
        return self._add(TokenType.ERROR, text)

    def matcher(self, text: str) -> Message:
        return self._add(TokenType.MATCHER, text)

    def delimiter(self, text: str) -> Message:
        return self._add(TokenType.DELIMITER, text)

    def value(self, value: Any) -> Message:
        return self._add(TokenType.VALUE, render_value(value))

    def value_first_lines(self, value: Any, max_lines: int = 5) -> Message:
        return self._add(TokenType.VALUE, render_value_first_lines(value, max_lines))

    def add(self, other: Message) -> Message:
        return Message((*self.tokens, *other.tokens))

    def is_empty(self) -> bool:
        return not self.tokens

    @classmethod
    def join(cls, separator: str, messages: Iterable[Message]) -> Message:
        tokens: list[Token] = []
        for idx, msg in enumerate(messages):
            if idx > 0:
                tokens.append(Token(TokenType.DELIMITER, separator))
            tokens.extend(msg.tokens)
        return cls(tuple(tokens))

    def __str__(self) -> str:
        out: list[str] = []
        for token in self.tokens:
            if token.type == TokenType.DELIMITER:
                out.append(token.value)
                continue
            if out and not out[-1][-1:].isspace() and out[-1]:
                out.append(" ")
            out.append(token.value)
        return "".join(out)


def message() -> Message:
    """Start an empty message."""
    return Message()


@dataclass(frozen=True, slots=True)
class ValuePathMessage:
    """A message attached to the location it describes."""

    path: ValuePath
    message: Message

    @property
    def full_message(self) -> Message:
        """Message prefixed with the rendered path."""
        return Message().text(str(self.path)).delimiter(":").add(self.message)

    def __str__(self) -> str:
        return str(self.full_message)
