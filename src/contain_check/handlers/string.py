"""StringContainHandler: substring and pattern containment for text actuals."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from contain_check.messages import message
from contain_check.protocols import BaseContainHandler
from contain_check.tree.nodes import DataNode

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["StringContainHandler"]


class StringContainHandler(BaseContainHandler):
    """``str`` (or scalar DataNode holding a ``str``) vs ``str`` / ``re.Pattern``."""

    def handle(self, actual: Any, expected: Any) -> bool:
        return _text(actual) is not None and isinstance(expected, (str, re.Pattern))

    def converted_actual(self, actual: Any, expected: Any) -> Any:
        return _text(actual)

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        if not _found(actual, expected):
            session.report_mismatch(
                path,
                message().error("expected to contain").value(_render(expected)).delimiter(",")
                .text("actual:").value(actual),
            )

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        if _found(actual, expected):
            session.report_match(path, message().error("contains").value(_render(expected)))


def _text(value: Any) -> str | None:
    if isinstance(value, DataNode) and value.is_scalar():
        value = value.value
    return value if isinstance(value, str) else None


def _found(actual: str, expected: str | re.Pattern[str]) -> bool:
    if isinstance(expected, re.Pattern):
        return expected.search(actual) is not None
    return expected in actual


def _render(expected: str | re.Pattern[str]) -> str:
    if isinstance(expected, re.Pattern):
        return expected.pattern
    return expected
