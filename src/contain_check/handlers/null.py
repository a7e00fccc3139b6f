"""NullContainHandler: containment checks against a null actual value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contain_check.messages import message
from contain_check.protocols import BaseContainHandler

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["NullContainHandler"]


class NullContainHandler(BaseContainHandler):
    """Always first in dispatch order so extensions never see a null actual.

    A null actual contains nothing: contains fails with a single mismatch,
    not-contains holds.
    """

    def handle(self, actual: Any, expected: Any) -> bool:
        return actual is None

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        session.report_mismatch(
            path, message().error("actual is null").delimiter(",").text("expected to contain:").value(expected)
        )

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        return
