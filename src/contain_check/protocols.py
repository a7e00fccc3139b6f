"""ContainHandler Protocol for the contain-check extension point.

Defines the structural interface all contain handlers must satisfy.  Users
can plug in custom handlers without inheriting from any base class: any
class with conformant methods passes ``isinstance`` checks.
``BaseContainHandler`` is an optional convenience base supplying identity
adapters.

Example::

    from contain_check import register_handler
    from contain_check.messages import message

    class PositiveNumbersHandler:
        def handle(self, actual, expected):
            return isinstance(actual, int) and expected == "positive"

        def analyze_contain(self, session, path, actual, expected):
            if actual <= 0:
                session.report_mismatch(path, message().error("not positive"))

        def analyze_not_contain(self, session, path, actual, expected):
            if actual > 0:
                session.report_match(path, message().error("positive"))

    register_handler(PositiveNumbersHandler())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contain_check.session import MatchSession
    from contain_check.tree.path import ValuePath

__all__ = ["BaseContainHandler", "ContainHandler"]


@runtime_checkable
class ContainHandler(Protocol):
    """Structural protocol for contain handlers.

    Handlers are stateless and shared process-wide.  They must report
    outcomes exclusively through the session's reporting API and never
    raise for an ordinary mismatch.

    - ``handle`` is the shape predicate used for dispatch.
    - ``analyze_contain`` / ``analyze_not_contain`` run the check.
    - ``converted_actual`` / ``converted_expected`` are optional adapters
      applied before analysis; a handler without them sees the values
      unchanged.  Returning a new actual object makes the session cache it
      under the actual path.
    """

    def handle(self, actual: Any, expected: Any) -> bool: ...

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None: ...

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None: ...


class BaseContainHandler:
    """Convenience base: identity adapters and a readable repr."""

    def handle(self, actual: Any, expected: Any) -> bool:
        raise NotImplementedError

    def analyze_contain(self, session: MatchSession, path: ValuePath, actual: Any, expected: Any) -> None:
        raise NotImplementedError

    def analyze_not_contain(
        self, session: MatchSession, path: ValuePath, actual: Any, expected: Any
    ) -> None:
        raise NotImplementedError

    def converted_actual(self, actual: Any, expected: Any) -> Any:
        return actual

    def converted_expected(self, actual: Any, expected: Any) -> Any:
        return expected

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
