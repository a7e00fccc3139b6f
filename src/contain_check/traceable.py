"""Check-level state for actual values and the scope that suppresses it.

Check state is kept in a ``CheckLedger`` side table keyed by ``ValuePath``
rather than on the tree nodes, so trees stay immutable and can be checked
repeatedly.  A path that was never written reads as ``UNCHECKED``.

``disabled_checks()`` suppresses every ledger write made underneath it.  The
flag lives in a ``ContextVar``: each thread (and each asyncio task) sees its
own value, and nested scopes restore the previous state through the reset
token, so leaving an inner scope never re-enables writes early.

Example::

    ledger = CheckLedger()
    with disabled_checks():
        ledger.update(path, CheckLevel.FAILED)   # ignored
    ledger.level(path)                            # CheckLevel.UNCHECKED
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from enum import StrEnum, auto

from contain_check.tree.path import ValuePath

__all__ = ["CheckLedger", "CheckLevel", "checks_enabled", "disabled_checks"]

_checks_enabled: ContextVar[bool] = ContextVar("contain_check_checks_enabled", default=True)


class CheckLevel(StrEnum):
    """How, if at all, a value was verified.

    - UNCHECKED    -> never compared
    - PASSED       -> explicitly confirmed
    - FAILED       -> explicitly disproven
    - FUZZY_PASSED -> not disproven, but not independently confirmed
    """

    UNCHECKED = auto()
    PASSED = auto()
    FAILED = auto()
    FUZZY_PASSED = auto()


def checks_enabled() -> bool:
    """True unless called underneath ``disabled_checks()``."""
    return _checks_enabled.get()


@contextmanager
def disabled_checks() -> Iterator[None]:
    """Suppress check-level writes for the duration of the block."""
    token = _checks_enabled.set(False)
    try:
        yield
    finally:
        _checks_enabled.reset(token)


class CheckLedger:
    """Mutable map of ``ValuePath`` -> ``CheckLevel``.

    Levels may be overwritten by later independent checks; the ledger keeps
    only the latest level per path.
    """

    def __init__(self) -> None:
        self._levels: dict[ValuePath, CheckLevel] = {}

    def update(self, path: ValuePath, level: CheckLevel) -> None:
        """Record ``level`` for ``path`` unless checks are disabled."""
        if not checks_enabled():
            return
        self._levels[path] = level

    def level(self, path: ValuePath) -> CheckLevel:
        return self._levels.get(path, CheckLevel.UNCHECKED)

    def paths_with_level(self, level: CheckLevel) -> set[ValuePath]:
        return {path for path, lvl in self._levels.items() if lvl == level}

    def snapshot(self) -> dict[ValuePath, CheckLevel]:
        """Point-in-time copy of every recorded level."""
        return dict(self._levels)

    def clear(self) -> None:
        self._levels.clear()

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, path: object) -> bool:
        return path in self._levels
