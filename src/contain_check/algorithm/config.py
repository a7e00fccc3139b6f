"""ContainConfig: immutable knobs for containment checks.

ContainConfig is a frozen (immutable) dataclass passed explicitly to the
public API, the session and the comparator.  It governs comparison and
report rendering only; there is no global configuration state.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ContainConfig"]


@dataclass(frozen=True, slots=True)
class ContainConfig:
    """Immutable configuration for containment checks.

    Attributes:
        preview_max_lines: How many rendered lines of an offending value are
            kept in "equals" previews reported by negative checks (>= 1).
        type_coercion: When True, numeric strings are coerced to numbers before
            scalar comparison (e.g. "123" == 123).  Default False.
    """

    preview_max_lines: int = 5
    type_coercion: bool = False

    def __post_init__(self) -> None:
        if self.preview_max_lines < 1:
            msg = f"preview_max_lines must be >= 1, got {self.preview_max_lines}"
            raise ValueError(msg)
