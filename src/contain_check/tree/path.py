"""ValuePath: immutable address of a location inside a structured actual value.

A path is a tuple of segments.  ``str`` segments are property names, ``int``
segments are list indexes.  Paths are hashable and compare structurally so
they can be used as dict keys (check ledger, converted-actual cache) and set
members (match / mismatch path sets).

Rendering follows the familiar dotted/bracket form::

    ValuePath.root().property("items").index(2).property("name")
    # root.items[2].name
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ValuePath"]


@dataclass(frozen=True, slots=True)
class ValuePath:
    """Immutable hierarchical path identifier.

    Attributes:
        segments: Ordered path segments.  The first segment is the root name.
    """

    segments: tuple[str | int, ...] = ("root",)

    @classmethod
    def root(cls, name: str = "root") -> ValuePath:
        """Return a single-segment root path."""
        return cls((name,))

    # Properties are declared before ``property()`` below shadows the builtin
    # inside the class namespace.
    @property
    def parent(self) -> ValuePath | None:
        """Parent path, or None for a root path."""
        if len(self.segments) <= 1:
            return None
        return ValuePath(self.segments[:-1])

    @property
    def name(self) -> str | int:
        """Last segment of the path."""
        return self.segments[-1]

    def index(self, idx: int) -> ValuePath:
        """Return the child path for list element ``idx``."""
        return ValuePath((*self.segments, idx))

    def property(self, name: str) -> ValuePath:
        """Return the child path for property ``name``."""
        return ValuePath((*self.segments, name))

    def is_child_of(self, other: ValuePath) -> bool:
        """True when ``other`` is a strict prefix of this path."""
        n = len(other.segments)
        return len(self.segments) > n and self.segments[:n] == other.segments

    def __str__(self) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif parts:
                parts.append(f".{segment}")
            else:
                parts.append(segment)
        return "".join(parts)
