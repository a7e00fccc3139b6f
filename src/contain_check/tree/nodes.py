"""DataNode dataclass and NodeType StrEnum for tree-shaped actual values.

Provides the structured representation the containment engine walks.  Nodes
are immutable: check state is tracked separately in a ``CheckLedger`` keyed by
``ValuePath`` so the same tree can be checked repeatedly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from contain_check.tree.path import ValuePath

__all__ = ["DataNode", "NodeType"]


class NodeType(StrEnum):
    """Enumeration of the three structural node types.

    - SCALAR -> "scalar" : A leaf value (string, number, bool, null)
    - LIST   -> "list"   : Ordered child nodes
    - MAP    -> "map"    : Named child nodes
    """

    SCALAR = auto()
    LIST = auto()
    MAP = auto()


@dataclass(frozen=True, slots=True)
class DataNode:
    """A node in the structured-value tree.

    Attributes:
        node_type:  Which kind of node this is (see NodeType).
        path:       Location of this node inside the tree it was built from.
        value:      Original Python value for SCALAR nodes; None for structural.
        children:   Ordered element nodes for LIST nodes.
        properties: Child nodes by name for MAP nodes.  Insertion order is kept.
    """

    node_type: NodeType
    path: ValuePath = field(default_factory=ValuePath.root)
    value: Any = None
    children: tuple[DataNode, ...] = ()
    properties: Mapping[str, DataNode] = field(default_factory=dict)

    def is_list(self) -> bool:
        return self.node_type == NodeType.LIST

    def is_map(self) -> bool:
        return self.node_type == NodeType.MAP

    def is_scalar(self) -> bool:
        return self.node_type == NodeType.SCALAR

    def elements(self) -> list[DataNode]:
        """Ordered element nodes; empty for non-list nodes."""
        return list(self.children)

    def get(self, name: str) -> DataNode | None:
        return self.properties.get(name)

    def has(self, name: str) -> bool:
        return name in self.properties

    def has_traceable_value(self) -> bool:
        """Only leaf values carry check state."""
        return self.node_type == NodeType.SCALAR

    def to_python(self) -> Any:
        """Convert the subtree back into plain Python values."""
        if self.node_type == NodeType.LIST:
            return [child.to_python() for child in self.children]
        if self.node_type == NodeType.MAP:
            return {name: child.to_python() for name, child in self.properties.items()}
        return self.value
