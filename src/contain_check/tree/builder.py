"""DataNodeBuilder: converts plain Python values into a DataNode tree.

Uses recursive dispatch to convert dicts, lists/tuples, and scalar values
into DataNode objects.  Each node records its ``ValuePath`` so diagnostics and
check state can be addressed structurally:

- Root path is ``ValuePath.root(root_name)``
- Mapping entries append ``.property(key)``
- Sequence elements append ``.index(i)``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from contain_check.tree.nodes import DataNode, NodeType
from contain_check.tree.path import ValuePath

__all__ = ["DataNodeBuilder", "build_data_node"]


@dataclass
class DataNodeBuilder:
    """Converts a Python value into an immutable DataNode tree.

    Mappings become MAP nodes (keys are stringified), lists and tuples become
    LIST nodes, everything else becomes a SCALAR node holding the original
    value.  Strings and bytes are scalars even though they are iterable.

    Example::
        builder = DataNodeBuilder()
        tree = builder.build({"items": [1, 2]})
        # tree: MAP -> items: LIST -> [SCALAR(1), SCALAR(2)]
        tree.get("items").elements()[1].path   # root.items[1]
    """

    root_name: str = "root"

    def build(self, value: Any, path: ValuePath | None = None) -> DataNode:
        """Convert a value to a DataNode tree.

        Args:
            value: Any Python value.  Existing DataNode instances are returned
                unchanged.
            path:  Path of the node being built.  Defaults to the root path.

        Returns:
            The root DataNode of the converted tree.
        """
        if isinstance(value, DataNode):
            return value

        node_path = path if path is not None else ValuePath.root(self.root_name)

        if isinstance(value, Mapping):
            return self._build_map(value, node_path)

        if isinstance(value, (list, tuple)):
            return self._build_list(value, node_path)

        return DataNode(node_type=NodeType.SCALAR, path=node_path, value=value)

    def _build_map(self, obj: Mapping[Any, Any], path: ValuePath) -> DataNode:
        properties = {
            str(key): self.build(val, path.property(str(key))) for key, val in obj.items()
        }
        return DataNode(node_type=NodeType.MAP, path=path, properties=properties)

    def _build_list(self, arr: list[Any] | tuple[Any, ...], path: ValuePath) -> DataNode:
        children = tuple(self.build(item, path.index(idx)) for idx, item in enumerate(arr))
        return DataNode(node_type=NodeType.LIST, path=path, children=children)


def build_data_node(value: Any, root_name: str = "root") -> DataNode:
    """Shortcut for ``DataNodeBuilder(root_name).build(value)``."""
    return DataNodeBuilder(root_name=root_name).build(value)
