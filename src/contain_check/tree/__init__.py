"""Tree subpackage for structured actual values.

Re-exports the public API for the tree module:
- ValuePath: immutable hierarchical location inside a value
- DataNode: immutable node of a structured value (scalar, list, map)
- NodeType: StrEnum of the three node kinds
- DataNodeBuilder: converts plain Python values into DataNode trees
- TableData: expected-side table of partial records
"""

from contain_check.tree.builder import DataNodeBuilder, build_data_node
from contain_check.tree.nodes import DataNode, NodeType
from contain_check.tree.path import ValuePath
from contain_check.tree.table import TableData

__all__ = [
    "DataNode",
    "DataNodeBuilder",
    "NodeType",
    "TableData",
    "ValuePath",
    "build_data_node",
]
