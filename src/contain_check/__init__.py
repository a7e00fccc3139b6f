"""contain-check - partial containment assertions for structured values."""

from __future__ import annotations

from contain_check.algorithm.comparator import contain
from contain_check.algorithm.config import ContainConfig
from contain_check.api import (
    check_contains,
    check_not_contains,
    contains,
    not_contains,
)
from contain_check.errors import NoHandlerFoundError
from contain_check.handlers import default_extension_handlers
from contain_check.registry import register_handler
from contain_check.result import ContainResult
from contain_check.session import MatchSession, match_session
from contain_check.traceable import CheckLedger, CheckLevel
from contain_check.tree import DataNode, TableData, ValuePath, build_data_node

for _handler in default_extension_handlers():
    register_handler(_handler)
del _handler

__version__: str = "0.1.0"
__all__: list[str] = [
    "CheckLedger",
    "CheckLevel",
    "ContainConfig",
    "ContainResult",
    "DataNode",
    "MatchSession",
    "NoHandlerFoundError",
    "TableData",
    "ValuePath",
    "build_data_node",
    "check_contains",
    "check_not_contains",
    "contain",
    "contains",
    "match_session",
    "not_contains",
    "register_handler",
]
