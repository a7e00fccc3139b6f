"""Handlers subpackage: built-in contain handlers.

- NullContainHandler: null actual (always first in dispatch order)
- IterableAndTableContainHandler / IterableAndSingleValueContainHandler:
  built-in fallbacks for plain iterables (always last)
- DataNodeListAndValueContainHandler, MapContainHandler,
  StringContainHandler, NumpyArrayContainHandler: extensions registered by
  the package on import, in that order (see ``default_extension_handlers``)
"""

from __future__ import annotations

from contain_check.handlers.arrays import NumpyArrayContainHandler
from contain_check.handlers.mapping import MapContainHandler
from contain_check.handlers.null import NullContainHandler
from contain_check.handlers.sequence import (
    DataNodeListAndValueContainHandler,
    IterableAndSingleValueContainHandler,
)
from contain_check.handlers.string import StringContainHandler
from contain_check.handlers.table import IterableAndTableContainHandler
from contain_check.protocols import ContainHandler

__all__ = [
    "DataNodeListAndValueContainHandler",
    "IterableAndSingleValueContainHandler",
    "IterableAndTableContainHandler",
    "MapContainHandler",
    "NullContainHandler",
    "NumpyArrayContainHandler",
    "StringContainHandler",
    "default_extension_handlers",
]


def default_extension_handlers() -> list[ContainHandler]:
    """Extension handlers the package registers on import, in priority order."""
    return [
        DataNodeListAndValueContainHandler(),
        MapContainHandler(),
        StringContainHandler(),
        NumpyArrayContainHandler(),
    ]
