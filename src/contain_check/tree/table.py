"""TableData: expected-side table of partial records.

A table is a header plus rows.  Each row is treated as an independent partial
record: a list actual contains the table when every row is contained by at
least one element.

Example::

    table = TableData(["id", "name"], [(1, "a"), (2, "b")])
    table.rows   # [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = ["TableData"]


@dataclass(frozen=True, slots=True)
class TableData:
    """Immutable header + rows table.

    Attributes:
        header: Column names, in display order.
        values: Row values, one tuple per row, aligned with ``header``.
    """

    header: Sequence[str]
    values: Iterable[Sequence[Any]] = ()

    def __post_init__(self) -> None:
        header_t = tuple(self.header)
        rows_t = tuple(tuple(row) for row in self.values)
        for idx, row in enumerate(rows_t):
            if len(row) != len(header_t):
                msg = f"row {idx} has {len(row)} values, header has {len(header_t)} columns"
                raise ValueError(msg)
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "header", header_t)
        object.__setattr__(self, "values", rows_t)

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> TableData:
        """Build a table from mappings; the header is the union of keys in first-seen order."""
        materialized = [dict(row) for row in rows]
        header: list[str] = []
        for row in materialized:
            for key in row:
                if key not in header:
                    header.append(key)
        missing = [key for row in materialized for key in header if key not in row]
        if missing:
            msg = f"all rows must define the same columns, missing: {sorted(set(missing))}"
            raise ValueError(msg)
        return cls(header, [[row[key] for key in header] for row in materialized])

    @property
    def rows(self) -> list[dict[str, Any]]:
        return [dict(zip(self.header, row, strict=True)) for row in self.values]

    def __len__(self) -> int:
        return len(self.values)
