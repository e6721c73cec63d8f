"""Core table metadata types.

The SQL generators only depend on the ``TableMeta`` / ``ColumnMeta``
protocols, so any metadata source (schema file, live database catalog,
hand-built fixtures) can be plugged in as long as it exposes these
read-only attributes. ``TableDef`` and ``ColumnDef`` are the concrete
implementations produced by the bundled adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class ColumnMeta(Protocol):
    """Read-only view of a single column."""

    @property
    def name(self) -> str: ...

    @property
    def column_type(self) -> str: ...

    @property
    def is_primary_key(self) -> bool: ...

    @property
    def is_auto_increment(self) -> bool: ...


@runtime_checkable
class TableMeta(Protocol):
    """Read-only view of a table: its name and ordered columns."""

    @property
    def table_name(self) -> str: ...

    @property
    def columns(self) -> Sequence[ColumnMeta]: ...


@dataclass(frozen=True)
class ColumnDef:
    """Definition of a single column."""

    name: str
    column_type: str
    is_primary_key: bool = False
    is_auto_increment: bool = False


@dataclass(frozen=True)
class TableDef:
    """Definition of a table. Column order is significant."""

    table_name: str
    columns: Tuple[ColumnDef, ...] = field(default_factory=tuple)

    @classmethod
    def from_columns(cls, table_name: str, columns: Iterable[ColumnDef]) -> "TableDef":
        return cls(table_name=table_name, columns=tuple(columns))

    def column(self, name: str) -> Optional[ColumnDef]:
        """Return the column called ``name`` or None."""
        return next((c for c in self.columns if c.name == name), None)


__all__ = [
    "ColumnMeta",
    "TableMeta",
    "ColumnDef",
    "TableDef",
]
