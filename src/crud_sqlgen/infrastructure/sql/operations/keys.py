"""
Primary-key inspection helpers.

All helpers walk ``table.columns`` in order and never fail; a keyless table
simply yields 0 or an empty list.
"""

from typing import List

from ...schema.core import TableMeta
from ..errors import NoPrimaryKeyError


def primary_key_count(table: TableMeta) -> int:
    """Return the number of primary-key columns in ``table``."""
    return sum(1 for col in table.columns if col.is_primary_key)


def primary_key_names(table: TableMeta) -> List[str]:
    """Return primary-key column names in column order."""
    return [col.name for col in table.columns if col.is_primary_key]


def non_primary_key_names(table: TableMeta) -> List[str]:
    """Return non-primary-key column names in column order."""
    return [col.name for col in table.columns if not col.is_primary_key]


def require_primary_key(table: TableMeta) -> int:
    """
    Return the primary-key count, raising if the table has none.

    Raises:
        NoPrimaryKeyError: If ``table`` has no primary-key column
    """
    count = primary_key_count(table)
    if count == 0:
        raise NoPrimaryKeyError(table.table_name)
    return count
