"""
SELECT statement generators.
"""

from ...schema.core import TableMeta
from ..core.identifier import quote_identifier
from ..core.parameters import named_param, positional_param
from .keys import require_primary_key


def _key_param(name: str, index: int, named_params: bool) -> str:
    # index is the column's position in the full column list
    if named_params:
        return named_param("where", name, index + 1)
    return positional_param(index + 1)


def generate_select_one_sql(table: TableMeta, named_params: bool = False) -> str:
    """
    Build ``SELECT * FROM "<table>" WHERE <pk> = <param> AND ...``.

    Raises:
        NoPrimaryKeyError: If the table has no primary key
    """
    require_primary_key(table)

    conditions = []
    for i, col in enumerate(table.columns):
        if col.is_primary_key:
            conditions.append(f"{col.name} = {_key_param(col.name, i, named_params)}")

    return f"SELECT * FROM {quote_identifier(table.table_name)} WHERE " + " AND ".join(conditions)


def generate_select_multi_sql(table: TableMeta, named_params: bool = False) -> str:
    """
    Build ``SELECT * FROM "<table>" WHERE <pk> = ANY(<param>::<type>[]) AND ...``.

    Each key is matched against an array parameter cast to the column's
    declared type.

    Raises:
        NoPrimaryKeyError: If the table has no primary key
    """
    require_primary_key(table)

    conditions = []
    for i, col in enumerate(table.columns):
        if col.is_primary_key:
            param = _key_param(col.name, i, named_params)
            conditions.append(f"{col.name} = ANY({param}::{col.column_type}[])")

    return f"SELECT * FROM {quote_identifier(table.table_name)} WHERE " + " AND ".join(conditions)


def generate_select_all_sql(table: TableMeta) -> str:
    """
    Build ``SELECT * FROM "<table>"``.

    Raises:
        NoPrimaryKeyError: If the table has no primary key, even though the
            statement does not reference it
    """
    require_primary_key(table)
    return f"SELECT * FROM {quote_identifier(table.table_name)}"
