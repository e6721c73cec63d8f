"""
INSERT statement generator.
"""

from ...schema.core import TableMeta
from ..core.identifier import quote_identifier
from ..core.parameters import named_param, positional_param
from .keys import require_primary_key


def generate_insert_sql(table: TableMeta, named_params: bool = False) -> str:
    """
    Build ``INSERT INTO "<table>" ( <cols>) values ( <params> )``.

    Auto-increment columns are left out of both lists. A primary-key column
    that is not auto-increment gets the literal ``default`` in either mode.
    Positional parameters use the column's index in the full column list
    (``$<i+1>``), so skipped columns leave gaps in the numbering.

    Example:
        >>> from crud_sqlgen.infrastructure.schema import ColumnDef, TableDef
        >>> users = TableDef.from_columns("users", [
        ...     ColumnDef("id", "int", is_primary_key=True, is_auto_increment=True),
        ...     ColumnDef("name", "text"),
        ... ])
        >>> generate_insert_sql(users)
        'INSERT INTO "users" ( name) values ( $2 )'

    Raises:
        NoPrimaryKeyError: If the table has no primary key
    """
    require_primary_key(table)

    names = []
    values = []
    for i, col in enumerate(table.columns):
        if col.is_auto_increment:
            continue
        names.append(col.name)
        if col.is_primary_key:
            values.append("default")
        elif named_params:
            values.append(named_param(col.name))
        else:
            values.append(positional_param(i + 1))

    return (
        f"INSERT INTO {quote_identifier(table.table_name)} ( "
        + ", ".join(names)
        + ") values ( "
        + ", ".join(values)
        + " )"
    )
