"""
DELETE statement generators (hard delete) and the soft-delete UPDATE.
"""

from ...schema.core import TableMeta
from ..core.identifier import quote_identifier
from ..core.parameters import named_param, positional_param
from ..errors import NoDeletedAtColumnError
from .keys import require_primary_key

# Exact, case-sensitive names recognised as the soft-delete timestamp
SOFT_DELETE_COLUMNS = ("deleted_at", "DeletedAt")


def generate_hard_delete_sql(table: TableMeta, named_params: bool = False) -> str:
    """
    Build ``DELETE FROM "<table>" where <pk> = <param> AND ...``.

    Positional parameters are numbered 1..N in primary-key order; named
    parameters are ``@<column>_<n>``.

    Raises:
        NoPrimaryKeyError: If the table has no primary key
    """
    require_primary_key(table)

    conditions = []
    added_key = 1
    for col in table.columns:
        if col.is_primary_key:
            if named_params:
                param = named_param(col.name, added_key)
            else:
                param = positional_param(added_key)
            conditions.append(f"{col.name} = {param}")
            added_key += 1

    return f"DELETE FROM {quote_identifier(table.table_name)} where " + " AND ".join(conditions)


def generate_soft_delete_sql(table: TableMeta, named_params: bool = False) -> str:
    """
    Build ``UPDATE "<table>" set deleted_at = <param> WHERE <pk> = <param> ...``.

    Only columns named exactly ``deleted_at`` or ``DeletedAt`` are set. The
    positional counter is shared: WHERE numbering continues after the SET
    parameters. Named SET parameters are ``@upd_<column>_<n>``, named WHERE
    parameters are plain ``@<column>``.

    Raises:
        NoPrimaryKeyError: If the table has no primary key
        NoDeletedAtColumnError: If no soft-delete column exists
    """
    require_primary_key(table)

    assignments = []
    set_col = 1
    for col in table.columns:
        if col.name not in SOFT_DELETE_COLUMNS:
            continue
        if named_params:
            param = named_param("upd", col.name, set_col)
        else:
            param = positional_param(set_col)
        assignments.append(f" {col.name} = {param}")
        set_col += 1

    if set_col == 1:
        raise NoDeletedAtColumnError(table.table_name)

    conditions = []
    for col in table.columns:
        if col.is_primary_key:
            param = named_param(col.name) if named_params else positional_param(set_col)
            conditions.append(f"{col.name} = {param}")
            set_col += 1

    return (
        f"UPDATE {quote_identifier(table.table_name)} set"
        + ",".join(assignments)
        + " WHERE "
        + " AND ".join(conditions)
    )
