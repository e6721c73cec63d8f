"""
UPDATE statement generator.
"""

from ...schema.core import TableMeta
from ..core.identifier import quote_identifier
from ..core.parameters import named_param, positional_param
from .keys import require_primary_key


def generate_update_sql(table: TableMeta, named_params: bool = False) -> str:
    """
    Build ``UPDATE "<table>" SET <col> = <param>, ... WHERE <pk> = <param> AND ...``.

    SET covers every non-primary-key column (positional ``$1..$m`` or named
    ``@<column>``). WHERE covers every primary key with named parameters
    ``@where_<column>``.

    Positional WHERE numbering is ``added_key + set_col`` where ``set_col``
    starts at m + 1 and both counters advance per key, so the k-th key gets
    ``$<m + 2k>``. Existing callers bind against these numbers; keep them.

    Raises:
        NoPrimaryKeyError: If the table has no primary key
    """
    require_primary_key(table)

    assignments = []
    set_col = 1
    for col in table.columns:
        if not col.is_primary_key:
            param = named_param(col.name) if named_params else positional_param(set_col)
            assignments.append(f" {col.name} = {param}")
            set_col += 1

    conditions = []
    added_key = 1
    for col in table.columns:
        if col.is_primary_key:
            if named_params:
                param = named_param("where", col.name)
            else:
                param = positional_param(added_key + set_col)
            conditions.append(f"{col.name} = {param}")
            set_col += 1
            added_key += 1

    return (
        f"UPDATE {quote_identifier(table.table_name)} SET"
        + ",".join(assignments)
        + " WHERE "
        + " AND ".join(conditions)
    )
