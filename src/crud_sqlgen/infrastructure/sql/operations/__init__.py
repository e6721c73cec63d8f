"""CRUD statement generators."""

from .builder import STATEMENT_KINDS, CrudStatementBuilder
from .delete import SOFT_DELETE_COLUMNS, generate_hard_delete_sql, generate_soft_delete_sql
from .insert import generate_insert_sql
from .keys import non_primary_key_names, primary_key_count, primary_key_names
from .select import generate_select_all_sql, generate_select_multi_sql, generate_select_one_sql
from .update import generate_update_sql

__all__ = [
    "STATEMENT_KINDS",
    "CrudStatementBuilder",
    "SOFT_DELETE_COLUMNS",
    "primary_key_count",
    "primary_key_names",
    "non_primary_key_names",
    "generate_hard_delete_sql",
    "generate_soft_delete_sql",
    "generate_update_sql",
    "generate_insert_sql",
    "generate_select_one_sql",
    "generate_select_multi_sql",
    "generate_select_all_sql",
]
