"""
SQL module for CRUD statement generation.

Turns table metadata (any object satisfying ``TableMeta``) into literal SQL
for insert, update, hard/soft delete and select statements, with either
positional (``$1``) or named (``@name``) placeholders.
"""

from .core.identifier import quote_identifier
from .core.parameters import named_param, positional_param
from .errors import NoDeletedAtColumnError, NoPrimaryKeyError, SqlGenerationError
from .operations import (
    STATEMENT_KINDS,
    CrudStatementBuilder,
    generate_hard_delete_sql,
    generate_insert_sql,
    generate_select_all_sql,
    generate_select_multi_sql,
    generate_select_one_sql,
    generate_soft_delete_sql,
    generate_update_sql,
    non_primary_key_names,
    primary_key_count,
    primary_key_names,
)

__all__ = [
    "quote_identifier",
    "named_param",
    "positional_param",
    "SqlGenerationError",
    "NoPrimaryKeyError",
    "NoDeletedAtColumnError",
    "STATEMENT_KINDS",
    "CrudStatementBuilder",
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
