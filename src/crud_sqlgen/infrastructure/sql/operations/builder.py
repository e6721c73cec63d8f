"""
High-level builder over the CRUD statement generators.
"""

from typing import Callable, Dict, Optional

import structlog

from ...schema.core import TableMeta
from ..errors import SqlGenerationError
from .delete import generate_hard_delete_sql, generate_soft_delete_sql
from .insert import generate_insert_sql
from .select import generate_select_all_sql, generate_select_multi_sql, generate_select_one_sql
from .update import generate_update_sql

logger = structlog.get_logger(__name__)

STATEMENT_KINDS = (
    "insert",
    "update",
    "hard_delete",
    "soft_delete",
    "select_one",
    "select_multi",
    "select_all",
)


class CrudStatementBuilder:
    """
    Generate CRUD statements for tables with a fixed placeholder style.

    Example:
        >>> from crud_sqlgen.infrastructure.schema import ColumnDef, TableDef
        >>> users = TableDef.from_columns("users", [ColumnDef("id", "int", is_primary_key=True)])
        >>> CrudStatementBuilder(named_params=True).select_one(users)
        'SELECT * FROM "users" WHERE id = @where_id_1'
    """

    def __init__(self, named_params: Optional[bool] = None):
        """
        Initialize the builder.

        Args:
            named_params: Use ``@name`` placeholders instead of ``$n``.
                Defaults to the ``named_params`` setting.
        """
        if named_params is None:
            from crud_sqlgen.config import get_settings

            named_params = get_settings().named_params
        self.named_params = named_params

    def insert(self, table: TableMeta) -> str:
        return generate_insert_sql(table, self.named_params)

    def update(self, table: TableMeta) -> str:
        return generate_update_sql(table, self.named_params)

    def hard_delete(self, table: TableMeta) -> str:
        return generate_hard_delete_sql(table, self.named_params)

    def soft_delete(self, table: TableMeta) -> str:
        return generate_soft_delete_sql(table, self.named_params)

    def select_one(self, table: TableMeta) -> str:
        return generate_select_one_sql(table, self.named_params)

    def select_multi(self, table: TableMeta) -> str:
        return generate_select_multi_sql(table, self.named_params)

    def select_all(self, table: TableMeta) -> str:
        return generate_select_all_sql(table)

    def generate(self, kind: str, table: TableMeta) -> str:
        """
        Generate one statement by kind name.

        Args:
            kind: One of STATEMENT_KINDS
            table: Table metadata

        Raises:
            ValueError: If ``kind`` is unknown
            SqlGenerationError: If the metadata does not support the statement
        """
        if kind not in STATEMENT_KINDS:
            raise ValueError(
                f"Unknown statement kind: {kind}. Expected one of: {', '.join(STATEMENT_KINDS)}"
            )
        method: Callable[[TableMeta], str] = getattr(self, kind)
        return method(table)

    def generate_all(self, table: TableMeta) -> Dict[str, str]:
        """
        Generate every statement the table supports.

        Statements that cannot be generated are logged and left out, so a
        table without a primary key yields an empty dict.
        """
        statements: Dict[str, str] = {}
        for kind in STATEMENT_KINDS:
            try:
                statements[kind] = self.generate(kind, table)
            except SqlGenerationError as e:
                logger.warning("statement_skipped", statement=kind, **e.to_dict())
        return statements
