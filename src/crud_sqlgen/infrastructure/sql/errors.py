"""
Errors raised by the statement generators.

Both signal that the table metadata is insufficient for the requested
statement; retrying with the same metadata will fail the same way.
"""

from typing import Dict


class SqlGenerationError(Exception):
    """Base error for statement generation failures."""

    def __init__(self, table_name: str, message: str):
        self.table_name = table_name
        super().__init__(message)

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "table_name": self.table_name,
            "message": str(self),
        }


class NoPrimaryKeyError(SqlGenerationError):
    """The table has no primary-key column."""

    def __init__(self, table_name: str):
        super().__init__(
            table_name,
            f"table {table_name} does not have a primary key, cannot generate sql",
        )


class NoDeletedAtColumnError(SqlGenerationError):
    """The table has no ``deleted_at``/``DeletedAt`` column for soft deletes."""

    def __init__(self, table_name: str):
        super().__init__(
            table_name,
            f"table {table_name} does not have a deleted at column, cannot generate sql",
        )
