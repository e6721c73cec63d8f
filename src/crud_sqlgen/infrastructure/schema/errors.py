"""Errors raised while loading table metadata."""

from typing import Dict, Optional


class SchemaFileError(Exception):
    """Raised when table metadata cannot be loaded or validated."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "source": self.source,
            "message": str(self),
        }


class TableNotFoundError(SchemaFileError):
    """Raised when a requested table is not present in the metadata source."""

    def __init__(self, table_name: str, source: Optional[str] = None):
        self.table_name = table_name
        where = f" in {source}" if source else ""
        super().__init__(f"table {table_name} not found{where}", source=source)
