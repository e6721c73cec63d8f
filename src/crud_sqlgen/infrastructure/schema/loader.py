"""
YAML schema-file adapter for table metadata.

Expected layout::

    tables:
      users:
        columns:
          - name: id
            type: int
            primary_key: true
            auto_increment: true
          - name: name
            type: text
          - name: deleted_at
            type: timestamptz

Column order in the file is the column order handed to the generators,
which decides placeholder numbering in the generated SQL.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Union

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core import ColumnDef, TableDef
from .errors import SchemaFileError, TableNotFoundError

logger = structlog.get_logger(__name__)


class ColumnSpec(BaseModel):
    """Schema for a single column entry."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Column name")
    column_type: str = Field(..., alias="type", min_length=1, description="Declared SQL type")
    primary_key: bool = Field(False, description="Part of the primary key")
    auto_increment: bool = Field(False, description="Value assigned by the database")


class TableSpec(BaseModel):
    """Schema for a single table entry."""

    model_config = ConfigDict(extra="forbid")

    columns: List[ColumnSpec] = Field(..., min_length=1, description="Ordered columns")

    @field_validator("columns")
    @classmethod
    def validate_unique_names(cls, v: List[ColumnSpec]) -> List[ColumnSpec]:
        """Column names must be unique within a table."""
        seen = set()
        for col in v:
            if col.name in seen:
                raise ValueError(f"duplicate column name: {col.name}")
            seen.add(col.name)
        return v


class SchemaFileSpec(BaseModel):
    """Schema for the complete schema file."""

    tables: Dict[str, TableSpec] = Field(..., min_length=1, description="Tables by name")


def _to_table_def(table_name: str, spec: TableSpec) -> TableDef:
    return TableDef.from_columns(
        table_name,
        (
            ColumnDef(
                name=col.name,
                column_type=col.column_type,
                is_primary_key=col.primary_key,
                is_auto_increment=col.auto_increment,
            )
            for col in spec.columns
        ),
    )


def load_schema_file(path: Union[str, Path]) -> Dict[str, TableDef]:
    """
    Load and validate every table in a schema file.

    Args:
        path: Path to the YAML schema file

    Returns:
        Mapping of table name to TableDef, in file order

    Raises:
        SchemaFileError: If the file is missing, is not valid YAML or does
            not match the expected layout
    """
    schema_path = Path(path)
    source = str(schema_path)

    if not schema_path.is_file():
        raise SchemaFileError(f"Schema file not found: {source}", source=source)

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaFileError(f"Invalid YAML in schema file: {e}", source=source) from e
    except UnicodeDecodeError as e:
        raise SchemaFileError(f"Schema file is not valid UTF-8: {e}", source=source) from e
    except OSError as e:
        raise SchemaFileError(f"Failed to read schema file: {e}", source=source) from e

    if data is None:
        raise SchemaFileError(f"Schema file is empty: {source}", source=source)

    try:
        spec = SchemaFileSpec.model_validate(data)
    except ValidationError as e:
        raise SchemaFileError(f"Schema file validation failed: {e}", source=source) from e

    tables = {name: _to_table_def(name, table) for name, table in spec.tables.items()}
    logger.debug("schema_file_loaded", path=source, table_count=len(tables))
    return tables


def load_table(path: Union[str, Path], table_name: str) -> TableDef:
    """
    Load a single table from a schema file.

    Raises:
        SchemaFileError: If the file cannot be loaded
        TableNotFoundError: If the table is not defined in the file
    """
    tables = load_schema_file(path)
    try:
        return tables[table_name]
    except KeyError:
        raise TableNotFoundError(table_name, source=str(path)) from None
