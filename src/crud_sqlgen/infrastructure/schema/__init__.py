"""Table metadata contract and adapters.

The generators in ``crud_sqlgen.infrastructure.sql`` depend only on the
``TableMeta``/``ColumnMeta`` protocols defined here; the loader and
introspection modules are two interchangeable ways of producing them.
"""

from .core import ColumnDef, ColumnMeta, TableDef, TableMeta
from .errors import SchemaFileError, TableNotFoundError
from .introspection import introspect_table, introspect_tables, list_table_names
from .loader import load_schema_file, load_table

__all__ = [
    "ColumnMeta",
    "TableMeta",
    "ColumnDef",
    "TableDef",
    "SchemaFileError",
    "TableNotFoundError",
    "load_schema_file",
    "load_table",
    "introspect_table",
    "introspect_tables",
    "list_table_names",
]
