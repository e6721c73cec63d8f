"""
Infrastructure Layer

Components:
- schema: table metadata contract plus schema-file and introspection adapters
- sql: CRUD statement generation over that contract

Usage:
    from crud_sqlgen.infrastructure.schema import load_table
    from crud_sqlgen.infrastructure.sql import CrudStatementBuilder
"""

__all__: list[str] = []
