"""
crud-sqlgen - CRUD SQL statement generation from table metadata.

Given a read-only view of a table (name, ordered columns, primary key and
auto-increment flags) the generators produce literal SQL text for insert,
update, hard/soft delete and the select variants.
"""

__version__ = "0.1.0"
