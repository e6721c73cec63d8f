"""Shared pytest fixtures for crud-sqlgen."""

from __future__ import annotations

import os

import pytest

from crud_sqlgen.config.settings import get_settings
from crud_sqlgen.infrastructure.schema import ColumnDef, TableDef


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without SQLGEN_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.upper().startswith("SQLGEN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def users_table() -> TableDef:
    """Surrogate auto-increment key plus a soft-delete column."""
    return TableDef.from_columns(
        "users",
        [
            ColumnDef("id", "int", is_primary_key=True, is_auto_increment=True),
            ColumnDef("name", "text"),
            ColumnDef("deleted_at", "timestamptz"),
        ],
    )


@pytest.fixture
def memberships_table() -> TableDef:
    """Composite natural key with interleaved non-key columns, no soft delete."""
    return TableDef.from_columns(
        "memberships",
        [
            ColumnDef("tenant_id", "uuid", is_primary_key=True),
            ColumnDef("note", "text"),
            ColumnDef("user_id", "bigint", is_primary_key=True),
            ColumnDef("created_at", "timestamptz"),
        ],
    )


@pytest.fixture
def keyless_table() -> TableDef:
    """Table without any primary-key column."""
    return TableDef.from_columns(
        "audit_log",
        [
            ColumnDef("event", "text"),
            ColumnDef("deleted_at", "timestamptz"),
        ],
    )


USERS_SCHEMA_YAML = """\
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
  memberships:
    columns:
      - name: tenant_id
        type: uuid
        primary_key: true
      - name: note
        type: text
      - name: user_id
        type: bigint
        primary_key: true
      - name: created_at
        type: timestamptz
"""


@pytest.fixture
def schema_file(tmp_path):
    """Schema file describing the users and memberships tables."""
    path = tmp_path / "schema.yml"
    path.write_text(USERS_SCHEMA_YAML, encoding="utf-8")
    return path
