"""
Unit tests for the SQLAlchemy introspection adapter.

Real reflection runs against an in-memory SQLite database; PostgreSQL-only
catalog details (identity, sequences) use a mocked inspector.
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.types import NullType

from crud_sqlgen.infrastructure.schema import (
    TableNotFoundError,
    introspect_table,
    introspect_tables,
    list_table_names,
)
from crud_sqlgen.infrastructure.sql import generate_select_one_sql

INTROSPECTION_MODULE = "crud_sqlgen.infrastructure.schema.introspection"


@pytest.fixture
def sqlite_engine():
    engine = create_engine("sqlite://")
    metadata = MetaData()
    Table(
        "users",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", Text),
        Column("deleted_at", DateTime),
    )
    Table(
        "memberships",
        metadata,
        Column("tenant_id", String(36)),
        Column("note", Text),
        Column("user_id", BigInteger),
        PrimaryKeyConstraint("tenant_id", "user_id"),
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


def _mock_inspector(columns, pk_columns):
    inspector = MagicMock()
    inspector.dialect = postgresql.dialect()
    inspector.has_table.return_value = True
    inspector.get_columns.return_value = columns
    inspector.get_pk_constraint.return_value = {"constrained_columns": pk_columns}
    return inspector


@pytest.mark.unit
class TestSqliteReflection:
    """Reflection against a real (SQLite) catalog."""

    def test_columns_in_catalog_order(self, sqlite_engine):
        table = introspect_table(sqlite_engine, "users")

        assert table.table_name == "users"
        assert [c.name for c in table.columns] == ["id", "name", "deleted_at"]
        assert [c.column_type for c in table.columns] == ["INTEGER", "TEXT", "DATETIME"]

    def test_primary_keys(self, sqlite_engine):
        table = introspect_table(sqlite_engine, "memberships")

        assert [c.name for c in table.columns if c.is_primary_key] == ["tenant_id", "user_id"]
        assert table.column("note").is_primary_key is False

    def test_result_feeds_generators(self, sqlite_engine):
        table = introspect_table(sqlite_engine, "memberships")

        assert (
            generate_select_one_sql(table, False)
            == 'SELECT * FROM "memberships" WHERE tenant_id = $1 AND user_id = $3'
        )

    def test_unknown_table(self, sqlite_engine):
        with pytest.raises(TableNotFoundError) as exc_info:
            introspect_table(sqlite_engine, "orders")

        assert exc_info.value.table_name == "orders"

    def test_introspect_tables(self, sqlite_engine):
        tables = introspect_tables(sqlite_engine)

        assert {t.table_name for t in tables} == {"users", "memberships"}

    def test_list_table_names(self, sqlite_engine):
        assert set(list_table_names(sqlite_engine)) == {"users", "memberships"}

    def test_accepts_connection(self, sqlite_engine):
        with sqlite_engine.connect() as conn:
            table = introspect_table(conn, "users")

        assert table.column("id").is_primary_key is True


@pytest.mark.unit
class TestAutoIncrementDetection:
    """Auto-increment flags from PostgreSQL-style catalog entries."""

    def test_detection_rules(self):
        columns = [
            {"name": "id", "type": Integer(), "autoincrement": True, "default": None},
            {
                "name": "legacy_seq",
                "type": BigInteger(),
                "autoincrement": False,
                "default": "nextval('legacy_seq'::regclass)",
            },
            {
                "name": "ident",
                "type": BigInteger(),
                "autoincrement": False,
                "default": None,
                "identity": {"always": True, "start": 1, "increment": 1},
            },
            {"name": "code", "type": Text(), "autoincrement": "auto", "default": "'x'::text"},
        ]
        inspector = _mock_inspector(columns, ["id"])

        with patch(f"{INTROSPECTION_MODULE}.inspect", return_value=inspector):
            table = introspect_table(MagicMock(), "things", schema="public")

        assert [c.is_auto_increment for c in table.columns] == [True, True, True, False]
        inspector.get_columns.assert_called_once_with("things", schema="public")
        inspector.get_pk_constraint.assert_called_once_with("things", schema="public")

    def test_type_compiled_for_dialect(self):
        columns = [
            {"name": "id", "type": Integer(), "autoincrement": True},
            {"name": "seen_at", "type": postgresql.TIMESTAMP(timezone=True)},
        ]
        inspector = _mock_inspector(columns, ["id"])

        with patch(f"{INTROSPECTION_MODULE}.inspect", return_value=inspector):
            table = introspect_table(MagicMock(), "things")

        assert table.column("seen_at").column_type == "TIMESTAMP WITH TIME ZONE"

    def test_uncompilable_type_becomes_empty(self):
        inspector = _mock_inspector([{"name": "blob", "type": NullType()}], [])

        with patch(f"{INTROSPECTION_MODULE}.inspect", return_value=inspector):
            table = introspect_table(MagicMock(), "things")

        assert table.column("blob").column_type == ""

    def test_missing_pk_constraint(self):
        inspector = _mock_inspector([{"name": "a", "type": Integer()}], [])
        inspector.get_pk_constraint.return_value = None

        with patch(f"{INTROSPECTION_MODULE}.inspect", return_value=inspector):
            table = introspect_table(MagicMock(), "things")

        assert table.column("a").is_primary_key is False

    def test_has_table_false(self):
        inspector = _mock_inspector([], [])
        inspector.has_table.return_value = False

        with patch(f"{INTROSPECTION_MODULE}.inspect", return_value=inspector):
            with pytest.raises(TableNotFoundError):
                introspect_table(MagicMock(), "things", schema="public")
