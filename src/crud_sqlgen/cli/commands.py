"""
Command handlers for the crud-sqlgen CLI.

Each handler takes the parsed argparse namespace and returns an exit code.
Metadata comes from a YAML schema file or, when a database URL is given,
from live introspection.
"""

import argparse
import sys
from typing import List, Optional, Tuple

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from crud_sqlgen.config import get_settings
from crud_sqlgen.infrastructure.schema import (
    SchemaFileError,
    TableDef,
    introspect_table,
    list_table_names,
    load_schema_file,
    load_table,
)
from crud_sqlgen.infrastructure.sql import (
    STATEMENT_KINDS,
    CrudStatementBuilder,
    SqlGenerationError,
)
from crud_sqlgen.utils.logging import bind_context, get_logger

logger = get_logger(__name__)


class MetadataSourceError(Exception):
    """Raised when no usable schema file or database URL is available."""


def _resolve_source(args: argparse.Namespace) -> Tuple[str, str]:
    """Return ("database", url) or ("file", path) from args, then settings."""
    settings = get_settings()
    if args.database_url:
        return "database", args.database_url
    if args.schema_file:
        return "file", args.schema_file
    if settings.database_url:
        return "database", settings.database_url
    if settings.schema_file:
        return "file", settings.schema_file
    raise MetadataSourceError(
        "no metadata source: pass --schema-file or --database-url "
        "(or set SQLGEN_SCHEMA_FILE / SQLGEN_DATABASE_URL)"
    )


def _db_schema(args: argparse.Namespace) -> Optional[str]:
    return args.db_schema or get_settings().db_schema


def _create_engine(url: str) -> Engine:
    try:
        return create_engine(url)
    except ImportError as e:
        scheme = url.split(":", 1)[0]
        raise MetadataSourceError(f"database driver not installed for {scheme}: {e}") from e


def _load_table(args: argparse.Namespace) -> TableDef:
    kind, location = _resolve_source(args)
    if kind == "file":
        return load_table(location, args.table)

    engine = _create_engine(location)
    try:
        return introspect_table(engine, args.table, schema=_db_schema(args))
    finally:
        engine.dispose()


def _list_tables(args: argparse.Namespace) -> List[str]:
    kind, location = _resolve_source(args)
    if kind == "file":
        return list(load_schema_file(location))

    engine = _create_engine(location)
    try:
        return list_table_names(engine, schema=_db_schema(args))
    finally:
        engine.dispose()


def _report_failure(error: Exception, **context: object) -> int:
    logger.error("command_failed", error_type=type(error).__name__, error=str(error), **context)
    print(f"error: {error}", file=sys.stderr)
    return 1


def run_generate(args: argparse.Namespace) -> int:
    """Print the requested statements for one table."""
    log = bind_context(table=args.table)
    try:
        table = _load_table(args)
    except (MetadataSourceError, SchemaFileError, SQLAlchemyError) as e:
        return _report_failure(e, table=args.table)

    builder = CrudStatementBuilder(named_params=args.named_params)
    kinds = args.statements or list(STATEMENT_KINDS)

    failures = 0
    for kind in kinds:
        try:
            sql = builder.generate(kind, table)
        except SqlGenerationError as e:
            log.warning("statement_failed", statement=kind, error=str(e))
            print(f"error: {kind}: {e}", file=sys.stderr)
            failures += 1
            continue
        print(f"-- {kind}")
        print(f"{sql};")
        print()

    log.info(
        "statements_generated",
        requested=len(kinds),
        failed=failures,
        named_params=builder.named_params,
    )
    return 1 if failures else 0


def run_tables(args: argparse.Namespace) -> int:
    """Print the table names available from the metadata source."""
    try:
        names = _list_tables(args)
    except (MetadataSourceError, SchemaFileError, SQLAlchemyError) as e:
        return _report_failure(e)

    for name in names:
        print(name)
    return 0
