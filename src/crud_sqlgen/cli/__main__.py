"""
Unified CLI entry point for crud-sqlgen.

Usage:
    python -m crud_sqlgen.cli <command> [options]

Available commands:
    generate     - Print CRUD statements for a table
    tables       - List tables known to the metadata source

Examples:
    # All statements for one table from a schema file
    python -m crud_sqlgen.cli generate --schema-file schema.yml --table users

    # Named placeholders, selected statements only
    python -m crud_sqlgen.cli generate --schema-file schema.yml --table users \\
        --named --statement insert --statement update

    # Introspect a live database
    python -m crud_sqlgen.cli generate --database-url postgresql://localhost/app \\
        --db-schema public --table users
"""

import argparse
import sys
from typing import List, Optional

from crud_sqlgen.infrastructure.sql import STATEMENT_KINDS


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--schema-file",
        help="YAML schema file (default: SQLGEN_SCHEMA_FILE)",
    )
    parser.add_argument(
        "--database-url",
        help="SQLAlchemy URL to introspect (default: SQLGEN_DATABASE_URL)",
    )
    parser.add_argument(
        "--db-schema",
        help="Database schema to introspect (default: SQLGEN_DB_SCHEMA)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crud_sqlgen.cli",
        description="crud-sqlgen - generate CRUD SQL from table metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override SQLGEN_LOG_LEVEL",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Print CRUD statements for a table",
        description="Generate insert/update/delete/select SQL for one table",
    )
    generate_parser.add_argument("--table", required=True, help="Table name")
    _add_source_arguments(generate_parser)
    generate_parser.add_argument(
        "--statement",
        dest="statements",
        action="append",
        choices=STATEMENT_KINDS,
        help="Statement to generate; repeat for several (default: all)",
    )
    style = generate_parser.add_mutually_exclusive_group()
    style.add_argument(
        "--named",
        dest="named_params",
        action="store_const",
        const=True,
        help="Use named @placeholders",
    )
    style.add_argument(
        "--positional",
        dest="named_params",
        action="store_const",
        const=False,
        help="Use positional $n placeholders",
    )
    generate_parser.set_defaults(named_params=None)

    tables_parser = subparsers.add_parser(
        "tables",
        help="List tables known to the metadata source",
    )
    _add_source_arguments(tables_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    from crud_sqlgen.utils.logging import configure_logging

    configure_logging(args.log_level)

    from crud_sqlgen.cli.commands import run_generate, run_tables

    if args.command == "generate":
        return run_generate(args)
    elif args.command == "tables":
        return run_tables(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
