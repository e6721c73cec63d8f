"""Command-line interface for crud-sqlgen."""
