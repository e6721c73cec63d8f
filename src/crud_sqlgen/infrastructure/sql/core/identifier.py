"""
SQL identifier handling utilities.

Only table names are quoted by the generators; column names are emitted as
plain identifiers.
"""


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier using PostgreSQL double quotes.

    Args:
        name: The identifier to quote

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("users")
        '"users"'
        >>> quote_identifier('odd"name')
        '"odd""name"'
    """
    # Escape internal double quotes by doubling them
    escaped = name.replace('"', '""')
    return f'"{escaped}"'
