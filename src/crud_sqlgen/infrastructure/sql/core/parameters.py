"""
SQL parameter placeholder utilities.

Two placeholder styles are supported: positional (``$1``, ``$2``, ...) as
used by PostgreSQL prepared statements and pgx/asyncpg, and named
(``@name``) as used by drivers that bind by name.
"""

from typing import Union


def positional_param(position: int) -> str:
    """
    Build a positional placeholder.

    Examples:
        >>> positional_param(3)
        '$3'
    """
    return f"${position}"


def named_param(*parts: Union[str, int]) -> str:
    """
    Build a named placeholder from underscore-joined parts.

    Examples:
        >>> named_param("id")
        '@id'
        >>> named_param("where", "id", 1)
        '@where_id_1'
    """
    return "@" + "_".join(str(p) for p in parts)
