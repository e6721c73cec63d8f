"""Core SQL utilities package."""

from .identifier import quote_identifier
from .parameters import named_param, positional_param

__all__ = [
    "quote_identifier",
    "named_param",
    "positional_param",
]
