"""dbident.

Validated, case-insensitive names for database objects (tables, columns,
constraints). See ``dbident.naming`` for the rules.
"""

from .naming import (
    Identifier,
    IdentifierError,
    check_identifier,
    construct,
    is_valid_identifier,
    normalize_identifier,
)

__version__ = "0.1.0"

__all__ = [
    "Identifier",
    "IdentifierError",
    "check_identifier",
    "construct",
    "is_valid_identifier",
    "normalize_identifier",
]
