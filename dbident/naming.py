"""Database identifier naming rules.

An identifier is the name of a database object: tables, columns, constraints.

Allowed characters:
- ASCII letters (a-z, A-Z)
- digits (0-9)
- underscore
- space (legal in SQL when the identifier is quoted)

Other rules:
- at least one character
- must not start with a digit or a space
- case insensitive

Identifiers are stored and compared in a canonical lower-case form. Folding a
raw name into that form is called normalization. Only ASCII letters are
folded; anything outside the allowed set is rejected, never folded.

Examples: "AbCdEfG" -> "abcdefg", "Hello World" -> "hello world", "_1a" -> "_1a"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")

IDENTIFIER_CHARS = _LOWER | _UPPER | _DIGITS | {"_", " "}
LEADING_CHARS = IDENTIFIER_CHARS - _DIGITS - {" "}

# str.lower() would also fold non-ASCII letters; keep folding ASCII-only.
_ASCII_FOLD = str.maketrans({c: c.lower() for c in _UPPER})

REASON_EMPTY = "empty"
REASON_LEADING_CHAR = "leading_char"
REASON_INVALID_CHAR = "invalid_char"


class IdentifierError(ValueError):
    """Raised when a raw name is not a valid identifier."""

    def __init__(self, raw: str, reason: str, position: Optional[int] = None):
        self.raw = raw
        self.reason = reason
        self.position = position
        super().__init__(self._message())

    def _message(self) -> str:
        if self.reason == REASON_EMPTY:
            return "Identifier is required"
        if self.reason == REASON_LEADING_CHAR:
            return f"Identifier must not start with a digit or space. Got: {self.raw!r}"
        bad = self.raw[self.position] if self.position is not None else ""
        return (
            "Invalid identifier. Use letters/digits/underscore/space only. "
            f"Got {bad!r} at position {self.position} in {self.raw!r}"
        )


def check_identifier(raw: str) -> Optional[IdentifierError]:
    """Return the first rule violation in ``raw``, or None if it is valid.

    Single left-to-right scan. The first character has to be in the allowed
    set *and* not be a digit or space.
    """

    if not raw:
        return IdentifierError(raw, REASON_EMPTY)
    for i, c in enumerate(raw):
        if c not in IDENTIFIER_CHARS:
            return IdentifierError(raw, REASON_INVALID_CHAR, i)
        if i == 0 and c not in LEADING_CHARS:
            return IdentifierError(raw, REASON_LEADING_CHAR, 0)
    return None


def is_valid_identifier(raw: str) -> bool:
    return isinstance(raw, str) and check_identifier(raw) is None


def is_canonical(value: str) -> bool:
    """True when ``value`` is valid and already lower-case."""
    return is_valid_identifier(value) and not any(c in _UPPER for c in value)


def normalize_identifier(raw: str) -> str:
    """Validate ``raw`` and fold it to its canonical lower-case text.

    Raises IdentifierError if the name breaks a rule.
    """

    if not isinstance(raw, str):
        raise TypeError(f"Identifier must be a str, not {type(raw).__name__}")
    err = check_identifier(raw)
    if err is not None:
        raise err
    return raw.translate(_ASCII_FOLD)


@dataclass(frozen=True, order=True, repr=False)
class Identifier:
    """A validated, canonical (lower-case) database object name.

    Build instances with ``Identifier.new`` (returns None for invalid input) or
    ``Identifier.parse`` (raises IdentifierError). Calling ``Identifier(value)``
    directly only accepts text that is already canonical.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_canonical(self.value):
            raise ValueError(f"Not a canonical identifier: {self.value!r}")

    @classmethod
    def new(cls, raw: Any) -> Optional["Identifier"]:
        if not isinstance(raw, str) or check_identifier(raw) is not None:
            return None
        return cls(raw.translate(_ASCII_FOLD))

    @classmethod
    def parse(cls, raw: str) -> "Identifier":
        return cls(normalize_identifier(raw))

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    def __repr__(self) -> str:
        return repr(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.value)

    def __contains__(self, item: str) -> bool:
        return item in self.value


def construct(raw: Any) -> Optional[Identifier]:
    """Build an Identifier from ``raw``; None when the name is invalid."""
    return Identifier.new(raw)
