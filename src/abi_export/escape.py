"""Identifier escaping for Solidity output.

Source identifiers become parameter labels and type names in the generated
interface. Any identifier that collides with a Solidity keyword or with a
byte-aligned numeric type name is prefixed with an underscore::

    >>> underscore_if_sol("amount")
    ' amount'
    >>> underscore_if_sol("uint8")
    ' _uint8'
    >>> underscore_if_sol("uint7")
    ' uint7'

A non-empty result always starts with one separator space so callers can
write ``f"{ty}{underscore_if_sol(name)}"`` for both named and unnamed
parameters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ── Solidity tables ─────────────────────────────────────────────────

# Bare type names and words that are ambiguous as identifiers.
_AMBIGUOUS_WORDS = (
    # other types
    "address",
    "bool",
    "int",
    "uint",
    # other words
    "is",
    "contract",
    "interface",
)

# Reserved for future use by the Solidity grammar.
_RESERVED_KEYWORDS = (
    "after",
    "alias",
    "apply",
    "auto",
    "byte",
    "case",
    "copyof",
    "default",
    "define",
    "final",
    "implements",
    "in",
    "inline",
    "let",
    "macro",
    "match",
    "mutable",
    "null",
    "of",
    "partial",
    "promise",
    "reference",
    "relocatable",
    "sealed",
    "sizeof",
    "static",
    "supports",
    "switch",
    "typedef",
    "typeof",
    "var",
)


@dataclass(frozen=True, slots=True)
class ReservedWords:
    """Immutable escaping table: numeric type patterns plus exact-match words.

    ``int_bits_multiple`` applies to both ``uint<N>`` and ``int<N>``;
    ``max_bytes_width`` bounds ``bytes<N>``.
    """

    uint_pattern: re.Pattern[str]
    int_pattern: re.Pattern[str]
    bytes_pattern: re.Pattern[str]
    ambiguous: frozenset[str]
    keywords: frozenset[str]
    int_bits_multiple: int = 8
    max_bytes_width: int = 32

    @classmethod
    def solidity(cls) -> "ReservedWords":
        # ASCII digits only, so the captured width always parses.
        return cls(
            uint_pattern=re.compile(r"uint([0-9]+)", re.ASCII),
            int_pattern=re.compile(r"int([0-9]+)", re.ASCII),
            bytes_pattern=re.compile(r"bytes([0-9]+)", re.ASCII),
            ambiguous=frozenset(_AMBIGUOUS_WORDS),
            keywords=frozenset(_RESERVED_KEYWORDS),
        )


SOLIDITY = ReservedWords.solidity()


def _width(pattern: re.Pattern[str], name: str) -> int | None:
    """Return the numeric suffix when *name* fully matches *pattern*."""
    m = pattern.fullmatch(name)
    if m is None:
        return None
    return int(m.group(1))


def needs_underscore(name: str, words: ReservedWords = SOLIDITY) -> bool:
    """Return True if *name* collides with a Solidity keyword or type name."""
    bits = _width(words.uint_pattern, name)
    if bits is not None and bits % words.int_bits_multiple == 0:
        return True

    bits = _width(words.int_pattern, name)
    if bits is not None and bits % words.int_bits_multiple == 0:
        return True

    width = _width(words.bytes_pattern, name)
    if width is not None and width <= words.max_bytes_width:
        return True

    return name in words.ambiguous or name in words.keywords


def underscore_if_sol(name: str, words: ReservedWords = SOLIDITY) -> str:
    """Prepend an underscore if *name* is a Solidity keyword.

    Also prepends a space when *name* is non-empty; the empty string maps
    to the empty string.
    """
    if not name:
        return ""
    if needs_underscore(name, words):
        return f" _{name}"
    return f" {name}"
