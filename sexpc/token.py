"""Lexical tokens produced by the tokenizer and consumed by the parser.

Tokens form a closed set: two structural markers with no payload and three
atoms that carry the literal source text they were scanned from.
"""

from dataclasses import dataclass


class Token:
    """Base class for every token kind."""

    __slots__ = ()


@dataclass(frozen=True)
class ParenOpen(Token):
    pass


@dataclass(frozen=True)
class ParenClose(Token):
    pass


@dataclass(frozen=True)
class Number(Token):
    """Run of ASCII digits, kept as text (not converted to int)."""

    text: str


@dataclass(frozen=True)
class Name(Token):
    """Run of lowercase ASCII letters."""

    text: str


@dataclass(frozen=True)
class String(Token):
    """Contents between two double quotes, quotes excluded."""

    text: str


TOKEN_KINDS = (ParenOpen, ParenClose, Number, Name, String)
