"""Tokenizer: source text -> list of tokens.

Scans left to right with one character of lookahead. Digits and lowercase
letters are consumed with maximal munch, so ``add2`` lexes as
``Name('add')`` followed by ``Number('2')``.
"""

import logging

from .token import Name, Number, ParenClose, ParenOpen, String, Token

logger = logging.getLogger(__name__)


class LexError(SyntaxError):
    pass


class UnknownCharacter(LexError):
    def __init__(self, char: str, position: int):
        super().__init__(f"unknown character {char!r} at position {position}")
        self.char = char
        self.position = position


class UnterminatedString(LexError):
    def __init__(self, position: int):
        super().__init__(f"unterminated string starting at position {position}")
        self.position = position


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


# str.isspace() also accepts the information separators U+001C..U+001F,
# which are not Unicode White_Space.
_NOT_WHITESPACE = "\x1c\x1d\x1e\x1f"


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


def tokenize(source: str, *, strict_strings: bool = False) -> list[Token]:
    """Split ``source`` into tokens.

    Args:
        source: program text
        strict_strings: raise ``UnterminatedString`` when input ends inside a
            string literal instead of emitting what was collected

    Raises:
        UnknownCharacter: on any character outside the language alphabet.
    """
    tokens: list[Token] = []
    pos = 0
    end = len(source)
    while pos < end:
        ch = source[pos]
        if ch == "(":
            tokens.append(ParenOpen())
            pos += 1
        elif ch == ")":
            tokens.append(ParenClose())
            pos += 1
        elif _is_digit(ch):
            start = pos
            while pos < end and _is_digit(source[pos]):
                pos += 1
            tokens.append(Number(source[start:pos]))
        elif _is_lower(ch):
            start = pos
            while pos < end and _is_lower(source[pos]):
                pos += 1
            tokens.append(Name(source[start:pos]))
        elif ch == '"':
            start = pos
            pos += 1
            while pos < end and source[pos] != '"':
                pos += 1
            if pos >= end and strict_strings:
                raise UnterminatedString(start)
            tokens.append(String(source[start + 1:pos]))
            # skip the closing quote, if there is one
            pos += 1
        elif _is_whitespace(ch):
            pos += 1
        else:
            raise UnknownCharacter(ch, pos)
    logger.debug("tokenized %d characters into %d tokens", end, len(tokens))
    return tokens
