"""Recursive-descent parser: tokens -> Program.

Grammar::

    program := expr*
    expr    := "(" NAME expr* ")"

Only call expressions are expressions. Numbers, strings and names outside
the head position of a call are rejected.
"""

import logging
from typing import Iterable, Iterator, Optional

from .nodes import CallExpression, Program
from .token import TOKEN_KINDS, Name, ParenClose, ParenOpen, Token

logger = logging.getLogger(__name__)


class ParseError(SyntaxError):
    pass


class UnexpectedEnd(ParseError):
    def __init__(self):
        super().__init__("ParenOpen not followed by a node")


class ExpectedName(ParseError):
    def __init__(self, got: Token):
        super().__init__(f"ParenOpen not followed by a Name, got {got!r}")
        self.got = got


class UnknownToken(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"unknown token {token!r}")
        self.token = token


class UnmatchedParen(ParseError):
    def __init__(self, name: str):
        super().__init__(f"unterminated ( in call to {name!r}")
        self.name = name


class NestingTooDeep(ParseError):
    def __init__(self, limit: int):
        super().__init__(f"max nesting depth {limit} exceeded")
        self.limit = limit


class _Cursor:
    __slots__ = ("_it", "_ahead")

    def __init__(self, tokens: Iterable[Token]):
        self._it: Iterator[Token] = iter(tokens)
        self._ahead: list[Token] = []

    def next(self) -> Optional[Token]:
        if self._ahead:
            return self._ahead.pop()
        return self._take()

    def peek(self) -> Optional[Token]:
        if not self._ahead:
            tok = self._take()
            if tok is None:
                return None
            self._ahead.append(tok)
        return self._ahead[-1]

    def _take(self) -> Optional[Token]:
        tok = next(self._it, None)
        if tok is not None and not isinstance(tok, TOKEN_KINDS):
            raise TypeError(f"expected Token, got {type(tok).__name__}")
        return tok


def _open_call(cursor: _Cursor) -> tuple[str, list[CallExpression]]:
    head = cursor.next()
    if head is None:
        raise UnexpectedEnd()
    if not isinstance(head, Name):
        raise ExpectedName(head)
    return head.text, []


def _walk(token: Token, cursor: _Cursor, max_depth: Optional[int]) -> CallExpression:
    """Parse one expression starting at ``token``.

    Open calls are kept on an explicit stack of (name, params) frames, one
    per unmatched ParenOpen, so nesting depth is not bound by the Python
    recursion limit.
    """
    if not isinstance(token, ParenOpen):
        raise UnknownToken(token)
    stack = [_open_call(cursor)]
    while True:
        name, params = stack[-1]
        nxt = cursor.peek()
        if nxt is None:
            raise UnmatchedParen(name)
        if isinstance(nxt, ParenClose):
            cursor.next()
            stack.pop()
            node = CallExpression(name, params)
            if not stack:
                return node
            stack[-1][1].append(node)
            continue
        tok = cursor.next()
        if not isinstance(tok, ParenOpen):
            raise UnknownToken(tok)
        if max_depth is not None and len(stack) >= max_depth:
            raise NestingTooDeep(max_depth)
        stack.append(_open_call(cursor))


def parse(tokens: Iterable[Token], *, max_depth: Optional[int] = None) -> Program:
    """Parse a token sequence into a Program.

    Args:
        tokens: output of ``tokenize`` (any iterable of Token)
        max_depth: limit on simultaneously open calls, None for unbounded

    Raises:
        ParseError: first structural error found; no partial tree is returned.
    """
    if max_depth is not None and max_depth < 1:
        raise ValueError("max_depth must be at least 1")
    cursor = _Cursor(tokens)
    body: list[CallExpression] = []
    while (tok := cursor.next()) is not None:
        body.append(_walk(tok, cursor, max_depth))
    logger.debug("parsed %d top-level expressions", len(body))
    return Program(body)
