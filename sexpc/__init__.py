from .lexer import tokenize, LexError, UnknownCharacter, UnterminatedString
from .parser import (
    parse, ParseError, UnexpectedEnd, ExpectedName, UnknownToken, UnmatchedParen, NestingTooDeep,
)
from .nodes import Node, Program, CallExpression
from .token import Token, TOKEN_KINDS, ParenOpen, ParenClose, Number, Name, String
from .types import Options
from .reader import read

__all__ = [
    "tokenize", "parse", "read", "Options",
    "Token", "TOKEN_KINDS", "ParenOpen", "ParenClose", "Number", "Name", "String",
    "Node", "Program", "CallExpression",
    "LexError", "UnknownCharacter", "UnterminatedString",
    "ParseError", "UnexpectedEnd", "ExpectedName", "UnknownToken", "UnmatchedParen", "NestingTooDeep",
]
