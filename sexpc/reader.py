"""Top-level read API: source text -> Program."""

from typing import Any, Optional

from .lexer import tokenize
from .nodes import Program
from .parser import parse
from .types import Options


def read(source: str, options: Optional[Any] = None) -> Program:
    """Tokenize and parse ``source``.

    Args:
        source: program text
        options: an Options instance, or a dict with keys
                 strict_strings, max_depth

    Returns:
        Program root node

    Raises:
        LexError, ParseError: the first error from either stage, unchanged.
    """
    if options is None:
        opts = Options()
    elif isinstance(options, dict):
        unknown = set(options) - {"strict_strings", "max_depth"}
        if unknown:
            raise TypeError(f"unknown options: {', '.join(sorted(unknown))}")
        opts = Options(**options)
    else:
        opts = options

    tokens = tokenize(source, strict_strings=opts.strict_strings)
    return parse(tokens, max_depth=opts.max_depth)
