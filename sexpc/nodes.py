"""AST node types.

A parse produces exactly one ``Program`` whose body holds the top-level
``CallExpression`` nodes in source order. Nodes are frozen; sequence fields
are stored as tuples so a finished tree cannot be changed in place.

The parser accepts arbitrarily deep input, so every operation that visits a
whole tree (rendering, comparison, hashing, ``to_dict``) works from an
explicit stack instead of Python recursion.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable


class Node:
    """Base class for AST nodes."""

    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


def _shape(roots: Iterable["CallExpression"]) -> tuple[tuple[str, int], ...]:
    # Preorder (name, arity) pairs identify a forest of calls uniquely.
    out = []
    stack = list(roots)[::-1]
    while stack:
        node = stack.pop()
        out.append((node.name, len(node.params)))
        stack.extend(reversed(node.params))
    return tuple(out)


def _render(node: "CallExpression", head: Callable[["CallExpression"], str],
            lead: str, sep: str, tail: Callable[["CallExpression"], str]) -> str:
    parts = []
    stack: list[Any] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        parts.append(head(item))
        stack.append(tail(item))
        for i in range(len(item.params) - 1, -1, -1):
            stack.append(item.params[i])
            stack.append(sep if i else lead)
    return "".join(parts)


def _call_dict(node: "CallExpression") -> dict[str, Any]:
    return {"type": "CallExpression", "name": node.name, "params": []}


def _tuple_tail(n: int) -> str:
    return ",)" if n == 1 else ")"


@dataclass(frozen=True, eq=False, repr=False)
class CallExpression(Node):
    name: str
    params: tuple["CallExpression", ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))

    def __eq__(self, other):
        if not isinstance(other, CallExpression):
            return NotImplemented
        return _shape([self]) == _shape([other])

    def __hash__(self):
        return hash(_shape([self]))

    def __repr__(self) -> str:
        return _render(
            self,
            lambda n: f"CallExpression(name={n.name!r}, params=(",
            "", ", ",
            lambda n: _tuple_tail(len(n.params)) + ")",
        )

    def __str__(self) -> str:
        return _render(self, lambda n: "(" + n.name, " ", " ", lambda n: ")")

    def to_dict(self) -> dict[str, Any]:
        root = _call_dict(self)
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for param in node.params:
                child = _call_dict(param)
                out["params"].append(child)
                stack.append((param, child))
        return root


@dataclass(frozen=True, eq=False, repr=False)
class Program(Node):
    body: tuple[CallExpression, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "body", tuple(self.body))

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented
        return _shape(self.body) == _shape(other.body)

    def __hash__(self):
        return hash(("Program", _shape(self.body)))

    def __repr__(self) -> str:
        inner = ", ".join(map(repr, self.body))
        return f"Program(body=({inner}{_tuple_tail(len(self.body))})"

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form handed to later compiler stages."""
        return {"type": "Program", "body": [n.to_dict() for n in self.body]}

    def __str__(self) -> str:
        return " ".join(map(str, self.body))
