"""Template nodes produced by the lexer.

A template is a flat sequence of literal text and directive calls; there
is no nesting, so two immutable node types are enough.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    lineno: int


@dataclass(frozen=True, slots=True)
class Data(Node):
    """Literal template text."""

    value: str


@dataclass(frozen=True, slots=True)
class DirectiveCall(Node):
    """``@name(expression)`` with the raw argument text between the parens."""

    name: str
    expression: str
