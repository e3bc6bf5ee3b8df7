"""Attribute specifier parsing.

The first directive argument is source text, not a value. Its modifiers
are recognized textually, before anything is evaluated:

- forced: the text ends with ``='`` or ``="`` (``'value='``)
- negated: the text starts with ``'!`` or ``"!`` (``'!hidden'``)

When the specifier is a plain string literal its name is extracted at
compile time; any other expression is passed through and evaluated at
render time.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass

from htmlattrs.runtime import prefixed

_FORCED_SUFFIXES = ("='", '="')
_NEGATED_PREFIXES = ("'!", '"!')


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """Attribute name and modifiers parsed from a specifier literal.

    Attributes:
        name: Attribute name with markers stripped
        forced: Always render a value (None still suppresses)
        negated: Swap the boolean literals (aria only)
        prefix: Family prefix, applied once by ``full_name``
    """

    name: str
    forced: bool = False
    negated: bool = False
    prefix: str = ""

    @property
    def full_name(self) -> str:
        return prefixed(self.prefix, self.name)


def is_forced(text: str) -> bool:
    return text.endswith(_FORCED_SUFFIXES)


def is_negated(text: str) -> bool:
    return text.startswith(_NEGATED_PREFIXES)


def parse_specifier(text: str, prefix: str = "") -> AttributeSpec | None:
    """Parse a specifier literal into an AttributeSpec.

    Returns None when ``text`` is not a single string literal.

    Example:
        >>> parse_specifier("'value='")
        AttributeSpec(name='value', forced=True, negated=False, prefix='')
        >>> parse_specifier("name_var") is None
        True
    """
    try:
        literal = ast.literal_eval(text)
    except (ValueError, TypeError, SyntaxError):
        return None
    if not isinstance(literal, str):
        return None

    forced = is_forced(text)
    negated = is_negated(text)
    name = literal
    if negated:
        name = name[1:]
    if forced:
        name = name[:-1]
    return AttributeSpec(name=name, forced=forced, negated=negated, prefix=prefix)
