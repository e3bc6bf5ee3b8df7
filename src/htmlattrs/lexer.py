"""Directive lexer.

Splits template source into literal text and directive calls. Only
registered directive names are recognized; any other ``@word`` is text.

Recognized syntax:
    @attr('title', post.title)      directive call
    @attr ('title', post.title)     spaces or tabs before ``(`` are allowed
    @@attr('title', x)              escaped: emits ``@attr('title', x)``
    user@attr(...)                  not a directive (``@`` follows a word char)

Parentheses inside the arguments must balance; quoted strings are skipped
so ``@attr('label', ')')`` is read correctly.
"""

from __future__ import annotations

import re
from collections.abc import Container

from htmlattrs.exceptions import UnclosedDirectiveError
from htmlattrs.nodes import Data, DirectiveCall, Node

_DIRECTIVE_RE = re.compile(r"(?<![\w@])@(@?)([A-Za-z_]\w*)([ \t]*\()?")


def _find_closing_paren(source: str, start: int) -> int:
    """Index of the parenthesis closing the one just before ``start``, or -1."""
    depth = 1
    pos = start
    length = len(source)
    while pos < length:
        ch = source[pos]
        if ch in "'\"":
            pos += 1
            while pos < length and source[pos] != ch:
                if source[pos] == "\\":
                    pos += 1
                pos += 1
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return -1


def tokenize(
    source: str, directives: Container[str], name: str | None = None
) -> list[Node]:
    """Split ``source`` into Data and DirectiveCall nodes.

    Raises:
        UnclosedDirectiveError: A directive's argument list never closes
    """
    nodes: list[Node] = []
    text: list[str] = []
    text_line = 1
    pos = 0

    def flush() -> None:
        if text:
            nodes.append(Data(lineno=text_line, value="".join(text)))
            text.clear()

    for match in _DIRECTIVE_RE.finditer(source):
        if match.start() < pos:
            # Inside a directive already consumed.
            continue
        escaped, directive, paren = match.groups()
        if directive not in directives:
            continue

        if not text:
            text_line = source.count("\n", 0, pos) + 1
        text.append(source[pos : match.start()])
        lineno = source.count("\n", 0, match.start()) + 1

        if escaped:
            text.append(f"@{directive}")
            pos = match.start(2) + len(directive)
            continue
        if paren is None:
            text.append(match.group(0))
            pos = match.end()
            continue

        close = _find_closing_paren(source, match.end())
        if close == -1:
            raise UnclosedDirectiveError(
                f"Unclosed @{directive} directive", lineno=lineno, name=name, source=source
            )
        flush()
        nodes.append(
            DirectiveCall(lineno=lineno, name=directive, expression=source[match.end() : close])
        )
        pos = close + 1

    if pos < len(source):
        if not text:
            text_line = source.count("\n", 0, pos) + 1
        text.append(source[pos:])
    flush()
    return nodes
