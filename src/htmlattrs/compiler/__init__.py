"""Template compiler: lexer nodes -> Python AST -> code object."""

from htmlattrs.compiler.core import Compiler, resolve_context_names

__all__ = ["Compiler", "resolve_context_names"]
