"""Directive compilation for htmlattrs.

Re-exports the directive table, the compile/render entry points and the
specifier model.

"""

from htmlattrs.directives.core import (
    DEFAULT_DIRECTIVES,
    CompiledFragment,
    Directive,
    compile_directive,
    get_directive,
    render_directive,
)
from htmlattrs.directives.specifier import AttributeSpec, parse_specifier

__all__ = [
    "DEFAULT_DIRECTIVES",
    "AttributeSpec",
    "CompiledFragment",
    "Directive",
    "compile_directive",
    "get_directive",
    "parse_specifier",
    "render_directive",
]
