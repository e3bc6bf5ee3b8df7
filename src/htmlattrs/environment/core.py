"""Environment: directive configuration and template compilation.

The Environment holds the directive table, globals and strictness, and
turns template source into compiled Templates:

Template Source -> Lexer -> nodes -> Compiler -> Python AST -> exec()

Example:
    >>> env = Environment()
    >>> t = env.from_string('<div @attr("title", title) @data("id", id)>')
    >>> t.render(title="Hello", id=7)
    '<div title="Hello" data-id="7">'

"""

from __future__ import annotations

import ast
import logging
from typing import Any

from htmlattrs.compiler import Compiler
from htmlattrs.directives import DEFAULT_DIRECTIVES, Directive
from htmlattrs.environment.registry import DirectiveRegistry
from htmlattrs.lexer import tokenize
from htmlattrs.template import Template

logger = logging.getLogger(__name__)


class Environment:
    """Configuration for compiling directive templates.

    Args:
        directives: Directive table to use instead of the default one
        globals: Variables available to every render
        strict: Raise UndefinedError for undefined variables (default);
            when False they resolve to None and the attribute is omitted

    Thread-Safety:
        Directive mutations are copy-on-write; compiled Templates are
        immutable.
    """

    def __init__(
        self,
        directives: dict[str, Directive] | None = None,
        globals: dict[str, Any] | None = None,
        strict: bool = True,
    ):
        self._directives: dict[str, Directive] = dict(
            DEFAULT_DIRECTIVES if directives is None else directives
        )
        self.globals: dict[str, Any] = dict(globals or {})
        self.strict = strict

    @property
    def directives(self) -> DirectiveRegistry:
        """Registered directives (dict-like, copy-on-write)."""
        return DirectiveRegistry(self, "_directives")

    def _compile_module(self, source: str, name: str | None) -> ast.Module:
        directives = self._directives
        nodes = tokenize(source, directives, name=name)
        return Compiler(directives).compile_to_module(nodes, name=name, source=source)

    def from_string(self, source: str, name: str | None = None) -> Template:
        """Compile template source into a Template.

        Raises:
            TemplateSyntaxError: Malformed directive call (arity, modifier,
                argument syntax, unclosed parenthesis)
        """
        module = self._compile_module(source, name)
        code = compile(module, name or "<template>", "exec")
        logger.debug(f"Created template {name or '(inline)'}")
        return Template(
            code,
            name=name,
            source=source,
            globals=self.globals,
            strict=self.strict,
        )

    def compile_string(self, source: str, name: str | None = None) -> str:
        """Return the Python source generated for a template."""
        return ast.unparse(self._compile_module(source, name))

    def render_string(self, source: str, *args: Any, **kwargs: Any) -> str:
        """Compile and render ``source`` in one step."""
        return self.from_string(source).render(*args, **kwargs)
