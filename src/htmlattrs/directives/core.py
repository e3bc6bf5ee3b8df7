"""Directive table and directive compilation.

Each directive pairs a compile step (argument text -> CompiledFragment)
with a runtime renderer. The set of directives is fixed, so dispatch is a
static name -> Directive mapping:

    ```python
    DEFAULT_DIRECTIVES["attr"].compile("'title', post.title")
    DEFAULT_DIRECTIVES["attr"].render("title", "Hello")
    ```

Compilation is two-phase. The attribute specifier is inspected as *text*
for its modifiers and, when it is a string literal, reduced to a constant
name. The data expression is parsed and embedded verbatim into a call to
the family's renderer, so it is evaluated once per render:

    @attr('value=', count)   ->   _render_attr_forced('value', count)
    @aria('!hidden', open)   ->   _render_aria('hidden', open, True)

``neat`` is the exception: it expands into an inline conditional
expression instead of a renderer call.

"""

from __future__ import annotations

import ast
import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from htmlattrs.directives.specifier import AttributeSpec, is_forced, is_negated, parse_specifier
from htmlattrs.exceptions import (
    DirectiveArityError,
    DirectiveError,
    DirectiveSyntaxError,
    UnsupportedModifierError,
)
from htmlattrs.runtime import ARIA_PREFIX, DATA_PREFIX, RENDERERS

logger = logging.getLogger(__name__)

# How a family treats the forced-value marker:
# "render" selects the forced renderer, "strip" drops the marker, "reject" raises.
ForcedMode = Literal["render", "strip", "reject"]


@dataclass(frozen=True, slots=True)
class CompiledFragment:
    """A compiled directive call, ready to embed in a template module.

    Attributes:
        directive: Directive name (``attr``, ``aria``, ...)
        spec: Parsed specifier, or None when it was not a string literal
        attribute_source: Specifier text as written
        data_source: Data expression text as written
        attribute_expr: Python AST evaluating to the attribute name
        data_expr: Python AST of the data expression
        renderer: Runtime renderer key (``attr_forced``, ``aria``, ...)
        negated: Pass ``negated=True`` to the renderer
        inline: Expand inline instead of calling the renderer
    """

    directive: str
    spec: AttributeSpec | None
    attribute_source: str
    data_source: str
    attribute_expr: ast.expr
    data_expr: ast.expr
    renderer: str
    negated: bool = False
    inline: bool = False

    def to_ast(self, transform: Callable[[ast.expr], ast.expr] | None = None) -> ast.expr:
        """Build the expression for this fragment.

        ``transform`` is applied to copies of the attribute and data
        expressions only (e.g. to resolve names against a render context);
        the generated helper calls are left untouched.
        """
        attribute = copy.deepcopy(self.attribute_expr)
        data = copy.deepcopy(self.data_expr)
        if transform is not None:
            attribute = transform(attribute)
            data = transform(data)

        if self.inline:
            return _inline_attribute(attribute, data)

        args: list[ast.expr] = [attribute, data]
        if self.negated:
            args.append(ast.Constant(value=True))
        return _call(f"_render_{self.renderer}", *args)

    @property
    def source(self) -> str:
        """Python source of the compiled expression."""
        return ast.unparse(self.to_ast())


def _call(func: str, *args: ast.expr) -> ast.Call:
    return ast.Call(func=ast.Name(id=func, ctx=ast.Load()), args=list(args), keywords=[])


def _inline_attribute(attribute: ast.expr, data: ast.expr) -> ast.expr:
    """Inline plain-attribute rendering.

    (lambda _n, _v: '' if _is_suppressed(_v)
        else _n if _v is True
        else _n + '="' + _escaped_text(_v) + '"')(attribute, data)
    """

    def name() -> ast.Name:
        return ast.Name(id="_n", ctx=ast.Load())

    def value() -> ast.Name:
        return ast.Name(id="_v", ctx=ast.Load())

    valued = ast.BinOp(
        left=ast.BinOp(
            left=ast.BinOp(left=name(), op=ast.Add(), right=ast.Constant(value='="')),
            op=ast.Add(),
            right=_call("_escaped_text", value()),
        ),
        op=ast.Add(),
        right=ast.Constant(value='"'),
    )
    body = ast.IfExp(
        test=_call("_is_suppressed", value()),
        body=ast.Constant(value=""),
        orelse=ast.IfExp(
            test=ast.Compare(left=value(), ops=[ast.Is()], comparators=[ast.Constant(value=True)]),
            body=name(),
            orelse=valued,
        ),
    )
    func = ast.Lambda(
        args=ast.arguments(
            posonlyargs=[],
            args=[ast.arg(arg="_n"), ast.arg(arg="_v")],
            kwonlyargs=[],
            kw_defaults=[],
            defaults=[],
        ),
        body=body,
    )
    return ast.Call(func=func, args=[attribute, data], keywords=[])


def _parse_expression(directive: str, text: str) -> ast.expr:
    try:
        return ast.parse(text, mode="eval").body
    except SyntaxError as e:
        raise DirectiveSyntaxError(
            f"The @{directive} directive has an invalid argument: {text!r}"
        ) from e


@dataclass(frozen=True, slots=True)
class Directive:
    """One directive family.

    Attributes:
        name: Directive name as written after ``@``
        renderer: Key of the runtime renderer in ``RENDERERS``
        forced: Treatment of the forced-value marker
        negation: Whether the negation marker is allowed
        prefix: Attribute prefix applied by the renderer
        inline: Expand inline instead of calling the renderer
    """

    name: str
    renderer: str
    forced: ForcedMode = "reject"
    negation: bool = False
    prefix: str = ""
    inline: bool = False

    def __post_init__(self) -> None:
        if self.renderer not in RENDERERS:
            raise ValueError(f"Unknown renderer {self.renderer!r} for @{self.name}")
        if self.forced == "render" and f"{self.renderer}_forced" not in RENDERERS:
            raise ValueError(
                f"Renderer {self.renderer!r} has no forced variant; "
                f"@{self.name} cannot use forced='render'"
            )

    def compile(self, expression: str) -> CompiledFragment:
        """Compile raw argument text into a CompiledFragment.

        Raises:
            DirectiveArityError: Arguments are not exactly two non-empty parts
            UnsupportedModifierError: Marker not supported by this family
            DirectiveSyntaxError: An argument is not a Python expression
        """
        parts = expression.split(",", 1)
        if len(parts) != 2 or not (parts[0].strip() and parts[1].strip()):
            raise DirectiveArityError(
                f"The @{self.name} directive requires exactly 2 parameters."
            )
        attribute, data = (part.strip() for part in parts)

        if is_negated(attribute) and not self.negation:
            raise UnsupportedModifierError(
                f"The @{self.name} directive does not support negation."
            )
        if is_forced(attribute) and self.forced == "reject":
            raise UnsupportedModifierError(
                f"The @{self.name} directive does not support forced values."
            )

        spec = parse_specifier(attribute, self.prefix)
        if spec is not None:
            attribute_expr: ast.expr = ast.Constant(value=spec.name)
        else:
            attribute_expr = _parse_expression(self.name, attribute)
        data_expr = _parse_expression(self.name, data)

        renderer = self.renderer
        if spec is not None and spec.forced and self.forced == "render":
            renderer = f"{renderer}_forced"

        fragment = CompiledFragment(
            directive=self.name,
            spec=spec,
            attribute_source=attribute,
            data_source=data,
            attribute_expr=attribute_expr,
            data_expr=data_expr,
            renderer=renderer,
            negated=spec is not None and spec.negated,
            inline=self.inline,
        )
        logger.debug(f"Compiled @{self.name}({expression.strip()}) -> {fragment.source}")
        return fragment

    def render(self, attribute: str, value: Any) -> str:
        """Render directly, without compiling.

        ``attribute`` may carry the same markers as a specifier literal
        (``"value="``, ``"!hidden"``) where the family supports them.
        """
        return RENDERERS[self.renderer](attribute, value)


DEFAULT_DIRECTIVES: dict[str, Directive] = {
    "flag": Directive("flag", "flag"),
    "bool": Directive("bool", "bool"),
    "attr": Directive("attr", "attr", forced="render"),
    "enum": Directive("enum", "enum", forced="render"),
    "data": Directive("data", "data", forced="render", prefix=DATA_PREFIX),
    "aria": Directive("aria", "aria", forced="strip", negation=True, prefix=ARIA_PREFIX),
    "neat": Directive("neat", "neat", inline=True),
}


def get_directive(name: str) -> Directive:
    try:
        return DEFAULT_DIRECTIVES[name]
    except KeyError:
        raise DirectiveError(f"Unknown directive @{name}.") from None


def compile_directive(name: str, expression: str) -> CompiledFragment:
    """Compile ``@name(expression)`` with the default directive table.

    Example:
        >>> compile_directive("data", "'id', user.id").source
        "_render_data('id', user.id)"
    """
    return get_directive(name).compile(expression)


def render_directive(name: str, attribute: str, value: Any) -> str:
    """Render a directive's attribute directly.

    Example:
        >>> render_directive("data", "id", 123)
        'data-id="123"'
    """
    return get_directive(name).render(attribute, value)
