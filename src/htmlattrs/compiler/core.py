"""Template compiler.

Transforms the lexer's node list into a Python ``ast.Module`` defining a
``render(ctx)`` function, then compiles it to a code object:

    ```python
    def render(ctx):
        buf = []
        _append = buf.append
        _append('<div ')
        _append(_render_attr('title', _lookup(ctx, 'title')))
        _append('>Content</div>')
        return ''.join(buf)
    ```

Directive arguments are compiled once here; the data expression runs on
every render. Free names in data expressions are rewritten into
``_lookup(ctx, name)`` calls so they resolve against the render context.

"""

from __future__ import annotations

import ast
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from htmlattrs.exceptions import DirectiveError
from htmlattrs.nodes import Data, DirectiveCall, Node

if TYPE_CHECKING:
    import types

    from htmlattrs.directives import Directive

logger = logging.getLogger(__name__)


def _stored_names(node: ast.AST) -> set[str]:
    return {
        child.id
        for child in ast.walk(node)
        if isinstance(child, ast.Name) and isinstance(child.ctx, ast.Store)
    }


def _walrus_targets(node: ast.AST) -> set[str]:
    """Names bound by ``:=`` at the top level of a data expression."""
    return {
        child.target.id
        for child in ast.walk(node)
        if isinstance(child, ast.NamedExpr) and isinstance(child.target, ast.Name)
    }


class _ContextLookup(ast.NodeTransformer):
    """Rewrite free ``Name`` loads into ``_lookup(ctx, 'name')``.

    Lambda parameters and comprehension targets are local only inside the
    lambda or comprehension that binds them. The first comprehension
    iterable is evaluated in the enclosing scope, as Python does.
    """

    def __init__(self, bound: set[str]):
        self._scopes: list[set[str]] = [bound]

    def _is_bound(self, name: str) -> bool:
        return any(name in scope for scope in self._scopes)

    def visit_Lambda(self, node: ast.Lambda) -> ast.expr:
        args = node.args
        args.defaults = [self.visit(default) for default in args.defaults]
        args.kw_defaults = [
            None if default is None else self.visit(default) for default in args.kw_defaults
        ]
        params = {arg.arg for arg in (*args.posonlyargs, *args.args, *args.kwonlyargs)}
        for arg in (args.vararg, args.kwarg):
            if arg is not None:
                params.add(arg.arg)

        self._scopes.append(params)
        node.body = self.visit(node.body)
        self._scopes.pop()
        return node

    def _visit_comprehension(
        self, node: ast.ListComp | ast.SetComp | ast.GeneratorExp | ast.DictComp
    ) -> ast.expr:
        first = node.generators[0]
        first.iter = self.visit(first.iter)
        targets: set[str] = set()
        for generator in node.generators:
            targets |= _stored_names(generator.target)

        self._scopes.append(targets)
        for generator in node.generators[1:]:
            generator.iter = self.visit(generator.iter)
        for generator in node.generators:
            generator.ifs = [self.visit(test) for test in generator.ifs]
        if isinstance(node, ast.DictComp):
            node.key = self.visit(node.key)
            node.value = self.visit(node.value)
        else:
            node.elt = self.visit(node.elt)
        self._scopes.pop()
        return node

    visit_ListComp = _visit_comprehension
    visit_SetComp = _visit_comprehension
    visit_GeneratorExp = _visit_comprehension
    visit_DictComp = _visit_comprehension

    def visit_Name(self, node: ast.Name) -> ast.expr:
        if not isinstance(node.ctx, ast.Load) or self._is_bound(node.id):
            return node
        return ast.copy_location(
            ast.Call(
                func=ast.Name(id="_lookup", ctx=ast.Load()),
                args=[ast.Name(id="ctx", ctx=ast.Load()), ast.Constant(value=node.id)],
                keywords=[],
            ),
            node,
        )


def resolve_context_names(expr: ast.expr) -> ast.expr:
    """Make ``expr`` read its free variables from the render context."""
    result = _ContextLookup(_walrus_targets(expr)).visit(expr)
    assert isinstance(result, ast.expr)
    return result


class Compiler:
    """Compile a directive template to a Python code object.

    Attributes:
        _directives: Directive name -> Directive used for compilation
        _name: Template name for error messages
        _source: Template source for error snippets
    """

    __slots__ = ("_directives", "_name", "_source", "_directive_count")

    def __init__(self, directives: Mapping[str, Directive]):
        self._directives = directives
        self._name: str | None = None
        self._source: str | None = None
        self._directive_count = 0

    def compile(
        self,
        nodes: Sequence[Node],
        name: str | None = None,
        source: str | None = None,
    ) -> types.CodeType:
        """Compile template nodes to a code object ready for ``exec()``."""
        module = self.compile_to_module(nodes, name=name, source=source)
        return compile(module, name or "<template>", "exec")

    def compile_to_module(
        self,
        nodes: Sequence[Node],
        name: str | None = None,
        source: str | None = None,
    ) -> ast.Module:
        """Generate the ``ast.Module`` for template nodes."""
        self._name = name
        self._source = source
        self._directive_count = 0

        body: list[ast.stmt] = [
            ast.Assign(
                targets=[ast.Name(id="buf", ctx=ast.Store())],
                value=ast.List(elts=[], ctx=ast.Load()),
            ),
            ast.Assign(
                targets=[ast.Name(id="_append", ctx=ast.Store())],
                value=ast.Attribute(
                    value=ast.Name(id="buf", ctx=ast.Load()), attr="append", ctx=ast.Load()
                ),
            ),
        ]
        for node in nodes:
            body.extend(self._compile_node(node))
        body.append(
            ast.Return(
                value=ast.Call(
                    func=ast.Attribute(value=ast.Constant(value=""), attr="join", ctx=ast.Load()),
                    args=[ast.Name(id="buf", ctx=ast.Load())],
                    keywords=[],
                )
            )
        )

        render_func = ast.FunctionDef(
            name="render",
            args=ast.arguments(
                posonlyargs=[],
                args=[ast.arg(arg="ctx")],
                kwonlyargs=[],
                kw_defaults=[],
                defaults=[],
            ),
            body=body,
            decorator_list=[],
            returns=None,
            type_params=[],
        )
        module = ast.Module(body=[render_func], type_ignores=[])
        ast.fix_missing_locations(module)
        logger.debug(
            f"Compiled template {name or '<template>'}: "
            f"{len(nodes)} nodes, {self._directive_count} directives"
        )
        return module

    def _compile_node(self, node: Node) -> list[ast.stmt]:
        if isinstance(node, Data):
            return self._compile_data(node)
        if isinstance(node, DirectiveCall):
            return self._compile_directive(node)
        raise TypeError(f"Unknown template node: {type(node).__name__}")

    def _compile_data(self, node: Data) -> list[ast.stmt]:
        if not node.value:
            return []
        return [self._emit_output(ast.Constant(value=node.value))]

    def _compile_directive(self, node: DirectiveCall) -> list[ast.stmt]:
        directive = self._directives[node.name]
        try:
            fragment = directive.compile(node.expression)
        except DirectiveError as e:
            raise e.with_location(node.lineno, self._name, self._source) from e
        self._directive_count += 1
        return [self._emit_output(fragment.to_ast(resolve_context_names))]

    def _emit_output(self, value_expr: ast.expr) -> ast.stmt:
        return ast.Expr(
            value=ast.Call(
                func=ast.Name(id="_append", ctx=ast.Load()),
                args=[value_expr],
                keywords=[],
            ),
        )
