import ast

import pytest

from htmlattrs import (
    DEFAULT_DIRECTIVES,
    DirectiveArityError,
    DirectiveError,
    UnsupportedModifierError,
    compile_directive,
    render_directive,
)


@pytest.mark.parametrize(
    ("name", "expression", "expected"),
    [
        ("flag", "'disabled', is_busy", "_render_flag('disabled', is_busy)"),
        ("bool", "'checked', item.done", "_render_bool('checked', item.done)"),
        ("attr", "'foo', bar", "_render_attr('foo', bar)"),
        ("attr", "'foo=', bar", "_render_attr_forced('foo', bar)"),
        ("enum", '"foo=", bar', "_render_enum_forced('foo', bar)"),
        ("data", "'id', user['id']", "_render_data('id', user['id'])"),
        ("data", "'id=', 0", "_render_data_forced('id', 0)"),
        ("aria", "'hidden', open", "_render_aria('hidden', open)"),
        ("aria", "'!hidden', open", "_render_aria('hidden', open, True)"),
        ("aria", "'hidden=', open", "_render_aria('hidden', open)"),
        ("attr", "name, value", "_render_attr(name, value)"),
        ("attr", "  'foo'  ,   bar  ", "_render_attr('foo', bar)"),
        ("attr", "'foo', f(a, b)", "_render_attr('foo', f(a, b))"),
    ],
)
def test_compiled_source(name, expression, expected) -> None:
    assert compile_directive(name, expression).source == expected


def test_fragment_fields() -> None:
    fragment = compile_directive("data", "'id=', user.id")
    assert fragment.directive == "data"
    assert fragment.spec is not None
    assert fragment.spec.forced
    assert fragment.spec.full_name == "data-id"
    assert fragment.attribute_source == "'id='"
    assert fragment.data_source == "user.id"
    assert fragment.renderer == "data_forced"


def test_non_literal_specifier_has_no_spec() -> None:
    fragment = compile_directive("attr", "name, value")
    assert fragment.spec is None


def test_neat_is_inline() -> None:
    fragment = compile_directive("neat", "'foo', bar")
    assert fragment.inline
    node = fragment.to_ast()
    assert isinstance(node, ast.Call)
    assert isinstance(node.func, ast.Lambda)


def test_to_ast_transform_only_touches_arguments() -> None:
    fragment = compile_directive("attr", "'foo', bar")

    def upper_names(expr: ast.expr) -> ast.expr:
        for child in ast.walk(expr):
            if isinstance(child, ast.Name):
                child.id = child.id.upper()
        return expr

    assert ast.unparse(fragment.to_ast(upper_names)) == "_render_attr('foo', BAR)"
    # The fragment itself is unchanged.
    assert fragment.source == "_render_attr('foo', bar)"


@pytest.mark.parametrize("expression", ["'foo'", "'foo', ", ", bar", "", "   "])
@pytest.mark.parametrize("name", sorted(DEFAULT_DIRECTIVES))
def test_arity(name, expression) -> None:
    with pytest.raises(DirectiveArityError) as exc_info:
        compile_directive(name, expression)
    assert str(exc_info.value) == f"The @{name} directive requires exactly 2 parameters."


@pytest.mark.parametrize(
    ("name", "specifier", "message"),
    [
        ("flag", "'!foo'", "does not support negation"),
        ("bool", "'!foo'", "does not support negation"),
        ("attr", "'!foo'", "does not support negation"),
        ("enum", '"!foo"', "does not support negation"),
        ("data", "'!foo'", "does not support negation"),
        ("neat", "'!foo'", "does not support negation"),
        ("flag", "'foo='", "does not support forced values"),
        ("bool", '"foo="', "does not support forced values"),
        ("neat", "'foo='", "does not support forced values"),
    ],
)
def test_unsupported_modifiers(name, specifier, message) -> None:
    with pytest.raises(UnsupportedModifierError) as exc_info:
        compile_directive(name, f"{specifier}, True")
    assert str(exc_info.value) == f"The @{name} directive {message}."


def test_unknown_directive() -> None:
    with pytest.raises(DirectiveError, match="Unknown directive @nope"):
        compile_directive("nope", "'a', b")


@pytest.mark.parametrize(
    ("name", "attribute", "value", "expected"),
    [
        ("flag", "disabled", 1, "disabled"),
        ("bool", "disabled", "0", ""),
        ("attr", "foo", True, "foo"),
        ("attr", "foo=", False, 'foo="false"'),
        ("enum", "size", "lg", 'size="lg"'),
        ("data", "id", 123, 'data-id="123"'),
        ("aria", "hidden", True, 'aria-hidden="true"'),
        ("aria", "!hidden", True, 'aria-hidden="false"'),
        ("neat", "foo", "x", 'foo="x"'),
    ],
)
def test_render_directive(name, attribute, value, expected) -> None:
    assert render_directive(name, attribute, value) == expected
    assert DEFAULT_DIRECTIVES[name].render(attribute, value) == expected
