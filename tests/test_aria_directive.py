"""Tests for the @aria directive.

aria attributes always carry a value: booleans are spelled out as
"true"/"false" and empty or whitespace-only values omit the attribute.
"""

from __future__ import annotations

import pytest

from htmlattrs import DirectiveArityError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("test", 'aria-foo="test"'),
        (0, 'aria-foo="0"'),
        ("0", 'aria-foo="0"'),
        (1, 'aria-foo="1"'),
        (8, 'aria-foo="8"'),
        ("", ""),
        ("   ", ""),
        (None, ""),
        (True, 'aria-foo="true"'),
        (False, 'aria-foo="false"'),
        (
            "<script>alert('xss')</script>",
            'aria-foo="&lt;script&gt;alert(&#039;xss&#039;)&lt;/script&gt;"',
        ),
    ],
)
def test_aria_directive(render, value, expected) -> None:
    assert render("@aria('foo', bar)", bar=value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, 'aria-expanded="false"'),
        (False, 'aria-expanded="true"'),
        (None, ""),
        ("", ""),
        ("  ", ""),
        ("menu", 'aria-expanded="menu"'),
    ],
)
def test_aria_directive_negated(render, value, expected) -> None:
    assert render("@aria('!expanded', collapsed)", collapsed=value) == expected


def test_aria_directive_in_html(env) -> None:
    template = env.from_string(
        '<button @aria("label", label) @aria("hidden", hidden)>Click</button>'
    )
    assert template.render(label="Click me", hidden=True) == (
        '<button aria-label="Click me" aria-hidden="true">Click</button>'
    )
    assert template.render(label="Click me", hidden="") == (
        '<button aria-label="Click me" >Click</button>'
    )
    assert template.render(label=None, hidden=None) == "<button  >Click</button>"


def test_aria_forced_marker_is_accepted(render) -> None:
    assert render("@aria('foo=', bar)", bar=False) == 'aria-foo="false"'
    assert render("@aria('foo=', bar)", bar="") == ""


def test_aria_prefix_is_applied_once(render) -> None:
    assert render("@aria('aria-foo', True)") == 'aria-foo="true"'


def test_aria_directive_parameter_count(env) -> None:
    with pytest.raises(
        DirectiveArityError, match=r"The @aria directive requires exactly 2 parameters\."
    ):
        env.from_string("@aria('foo')")
