"""Property-based tests for the attribute rendering policy.

- None always suppresses
- Blank strings suppress unless the value is forced
- Forced attributes never suppress a present value
- Rendered values never contain raw HTML-significant characters
- Compiled templates render exactly what the runtime renderers return
- Rendering is idempotent
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from htmlattrs import Environment, runtime

from .strategies import (
    attribute_names,
    blank_strings,
    dynamic_values,
    present_values,
    unsafe_text,
)

_PLAIN_RENDERERS = [
    runtime.render_flag,
    runtime.render_bool,
    runtime.render_attr,
    runtime.render_enum,
    runtime.render_data,
    runtime.render_aria,
    runtime.render_neat,
]

_FORCED_RENDERERS = [
    runtime.render_attr_forced,
    runtime.render_enum_forced,
    runtime.render_data_forced,
]

_env = Environment()


class TestRenderProperties:
    @given(name=attribute_names, renderer=st.sampled_from(_PLAIN_RENDERERS + _FORCED_RENDERERS))
    def test_none_suppresses(self, name, renderer) -> None:
        assert renderer(name, None) == ""

    @given(name=attribute_names, value=blank_strings, renderer=st.sampled_from(_PLAIN_RENDERERS))
    def test_blank_suppresses(self, name, value, renderer) -> None:
        assert renderer(name, value) == ""

    @given(name=attribute_names, value=present_values)
    def test_forced_never_suppresses(self, name, value) -> None:
        result = runtime.render_attr_forced(name, value)
        assert result.startswith(f'{name}="')
        assert result.endswith('"')

    @given(name=attribute_names, value=unsafe_text)
    @settings(max_examples=200)
    def test_values_are_escaped(self, name, value) -> None:
        for renderer in (runtime.render_attr_forced, runtime.render_aria):
            result = renderer(name, value)
            inner = result.partition('="')[2][:-1]
            for ch in "<>'\"":
                assert ch not in inner

    @given(name=attribute_names, value=dynamic_values, renderer=st.sampled_from(_PLAIN_RENDERERS))
    def test_idempotent(self, name, value, renderer) -> None:
        assert renderer(name, value) == renderer(name, value)

    @given(value=dynamic_values)
    def test_flag_never_writes_value(self, value) -> None:
        assert runtime.render_flag("disabled", value) in ("", "disabled")


class TestCompiledMatchesRuntime:
    @given(
        directive=st.sampled_from(["flag", "bool", "attr", "enum", "data", "aria", "neat"]),
        value=dynamic_values,
    )
    @settings(max_examples=300)
    def test_plain_directives(self, directive, value) -> None:
        template = _env.from_string(f"@{directive}('foo', value)")
        expected = runtime.RENDERERS[directive]("foo", value)
        assert template.render(value=value) == expected

    @given(directive=st.sampled_from(["attr", "enum", "data"]), value=dynamic_values)
    def test_forced_directives(self, directive, value) -> None:
        template = _env.from_string(f"@{directive}('foo=', value)")
        expected = runtime.RENDERERS[f"{directive}_forced"]("foo", value)
        assert template.render(value=value) == expected
