import pytest

from htmlattrs.directives.specifier import AttributeSpec, is_forced, is_negated, parse_specifier


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("'foo'", AttributeSpec("foo")),
        ('"foo"', AttributeSpec("foo")),
        ("'foo='", AttributeSpec("foo", forced=True)),
        ('"foo="', AttributeSpec("foo", forced=True)),
        ("'!foo'", AttributeSpec("foo", negated=True)),
        ('"!foo="', AttributeSpec("foo", forced=True, negated=True)),
        ("'data-id'", AttributeSpec("data-id")),
    ],
)
def test_parse_specifier(text, expected) -> None:
    assert parse_specifier(text) == expected


@pytest.mark.parametrize("text", ["name", "1", "None", "attrs['x']", "'a' +"])
def test_non_literal_specifier(text) -> None:
    assert parse_specifier(text) is None


def test_markers_are_textual() -> None:
    assert is_forced("prefix + 'x='")
    assert not is_forced("'x'")
    assert is_negated("'!' + name")
    assert not is_negated("not_negated")


def test_full_name_applies_prefix_once() -> None:
    assert AttributeSpec("id", prefix="data-").full_name == "data-id"
    assert AttributeSpec("data-id", prefix="data-").full_name == "data-id"
    assert parse_specifier("'label'", prefix="aria-").full_name == "aria-label"
