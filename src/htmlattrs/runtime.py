"""Attribute rendering policy.

Pure functions that turn an attribute name and a dynamic value into an
HTML attribute fragment. Compiled templates call these at render time;
they can also be called directly.

Every renderer returns one of three shapes:

- ``""`` when the value suppresses the attribute
- ``name`` for a bare attribute (``disabled``)
- ``name="value"`` with the value HTML-escaped

Truthiness is decided explicitly by ``classify()`` rather than by Python's
``bool()``: ``0``, ``0.0`` and ``"0"`` are falsy for plain attributes,
whitespace-only strings are blank, and booleans have their own rules.

Thread-Safety:
All functions are stateless and safe for concurrent use.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from htmlattrs.utils.html import html_escape

DATA_PREFIX = "data-"
ARIA_PREFIX = "aria-"


class Verdict(Enum):
    """What a classified value does to its attribute."""

    SUPPRESS = "suppress"
    BARE = "bare"
    VALUED = "valued"


class Policy(Enum):
    """Classifier variant applied by a directive family."""

    PLAIN = "plain"
    FORCED = "forced"
    ARIA = "aria"


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying a value: a verdict plus the text to render."""

    verdict: Verdict
    text: str = ""


_SUPPRESS = Classification(Verdict.SUPPRESS)
_BARE = Classification(Verdict.BARE)


def stringify(value: Any) -> str:
    """Convert a dynamic value to its attribute text.

    Booleans become ``"true"``/``"false"`` and integral floats drop their
    fractional part (``1.0`` -> ``"1"``). Everything else uses ``str()``.
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Characters a blank value may consist of. Includes NUL and U+180E, which
# str.strip() keeps, and leaves out U+001C..U+001F, which it strips.
_BLANK_CHARS = (
    " \t\n\r\x0b\x0c\x00\x85\u00a0\u1680\u180e"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _is_blank(text: str) -> bool:
    return not text.strip(_BLANK_CHARS)


def classify(
    value: Any, policy: Policy = Policy.PLAIN, *, negated: bool = False
) -> Classification:
    """Classify a value into SUPPRESS, BARE or VALUED.

    Args:
        value: None, bool, int, float or str (other objects are stringified)
        policy: Classifier variant of the directive family
        negated: Swap the boolean literals (ARIA policy only)

    Example:
        >>> classify(True)
        Classification(verdict=<Verdict.BARE: 'bare'>, text='')
        >>> classify(0, Policy.FORCED).text
        '0'
    """
    if value is None:
        return _SUPPRESS

    if policy is Policy.FORCED:
        return Classification(Verdict.VALUED, stringify(value))

    if isinstance(value, bool):
        if policy is Policy.ARIA:
            return Classification(Verdict.VALUED, stringify(value is not negated))
        return _BARE if value else _SUPPRESS

    text = stringify(value)
    if _is_blank(text):
        return _SUPPRESS
    # "0" is falsy for plain attributes; aria renders it as a real value.
    if policy is Policy.PLAIN and text == "0":
        return _SUPPRESS
    return Classification(Verdict.VALUED, text)


def render_classification(name: str, classification: Classification, value: Any = None) -> str:
    """Render a classification for attribute ``name``.

    ``value`` is consulted only to keep ``__html__`` objects unescaped.
    """
    verdict = classification.verdict
    if verdict is Verdict.SUPPRESS:
        return ""
    if verdict is Verdict.BARE:
        return name
    if hasattr(value, "__html__"):
        return f'{name}="{html_escape(value)}"'
    return f'{name}="{html_escape(classification.text)}"'


def prefixed(prefix: str, attribute: str) -> str:
    """Apply a family prefix once: ``prefixed("data-", "data-id") == "data-id"``."""
    if not prefix or attribute.startswith(prefix):
        return attribute
    return prefix + attribute


# =============================================================================
# Family renderers
# =============================================================================
#
# Attribute names may carry the same markers as directive specifiers:
# a trailing "=" forces a value, a leading "!" negates (aria only).


def split_markers(attribute: str) -> tuple[str, bool, bool]:
    """Split an attribute specifier into ``(name, forced, negated)``.

    Example:
        >>> split_markers("!hidden")
        ('hidden', False, True)
        >>> split_markers("value=")
        ('value', True, False)
    """
    negated = attribute.startswith("!")
    if negated:
        attribute = attribute[1:]
    forced = attribute.endswith("=")
    if forced:
        attribute = attribute[:-1]
    return attribute, forced, negated


def escaped_text(value: Any) -> str:
    """Attribute text for ``value``, HTML-escaped."""
    if hasattr(value, "__html__"):
        return html_escape(value)
    return html_escape(stringify(value))


def render_flag(attribute: str, value: Any) -> str:
    """Render a boolean attribute: bare name when truthy, nothing otherwise.

    Example:
        >>> render_flag("disabled", "yes")
        'disabled'
        >>> render_flag("disabled", "0")
        ''
    """
    if classify(value).verdict is Verdict.SUPPRESS:
        return ""
    return attribute


render_bool = render_flag


def render_attr(attribute: str, value: Any) -> str:
    """Render ``attribute="value"``, a bare name for True, or nothing.

    A trailing ``=`` on ``attribute`` switches to forced mode.

    Example:
        >>> render_attr("title", "Hello")
        'title="Hello"'
        >>> render_attr("hidden", True)
        'hidden'
        >>> render_attr("title", "   ")
        ''
    """
    forced = attribute.endswith("=")
    name = attribute[:-1] if forced else attribute
    policy = Policy.FORCED if forced else Policy.PLAIN
    return render_classification(name, classify(value, policy), value)


def render_attr_forced(attribute: str, value: Any) -> str:
    """Render ``attribute="value"`` for every value except None.

    Example:
        >>> render_attr_forced("value", False)
        'value="false"'
        >>> render_attr_forced("value", "")
        'value=""'
    """
    name = attribute[:-1] if attribute.endswith("=") else attribute
    return render_classification(name, classify(value, Policy.FORCED), value)


render_enum = render_attr
render_enum_forced = render_attr_forced


def render_data(attribute: str, value: Any) -> str:
    """Like ``render_attr()`` with a ``data-`` prefix."""
    return render_attr(prefixed(DATA_PREFIX, attribute), value)


def render_data_forced(attribute: str, value: Any) -> str:
    """Like ``render_attr_forced()`` with a ``data-`` prefix."""
    return render_attr_forced(prefixed(DATA_PREFIX, attribute), value)


def render_aria(attribute: str, value: Any, negated: bool = False) -> str:
    """Render an ``aria-`` attribute.

    Booleans always render as ``"true"``/``"false"``, swapped when negated
    (``negated=True`` or a leading ``!`` on the name). None, empty and
    whitespace-only strings render nothing.

    Example:
        >>> render_aria("hidden", False)
        'aria-hidden="false"'
        >>> render_aria("!expanded", True)
        'aria-expanded="false"'
    """
    name, _, marked = split_markers(attribute)
    classification = classify(value, Policy.ARIA, negated=negated or marked)
    return render_classification(prefixed(ARIA_PREFIX, name), classification, value)


def render_neat(attribute: str, value: Any) -> str:
    """Runtime equivalent of the inline code the ``neat`` directive emits."""
    if is_suppressed(value):
        return ""
    if value is True:
        return attribute
    return f'{attribute}="{escaped_text(value)}"'


def is_suppressed(value: Any) -> bool:
    """True when ``value`` suppresses a plain attribute."""
    return classify(value).verdict is Verdict.SUPPRESS


RENDERERS: dict[str, Callable[..., str]] = {
    "flag": render_flag,
    "bool": render_bool,
    "attr": render_attr,
    "attr_forced": render_attr_forced,
    "enum": render_enum,
    "enum_forced": render_enum_forced,
    "data": render_data,
    "data_forced": render_data_forced,
    "aria": render_aria,
    "neat": render_neat,
}
