"""Environment, directive registry and exceptions."""

from htmlattrs.exceptions import (
    DirectiveArityError,
    DirectiveError,
    DirectiveSyntaxError,
    ErrorCode,
    TemplateError,
    TemplateSyntaxError,
    UnclosedDirectiveError,
    UndefinedError,
    UnsupportedModifierError,
)
from htmlattrs.environment.core import Environment
from htmlattrs.environment.registry import DirectiveRegistry

__all__ = [
    "DirectiveArityError",
    "DirectiveError",
    "DirectiveRegistry",
    "DirectiveSyntaxError",
    "Environment",
    "ErrorCode",
    "TemplateError",
    "TemplateSyntaxError",
    "UnclosedDirectiveError",
    "UndefinedError",
    "UnsupportedModifierError",
]
