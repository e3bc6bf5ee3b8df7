"""Exceptions for htmlattrs.

Exception Hierarchy:
TemplateError (base)
├── TemplateSyntaxError            # Compile-time problem in template source
│   └── DirectiveError             # Compile-time problem in a directive call
│       ├── DirectiveArityError        # Not exactly two arguments
│       ├── UnsupportedModifierError   # Forced/negation marker not allowed
│       └── DirectiveSyntaxError       # Argument is not a Python expression
└── UndefinedError                 # Undefined variable access (strict mode)

Directive errors are only ever raised while compiling. Rendering never
raises one: value classification is total over None/bool/int/float/str.

Example:
    ```
    H-DIR-001: The @attr directive requires exactly 2 parameters.
      --> page.html:3
       |
      3 | <div @attr('title')>
       |
    ```

"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Searchable error codes for htmlattrs errors.

    Format: H-{CATEGORY}-{NUMBER}
    Categories: TPL (template source), DIR (directive), RUN (runtime)
    """

    # Template source errors (H-TPL-xxx)
    SYNTAX_ERROR = "H-TPL-001"
    UNCLOSED_DIRECTIVE = "H-TPL-002"

    # Directive errors (H-DIR-xxx)
    DIRECTIVE_ARITY = "H-DIR-001"
    UNSUPPORTED_MODIFIER = "H-DIR-002"
    DIRECTIVE_SYNTAX = "H-DIR-003"

    # Runtime errors (H-RUN-xxx)
    UNDEFINED_VARIABLE = "H-RUN-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'template', 'directive', 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "TPL": "template",
            "DIR": "directive",
            "RUN": "runtime",
        }.get(prefix, "unknown")


class TemplateError(Exception):
    """Base exception for all htmlattrs errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short, human-readable summary with its code."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        return header


class TemplateSyntaxError(TemplateError):
    """Compile-time error in template source.

    When ``name`` or ``lineno`` is known, ``str(exc)`` carries the location
    and a snippet of the offending line. Without location information the
    message is reported unchanged, which is what callers compiling a single
    directive expression see.
    """

    code: ErrorCode | None = ErrorCode.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        name: str | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.name = name
        self.source = source
        super().__init__(self._format_message())

    def _location(self) -> str:
        location = self.name or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
        return location

    def _snippet(self) -> list[str]:
        if not (self.source and self.lineno):
            return []
        lines = self.source.splitlines()
        if not 0 < self.lineno <= len(lines):
            return []
        return ["   |", f"{self.lineno:>3} | {lines[self.lineno - 1]}", "   |"]

    def _format_message(self) -> str:
        if self.lineno is None and self.name is None:
            return self.message
        return "\n".join([self.message, f"  --> {self._location()}", *self._snippet()])

    def with_location(
        self, lineno: int, name: str | None, source: str | None
    ) -> TemplateSyntaxError:
        """Return a copy of this error annotated with template location."""
        return type(self)(self.message, lineno=lineno, name=name, source=source)

    def format_compact(self) -> str:
        """Format syntax error as structured terminal diagnostic."""
        code_prefix = f"{self.code.value}: " if self.code else ""
        parts = [f"{code_prefix}{self.message}", f"  --> {self._location()}"]
        parts.extend(self._snippet())
        return "\n".join(parts)


class UnclosedDirectiveError(TemplateSyntaxError):
    """A directive call in template source has no closing parenthesis."""

    code: ErrorCode | None = ErrorCode.UNCLOSED_DIRECTIVE


class DirectiveError(TemplateSyntaxError):
    """Base class for errors raised while compiling a directive call."""


class DirectiveArityError(DirectiveError):
    """Directive arguments did not split into exactly two non-empty parts.

    Example:
        >>> compile_directive("attr", "'foo'")
        DirectiveArityError: The @attr directive requires exactly 2 parameters.
    """

    code: ErrorCode | None = ErrorCode.DIRECTIVE_ARITY


class UnsupportedModifierError(DirectiveError):
    """Directive family does not support the forced or negation marker used.

    Example:
        >>> compile_directive("bool", "'!foo', true")
        UnsupportedModifierError: The @bool directive does not support negation.
    """

    code: ErrorCode | None = ErrorCode.UNSUPPORTED_MODIFIER


class DirectiveSyntaxError(DirectiveError):
    """A directive argument is not a valid Python expression."""

    code: ErrorCode | None = ErrorCode.DIRECTIVE_SYNTAX


class UndefinedError(TemplateError):
    """Raised when a data expression references an undefined variable.

    Strict mode is enabled by default. When a directive's data expression
    references a name that is neither in the render context nor in the
    environment globals, this error is raised instead of silently using
    None.

    If ``available_names`` is provided, a "Did you mean?" suggestion is
    included when a close match is found.
    """

    code: ErrorCode | None = ErrorCode.UNDEFINED_VARIABLE

    def __init__(
        self,
        name: str,
        template: str | None = None,
        available_names: frozenset[str] | None = None,
    ):
        self.name = name
        self.template = template or "<template>"
        self._available_names = available_names
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Undefined variable '{self.name}' in {self.template}"
        if self._available_names:
            from difflib import get_close_matches

            matches = get_close_matches(self.name, self._available_names, n=1, cutoff=0.6)
            if matches:
                msg += f". Did you mean '{matches[0]}'?"
        return msg
