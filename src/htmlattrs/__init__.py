"""htmlattrs: conditional HTML attribute directives.

Seven directives render an HTML attribute from a name and a dynamic value,
or nothing when the value says the attribute should be absent:

    @flag / @bool   bare attribute when truthy         disabled
    @attr / @enum   valued attribute, bare for True    title="Hello"
    @data           data- prefixed @attr               data-id="7"
    @aria           aria- prefixed, booleans spelled   aria-hidden="false"
    @neat           @attr expanded inline

Quickstart:
    >>> from htmlattrs import Environment
    >>> env = Environment()
    >>> template = env.from_string('<button @bool("disabled", busy) @aria("label", label)>')
    >>> template.render(busy=False, label="Save")
    '<button  aria-label="Save">'

Direct rendering, no template:
    >>> from htmlattrs import render_attr, render_aria
    >>> render_attr("value=", 0)
    'value="0"'
    >>> render_aria("expanded", True)
    'aria-expanded="true"'

Architecture:
Template Source -> Lexer -> nodes -> Compiler -> Python AST -> exec()

Directive arguments are inspected once, at compile time: the attribute
specifier for its ``=`` (forced) and ``!`` (negated) markers, the data
expression for syntax. At render time only the data expression runs and
its value goes through the classifier in ``htmlattrs.runtime``.

"""

from htmlattrs.directives import (
    DEFAULT_DIRECTIVES,
    AttributeSpec,
    CompiledFragment,
    Directive,
    compile_directive,
    render_directive,
)
from htmlattrs.environment import DirectiveRegistry, Environment
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
from htmlattrs.runtime import (
    Classification,
    Policy,
    Verdict,
    classify,
    render_aria,
    render_attr,
    render_attr_forced,
    render_bool,
    render_data,
    render_data_forced,
    render_enum,
    render_enum_forced,
    render_flag,
    render_neat,
)
from htmlattrs.template import Template
from htmlattrs.utils.html import html_escape

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DIRECTIVES",
    "AttributeSpec",
    "Classification",
    "CompiledFragment",
    "Directive",
    "DirectiveArityError",
    "DirectiveError",
    "DirectiveRegistry",
    "DirectiveSyntaxError",
    "Environment",
    "ErrorCode",
    "Policy",
    "Template",
    "TemplateError",
    "TemplateSyntaxError",
    "UnclosedDirectiveError",
    "UndefinedError",
    "UnsupportedModifierError",
    "Verdict",
    "__version__",
    "classify",
    "compile_directive",
    "html_escape",
    "render_aria",
    "render_attr",
    "render_attr_forced",
    "render_bool",
    "render_data",
    "render_data_forced",
    "render_directive",
    "render_enum",
    "render_enum_forced",
    "render_flag",
    "render_neat",
]
