"""Compiled template.

The Template class wraps a compiled code object and provides ``render()``.
The code object defines ``render(ctx)`` using the StringBuilder pattern:

    ```python
    def render(ctx):
        buf = []
        _append = buf.append
        _append('<input ')
        _append(_render_flag('checked', _lookup(ctx, 'checked')))
        return ''.join(buf)
    ```

Thread-Safety:
- Templates are immutable after construction
- ``render()`` creates only local state (buf list)
- Multiple threads can call ``render()`` concurrently

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from htmlattrs.exceptions import UndefinedError
from htmlattrs.template.helpers import STATIC_NAMESPACE, lookup, lookup_lenient

if TYPE_CHECKING:
    import types


class Template:
    """Compiled template ready for rendering.

    Example:
        >>> from htmlattrs import Environment
        >>> env = Environment()
        >>> t = env.from_string('<input @bool("checked", checked)>')
        >>> t.render(checked=True)
        '<input checked>'
        >>> t.render(checked=0)
        '<input >'
    """

    __slots__ = ("_globals", "_name", "_render_func", "_source")

    def __init__(
        self,
        code: types.CodeType,
        *,
        name: str | None = None,
        source: str | None = None,
        globals: dict[str, Any] | None = None,
        strict: bool = True,
    ):
        self._name = name
        self._source = source
        self._globals = dict(globals or {})

        namespace = STATIC_NAMESPACE.copy()
        namespace["_lookup"] = lookup if strict else lookup_lenient
        exec(code, namespace)
        self._render_func = namespace["render"]

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def source(self) -> str | None:
        return self._source

    def render(self, *args: Any, **kwargs: Any) -> str:
        """Render template with given context.

        Args:
            *args: Single dict of context variables
            **kwargs: Context variables as keyword arguments

        Example:
            >>> t.render(title="Hello")
            >>> t.render({"title": "Hello"})
        """
        ctx: dict[str, Any] = {}
        ctx.update(self._globals)
        if args:
            if len(args) == 1 and isinstance(args[0], dict):
                ctx.update(args[0])
            else:
                raise TypeError(
                    f"render() takes at most 1 positional argument (a dict), got {len(args)}"
                )
        ctx.update(kwargs)

        try:
            result: str = self._render_func(ctx)
        except UndefinedError as e:
            if self._name is None or e.template != "<template>":
                raise
            raise UndefinedError(e.name, self._name, available_names=frozenset(ctx)) from None
        return result

    def __repr__(self) -> str:
        return f"<Template {self._name or '(inline)'}>"
