"""Runtime helpers injected into the compiled template namespace.

Compiled code calls ``_render_<family>`` renderers, the inline helpers used
by ``neat``, and ``_lookup`` for context variables. None of them close over
Environment state.

Thread-Safety:
All functions are stateless and safe for concurrent use.

"""

from __future__ import annotations

from typing import Any

from htmlattrs.runtime import RENDERERS, escaped_text, is_suppressed

# Builtins a data expression may call, e.g. ``@data('count', len(items))``.
SAFE_BUILTINS: dict[str, Any] = {
    "abs": abs,
    "all": all,
    "any": any,
    "bool": bool,
    "float": float,
    "int": int,
    "len": len,
    "max": max,
    "min": min,
    "round": round,
    "sorted": sorted,
    "str": str,
    "sum": sum,
}

# Read-only after module load; copied once per Template.
STATIC_NAMESPACE: dict[str, Any] = {
    "__builtins__": {},
    "_is_suppressed": is_suppressed,
    "_escaped_text": escaped_text,
    **{f"_render_{key}": func for key, func in RENDERERS.items()},
}


def lookup(ctx: dict[str, Any], var_name: str) -> Any:
    """Look up a variable in strict mode.

    Resolution order: render context, then SAFE_BUILTINS. Undefined names
    raise UndefinedError.
    """
    try:
        return ctx[var_name]
    except KeyError:
        pass
    try:
        return SAFE_BUILTINS[var_name]
    except KeyError:
        from htmlattrs.exceptions import UndefinedError

        raise UndefinedError(var_name, available_names=frozenset(ctx)) from None


def lookup_lenient(ctx: dict[str, Any], var_name: str) -> Any:
    """Look up a variable, returning None when it is undefined.

    None suppresses every attribute, so a missing variable simply omits it.
    """
    if var_name in ctx:
        return ctx[var_name]
    return SAFE_BUILTINS.get(var_name)
