"""Directive registry for an Environment.

Provides a dict-like interface over the environment's directive table.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from htmlattrs.directives import Directive

if TYPE_CHECKING:
    from htmlattrs.environment.core import Environment


class DirectiveRegistry:
    """Dict-like interface for directives.

    Supports:
        - env.directives['name'] = Directive(...)
        - env.directives.register(Directive(...))
        - del env.directives['name']
        - 'name' in env.directives

    All mutations use copy-on-write for thread-safety.
    """

    __slots__ = ("_env", "_attr")

    def __init__(self, env: Environment, attr: str):
        self._env = env
        self._attr = attr

    def _get_dict(self) -> dict[str, Directive]:
        return getattr(self._env, self._attr)

    def _set_dict(self, d: dict[str, Directive]) -> None:
        setattr(self._env, self._attr, d)

    def __getitem__(self, name: str) -> Directive:
        return self._get_dict()[name]

    def __setitem__(self, name: str, directive: Directive) -> None:
        if not isinstance(directive, Directive):
            raise TypeError(f"Expected a Directive, got {type(directive).__name__}")
        new = self._get_dict().copy()
        new[name] = directive
        self._set_dict(new)

    def __delitem__(self, name: str) -> None:
        new = self._get_dict().copy()
        del new[name]
        self._set_dict(new)

    def __contains__(self, name: object) -> bool:
        return name in self._get_dict()

    def __iter__(self) -> Iterator[str]:
        return iter(self._get_dict())

    def __len__(self) -> int:
        return len(self._get_dict())

    def get(self, name: str, default: Directive | None = None) -> Directive | None:
        return self._get_dict().get(name, default)

    def register(self, directive: Directive) -> None:
        """Register a directive under its own name."""
        self[directive.name] = directive

    def copy(self) -> dict[str, Directive]:
        """Return a copy of the underlying dict."""
        return self._get_dict().copy()

    def keys(self):
        return self._get_dict().keys()

    def items(self):
        return self._get_dict().items()
