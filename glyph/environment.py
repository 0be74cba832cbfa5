"""
Glyph Environment
=================
Immutable integer-to-integer bindings, as a chain of single-binding scopes.

``extend`` never touches the receiver: it returns a new scope whose parent
is the receiver, so a binding is only visible to code evaluated under the
scope that introduced it.
"""
from __future__ import annotations

from typing import Iterator

from .errors import UnboundVariable


class Environment:
    """A persistent scope chain. Use ``Environment.empty()`` to start one."""

    __slots__ = ("_key", "_value", "_parent", "_size")

    def __init__(self, key: int | None = None, value: int | None = None,
                 parent: Environment | None = None):
        self._key = key
        self._value = value
        self._parent = parent
        self._size = 0 if parent is None else parent._size + 1

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    def extend(self, key: int, value: int) -> Environment:
        """Return a new environment with ``key`` bound to ``value``."""
        return Environment(key, value, self)

    def lookup(self, key: int) -> int:
        for scope in self._scopes():
            if scope._key == key:
                return scope._value
        raise UnboundVariable(key)

    def bindings(self) -> dict[int, int]:
        """Flattened view of every visible binding (innermost wins)."""
        result: dict[int, int] = {}
        for scope in self._scopes():
            result.setdefault(scope._key, scope._value)
        return result

    def _scopes(self) -> Iterator[Environment]:
        scope = self
        while scope._parent is not None:
            yield scope
            scope = scope._parent

    def __contains__(self, key: int) -> bool:
        return any(scope._key == key for scope in self._scopes())

    def __len__(self) -> int:
        """Number of scopes in the chain (shadowed bindings included)."""
        return self._size

    def __repr__(self) -> str:
        return f"Environment({self.bindings()!r})"
