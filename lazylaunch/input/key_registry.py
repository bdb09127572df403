"""Key-token dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class KeyComboBinding(Generic[ResultT]):
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], ResultT]


class KeyComboRegistry(Generic[ResultT]):
    """Exact-match key table; later bindings overwrite earlier ones."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], ResultT]] = {}

    def register_binding(self, binding: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        """Bind every combo of ``binding`` to its handler and return ``self``."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[ResultT]) -> KeyComboRegistry[ResultT]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bound_keys(self) -> frozenset[str]:
        """Return the set of key tokens that currently have a handler."""
        return frozenset(self._handlers)

    def dispatch(self, key: str) -> ResultT | None:
        """Invoke the handler bound to ``key``; ``None`` when unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
