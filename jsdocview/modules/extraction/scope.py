"""Traversal scope tracking.

A scope records whether the walker is inside a function, class or loop
body. Scopes are immutable; entering a body derives a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Scope:
    in_function: bool = False
    in_class: bool = False
    in_loop: bool = False

    def child(self, **overrides: bool) -> Scope:
        """Copy this scope with some flags overridden."""
        return replace(self, **overrides)

    @property
    def is_top_level(self) -> bool:
        """True when declarations here are reportable as top-level elements."""
        return not self.in_function


def create_scope() -> Scope:
    """Fresh root scope."""
    return Scope()


__all__ = ["Scope", "create_scope"]
