"""Shared types for the trellis test orchestrator."""

from __future__ import annotations

from enum import Enum


class Scope(Enum):
    """Fixture lifetime scope, ordered narrowest to widest."""

    FUNCTION = "function"  # Fresh instance per test invocation
    MODULE = "module"  # Shared across tests in same file
    SESSION = "session"  # Shared across entire test run

    @property
    def rank(self) -> int:
        return _SCOPE_RANK[self]

    def is_narrower_than(self, other: Scope) -> bool:
        return self.rank < other.rank

    @classmethod
    def parse(cls, value: Scope | str) -> Scope:
        """Accept either a Scope member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            msg = f"Unknown fixture scope {value!r}. Expected one of: {choices}"
            raise ValueError(msg) from None


_SCOPE_RANK = {Scope.FUNCTION: 0, Scope.MODULE: 1, Scope.SESSION: 2}


def compare_scope(lhs: Scope, rhs: Scope) -> int:
    """Return -1, 0 or 1 as ``lhs`` is narrower than, equal to or wider than ``rhs``."""
    if lhs is rhs:
        return 0
    return -1 if lhs.is_narrower_than(rhs) else 1
