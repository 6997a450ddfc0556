"""Trellis - fixture-driven test orchestrator."""

from .testing import (
    Registry,
    Runner,
    RunResult,
    fixture,
    load_file,
    mark,
    parametrize,
    test,
)
from .types import Scope
from .version import __version__


__all__ = [
    # Declaration
    "test",
    "fixture",
    "mark",
    "parametrize",
    "Scope",
    # Running
    "Registry",
    "Runner",
    "RunResult",
    "load_file",
    "__version__",
]
