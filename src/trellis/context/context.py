from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from trellis.testing.definitions import Marker
    from trellis.testing.registry import Registry


REGISTRY_CONTEXT: ContextVar[Registry | None] = ContextVar("registry_context", default=None)
TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)


@dataclass(frozen=True, slots=True)
class TestContext:
    """Execution context for a single test invocation.

    Attributes
    ----------
    test_name
        Registered name of the running test.
    module_path
        File the test was loaded from, if known.
    params
        Parameter tuple of the current invocation, or ``None`` when the test
        is not parametrized.
    markers
        Markers attached to the test at registration time.
    """

    __test__ = False

    test_name: str
    module_path: Path | None = None
    params: tuple[Any, ...] | None = None
    markers: tuple[Marker, ...] = field(default_factory=tuple)


def current_test() -> TestContext | None:
    """Return the context of the test currently running, if any."""
    return TEST_CONTEXT.get()


@contextmanager
def registry_scope(registry: Registry) -> Iterator[Registry]:
    """Make ``registry`` receive declarations for the duration of the block."""
    token = REGISTRY_CONTEXT.set(registry)
    try:
        yield registry
    finally:
        REGISTRY_CONTEXT.reset(token)


@contextmanager
def test_context_scope(ctx: TestContext) -> Iterator[None]:
    token = TEST_CONTEXT.set(ctx)
    try:
        yield
    finally:
        TEST_CONTEXT.reset(token)
