"""Base reporter protocol for trellis test output."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from trellis.testing.executor import TestOutcome
    from trellis.testing.runner import RunResult


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async to support I/O-bound reporters (file output, etc.).
    """

    async def on_no_tests_found(self) -> None:
        """Called when discovery finds no test files."""
        ...

    async def on_collection_complete(self, files: list[Path]) -> None:
        """Called after every file is loaded and its fixture graph is built."""
        ...

    async def on_file_start(self, path: Path) -> None:
        """Called before the tests of one file run."""
        ...

    async def on_test_complete(self, outcome: TestOutcome) -> None:
        """Called after each (test, parameter tuple) invocation completes."""
        ...

    async def on_run_complete(self, run_result: RunResult) -> None:
        """Called after all tests complete and all fixtures are torn down."""
        ...
