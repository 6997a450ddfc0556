"""Shared fixtures for unit tests."""

import logging
from pathlib import Path

import pytest

from trellis.context import registry_scope
from trellis.reports.base import Reporter
from trellis.testing.registry import Registry


class RecordingReporter(Reporter):
    """Silent reporter that remembers every hook call."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    async def on_no_tests_found(self) -> None:
        self.events.append(("no_tests", None))

    async def on_collection_complete(self, files) -> None:
        self.events.append(("collected", list(files)))

    async def on_file_start(self, path: Path) -> None:
        self.events.append(("file", path))

    async def on_test_complete(self, outcome) -> None:
        self.events.append(("outcome", outcome))

    async def on_run_complete(self, run_result) -> None:
        self.events.append(("done", run_result))


@pytest.fixture
def reporter() -> RecordingReporter:
    """Provide a silent reporter for tests."""
    return RecordingReporter()


@pytest.fixture
def registry():
    """Fresh registry that receives declarations made during the test."""
    fresh = Registry(path=Path("sample.test.py"))
    with registry_scope(fresh):
        yield fresh


@pytest.fixture
def write_test_file(tmp_path):
    """Write a test file under tmp_path and return its path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_trellis_logger():
    """Undo logging changes made by the CLI so caplog keeps working."""
    logger = logging.getLogger("trellis")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
