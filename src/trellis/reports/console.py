"""Rich console reporter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

from trellis.reports.base import Reporter

if TYPE_CHECKING:
    from trellis.testing.executor import TestOutcome
    from trellis.testing.runner import RunResult


class ConsoleReporter(Reporter):
    """Prints progress and a pass/fail summary to the terminal."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    async def on_no_tests_found(self) -> None:
        self.console.print("[yellow]No test files found.[/yellow]")

    async def on_collection_complete(self, files: list[Path]) -> None:
        if self.verbosity < 0:
            return
        self.console.print(f"[blue]Found {len(files)} test files[/blue]")

    async def on_file_start(self, path: Path) -> None:
        if self.verbosity < 0:
            return
        self.console.print(f"\n[cyan]Running tests in {escape(str(path))}[/cyan]")

    async def on_test_complete(self, outcome: TestOutcome) -> None:
        if self.verbosity < 0:
            return
        mark = "[green]✓[/green]" if outcome.passed else "[red]✗[/red]"
        line = f"  {mark} {escape(outcome.full_name)}"
        if self.verbosity > 0:
            line += f" [dim]({outcome.duration_ms:.1f} ms)[/dim]"
        self.console.print(line)

    async def on_run_complete(self, run_result: RunResult) -> None:
        self.console.print("\n[blue]Test Summary:[/blue]")
        self.console.print(f"[green]  Passed: {run_result.passed}[/green]")
        self.console.print(f"[red]  Failed: {run_result.failed}[/red]")
        if run_result.errors:
            self.console.print(f"[red]  Errors: {run_result.errors}[/red]")
        if run_result.teardown_failures:
            self.console.print(
                f"[yellow]  Teardown warnings: {len(run_result.teardown_failures)}[/yellow]"
            )

        if not run_result.failures:
            return

        self.console.print("\n[red]Failures:[/red]")
        for failure in run_result.failures:
            header = failure.test
            if failure.params is not None:
                header += f" {failure.params!r}"
            self.console.print(f"\n[red]{escape(header)}[/red]")
            self.console.print(f"[red]  {escape(str(failure.error))}[/red]")
            if self.verbosity > 0 and failure.error.__traceback__ is not None:
                self.console.print(
                    Traceback.from_exception(
                        type(failure.error), failure.error, failure.error.__traceback__
                    )
                )
