"""CLI module for the trellis test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from trellis.config import LOG_LEVELS, ConfigError, TrellisConfig, load_config
from trellis.reports import ConsoleReporter
from trellis.testing import FileLoadFailure, FixtureGraphError, Runner


EXIT_OK = 0
EXIT_TESTS_FAILED = 1
EXIT_FATAL = 2


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the trellis CLI."""
    console = Console()
    try:
        config = load_config()
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(EXIT_FATAL) from exc

    parser = _build_parser()
    raw_args = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args([*config.addopts, *raw_args])

    _configure_logging(_resolve_log_level(args, config))
    exit_code = asyncio.run(_run_tests(args, config, console))
    raise SystemExit(exit_code)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trellis",
        description="Run trellis tests with scoped fixtures.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Test files or directories (default: configured test_paths, else cwd)",
    )
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for trellis internals (default: from config, WARNING)",
    )
    return parser


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("trellis")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    )
    logger.setLevel(level)
    logger.propagate = False


def _resolve_paths(args: argparse.Namespace, config: TrellisConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.test_paths


def _resolve_verbosity(args: argparse.Namespace, config: TrellisConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_log_level(args: argparse.Namespace, config: TrellisConfig) -> str:
    return args.log_level or config.log_level


async def _run_tests(args: argparse.Namespace, config: TrellisConfig, console: Console) -> int:
    reporter = ConsoleReporter(console=console, verbosity=_resolve_verbosity(args, config))
    runner = Runner(reporter=reporter, exclude_dirs=config.exclude_dirs)

    if reporter.verbosity >= 0:
        console.print("[blue]🔍 Discovering tests...[/blue]")
    try:
        run_result = await runner.run(_resolve_paths(args, config))
    except (FixtureGraphError, FileLoadFailure, FileNotFoundError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return EXIT_FATAL

    return EXIT_OK if run_result.ok else EXIT_TESTS_FAILED


__all__ = ["main"]
