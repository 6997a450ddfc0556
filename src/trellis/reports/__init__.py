"""Reporting module for trellis test output."""

from trellis.reports.base import Reporter
from trellis.reports.console import ConsoleReporter


__all__ = ["ConsoleReporter", "Reporter"]
