"""Fixture-driven test orchestration.

Provides test and fixture registration, fixture graph building, scoped
fixture lifecycles and the run coordinator.
"""

from .definitions import Activation, FixtureDefinition, Marker, TestDefinition
from .discovery import find_test_files, load_file
from .errors import (
    CircularReference,
    FileLoadFailure,
    FixtureGraphError,
    FixtureTeardownFailure,
    MutualReference,
    ScopeViolation,
    SelfReference,
    TrellisError,
    UnresolvedReference,
)
from .executor import TestOutcome, TestStatus, run_test
from .graph import link_fixtures, resolve_test_fixtures
from .lifecycle import activate, deactivate, fixture_closure, setup_scope, teardown_scope
from .markers import mark
from .parametrize import parametrize
from .registry import (
    Registry,
    fixture,
    get_active_registry,
    get_default_registry,
    get_parameter_sets,
    test,
)
from .runner import FailureRecord, Runner, RunResult


__all__ = [
    "Activation",
    "CircularReference",
    "FailureRecord",
    "FileLoadFailure",
    "FixtureDefinition",
    "FixtureGraphError",
    "FixtureTeardownFailure",
    "Marker",
    "MutualReference",
    "Registry",
    "RunResult",
    "Runner",
    "ScopeViolation",
    "SelfReference",
    "TestDefinition",
    "TestOutcome",
    "TestStatus",
    "TrellisError",
    "UnresolvedReference",
    "activate",
    "deactivate",
    "find_test_files",
    "fixture",
    "fixture_closure",
    "get_active_registry",
    "get_default_registry",
    "get_parameter_sets",
    "link_fixtures",
    "load_file",
    "mark",
    "parametrize",
    "resolve_test_fixtures",
    "run_test",
    "setup_scope",
    "teardown_scope",
    "test",
]
