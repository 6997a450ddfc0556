"""Basic assertion helpers for test bodies."""

from typing import Any, NoReturn


def _truncate(value: Any, max_len: int = 80) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def _fail(message: str, expected: str, actual: Any) -> NoReturn:
    prefix = f"Assertion Error: {message}" if message else "Assertion Error"
    raise AssertionError(f"{prefix}\nExpected: {expected}\nActual: {_truncate(actual)}")


def equal(actual: Any, expected: Any, message: str = "") -> None:
    """Fail unless ``actual == expected``."""
    if actual != expected:
        _fail(message, _truncate(expected), actual)


def not_equal(actual: Any, expected: Any, message: str = "") -> None:
    """Fail if ``actual == expected``."""
    if actual == expected:
        _fail(message, f"not {_truncate(expected)}", actual)


def is_true(value: Any, message: str = "") -> None:
    """Fail unless ``value`` is truthy."""
    if not value:
        _fail(message, "true", value)


def is_false(value: Any, message: str = "") -> None:
    """Fail if ``value`` is truthy."""
    if value:
        _fail(message, "false", value)
