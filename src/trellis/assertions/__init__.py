"""Assertion helpers for test bodies."""

from .basic import equal, is_false, is_true, not_equal

__all__ = ["equal", "is_false", "is_true", "not_equal"]
