"""Public comparison entry points for deepcmp."""

from __future__ import annotations

from typing import Any, Optional

from .config import get_config
from .differ import Differ
from .exceptions import DiffAssertionError
from .models import CompareConfig, DiffReport


class Comparator:
    """
    Compares pairs of values and reports where they diverge.

    A Comparator only holds its configuration; every call gets a fresh
    Differ, so one instance can be shared between threads.

    Usage:
        comparator = Comparator(CompareConfig(float_precision=6))
        diffs = comparator.compare(expected, actual)
    """

    def __init__(self, config: Optional[CompareConfig] = None):
        """
        Initialize the comparator.

        Args:
            config: Comparison settings (uses the process default if not provided)
        """
        self._config = config

    @property
    def config(self) -> CompareConfig:
        return self._config or get_config()

    def compare(self, a: Any, b: Any) -> list[str]:
        """
        Compare a and b, recursing into their structure up to max_depth
        levels deep.

        Returns:
            A list of differences, empty when none were found. At most
            max_diff entries are returned; deeper or later differences
            are then left unexplored.
        """
        return Differ(self.config).diff(a, b)

    def report(self, a: Any, b: Any) -> DiffReport:
        """Compare a and b and say whether the diff cap cut the walk short."""
        config = self.config
        return DiffReport(diffs=Differ(config).diff(a, b), max_diff=config.max_diff)

    def assert_equal(self, a: Any, b: Any, msg: Optional[str] = None):
        """Raise DiffAssertionError listing the differences, if there are any."""
        diffs = self.compare(a, b)
        if diffs:
            raise DiffAssertionError(diffs, msg)


def equal(a: Any, b: Any, config: Optional[CompareConfig] = None) -> list[str]:
    """
    Compare two values and list their differences.

    If a type has its own equality, like datetime or DataFrame.equals,
    it is used instead of walking the value.

        >>> equal({"a": 1, "b": 2}, {"a": 1})
        ['map[b]: 2 != <does not have key>']
    """
    return Comparator(config).compare(a, b)


compare = equal


def report(a: Any, b: Any, config: Optional[CompareConfig] = None) -> DiffReport:
    """Convenience function returning a DiffReport."""
    return Comparator(config).report(a, b)


def assert_equal(
    a: Any,
    b: Any,
    config: Optional[CompareConfig] = None,
    msg: Optional[str] = None
):
    """Assert two values are equal, listing every difference on failure."""
    Comparator(config).assert_equal(a, b, msg)
