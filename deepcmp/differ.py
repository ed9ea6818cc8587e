"""Recursive structural comparison for deepcmp."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from . import kinds
from .models import (
    Anomaly,
    CompareConfig,
    Kind,
    NO_FIELD,
    NO_KEY,
    NO_VALUE,
)
from .utils import (
    build_path,
    format_diff,
    format_float,
    index_segment,
    key_segment,
)

logger = logging.getLogger(__name__)


class Differ:
    """
    Walks two values in lockstep and collects rendered differences.

    One Differ serves exactly one top-level comparison: it owns the
    difference list and the path stack, so it must not be shared.

    Handles:
    - Records (dataclasses, named tuples, slotted and plain objects)
    - Mappings, compared key by key
    - Sequences, compared index by index up to the longer length
    - Floats, compared at a fixed number of fractional digits
    - Types with their own equality, compared without descending
    """

    def __init__(self, config: CompareConfig):
        self.config = config
        self.diffs: list[str] = []
        self.path: list[str] = []
        self._float_format = config.float_format

    @property
    def full(self) -> bool:
        return len(self.diffs) >= self.config.max_diff

    def diff(self, a: Any, b: Any, level: int = 0) -> list[str]:
        """
        Compare a and b, descending at most max_depth levels.

        Returns:
            The differences collected so far, in discovery order
        """
        try:
            self._equals(a, b, level)
        except RecursionError:
            # max_depth deeper than the interpreter stack allows
            self._log(Anomaly.MAX_RECURSION, "interpreter recursion limit")
        return self.diffs

    def _equals(self, a: Any, b: Any, level: int):
        if self.full:
            return

        if level > self.config.max_depth:
            self._log(Anomaly.MAX_RECURSION)
            return

        if not self._same_type(a, b):
            return

        a = kinds.unwrap(a)
        b = kinds.unwrap(b)

        # e.g. Point(x=None) vs Point(x=1)
        if a is None or b is None:
            if a is not None:
                self._save_diff(a, kinds.nil_marker(a))
            elif b is not None:
                self._save_diff(kinds.nil_marker(b), b)
            return

        if not self._same_type(a, b):
            return

        # Types with their own notion of equality, like datetime.
        eq = kinds.equality_override(a, self.config)
        if eq is not None:
            if not eq(a, b):
                self._save_diff(a, b)
            return

        kind = kinds.kind_of(a)

        if kind == Kind.RECORD:
            self._diff_records(a, b, level)
        elif kind == Kind.MAPPING:
            self._diff_mappings(a, b, level)
        elif kind == Kind.SEQUENCE:
            self._diff_sequences(a, b, level)
        elif kind == Kind.FLOAT:
            # Avoid 0.04147685731961082 != 0.041476857319611
            if format_float(a, self._float_format) != format_float(b, self._float_format):
                self._save_diff(a, b)
        elif kind in (Kind.BOOL, Kind.INT, Kind.STRING):
            if a != b:
                self._save_diff(a, b)
        else:
            self._log(Anomaly.NOT_HANDLED, type(a).__name__)

    def _diff_records(self, a: Any, b: Any, level: int):
        """Compare two records field by field in declaration order."""
        names = kinds.record_fields(a)
        # Plain objects of one class may still carry different attributes.
        names += [n for n in kinds.record_fields(b) if n not in names]

        for name in names:
            if kinds.is_private(name) and not self.config.compare_private_fields:
                continue

            af = kinds.get_field(a, name)
            bf = kinds.get_field(b, name)
            if kinds.is_missing(af) and kinds.is_missing(bf):
                continue

            with self._segment(name):
                if kinds.is_missing(bf):
                    self._save_diff(af, NO_FIELD)
                elif kinds.is_missing(af):
                    self._save_diff(NO_FIELD, bf)
                else:
                    self._equals(af, bf, level + 1)

            if self.full:
                break

    def _diff_mappings(self, a: Any, b: Any, level: int):
        """Compare two mappings: left keys first, then keys only on the right."""
        if a is b:
            return

        for key, a_val in a.items():
            with self._segment(key_segment(key)):
                if key in b:
                    self._equals(a_val, b[key], level + 1)
                else:
                    self._save_diff(a_val, NO_KEY)

            if self.full:
                return

        for key, b_val in b.items():
            if key in a:
                continue

            with self._segment(key_segment(key)):
                self._save_diff(NO_KEY, b_val)

            if self.full:
                return

    def _diff_sequences(self, a: Any, b: Any, level: int):
        """Compare two sequences index by index up to the longer length."""
        if a is b:
            return

        a_len = len(a)
        b_len = len(b)
        for i in range(max(a_len, b_len)):
            with self._segment(index_segment(i)):
                if i < a_len and i < b_len:
                    self._equals(a[i], b[i], level + 1)
                elif i < a_len:
                    self._save_diff(a[i], NO_VALUE)
                else:
                    self._save_diff(NO_VALUE, b[i])

            if self.full:
                break

    def _same_type(self, a: Any, b: Any) -> bool:
        """Record a type mismatch unless the types match; None matches anything."""
        if a is None or b is None or type(a) is type(b):
            return True
        self._save_diff(type(a), type(b))
        self._log(Anomaly.TYPE_MISMATCH)
        return False

    @contextmanager
    def _segment(self, name: str) -> Iterator[None]:
        """Push a path segment for the duration of a descent."""
        self.path.append(name)
        try:
            yield
        finally:
            self.path.pop()

    def _save_diff(self, a: Any, b: Any):
        self.diffs.append(format_diff(self.path, a, b))

    def _log(self, anomaly: Anomaly, detail: str = None):
        if not self.config.log_errors:
            return
        where = build_path(self.path) or "<root>"
        if detail:
            logger.warning("%s (%s) at %s", anomaly.value, detail, where)
        else:
            logger.warning("%s at %s", anomaly.value, where)
