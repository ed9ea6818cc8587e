"""Data models for deepcmp."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional

from .exceptions import ConfigError
from .utils import import_type


# Rendered in place of the side that has no value.
NIL_POINTER = "<nil pointer>"
NIL_MAP = "<nil map>"
NIL_SLICE = "<nil slice>"
NO_KEY = "<does not have key>"
NO_VALUE = "<no value>"
NO_FIELD = "<no field>"


class Kind(Enum):
    """Normalized shape of a value, as seen by the comparator."""
    RECORD = "record"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    FLOAT = "float"
    BOOL = "bool"
    INT = "int"
    STRING = "string"
    UNSUPPORTED = "unsupported"


class Anomaly(Enum):
    """Internal conditions that are logged, never raised."""
    MAX_RECURSION = "recursed to max_depth"
    TYPE_MISMATCH = "values are of different types"
    NOT_HANDLED = "cannot compare the kind"


# camelCase keys accepted by CompareConfig.from_dict
_KEY_ALIASES = {
    "floatPrecision": "float_precision",
    "maxDiff": "max_diff",
    "maxDepth": "max_depth",
    "comparePrivateFields": "compare_private_fields",
    "compareUnexportedFields": "compare_private_fields",
    "logErrors": "log_errors",
    "valueTypes": "value_types",
    "equalMethod": "equal_method",
}


@dataclass(frozen=True)
class CompareConfig:
    """Settings read by the comparator for one top-level call."""
    float_precision: int = 10
    max_diff: int = 10
    max_depth: int = 10
    compare_private_fields: bool = False
    log_errors: bool = False
    value_types: tuple = ()
    equal_method: Optional[str] = "equals"

    def __post_init__(self):
        for name, minimum in (("float_precision", 0), ("max_diff", 1), ("max_depth", 0)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    f"{name} must be an integer",
                    {"field": name, "type": type(value).__name__}
                )
            if value < minimum:
                raise ConfigError(
                    f"{name} must be >= {minimum}",
                    {"field": name, "value": value}
                )

        if not isinstance(self.value_types, tuple):
            object.__setattr__(self, "value_types", tuple(self.value_types))
        for t in self.value_types:
            if not isinstance(t, type):
                raise ConfigError(
                    "value_types must contain types",
                    {"field": "value_types", "value": repr(t)}
                )

        if self.equal_method is not None and not isinstance(self.equal_method, str):
            raise ConfigError(
                "equal_method must be a method name or None",
                {"field": "equal_method", "type": type(self.equal_method).__name__}
            )

    @property
    def float_format(self) -> str:
        """Format spec used to render floats before comparing them."""
        return f".{self.float_precision}f"

    @classmethod
    def from_dict(cls, data: Optional[dict], base: Optional[CompareConfig] = None) -> CompareConfig:
        """
        Build a config from a plain mapping.

        Both snake_case and camelCase keys are accepted; keys not given
        keep their value from base. Entries of ``value_types`` may be
        types or dotted import paths such as ``"decimal.Decimal"``.
        """
        if data is None:
            return base or cls()
        if not isinstance(data, dict):
            raise ConfigError(
                "configuration must be a mapping",
                {"type": type(data).__name__}
            )
        if not data:
            return base or cls()

        known = {f for f in cls.__dataclass_fields__}
        kwargs = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown configuration key: {key}", {"key": key})
            kwargs[name] = value

        if "value_types" in kwargs:
            kwargs["value_types"] = tuple(
                import_type(t) if isinstance(t, str) else t
                for t in kwargs["value_types"] or ()
            )

        return dataclasses.replace(base or cls(), **kwargs)

    def replace(self, **overrides) -> CompareConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **overrides)

    def to_dict(self) -> dict:
        result = asdict(self)
        result["value_types"] = [
            f"{t.__module__}.{t.__qualname__}" for t in self.value_types
        ]
        return result


@dataclass
class DiffReport:
    """Differences found by one comparison, plus whether the cap cut it short."""
    diffs: list[str] = field(default_factory=list)
    max_diff: int = 10

    @property
    def is_match(self) -> bool:
        return not self.diffs

    @property
    def truncated(self) -> bool:
        # At the cap the walk stopped early; more differences may exist.
        return len(self.diffs) >= self.max_diff

    def to_dict(self) -> dict:
        return {
            "is_match": self.is_match,
            "truncated": self.truncated,
            "diffs_count": len(self.diffs),
            "diffs": list(self.diffs),
        }
