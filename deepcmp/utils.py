"""Utility functions for deepcmp."""

from __future__ import annotations

import builtins
import importlib
from typing import Any

from .exceptions import ConfigError


PATH_SEPARATOR = "."


def type_name(t: type) -> str:
    """Get a display name for a type: bare for builtins, dotted otherwise."""
    if t.__module__ == builtins.__name__:
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


def format_value(value: Any) -> str:
    """Render a value for a difference record."""
    if isinstance(value, type):
        return type_name(value)
    return str(value)


def format_float(value: float, float_format: str) -> str:
    """Render a float as fixed-point text, e.g. format_float(0.1, '.3f') -> '0.100'."""
    return format(value, float_format)


def key_segment(key: Any) -> str:
    """Path segment for a mapping key."""
    return f"map[{key}]"


def index_segment(index: int) -> str:
    """Path segment for a sequence index."""
    return f"slice[{index}]"


def build_path(segments: list[str]) -> str:
    """Join path segments into a fully qualified location."""
    return PATH_SEPARATOR.join(segments)


def format_diff(segments: list[str], left: Any, right: Any) -> str:
    """Render one difference record, qualified by path when there is one."""
    text = f"{format_value(left)} != {format_value(right)}"
    if segments:
        return f"{build_path(segments)}: {text}"
    return text


def import_type(dotted: str) -> type:
    """
    Resolve a dotted path like 'decimal.Decimal' to a type.

    Raises:
        ConfigError: if the path cannot be imported or is not a type
    """
    module_name, _, attr = dotted.rpartition(".")
    if not module_name:
        module_name, attr = builtins.__name__, dotted

    try:
        module = importlib.import_module(module_name)
        result = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigError(f"Cannot import type '{dotted}'", {"reason": str(e)})

    if not isinstance(result, type):
        raise ConfigError(f"'{dotted}' is not a type", {"type": type(result).__name__})
    return result
