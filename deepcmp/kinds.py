"""Classification of runtime values into the shapes the comparator walks."""

from __future__ import annotations

import asyncio
import dataclasses
import datetime
import enum
import functools
import inspect
import io
import queue
import threading
import uuid
import weakref
from collections.abc import Mapping, Sequence
from decimal import Decimal
from fractions import Fraction
from pathlib import PurePath
from typing import Any, Callable, Optional

from .models import CompareConfig, Kind, NIL_MAP, NIL_POINTER, NIL_SLICE


# Compared as a whole with ==, never walked. datetime.datetime is a date.
DEFAULT_VALUE_TYPES = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    Decimal,
    Fraction,
    uuid.UUID,
    enum.Enum,
    PurePath,
    complex,
    bytes,
    bytearray,
    set,
    frozenset,
    range,
)

# Channels, synchronization primitives and other values without a comparison rule.
UNSUPPORTED_TYPES = (
    queue.Queue,
    queue.SimpleQueue,
    asyncio.Queue,
    asyncio.Event,
    asyncio.Lock,
    threading.Thread,
    threading.Event,
    threading.Condition,
    threading.Semaphore,
    threading.Barrier,
    type(threading.Lock()),
    type(threading.RLock()),
    io.IOBase,
    functools.partial,
    memoryview,
    weakref.ProxyType,
    weakref.CallableProxyType,
)

_MISSING = object()


def unwrap(value: Any) -> Any:
    """Follow a weak reference to its referent; a dead reference yields None."""
    if isinstance(value, weakref.ReferenceType):
        return value()
    return value


def equality_override(
    value: Any,
    config: CompareConfig
) -> Optional[Callable[[Any, Any], bool]]:
    """
    Return the equality check that replaces the structural walk for
    this value's type, or None when the value should be walked.

    Value types (timestamps, decimals, enums, ...) use ``==``. Any other
    type exposing ``config.equal_method`` has that method called with
    the other value, like ``DataFrame.equals``.
    """
    if isinstance(value, DEFAULT_VALUE_TYPES + config.value_types):
        return _eq

    if config.equal_method and not isinstance(value, type):
        method = getattr(type(value), config.equal_method, None)
        if callable(method):
            return lambda a, b: bool(method(a, b))

    return None


def _eq(a: Any, b: Any) -> bool:
    return bool(a == b)


def kind_of(value: Any) -> Kind:
    """Classify a (non-None) value."""
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if _is_unsupported(value):
        return Kind.UNSUPPORTED
    if _is_namedtuple(value):
        return Kind.RECORD
    if isinstance(value, Sequence):
        return Kind.SEQUENCE
    if dataclasses.is_dataclass(value):
        return Kind.RECORD
    if hasattr(value, "__dict__") or _slot_names(type(value)):
        return Kind.RECORD
    return Kind.UNSUPPORTED


def nil_marker(present: Any) -> str:
    """Sentinel rendered for the absent side, chosen by the present side's kind."""
    kind = kind_of(present)
    if kind == Kind.MAPPING:
        return NIL_MAP
    if kind == Kind.SEQUENCE:
        return NIL_SLICE
    return NIL_POINTER


def record_fields(value: Any) -> list[str]:
    """Field names of a record in declaration order."""
    if dataclasses.is_dataclass(value):
        return [f.name for f in dataclasses.fields(value)]
    if _is_namedtuple(value):
        return list(type(value)._fields)

    names = [n for n in _slot_names(type(value)) if hasattr(value, n)]
    for name in getattr(value, "__dict__", {}):
        if name not in names:
            names.append(name)
    return names


def get_field(value: Any, name: str) -> Any:
    """Field value, or MISSING when the record does not carry it."""
    return getattr(value, name, _MISSING)


def is_missing(value: Any) -> bool:
    return value is _MISSING


def is_private(name: str) -> bool:
    return name.startswith("_")


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_unsupported(value: Any) -> bool:
    return (
        isinstance(value, type)
        or inspect.isroutine(value)
        or inspect.ismodule(value)
        or inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
        or isinstance(value, UNSUPPORTED_TYPES)
    )


@functools.lru_cache(maxsize=256)
def _slot_names(cls: type) -> tuple:
    """Slot names declared anywhere in the class hierarchy, base classes first."""
    names = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return tuple(names)
