"""Structural equality for arbitrary values."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping, Sequence, Set
from typing import Any

# Compared by identity only; two distinct classes or functions never match
_IDENTITY_ONLY = (
    type,
    types.FunctionType,
    types.ModuleType,
)


def deep_equal(a: Any, b: Any) -> bool:
    """Report whether a and b are structurally equal.

    Values of different types are never equal. Containers are compared
    element by element, dataclasses field by field, and any other object
    attribute by attribute. Types that define their own ``__eq__`` (a
    hand-written one on a dataclass included) are compared with it. A pair
    of objects seen again while recursing is treated as equal, so cyclic
    data terminates.
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if type(a) is not type(b):
        return False
    if a is b:
        return True
    if isinstance(a, _IDENTITY_ONLY):
        return False

    key = (id(a), id(b))
    if key in visited:
        return True

    if isinstance(a, (str, bytes, bytearray)):
        return a == b
    if isinstance(a, Mapping):
        visited.add(key)
        if a.keys() != b.keys():
            return False
        return all(_deep_equal(a[k], b[k], visited) for k in a)
    if isinstance(a, Sequence):
        visited.add(key)
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, visited) for x, y in zip(a, b))
    if isinstance(a, Set):
        return a == b

    if _generated_eq(type(a)):
        visited.add(key)
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), visited)
            for f in dataclasses.fields(a)
            if f.compare
        )

    if type(a).__eq__ is not object.__eq__:
        return bool(a == b)

    visited.add(key)
    return _fields_equal(a, b, visited)


def _generated_eq(cls: type) -> bool:
    """Report whether cls compares with the __eq__ that @dataclass wrote."""
    for klass in cls.__mro__:
        if "__eq__" not in klass.__dict__:
            continue
        if not dataclasses.is_dataclass(klass) or not klass.__dataclass_params__.eq:
            return False
        code = getattr(klass.__dict__["__eq__"], "__code__", None)
        # dataclasses compiles the methods it adds from source text
        return code is not None and code.co_filename == "<string>"
    return False


def _fields_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    fa, fb = _fields(a), _fields(b)
    if fa.keys() != fb.keys():
        return False
    return all(_deep_equal(fa[k], fb[k], visited) for k in fa)


def _fields(obj: Any) -> dict[str, Any]:
    fields = dict(getattr(obj, "__dict__", {}))
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{cls.__name__.lstrip('_')}{name}"
            if hasattr(obj, name):
                fields[name] = getattr(obj, name)
    return fields
