"""Assignability checks driven by a Ref's declared type."""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any

from valuechain.errors import ContractError
from valuechain.introspect.nil import NoneType
from valuechain.ref import Ref


class IncorrectTypeError(ContractError):
    """The example given to TypeExample is not usable as one."""


_UNION_ORIGINS = (typing.Union, types.UnionType)


@dataclass(frozen=True)
class TypeExample:
    """Describes the type a slot accepts, to test other types against it.

    Build one from a Ref: ``TypeExample.from_ref(Ref(MyType))``.
    """

    type: Any

    @classmethod
    def from_ref(cls, example: Any) -> TypeExample:
        """Return the TypeExample for the declared type of example.

        Raises:
            IncorrectTypeError: If example is not a Ref, or its declared type
                is not something assignability can be decided for
        """
        if not isinstance(example, Ref):
            raise IncorrectTypeError("must be a Ref", example)
        _check_supported(example.type)
        return cls(example.type)

    def assignable_from(self, other: type) -> bool:
        """Report whether a value of type other may be stored in this slot."""
        return _assignable(other, self.type)


def _normalize(tp: Any) -> Any:
    return NoneType if tp is None else tp


def _check_supported(tp: Any) -> None:
    tp = _normalize(tp)
    if tp is Any:
        return
    origin = typing.get_origin(tp)
    if origin in _UNION_ORIGINS:
        for arg in typing.get_args(tp):
            _check_supported(arg)
        return
    if origin is not None:
        tp = origin
    if not isinstance(tp, type):
        raise IncorrectTypeError(f"has unsupported type {tp!r}", tp)
    if getattr(tp, "_is_protocol", False):
        if not getattr(tp, "_is_runtime_protocol", False):
            raise IncorrectTypeError(f"protocol {tp.__name__} is not runtime checkable", tp)
        data = _protocol_data_members(tp)
        if data:
            raise IncorrectTypeError(
                f"protocol {tp.__name__} has data members {sorted(data)}", tp
            )


def _protocol_data_members(tp: type) -> set[str]:
    # issubclass() only works on protocols made of methods
    members = getattr(tp, "__non_callable_proto_members__", None)
    if members is not None:
        return set(members)
    names: set[str] = set()
    for cls in tp.__mro__:
        if cls in (object, typing.Protocol, typing.Generic):
            continue
        if getattr(cls, "_is_protocol", False):
            names.update(inspect.get_annotations(cls))
    return names


def _assignable(other: type, tp: Any) -> bool:
    tp = _normalize(tp)
    if tp is Any or tp is object:
        return True

    origin = typing.get_origin(tp)
    if origin in _UNION_ORIGINS:
        return any(_assignable(other, arg) for arg in typing.get_args(tp))
    if origin is not None:
        # Parameters of list[int] and friends can't be checked from a type alone
        tp = origin

    return issubclass(other, tp)
