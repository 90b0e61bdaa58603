"""Tests for nil detection, assignability and deep equality."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Protocol, runtime_checkable

import pytest

from valuechain import ContractError, Ref, Unwrap, as_
from valuechain.introspect import (
    IncorrectTypeError,
    Nil,
    NoneType,
    TypeExample,
    declared_type,
    deep_equal,
    is_nil,
    value_of,
)
from fakes import NonUnwrappable, Unwrappable


class TestNil:
    def test_none(self):
        assert is_nil(None)
        assert value_of(None) == (None, False)
        assert declared_type(None) is NoneType

    def test_typed_nil(self):
        n = Nil(list)
        assert is_nil(n)
        assert value_of(n) == (None, False)
        assert declared_type(n) is list
        assert n.type is list
        assert repr(n) == "Nil('list')"

    @pytest.mark.parametrize("v", [0, "", [], {}, False, NonUnwrappable()])
    def test_zero_values_are_not_nil(self, v):
        assert not is_nil(v)
        assert value_of(v) == (v, True)
        assert declared_type(v) is type(v)


class Named(Protocol):
    def name(self) -> str: ...


@runtime_checkable
class HasName(Protocol):
    name: str


class TestTypeExample:
    def test_requires_ref(self):
        with pytest.raises(IncorrectTypeError, match="must be a Ref"):
            TypeExample.from_ref("")

    def test_rejects_unsupported_annotation(self):
        with pytest.raises(IncorrectTypeError):
            TypeExample.from_ref(Ref(Literal["a"]))

    def test_type(self):
        assert TypeExample.from_ref(Ref(str)).type is str

    def test_classes(self):
        ex = TypeExample.from_ref(Ref(Exception))
        assert ex.assignable_from(ValueError)
        assert not ex.assignable_from(str)

    def test_any_and_object(self):
        for tp in (Any, object):
            ex = TypeExample.from_ref(Ref(tp))
            assert ex.assignable_from(int)
            assert ex.assignable_from(NoneType)

    def test_none(self):
        ex = TypeExample.from_ref(Ref(None))
        assert ex.assignable_from(NoneType)
        assert not ex.assignable_from(int)

    def test_unions(self):
        ex = TypeExample.from_ref(Ref(Optional[int]))
        assert ex.assignable_from(int)
        assert ex.assignable_from(NoneType)
        assert not ex.assignable_from(str)

        ex = TypeExample.from_ref(Ref(int | str))
        assert ex.assignable_from(str)
        assert not ex.assignable_from(NoneType)

    def test_generics_use_origin(self):
        ex = TypeExample.from_ref(Ref(list[int]))
        assert ex.assignable_from(list)
        assert not ex.assignable_from(tuple)

        ex = TypeExample.from_ref(Ref(Sequence[int]))
        assert ex.assignable_from(tuple)

    def test_protocols(self):
        ex = TypeExample.from_ref(Ref(Unwrap))
        assert ex.assignable_from(Unwrappable)
        assert not ex.assignable_from(NonUnwrappable)

    def test_rejects_protocol_without_runtime_checks(self):
        with pytest.raises(IncorrectTypeError, match="not runtime checkable"):
            TypeExample.from_ref(Ref(Named))

        target = Ref(Named)
        with pytest.raises(ContractError, match="valuechain: target protocol Named"):
            as_("x", target)
        assert target.get() == (None, False)

    def test_rejects_protocol_with_data_members(self):
        with pytest.raises(IncorrectTypeError, match="data members"):
            TypeExample.from_ref(Ref(HasName))

        with pytest.raises(ContractError):
            as_("x", Ref(HasName | None))


@dataclass
class Point:
    x: int
    y: int


class Plain:
    def __init__(self, payload):
        self.payload = payload


class Slotted:
    __slots__ = ("a",)

    def __init__(self, a):
        self.a = a


class TestDeepEqual:
    def test_different_types(self):
        assert not deep_equal(1, 1.0)
        assert not deep_equal([1], (1,))

    def test_own_eq(self):
        assert deep_equal(Point(1, 2), Point(1, 2))
        assert not deep_equal(Point(1, 2), Point(2, 1))

    def test_plain_objects(self):
        assert deep_equal(Plain([1, 2]), Plain([1, 2]))
        assert not deep_equal(Plain([1, 2]), Plain([1, 3]))
        assert deep_equal(Plain(Plain("x")), Plain(Plain("x")))

    def test_slots(self):
        assert deep_equal(Slotted(1), Slotted(1))
        assert not deep_equal(Slotted(1), Slotted(2))

    def test_containers(self):
        assert deep_equal({"a": [Plain(1)]}, {"a": [Plain(1)]})
        assert not deep_equal({"a": 1}, {"b": 1})
        assert deep_equal({1, 2}, {2, 1})
        assert deep_equal("abc", "abc")

    def test_cycles(self):
        a, b = Plain(None), Plain(None)
        a.payload, b.payload = a, b
        assert deep_equal(a, b)

        la: list = []
        lb: list = []
        la.append(la)
        lb.append(lb)
        assert deep_equal(la, lb)


class OneSlot:
    __slots__ = "value"

    def __init__(self, value):
        self.value = value


class Hidden:
    __slots__ = ("__secret",)

    def __init__(self, secret):
        self.__secret = secret


@dataclass
class Box:
    payload: Any


@dataclass
class Tagged:
    payload: Any
    note: str = field(default="", compare=False)


@dataclass
class Loose:
    x: int

    def __eq__(self, other):
        return isinstance(other, Loose)


class TestDeepEqualEdges:
    def test_string_slots(self):
        assert deep_equal(OneSlot(1), OneSlot(1))
        assert not deep_equal(OneSlot(1), OneSlot(2))

    def test_private_slots(self):
        assert deep_equal(Hidden("a"), Hidden("a"))
        assert not deep_equal(Hidden("a"), Hidden("b"))

    def test_dataclass_recurses_into_fields(self):
        assert deep_equal(Box(Plain(1)), Box(Plain(1)))
        assert not deep_equal(Box(Plain(1)), Box(Plain(2)))
        assert deep_equal(Box(Box(Plain([1]))), Box(Box(Plain([1]))))

    def test_dataclass_skips_uncompared_fields(self):
        assert deep_equal(Tagged(Plain(1), note="a"), Tagged(Plain(1), note="b"))

    def test_dataclass_custom_eq(self):
        assert deep_equal(Loose(1), Loose(2))

    def test_typed_nils(self):
        assert deep_equal(Nil(list), Nil(list))
        assert not deep_equal(Nil(list), Nil(dict))

    def test_classes_and_functions_by_identity(self):
        class A:
            pass

        class B:
            pass

        assert deep_equal(A, A)
        assert not deep_equal(A, B)
        assert not deep_equal(lambda: None, lambda: None)
