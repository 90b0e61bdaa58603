"""Ref - a typed, writable slot used as the target of as_()."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from valuechain.holder import Holder

T = TypeVar("T")

_MISSING: Any = object()


class Ref(Generic[T]):
    """A slot declared to hold values of one type.

    ``Ref(str)`` starts empty; ``Ref(str, "x")`` starts filled. The declared
    type may be a class, a protocol, a union such as ``int | None``, a
    parameterized generic, ``Any`` or ``None``.
    """

    __slots__ = ("_tp", "_slot")

    def __init__(self, tp: Any, value: T = _MISSING) -> None:
        self._tp = tp
        self._slot = Holder()
        if value is not _MISSING:
            self._slot.set(value)

    @property
    def type(self) -> Any:
        """The declared type of the slot."""
        return self._tp

    @property
    def value(self) -> T | None:
        """The stored value, or None when the slot is empty."""
        return self._slot.value

    def set(self, v: T) -> None:
        self._slot.set(v)

    def get(self) -> tuple[T | None, bool]:
        return self._slot.get()

    def __repr__(self) -> str:
        name = getattr(self.type, "__name__", repr(self.type))
        v, ok = self._slot.get()
        if not ok:
            return f"Ref({name})"
        return f"Ref({name}, {v!r})"
