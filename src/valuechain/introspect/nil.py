"""Nil detection across None and typed absent values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NoneType = type(None)


@dataclass(frozen=True)
class Nil:
    """An absent value that still carries the type it was declared with.

    ``None`` is untyped. ``Nil(list)`` says "no list here", which lets chain
    matching tell a missing list apart from a missing dict.

    Attributes:
        tp: The declared type of the absent value
    """

    tp: type

    @property
    def type(self) -> type:
        return self.tp

    def __repr__(self) -> str:
        return f"Nil({getattr(self.tp, '__name__', self.tp)!r})"


def is_nil(v: Any) -> bool:
    """Report whether v is None or a typed Nil marker."""
    _, ok = value_of(v)
    return not ok


def value_of(v: Any) -> tuple[Any, bool]:
    """Return v and True, or None and False when v is nil in any form."""
    if v is None or isinstance(v, Nil):
        return None, False
    return v, True


def declared_type(v: Any) -> type:
    """Return the type v was declared with.

    For a ``Nil`` marker this is the type it stands in for, for None it is
    ``NoneType``, and for everything else it is ``type(v)``.
    """
    if isinstance(v, Nil):
        return v.tp
    return type(v)
