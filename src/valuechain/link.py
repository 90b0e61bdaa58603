"""Link - a generic chainable wrapper for any value."""

from __future__ import annotations

from typing import Any, Self

from valuechain.chain import as_
from valuechain.holder import Holder
from valuechain.ref import Ref


class Link:
    """Holds one value and wraps another.

    For is_() and as_() a Link stands in for its held value; for unwrap()
    it exposes the wrapped predecessor. That split is what lets build()
    lift a plain value into a chain without losing the ability to match it.
    """

    __slots__ = ("_wrapped", "_held")

    def __init__(self, value: Any = None) -> None:
        self._wrapped = Holder()
        self._held = value

    def set(self, v: Any) -> Self:
        """Set the held value and return the link."""
        self._held = v
        return self

    def unwrap(self) -> tuple[Any, bool]:
        return self._wrapped.get()

    def wrap(self, v: Any) -> bool:
        """Set the wrapped value. Always accepts."""
        self._wrapped.set(v)
        return True

    def is_(self, target: Any) -> bool:
        """Return True if target is, or equals, the held value."""
        return self._held is target or self._held == target

    def as_(self, target: Ref[Any]) -> bool:
        """Return as_(held, target) for the held value."""
        return as_(self._held, target)

    def __repr__(self) -> str:
        return f"Link({self._held!r})"
