"""Capability protocols - the optional behaviors a chain value may have."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from valuechain.ref import Ref


@runtime_checkable
class Unwrap(Protocol):
    """A value that exposes its predecessor in the chain."""

    def unwrap(self) -> tuple[Any, bool]:
        """Return the wrapped value, and False if there is none."""
        ...


@runtime_checkable
class Is(Protocol):
    """A value with its own notion of matching a target."""

    def is_(self, target: Any) -> bool: ...


@runtime_checkable
class As(Protocol):
    """A value that can convert itself into a target slot.

    Returning True means the slot has been written; returning False means
    the slot was left alone.
    """

    def as_(self, target: Ref[Any]) -> bool: ...


@runtime_checkable
class Wrap(Protocol):
    """A value that can take a predecessor as part of its own state."""

    def wrap(self, v: Any) -> bool:
        """Accept v as the wrapped value, or return False to refuse it."""
        ...


def implements(v: Any, proto: type) -> bool:
    """Report whether v's type provides the capability proto.

    Class objects never count: ``Link`` itself has an ``unwrap`` attribute,
    but only ``Link()`` can be unwrapped.
    """
    return not isinstance(v, type) and isinstance(v, proto)
