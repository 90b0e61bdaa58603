"""Holder - a slot that knows whether it was ever filled."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Holder:
    """Holds a value plus a positive assertion that it was set on purpose.

    This tells a deliberately stored None (or other zero value) apart from a
    slot that was never filled. It is the building block wrapper types use
    to remember their predecessor.

    Attributes:
        value: The held value
        ok: True once set() has been called
    """

    value: Any = None
    ok: bool = False

    def set(self, v: Any) -> None:
        self.value = v
        self.ok = True

    def get(self) -> tuple[Any, bool]:
        """Return the value and True, or None and False if never set."""
        if not self.ok:
            return None, False
        return self.value, True


def hold(v: Any) -> Holder:
    """Create a Holder already set to v."""
    h = Holder()
    h.set(v)
    return h
