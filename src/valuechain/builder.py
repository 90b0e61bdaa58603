"""Chain construction."""

from __future__ import annotations

import logging
from typing import Any

from valuechain.errors import ContractError
from valuechain.iface import Wrap, implements
from valuechain.link import Link
from valuechain.ref import Ref

logger = logging.getLogger(__name__)


class _BuildLink:
    """Link used by build() for values that don't wrap themselves.

    Deliberately not a Link subclass, so ``as_(chain, Ref(Link))`` never
    hands out a link that build() created behind the caller's back.
    """

    __slots__ = ("_link",)

    def __init__(self, value: Any) -> None:
        self._link = Link(value)

    def wrap(self, v: Any) -> bool:
        return self._link.wrap(v)

    def unwrap(self) -> tuple[Any, bool]:
        return self._link.unwrap()

    def is_(self, target: Any) -> bool:
        return self._link.is_(target)

    def as_(self, target: Ref[Any]) -> bool:
        return self._link.as_(target)

    def __repr__(self) -> str:
        return f"_BuildLink({self._link._held!r})"


def build(*values: Any) -> Any:
    """Chain values together and return the last one.

    With a single value it is returned as is. Otherwise values are processed
    first to last: a value implementing ``wrap`` is handed the chain so far,
    and if it accepts, it becomes the head. A value that doesn't implement
    ``wrap``, or refuses, is wrapped in an internal link that becomes the head
    instead.

    Raises:
        ContractError: If called with no values
    """
    if not values:
        raise ContractError("valuechain: build called with zero arguments")
    if len(values) == 1:
        return values[0]

    src = values[0]
    for dst in values[1:]:
        if implements(dst, Wrap) and dst.wrap(src):
            src = dst
            continue

        logger.debug("wrapping %s in a build link", type(dst).__name__)
        link = _BuildLink(dst)
        if not link.wrap(src):
            raise AssertionError("Link.wrap should always return True")
        src = link

    return src
