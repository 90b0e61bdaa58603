"""Chain traversal - unwrap, walk, is_ and as_.

A chain is a value followed by the values obtained by repeatedly unwrapping
it. Any object taking part only needs the capability protocols from
``valuechain.iface``; nothing here depends on Link.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from valuechain.errors import ContractError
from valuechain.iface import As, Is, Unwrap, implements
from valuechain.introspect import (
    IncorrectTypeError,
    TypeExample,
    declared_type,
    deep_equal,
    is_nil,
    value_of,
)
from valuechain.ref import Ref


def unwrap(v: Any) -> tuple[Any, bool]:
    """Return v.unwrap() if v implements Unwrap, otherwise (None, False)."""
    if not implements(v, Unwrap):
        return None, False
    return v.unwrap()


def walk(v: Any) -> Iterator[Any]:
    """Yield v and then every value reached by unwrapping it.

    There is no cycle detection: a value that unwraps back to one of its
    ancestors makes this loop forever. Chains must be finite.
    """
    while True:
        yield v
        v, ok = unwrap(v)
        if not ok:
            return


def is_(v: Any, target: Any) -> bool:
    """Report whether any value in v's chain matches target.

    A value matches if it is structurally equal to target, or if it
    implements ``is_(target)`` and that returns True. When a value and target
    are both nil (None or a ``Nil`` marker) the result is decided right there
    by comparing their declared types.

    A type can provide ``is_`` so it is treated as equivalent to an existing
    value::

        class Sentinel:
            def is_(self, target):
                return target == "foo"

        is_(Sentinel(), "foo")  # True
    """
    target_nil = is_nil(target)
    for node in walk(v):
        if target_nil and is_nil(node):
            return declared_type(node) is declared_type(target)

        if implements(node, Is) and node.is_(target):
            return True

        if deep_equal(node, target):
            return True

    return False


def as_(v: Any, target: Ref[Any]) -> bool:
    """Find the first value in v's chain that fits target and store it there.

    A value fits if its type is assignable to target's declared type, or if
    it implements ``as_(target)`` and that returns True, in which case it is
    responsible for filling target. Assignability is checked first at each
    value. Returns False, leaving target untouched, when nothing fits.

    Raises:
        ContractError: If target is None or not a Ref
    """
    if is_nil(target):
        raise ContractError("valuechain: target must not be None", target)

    try:
        example = TypeExample.from_ref(target)
    except IncorrectTypeError as e:
        raise ContractError(f"valuechain: target {e}", target) from e

    for node in walk(v):
        if example.assignable_from(declared_type(node)):
            value, _ = value_of(node)
            target.set(value)
            return True

        if implements(node, As) and node.as_(target):
            return True

    return False
