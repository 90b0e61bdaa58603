from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from valuechain import Holder, Ref, as_, build, is_, walk

logging.basicConfig(level=logging.DEBUG)


@dataclass
class NotFound:
    key: str

    def is_(self, target: Any) -> bool:
        # Matches the bare sentinel string too
        return target == "not-found"


@dataclass
class RequestError:
    path: str
    cause: Holder = field(default_factory=Holder)

    def wrap(self, v: Any) -> bool:
        self.cause.set(v)
        return True

    def unwrap(self) -> tuple[Any, bool]:
        return self.cause.get()


def lookup(key: str) -> Any:
    return build(NotFound(key), "cache miss", RequestError(f"/users/{key}"))


if __name__ == "__main__":
    err = lookup("alice")

    for node in walk(err):
        print(node)

    print("not found?", is_(err, "not-found"))

    nf = Ref(NotFound)
    if as_(err, nf):
        print("missing key:", nf.value.key)

    msg = Ref(str)
    if as_(err, msg):
        print("note:", msg.value)
