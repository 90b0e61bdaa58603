"""valuechain - build, walk and query chains of wrapped values.

A generic take on the wrapped-error pattern: any value can wrap a
predecessor, and the chain can be searched with is_() and as_().
"""

from .builder import build
from .chain import as_, is_, unwrap, walk
from .errors import ContractError
from .holder import Holder, hold
from .iface import As, Is, Unwrap, Wrap, implements
from .link import Link
from .ref import Ref

__all__ = [
    # Traversal
    "unwrap",
    "walk",
    "is_",
    "as_",
    # Construction
    "build",
    "Holder",
    "hold",
    "Link",
    "Ref",
    # Capabilities
    "Unwrap",
    "Is",
    "As",
    "Wrap",
    "implements",
    # Errors
    "ContractError",
]
