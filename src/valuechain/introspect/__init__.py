"""Introspection helpers - nil detection, assignability and deep equality."""

from .equality import deep_equal
from .nil import Nil, NoneType, declared_type, is_nil, value_of
from .type_example import IncorrectTypeError, TypeExample

__all__ = [
    "Nil",
    "NoneType",
    "is_nil",
    "value_of",
    "declared_type",
    "deep_equal",
    "TypeExample",
    "IncorrectTypeError",
]
