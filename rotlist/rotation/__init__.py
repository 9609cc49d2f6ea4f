"""Rotating list value type, cyclic equality and lazy streams."""
from .equality import contains_in_order, equals, kmp_contains
from .rotating_list import RotatingList
from .stream import RotatingStream

__all__ = [
    "RotatingList",
    "RotatingStream",
    "contains_in_order",
    "equals",
    "kmp_contains",
]
