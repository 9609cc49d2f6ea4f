"""Immutable rotating (circular) lists.

A :class:`RotatingList` is a finite, non-empty sequence that can be traversed
endlessly: consuming its first element yields a new value rotated by one step,
and the pointer tracks which element of the original list currently leads.
Two rotating lists compare equal when one is a rotation of the other.
"""
from .core.errors import (
    ConfigurationError,
    EmptyInputError,
    InvalidPointerError,
    RotatingListError,
)
from .rotation import RotatingList, RotatingStream, equals

__all__ = [
    "ConfigurationError",
    "EmptyInputError",
    "InvalidPointerError",
    "RotatingList",
    "RotatingListError",
    "RotatingStream",
    "equals",
]
