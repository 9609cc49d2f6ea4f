"""Immutable rotating list value type.

Storage keeps the current view followed by a copy of its first element, so a
list of ``n`` items is held as ``n + 1`` slots::

    items (1, 2, 3, 4, 5), pointer 1  ->  (1, 2, 3, 4, 5, 1)
    forward(3)                        ->  (4, 5, 1, 2, 3, 4), pointer 4

The pointer is 1-based and names the element of the original list (the
pointer 1 view) that currently leads. Every operation returns a new value;
nothing is mutated after construction.
"""
from __future__ import annotations

import logging
import warnings
from collections import Counter
from itertools import cycle, islice
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple

from rotlist.config.models import EqualityAlgorithm
from rotlist.core.errors import EmptyInputError, InvalidPointerError
from rotlist.core.types import T

from .equality import equals as cyclic_equals
from .stream import RotatingStream

logger = logging.getLogger("rotlist.rotation")


def _require_count(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def _rebuild(storage: Tuple[Any, ...], pointer: int) -> "RotatingList[Any]":
    return RotatingList._with_state(storage, pointer)


class RotatingList(Generic[T]):
    """Finite non-empty sequence traversed endlessly.

    ``len()``, ``in`` and ``iter()`` act on the current view only; use
    :meth:`take`, :meth:`slice` or :meth:`iterate` for the endless sequence.
    ``==`` is cyclic equality: two lists are equal if one is a rotation of
    the other, whatever their pointers.
    """

    __slots__ = ("_storage", "_pointer")

    _storage: Tuple[T, ...]
    _pointer: int

    def __init__(self, items: Iterable[T]) -> None:
        values = tuple(items)
        if not values:
            raise EmptyInputError("RotatingList requires at least one element")
        object.__setattr__(self, "_storage", values + values[:1])
        object.__setattr__(self, "_pointer", 1)
        logger.debug("RotatingList created", extra={"size": len(values)})

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(cls, items: Iterable[T]) -> "RotatingList[T]":
        """Build a list whose original view is ``items``, pointer 1."""

        return cls(items)

    @classmethod
    def from_range(
        cls,
        start: int | range,
        stop: Optional[int] = None,
        step: int = 1,
    ) -> "RotatingList[int]":
        """Materialize an integer range and build a list from it.

        Accepts either a ``range`` object, used as is, or ``start, stop[,
        step]`` bounds where ``stop`` is included: ``from_range(1, 5)`` holds
        1 through 5. A step pointing away from ``stop`` yields no elements.
        """

        if isinstance(start, range):
            if stop is not None or step != 1:
                raise TypeError("pass either a range object or start/stop/step, not both")
            values = start
        else:
            if stop is None:
                raise TypeError("from_range() needs a stop bound or a range object")
            if step == 0:
                raise ValueError("from_range() step must not be zero")
            values = range(start, stop + (1 if step > 0 else -1), step)
        return cls(values)

    @classmethod
    def _with_state(cls, storage: Tuple[T, ...], pointer: int) -> "RotatingList[T]":
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_storage", storage)
        object.__setattr__(instance, "_pointer", pointer)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_rebuild, (self._storage, self._pointer))

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    @property
    def pointer(self) -> int:
        return self._pointer

    def size(self) -> int:
        return len(self._storage) - 1

    def to_list(self) -> list[T]:
        """Return a snapshot of the current (rotated) view."""

        return list(self._storage[:-1])

    def to_tuple(self) -> Tuple[T, ...]:
        return self._storage[:-1]

    def peek_head(self) -> T:
        return self._storage[0]

    def head_tail(self) -> Tuple[T, "RotatingList[T]"]:
        """Destructure into ``(head, self)``.

        The "tail" is the list itself, unmoved; call :meth:`forward` on it to
        continue the walk. :meth:`next` does both steps at once.
        """

        return self._storage[0], self

    # ------------------------------------------------------------------
    # Pointer control and rotation
    # ------------------------------------------------------------------
    def _rotated(self, offset: int, pointer: int) -> "RotatingList[T]":
        # offset is the 0-based index in the current view of the new head
        n = self.size()
        storage = self._storage[offset:n] + self._storage[: offset + 1]
        return self._with_state(storage, pointer)

    def set_pointer(self, new_pointer: int) -> "RotatingList[T]":
        """Return the rotation led by original element ``new_pointer`` (1-based)."""

        n = self.size()
        if isinstance(new_pointer, bool) or not isinstance(new_pointer, int):
            raise InvalidPointerError(f"pointer must be an int, got {type(new_pointer).__name__}")
        if not 1 <= new_pointer <= n:
            raise InvalidPointerError(f"pointer {new_pointer} out of range [1, {n}]")
        if new_pointer == self._pointer:
            return self
        offset = (new_pointer - self._pointer) % n
        logger.debug(
            "Pointer moved",
            extra={"size": n, "from_pointer": self._pointer, "to_pointer": new_pointer},
        )
        return self._rotated(offset, new_pointer)

    def reset(self) -> "RotatingList[T]":
        """Return to the original view (pointer 1)."""

        return self.set_pointer(1)

    def forward(self, count: int = 1) -> "RotatingList[T]":
        """Rotate ``count`` steps: each step moves the head to the end."""

        _require_count(count, "count")
        n = self.size()
        steps = count % n
        if steps == 0:
            return self
        pointer = (self._pointer - 1 + steps) % n + 1
        return self._rotated(steps, pointer)

    def rotate(self) -> "RotatingList[T]":
        """Deprecated alias for ``forward(1)``."""

        warnings.warn(
            "RotatingList.rotate() is deprecated, use forward()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.forward(1)

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    def next(self) -> Tuple[T, "RotatingList[T]"]:
        """Return the head and the list rotated one step."""

        return self._storage[0], self.forward(1)

    def take(self, count: int) -> list[T]:
        """Return the first ``count`` elements of the endless sequence.

        ``count`` may exceed :meth:`size`; the view wraps around as often as
        needed.
        """

        _require_count(count, "count")
        return list(islice(cycle(self.to_tuple()), count))

    def slice(self, start: int, amount: int) -> list[T]:
        """Return ``amount`` elements starting at original index ``start`` (0-based)."""

        _require_count(amount, "amount")
        if isinstance(start, bool) or not isinstance(start, int):
            raise InvalidPointerError(f"start must be an int, got {type(start).__name__}")
        return self.set_pointer(start + 1).take(amount)

    def iterate(self) -> RotatingStream[T]:
        """Return a lazy, restartable, endless stream over this list."""

        return RotatingStream(self)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def equals(
        self,
        other: "RotatingList[Any]",
        *,
        algorithm: Optional[EqualityAlgorithm | str] = None,
    ) -> bool:
        return cyclic_equals(self, other, algorithm=algorithm)

    def same_state(self, other: object) -> bool:
        """Representation equality: same current view and same pointer."""

        if not isinstance(other, RotatingList):
            return False
        return self._pointer == other._pointer and self._storage == other._storage

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotatingList):
            return NotImplemented
        return cyclic_equals(self, other)

    def __hash__(self) -> int:
        # rotations share the same multiset of elements
        return hash((self.size(), frozenset(Counter(self.to_tuple()).items())))

    # ------------------------------------------------------------------
    # Display and container protocol
    # ------------------------------------------------------------------
    def format(self) -> str:
        return f"#RotatingList{self.to_list()!r}/{self._pointer}"

    def to_text(self) -> str:
        return "".join(str(item) for item in self.to_tuple())

    def __repr__(self) -> str:
        return self.format()

    def __str__(self) -> str:
        return self.to_text()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_tuple())

    def __contains__(self, item: object) -> bool:
        return item in self.to_tuple()


__all__ = ["RotatingList"]
