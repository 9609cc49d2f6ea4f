"""Lazy endless stream over a rotating list.

A stream never materializes the infinite sequence: iteration is a generator
restarted on every ``iter()`` call, and bounded windows go through
:meth:`RotatingList.slice`. Consumers asking for the total length get the
configured ``unbounded_length`` sentinel.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterator, overload

from rotlist.config.loader import get_settings
from rotlist.core.types import T

if TYPE_CHECKING:
    from .rotating_list import RotatingList


class RotatingStream(Generic[T]):
    """Endless, restartable view of a :class:`RotatingList`.

    Index 0 is the head of the source's current view.
    """

    __slots__ = ("_source",)

    def __init__(self, source: "RotatingList[T]") -> None:
        self._source = source

    @property
    def source(self) -> "RotatingList[T]":
        return self._source

    def __iter__(self) -> Iterator[T]:
        view = self._source.to_tuple()
        while True:
            yield from view

    def __len__(self) -> int:
        return get_settings().unbounded_length

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> list[T]: ...

    def __getitem__(self, key: int | slice) -> T | list[T]:
        if isinstance(key, slice):
            return self._window(key)
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"stream indices must be integers or slices, not {type(key).__name__}")
        if key < 0:
            raise IndexError("negative indices are undefined on an endless stream")
        return self._window(slice(key, key + 1))[0]

    def _window(self, key: slice) -> list[T]:
        start = 0 if key.start is None else key.start
        step = 1 if key.step is None else key.step
        if key.stop is None:
            raise ValueError("stream slices need an explicit stop")
        if start < 0 or key.stop < 0:
            raise ValueError("stream slices take non-negative bounds")
        if step < 1:
            raise ValueError("stream slice step must be >= 1")
        amount = max(key.stop - start, 0)
        if amount == 0:
            return []
        source = self._source
        # slice() addresses the original list, 0-based
        origin = (source.pointer - 1 + start) % source.size()
        return source.slice(origin, amount)[::step]

    def take(self, count: int) -> list[T]:
        return self._source.take(count)

    def advance(self, count: int = 1) -> "RotatingStream[T]":
        """Return a stream starting ``count`` elements later."""

        return RotatingStream(self._source.forward(count))

    def __repr__(self) -> str:
        return f"RotatingStream({self._source!r})"


__all__ = ["RotatingStream"]
