"""Shared type aliases."""
from __future__ import annotations

from typing import Any, Callable, Sequence, TypeAlias, TypeVar

T = TypeVar("T")

SequenceMatcher: TypeAlias = Callable[[Sequence[Any], Sequence[Any]], bool]
