"""Cyclic equality for rotating lists.

Two rotating lists are equal when the current view of one appears as a
contiguous run inside the other's view repeated twice. The match is exact
and order-preserving, so ``[1, 1, 2]`` equals ``[2, 1, 1]`` but not
``[1, 2, 2]``, even though both hold a 1 and a 2.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

from rotlist.config.loader import get_settings
from rotlist.config.models import EqualityAlgorithm
from rotlist.core.types import SequenceMatcher

if TYPE_CHECKING:
    from .rotating_list import RotatingList

logger = logging.getLogger("rotlist.rotation.equality")


def contains_in_order(container: Sequence[Any], contained: Sequence[Any]) -> bool:
    """Return ``True`` if ``contained`` is a contiguous run of ``container``.

    Shifts a window over ``container`` and compares element by element.
    """

    container = list(container)
    contained = list(contained)
    window = len(contained)
    for start in range(len(container) - window + 1):
        if container[start : start + window] == contained:
            return True
    return False


def _failure_table(pattern: Sequence[Any]) -> list[int]:
    table = [0] * len(pattern)
    matched = 0
    for index in range(1, len(pattern)):
        while matched and pattern[index] != pattern[matched]:
            matched = table[matched - 1]
        if pattern[index] == pattern[matched]:
            matched += 1
        table[index] = matched
    return table


def kmp_contains(container: Sequence[Any], contained: Sequence[Any]) -> bool:
    """Knuth-Morris-Pratt variant of :func:`contains_in_order`.

    Same result, linear in ``len(container) + len(contained)``.
    """

    pattern = list(contained)
    if not pattern:
        return True
    table = _failure_table(pattern)
    matched = 0
    for item in container:
        while matched and item != pattern[matched]:
            matched = table[matched - 1]
        if item == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return True
    return False


MATCHERS: Dict[EqualityAlgorithm, SequenceMatcher] = {
    EqualityAlgorithm.NAIVE: contains_in_order,
    EqualityAlgorithm.KMP: kmp_contains,
}


def equals(
    left: "RotatingList[Any]",
    right: "RotatingList[Any]",
    *,
    algorithm: Optional[EqualityAlgorithm | str] = None,
) -> bool:
    """Return ``True`` if ``left`` and ``right`` are rotations of each other.

    Pointers are ignored: only the cyclic order of the elements matters.
    ``algorithm`` overrides the configured matcher for this call.
    """

    if left.size() != right.size():
        return False
    chosen = EqualityAlgorithm(algorithm) if algorithm is not None else get_settings().equality_algorithm
    matcher = MATCHERS[chosen]
    result = matcher(right.take(right.size() * 2), left.to_list())
    logger.debug(
        "Cyclic equality evaluated",
        extra={"size": left.size(), "algorithm": chosen.value, "result": result},
    )
    return result


__all__ = ["MATCHERS", "contains_in_order", "equals", "kmp_contains"]
