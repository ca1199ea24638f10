"""In-place partitioning of mutable sequences.

Both functions move every element failing ``predicate`` in front of every
element matching it and return the index of the first match, so that
``partition_point(items, predicate)`` finds the same index afterwards.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, MutableSequence

__all__ = ["partition", "stable_partition"]

Predicate = Callable[[Any], bool]

logger = logging.getLogger(__name__)


def partition(items: MutableSequence[Any], predicate: Predicate) -> int:
    lo = 0
    hi = len(items)
    # Loop invariants:
    # * predicate(items[i]) is false for i in [0, lo)
    # * predicate(items[i]) is true for i in [hi, len(items))
    while True:
        while lo < hi and not predicate(items[lo]):
            lo += 1
        if lo == hi:
            break
        hi -= 1
        while lo < hi and predicate(items[hi]):
            hi -= 1
        if lo == hi:
            break
        items[lo], items[hi] = items[hi], items[lo]
        lo += 1
    logger.debug("partitioned %d items at %d", len(items), lo)
    return lo


def stable_partition(items: MutableSequence[Any], predicate: Predicate) -> int:
    head: list[Any] = []
    tail: list[Any] = []
    for item in items:
        if predicate(item):
            tail.append(item)
        else:
            head.append(item)
    items[:] = head + tail
    logger.debug("stable-partitioned %d items at %d", len(items), len(head))
    return len(head)
