"""Binary search boundary queries over sorted sequences.

Every query takes a sequence that is already sorted (non-decreasing) under
the ordering in use and returns an index in ``[lo, hi]``. The default
ordering is ``<`` on the elements. ``key`` projects elements before they are
compared (the target is never projected, matching :mod:`bisect`), and
``before`` replaces ``<`` with a strict "is ordered before" predicate.

Sortedness is only verified when asked for, either per call with
``check=True`` or globally through ``SORTED_BOUNDS_VALIDATE``. Unsorted input
without validation gives an unspecified index but never raises.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, NamedTuple, Sequence, TypeVar

from sorted_bounds import config
from sorted_bounds.errors import UnsortedSequenceError

__all__ = [
    "BoundResult",
    "check_sorted",
    "contains",
    "equal_range",
    "insort_lower",
    "insort_upper",
    "is_partitioned",
    "is_sorted",
    "lower_bound",
    "partition_point",
    "sorted_index",
    "upper_bound",
]

T = TypeVar("T")
Key = Callable[[Any], Any]
Before = Callable[[Any, Any], bool]
Predicate = Callable[[Any], bool]

logger = logging.getLogger(__name__)


class BoundResult(NamedTuple):
    """Lower and upper insertion bounds of a target."""

    lower: int
    upper: int

    @property
    def count(self) -> int:
        return self.upper - self.lower

    @property
    def found(self) -> bool:
        return self.upper > self.lower

    def as_range(self) -> range:
        return range(self.lower, self.upper)

    def as_slice(self) -> slice:
        return slice(self.lower, self.upper)


def _search_window(lo: Any, hi: Any | None, size: int) -> tuple[int, int]:
    """Resolve ``lo``/``hi`` into a ``[start, stop)`` window over ``size`` items.

    Both ends must lie in ``[0, size]`` so every bound returned from the
    window is a valid insertion index. ``start > stop`` is allowed and yields
    ``start``.
    """
    try:
        start = operator.index(lo)
        stop = size if hi is None else operator.index(hi)
    except TypeError as exc:
        raise TypeError(f"search window bounds must be integers: {exc}") from None
    if start < 0:
        raise ValueError("lo must be non-negative")
    if start > size:
        raise IndexError(f"lo={start} is past the end of a {size}-item sequence")
    if stop > size:
        raise IndexError(f"hi={stop} is past the end of a {size}-item sequence")
    return start, stop


def _less(before: Before | None) -> Before:
    return operator.lt if before is None else before


def _first_not_before(
    a: Sequence[Any], x: Any, start: int, stop: int, key: Key | None, less: Before
) -> int:
    while start < stop:
        mid = (start + stop) // 2
        item = a[mid] if key is None else key(a[mid])
        if less(item, x):
            start = mid + 1
        else:
            stop = mid
    return start


def _first_after(
    a: Sequence[Any], x: Any, start: int, stop: int, key: Key | None, less: Before
) -> int:
    while start < stop:
        mid = (start + stop) // 2
        item = a[mid] if key is None else key(a[mid])
        if less(x, item):
            stop = mid
        else:
            start = mid + 1
    return start


def _first_unsorted(
    a: Sequence[Any], lo: int, hi: int, key: Key | None, before: Before | None
) -> int | None:
    if hi - lo < 2:
        return None
    less = _less(before)
    prev = a[lo] if key is None else key(a[lo])
    for idx in range(lo + 1, hi):
        item = a[idx] if key is None else key(a[idx])
        if less(item, prev):
            return idx
        prev = item
    return None


def _maybe_check(
    a: Sequence[Any],
    lo: int,
    hi: int,
    key: Key | None,
    before: Before | None,
    check: bool | None,
) -> None:
    if check is None:
        check = config.validate_default()
    if not check:
        return
    idx = _first_unsorted(a, lo, hi, key, before)
    if idx is not None:
        logger.debug("unsorted input at index %d of window [%d, %d)", idx, lo, hi)
        raise UnsortedSequenceError(idx)


def is_sorted(
    a: Sequence[Any], *, key: Key | None = None, before: Before | None = None
) -> bool:
    return _first_unsorted(a, 0, len(a), key, before) is None


def check_sorted(
    a: Sequence[Any], *, key: Key | None = None, before: Before | None = None
) -> None:
    """Raise :class:`UnsortedSequenceError` at the first out-of-order element."""
    _maybe_check(a, 0, len(a), key, before, True)


def lower_bound(
    a: Sequence[Any],
    x: Any,
    lo: int = 0,
    hi: int | None = None,
    *,
    key: Key | None = None,
    before: Before | None = None,
    check: bool | None = None,
) -> int:
    """Index of the first element not ordered before ``x``."""
    start, stop = _search_window(lo, hi, len(a))
    _maybe_check(a, start, stop, key, before, check)
    return _first_not_before(a, x, start, stop, key, _less(before))


def upper_bound(
    a: Sequence[Any],
    x: Any,
    lo: int = 0,
    hi: int | None = None,
    *,
    key: Key | None = None,
    before: Before | None = None,
    check: bool | None = None,
) -> int:
    """Index of the first element ``x`` is ordered before."""
    start, stop = _search_window(lo, hi, len(a))
    _maybe_check(a, start, stop, key, before, check)
    return _first_after(a, x, start, stop, key, _less(before))


def equal_range(
    a: Sequence[Any],
    x: Any,
    lo: int = 0,
    hi: int | None = None,
    *,
    key: Key | None = None,
    before: Before | None = None,
    check: bool | None = None,
) -> BoundResult:
    """Both bounds of ``x``.

    A single search narrows the window until a midpoint equivalent to ``x``
    turns up. The lower bound is then searched to its left and the upper
    bound to its right, so a long run of matches costs no more than two
    separate queries.
    """
    start, stop = _search_window(lo, hi, len(a))
    _maybe_check(a, start, stop, key, before, check)
    less = _less(before)
    while start < stop:
        mid = (start + stop) // 2
        item = a[mid] if key is None else key(a[mid])
        if less(item, x):
            start = mid + 1
        elif less(x, item):
            stop = mid
        else:
            return BoundResult(
                _first_not_before(a, x, start, mid, key, less),
                _first_after(a, x, mid + 1, stop, key, less),
            )
    return BoundResult(start, start)


def sorted_index(
    a: Sequence[Any],
    x: Any,
    lo: int = 0,
    hi: int | None = None,
    *,
    key: Key | None = None,
    before: Before | None = None,
    check: bool | None = None,
) -> int | None:
    """Index of the first element equivalent to ``x``, or ``None``."""
    idx = lower_bound(a, x, lo, hi, key=key, before=before, check=check)
    end = len(a) if hi is None else operator.index(hi)
    if idx >= end:
        return None
    item = a[idx] if key is None else key(a[idx])
    if _less(before)(x, item):
        return None
    return idx


def contains(
    a: Sequence[Any],
    x: Any,
    *,
    key: Key | None = None,
    before: Before | None = None,
    check: bool | None = None,
) -> bool:
    return sorted_index(a, x, key=key, before=before, check=check) is not None


def partition_point(
    a: Sequence[Any], predicate: Predicate, lo: int = 0, hi: int | None = None
) -> int:
    """First index whose element matches ``predicate``.

    ``a`` must already be partitioned: every element failing ``predicate``
    comes before every element matching it. Returns ``hi`` when nothing
    matches.
    """
    start, stop = _search_window(lo, hi, len(a))
    while start < stop:
        mid = (start + stop) // 2
        if predicate(a[mid]):
            stop = mid
        else:
            start = mid + 1
    return start


def is_partitioned(a: Sequence[Any], predicate: Predicate) -> bool:
    it = iter(a)
    for item in it:
        if predicate(item):
            break
    for item in it:
        if not predicate(item):
            return False
    return True


def insort_lower(
    a: list[T],
    x: T,
    lo: int = 0,
    hi: int | None = None,
    *,
    key: Key | None = None,
    before: Before | None = None,
) -> int:
    """Insert ``x`` before any equivalent elements and return its index."""
    target = x if key is None else key(x)
    pos = lower_bound(a, target, lo, hi, key=key, before=before, check=False)
    a.insert(pos, x)
    return pos


def insort_upper(
    a: list[T],
    x: T,
    lo: int = 0,
    hi: int | None = None,
    *,
    key: Key | None = None,
    before: Before | None = None,
) -> int:
    """Insert ``x`` after any equivalent elements and return its index."""
    target = x if key is None else key(x)
    pos = upper_bound(a, target, lo, hi, key=key, before=before, check=False)
    a.insert(pos, x)
    return pos
