"""sorted_bounds: lower/upper bound queries over sorted sequences."""

from __future__ import annotations

import logging

from sorted_bounds.bounds import (
    BoundResult,
    check_sorted,
    contains,
    equal_range,
    insort_lower,
    insort_upper,
    is_partitioned,
    is_sorted,
    lower_bound,
    partition_point,
    sorted_index,
    upper_bound,
)
from sorted_bounds.errors import (
    InvalidInputError,
    SortedBoundsError,
    UnsortedSequenceError,
)
from sorted_bounds.partition import partition, stable_partition
from sorted_bounds.printing import format_sequence, print_sequence
from sorted_bounds.sorted_dict import SortedDict

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BoundResult",
    "InvalidInputError",
    "SortedBoundsError",
    "SortedDict",
    "UnsortedSequenceError",
    "check_sorted",
    "contains",
    "equal_range",
    "format_sequence",
    "insort_lower",
    "insort_upper",
    "is_partitioned",
    "is_sorted",
    "lower_bound",
    "partition",
    "partition_point",
    "print_sequence",
    "sorted_index",
    "stable_partition",
    "upper_bound",
]
