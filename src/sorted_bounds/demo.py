"""Fixed demonstration of lower/upper bounds on two small vectors."""

from __future__ import annotations

import sys
from typing import IO

from sorted_bounds.bounds import lower_bound, upper_bound
from sorted_bounds.printing import print_sequence

DEMO_TARGET = 3
DEMO_VECTORS = ([1, 2, 3, 4, 5], [1, 2, 4, 5])
_RULE = "-------------------------"


def run_demo(out: IO[str] | None = None) -> int:
    out = sys.stdout if out is None else out
    out.write("\n")
    out.write(f"{_RULE}\n")
    out.write("Tests with `<` comparator\n")
    out.write(f"{_RULE}\n")
    for number, vector in enumerate(DEMO_VECTORS, start=1):
        out.write(f"Test vector {number}\n")
        print_sequence(vector, file=out)
        low = lower_bound(vector, DEMO_TARGET, check=False)
        high = upper_bound(vector, DEMO_TARGET, check=False)
        out.write(f"Lower: {low}\nUpper: {high}\n")
        out.write("\n")
    return 0
