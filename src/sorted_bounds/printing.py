from __future__ import annotations

import sys
from typing import IO, Any, Iterable


def format_sequence(items: Iterable[Any]) -> str:
    parts = ["["]
    parts.extend(str(item) for item in items)
    parts.append("]")
    return " ".join(parts)


def print_sequence(items: Iterable[Any], file: IO[str] | None = None) -> None:
    out = sys.stdout if file is None else file
    out.write(format_sequence(items) + "\n")
