from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from sorted_bounds import config
from sorted_bounds.bounds import equal_range, sorted_index
from sorted_bounds.demo import run_demo
from sorted_bounds.errors import InvalidInputError
from sorted_bounds.printing import print_sequence

logger = logging.getLogger("sorted_bounds.cli")

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _parse_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidInputError(f"not an integer: {raw!r}") from exc


def _parse_ints(raws: Sequence[str]) -> list[int]:
    return [_parse_int(raw) for raw in raws]


def _configure_logging(raw_level: str | None) -> None:
    if raw_level is None:
        level = config.log_level()
    else:
        level = config.parse_log_level(raw_level)
    logging.basicConfig(level=level, stream=sys.stderr, format=_LOG_FORMAT)
    logging.getLogger("sorted_bounds").setLevel(level)


def query(target: str, values: Sequence[str], check: bool, as_json: bool) -> int:
    try:
        needle = _parse_int(target)
        items = _parse_ints(values)
        bounds = equal_range(items, needle, check=check or None)
    except InvalidInputError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2
    logger.debug("query %d over %d values -> %s", needle, len(items), bounds)
    if as_json:
        payload = {
            "lower": bounds.lower,
            "upper": bounds.upper,
            "count": bounds.count,
            "index": sorted_index(items, needle, check=False),
        }
        print(json.dumps(payload, sort_keys=True))
        return 0
    print(f"Lower: {bounds.lower}")
    print(f"Upper: {bounds.upper}")
    return 0


def print_values(values: Sequence[str]) -> int:
    try:
        items = _parse_ints(values)
    except InvalidInputError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2
    print_sequence(items)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sorted-bounds")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to $SORTED_BOUNDS_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Print bounds for the built-in vectors")

    query_parser = subparsers.add_parser(
        "query", help="Print the lower and upper bound of a target"
    )
    query_parser.add_argument("target", help="Integer to search for")
    query_parser.add_argument(
        "values", nargs="*", help="Integers in non-decreasing order"
    )
    query_parser.add_argument(
        "--check",
        action="store_true",
        help="Reject values that are not sorted",
    )
    query_parser.add_argument(
        "--json", action="store_true", help="Emit the result as a JSON object"
    )

    print_parser = subparsers.add_parser("print", help="Echo integers as a list")
    print_parser.add_argument("values", nargs="*", help="Integers to print")

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.command == "demo":
        return run_demo()
    if args.command == "query":
        return query(args.target, args.values, args.check, args.json)
    return print_values(args.values)


if __name__ == "__main__":
    raise SystemExit(main())
