"""Historian Hysteria: reconcile two lists of location IDs."""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from collections.abc import Callable, Sequence
from typing import Any

_PART_OPTION: tuple[str, dict[str, Any]] = (
    "--part",
    {"type": int, "choices": (1, 2), "default": 1},
)


def _command(
    argv: Sequence[str] | None,
    description: str,
    solve: Callable[[str, argparse.Namespace], int],
    option: tuple[str, dict[str, Any]] = _PART_OPTION,
) -> int:
    """Read a puzzle file, solve it, and print the count and the time taken."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("filename", nargs="?", default="input.txt")
    flag, settings = option
    parser.add_argument(flag, **settings)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        with open(args.filename, encoding="utf-8") as handle:
            text = handle.read()
        count = solve(text, args)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Count: {count}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split whitespace-separated pairs into a left and a right list.

    Blank lines are ignored. Anything after the second number on a line is
    ignored. A line that does not start with two integers raises ValueError.
    """
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"line {number}: expected two location IDs, got {line!r}")
        try:
            left.append(int(fields[0]))
            right.append(int(fields[1]))
        except ValueError as exc:
            raise ValueError(f"line {number}: {exc}") from None
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum the distances between the lists once both are sorted."""
    if len(left) != len(right):
        raise ValueError("lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left value times how often it appears in the right list."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def main(argv: Sequence[str] | None = None) -> int:
    def solve(text: str, args: argparse.Namespace) -> int:
        measure = total_distance if args.part == 1 else similarity_score
        return measure(*parse_lists(text))

    return _command(argv, "Compare two lists of location IDs.", solve)


if __name__ == "__main__":
    sys.exit(main())