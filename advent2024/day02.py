"""Red-Nosed Reports: decide which reactor reports are safe."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from advent2024.day01 import _command

MAX_STEP = 3


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report of space-separated levels per line.

    Blank lines are skipped; a non-integer level raises ValueError.
    """
    reports: list[list[int]] = []
    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        try:
            reports.append([int(field) for field in fields])
        except ValueError as exc:
            raise ValueError(f"line {number}: {exc}") from None
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """Return True if levels move steadily in one direction by 1 to 3 each step."""
    steps = [right - left for left, right in zip(levels, levels[1:])]
    if not steps:
        return True
    increasing = steps[0] > 0
    return all((step > 0) == increasing and 1 <= abs(step) <= MAX_STEP for step in steps)


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """Return True if the report is safe, or becomes safe with one level removed."""
    if is_safe(levels):
        return True
    return any(
        is_safe([*levels[:skip], *levels[skip + 1:]]) for skip in range(len(levels))
    )


def count_safe(reports: Iterable[Sequence[int]], dampener: bool = False) -> int:
    """Count the safe reports, optionally with the Problem Dampener."""
    check = is_safe_dampened if dampener else is_safe
    return sum(1 for report in reports if check(report))


def main(argv: Sequence[str] | None = None) -> int:
    def solve(text: str, args: argparse.Namespace) -> int:
        return count_safe(parse_reports(text), dampener=args.part == 2)

    return _command(argv, "Count safe reactor reports.", solve)


if __name__ == "__main__":
    sys.exit(main())