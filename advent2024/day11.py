"""Plutonian Pebbles: evolve a line of engraved stones by blinking."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence

from advent2024.day01 import _command

MULTIPLIER = 2024
DEFAULT_BLINKS = 75
_SHOWN_BLINKS = 10


def parse_stones(text: str) -> list[int]:
    """Parse whitespace-separated stone numbers; negative or non-integer values raise ValueError."""
    stones = [int(field) for field in text.split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stone numbers must not be negative")
    return stones


def transform(stone: int) -> tuple[int, ...]:
    """Return the stones that one stone becomes after a single blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        middle = len(digits) // 2
        return int(digits[:middle]), int(digits[middle:])
    return (stone * MULTIPLIER,)


def blink(stones: Iterable[int]) -> list[int]:
    """Apply one blink to every stone, keeping their order."""
    return [new for stone in stones for new in transform(stone)]


def _blink_counts(counts: Counter[int]) -> Counter[int]:
    result: Counter[int] = Counter()
    for stone, amount in counts.items():
        for new in transform(stone):
            result[new] += amount
    return result


def count_after(stones: Iterable[int], blinks: int) -> int:
    """Return how many stones there are after the given number of blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    counts = Counter(stones)
    for _ in range(blinks):
        counts = _blink_counts(counts)
    return sum(counts.values())


def main(argv: Sequence[str] | None = None) -> int:
    def solve(text: str, args: argparse.Namespace) -> int:
        stones = parse_stones(text)
        counts = Counter(stones)
        line = stones
        for step in range(1, args.blinks + 1):
            counts = _blink_counts(counts)
            shown = ""
            if step < _SHOWN_BLINKS:
                line = blink(line)
                shown = "".join(f"{stone} " for stone in line)
            print(f"{step} Stones: {sum(counts.values())} | {shown}")
        return sum(counts.values())

    return _command(
        argv,
        "Count stones after blinking.",
        solve,
        ("--blinks", {"type": int, "default": DEFAULT_BLINKS}),
    )


if __name__ == "__main__":
    sys.exit(main())