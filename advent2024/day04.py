"""Ceres Search: find every XMAS in a word search."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator, Sequence

TARGET = "XMAS"

_DIRECTIONS = (
    (0, 1),    # E
    (0, -1),   # W
    (1, 0),    # S
    (-1, 0),   # N
    (-1, -1),  # NW
    (-1, 1),   # NE
    (1, 1),    # SE
    (1, -1),   # SW
)

_RED = "\x1b[31m"
_BLUE = "\x1b[34m"
_RESET = "\x1b[0m"


def parse_grid(text: str) -> list[str]:
    """Return the non-empty rows of a word search."""
    return [line for line in text.splitlines() if line]


def _letter(grid: Sequence[str], row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _matches_from(grid: Sequence[str], row: int, col: int) -> Iterator[tuple[int, int]]:
    """Yield each direction in which TARGET is spelled starting at (row, col)."""
    for d_row, d_col in _DIRECTIONS:
        if all(
            _letter(grid, row + step * d_row, col + step * d_col) == letter
            for step, letter in enumerate(TARGET)
        ):
            yield d_row, d_col


def _cells(grid: Sequence[str]) -> Iterator[tuple[int, int]]:
    for row, line in enumerate(grid):
        for col, letter in enumerate(line):
            if letter == TARGET[0]:
                yield row, col


def count_xmas(grid: Sequence[str]) -> int:
    """Count occurrences of XMAS in all eight directions."""
    return sum(
        sum(1 for _ in _matches_from(grid, row, col)) for row, col in _cells(grid)
    )


def xmas_starts(grid: Sequence[str]) -> set[tuple[int, int]]:
    """Return the (row, column) of every X that begins at least one XMAS."""
    return {
        (row, col)
        for row, col in _cells(grid)
        if next(_matches_from(grid, row, col), None) is not None
    }


def _render(grid: Sequence[str], starts: set[tuple[int, int]]) -> str:
    lines = []
    for row, line in enumerate(grid):
        coloured = "".join(
            (_RED if (row, col) in starts else _BLUE) + letter
            for col, letter in enumerate(line)
        )
        lines.append(coloured + _RESET)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count XMAS in a word search.")
    parser.add_argument("filename", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        with open(args.filename, encoding="utf-8") as handle:
            grid = parse_grid(handle.read())
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1

    count = count_xmas(grid)
    print(_render(grid, xmas_starts(grid)))
    print(f"Count: {count}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())