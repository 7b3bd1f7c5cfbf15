"""Mull It Over: add up the products of uncorrupted mul instructions."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from advent2024.day01 import _command

DO = "do()"
DONT = "don't()"

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")


def find_products(text: str) -> list[tuple[int, int]]:
    """Return the operands of every well-formed ``mul(X,Y)`` in order.

    X and Y must each be one to three digits with nothing else between the
    parentheses.
    """
    return [(int(a), int(b)) for a, b in _MUL.findall(text)]


def sum_products(text: str) -> int:
    """Add up the results of every well-formed ``mul(X,Y)``."""
    return sum(a * b for a, b in find_products(text))


def strip_disabled(text: str) -> str:
    """Remove each span from a ``don't()`` through the next ``do()``.

    A ``don't()`` with no later ``do()`` cuts the text off at that point.
    """
    while (start := text.find(DONT)) != -1:
        end = text.find(DO, start + len(DONT))
        if end == -1:
            return text[:start]
        text = text[:start] + text[end + len(DO):]
    return text


def main(argv: Sequence[str] | None = None) -> int:
    def solve(text: str, args: argparse.Namespace) -> int:
        lines = text.splitlines()
        if args.part == 1:
            products = [pair for line in lines for pair in find_products(line)]
        else:
            products = find_products(strip_disabled("".join(lines)))
        total = 0
        for a, b in products:
            total += a * b
            print(f"A: {a}, B: {b} M:{a * b}")
        return total

    return _command(argv, "Sum the products in corrupted memory.", solve)


if __name__ == "__main__":
    sys.exit(main())