"""Solvers for days 1, 2, 3, 4, 6 and 11 of the 2024 Advent of Code puzzles."""

__version__ = "0.1.0"
__all__ = ["day01", "day02", "day03", "day04", "day06", "day11"]