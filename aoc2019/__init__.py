"""Solutions to days one to four of the 2019 Advent of Code puzzles."""

__version__ = "0.1.0"

__all__ = ["cli", "fuel", "intcode", "password", "wires"]