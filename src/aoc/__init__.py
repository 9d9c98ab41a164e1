"""aoc: Advent of Code puzzle-solving harness.

Fetches puzzle inputs (cached on disk), dispatches to the matching
per-year / per-day solver and prints both answers.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
