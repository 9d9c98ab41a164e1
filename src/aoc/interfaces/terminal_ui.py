"""Rich terminal output for the aoc CLI.

Provides a ``TerminalUI`` helper that encapsulates all Rich console
operations: day headers, answers, warnings and error chains.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from aoc.errors import iter_causes
from aoc.solvers.base import MaybeSolution, Solution

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

AOC_THEME = Theme(
    {
        "aoc.header": "underline",
        "aoc.day": "bold underline",
        "aoc.answer": "bold",
        "aoc.dim": "dim white",
        "aoc.missing": "italic dim",
        "aoc.error": "bold red",
        "aoc.cause": "red",
        "aoc.warning": "yellow",
        "aoc.warning.label": "bold yellow",
        "aoc.info": "bold blue",
    }
)

CALENDAR = "\U0001f4c6"  # 📆
STAR = "⭐"  # ⭐


class TerminalUI:
    """Encapsulates all Rich-based rendering for the aoc CLI."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console(theme=AOC_THEME, highlight=False)
        self.err_console = err_console or Console(theme=AOC_THEME, highlight=False, stderr=True)

    # ------------------------------------------------------------------
    # Puzzle output
    # ------------------------------------------------------------------

    def print_day_header(self, year: int, day: int) -> None:
        """Print the ``📆 2023, day 5`` line that precedes each puzzle."""
        header = Text(f"{CALENDAR} ")
        header.append(f"{year}, day ", style="aoc.header")
        header.append(str(day), style="aoc.day")
        self.console.print()
        self.console.print(header, soft_wrap=True)

    def print_solution(self, solution: MaybeSolution, elapsed: float | None = None) -> None:
        """Print one answer line, optionally with the time it took."""
        line = Text(f"{STAR} ")
        if isinstance(solution, Solution):
            line.append(f"{solution.description}: ")
            line.append(solution.answer, style="aoc.answer")
        else:
            line.append(str(solution), style="aoc.missing")
        if elapsed is not None:
            line.append(f"  ({elapsed * 1000:.1f} ms)", style="aoc.dim")
        self.console.print(line, soft_wrap=True)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def print_warning(self, message: str) -> None:
        """Render a warning message."""
        text = Text("Warning: ", style="aoc.warning.label")
        text.append(message, style="aoc.warning")
        self.err_console.print(text, soft_wrap=True)

    def print_info(self, message: str) -> None:
        """Render an informational message."""
        self.console.print(Text(message, style="aoc.info"), soft_wrap=True)

    def print_error(self, exc: BaseException) -> None:
        """Render *exc* and the chain of errors that caused it."""
        causes = list(iter_causes(exc))
        self.err_console.print(Text(f"Error: {causes[0]}", style="aoc.error"), soft_wrap=True)
        if len(causes) > 1:
            self.err_console.print(Text("\nCaused by:", style="aoc.cause"), soft_wrap=True)
            for i, cause in enumerate(causes[1:]):
                message = str(cause) or type(cause).__name__
                self.err_console.print(Text(f"    {i}: {message}", style="aoc.cause"), soft_wrap=True)
