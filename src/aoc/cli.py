"""aoc CLI: Typer-based unified entry point.

Commands
--------
solve           Fetch inputs and print both answers (default).
set-session-id  Prompt for the session cookie and store it.
create          Scaffold solver modules for new days.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Optional

import typer

from aoc.errors import AocError
from aoc.interfaces.terminal_ui import TerminalUI
from aoc.solvers.base import MaybeSolution

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="aoc",
    help="Advent of Code puzzle-solving harness",
    add_completion=False,
)

_DAYS_HELP = "Puzzle day(s); repeat the option for several days. Defaults to today."
_YEAR_HELP = "Puzzle year. Defaults to the current year."


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


@contextmanager
def _reported_errors(ui: TerminalUI) -> Iterator[None]:
    """Print any :class:`AocError` with its causes and exit with status 1."""
    try:
        yield
    except AocError as exc:
        logger.debug("Command failed", exc_info=True)
        ui.print_error(exc)
        raise typer.Exit(1) from exc


def _timed(part: Callable[[], MaybeSolution]) -> tuple[MaybeSolution, float]:
    start = time.perf_counter()
    solution = part()
    return solution, time.perf_counter() - start


# ---------------------------------------------------------------------------
# Solving
# ---------------------------------------------------------------------------


async def _solve_days(year: int, days: list[int], ui: TerminalUI) -> None:
    from aoc.cache import FileCache
    from aoc.client import InputKey, close_client, fetch_input
    from aoc.config.settings import FALLBACK_CACHE_DIR, get_settings
    from aoc.solvers.registry import dispatch

    cfg = get_settings()
    cache_dir = cfg.resolved_cache_dir()
    if cfg.cache_dir is None and cache_dir == FALLBACK_CACHE_DIR:
        ui.print_warning(f"couldn't locate cache directory, using {FALLBACK_CACHE_DIR}")
    cache = FileCache(cache_dir, fetch_input)

    try:
        for day in days:
            ui.print_day_header(year, day)
            puzzle_input = await cache.get(InputKey(year, day))
            solver = dispatch(puzzle_input, year, day)
            ui.print_solution(*_timed(solver.solve_part_1))
            ui.print_solution(*_timed(solver.solve_part_2))
    finally:
        await close_client()


def _solve(year: Optional[int], days: Optional[list[int]], ui: TerminalUI) -> None:
    from aoc.dates import resolve_requested_days

    year, days = resolve_requested_days(year, days)
    logger.debug("Solving %d day(s) of %d: %s", len(days), year, days)
    with _reported_errors(ui):
        asyncio.run(_solve_days(year, days, ui))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback(invoke_without_command=True)
def default(
    ctx: typer.Context,
    days: Optional[list[int]] = typer.Option(None, "--days", "-d", help=_DAYS_HELP),
    year: Optional[int] = typer.Option(None, "--year", "-y", help=_YEAR_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Solve today's puzzle when no command is given."""
    _setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        _solve(year, days, TerminalUI())


@app.command()
def solve(
    days: Optional[list[int]] = typer.Option(None, "--days", "-d", help=_DAYS_HELP),
    year: Optional[int] = typer.Option(None, "--year", "-y", help=_YEAR_HELP),
) -> None:
    """Fetch the input for each day (cached) and print both answers."""
    _solve(year, days, TerminalUI())


@app.command("set-session-id")
def set_session_id() -> None:
    """Prompt for the Advent of Code session id and store it."""
    from aoc.config.settings import get_settings
    from aoc.session import SessionIdStore

    ui = TerminalUI()
    cfg = get_settings()
    with _reported_errors(ui):
        SessionIdStore(cfg.keyring_service, cfg.keyring_username).prompt()
    ui.print_info("Session id stored.")


@app.command()
def create(
    days: Optional[list[int]] = typer.Option(None, "--days", "-d", help=_DAYS_HELP),
    year: Optional[int] = typer.Option(None, "--year", "-y", help=_YEAR_HELP),
) -> None:
    """Scaffold solver modules and example files for the given days."""
    from aoc.config.settings import get_settings
    from aoc.dates import resolve_requested_days
    from aoc.scaffold import create_days

    ui = TerminalUI()
    year, days = resolve_requested_days(year, days)
    with _reported_errors(ui):
        report = create_days(year, days, get_settings().resolved_solvers_dir())
    for path in report.skipped:
        ui.print_warning(f"file '{path}' already exists, skipping")
    for path in report.created:
        ui.print_info(f"Created {path}")
    for key_year, key_day in report.registered:
        ui.print_info(f"Registered {key_year} day {key_day}")


def main() -> int:
    """Entry point for the ``aoc`` console script."""
    app()
    return 0
