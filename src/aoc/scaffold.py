"""Scaffolding for new puzzle days (``aoc create``).

For every requested day a solver module is written from
``day.py.template`` next to an empty example file, and the registry table
in ``registry.py`` is extended by rewriting its insert marker.  Existing
files are never overwritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from aoc.errors import AocError
from aoc.solvers.registry import INSERT_MARKER

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "day.py.template"
REGISTRY_NAME = "registry.py"
SOLVERS_PACKAGE = "aoc.solvers"


@dataclass
class ScaffoldReport:
    """What :func:`create_days` did."""

    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    registered: list[tuple[int, int]] = field(default_factory=list)


def render_template(template: str, year: int, day: int) -> str:
    return template.replace("{{day}}", str(day)).replace("{{year}}", str(year))


def registry_entry(year: int, day: int) -> str:
    return f'({year}, {day}): "{SOLVERS_PACKAGE}.year{year}.day{day}",'


def write_if_non_existent(path: Path, content: str, report: ScaffoldReport) -> bool:
    """Create *path* with *content* unless it already exists.

    Returns whether the file was written; skipped paths are recorded in
    *report*.
    """
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        logger.warning("File %s already exists, skipping", path)
        report.skipped.append(path)
        return False
    except OSError as exc:
        raise AocError(f"writing {path}") from exc
    logger.info("Created %s", path)
    report.created.append(path)
    return True


def add_registry_entries(registry_path: Path, year: int, days: list[int]) -> list[tuple[int, int]]:
    """Insert table entries for *days* before each marker line of *registry_path*.

    Entries already present in the file are left out.  Returns the keys
    that were added.
    """
    try:
        source = registry_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AocError(f"reading {registry_path}") from exc

    existing = {line.strip() for line in source.splitlines()}
    new_keys = [(year, day) for day in days if registry_entry(year, day) not in existing]
    if not new_keys:
        return []

    if not any(line.strip() == INSERT_MARKER for line in source.splitlines()):
        raise AocError(f"no {INSERT_MARKER!r} line in {registry_path}")

    lines: list[str] = []
    for line in source.splitlines(keepends=True):
        if line.strip() != INSERT_MARKER:
            lines.append(line)
            continue
        indent = line[: len(line) - len(line.lstrip())]
        for key in new_keys:
            lines.append(f"{indent}{registry_entry(*key)}\n")
        lines.append(f"{indent}{INSERT_MARKER}\n")

    try:
        registry_path.write_text("".join(lines), encoding="utf-8")
    except OSError as exc:
        raise AocError(f"writing {registry_path}") from exc
    logger.info("Registered %d new solver(s) in %s", len(new_keys), registry_path)
    return new_keys


def create_days(year: int, days: list[int], solvers_dir: Path) -> ScaffoldReport:
    """Create solver and example files for *days* of *year* under *solvers_dir*.

    Parameters
    ----------
    year:
        Puzzle year; files go to ``solvers_dir/year<year>/``.
    days:
        Days to scaffold.
    solvers_dir:
        Directory holding ``day.py.template`` and ``registry.py``.
    """
    report = ScaffoldReport()
    template_path = solvers_dir / TEMPLATE_NAME
    try:
        template = template_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AocError(f"reading template {template_path}") from exc

    year_dir = solvers_dir / f"year{year}"
    try:
        year_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise AocError(f"creating {year_dir}") from exc
    init_path = year_dir / "__init__.py"
    if not init_path.exists():
        write_if_non_existent(init_path, f'"""Solvers for Advent of Code {year}."""\n', report)

    for day in days:
        write_if_non_existent(year_dir / f"day{day}.py", render_template(template, year, day), report)
        write_if_non_existent(year_dir / f"day{day}-1.example", "", report)

    report.registered = add_registry_entries(solvers_dir / REGISTRY_NAME, year, days)
    return report
