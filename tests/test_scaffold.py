"""Tests for ``aoc create`` scaffolding."""

from __future__ import annotations

from pathlib import Path

import pytest

from aoc.errors import AocError
from aoc.scaffold import add_registry_entries, create_days, render_template

REGISTRY = '''SOLVER_MODULES = {
    (2023, 1): "aoc.solvers.year2023.day1",
    # <<INSERT MARKER>>
}
'''


@pytest.fixture()
def solvers_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "solvers"
    directory.mkdir()
    (directory / "day.py.template").write_text('"""{{year}} day {{day}}."""\nDAY = {{day}}\n')
    (directory / "registry.py").write_text(REGISTRY)
    return directory


class TestRenderTemplate:
    def test_replaces_placeholders(self) -> None:
        assert render_template("{{year}}/{{day}}/{{day}}", 2024, 3) == "2024/3/3"


class TestCreateDays:
    def test_creates_modules_and_examples(self, solvers_dir: Path) -> None:
        report = create_days(2024, [2, 3], solvers_dir)
        year_dir = solvers_dir / "year2024"
        assert (year_dir / "__init__.py").exists()
        assert (year_dir / "day2.py").read_text() == '"""2024 day 2."""\nDAY = 2\n'
        assert (year_dir / "day3-1.example").read_text() == ""
        assert report.skipped == []
        assert report.registered == [(2024, 2), (2024, 3)]

    def test_existing_files_are_not_overwritten(self, solvers_dir: Path) -> None:
        year_dir = solvers_dir / "year2024"
        year_dir.mkdir()
        (year_dir / "day2.py").write_text("# mine\n")
        report = create_days(2024, [2], solvers_dir)
        assert (year_dir / "day2.py").read_text() == "# mine\n"
        assert year_dir / "day2.py" in report.skipped
        assert year_dir / "day2-1.example" in report.created

    def test_registry_patched_before_marker(self, solvers_dir: Path) -> None:
        create_days(2024, [5], solvers_dir)
        lines = (solvers_dir / "registry.py").read_text().splitlines()
        assert lines == [
            "SOLVER_MODULES = {",
            '    (2023, 1): "aoc.solvers.year2023.day1",',
            '    (2024, 5): "aoc.solvers.year2024.day5",',
            "    # <<INSERT MARKER>>",
            "}",
        ]

    def test_running_twice_registers_once(self, solvers_dir: Path) -> None:
        create_days(2024, [5], solvers_dir)
        second = create_days(2024, [5], solvers_dir)
        assert second.registered == []
        text = (solvers_dir / "registry.py").read_text()
        assert text.count("year2024.day5") == 1

    def test_missing_template(self, tmp_path: Path) -> None:
        with pytest.raises(AocError, match="template"):
            create_days(2024, [1], tmp_path)


class TestAddRegistryEntries:
    def test_missing_marker(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.py"
        path.write_text("SOLVER_MODULES = {}\n")
        with pytest.raises(AocError, match="INSERT MARKER"):
            add_registry_entries(path, 2024, [1])
        assert path.read_text() == "SOLVER_MODULES = {}\n"

    def test_marker_indentation_is_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.py"
        path.write_text("TABLE = {\n        # <<INSERT MARKER>>\n}\n")
        assert add_registry_entries(path, 2024, [1]) == [(2024, 1)]
        assert path.read_text() == (
            "TABLE = {\n"
            '        (2024, 1): "aoc.solvers.year2024.day1",\n'
            "        # <<INSERT MARKER>>\n"
            "}\n"
        )
