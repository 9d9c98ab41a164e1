"""Tests for the Typer CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from aoc.cli import app
from aoc.config.settings import Settings

runner = CliRunner()


@pytest.fixture()
def cached_inputs(isolated_settings: Settings, example) -> Path:
    cache_dir = isolated_settings.resolved_cache_dir()
    cache_dir.mkdir(parents=True)
    (cache_dir / "2023-09").write_text(example(2023, 9))
    (cache_dir / "2024-01").write_text(example(2024, 1))
    (cache_dir / "2015-01").write_text("()\n")
    return cache_dir


class TestSolveCommand:
    def test_prints_header_and_both_answers(self, cached_inputs: Path) -> None:
        result = runner.invoke(app, ["solve", "--year", "2023", "--days", "9"])
        assert result.exit_code == 0, result.output
        assert "2023, day 9" in result.output
        assert "Sum of extrapolated values: 114" in result.output
        assert result.output.count("⭐") == 2

    def test_is_the_default_command(self, cached_inputs: Path) -> None:
        result = runner.invoke(app, ["-y", "2024", "-d", "1"])
        assert result.exit_code == 0, result.output
        assert "Total distance: 11" in result.output
        assert "Similarity score: 31" in result.output

    def test_several_days(self, cached_inputs: Path, isolated_settings: Settings) -> None:
        (isolated_settings.resolved_cache_dir() / "2023-01").write_text("1abc2\n")
        result = runner.invoke(app, ["solve", "-y", "2023", "-d", "1", "-d", "9"])
        assert result.exit_code == 0, result.output
        assert result.output.index("2023, day 1") < result.output.index("2023, day 9")

    def test_missing_solver_exits_with_error(self, cached_inputs: Path) -> None:
        result = runner.invoke(app, ["solve", "-y", "2015", "-d", "1"])
        assert result.exit_code == 1
        assert "no solver for day 1 of year 2015" in result.output

    def test_cache_dir_fallback_warns_once(
        self,
        isolated_settings: Settings,
        example,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setattr(isolated_settings, "cache_dir", None)
        monkeypatch.chdir(tmp_path)
        fallback = tmp_path / "aoc-cache"
        fallback.mkdir()
        (fallback / "2023-09").write_text(example(2023, 9))
        with patch("aoc.config.settings.platformdirs.user_cache_path", side_effect=RuntimeError):
            result = runner.invoke(app, ["solve", "-y", "2023", "-d", "9"])
        assert result.exit_code == 0, result.output
        assert result.output.count("couldn't locate cache directory") == 1
        assert "Sum of extrapolated values: 114" in result.output
        assert not [r for r in caplog.records if "cache directory" in r.getMessage()]

    def test_fetch_failure_shows_cause(self, isolated_settings: Settings) -> None:
        with patch("aoc.session.SessionIdStore.session_id", return_value="bad session"):
            result = runner.invoke(app, ["solve", "-y", "2023", "-d", "2"])
        assert result.exit_code == 1
        assert "invalid bytes in session ID" in result.output
        assert not (isolated_settings.resolved_cache_dir() / "2023-02").exists()


class TestSetSessionIdCommand:
    def test_stores_prompted_id(self, isolated_settings: Settings) -> None:
        with patch("aoc.session.Prompt.ask", return_value="abc123"), \
                patch("aoc.session.keyring.set_password") as set_password:
            result = runner.invoke(app, ["set-session-id"])
        assert result.exit_code == 0, result.output
        set_password.assert_called_once_with("adventofcode", "session_id", "abc123")

    def test_empty_id_fails(self, isolated_settings: Settings) -> None:
        with patch("aoc.session.Prompt.ask", return_value=""):
            result = runner.invoke(app, ["set-session-id"])
        assert result.exit_code == 1
        assert "no session id entered" in result.output


class TestCreateCommand:
    @pytest.fixture()
    def solvers_dir(self, isolated_settings: Settings) -> Path:
        directory = isolated_settings.resolved_solvers_dir()
        directory.mkdir(parents=True)
        (directory / "day.py.template").write_text('"""{{year}} day {{day}}."""\n')
        (directory / "registry.py").write_text("T = {\n    # <<INSERT MARKER>>\n}\n")
        return directory

    def test_scaffolds_requested_day(self, solvers_dir: Path) -> None:
        result = runner.invoke(app, ["create", "-y", "2025", "-d", "4"])
        assert result.exit_code == 0, result.output
        assert (solvers_dir / "year2025" / "day4.py").read_text() == '"""2025 day 4."""\n'
        assert "aoc.solvers.year2025.day4" in (solvers_dir / "registry.py").read_text()

    def test_warns_about_existing_files(self, solvers_dir: Path) -> None:
        runner.invoke(app, ["create", "-y", "2025", "-d", "4"])
        result = runner.invoke(app, ["create", "-y", "2025", "-d", "4"])
        assert result.exit_code == 0, result.output
        assert "already exists, skipping" in result.output
