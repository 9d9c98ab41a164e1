"""Shared test fixtures for the aoc harness.

Provides example-input loading, a fake fetch callback that counts its
calls, and isolation of the process-wide settings and HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterator
from importlib import resources
from pathlib import Path

import pytest

from aoc.client import reset_client
from aoc.config.settings import Settings

# ---------------------------------------------------------------------------
# Example inputs
# ---------------------------------------------------------------------------


def load_example(year: int, day: int, suffix: str = "1") -> str:
    """Text of ``day<day>-<suffix>.example`` stored next to the solver module."""
    package = resources.files(f"aoc.solvers.year{year}")
    return (package / f"day{day}-{suffix}.example").read_text(encoding="utf-8")


@pytest.fixture()
def example() -> Callable[..., str]:
    """Loader for the example inputs shipped with the solvers."""
    return load_example


# ---------------------------------------------------------------------------
# Fetch / cache fixtures
# ---------------------------------------------------------------------------


class FakeFetch:
    """Fetch callback serving fixed chunks and recording requested keys."""

    def __init__(self, chunks: list[bytes]) -> None:
        self.chunks = chunks
        self.keys: list[object] = []

    @property
    def calls(self) -> int:
        return len(self.keys)

    async def __call__(self, key: object) -> AsyncIterator[bytes]:
        self.keys.append(key)
        return self._stream()

    async def _stream(self) -> AsyncIterator[bytes]:
        for chunk in self.chunks:
            yield chunk


@pytest.fixture()
def fake_fetch() -> FakeFetch:
    return FakeFetch([b"Test", b"Value"])


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_client() -> Iterator[None]:
    """Never let a test reuse a client created by another test."""
    reset_client()
    yield
    reset_client()


@pytest.fixture()
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings pointing the cache and scaffolding into ``tmp_path``."""
    cfg = Settings(
        base_url="https://aoc.example.test/",
        cache_dir=tmp_path / "cache",
        solvers_dir=tmp_path / "solvers",
        _env_file=None,
    )
    monkeypatch.setattr("aoc.config.settings.settings", cfg)
    return cfg
