"""Environment-driven application settings.

All values are loaded from environment variables (prefix ``AOC_``) or a
``.env`` file in the working directory.  Nothing is required: the defaults
talk to adventofcode.com and cache inputs in the platform cache directory.
"""

from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FALLBACK_CACHE_DIR = Path("./aoc-cache")


def default_cache_dir() -> Path:
    """Return ``<platform cache dir>/aoc``, or ``./aoc-cache`` if undeterminable."""
    try:
        base = platformdirs.user_cache_path()
    except (KeyError, RuntimeError, OSError):
        base = None
    if base is None or not str(base):
        return FALLBACK_CACHE_DIR
    return base / "aoc"


def default_solvers_dir() -> Path:
    """Directory of the installed ``aoc.solvers`` package."""
    import aoc.solvers

    return Path(aoc.solvers.__file__).resolve().parent


class Settings(BaseSettings):
    """Top-level settings."""

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "https://adventofcode.com/"
    cache_dir: Path | None = None
    """Input cache location; ``None`` means :func:`default_cache_dir`."""
    http_timeout: float = Field(default=30.0, gt=0.0, le=600.0)
    """Seconds before an HTTP request is abandoned."""

    keyring_service: str = "adventofcode"
    keyring_username: str = "session_id"

    solvers_dir: Path | None = None
    """Where ``create`` scaffolds new solvers; ``None`` means the installed package."""

    def resolved_cache_dir(self) -> Path:
        return self.cache_dir if self.cache_dir is not None else default_cache_dir()

    def resolved_solvers_dir(self) -> Path:
        return self.solvers_dir if self.solvers_dir is not None else default_solvers_dir()


# Module-level singleton, import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
