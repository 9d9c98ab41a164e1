"""Write-once file cache for puzzle inputs.

Every entry is a single file in the cache directory named after the
serialised key.  On a miss the injected ``fetch`` coroutine is awaited; it
returns an async stream of byte chunks which is written to disk as it
arrives.  Entries are never updated or invalidated.

The cache does no locking and does not write atomically: two processes
populating the same entry at once may observe a partially written file.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Awaitable, Callable
from pathlib import Path
from typing import Generic, Protocol, TypeVar

from aoc.errors import CacheError

logger = logging.getLogger(__name__)


class Key(Protocol):
    """A cache key that can be turned into a file name."""

    def serialize(self) -> str: ...


K = TypeVar("K", bound=Key)

Fetch = Callable[[K], Awaitable[AsyncIterable[bytes]]]


class FileCache(Generic[K]):
    """Directory-of-files cache with a fetch-on-miss callback.

    Parameters
    ----------
    directory:
        Where entries are stored.  Created (with parents) if missing.
    fetch:
        Awaited with the key on a cache miss.  Must resolve to an async
        iterable of ``bytes`` chunks, which is consumed exactly once.
    """

    def __init__(self, directory: Path | str, fetch: Fetch[K]) -> None:
        self.directory = Path(directory)
        self._fetch = fetch
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheError(f"creating cache directory {self.directory}") from exc

    def path_for_key(self, key: K) -> Path:
        return self.directory / key.serialize()

    async def get(self, key: K) -> str:
        """Return the cached text for *key*, fetching it first if necessary."""
        path = self.path_for_key(key)
        if path.exists():
            logger.debug("Cache hit: %s", path)
        else:
            await self.populate(key, path)

        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise CacheError(f"read from {path}") from exc
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CacheError(f"decoding {path} as UTF-8") from exc

    async def populate(self, key: K, path: Path) -> None:
        """Stream the fetched content for *key* into *path*.

        The file is only created once the fetch has produced a stream, so a
        rejected request leaves no entry behind.  A stream that fails half
        way removes the partial file before the error propagates.
        """
        logger.info("Cache miss, fetching %s", key.serialize())
        source = await self._fetch(key)
        try:
            sink = path.open("wb")
        except OSError as exc:
            raise CacheError(f"creating file {path}") from exc

        n_bytes = 0
        try:
            with sink:
                async for chunk in source:
                    try:
                        sink.write(chunk)
                    except OSError as exc:
                        raise CacheError(f"writing to {path}") from exc
                    n_bytes += len(chunk)
        except BaseException:
            path.unlink(missing_ok=True)
            raise
        logger.info("Cached %d bytes in %s", n_bytes, path)
