"""Advent of Code HTTP client.

Performs the single authenticated request the harness needs: downloading
the personal puzzle input for a ``(year, day)`` pair.  Authentication is
the ``session`` cookie of a logged-in browser session.

The response body is exposed as a lazy async stream of byte chunks so the
cache can write it to disk as it arrives.  Any non-2xx response is fatal;
nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass

import httpx

from aoc import __version__
from aoc.errors import ConfigurationError, FetchError

logger = logging.getLogger(__name__)

_FORBIDDEN_SESSION_CHARS = frozenset(";,\r\n\t ")


@dataclass(frozen=True)
class InputKey:
    """Puzzle key identifying one day's input."""

    year: int
    day: int

    def serialize(self) -> str:
        return f"{self.year:04}-{self.day:02}"


def _validate_session_id(session_id: str) -> None:
    if (
        not session_id
        or not session_id.isascii()
        or not session_id.isprintable()
        or any(c in _FORBIDDEN_SESSION_CHARS for c in session_id)
    ):
        raise ConfigurationError("invalid bytes in session ID")


class AocClient:
    """Thin wrapper around :class:`httpx.AsyncClient` for input downloads.

    Parameters
    ----------
    base_url:
        Absolute ``http(s)`` URL of the Advent of Code site.
    session_id:
        Value of the ``session`` cookie.
    timeout:
        Seconds before a request is abandoned.
    transport:
        Optional transport override (tests use :class:`httpx.MockTransport`).
    """

    def __init__(
        self,
        base_url: str,
        session_id: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        try:
            url = httpx.URL(base_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ConfigurationError("client base URL") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError("base URL is not a valid base")
        if not url.path.endswith("/"):
            url = url.copy_with(path=url.path + "/")
        _validate_session_id(session_id)

        self.base_url = url
        self._client = httpx.AsyncClient(
            headers={
                "Cookie": f"session={session_id}",
                "User-Agent": f"aoc-harness/{__version__}",
            },
            timeout=timeout,
            follow_redirects=False,
            transport=transport,
        )

    def input_url(self, year: int, day: int) -> str:
        return str(self.base_url.join(f"{year}/day/{day}/input"))

    async def get_input(self, year: int, day: int) -> AsyncIterator[bytes]:
        """Request the input for *year*/*day* and return its body stream.

        The status is checked before this coroutine returns, so a rejected
        request raises here rather than while the body is consumed.
        """
        url = self.input_url(year, day)
        logger.info("GET %s", url)
        request = self._client.build_request("GET", url)
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise FetchError("HTTP GET") from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            await response.aclose()
            raise FetchError(f"HTTP GET {url} returned {response.status_code}") from exc

        return self._stream_body(response)

    @staticmethod
    async def _stream_body(response: httpx.Response) -> AsyncIterator[bytes]:
        try:
            async for chunk in response.aiter_bytes():
                yield chunk
        except httpx.HTTPError as exc:
            raise FetchError("reading HTTP response") from exc
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AocClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# Process-wide client, created on first use
# ---------------------------------------------------------------------------

_client: AocClient | None = None


def get_client() -> AocClient:
    """Return the shared client, constructing it on the first call.

    Construction reads the session id from the credential store (prompting
    for it if none is stored yet), so it only happens when an input
    actually has to be downloaded.
    """
    global _client
    if _client is None:
        from aoc.config.settings import get_settings
        from aoc.session import SessionIdStore

        cfg = get_settings()
        store = SessionIdStore(cfg.keyring_service, cfg.keyring_username)
        _client = AocClient(cfg.base_url, store.session_id(), timeout=cfg.http_timeout)
        logger.debug("Created HTTP client for %s", cfg.base_url)
    return _client


async def close_client() -> None:
    """Close the shared client if it was ever created."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def reset_client() -> None:
    """Forget the shared client without closing it (for tests)."""
    global _client
    _client = None


async def fetch_input(key: InputKey) -> AsyncIterator[bytes]:
    """Cache ``fetch`` callback downloading *key* with the shared client."""
    return await get_client().get_input(key.year, key.day)
