"""Session id storage in the platform credential store.

The Advent of Code session cookie is kept in the OS keychain via
``keyring`` (service ``adventofcode``, user ``session_id`` by default).
When no id is stored yet the user is prompted for one with hidden input.
"""

from __future__ import annotations

import logging

import keyring
from keyring.errors import KeyringError
from rich.prompt import Prompt

from aoc.errors import ConfigurationError

logger = logging.getLogger(__name__)

PROMPT_TEXT = "Your Advent of Code session id"


class SessionIdStore:
    """Read and write the session id credential."""

    def __init__(self, service: str = "adventofcode", username: str = "session_id") -> None:
        self.service = service
        self.username = username

    def prompt(self) -> str:
        """Ask for the session id, store it and return it."""
        session_id = Prompt.ask(PROMPT_TEXT, password=True).strip()
        if not session_id:
            raise ConfigurationError("no session id entered")
        try:
            keyring.set_password(self.service, self.username, session_id)
        except KeyringError as exc:
            raise ConfigurationError("credential store") from exc
        logger.info("Stored session id in credential store (%s/%s)", self.service, self.username)
        return session_id

    def session_id(self) -> str:
        """Return the stored session id, prompting for it if none is stored."""
        try:
            stored = keyring.get_password(self.service, self.username)
        except KeyringError as exc:
            raise ConfigurationError("credential store") from exc
        if stored is None:
            logger.info("No session id stored yet")
            return self.prompt()
        return stored
