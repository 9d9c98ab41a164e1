"""Tests for session id storage."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from keyring.errors import KeyringError

from aoc.errors import ConfigurationError
from aoc.session import PROMPT_TEXT, SessionIdStore


class TestSessionIdStore:
    def test_returns_stored_id(self) -> None:
        with patch("aoc.session.keyring.get_password", return_value="stored") as get_password, \
                patch("aoc.session.Prompt.ask") as ask:
            assert SessionIdStore().session_id() == "stored"
        get_password.assert_called_once_with("adventofcode", "session_id")
        ask.assert_not_called()

    def test_prompts_and_stores_when_missing(self) -> None:
        with patch("aoc.session.keyring.get_password", return_value=None), \
                patch("aoc.session.keyring.set_password") as set_password, \
                patch("aoc.session.Prompt.ask", return_value="  fresh\n") as ask:
            assert SessionIdStore("svc", "user").session_id() == "fresh"
        ask.assert_called_once_with(PROMPT_TEXT, password=True)
        set_password.assert_called_once_with("svc", "user", "fresh")

    def test_empty_answer_rejected(self) -> None:
        with patch("aoc.session.Prompt.ask", return_value="   "), \
                patch("aoc.session.keyring.set_password") as set_password:
            with pytest.raises(ConfigurationError, match="no session id"):
                SessionIdStore().prompt()
        set_password.assert_not_called()

    def test_credential_store_failure_is_wrapped(self) -> None:
        with patch("aoc.session.keyring.get_password", side_effect=KeyringError("locked")):
            with pytest.raises(ConfigurationError, match="credential store") as excinfo:
                SessionIdStore().session_id()
        assert isinstance(excinfo.value.__cause__, KeyringError)

    def test_store_failure_on_write(self) -> None:
        with patch("aoc.session.Prompt.ask", return_value="abc"), \
                patch("aoc.session.keyring.set_password", side_effect=KeyringError("read-only")):
            with pytest.raises(ConfigurationError, match="credential store"):
                SessionIdStore().prompt()
