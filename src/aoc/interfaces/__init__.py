"""User-facing terminal output."""

from __future__ import annotations
