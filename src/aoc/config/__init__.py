"""Configuration for the aoc harness."""

from __future__ import annotations
