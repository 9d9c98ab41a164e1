"""Error taxonomy for the aoc harness.

Every failure is fatal for the invocation.  Lower layers raise the most
specific subclass and upper layers chain it (``raise ... from exc``) with a
short note of what they were attempting; the CLI prints the whole chain.
"""

from __future__ import annotations


class AocError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(AocError):
    """Invalid base URL, unusable session id or credential store failure."""


class FetchError(AocError):
    """The puzzle input could not be downloaded."""


class CacheError(AocError):
    """The on-disk input cache could not be read or written."""


class DispatchError(AocError):
    """No solver is registered for the requested puzzle."""


class PuzzleError(AocError):
    """Base class for per-puzzle failures."""


class ParseError(PuzzleError):
    """The puzzle input does not match the expected grammar."""


class SolveError(PuzzleError):
    """The puzzle has no solution under the solver's assumptions."""


def iter_causes(exc: BaseException):
    """Yield *exc* followed by every exception it was raised from."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__
