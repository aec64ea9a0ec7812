"""Regular expressions that are guaranteed to be valid once built."""

from __future__ import annotations

import re


class BadRegexError(ValueError):
    """Raised when a pattern does not compile."""

    def __init__(self, pattern, reason):
        super().__init__(f"bad regexp {pattern}: {reason}")
        self.pattern = pattern
        self.reason = reason


def compile_checked(pattern):
    """Compile ``pattern`` or raise :class:`BadRegexError`.

    An already compiled pattern is returned unchanged.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, bytes):
        pattern = pattern.decode("latin-1")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise BadRegexError(pattern, str(exc)) from exc