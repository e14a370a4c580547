"""Exceptions raised by minirex.

Every error derives from :class:`RegexError`. Syntax and no-match errors are
expected in normal use and always recoverable by the caller; the malformed
pattern error only shows up when a pattern reaches the matcher without going
through validation.
"""


class RegexError(Exception):
    """Base class for all minirex errors."""


class PatternSyntaxError(RegexError, ValueError):
    """Raised when a pattern fails validation at construction time."""

    def __init__(self, pattern):
        self.pattern = pattern
        super().__init__(f"Syntax error in regex: {pattern!r}")


class NoMatchError(RegexError, LookupError):
    """Raised by ``replace_first`` when the text holds no match."""

    def __init__(self, pattern, text):
        self.pattern = pattern
        self.text = text
        super().__init__(f"No match for {pattern!r} in {text!r}")


class MalformedPatternError(RegexError):
    """Raised when the matcher meets a group without ``|`` or ``]``."""

    def __init__(self, pattern):
        self.pattern = pattern
        super().__init__(f"Unterminated alternation group in {pattern!r}")


class MatchBudgetExceeded(RegexError, RuntimeError):
    """Raised when matching runs past its step or depth ceiling."""

    def __init__(self, kind, limit):
        self.kind = kind
        self.limit = limit
        super().__init__(f"Match exceeded {kind} limit of {limit}")


__all__ = [
    "MalformedPatternError",
    "MatchBudgetExceeded",
    "NoMatchError",
    "PatternSyntaxError",
    "RegexError",
]
