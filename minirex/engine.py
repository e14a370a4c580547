import logging
from typing import Optional

from .config import EngineConfig
from .errors import NoMatchError, PatternSyntaxError
from .matcher import StepBudget, matches
from .syntax import is_valid
from .tracer import MatchTracer

logger = logging.getLogger(__name__)


class Regex:
    """
    A validated pattern, ready to match.

    Supported syntax:

        c        an alphanumeric literal, matches exactly that character
        .        matches any one character
        r1r2     r1 followed by r2
        c* .*    zero or more (greedy, never backtracks)
        c+ .+    one or more
        [r1|r2]  r1 or r2, followed by whatever comes after the `]`

    The pattern is checked once, here; nothing afterwards re-validates it.
    Instances never change after construction and may be shared freely.

    >>> Regex("a+b").matches("aaab")
    True
    >>> Regex("a+").first_match("baa")
    'aa'
    """

    def __init__(self, pattern: str, config: Optional[EngineConfig] = None):
        if not is_valid(pattern):
            raise PatternSyntaxError(pattern)
        self._pattern = pattern
        self._config = config if config is not None else EngineConfig.from_env()
        logger.debug("compiled %r with %s", pattern, self._config)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def config(self) -> EngineConfig:
        return self._config

    def __repr__(self):
        return f"Regex({self._pattern!r})"

    def matches(self, text: str) -> bool:
        # the whole text has to match, not just a prefix of it
        return matches(self._pattern, text, self._config)

    def first_match(self, text: str):
        """
        Return the first suffix of `text`, scanning start offsets left to
        right, that the pattern matches entirely; None if there is none.
        """
        start = self._first_offset(text)
        return None if start is None else text[start:]

    def search(self, text: str):
        # (start, end) span of the suffix first_match would return
        start = self._first_offset(text)
        return None if start is None else (start, len(text))

    def replace_first(self, text: str, replacement: str) -> str:
        """
        Find the first match and substitute `replacement` for it.

        The substitution goes by value: every non-overlapping occurrence of
        the matched substring, left to right, is replaced. For instance
        Regex("aaa").replace_first("aaaaaaa", "b") returns "bba".
        Raises NoMatchError when the text holds no match.
        """
        found = self.first_match(text)
        if found is None:
            raise NoMatchError(self._pattern, text)
        return text.replace(found, replacement)

    def trace(self, text: str) -> MatchTracer:
        """
        Match `text` like `matches` does, recording every decision.
        """
        tracer = MatchTracer()
        matches(self._pattern, text, self._config, tracer=tracer)
        return tracer

    def _first_offset(self, text):
        # one step ceiling for the whole scan, not one per offset
        budget = StepBudget(self._config)
        for start in range(len(text)):
            if matches(self._pattern, text, start=start, budget=budget):
                return start
        return None
