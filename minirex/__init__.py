"""minirex: a tiny regular expression engine.

Five operators over alphanumerics: literals, ``.``, ``*``, ``+`` and
``[r1|r2]``. Matching runs straight off the pattern text, no automaton is
built.
"""

from .config import EngineConfig
from .engine import Regex
from .errors import (
    MalformedPatternError,
    MatchBudgetExceeded,
    NoMatchError,
    PatternSyntaxError,
    RegexError,
)
from .matcher import matches
from .syntax import is_valid

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "MalformedPatternError",
    "MatchBudgetExceeded",
    "NoMatchError",
    "PatternSyntaxError",
    "Regex",
    "RegexError",
    "is_valid",
    "matches",
]
