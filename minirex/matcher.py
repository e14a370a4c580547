# the matcher.
# works directly on the pattern text: look at the leading token of what is
# left of the pattern, check it against the text at the current offset,
# strip it off and carry on. no tree, no automaton.
#
# tail positions (literals, a run eaten by a star) are handled by looping
# instead of recursing; only the two branches of an alternation recurse, so
# the python stack grows with the bracket nesting of the pattern and nothing
# else.

import logging

from .config import EngineConfig
from .errors import MalformedPatternError, MatchBudgetExceeded
from .tokens import (
    CLOSE_GROUP,
    SEPARATOR,
    head_token,
    is_dot,
    is_literal,
    is_open_group,
    is_plus,
    is_star,
    quantifier_at,
)

logger = logging.getLogger(__name__)


class StepBudget:
    # shared by every frame of one top-level call
    def __init__(self, config):
        self.max_steps = config.max_steps
        self.max_depth = config.max_depth
        self.steps = 0

    def tick(self):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            logger.warning("match gave up after %d steps", self.max_steps)
            raise MatchBudgetExceeded("step", self.max_steps)

    def enter(self, depth):
        if self.max_depth is not None and depth > self.max_depth:
            logger.warning("match gave up at alternation depth %d", depth)
            raise MatchBudgetExceeded("depth", self.max_depth)


def matches(pattern: str, text: str, config=None, tracer=None, start: int = 0,
            budget=None) -> bool:
    """
    Return True if `pattern` matches all of `text[start:]`.

    The pattern is assumed to be valid (see `minirex.syntax.is_valid`); a
    group missing its `|` or `]` raises MalformedPatternError.

    Pass the same `budget` to several calls to make them share one step
    ceiling; otherwise a fresh one is built from `config`.
    """
    if budget is None:
        budget = StepBudget(config or EngineConfig())
    return _match(pattern, text, start, budget, tracer, 0)


def _match(pattern, text, pos, budget, tracer, depth):
    budget.enter(depth)
    if tracer is None:
        return _scan(pattern, text, pos, budget, tracer, depth)
    tracer.enter(pattern, pos)
    # a frame cut short by an error is closed as a failure
    result = False
    try:
        result = _scan(pattern, text, pos, budget, tracer, depth)
    finally:
        tracer.exit(result)
    return result


def _scan(pattern, text, pos, budget, tracer, depth):
    p = 0
    while True:
        budget.tick()
        if p == len(pattern):
            # the pattern is used up; the text has to be as well
            return pos == len(text)
        if tracer is not None:
            tracer.step(head_token(pattern, p), pos)

        c = pattern[p]
        quantifier = quantifier_at(pattern, p)

        if is_literal(c):
            if quantifier is None:
                if pos < len(text) and text[pos] == c:
                    p += 1
                    pos += 1
                    continue
                return False
            if is_plus(quantifier):
                # one copy is required, after that `c+` is just `c*`
                if pos >= len(text) or text[pos] != c:
                    return False
                pos += 1
            # greedy and never gives a character back: `a*a` fails on "aa"
            while pos < len(text) and text[pos] == c:
                budget.tick()
                pos += 1
            p += 2

        elif is_dot(c):
            # `.*` and `.+` decide on their own without looking at the rest
            # of the pattern
            if is_star(quantifier):
                return True
            if is_plus(quantifier):
                return len(text) - pos > 1
            if pos >= len(text):
                return False
            p += 1
            pos += 1

        elif is_open_group(c):
            left, right = split_alternatives(pattern, p)
            return (
                _match(left, text, pos, budget, tracer, depth + 1)
                or _match(right, text, pos, budget, tracer, depth + 1)
            )

        else:
            return False


def split_alternatives(pattern, p=0):
    """
    Split the group opening at `pattern[p]` into its two alternatives, each
    with the rest of the pattern after the group appended.

    The terminator is the last `]` and the separator the last `|` before it.
    """
    close = pattern.rfind(CLOSE_GROUP, p)
    bar = pattern.rfind(SEPARATOR, p, close) if close != -1 else -1
    if bar == -1:
        raise MalformedPatternError(pattern[p:])
    rest = pattern[close + 1:]
    return pattern[p + 1:bar] + rest, pattern[bar + 1:close] + rest
