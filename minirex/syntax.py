# syntax check for patterns.
# verifies the first token of the pattern, then carries on with whatever
# is left. a group splits the pattern into three parts which are each
# checked as patterns of their own, so nothing here recurses: the parts
# still to be checked sit on a work stack.

from .tokens import CLOSE_GROUP, SEPARATOR, is_atom, is_open_group, quantifier_at


def is_valid(pattern: str) -> bool:
    """
    Return True if and only if `pattern` is a well-formed pattern.
    Never raises: a group with a missing `|` or `]` is simply invalid.
    """
    pending = [pattern]
    while pending:
        parts = _check_head(pending.pop())
        if parts is None:
            return False
        pending.extend(parts)
    return True


def _check_head(pattern):
    # consume atoms up to the first group. returns the sub-patterns the
    # group splits into (empty when there is no group), or None if invalid.
    pos = 0
    while pos < len(pattern):
        c = pattern[pos]
        if is_atom(c):
            # an atom may carry one quantifier; a second one is left as
            # the head of the next token and rejected there
            pos += 2 if quantifier_at(pattern, pos) else 1
        elif is_open_group(c):
            return _split_group(pattern[pos:])
        else:
            return None
    return []


def _split_group(pattern):
    # the separator is the first `|` after the bracket, the terminator the
    # last `]` anywhere in what remains. nested groups are only accepted
    # when they happen to fit that scan.
    bar = pattern.find(SEPARATOR)
    close = pattern.rfind(CLOSE_GROUP)
    if bar == -1 or close == -1 or close < bar:
        return None
    return [pattern[1:bar], pattern[bar + 1:close], pattern[close + 1:]]
