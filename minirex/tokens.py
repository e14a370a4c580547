# character predicates for the pattern alphabet.
# a pattern is never tokenized up front: the matcher and the validator
# look at the head of the remaining pattern and ask these questions.

STAR = "*"
PLUS = "+"
DOT = "."
OPEN_GROUP = "["
SEPARATOR = "|"
CLOSE_GROUP = "]"


def is_star(c):
    return c == STAR


def is_plus(c):
    return c == PLUS


def is_quantifier(c):
    return is_star(c) or is_plus(c)


def is_literal(c):
    # letters and decimal digits only; "½" and "²" are numeric but not digits
    return c.isalpha() or c.isdecimal()


def is_dot(c):
    return c == DOT


def is_atom(c):
    # anything a quantifier may follow
    return is_literal(c) or is_dot(c)


def is_open_group(c):
    return c == OPEN_GROUP


def quantifier_at(pattern, pos):
    # the quantifier bound to the atom at `pos`, or None
    if pos + 1 < len(pattern) and is_quantifier(pattern[pos + 1]):
        return pattern[pos + 1]
    return None


def head_token(pattern, pos=0):
    # the leading token as text: an atom with its quantifier, or one char
    if pos >= len(pattern):
        return ""
    if is_atom(pattern[pos]) and quantifier_at(pattern, pos):
        return pattern[pos:pos + 2]
    return pattern[pos]
