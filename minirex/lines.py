from .errors import NoMatchError

# line-at-a-time helpers on top of Regex, the way grep and sed use a regex.
# trailing newlines are stripped before matching, since a newline is never
# part of the pattern alphabet.


def grep_lines(regex, lines, invert=False):
    # yields (lineno, line) for every line holding a match, starting at 1
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        found = regex.first_match(line) is not None
        if found != invert:
            yield lineno, line


def substitute_lines(regex, lines, replacement):
    # lines without a match come back unchanged
    for raw in lines:
        line = raw.rstrip("\r\n")
        try:
            yield regex.replace_first(line, replacement)
        except NoMatchError:
            yield line
