import argparse
import dataclasses
import logging
import sys

from .config import EngineConfig
from .engine import Regex
from .errors import NoMatchError, RegexError
from .lines import grep_lines
from .tracer import persist_trace, visualize_trace

logger = logging.getLogger(__name__)

# exit codes, grep style: 0 found something, 1 found nothing, 2 trouble
EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def _check(regex, args):
    print(f"{regex.pattern!r} is valid")
    return EXIT_OK


def _match(regex, args):
    result = regex.matches(args.text)
    print(result)
    return EXIT_OK if result else EXIT_NO_MATCH


def _find(regex, args):
    found = regex.first_match(args.text)
    if found is None:
        return EXIT_NO_MATCH
    print(found)
    return EXIT_OK


def _replace(regex, args):
    try:
        print(regex.replace_first(args.text, args.replacement))
    except NoMatchError as e:
        print(e, file=sys.stderr)
        return EXIT_NO_MATCH
    return EXIT_OK


def _grep(regex, args):
    # read from a file or stdin
    if args.input:
        with open(args.input, encoding="utf-8") as f:
            lines = f.read().splitlines()
    else:
        lines = sys.stdin.read().splitlines()

    status = EXIT_NO_MATCH
    for lineno, line in grep_lines(regex, lines, invert=args.invert):
        status = EXIT_OK
        print(f"{lineno}:{line}" if args.line_number else line)
    return status


def _trace(regex, args):
    tracer = regex.trace(args.text)
    for frame in tracer.frames():
        steps = " ".join(f"{token}@{offset}" for token, offset in frame.steps)
        print(f"{frame.pattern or '(empty)'} @ {frame.offset}: {steps} -> {frame.result}")
    if args.json:
        persist_trace(tracer, args.json)
        logger.info("trace written to %s", args.json)
    if args.render:
        path = visualize_trace(tracer, output_path=args.render, format=args.format)
        logger.info("trace rendered to %s", path)
    return EXIT_OK if tracer.result else EXIT_NO_MATCH


def build_parser():
    parser = argparse.ArgumentParser(
        prog="minirex",
        description="Match text against a minimal regular expression "
        "(literals, '.', '*', '+', [a|b]).")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug output to stderr")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="step ceiling per match, 0 for none "
                        "(defaults to $MINIREX_MAX_STEPS)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("check", help="validate a pattern")
    p.add_argument("pattern")
    p.set_defaults(func=_check)

    p = sub.add_parser("match", help="does the pattern match the whole text?")
    p.add_argument("pattern")
    p.add_argument("text")
    p.set_defaults(func=_match)

    p = sub.add_parser("find", help="print the first matching suffix")
    p.add_argument("pattern")
    p.add_argument("text")
    p.set_defaults(func=_find)

    p = sub.add_parser("replace", help="replace the first match")
    p.add_argument("pattern")
    p.add_argument("text")
    p.add_argument("replacement")
    p.set_defaults(func=_replace)

    p = sub.add_parser("grep", help="print lines holding a match")
    p.add_argument("pattern")
    p.add_argument("input", nargs="?", help="file path (defaults to stdin)")
    p.add_argument("-v", "--invert", action="store_true",
                   help="print the lines without a match")
    p.add_argument("-n", "--line-number", action="store_true")
    p.set_defaults(func=_grep)

    p = sub.add_parser("trace", help="show how the matcher decides")
    p.add_argument("pattern")
    p.add_argument("text")
    p.add_argument("--json", help="write the trace to this JSON file")
    p.add_argument("--render", help="render the trace with graphviz to this path")
    p.add_argument("--format", default="png", choices=["png", "svg", "pdf"])
    p.set_defaults(func=_trace)

    return parser


def main(argv=None):
    # usage:
    # minirex match 'a+b' aaab
    # minirex grep '[cat|dog]s' notes.txt -n
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = EngineConfig.from_env()
        if args.max_steps is not None:
            config = dataclasses.replace(config, max_steps=args.max_steps or None)
        regex = Regex(args.pattern, config)
        return args.func(regex, args)
    except (RegexError, ValueError, OSError) as e:
        print(f"minirex: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
