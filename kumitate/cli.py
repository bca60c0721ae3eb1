import argparse
import json
import logging
import os
import sys

from kumitate.constants import (
    CSS_PREFIX_ENV, DEFAULT_CSS_PREFIX, MAX_SHORTHAND_LENGTH, RECURSION_LIMIT
)
from kumitate.expansion import expand_line
from kumitate.parser import parse_shorthand, print_tree
from kumitate.renderer import generate_jsx


logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="kumitate",
        description="Expand emmet-like shorthand into JSX with CSS module classes."
    )
    argparser.add_argument("shorthand")
    argparser.add_argument(
        "--prefix",
        default=os.environ.get(CSS_PREFIX_ENV) or DEFAULT_CSS_PREFIX,
        help="name the CSS module is imported as (default: %(default)s)"
    )
    argparser.add_argument(
        "--indent",
        default="",
        help="indentation of the line the markup is inserted into"
    )
    argparser.add_argument(
        "--line",
        action="store_true",
        help="treat SHORTHAND as a line prefix and expand its last token"
    )
    argparser.add_argument("--tree", action="store_true")
    argparser.add_argument("--json", action="store_true")
    argparser.add_argument("--verbose", action="store_true")
    return argparser


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    # recursion limit increase for deep shorthand trees
    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

    if args.line:
        expansion = expand_line(args.shorthand, args.prefix)
        if expansion is None:
            print(f"nothing to expand in {args.shorthand!r}", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps(expansion.to_dict(), indent=2))
        else:
            print(args.shorthand[:expansion.start] + expansion.markup)
        return 0

    if len(args.shorthand) > MAX_SHORTHAND_LENGTH:
        print(
            f"shorthand is longer than {MAX_SHORTHAND_LENGTH} characters",
            file=sys.stderr
        )
        return 1

    tree = parse_shorthand(args.shorthand)
    if tree is None:
        print(f"no element found in {args.shorthand!r}", file=sys.stderr)
        return 1

    if args.tree:
        print_tree(tree)
        return 0

    try:
        markup = generate_jsx(tree, args.prefix, 0, args.indent)
    except Exception:
        logger.exception("failed to render %r", args.shorthand)
        return 1

    if args.json:
        print(json.dumps({"markup": markup, "tree": tree.to_dict()}, indent=2))
    else:
        print(markup)
    return 0
