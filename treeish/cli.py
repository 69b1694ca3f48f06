"""findish - print the entries a treeish expression names.

Usage:
    findish '/mnt/media::**/*.txt'
    findish --max-depth 2 src
    findish --follow-links '**/*.py'

Exit codes:
    0   the expression was valid (entries that could not be read are skipped)
    1   the expression could not be built
    2   invalid command line options
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LinkBehavior, WalkBehavior
from .core.treeish import Treeish
from .errors import BuildError, WalkError

logger = logging.getLogger("treeish.cli")

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="findish",
        description="Walk a native path, a glob, or a glob within a path.",
    )
    parser.add_argument(
        "treeish",
        help="Treeish expression, e.g. '/mnt/media::**/*.txt'.",
    )
    parser.add_argument(
        "--min-depth",
        type=int,
        default=0,
        help="Do not print entries shallower than this (root = 0).",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Do not descend deeper than this.",
    )
    parser.add_argument(
        "-L",
        "--follow-links",
        action="store_true",
        help="Follow symbolic links instead of reporting them.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing decisions and skipped entries to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Attach a single stderr handler to the treeish logger.

    Safe to call more than once; only the first call adds a handler.
    """
    root = logging.getLogger("treeish")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(getattr(h, "_treeish_cli", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._treeish_cli = True
        root.addHandler(handler)


def run(expression: str, behavior: WalkBehavior) -> int:
    """Build and walk `expression`, printing entry paths. Returns an exit code."""
    try:
        treeish = Treeish.new(expression)
    except BuildError as e:
        print(f"findish: {e}", file=sys.stderr)
        return 1

    for item in treeish.walk(behavior):
        if isinstance(item, WalkError):
            logger.debug("skipping: %s", item)
            continue
        print(item.path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    behavior = WalkBehavior.bounded(
        min_depth=args.min_depth,
        max_depth=args.max_depth,
        link=LinkBehavior.READ_TARGET if args.follow_links else LinkBehavior.READ_FILE,
    )
    errors = behavior.validate()
    if errors:
        print(f"findish: {'; '.join(errors)}", file=sys.stderr)
        return 2

    return run(args.treeish, behavior)


if __name__ == "__main__":
    sys.exit(main())
