"""
Command-line driver for the text protocol.

    python main.py order   [--input FILE]   # LexBFS order
    python main.py chordal [--input FILE]   # "Yes Chordal Graph" / "No Chordal Graph"

Reads standard input when no file is given.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from chordality import ChordalityChecker, LexBfsEngine
from constants import LOG_FORMAT, LOG_LEVEL
from utils.graph import connected_components
from utils.loader import format_chordality, format_ordering, read_graph

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lexicographic BFS and chordality testing"
    )
    parser.add_argument(
        "mode",
        choices=["order", "chordal"],
        help="Print the LexBFS order, or whether the graph is chordal",
    )
    parser.add_argument("--input", default=None, help="Graph file (default: stdin)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        graph = read_graph(args.input if args.input is not None else sys.stdin)
    except (ValueError, IndexError, OSError) as error:
        logger.error(f"Cannot read graph: {error}")
        return 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Read {len(graph)} vertices, {graph.edge_count} edges, "
            f"{len(connected_components(graph))} components"
        )

    ordering = LexBfsEngine(graph).run()
    if args.mode == "order":
        sys.stdout.write(format_ordering(ordering))
    else:
        chordal = ChordalityChecker(graph).is_chordal(ordering)
        sys.stdout.write(format_chordality(chordal))
    return 0


if __name__ == "__main__":
    sys.exit(main())
