"""
Command-line interface for dpalign.

Runs the Needleman-Wunsch, Smith-Waterman and Needleman-Wunsch-Gotoh
aligners on two sequences and prints each alignment.

    $ dpalign
    $ dpalign ACCAGT ACAGC --gap-open 3 --debug
"""

import argparse
import logging
import sys
from typing import List, Optional

from dpalign import __version__
from dpalign.align.pairwise import ALIGNERS, MODE_TITLES, get_aligner
from dpalign.core.scoring import (
    DEFAULT_GAP_EXTEND,
    DEFAULT_GAP_OPEN,
    DEFAULT_MATCH,
    DEFAULT_MISMATCH,
    ScoringModel,
)
from dpalign.errors import DPAlignError

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "ACCAGT"
DEFAULT_QUERY = "ACAGC"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def number_type(value: str):
    """Argparse type accepting ints or floats; ints stay ints."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpalign",
        description="Pairwise sequence alignment by dynamic programming",
    )
    parser.add_argument("target", nargs="?", default=DEFAULT_TARGET,
                        help=f"Target sequence (default: {DEFAULT_TARGET})")
    parser.add_argument("query", nargs="?", default=DEFAULT_QUERY,
                        help=f"Query sequence (default: {DEFAULT_QUERY})")

    scoring = parser.add_argument_group("scoring")
    scoring.add_argument("--match", type=number_type, default=DEFAULT_MATCH,
                         help="Score for identical symbols (default: %(default)s)")
    scoring.add_argument("--mismatch", type=number_type, default=DEFAULT_MISMATCH,
                         help="Score for differing symbols (default: %(default)s)")
    scoring.add_argument("--gap-open", type=number_type, default=DEFAULT_GAP_OPEN,
                         help="Linear gap cost, and affine gap opening cost (default: %(default)s)")
    scoring.add_argument("--gap-extend", type=number_type, default=DEFAULT_GAP_EXTEND,
                         help="Affine gap extension cost (default: %(default)s)")

    parser.add_argument("--mode", action="append", choices=list(ALIGNERS),
                        help="Run only this aligner; repeat for several (default: all)")
    parser.add_argument("--pretty", action="store_true",
                        help="Print alignments as blocks with a match line")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable INFO logging")
    parser.add_argument("--debug", action="store_true",
                        help="Enable DEBUG logging and print the filled matrices")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool = False, debug: bool = False):
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_alignments(
    target: str,
    query: str,
    scoring: ScoringModel,
    modes: List[str],
    pretty: bool = False,
    debug: bool = False
):
    """Run each requested aligner and print its result to stdout."""
    for mode in modes:
        logger.info(f"Running {MODE_TITLES[mode]} alignment")
        result = get_aligner(mode).run(target, query, scoring, keep_matrices=debug)

        print(f"# {MODE_TITLES[mode]}")
        print(f"Target: {target}")
        print(f"Query:  {query}")
        if debug:
            for matrix in result.matrices.values():
                print(matrix)
        if pretty:
            print(result)
        else:
            print(f"Target: {result.target_aligned}")
            print(f"Query:  {result.query_aligned}")
            print(f"Score:  {result.score:g}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        0 on success, 1 when alignment fails
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.debug)

    modes = args.mode or list(ALIGNERS)
    try:
        scoring = ScoringModel(
            match=args.match,
            mismatch=args.mismatch,
            gap_open=args.gap_open,
            gap_extend=args.gap_extend,
        )
        run_alignments(args.target, args.query, scoring, modes,
                       pretty=args.pretty, debug=args.debug)
    except DPAlignError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
