"""
cli.py — command-line entry point

    nwalign -C1 seq1.txt -C2 seq2.txt -U matrix.txt -V -2

Reads both sequences and the substitution matrix, aligns them, prints
the aligned strings, the optimal score and the match percentage, and
writes a Graphviz description of the alignment.
"""

import argparse
import logging
import sys

from . import __version__
from .aligners import align_with_matrix
from .default import DEFAULT_DOT_FILE, ROW_WIDTH
from .dot import write_dot
from .errors import AlignmentError
from .seqio import parse_gap_penalty, read_sequence, read_substitution_matrix

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="nwalign",
        description="Global Needleman-Wunsch alignment of two DNA sequences with a linear gap penalty",
    )
    parser.add_argument("-C1", dest="seq1", metavar="SEQ1_FILE", required=True,
                        help="file whose first token is the first sequence")
    parser.add_argument("-C2", dest="seq2", metavar="SEQ2_FILE", required=True,
                        help="file whose first token is the second sequence")
    parser.add_argument("-U", dest="matrix", metavar="MATRIX_FILE", required=True,
                        help="file with 16 integers: the A,C,G,T substitution matrix in row-major order")
    parser.add_argument("-V", dest="penalty", metavar="PENALTY", required=True,
                        help="linear gap penalty (signed integer, usually negative)")
    parser.add_argument("-o", "--output", default=DEFAULT_DOT_FILE,
                        help=f"Graphviz output file (default: {DEFAULT_DOT_FILE})")
    parser.add_argument("--row-width", type=int, default=ROW_WIDTH,
                        help=f"alignment columns per row in the graph (default: {ROW_WIDTH})")
    parser.add_argument("--plot", metavar="IMAGE_FILE", default=None,
                        help="also save a score matrix heatmap (requires nwalign[plot])")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="hide progress messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout, force=True)


def _resolve_plot(path):
    """Return the plot writer for path, or None if the plot extra is missing."""
    try:
        from .plot import check_image_format, save_score_matrix_plot
    except ImportError:
        return None
    check_image_format(path)
    return save_score_matrix_plot


def run(args: argparse.Namespace) -> int:
    penalty = parse_gap_penalty(args.penalty)
    save_plot = None
    if args.plot is not None:
        save_plot = _resolve_plot(args.plot)
        if save_plot is None:
            print('error: --plot requires plotting dependencies; install with: pip install "nwalign[plot]"',
                  file=sys.stderr)
            return 1

    logger.info("reading sequences and matrix...")
    X = read_sequence(args.seq1)
    Y = read_sequence(args.seq2)
    matrix = read_substitution_matrix(args.matrix)
    logger.info("reading complete.")

    logger.info("filling score matrix and reconstructing alignment...")
    result = align_with_matrix(X, Y, matrix, penalty, return_data=save_plot is not None)

    logger.info("writing Graphviz file...")
    out = write_dot(args.output, result.X_aln, result.Y_aln, result.percent_identity,
                    row_width=args.row_width)

    if save_plot is not None:
        try:
            save_plot(result, X, Y, args.plot)
        except AlignmentError:
            out.unlink(missing_ok=True)
            raise
        logger.info("score matrix plot written to %s", args.plot)

    print(f"Aligned sequence 1: {result.X_aln}")
    print(f"Aligned sequence 2: {result.Y_aln}")
    print(f"Optimal score: {result.score}")
    print(f"Match percentage: {result.percent_identity:.2f}%")
    logger.info("%s written successfully.", out)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.row_width < 1:
        parser.error("--row-width must be a positive integer")
    configure_logging(args.verbose, args.quiet)
    try:
        return run(args)
    except AlignmentError as exc:
        logger.debug("alignment failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
