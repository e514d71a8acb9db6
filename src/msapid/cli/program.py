import argparse
import logging
import sys
from typing import Optional, Sequence

from msapid.engine import config
from msapid.engine.exceptions.alignment import MSAPIDException

logger = logging.getLogger(__name__)

root_parser = argparse.ArgumentParser(
    prog="msapid",
    description="All combinations of sequence identity or similarity based on a multiple sequence alignment (MSA). "
    "Prints combinations, not permutations, and no self-hits: for sequences A, B, C the pairs are A-B, A-C and B-C."
)
root_parser.add_argument(
    "--infile", "-i",
    dest="infile",
    required=True,
    type=str,
    help="Path to the aligned FASTA file. Every sequence must have the same length."
)
root_parser.add_argument(
    "--jobs", "-j",
    dest="jobs",
    required=False,
    default=config.DEFAULT_JOBS,
    type=int,
    help="Number of worker processes used for scoring. Output order does not depend on this."
)
root_parser.add_argument(
    "--precision", "-p",
    dest="precision",
    required=False,
    default=None,
    type=int,
    help="Number of decimals to print. Prints the shortest exact representation if not provided."
)
root_parser.add_argument(
    "--progress",
    action="store_true",
    dest="progress",
    required=False,
    default=False,
    help="Report progress on standard error."
)
root_parser.add_argument(
    "--log-level",
    dest="log_level",
    required=False,
    default="WARNING",
    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    help="Verbosity of the diagnostics written to standard error."
)
subparsers = root_parser.add_subparsers(required=True, dest="method")

# Sub-commands register themselves on the parsers above.
from msapid.cli import identity, similarity # noqa: E402,F401


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = root_parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT, stream=sys.stderr)
    logger.debug("Parsed options: %s", {key: value for key, value in vars(args).items() if key != "func"})
    if args.jobs < 1:
        root_parser.error("--jobs must be at least 1")
    if args.precision is not None and args.precision < 0:
        root_parser.error("--precision cannot be negative")
    try:
        args.func(args)
    except MSAPIDException as e:
        logger.error(e)
        return 1
    return 0
