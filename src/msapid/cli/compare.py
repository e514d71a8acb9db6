import asyncio
import logging
import sys
from typing import Callable, Optional, TextIO

from msapid.engine import config
from msapid.engine.analysis.scorers import ParallelPairwiseScoringEngine
from msapid.engine.reading import load_alignment, read_fasta
from msapid.engine.structures.scoring import ScoringMode
from msapid.engine.writing import write_pair_results

progress_logger = logging.getLogger("msapid.progress")


def make_progress_reporter(draw_delta: int = config.PROGRESS_DRAW_DELTA) -> Callable[[int, int], None]:
    def report(rows_done: int, rows_total: int):
        if rows_done % draw_delta == 0 or rows_done == rows_total:
            progress_logger.info("Working: %d/%d rows", rows_done, rows_total)
    return report


async def compare_alignment(infile: str, mode: ScoringMode, out: TextIO, jobs: int = config.DEFAULT_JOBS, precision: Optional[int] = None, progress: bool = False) -> int:
    # Everything is loaded and validated before the first line is written.
    alignment_set = await load_alignment(read_fasta(infile))
    reporter = make_progress_reporter() if progress else None
    with ParallelPairwiseScoringEngine(alignment_set, mode, max_workers=jobs) as engine:
        return await write_pair_results(engine.score_all(reporter), out, precision)


def run_asynchronously(args, mode: ScoringMode):
    if args.progress:
        progress_logger.setLevel(logging.INFO)
    asyncio.run(compare_alignment(args.infile, mode, sys.stdout, args.jobs, args.precision, args.progress))
