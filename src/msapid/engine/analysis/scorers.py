from concurrent.futures import ProcessPoolExecutor
from contextlib import AbstractContextManager
import logging
from typing import Any, Generator, Optional, Union

import numpy as np

from msapid.engine.analysis.pairwise import ProgressCallback, iterate_pair_results, score_row
from msapid.engine.structures.alignment import AlignmentSet, PairResult
from msapid.engine.structures.scoring import ScoringMode

logger = logging.getLogger(__name__)

_worker_codes: Union[np.ndarray, None] = None
_worker_mode: Union[ScoringMode, None] = None


def _initialize_worker(codes: np.ndarray, mode: ScoringMode):
    global _worker_codes, _worker_mode
    _worker_codes = codes
    _worker_mode = mode


def _score_worker_row(row: int) -> list[float]:
    return score_row(_worker_codes, row, _worker_mode) # type: ignore since the initializer always runs first


class ParallelPairwiseScoringEngine(AbstractContextManager):
    """
    Scores the outer rows of an alignment on a pool of worker processes.

    Rows are collected in submission order, so results come out in the same
    (i, j) order as the sequential generator.
    """

    def __init__(self, alignment_set: AlignmentSet, mode: ScoringMode, max_workers: int = 4):
        self._alignment_set = alignment_set
        self._mode = mode
        self._max_workers = max_workers
        self._process_pool: Optional[ProcessPoolExecutor] = None

    def __enter__(self):
        if self._max_workers > 1:
            self._process_pool = ProcessPoolExecutor(
                self._max_workers,
                initializer=_initialize_worker,
                initargs=(self._alignment_set.codes, self._mode))
        return self

    def score_all(self, progress: Optional[ProgressCallback] = None) -> Generator[PairResult, Any, None]:
        if self._process_pool is None:
            yield from iterate_pair_results(self._alignment_set, self._mode, progress)
            return
        row_count = max(len(self._alignment_set) - 1, 0)
        chunk_size = max(1, row_count // (self._max_workers * 4))
        logger.debug("Scoring %d rows on %d workers (chunks of %d)", row_count, self._max_workers, chunk_size)
        rows = self._process_pool.map(_score_worker_row, range(row_count), chunksize=chunk_size)
        for row, percentages in enumerate(rows):
            first_header = self._alignment_set[row].header
            for offset, percentage in enumerate(percentages, start=row + 1):
                yield PairResult(first_header, self._alignment_set[offset].header, percentage)
            if progress is not None:
                progress(row + 1, row_count)

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    def shutdown(self):
        if self._process_pool is not None:
            self._process_pool.shutdown(wait=True, cancel_futures=True)
            self._process_pool = None
