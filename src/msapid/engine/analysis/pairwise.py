"""
Percent identity and percent similarity between the rows of an alignment.

Only shared columns count: a column where either side is a gap is left out
of both the numerator and the denominator. Two rows with no shared column
score 0.0.
"""

from typing import Any, Callable, Generator, Optional

import numpy as np

from msapid.engine.analysis.matrices import TABLE_SIZE, similarity_table
from msapid.engine.config import GAP_CHARACTER
from msapid.engine.structures.alignment import AlignedSequence, AlignmentSet, PairResult, encode_sequence
from msapid.engine.structures.scoring import IdentityScoring, ScoringMode, SimilarityScoring

GAP_CODE = ord(GAP_CHARACTER)

ProgressCallback = Callable[[int, int], Any]


def count_pairs(sequence_count: int) -> int:
    return sequence_count * (sequence_count - 1) // 2


def _match_mask(mode: ScoringMode, first: np.ndarray, second: np.ndarray) -> np.ndarray:
    if isinstance(mode, IdentityScoring):
        return first == second
    if isinstance(mode, SimilarityScoring):
        table = similarity_table(mode.matrix, mode.min_score)
        first_index = np.where(first < TABLE_SIZE, first, 0)
        second_index = np.where(second < TABLE_SIZE, second, 0)
        return table[first_index, second_index]
    raise TypeError(f"Unsupported scoring mode: {mode!r}")


def _percentages(matches: np.ndarray, totals: np.ndarray) -> list[float]:
    percentages = []
    for match_count, total in zip(matches.tolist(), totals.tolist()):
        if total == 0:
            percentages.append(0.0)
        else:
            percentages.append(match_count / total * 100.0)
    return percentages


def score_row(codes: np.ndarray, row: int, mode: ScoringMode) -> list[float]:
    """Scores row `row` of an encoded alignment against every row after it."""
    first = codes[row][np.newaxis, :]
    others = codes[row + 1:]
    shared = (first != GAP_CODE) & (others != GAP_CODE)
    matches = (_match_mask(mode, first, others) & shared).sum(axis=1)
    totals = shared.sum(axis=1)
    return _percentages(matches, totals)


def score_pair(first: AlignedSequence, second: AlignedSequence, mode: ScoringMode) -> float:
    codes = np.vstack([encode_sequence(first.sequence), encode_sequence(second.sequence)])
    return score_row(codes, 0, mode)[0]


def iterate_pair_results(alignment_set: AlignmentSet, mode: ScoringMode, progress: Optional[ProgressCallback] = None) -> Generator[PairResult, Any, None]:
    row_count = max(len(alignment_set) - 1, 0)
    for row in range(row_count):
        first_header = alignment_set[row].header
        percentages = score_row(alignment_set.codes, row, mode)
        for offset, percentage in enumerate(percentages, start=row + 1):
            yield PairResult(first_header, alignment_set[offset].header, percentage)
        if progress is not None:
            progress(row + 1, row_count)
