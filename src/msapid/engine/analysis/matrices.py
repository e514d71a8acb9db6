from functools import lru_cache
import logging
from types import MappingProxyType
from typing import Mapping, Optional

from Bio.Align import substitution_matrices
import numpy as np

from msapid.engine.structures.scoring import MinScoreThreshold, SubstitutionMatrix

logger = logging.getLogger(__name__)

# Codes past this bound are never present in a substitution matrix.
TABLE_SIZE = 256


def _pair_key(first: str, second: str) -> tuple[str, str]:
    if first <= second:
        return (first, second)
    return (second, first)


def _load_table(matrix: SubstitutionMatrix) -> Mapping[tuple[str, str], int]:
    published = substitution_matrices.load(matrix.published_name)
    table: dict[tuple[str, str], int] = {}
    for row_residue in published.alphabet:
        for column_residue in published.alphabet:
            key = _pair_key(row_residue, column_residue)
            value = int(published[row_residue, column_residue])
            if key in table and table[key] != value:
                raise ValueError(f"{matrix.published_name} is not symmetric at {row_residue}/{column_residue}.")
            table[key] = value
    logger.debug("Loaded %s with %d residue pairs", matrix.published_name, len(table))
    return MappingProxyType(table)


_TABLES: Mapping[SubstitutionMatrix, Mapping[tuple[str, str], int]] = MappingProxyType({
    matrix: _load_table(matrix) for matrix in SubstitutionMatrix
})


def score(matrix: SubstitutionMatrix, first: str, second: str) -> Optional[int]:
    """
    Substitution score of two residues under the given matrix.

    Returns None when either residue is missing from the matrix (a gap, a
    lowercase or an unsupported code). That is an incomparable pair, not a
    low score.
    """
    return _TABLES[matrix].get(_pair_key(first, second))


def alphabet(matrix: SubstitutionMatrix) -> frozenset[str]:
    return frozenset(residue for pair in _TABLES[matrix] for residue in pair)


@lru_cache(maxsize=None)
def similarity_table(matrix: SubstitutionMatrix, min_score: MinScoreThreshold) -> np.ndarray:
    """Boolean lookup indexed by two character codes: True where the pair counts as similar."""
    table = np.zeros((TABLE_SIZE, TABLE_SIZE), dtype=bool)
    residues = sorted(alphabet(matrix))
    for first in residues:
        for second in residues:
            pair_score = score(matrix, first, second)
            if pair_score is not None and pair_score >= min_score:
                table[ord(first), ord(second)] = True
    table.setflags(write=False)
    return table
