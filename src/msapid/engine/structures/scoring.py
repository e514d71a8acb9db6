from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

class SubstitutionMatrix(Enum):
    BLOSUM45 = "blosum45"
    BLOSUM50 = "blosum50"
    BLOSUM62 = "blosum62"
    BLOSUM80 = "blosum80"
    BLOSUM90 = "blosum90"

    @property
    def published_name(self) -> str:
        # Name of the NCBI data file bundled with Biopython
        return self.value.upper()

    @classmethod
    def from_name(cls, name: str) -> "SubstitutionMatrix":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(matrix.value for matrix in cls)
            raise ValueError(f"Unknown substitution matrix \"{name}\" (expected one of: {choices}).") from None

    def __str__(self):
        return self.value

class MinScoreThreshold(IntEnum):
    ZERO = 0
    ONE = 1

    @classmethod
    def from_value(cls, value: str) -> "MinScoreThreshold":
        return cls(int(value))

    def __str__(self):
        return str(self.value)

@dataclass(frozen=True)
class IdentityScoring:
    pass

@dataclass(frozen=True)
class SimilarityScoring:
    matrix: SubstitutionMatrix = SubstitutionMatrix.BLOSUM62
    min_score: MinScoreThreshold = MinScoreThreshold.ONE

ScoringMode = Union[IdentityScoring, SimilarityScoring]
