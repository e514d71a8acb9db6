from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from msapid.engine.exceptions.alignment import LengthMismatchException

@dataclass(frozen=True)
class AlignedSequence:
    id: str
    description: Optional[str]
    sequence: str

    @property
    def header(self) -> str:
        if self.description:
            return f"{self.id} {self.description}"
        return self.id

    def check_width(self, expected_width: int):
        if len(self.sequence) != expected_width:
            raise LengthMismatchException(self.header, len(self.sequence), expected_width)

    def __len__(self):
        return len(self.sequence)

def encode_sequence(sequence: str) -> np.ndarray:
    # One code point per column, so non-ASCII symbols never collide.
    return np.frombuffer(sequence.encode("utf-32-le"), dtype="<u4")

@dataclass(frozen=True)
class AlignmentSet:
    sequences: tuple[AlignedSequence, ...]
    codes: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "sequences", tuple(self.sequences))
        width = self.width
        for sequence in self.sequences:
            sequence.check_width(width)
        if self.sequences:
            codes = np.vstack([encode_sequence(sequence.sequence) for sequence in self.sequences])
        else:
            codes = np.empty((0, 0), dtype="<u4")
        codes.setflags(write=False)
        object.__setattr__(self, "codes", codes)

    @property
    def width(self) -> int:
        if not self.sequences:
            return 0
        return len(self.sequences[0])

    @property
    def pair_count(self) -> int:
        count = len(self.sequences)
        return count * (count - 1) // 2

    def __len__(self):
        return len(self.sequences)

    def __iter__(self) -> Iterator[AlignedSequence]:
        return iter(self.sequences)

    def __getitem__(self, index: int) -> AlignedSequence:
        return self.sequences[index]

@dataclass(frozen=True)
class PairResult:
    first_header: str
    second_header: str
    percentage: float
