import asyncio
import logging
from os import PathLike
from typing import Any, AsyncGenerator, AsyncIterable, Iterable, Union

from Bio import SeqIO
from Bio.SeqRecord import SeqRecord

from msapid.engine.exceptions.alignment import InputUnreadableException
from msapid.engine.structures.alignment import AlignedSequence, AlignmentSet

logger = logging.getLogger(__name__)


def _biopython_read_fasta_records(fasta_path: Union[str, PathLike[str]]) -> list[SeqRecord]:
    return list(SeqIO.parse(fasta_path, "fasta"))


def aligned_sequence_from_record(record: SeqRecord) -> AlignedSequence:
    identifier = record.id
    description = record.description
    if description.startswith(identifier):
        description = description[len(identifier):]
    description = description.strip()
    return AlignedSequence(identifier, description or None, str(record.seq))


async def read_fasta(fasta_path: Union[str, PathLike[str]]) -> AsyncGenerator[AlignedSequence, Any]:
    try:
        records = await asyncio.to_thread(_biopython_read_fasta_records, fasta_path)
    except (OSError, ValueError) as e:
        raise InputUnreadableException(str(fasta_path), str(e)) from e
    for record_number, record in enumerate(records, start=1):
        if not record.id:
            raise InputUnreadableException(str(fasta_path), f"record #{record_number} has no identifier")
        yield aligned_sequence_from_record(record)


async def load_alignment(sequences: Union[AsyncIterable[AlignedSequence], Iterable[AlignedSequence]]) -> AlignmentSet:
    """
    Collects every sequence and checks it against the width of the first.

    The whole input is validated before anything is returned, so a bad record
    at the end of a file stops the run before a single pair is scored.
    """
    loaded: list[AlignedSequence] = []

    def accept(sequence: AlignedSequence):
        if loaded:
            sequence.check_width(len(loaded[0]))
        loaded.append(sequence)

    if isinstance(sequences, AsyncIterable):
        async for sequence in sequences:
            accept(sequence)
    else:
        for sequence in sequences:
            accept(sequence)

    alignment_set = AlignmentSet(tuple(loaded))
    if len(alignment_set) < 2:
        logger.warning("Alignment holds %d sequence(s); there are no pairs to compare.", len(alignment_set))
    logger.debug("Loaded %d sequences of width %d", len(alignment_set), alignment_set.width)
    return alignment_set
