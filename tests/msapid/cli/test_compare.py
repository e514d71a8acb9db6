import io
import logging

import pytest
from msapid.cli.compare import compare_alignment, make_progress_reporter
from msapid.engine.exceptions.alignment import LengthMismatchException
from msapid.engine.structures.scoring import IdentityScoring, MinScoreThreshold, SimilarityScoring, SubstitutionMatrix

async def test_compare_alignment_streams_to_handle():
    out = io.StringIO()
    written = await compare_alignment("tests/resources/protein_alignment.fasta", IdentityScoring(), out)
    assert written == 6
    lines = out.getvalue().splitlines()
    assert lines[0] == "P1 human\tP2 mouse\t87.5"
    assert lines[1].startswith("P1 human\tP3\t57.14")
    assert lines[-1] == "P3\tP4 all gaps\t0.0"

async def test_similarity_threshold_zero_is_not_below_one():
    zero, one = io.StringIO(), io.StringIO()
    await compare_alignment("tests/resources/protein_alignment.fasta", SimilarityScoring(SubstitutionMatrix.BLOSUM80, MinScoreThreshold.ZERO), zero)
    await compare_alignment("tests/resources/protein_alignment.fasta", SimilarityScoring(SubstitutionMatrix.BLOSUM80, MinScoreThreshold.ONE), one)
    for zero_line, one_line in zip(zero.getvalue().splitlines(), one.getvalue().splitlines()):
        assert float(zero_line.split("\t")[2]) >= float(one_line.split("\t")[2])

async def test_compare_alignment_writes_nothing_on_bad_input():
    out = io.StringIO()
    with pytest.raises(LengthMismatchException):
        await compare_alignment("tests/resources/length_mismatch.fasta", IdentityScoring(), out)
    assert out.getvalue() == ""

def test_progress_reporter_respects_draw_delta(caplog):
    report = make_progress_reporter(draw_delta=10)
    with caplog.at_level(logging.INFO, logger="msapid.progress"):
        for rows_done in range(1, 26):
            report(rows_done, 25)
    assert [record.getMessage() for record in caplog.records] == [
        "Working: 10/25 rows",
        "Working: 20/25 rows",
        "Working: 25/25 rows",
    ]
