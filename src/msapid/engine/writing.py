from typing import AsyncIterable, Iterable, Optional, TextIO, Union

from msapid.engine.structures.alignment import PairResult


def format_percentage(percentage: float, precision: Optional[int] = None) -> str:
    if precision is None:
        return repr(percentage)
    return f"{percentage:.{precision}f}"


def format_pair_result(result: PairResult, precision: Optional[int] = None) -> str:
    return "\t".join((result.first_header, result.second_header, format_percentage(result.percentage, precision)))


async def write_pair_results(results: Union[AsyncIterable[PairResult], Iterable[PairResult]], handle: TextIO, precision: Optional[int] = None) -> int:
    written = 0
    if isinstance(results, AsyncIterable):
        async for result in results:
            handle.write(format_pair_result(result, precision) + "\n")
            written += 1
    else:
        for result in results:
            handle.write(format_pair_result(result, precision) + "\n")
            written += 1
    return written
