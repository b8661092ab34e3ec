import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Sequence, Tuple

from .splitting import _split_range
from .triple import Triple, merge


logger = logging.getLogger(__name__)

Range = Tuple[int, int]


def partition_range(n: int, k: int) -> List[Range]:
    n = int(n)
    k = int(k)
    if n < 1:
        raise ValueError("n must be >= 1")
    if k < 1:
        raise ValueError("k must be >= 1")
    if k > n:
        raise ValueError("k must be <= n")
    chunk = n // k
    ranges = []
    for i in range(k):
        lo = i * chunk
        hi = n if i == k - 1 else (i + 1) * chunk
        ranges.append((lo, hi))
    return ranges


def split_ranges(ranges: Sequence[Range], use_processes: bool = False) -> List[Triple]:
    """Run binary splitting on every range concurrently.

    One worker per range; the pool lives only for this call. The returned
    list is in the same order as ``ranges`` however the workers finish, and
    the first worker exception is re-raised here.
    """
    ranges = list(ranges)
    if not ranges:
        return []
    if len(ranges) == 1:
        return [_split_range(ranges[0])]
    executor = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
    with executor(max_workers=len(ranges)) as ex:
        futures = [ex.submit(_split_range, ab) for ab in ranges]
        return [f.result() for f in futures]


def fold_ordered(triples: Sequence[Triple]) -> Triple:
    if not triples:
        raise ValueError("nothing to fold")
    it = iter(triples)
    acc = next(it)
    for nxt in it:
        acc = merge(acc, nxt)
    return acc


def reduce_parallel(n: int, k: int, use_processes: bool = False) -> Triple:
    ranges = partition_range(n, k)
    logger.debug("splitting [0, %d) into %d ranges: %s", n, len(ranges), ranges)
    triples = split_ranges(ranges, use_processes=use_processes)
    return fold_ordered(triples)
