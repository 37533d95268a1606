from __future__ import annotations
from ..types import *
from ..demux import bits

logger = get_logger(__name__)


def subsets(xs: Iterable[T]) -> Iterator[List[T]]:
    """
    every finite subset of positions of xs, read off the binary digits of 0, 1, 2, ...
    subsets keep source order. a finite source stops at the first natural whose highest
    bit lies past the end, which for size n is 2**n.
    """
    cache = SequenceCache(xs)
    cursor = EnumerationCursor("subsets")
    while True:
        subset = cache.select_bits(bits(cursor.advance()))
        if subset is ABSENT:
            logger.debug("%s finished after %d subsets", cursor.name, cursor.emitted)
            return
        cursor.hit()
        yield subset


def subsets_lex(xs: Iterable[T]) -> Iterator[List[T]]:
    """subsets of a finite source in lexicographic order of their position lists"""
    cache = SequenceCache(xs)
    size = len(cache)
    if size == 0:
        yield []
        return

    indices: Optional[List[int]] = []
    while indices is not None:
        yield cache.select(indices)
        if not indices:
            indices = [0]
        elif indices[-1] < size - 1:
            indices = indices + [indices[-1] + 1]
        elif len(indices) == 1:
            indices = None
        else:
            indices = indices[:-2] + [indices[-2] + 1]
