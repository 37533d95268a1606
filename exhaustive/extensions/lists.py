"""
finite sequences over an alphabet.

lex/shortlex forms need a finite alphabet and are ordered. the diagonal forms
(lists, lists_at_least) accept infinite alphabets: each global index picks a size
through the logarithmic demultiplexer and a content through the uniform one, so
every length keeps showing up without outputs being grouped by length.
"""
from __future__ import annotations
from itertools import count
from ..types import *
from ..demux import big_endian_digits_padded, demux, logarithmic_demux
from ..math_utils import number_of_arrangements_of_a_set

logger = get_logger(__name__)


def _lists_lex_over(length: int, cache: SequenceCache[T]) -> Iterator[List[T]]:
    if length == 0:
        yield []
        return
    size = len(cache)
    if size == 0:
        return
    for index in range(size ** length):
        yield [cache[digit] for digit in big_endian_digits_padded(length, size, index)]


def lists_lex(length: int, xs: Iterable[T]) -> Iterator[List[T]]:
    """all lists of a given length in lexicographic order. xs must be finite."""
    return _lists_lex_over(length, SequenceCache(xs))


def lists_shortlex(xs: Iterable[T]) -> Iterator[List[T]]:
    """shorter lists first, equal lengths in lexicographic order. xs must be finite."""
    return lists_shortlex_at_least(0, xs)


def lists_shortlex_at_least(min_size: int, xs: Iterable[T]) -> Iterator[List[T]]:
    cache = SequenceCache(xs)
    if cache.is_empty():
        if min_size == 0:
            yield []
        return
    for length in count(min_size):
        yield from _lists_lex_over(length, cache)


def lists(xs: Iterable[T]) -> Iterator[List[T]]:
    """every finite list over xs exactly once, the empty list first"""
    return _diagonal_lists(0, xs)


def lists_at_least(min_size: int, xs: Iterable[T]) -> Iterator[List[T]]:
    """every finite list over xs with at least min_size elements"""
    return _diagonal_lists(min_size, xs)


def _diagonal_lists(min_size: int, xs: Iterable[T]) -> Iterator[List[T]]:
    cache = SequenceCache(xs)
    cursor = EnumerationCursor(f"lists_at_least[{min_size}]" if min_size else "lists")

    while True:
        n = cursor.advance()
        if n == 0:
            # index 0 is the empty list, which only belongs to the unbounded form
            if min_size == 0:
                cursor.hit()
                yield []
            if cache.is_empty():
                logger.debug("%s: empty alphabet, %d lists", cursor.name, cursor.emitted)
                return
            continue

        content, size_offset = logarithmic_demux(n - 1)
        size = size_offset + max(min_size, 1)
        values = cache.select(demux(size, content))
        if values is ABSENT:
            cursor.miss()
            continue
        cursor.hit()
        yield values


def distinct_lists(xs: Iterable[T]) -> Iterator[List[T]]:
    """
    every list of pairwise-distinct positions of xs. index list [i0, i1, ...] from
    lists(naturals) picks the i0-th unused position, then the i1-th unused one, and so on.
    """
    cache = SequenceCache(xs)
    if cache.is_empty():
        yield []
        return

    cursor = EnumerationCursor("distinct_lists")
    for index_list in lists(count()):
        cursor.advance()
        positions = _pick_unused(cache, index_list)
        if positions is ABSENT:
            cursor.miss()
            continue

        if cursor.output_size is None and positions:
            cache.is_last_index(max(positions))
        size = cache.known_size()
        if size is not None:
            cursor.set_output_size(number_of_arrangements_of_a_set(size))
        cursor.hit()
        yield [cache[p] for p in positions]
        if cursor.done:
            logger.debug("%s finished after %d lists", cursor.name, cursor.emitted)
            return


def distinct_lists_shortlex(xs: Iterable[T]) -> Iterator[List[T]]:
    """
    lists of pairwise-distinct positions of a finite xs, shorter first and equal lengths
    in lexicographic order of their positions. stops after the lists of length len(xs).
    """
    cache = SequenceCache(xs)
    size = len(cache)
    positions = range(size)
    for length in range(size + 1):
        for indices in _lists_lex_over(length, SequenceCache(positions)):
            if len(set(indices)) == length:
                yield [cache[i] for i in indices]


def _pick_unused(cache: SequenceCache[Any], index_list: List[int]) -> Union[List[int], Any]:
    used: List[int] = []
    for index in index_list:
        position = -1
        remaining = index
        while True:
            position += 1
            if cache.get(position) is ABSENT:
                return ABSENT
            if position in used:
                continue
            if remaining == 0:
                break
            remaining -= 1
        used.append(position)
    return used
