from __future__ import annotations
from itertools import chain, count
from ..types import *
from ..math_utils import factorial, permutation_count

logger = get_logger(__name__)


def _next_permutation(current: List[int]) -> List[int]:
    result = list(current)
    k = len(result) - 2
    while result[k] >= result[k + 1]:
        k -= 1
    m = len(result) - 1
    while result[k] >= result[m]:
        m -= 1
    result[k], result[m] = result[m], result[k]
    result[k + 1:] = reversed(result[k + 1:])
    return result


def finite_permutation_indices(start: Sequence[int]) -> Iterator[List[int]]:
    """
    every distinct permutation of a weakly increasing list of naturals, in lexicographic
    order. stops after the multinomial count, so repeated values are not repeated.
    """
    output_size = permutation_count(start)
    current = list(start)
    for index in range(output_size):
        if index:
            current = _next_permutation(current)
        yield list(current)


def _canonical_indices(data: List[T]) -> Tuple[List[T], List[int]]:
    # equal values share the index of their first appearance
    distinct: List[T] = []
    indices: List[int] = []
    for x in data:
        for i, d in enumerate(distinct):
            if d == x:
                indices.append(i)
                break
        else:
            indices.append(len(distinct))
            distinct.append(x)
    return distinct, sorted(indices)


def permutations_finite(xs: Iterable[T]) -> Iterator[List[T]]:
    """
    every distinct permutation of a finite sequence, lexicographic with respect to the
    order in which values first appear. the first output is the input with equal values
    grouped; the last is its reverse.
    """
    distinct, start = _canonical_indices(list(iter(xs)))
    for indices in finite_permutation_indices(start):
        yield [distinct[i] for i in indices]


def prefix_permutations(xs: Iterable[T]) -> Iterator[PrefixPermutation[T]]:
    """
    permutations of a possibly infinite sequence that only move a finite prefix.
    prefix length grows 0, 2, 3, 4, ...; at each length the permutations fixing the
    last prefix position are skipped since a shorter prefix already produced them.
    a finite source of size n yields n! permutations, counted by position.
    """
    cache = SequenceCache(xs)
    if cache.get(1) is ABSENT:
        yield PrefixPermutation(cache, ())
        return

    cursor = EnumerationCursor("prefix_permutations")
    for prefix_length in chain([0], count(2)):
        if prefix_length and cache.get(prefix_length - 1) is ABSENT:
            break
        if prefix_length and cache.is_last_index(prefix_length - 1):
            cursor.set_output_size(factorial(prefix_length))
        logger.debug("%s: prefix length %d", cursor.name, prefix_length)

        for indices in finite_permutation_indices(range(prefix_length)):
            cursor.advance()
            if indices and indices[-1] == prefix_length - 1:
                continue
            cursor.hit()
            yield PrefixPermutation(cache, indices)
            if cursor.done:
                logger.debug("%s finished after %d permutations", cursor.name, cursor.emitted)
                return
