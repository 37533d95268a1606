from __future__ import annotations
import typing
from ..types import *
from ..config import ENUMERATION_CONFIG
from ..demux import demuxer, get_demultiplexer
from ..math_utils import permutation_count as _permutation_count
from . import cartesian, lists, permutations, subsets

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _check_source(source: Any, name: str = "source") -> None:
    if source is None:
        raise TypeError(f"{name} cannot be None")
    if not isinstance(source, Iterable):
        raise TypeError(f"{name} must be iterable, got {type(source).__name__}")


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} cannot be negative, got {size}")


def _join(chars: Iterable[str]) -> str:
    return "".join(chars)


class CombinatoricsAccessor(Generic[T]):
    """
    exhaustive combinatorics over this sequence, which may be infinite.
    every method returns a lazy enumerable; arguments are checked immediately,
    before anything is pulled. each iteration of the result starts over with fresh caches.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _wrap(self, data_func: Callable[[], Iterable[U]]) -> 'Enumerable[U]':
        from ..enumerable import Enumerable
        return Enumerable(data_func)

    # --- cartesian products ---

    def pairs(self, other: Optional[Iterable[U]] = None, order: Optional[str] = None) -> 'Enumerable[Tuple[Any, Any]]':
        """
        all pairs from this sequence and other (or this sequence with itself).
        order picks the 2-ary demultiplexer: 'uniform', 'logarithmic' or 'square_root'.
        """
        demultiplexer = get_demultiplexer(order or ENUMERATION_CONFIG.default_demultiplexer)
        if other is None:
            return self._wrap(lambda: cartesian.self_tuples(2, demultiplexer, self._enumerable))
        _check_source(other, "other")
        return self._wrap(lambda: cartesian.tuples(demultiplexer, self._enumerable, other))

    def pairs_logarithmic_order(self, other: Optional[Iterable[U]] = None) -> 'Enumerable[Tuple[Any, Any]]':
        """first coordinate grows linearly, second logarithmically"""
        return self.pairs(other, order="logarithmic")

    def pairs_square_root_order(self, other: Optional[Iterable[U]] = None) -> 'Enumerable[Tuple[Any, Any]]':
        """first coordinate grows as n^(2/3), second as n^(1/3)"""
        return self.pairs(other, order="square_root")

    def _fixed_arity(self, arity: int, others: Tuple[Optional[Iterable[Any]], ...]) -> 'Enumerable[Tuple[Any, ...]]':
        if all(o is None for o in others):
            return self._wrap(lambda: cartesian.self_tuples(arity, demuxer(arity), self._enumerable))
        if len(others) != arity - 1:
            raise TypeError(f"expected {arity - 1} other operands or none, got {len(others)}")
        for i, other in enumerate(others):
            _check_source(other, f"operand {i + 2}")
        return self._wrap(lambda: cartesian.tuples(demuxer(arity), self._enumerable, *others))

    def triples(self, second: Optional[Iterable[Any]] = None,
                third: Optional[Iterable[Any]] = None) -> 'Enumerable[Tuple[Any, Any, Any]]':
        """all triples, along a 3-dimensional z-curve. no arguments means this sequence cubed."""
        return self._fixed_arity(3, (second, third))

    def quadruples(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._fixed_arity(4, others or (None,) * 3)

    def quintuples(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._fixed_arity(5, others or (None,) * 4)

    def sextuples(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._fixed_arity(6, others or (None,) * 5)

    def septuples(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._fixed_arity(7, others or (None,) * 6)

    def tuples(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        """product of this sequence with any number of others, each with its own cache"""
        for i, other in enumerate(others):
            _check_source(other, f"operand {i + 2}")
        arity = len(others) + 1
        return self._wrap(lambda: cartesian.tuples(demuxer(arity), self._enumerable, *others))

    def dependent_pairs(self, f: Callable[[T], Iterable[U]]) -> 'Enumerable[Tuple[T, U]]':
        """
        (x, y) for each x in order and each y in f(x). this sequence must be finite and
        only f of its last element may be infinite.
        """
        if f is None: raise TypeError("f cannot be None")
        return self._wrap(lambda: cartesian.dependent_pairs(self._enumerable, f))

    def dependent_pairs_infinite(self, f: Callable[[T], Iterable[U]]) -> 'Enumerable[Tuple[T, U]]':
        """(x, y) along a z-curve; f(x) must be infinite for every x and is called once per distinct x"""
        if f is None: raise TypeError("f cannot be None")
        return self._wrap(lambda: cartesian.dependent_pairs_infinite(self._enumerable, f))

    def pairs_lex(self, other: Iterable[U]) -> 'Enumerable[Tuple[T, U]]':
        """odometer order; other must be finite"""
        _check_source(other, "other")
        return self._wrap(lambda: cartesian.pairs_lex(self._enumerable, other))

    def triples_lex(self, second: Iterable[Any], third: Iterable[Any]) -> 'Enumerable[Tuple[Any, Any, Any]]':
        """odometer order; second and third must be finite"""
        _check_source(second, "second")
        _check_source(third, "third")
        return self._wrap(lambda: cartesian.triples_lex(self._enumerable, second, third))

    def _tuples_lex(self, arity: int, others: Tuple[Iterable[Any], ...]) -> 'Enumerable[Tuple[Any, ...]]':
        if len(others) != arity - 1:
            raise TypeError(f"expected {arity - 1} other operands, got {len(others)}")
        for i, other in enumerate(others):
            _check_source(other, f"operand {i + 2}")
        return self._wrap(lambda: cartesian.tuples_lex(self._enumerable, *others))

    def quadruples_lex(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        """odometer order; every operand but this one must be finite"""
        return self._tuples_lex(4, others)

    def quintuples_lex(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._tuples_lex(5, others)

    def sextuples_lex(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._tuples_lex(6, others)

    def septuples_lex(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        return self._tuples_lex(7, others)

    def controlled_lists_lex(self, *others: Iterable[T]) -> 'Enumerable[List[T]]':
        """lists taking their i-th element from the i-th sequence, lexicographically"""
        for i, other in enumerate(others):
            _check_source(other, f"operand {i + 2}")
        return self._wrap(lambda: cartesian.controlled_lists_lex([self._enumerable, *others]))

    # --- lists and strings ---

    def lists(self, size: Optional[int] = None) -> 'Enumerable[List[T]]':
        """
        all lists over this sequence. with a size, lists of exactly that length along a
        z-curve; without, every finite list with the empty list first.
        """
        if size is None:
            return self._wrap(lambda: lists.lists(self._enumerable))
        _check_size(size)
        return self._wrap(lambda: cartesian.fixed_size_lists(size, self._enumerable))

    def lists_at_least(self, min_size: int) -> 'Enumerable[List[T]]':
        _check_size(min_size, "min_size")
        return self._wrap(lambda: lists.lists_at_least(min_size, self._enumerable))

    def lists_lex(self, length: int) -> 'Enumerable[List[T]]':
        """lists of one length in lexicographic order; this sequence must be finite"""
        _check_size(length, "length")
        return self._wrap(lambda: lists.lists_lex(length, self._enumerable))

    def lists_shortlex(self) -> 'Enumerable[List[T]]':
        return self._wrap(lambda: lists.lists_shortlex(self._enumerable))

    def lists_shortlex_at_least(self, min_size: int) -> 'Enumerable[List[T]]':
        _check_size(min_size, "min_size")
        return self._wrap(lambda: lists.lists_shortlex_at_least(min_size, self._enumerable))

    def distinct_lists(self) -> 'Enumerable[List[T]]':
        """lists without repeated positions; finite for a finite sequence"""
        return self._wrap(lambda: lists.distinct_lists(self._enumerable))

    def distinct_lists_shortlex(self) -> 'Enumerable[List[T]]':
        """distinct-position lists of a finite sequence, shortest first"""
        return self._wrap(lambda: lists.distinct_lists_shortlex(self._enumerable))

    def strings(self, size: Optional[int] = None) -> 'Enumerable[str]':
        """lists() joined into strings; elements must be strings"""
        return self.lists(size).select(_join)

    def strings_at_least(self, min_size: int) -> 'Enumerable[str]':
        return self.lists_at_least(min_size).select(_join)

    def strings_lex(self, length: int) -> 'Enumerable[str]':
        return self.lists_lex(length).select(_join)

    def strings_shortlex(self) -> 'Enumerable[str]':
        return self.lists_shortlex().select(_join)

    def strings_shortlex_at_least(self, min_size: int) -> 'Enumerable[str]':
        return self.lists_shortlex_at_least(min_size).select(_join)

    # --- permutations ---

    def permutations(self) -> 'Enumerable[List[T]]':
        """every distinct permutation of a finite sequence, in lexicographic order"""
        return self._wrap(lambda: permutations.permutations_finite(self._enumerable))

    def permutation_count(self) -> int:
        """how many outputs permutations() produces"""
        return _permutation_count(self._enumerable.to.list())

    def prefix_permutations(self) -> 'Enumerable[PrefixPermutation[T]]':
        """permutations that move only a finite prefix; works on infinite sequences"""
        return self._wrap(lambda: permutations.prefix_permutations(self._enumerable))

    # --- subsets ---

    def subsets(self) -> 'Enumerable[List[T]]':
        """every finite subset, in binary counting order"""
        return self._wrap(lambda: subsets.subsets(self._enumerable))

    def subsets_lex(self) -> 'Enumerable[List[T]]':
        """every subset of a finite sequence in lexicographic order"""
        return self._wrap(lambda: subsets.subsets_lex(self._enumerable))

    def string_subsets(self) -> 'Enumerable[str]':
        return self.subsets().select(_join)

    def string_subsets_lex(self) -> 'Enumerable[str]':
        return self.subsets_lex().select(_join)
