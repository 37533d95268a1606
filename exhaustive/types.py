from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Sequence
)
from itertools import islice

from .config import ENUMERATION_CONFIG
from .logging import get_logger

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')
B = TypeVar('B')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
IndexTuple = Tuple[int, ...]

logger = get_logger(__name__)


class _Absent:
    """marks a position past the end of an exhausted source. falsy, singleton."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class SequenceCache(Generic[T]):
    """
    memoizing random-access wrapper over a single-pass, possibly infinite source.
    values are pulled on demand, appended to a buffer and never discarded. once the
    source runs dry every position past the buffer is permanently ABSENT.

    not thread safe: pulling from the source is destructive, so concurrent access
    must be synchronized by the caller.
    """

    def __init__(self, source: Iterable[T]):
        if source is None:
            raise TypeError("source cannot be None")
        try:
            self._source_iterator = iter(source)
        except TypeError:
            raise TypeError(f"source must be iterable, got {type(source).__name__}") from None
        self._cache: List[T] = []
        self._is_fully_enumerated = False

    def _materialize_to_index(self, target_index: int) -> None:
        """pull from the source until target_index is buffered or the source is exhausted"""
        while len(self._cache) <= target_index and not self._is_fully_enumerated:
            try:
                self._cache.append(next(self._source_iterator))
            except StopIteration:
                self._is_fully_enumerated = True
                self._source_iterator = None
                logger.debug("source exhausted after %d elements", len(self._cache))

    def _materialize_all(self) -> None:
        while not self._is_fully_enumerated:
            self._materialize_to_index(len(self._cache))

    def get(self, index: int) -> Union[T, _Absent]:
        """the value at index, or ABSENT if the source ends before it"""
        if index < 0:
            raise ValueError(f"index cannot be negative, got {index}")
        self._materialize_to_index(index)
        if index < len(self._cache):
            return self._cache[index]
        return ABSENT

    def known_size(self) -> Optional[int]:
        """None while the source may still produce more; the final length afterwards"""
        return len(self._cache) if self._is_fully_enumerated else None

    def is_last(self, x: T) -> Optional[bool]:
        """
        whether x equals the final element. None until the source is exhausted.
        compares by value, so a repeated final value also matches its earlier
        occurrences; the engine itself uses is_last_index().
        """
        if not self._is_fully_enumerated:
            return None
        return bool(self._cache) and bool(self._cache[-1] == x)

    def is_last_index(self, index: int) -> bool:
        """whether index is the final position. pulls at most one element past it."""
        self._materialize_to_index(index + 1)
        return self._is_fully_enumerated and index == len(self._cache) - 1

    def is_empty(self) -> bool:
        return self.get(0) is ABSENT

    def select(self, indices: Iterable[int]) -> Union[List[T], _Absent]:
        """values at the given positions, or ABSENT if any of them is out of range. never partial."""
        result = []
        for index in indices:
            value = self.get(index)
            if value is ABSENT:
                return ABSENT
            result.append(value)
        return result

    def select_bits(self, bit_list: Sequence[bool]) -> Union[List[T], _Absent]:
        """values at the positions whose bit is set"""
        return self.select(i for i, bit in enumerate(bit_list) if bit)

    def iter_from(self, start: int = 0) -> Iterator[T]:
        """walk positions start, start + 1, ... serving the buffer first"""
        index = start
        while True:
            value = self.get(index)
            if value is ABSENT:
                return
            yield value
            index += 1

    def __iter__(self) -> Iterator[T]:
        return self.iter_from(0)

    def __getitem__(self, index):
        """support indexing by materializing up to the requested index"""
        if isinstance(index, slice):
            start, stop = index.start or 0, index.stop
            step = 1 if index.step is None else index.step
            if start >= 0 and stop is not None and stop >= 0 and step > 0:
                # bounded forward slices pull only as far as stop
                result = []
                for i in range(start, stop, step):
                    value = self.get(i)
                    if value is ABSENT:
                        break
                    result.append(value)
                return result
            start, stop, step = index.indices(len(self))
            return [self[i] for i in range(start, stop, step)]

        if index < 0:
            self._materialize_all()
            if abs(index) > len(self._cache):
                raise IndexError("index out of range")
            return self._cache[index]

        value = self.get(index)
        if value is ABSENT:
            raise IndexError("index out of range")
        return value

    def __len__(self) -> int:
        """fully materializes the source; never returns for an infinite one"""
        self._materialize_all()
        return len(self._cache)

    def __repr__(self) -> str:
        size = self.known_size()
        state = f"size={size}" if size is not None else f"buffered={len(self._cache)}"
        return f"SequenceCache({state})"


class EnumerationCursor:
    """per-enumeration state: global counter, emitted count, optional output bound and terminal flag"""

    def __init__(self, name: str):
        self.name = name
        self.counter = 0
        self.emitted = 0
        self.output_size: Optional[int] = None
        self.done = False
        self.consecutive_misses = 0
        self._stall_threshold = ENUMERATION_CONFIG.stall_warning_threshold
        self._stall_reported = False

    def advance(self) -> int:
        """returns the current counter value and moves past it"""
        n = self.counter
        self.counter += 1
        return n

    def miss(self) -> None:
        self.consecutive_misses += 1
        if (self._stall_threshold is not None and not self._stall_reported
                and self.consecutive_misses >= self._stall_threshold):
            self._stall_reported = True
            logger.warning(
                "%s: %d consecutive index tuples fell outside the operands (counter=%d); "
                "an operand required to be infinite may be finite",
                self.name, self.consecutive_misses, self.counter)

    def hit(self) -> None:
        self.emitted += 1
        self.consecutive_misses = 0
        self._check_done()

    def set_output_size(self, size: int) -> None:
        if self.output_size is None:
            self.output_size = size
            logger.debug("%s: output size is %d", self.name, size)
            self._check_done()

    def finish(self) -> None:
        self.done = True

    def _check_done(self) -> None:
        if self.output_size is not None and self.emitted >= self.output_size:
            self.done = True

    def __repr__(self) -> str:
        return (f"EnumerationCursor(name={self.name!r}, counter={self.counter}, "
                f"emitted={self.emitted}, output_size={self.output_size}, done={self.done})")


class PrefixPermutation(Generic[T]):
    """
    a permutation of a cached sequence that is the identity past a finite prefix.
    re-iterable and lazy: the tail is served from the shared cache.
    """

    def __init__(self, cache: SequenceCache[T], prefix_indices: Sequence[int]):
        self._cache = cache
        self.prefix_indices: IndexTuple = tuple(prefix_indices)

    @property
    def prefix(self) -> List[T]:
        return [self._cache[i] for i in self.prefix_indices]

    def take(self, count: int) -> List[T]:
        return list(islice(self, count))

    def __iter__(self) -> Iterator[T]:
        yield from self.prefix
        yield from self._cache.iter_from(len(self.prefix_indices))

    def __eq__(self, other) -> bool:
        return (isinstance(other, PrefixPermutation) and self._cache is other._cache
                and self.prefix_indices == other.prefix_indices)

    def __hash__(self) -> int:
        return hash((id(self._cache), self.prefix_indices))

    def __repr__(self) -> str:
        return f"PrefixPermutation(prefix_indices={self.prefix_indices})"
