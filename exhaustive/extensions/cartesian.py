"""
cartesian products driven by a demultiplexer.

the engine counts 0, 1, 2, ... and turns each count into an index tuple. a tuple
that falls outside a finite operand is skipped; since the demultiplexer is a
bijection, in-range tuples keep turning up. an enumeration over finite operands
stops right after emitting the tuple made of every operand's last index.
"""
from __future__ import annotations
from math import prod
from ..types import *
from ..demux import Demultiplexer, demux, demuxer

logger = get_logger(__name__)


def _resolve(caches: Sequence[SequenceCache[Any]], indices: IndexTuple) -> Union[Tuple[Any, ...], Any]:
    values = []
    for cache, index in zip(caches, indices):
        value = cache.get(index)
        if value is ABSENT:
            return ABSENT
        values.append(value)
    return tuple(values)


def cartesian_product(demultiplexer: Demultiplexer,
                      caches: Sequence[SequenceCache[Any]]) -> Iterator[Tuple[Any, ...]]:
    """
    every tuple of the product of caches exactly once, in the order the demultiplexer
    imposes. the same cache may back several coordinates; uniqueness is per index tuple.
    """
    if any(cache.is_empty() for cache in caches):
        return

    name = getattr(demultiplexer, "__name__", "demultiplexer")
    cursor = EnumerationCursor(f"product[{name}]")
    distinct_caches = list({id(cache): cache for cache in caches}.values())
    logger.debug("starting %d-ary product using %s", len(caches), name)

    while not cursor.done:
        indices = demultiplexer(cursor.advance())
        if len(indices) != len(caches):
            raise ValueError(f"{name} produced {len(indices)} coordinates for {len(caches)} operands")
        values = _resolve(caches, indices)
        if values is ABSENT:
            cursor.miss()
            continue

        if cursor.output_size is None and all(c.known_size() is not None for c in distinct_caches):
            cursor.set_output_size(prod(cache.known_size() for cache in caches))
        cursor.hit()
        if not cursor.done and all(cache.is_last_index(i) for cache, i in zip(caches, indices)):
            cursor.finish()
        yield values

    logger.debug("%s finished after %d tuples", cursor.name, cursor.emitted)


def tuples(demultiplexer: Demultiplexer, *sources: Iterable[Any]) -> Iterator[Tuple[Any, ...]]:
    """product of independent sources, each wrapped in its own cache"""
    if len(sources) == 0:
        yield ()
        return
    caches = [SequenceCache(source) for source in sources]
    if len(caches) == 1:
        yield from ((x,) for x in caches[0])
        return
    yield from cartesian_product(demultiplexer, caches)


def self_tuples(size: int, demultiplexer: Demultiplexer, source: Iterable[T]) -> Iterator[Tuple[T, ...]]:
    """size-fold product of one source with itself, sharing a single cache"""
    if size == 0:
        yield ()
        return
    cache = SequenceCache(source)
    if size == 1:
        yield from ((x,) for x in cache)
        return
    yield from cartesian_product(demultiplexer, [cache] * size)


def fixed_size_lists(size: int, source: Iterable[T]) -> Iterator[List[T]]:
    """all lists of a given length over source, along a z-curve"""
    for t in self_tuples(size, demuxer(size), source):
        yield list(t)


def dependent_pairs(xs: Iterable[A], f: Callable[[A], Iterable[B]]) -> Iterator[Tuple[A, B]]:
    """
    for each x in order, every (x, y) with y in f(x). xs must be finite and only the
    last x may map to an infinite source.
    """
    for x in xs:
        for y in f(x):
            yield x, y


def dependent_pairs_infinite(xs: Iterable[A], f: Callable[[A], Iterable[B]]) -> Iterator[Tuple[A, B]]:
    """
    (outer, inner) index pairs along the uniform z-curve. f(x) is called once per
    distinct x, and every f(x) must be infinite: termination is never checked.
    """
    cxs = SequenceCache(xs)
    by_value: Dict[Any, SequenceCache[B]] = {}
    by_index: Dict[int, SequenceCache[B]] = {}
    cursor = EnumerationCursor("dependent_pairs_infinite")

    while True:
        i, j = demux(2, cursor.advance())
        x = cxs.get(i)
        if x is ABSENT:
            cursor.miss()
            continue

        try:
            hash(x)
            memo, key = by_value, x
        except TypeError:
            # unhashable first values are memoized by position instead
            memo, key = by_index, i
        ys = memo.get(key)
        if ys is None:
            ys = memo[key] = SequenceCache(f(x))

        y = ys.get(j)
        if y is ABSENT:
            cursor.miss()
            continue
        cursor.hit()
        yield x, y


def pairs_lex(as_: Iterable[A], bs: Iterable[B]) -> Iterator[Tuple[A, B]]:
    """odometer order, second coordinate fastest. bs must be finite."""
    cbs = SequenceCache(bs)
    if cbs.is_empty():
        return
    for a in as_:
        for b in cbs:
            yield a, b


def triples_lex(as_: Iterable[A], bs: Iterable[B], cs: Iterable[Any]) -> Iterator[Tuple[A, B, Any]]:
    """odometer order, last coordinate fastest. bs and cs must be finite."""
    cbs = SequenceCache(bs)
    ccs = SequenceCache(cs)
    if cbs.is_empty() or ccs.is_empty():
        return
    for a in as_:
        for b in cbs:
            for c in ccs:
                yield a, b, c


def tuples_lex(*sources: Iterable[Any]) -> Iterator[Tuple[Any, ...]]:
    """odometer order over any number of sources; all but the first must be finite"""
    for values in controlled_lists_lex(sources):
        yield tuple(values)


def controlled_lists_lex(xss: Sequence[Iterable[T]]) -> Iterator[List[T]]:
    """
    lists whose i-th element comes from xss[i], in lexicographic order.
    every iterable but the first must be finite.
    """
    xss = list(xss)
    if len(xss) == 0:
        yield []
        return
    if len(xss) == 1:
        yield from ([x] for x in xss[0])
        return
    if len(xss) == 2:
        yield from ([a, b] for a, b in pairs_lex(xss[0], xss[1]))
        return

    middle = len(xss) // 2
    left = controlled_lists_lex(xss[:middle])
    right = controlled_lists_lex(xss[middle:])
    for left_list, right_list in pairs_lex(left, right):
        yield left_list + right_list

