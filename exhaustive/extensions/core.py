from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: filter(predicate, self._get_data()))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: map(selector, self._get_data()))

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain.from_iterable(map(selector, self._get_data())))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements. the only safe way to bound an infinite sequence."""
        from ..enumerable import Enumerable
        if count < 0:
            raise ValueError("count cannot be negative")
        return Enumerable(lambda: islice(self._get_data(), count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        if count < 0:
            raise ValueError("count cannot be negative")
        return Enumerable(lambda: islice(self._get_data(), count, None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: takewhile(predicate, self._get_data()))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: dropwhile(predicate, self._get_data()))

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: (selector(item, index) for index, item in enumerate(self._get_data())))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence (never reached if the sequence is infinite)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self._get_data(), [element]))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain([element], self._get_data()))
