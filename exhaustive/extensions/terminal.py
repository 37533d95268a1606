from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    """
    eager operations. everything here except first/any/all walks the whole sequence,
    so call .take() before materializing an infinite enumeration.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array; tuples of equal arity become rows"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self, columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe, one row per tuple"""
        return pd.DataFrame(self.list(), columns=columns)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first match."""
        data = self._enumerable._get_data()
        if predicate is None: return next(data, _MISSING) is not _MISSING
        return any(predicate(x) for x in data)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. stops at the first failure."""
        return all(predicate(x) for x in self._enumerable._get_data())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        data = self._enumerable._get_data()
        if predicate is None:
            item = next(data, _MISSING)
            if item is _MISSING: raise ValueError("sequence contains no elements")
            return item
        for item in data:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def element_at(self, index: int) -> T:
        """the element at a position, pulling only as far as needed"""
        if index < 0: raise ValueError("index cannot be negative")
        for i, item in enumerate(self._enumerable._get_data()):
            if i == index: return item
        raise ValueError(f"sequence has no element at index {index}")
