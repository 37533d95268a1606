from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Iterator[T]:
        """get a fresh iterator over the underlying data"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        """init with a function that returns a new iterable each time it is called"""
        self._data_func = data_func

    def _get_data(self) -> Iterator[T]:
        """nothing is cached: every call starts the underlying enumeration over"""
        return iter(self._data_func())

    def __iter__(self) -> Iterator[T]:
        return self._get_data()

    # no __len__, since list() probes it as a length hint. use .to.count()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable over finite or infinite sequences."""
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.comb = CombinatoricsAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return "Enumerable(<lazy>)"
