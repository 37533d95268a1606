import typing
from itertools import count as _count
from .types import *
from .extensions import cartesian

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable. a one-shot iterator can only be enumerated once."""
    from .enumerable import Enumerable
    if data is None: raise TypeError("data cannot be None")
    if not isinstance(data, Iterable):
        raise TypeError(f"data must be iterable, got {type(data).__name__}")
    return Enumerable(lambda: iter(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    if count < 0: raise ValueError("count cannot be negative")
    return Enumerable(lambda: range(start, start + count))

def naturals(start: int = 0) -> 'Enumerable[int]':
    """start, start + 1, start + 2, ... without end"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _count(start))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item; forever when count is None"""
    from .enumerable import Enumerable
    from itertools import repeat as _repeat
    if count is None: return Enumerable(lambda: _repeat(item))
    if count < 0: raise ValueError("count cannot be negative")
    return Enumerable(lambda: _repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

def from_string(s: str) -> 'Enumerable[str]':
    """the characters of a string"""
    if not isinstance(s, str): raise TypeError("s must be a string")
    return from_iterable(s)

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate sequence using a function; unbounded when count is None"""
    from .enumerable import Enumerable
    if count is None:
        def generate_forever():
            while True:
                yield generator_func()
        return Enumerable(generate_forever)
    if count < 0: raise ValueError("count cannot be negative")
    return Enumerable(lambda: (generator_func() for _ in range(count)))

def controlled_lists_lex(xss: Sequence[Iterable[T]]) -> 'Enumerable[List[T]]':
    """lists whose i-th element comes from xss[i], in lexicographic order"""
    from .enumerable import Enumerable
    if xss is None: raise TypeError("xss cannot be None")
    sources = list(xss)
    for i, xs in enumerate(sources):
        if xs is None: raise TypeError(f"xss[{i}] cannot be None")
    return Enumerable(lambda: cartesian.controlled_lists_lex(sources))

# --- aliases ---
exhaustive = from_iterable
E = from_iterable
