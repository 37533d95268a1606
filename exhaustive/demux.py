"""
bijections between the naturals and tuples of naturals.

every function here is exact over python ints. the 2-ary demultiplexers differ
only in how fast each coordinate grows as the input counts up:

    uniform      both coordinates grow like sqrt(n)     (z-curve)
    logarithmic  x grows like n, y like log(n)
    square_root  x grows like n^(2/3), y like n^(1/3)

all of them are monotone in every coordinate, so within any finite box the
tuple made of the box's maximal coordinates is always reached last.
"""
from typing import Callable, Dict, List, Sequence, Tuple

Demultiplexer = Callable[[int], Tuple[int, ...]]


def _check_natural(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} cannot be negative, got {n}")


def bits(n: int) -> List[bool]:
    """little-endian bits of a natural number. bits(0) is empty."""
    _check_natural(n)
    result = []
    while n:
        result.append(bool(n & 1))
        n >>= 1
    return result


def from_bits(bit_list: Sequence[bool]) -> int:
    """inverse of bits(). trailing False values are allowed."""
    n = 0
    for i, bit in enumerate(bit_list):
        if bit:
            n |= 1 << i
    return n


def big_endian_digits_padded(length: int, base: int, n: int) -> List[int]:
    """the digits of n in the given base, most significant first, left-padded with zeros to length."""
    if length < 0:
        raise ValueError("length cannot be negative")
    if base < 2:
        raise ValueError("base must be at least 2")
    _check_natural(n)
    digits = []
    for _ in range(length):
        n, digit = divmod(n, base)
        digits.append(digit)
    if n:
        raise ValueError("n does not fit in the requested number of digits")
    digits.reverse()
    return digits


def demux(size: int, n: int) -> Tuple[int, ...]:
    """
    uniform bijection from the naturals to size-tuples of naturals.
    bit i of n becomes bit i // size of coordinate size - 1 - i % size.
    """
    if size < 0:
        raise ValueError("size cannot be negative")
    _check_natural(n)
    if size == 0:
        if n != 0:
            raise ValueError("only 0 maps to the empty tuple")
        return ()
    if size == 1:
        return (n,)

    coordinates = [0] * size
    i = 0
    while n:
        if n & 1:
            coordinates[size - 1 - i % size] |= 1 << (i // size)
        n >>= 1
        i += 1
    return tuple(coordinates)


def mux(coordinates: Sequence[int]) -> int:
    """inverse of demux(len(coordinates), n)."""
    size = len(coordinates)
    for c in coordinates:
        _check_natural(c, "coordinate")
    if size == 0:
        return 0
    if size == 1:
        return coordinates[0]

    n = 0
    for position, c in enumerate(coordinates):
        offset = size - 1 - position
        j = 0
        while c:
            if c & 1:
                n |= 1 << (j * size + offset)
            c >>= 1
            j += 1
    return n


def logarithmic_demux(n: int) -> Tuple[int, int]:
    """n + 1 == (2x + 1) * 2**y"""
    _check_natural(n)
    m = n + 1
    y = (m & -m).bit_length() - 1
    x = ((m >> y) - 1) >> 1
    return x, y


def logarithmic_mux(x: int, y: int) -> int:
    _check_natural(x, "x")
    _check_natural(y, "y")
    return ((2 * x + 1) << y) - 1


def square_root_demux(n: int) -> Tuple[int, int]:
    """bits of n at positions divisible by 3 build y; the remaining bits build x."""
    _check_natural(n)
    x = y = 0
    i = 0
    while n:
        if n & 1:
            group, slot = divmod(i, 3)
            if slot == 0:
                y |= 1 << group
            else:
                x |= 1 << (2 * group + slot - 1)
        n >>= 1
        i += 1
    return x, y


def square_root_mux(x: int, y: int) -> int:
    _check_natural(x, "x")
    _check_natural(y, "y")
    n = 0
    j = 0
    while x:
        if x & 1:
            group, slot = divmod(j, 2)
            n |= 1 << (3 * group + slot + 1)
        x >>= 1
        j += 1
    j = 0
    while y:
        if y & 1:
            n |= 1 << (3 * j)
        y >>= 1
        j += 1
    return n


def demuxer(size: int) -> Demultiplexer:
    """the uniform demultiplexer of a fixed arity, as a one-argument function."""
    if size < 0:
        raise ValueError("size cannot be negative")

    def uniform(n: int) -> Tuple[int, ...]:
        return demux(size, n)

    uniform.__name__ = f"demux_{size}"
    return uniform


# 2-ary demultiplexers by name
DEMULTIPLEXERS: Dict[str, Demultiplexer] = {
    "uniform": demuxer(2),
    "logarithmic": logarithmic_demux,
    "square_root": square_root_demux,
}


def get_demultiplexer(name: str) -> Demultiplexer:
    try:
        return DEMULTIPLEXERS[name]
    except KeyError:
        raise ValueError(f"unknown demultiplexer: {name!r}, expected one of {sorted(DEMULTIPLEXERS)}") from None
