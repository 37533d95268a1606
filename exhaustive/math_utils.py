import math
from typing import Any, List, Sequence


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError("factorial of a negative number is undefined")
    return math.factorial(n)


def _multiplicities(xs: Sequence[Any]) -> List[int]:
    # equality only, so unhashable elements are fine
    values: List[Any] = []
    counts: List[int] = []
    for x in xs:
        for i, v in enumerate(values):
            if v == x:
                counts[i] += 1
                break
        else:
            values.append(x)
            counts.append(1)
    return counts


def permutation_count(xs: Sequence[Any]) -> int:
    """number of distinct permutations of xs: n! over the product of each value's multiplicity factorial"""
    count = math.factorial(len(xs))
    for multiplicity in _multiplicities(xs):
        count //= math.factorial(multiplicity)
    return count


def number_of_arrangements_of_a_set(n: int) -> int:
    """number of lists of distinct elements drawn from an n-element set, the empty list included"""
    if n < 0:
        raise ValueError("n cannot be negative")
    total = 0
    term = 1
    # n!/(n-k)! for k = 0..n
    for k in range(n + 1):
        total += term
        term *= n - k
    return total
