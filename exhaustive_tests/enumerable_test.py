import numpy as np
import pandas as pd
import suite
from exhaustive import (
    E, Enumerable, from_iterable, from_range, naturals, repeat, empty, from_string, generate
)

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


@test("factories build the expected sequences")
def test_factories():
    assert_equal(from_range(3, 4).to.list(), [3, 4, 5, 6])
    assert_equal(naturals().take(3).to.list(), [0, 1, 2])
    assert_equal(naturals(10).take(2).to.list(), [10, 11])
    assert_equal(repeat("x", 3).to.list(), ["x", "x", "x"])
    assert_equal(repeat(0).take(4).to.list(), [0, 0, 0, 0])
    assert_equal(empty().to.list(), [])
    assert_equal(from_string("hey").to.list(), ["h", "e", "y"])
    assert_that(E is from_iterable, "E is an alias")


@test("factories validate their arguments")
def test_factory_errors():
    assert_raises(TypeError, from_iterable, None)
    assert_raises(TypeError, from_iterable, 12)
    assert_raises(ValueError, from_range, 0, -1)
    assert_raises(ValueError, repeat, 1, -1)
    assert_raises(TypeError, from_string, ["a"])
    assert_raises(ValueError, generate, lambda: 1, -3)


@test("generate calls the function once per element")
def test_generate():
    state = {"n": 0}

    def tick():
        state["n"] += 1
        return state["n"]

    assert_equal(generate(tick, 3).to.list(), [1, 2, 3])
    assert_equal(generate(tick).take(2).to.list(), [4, 5])


@test("core operators are lazy over infinite sequences")
def test_core_lazy():
    result = naturals().where(lambda x: x % 2 == 0).select(lambda x: x * x).take(3).to.list()
    assert_equal(result, [0, 4, 16])
    assert_equal(naturals().skip(5).take(2).to.list(), [5, 6])
    assert_equal(naturals().take_while(lambda x: x < 4).to.list(), [0, 1, 2, 3])
    assert_equal(naturals().skip_while(lambda x: x < 4).take(1).to.list(), [4])
    assert_equal(naturals().select_many(lambda x: [x, x]).take(5).to.list(), [0, 0, 1, 1, 2])
    assert_equal(naturals().prepend(-1).take(2).to.list(), [-1, 0])


@test("indexed projection and appending")
def test_select_with_index_append():
    result = E("ab").select_with_index(lambda c, i: f"{i}{c}").append("z").to.list()
    assert_equal(result, ["0a", "1b", "z"])
    assert_raises(ValueError, naturals().take, -1)
    assert_raises(ValueError, naturals().skip, -1)


@test("enumerables restart on every iteration")
def test_reiteration():
    evens = from_range(0, 10).where(lambda x: x % 2 == 0)
    assert_equal(evens.to.list(), [0, 2, 4, 6, 8])
    assert_equal(list(evens), [0, 2, 4, 6, 8])
    assert_raises(TypeError, len, evens)
    gen = E(x for x in range(3))
    assert_equal(gen.to.list(), [0, 1, 2])
    assert_equal(gen.to.list(), [], "a generator source is single use")
    assert_that(isinstance(evens, Enumerable), "operators return enumerables")


@test("list() reads a one-shot source exactly once")
def test_builtin_list_single_pass():
    assert_equal(list(E(x for x in [1, 2, 3])), [1, 2, 3])
    assert_equal(list(E(x for x in "ab").comb.pairs([1])), [("a", 1), ("b", 1)])
    seen = []

    def record(x):
        seen.append(x)
        return x

    assert_equal(list(from_range(0, 4).select(record)), [0, 1, 2, 3])
    assert_equal(seen, [0, 1, 2, 3], "each element is projected once")
    assert_equal(sorted(E(x for x in [3, 1, 2])), [1, 2, 3])


@test("terminal queries stop as early as they can")
def test_terminal_short_circuit():
    assert_equal(naturals().to.first(lambda x: x > 10), 11)
    assert_that(naturals().to.any(lambda x: x == 100), "any should find 100")
    assert_that(naturals().to.any(), "non-empty")
    assert_that(not empty().to.any(), "empty")
    assert_that(not naturals().to.all(lambda x: x < 5), "all stops at the first failure")
    assert_equal(naturals().to.element_at(7), 7)


@test("terminal queries on empty and out of range input")
def test_terminal_errors():
    try:
        empty().to.first()
        assert_that(False, "empty sequence should raise error")
    except ValueError as e:
        assert_that("no elements" in str(e), f"unexpected error: {e}")
    assert_equal(empty().to.first_or_default(default=-1), -1)
    assert_equal(E([1, 2]).to.first_or_default(lambda x: x > 5), None)
    assert_raises(ValueError, E([1]).to.element_at, 3)
    assert_raises(ValueError, E([1]).to.element_at, -1)


@test("counting and sets")
def test_count_set():
    assert_equal(from_range(0, 10).to.count(), 10)
    assert_equal(from_range(0, 10).to.count(lambda x: x > 6), 3)
    assert_equal(E([1, 1, 2]).to.set(), {1, 2})


@test("numpy and pandas conversions")
def test_numpy_pandas():
    pairs = naturals().comb.pairs().take(4)
    arr = pairs.to.array()
    assert_that(isinstance(arr, np.ndarray), "array expected")
    assert_equal(arr.shape, (4, 2))
    assert_equal(arr.tolist(), [[0, 0], [0, 1], [1, 0], [1, 1]])

    df = pairs.to.df(columns=["x", "y"])
    assert_that(isinstance(df, pd.DataFrame), "dataframe expected")
    assert_equal(list(df.columns), ["x", "y"])
    assert_equal(df["y"].sum(), 2)

    series = E("ab").comb.strings(2).to.pandas()
    assert_that(isinstance(series, pd.Series), "series expected")
    assert_equal(series.tolist(), ["aa", "ab", "ba", "bb"])


if __name__ == "__main__":
    suite.run(title="enumerable test")
