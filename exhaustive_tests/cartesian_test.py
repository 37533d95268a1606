from itertools import count
import suite
from exhaustive import E, naturals, from_range, controlled_lists_lex, demux

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


@test("pairs of finite sources follow the z-curve and stop at the last tuple")
def test_pairs_finite_order():
    result = E([10, 20]).comb.pairs([1, 2, 3]).to.list()
    assert_equal(result, [(10, 1), (10, 2), (20, 1), (20, 2), (10, 3), (20, 3)])


@test("pairs with an empty operand are empty")
def test_pairs_empty():
    assert_equal(E([]).comb.pairs([1, 2]).to.list(), [])
    assert_equal(E([1, 2]).comb.pairs([]).to.list(), [])
    assert_equal(naturals().comb.pairs([]).to.list(), [], "an empty operand ends even an infinite product")


@test("self pairs of naturals fill square boxes")
def test_self_pairs_infinite():
    result = naturals().comb.pairs().take(4096).to.set()
    assert_equal(result, {(x, y) for x in range(64) for y in range(64)})


@test("pairs of an infinite and a finite source reach every tuple")
def test_pairs_mixed():
    result = naturals().comb.pairs("ab").take(20).to.list()
    assert_equal(len(set(result)), 20, "no duplicates")
    assert_equal({y for _, y in result}, {"a", "b"})
    assert_equal({x for x, _ in result}, set(range(10)))


@test("positional termination counts repeated values separately")
def test_repeated_values():
    assert_equal(E([1, 2, 1]).comb.lists(2).to.count(), 9)
    assert_equal(E([1, 1]).comb.pairs().to.list(), [(1, 1)] * 4)


@test("self triples over a finite source are the first demux values")
def test_triples_self():
    result = from_range(0, 2).comb.triples().to.list()
    assert_equal(result, [demux(3, n) for n in range(8)])


@test("triples and higher arities of distinct operands")
def test_higher_arities():
    assert_equal(E([1]).comb.triples("ab", [True]).to.list(), [(1, "a", True), (1, "b", True)])
    quads = E([0, 1]).comb.quadruples([0, 1], [0, 1], [0, 1]).to.list()
    assert_equal(len(quads), 16)
    assert_equal(set(quads), {demux(4, n) for n in range(16)})
    assert_equal(E([0, 1]).comb.quintuples().to.count(), 32)
    assert_equal(E([0, 1]).comb.sextuples().to.count(), 64)
    assert_equal(E([0, 1]).comb.septuples().to.count(), 128)
    assert_equal(naturals().comb.septuples().take(3).to.list()[0], (0,) * 7)


@test("partial operand lists are rejected")
def test_partial_operands():
    assert_raises(TypeError, E([1]).comb.triples, [1])
    assert_raises(TypeError, E([1]).comb.quadruples, [1], [2])
    assert_raises(TypeError, E([1]).comb.pairs, 5)


@test("tuples generalizes to any arity")
def test_tuples():
    assert_equal(E([1, 2]).comb.tuples().to.list(), [(1,), (2,)])
    assert_equal(E("ab").comb.tuples("c").to.list(), [("a", "c"), ("b", "c")])
    assert_equal(E([0, 1]).comb.tuples([0, 1], [0, 1], [0, 1], [0, 1]).to.count(), 32)


@test("logarithmic and square root orders")
def test_pair_orders():
    log_pairs = naturals().comb.pairs_logarithmic_order().take(5).to.list()
    assert_equal(log_pairs, [(0, 0), (0, 1), (1, 0), (0, 2), (2, 0)])
    root_pairs = naturals().comb.pairs_square_root_order().take(5).to.list()
    assert_equal(root_pairs, [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0)])
    explicit = naturals().comb.pairs(naturals(), order="logarithmic").take(5).to.list()
    assert_equal(explicit, log_pairs)
    assert_equal(E("ab").comb.pairs_square_root_order([1, 2]).to.count(), 4)
    assert_raises(ValueError, naturals().comb.pairs, order="diagonal")


@test("results are re-iterable and restart from scratch")
def test_reiteration():
    pairs = from_range(0, 3).comb.pairs()
    assert_equal(pairs.to.list(), pairs.to.list())
    assert_equal(pairs.to.count(), 9)


@test("dependent pairs walk each inner source in turn")
def test_dependent_pairs():
    result = E([1, 2, 3]).comb.dependent_pairs(range).to.list()
    assert_equal(result, [(1, 0), (2, 0), (2, 1), (3, 0), (3, 1), (3, 2)])
    tail = E([0, 1]).comb.dependent_pairs(lambda x: count() if x else "ab").take(4).to.list()
    assert_equal(tail, [(0, "a"), (0, "b"), (1, 0), (1, 1)])
    assert_raises(TypeError, E([1]).comb.dependent_pairs, None)


@test("infinite dependent pairs memoize the inner source per value")
def test_dependent_pairs_infinite():
    calls = []

    def f(x):
        calls.append(x)
        return count(x)

    result = naturals().comb.dependent_pairs_infinite(f).take(100).to.list()
    assert_equal(result[:3], [(0, 0), (0, 1), (1, 1)])
    assert_equal(len(calls), len(set(calls)), "f is called once per value")
    assert_that(all(y >= x for x, y in result), "every y comes from f(x)")

    repeated = E([7, 7]).comb.dependent_pairs_infinite(lambda x: count()).take(3).to.list()
    assert_equal(repeated[0], (7, 0))


@test("unhashable first values are memoized by position")
def test_dependent_pairs_unhashable():
    xs = naturals().select(lambda n: [n])
    result = xs.comb.dependent_pairs_infinite(lambda x: count(x[0])).take(3).to.list()
    assert_equal(result, [([0], 0), ([0], 1), ([1], 1)])


@test("lexicographic pairs and triples")
def test_lex_products():
    assert_equal(E([1, 2]).comb.pairs_lex("ab").to.list(), [(1, "a"), (1, "b"), (2, "a"), (2, "b")])
    assert_equal(naturals().comb.pairs_lex("x").take(3).to.list(), [(0, "x"), (1, "x"), (2, "x")])
    assert_equal(E([1]).comb.triples_lex([2, 3], [4]).to.list(), [(1, 2, 4), (1, 3, 4)])
    assert_equal(naturals().comb.pairs_lex([]).take(3).to.list(), [])


@test("lexicographic tuples of higher arity")
def test_higher_arity_lex():
    quads = E([1, 2]).comb.quadruples_lex("a", [True], "xy").to.list()
    assert_equal(quads, [(1, "a", True, "x"), (1, "a", True, "y"), (2, "a", True, "x"), (2, "a", True, "y")])
    fives = naturals().comb.quintuples_lex([0], [0], [0], [0, 1]).take(3).to.list()
    assert_equal(fives, [(0, 0, 0, 0, 0), (0, 0, 0, 0, 1), (1, 0, 0, 0, 0)])
    assert_equal(E("ab").comb.sextuples_lex(*(["c"] * 5)).to.list(),
                 [("a",) + ("c",) * 5, ("b",) + ("c",) * 5])
    sevens = E([0, 1]).comb.septuples_lex(*([[0, 1]] * 6)).to.list()
    assert_equal(len(sevens), 128)
    assert_equal(sevens, sorted(sevens), "odometer order is lexicographic")
    assert_equal(E([1]).comb.quadruples_lex([2], [], [3]).to.list(), [])
    assert_raises(TypeError, E([1]).comb.quadruples_lex, [2], [3])
    assert_raises(TypeError, E([1]).comb.quintuples_lex, [2], None, [3], [4])


@test("controlled lists draw each position from its own source")
def test_controlled_lists_lex():
    expected = [[1, 3, 4], [1, 3, 5], [2, 3, 4], [2, 3, 5]]
    assert_equal(controlled_lists_lex([[1, 2], [3], [4, 5]]).to.list(), expected)
    assert_equal(E([1, 2]).comb.controlled_lists_lex([3], [4, 5]).to.list(), expected)
    assert_equal(controlled_lists_lex([]).to.list(), [[]])
    assert_equal(controlled_lists_lex([[1], []]).to.list(), [])
    assert_raises(TypeError, controlled_lists_lex, [[1], None])


if __name__ == "__main__":
    suite.run(title="cartesian product test")
