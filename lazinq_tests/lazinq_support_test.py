import suite
from lazinq import (
    P, ArrayList, EqualityComparer, DEFAULT_COMPARER, QueryConfig, configure, get_config,
    CollectionModifiedError, LinqError, EmptySequenceError
)
from lazinq.comparers import default_hash, resolve_comparer

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- equality comparers ---

@test("default hash covers none, hashables and unhashables")
def test_default_hash():
    assert_that(default_hash(None) == "None", "none has a fixed key")
    assert_that(default_hash(42) == hash(42) and default_hash('a') == hash('a'), "hashables use __hash__")
    assert_that(default_hash([1, 2]) == default_hash([3]) == "<list>", "unhashables share a bucket per type")
    assert_that(default_hash({"a": 1, "b": 2}) == default_hash({"b": 2, "a": 1}), "equal dicts share a hash")
    assert_that(default_hash({1, 2}) == default_hash(frozenset({2, 1})), "a set hashes like the frozenset it equals")
    assert_that(default_hash(1) == default_hash(1.0) == default_hash(True), "equal numbers share a hash")


@test("comparer fills in missing functions")
def test_partial_comparer():
    equals_only = EqualityComparer.from_equals(lambda a, b: abs(a - b) < 1e-9)
    assert_that(equals_only.equals(0.1 + 0.2, 0.3), "custom equals")
    assert_that(equals_only.hash(7) == hash(7), "default hash kept")

    hash_only = EqualityComparer(hash=lambda x: x // 10)
    assert_that(hash_only.equals(3, 3) and not hash_only.equals(3, 4), "default equals kept")
    assert_that(hash_only.hash(35) == 3, "custom hash")


@test("by_key compares selected keys")
def test_by_key():
    by_len = EqualityComparer.by_key(len)
    assert_that(by_len.equals('ab', 'cd') and by_len.hash('ab') == by_len.hash('xy'), "same length is equal")
    assert_that(P(['ab', 'cd', 'e']).set.distinct(by_len).to.list() == ['ab', 'e'], "distinct by length")


@test("resolve_comparer normalizes arguments")
def test_resolve_comparer():
    custom = EqualityComparer()
    assert_that(resolve_comparer(None) is DEFAULT_COMPARER, "none becomes the default")
    assert_that(resolve_comparer(custom) is custom, "comparers pass through")
    assert_raises(TypeError, lambda: resolve_comparer(lambda a, b: True))
    assert_raises(TypeError, lambda: resolve_comparer({'equals': None}))


@test("comparers are immutable")
def test_comparer_immutable():
    def mutate():
        DEFAULT_COMPARER._equals = lambda a, b: True
    assert_raises(AttributeError, mutate)


# --- array list ---

@test("array list add, add_range, remove and count")
def test_array_list_basic():
    items = ArrayList([1, 2])
    items.add(3)
    items.add_range(P([4, 5]).select(lambda x: x * 10))
    assert_that(items.to_list() == [1, 2, 3, 40, 50], f"contents: {items}")
    assert_that(items.remove(2) and not items.remove(99), "remove reports whether it found the item")
    assert_that(items.count() == 4 and len(items) == 4, "count without predicate")
    assert_that(items.count(lambda x: x > 10) == 2, "count with predicate")
    assert_that(items[0] == 1, "indexing")
    items[0] = 100
    assert_that(items.to.first() == 100, "index assignment")


@test("array list push appends and returns the new length")
def test_array_list_push():
    items = ArrayList(['a'])
    assert_that(items.push('b', 'c') == 3, "length after pushing two")
    assert_that(items.push() == 3, "pushing nothing keeps the length")
    assert_that(items.to_list() == ['a', 'b', 'c'], "pushed in order")


@test("array list is a lazy sequence over its live contents")
def test_array_list_sequence():
    items = ArrayList()
    query = items.where(lambda x: x % 2 == 0)
    items.add_range([1, 2, 3, 4])
    assert_that(query.to.list() == [2, 4], "query sees items added after it was built")
    items.add_range(query)
    assert_that(items.to_list() == [1, 2, 3, 4, 2, 4], "add_range from a query over itself")


@test("modifying an array list during enumeration fails")
def test_array_list_modified():
    items = ArrayList([1, 2, 3])

    def mutate():
        for item in items:
            items.add(item)

    assert_raises(CollectionModifiedError, mutate)


# --- config ---

@test("config defaults and validation")
def test_config_validation():
    assert_that(QueryConfig().sort_algorithm == 'stable', "stable is the default")
    assert_raises(ValueError, lambda: QueryConfig(sort_algorithm='bogo'))


@test("config reads the environment")
def test_config_from_env():
    assert_that(QueryConfig.from_env({}).sort_algorithm == 'stable', "no variable keeps the default")
    env = {'LAZINQ_SORT_ALGORITHM': ' Partition '}
    assert_that(QueryConfig.from_env(env).sort_algorithm == 'partition', "variable is normalized")
    assert_raises(ValueError, lambda: QueryConfig.from_env({'LAZINQ_SORT_ALGORITHM': 'nope'}))


@test("configure replaces the active config")
def test_configure():
    before = get_config()
    try:
        updated = configure(sort_algorithm='partition')
        assert_that(get_config() is updated and updated.sort_algorithm == 'partition', "override applied")
        assert_that(before is not updated, "configure builds a new config object")
        assert_raises(ValueError, lambda: configure(sort_algorithm='bogo'))
        assert_that(get_config() is updated, "invalid override leaves the config in place")
    finally:
        configure(sort_algorithm=before.sort_algorithm)


# --- errors ---

@test("errors share a common base")
def test_error_hierarchy():
    error = assert_raises(LinqError, lambda: P([]).to.first())
    assert_that(isinstance(error, EmptySequenceError), "first on empty raises EmptySequenceError")


if __name__ == "__main__":
    suite.main(title="lazinq comparer, list and config test suite")
