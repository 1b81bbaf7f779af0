import suite
from lazinq import P, of, empty, CollectionModifiedError
from lazinq.iterators import (
    ArrayIterator, IterableIterator, WhereIterator, SelectIterator,
    DefaultIfEmptyIterator, UnionIterator
)
from lazinq.comparers import DEFAULT_COMPARER

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def _drain(iterator):
    items = []
    while iterator.move_next():
        items.append(iterator.current)
    return items


@test("array iterator starts before the first element")
def test_array_iterator_start():
    iterator = ArrayIterator([1, 2])
    assert_that(iterator.current is None, "current is none before the first advance")
    assert_that(iterator.move_next() and iterator.current == 1, "first advance")


@test("exhaustion is sticky")
def test_sticky_exhaustion():
    for iterator in (ArrayIterator([1]), IterableIterator(iter([1])),
                     WhereIterator(ArrayIterator([1])), SelectIterator(ArrayIterator([1])),
                     DefaultIfEmptyIterator(ArrayIterator([]), 0),
                     UnionIterator(ArrayIterator([1]), ArrayIterator([2]), DEFAULT_COMPARER)):
        _drain(iterator)
        assert_that(not iterator.move_next(), f"{type(iterator).__name__} should stay exhausted")
        assert_that(not iterator.move_next(), f"{type(iterator).__name__} should stay exhausted twice")


@test("select iterator yields none when the last advance failed")
def test_select_current_after_end():
    iterator = SelectIterator(ArrayIterator([1]), lambda x, i: x * 10)
    assert_that(iterator.current is None, "none before the first advance")
    iterator.move_next()
    assert_that(iterator.current == 10, "projected value")
    iterator.move_next()
    assert_that(iterator.current is None, "none after exhaustion")


@test("default_if_empty iterator yields its default exactly once")
def test_default_iterator():
    iterator = DefaultIfEmptyIterator(ArrayIterator([]), 'd')
    assert_that(_drain(iterator) == ['d'], "single default")


@test("union iterator without comparer concatenates")
def test_union_iterator():
    assert_that(_drain(UnionIterator(ArrayIterator([1, 1]), ArrayIterator([1]))) == [1, 1, 1], "no dedup")
    assert_that(_drain(UnionIterator(ArrayIterator([1, 1]), ArrayIterator([1, 2]), DEFAULT_COMPARER)) == [1, 2], "dedup")


@test("iterators work as python iterators")
def test_python_protocol():
    assert_that(list(ArrayIterator('abc')) == ['a', 'b', 'c'], "list() drains an iterator")
    assert_that([x * 2 for x in of(1, 2)] == [2, 4], "enumerables are iterable")


@test("growing the source list mid-enumeration fails the next advance")
def test_concurrent_append():
    data = [1, 2, 3]
    iterator = P(data).where(lambda x: True).get_iterator()
    assert_that(iterator.move_next(), "first advance succeeds")
    data.append(4)
    assert_raises(CollectionModifiedError, iterator.move_next)


@test("shrinking the source list mid-enumeration fails too")
def test_concurrent_remove():
    data = [1, 2, 3]

    def consume():
        for item in P(data):
            if item == 1:
                data.remove(3)

    error = assert_raises(CollectionModifiedError, consume)
    assert_that(isinstance(error, RuntimeError), "modification error is a RuntimeError")


@test("an exhausted array iterator ignores later growth")
def test_append_after_exhaustion():
    data = [1, 2]
    iterator = ArrayIterator(data)
    assert_that(_drain(iterator) == [1, 2], "drained")
    data.append(3)
    assert_that(not iterator.move_next(), "stays exhausted instead of failing")
    assert_that(iterator.current is None, "no current after the end")


@test("a modification between enumerations is fine")
def test_modification_between_enumerations():
    data = [1, 2]
    query = P(data).select(lambda x: x + 1)
    assert_that(query.to.list() == [2, 3], "first enumeration")
    data.append(3)
    assert_that(query.to.list() == [2, 3, 4], "new iterator snapshots the new length")


@test("in-place element replacement is not a structural change")
def test_in_place_replacement():
    data = [1, 2, 3]
    seen = []
    for item in P(data):
        seen.append(item)
        if item == 1:
            data[2] = 30
    assert_that(seen == [1, 2, 30], f"replacement is visible without failing: {seen}")


@test("empty sequences produce exhausted iterators")
def test_empty_iterator():
    iterator = empty().get_iterator()
    assert_that(not iterator.move_next() and iterator.current is None, "nothing to yield")


if __name__ == "__main__":
    suite.main(title="lazinq iterator protocol test suite")
