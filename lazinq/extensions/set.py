from __future__ import annotations
import typing
from ..types import *
from ..comparers import EqualityComparer, resolve_comparer
from ..iterators import UnionIterator, ExceptIterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _as_enumerable(other: Iterable[T]) -> 'Enumerable[T]':
    from ..enumerable import Enumerable
    from ..factories import from_iterable
    return other if isinstance(other, Enumerable) else from_iterable(other)


class SetAccessor(Generic[T]):
    """
    set operations over sequences. element identity comes from an
    EqualityComparer (default: == with the element's hash), and every
    operation keeps the order in which elements first appear.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..factories import empty
        return self.union(empty(), comparer)

    def union(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        source = self._enumerable
        second = _as_enumerable(other)
        eq = resolve_comparer(comparer)
        return Enumerable(lambda: UnionIterator(source.get_iterator(), second.get_iterator(), eq))

    def union_all(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        source = self._enumerable
        second = _as_enumerable(other)
        return Enumerable(lambda: UnionIterator(source.get_iterator(), second.get_iterator()))

    concat = union_all

    def except_(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """
        return elements from the first sequence not in the second (set difference).
        the result is itself distinct: repeats within the source are dropped too.
        """
        from ..enumerable import Enumerable
        source = self._enumerable
        excluded = _as_enumerable(other)
        eq = resolve_comparer(comparer)
        return Enumerable(lambda: ExceptIterator(source.get_iterator(), excluded, eq))
