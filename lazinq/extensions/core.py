from __future__ import annotations
import typing
from ..types import *
from ..iterators import WhereIterator, SelectIterator, DefaultIfEmptyIterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        if predicate is None:
            return self.where_with_index(None)
        return self.where_with_index(lambda item, index: predicate(item))

    def where_with_index(self: 'Enumerable[T]', predicate: Optional[IndexedPredicate[T]]) -> 'Enumerable[T]':
        """filter elements using the element and its position in the source"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: WhereIterator(self.get_iterator(), predicate))

    def select(self: 'Enumerable[T]', selector: Optional[Selector[T, U]] = None) -> 'Enumerable[U]':
        """project each element to a new form"""
        if selector is None:
            return self.select_with_index(None)
        return self.select_with_index(lambda item, index: selector(item))

    def select_with_index(self: 'Enumerable[T]', selector: Optional[IndexedSelector[T, U]]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: SelectIterator(self.get_iterator(), selector))

    # aliases
    filter = where
    map = select

    def default_if_empty(self: 'Enumerable[T]', default_value: T = None) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: DefaultIfEmptyIterator(self.get_iterator(), default_value))

    def order_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key. starts a new ordering even on an ordered sequence."""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, key_selector, False, comparer)

    def order_by_descending(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, key_selector, True, comparer)
