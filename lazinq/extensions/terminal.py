from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..comparers import EqualityComparer, resolve_comparer
from ..errors import EmptySequenceError, ElementIndexError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..dictionary import Dictionary
    from ..lists import ArrayList

# distinguishes "no element" from an element that is none
_MISSING = object()

class TerminalAccessor(Generic[T]):
    """operations that pull elements through the pipeline and return a result."""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to a python dict. later duplicate keys overwrite earlier ones."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def dictionary(self, key_selector: Optional[KeySelector[T, K]] = None,
                   value_selector: Optional[Selector[T, V]] = None,
                   comparer: Optional[EqualityComparer[K]] = None) -> 'Dictionary[K, V]':
        """convert to a lazinq Dictionary. raises DuplicateKeyError on repeated keys."""
        from ..dictionary import Dictionary
        key_sel = key_selector or identity
        val_sel = value_selector or identity
        result = Dictionary(comparer)
        for item in self._enumerable:
            result.add(key_sel(item), val_sel(item))
        return result

    def array_list(self) -> 'ArrayList[T]':
        """copy the elements into a mutable ArrayList"""
        from ..lists import ArrayList
        return ArrayList(self._enumerable)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- scalar results ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first match."""
        iterator = self._enumerable.get_iterator()
        if predicate is None: return iterator.move_next()
        while iterator.move_next():
            if predicate(iterator.current): return True
        return False

    some = any

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence."""
        iterator = self._enumerable.get_iterator()
        while iterator.move_next():
            if not predicate(iterator.current): return False
        return True

    def contains(self, element: T, comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """check whether the sequence holds an element equal to `element`"""
        eq = resolve_comparer(comparer)
        iterator = self._enumerable.get_iterator()
        while iterator.move_next():
            if eq.equals(iterator.current, element): return True
        return False

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        iterator = self._enumerable.get_iterator()
        if predicate is None:
            if not iterator.move_next(): raise EmptySequenceError()
            return iterator.current
        seen_any = False
        while iterator.move_next():
            seen_any = True
            if predicate(iterator.current): return iterator.current
        if not seen_any: raise EmptySequenceError()
        raise EmptySequenceError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except EmptySequenceError: return default

    def tail(self) -> List[T]:
        """every element after the first, as a list"""
        iterator = self._enumerable.get_iterator()
        if not iterator.move_next(): raise EmptySequenceError()
        return [item for item in iterator]

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        element = self.element_at_or_default(index, _MISSING)
        if element is _MISSING: raise ElementIndexError(index)
        return element

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """get the element at a zero-based position, or default when there is none"""
        if index < 0: return default
        iterator = self._enumerable.get_iterator()
        position = 0
        while iterator.move_next():
            if position == index: return iterator.current
            position += 1
        return default

    def index_of(self, element: T, from_index: int = 0) -> int:
        """position of the first element equal to `element`, searching from from_index; -1 if absent"""
        data = self._enumerable._get_data()
        if from_index < 0:
            from_index = max(len(data) + from_index, 0)
        for i in range(from_index, len(data)):
            if data[i] == element: return i
        return -1
