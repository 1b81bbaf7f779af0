from __future__ import annotations

import logging
import typing
from abc import ABC, abstractmethod
from collections.abc import Sequence
from .types import *
from .errors import CollectionModifiedError

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable, OrderedEnumerable
    from .dictionary import Dictionary
    from .comparers import EqualityComparer

logger = logging.getLogger(__name__)


# --- iterator protocol ---

class SequenceIterator(ABC, Generic[T]):
    """
    single-pass cursor over a sequence.
    starts before the first element; move_next() advances and reports whether
    an element is available, current reads it. also usable as a python iterator.
    """

    @abstractmethod
    def move_next(self) -> bool:
        """advance the cursor. once false, stays false."""
        pass

    @property
    @abstractmethod
    def current(self) -> Optional[T]:
        """the element at the cursor, none before the first successful advance"""
        pass

    def __iter__(self) -> 'SequenceIterator[T]':
        return self

    def __next__(self) -> T:
        if self.move_next():
            return self.current
        raise StopIteration


# --- source adapters ---

class ArrayIterator(SequenceIterator[T]):
    """walks an indexable sequence, failing if its length changes mid-enumeration."""

    def __init__(self, array: Sequence):
        self._array = array
        self._length = len(array)
        self._index = -1

    def move_next(self) -> bool:
        if self._index >= self._length:
            return False
        if len(self._array) != self._length:
            logger.debug(f"array length changed from {self._length} to {len(self._array)} during enumeration")
            raise CollectionModifiedError()
        self._index += 1
        return self._index < self._length

    @property
    def current(self) -> Optional[T]:
        if 0 <= self._index < self._length:
            return self._array[self._index]
        return None


class IterableIterator(SequenceIterator[T]):
    """adapts a python iterator (generator, set iterator, ...) to the protocol"""

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._current: Optional[T] = None
        self._done = False

    def move_next(self) -> bool:
        if self._done:
            return False
        try:
            self._current = next(self._iterator)
            return True
        except StopIteration:
            self._current = None
            self._done = True
            return False

    @property
    def current(self) -> Optional[T]:
        return self._current


# --- operator adapters ---

class WhereIterator(SequenceIterator[T]):
    def __init__(self, source: SequenceIterator[T], predicate: Optional[IndexedPredicate[T]] = None):
        self._source = source
        self._predicate = predicate or always_true
        self._index = -1

    def move_next(self) -> bool:
        while self._source.move_next():
            self._index += 1
            if self._predicate(self._source.current, self._index):
                return True
        return False

    @property
    def current(self) -> Optional[T]:
        return self._source.current


class SelectIterator(SequenceIterator[U]):
    def __init__(self, source: SequenceIterator[T], selector: Optional[IndexedSelector[T, U]] = None):
        self._source = source
        self._selector = selector or identity
        self._index = -1
        self._has_current = False

    def move_next(self) -> bool:
        self._has_current = self._source.move_next()
        if self._has_current:
            self._index += 1
        return self._has_current

    @property
    def current(self) -> Optional[U]:
        # projection runs on read, so an element that is never read is never projected
        if self._has_current:
            return self._selector(self._source.current, self._index)
        return None


class DefaultIfEmptyIterator(SequenceIterator[T]):
    def __init__(self, source: SequenceIterator[T], default_value: T):
        self._source = source
        self._default_value = default_value
        self._current: Optional[T] = None
        self._empty = True

    def move_next(self) -> bool:
        self._current = None
        if self._source.move_next():
            self._empty = False
            self._current = self._source.current
            return True
        if self._empty:
            # yield the default once, then fall through to exhaustion
            self._empty = False
            self._current = self._default_value
            return True
        return False

    @property
    def current(self) -> Optional[T]:
        return self._current


class UnionIterator(SequenceIterator[T]):
    """
    drains `first` then `second`. with a comparer, elements already emitted
    (by that comparer) are skipped, which also gives distinct().
    """

    def __init__(self, first: SequenceIterator[T], second: SequenceIterator[T],
                 comparer: Optional['EqualityComparer[T]'] = None):
        from .dictionary import Dictionary
        self._iterators = (first, second)
        self._position = 0
        self._seen = Dictionary(comparer) if comparer is not None else None
        self._current: Optional[T] = None

    def _already_emitted(self, item: T) -> bool:
        if self._seen.contains_key(item):
            return True
        self._seen.add(item)
        return False

    def move_next(self) -> bool:
        self._current = None
        while self._position < len(self._iterators):
            iterator = self._iterators[self._position]
            if not iterator.move_next():
                self._position += 1
                continue
            item = iterator.current
            if self._seen is not None and self._already_emitted(item):
                continue
            self._current = item
            return True
        return False

    @property
    def current(self) -> Optional[T]:
        return self._current


class ExceptIterator(SequenceIterator[T]):
    """
    set difference. the excluded set is built on the first advance; every
    emitted element is added to it too, so the result holds no duplicates.
    """

    def __init__(self, source: SequenceIterator[T], other: 'Enumerable[T]',
                 comparer: 'EqualityComparer[T]'):
        self._source = source
        self._other = other
        self._comparer = comparer
        self._excluded: Optional['Dictionary[T, Any]'] = None

    def _build_excluded(self) -> 'Dictionary[T, Any]':
        from .dictionary import Dictionary
        excluded = Dictionary(self._comparer)
        for item in self._other:
            if not excluded.contains_key(item):
                excluded.add(item)
        logger.debug(f"except: {len(excluded)} distinct elements excluded")
        return excluded

    def move_next(self) -> bool:
        if self._excluded is None:
            self._excluded = self._build_excluded()
        while self._source.move_next():
            item = self._source.current
            if not self._excluded.contains_key(item):
                self._excluded.add(item)
                return True
        return False

    @property
    def current(self) -> Optional[T]:
        return self._source.current


class OrderedIterator(SequenceIterator[T]):
    """realizes and sorts its ordering chain on the first advance."""

    def __init__(self, ordered: 'OrderedEnumerable[T]'):
        self._ordered = ordered
        self._sorted: Optional[List[T]] = None
        self._index = -1

    def move_next(self) -> bool:
        if self._sorted is None:
            from .sorting import sort_chain
            self._sorted = sort_chain(self._ordered)
        if self._index < len(self._sorted):
            self._index += 1
        return self._index < len(self._sorted)

    @property
    def current(self) -> Optional[T]:
        if self._sorted is not None and 0 <= self._index < len(self._sorted):
            return self._sorted[self._index]
        return None


class DictionaryIterator(SequenceIterator[KeyValuePair]):
    """walks buckets in hash insertion order, then each bucket in insertion order."""

    def __init__(self, dictionary: 'Dictionary'):
        self._dictionary = dictionary
        self._count = len(dictionary)
        self._hashes: Optional[List[Any]] = None
        self._hash_index = 0
        self._bucket: List[KeyValuePair] = []
        self._key_index = -1
        self._current: Optional[KeyValuePair] = None

    def move_next(self) -> bool:
        if len(self._dictionary) != self._count:
            logger.debug(f"dictionary count changed from {self._count} to {len(self._dictionary)} during enumeration")
            raise CollectionModifiedError()
        if self._hashes is None:
            self._hashes = self._dictionary._hash_order()
        self._current = None
        self._key_index += 1
        while self._key_index >= len(self._bucket):
            if self._hash_index >= len(self._hashes):
                return False
            self._bucket = self._dictionary._bucket(self._hashes[self._hash_index])
            self._hash_index += 1
            self._key_index = 0
        self._current = self._bucket[self._key_index]
        return True

    @property
    def current(self) -> Optional[KeyValuePair]:
        return self._current
