from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .iterators import SequenceIterator, OrderedIterator

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def get_iterator(self) -> SequenceIterator[T]:
        """create a fresh iterator over the sequence"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, iterator_factory: Callable[[], SequenceIterator[T]]):
        """init with a function that returns a new iterator each time it is called"""
        self._iterator_factory = iterator_factory

    def get_iterator(self) -> SequenceIterator[T]:
        return self._iterator_factory()

    def _get_data(self) -> List[T]:
        """drain a fresh iterator into a list. nothing is cached between calls."""
        return list(self.get_iterator())

    def __iter__(self) -> Iterator[T]:
        return self.get_iterator()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired sequence. operators build new sequences; terminals pull."""
    def __init__(self, iterator_factory: Callable[[], SequenceIterator[T]]):
        super().__init__(iterator_factory)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    one link of an ordering chain. the chain is only sorted when enumerated,
    and every enumeration sorts again from the root source.
    """

    def __init__(self, source: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]],
                 descending: bool = False, comparer: Optional[Comparer[K]] = None,
                 parent: Optional['OrderedEnumerable[T]'] = None):
        super().__init__(lambda: OrderedIterator(self))
        self._source = source
        self._key_selector = key_selector or identity
        self._direction = -1 if descending else 1
        self._comparer = comparer
        self._parent = parent

    @property
    def descending(self) -> bool:
        return self._direction < 0

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        return OrderedEnumerable(self, key_selector, False, comparer, parent=self)

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return OrderedEnumerable(self, key_selector, True, comparer, parent=self)
