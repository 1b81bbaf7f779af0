from __future__ import annotations

from .types import *
from .enumerable import Enumerable
from .iterators import ArrayIterator


class ArrayList(Enumerable[T]):
    """
    a mutable, index-addressable list that is also a lazy sequence.
    enumeration walks the live backing list, so adding or removing while a
    query over it is being enumerated raises CollectionModifiedError.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        super().__init__(lambda: ArrayIterator(self._items))
        self._items: List[T] = [item for item in items] if items is not None else []

    def add(self, item: T) -> None:
        self._items.append(item)

    def add_range(self, items: Iterable[T]) -> None:
        # materialize first: items may be a query over this very list.
        # a comprehension, since list() would call __len__ and enumerate twice
        self._items.extend([item for item in items])

    def push(self, *items: T) -> int:
        """append items and return the new length"""
        self._items.extend(items)
        return len(self._items)

    def remove(self, item: T) -> bool:
        """remove the first element equal to item. returns whether one was found."""
        for i, existing in enumerate(self._items):
            if existing == item:
                del self._items[i]
                return True
        return False

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        if predicate is None:
            return len(self._items)
        return self.to.count(predicate)

    def to_list(self) -> List[T]:
        """a copy of the backing list"""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"
