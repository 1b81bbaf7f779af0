from __future__ import annotations

from .types import *
from .comparers import EqualityComparer, resolve_comparer
from .enumerable import Enumerable
from .errors import DuplicateKeyError, KeyNotFoundError
from .iterators import DictionaryIterator


class Dictionary(Enumerable[KeyValuePair]):
    """
    a hash-bucketed map whose key identity comes from an equality comparer.

    keys sharing a hash value live in one bucket and are told apart with
    comparer.equals, so keys need not be hashable in the python sense.
    enumerating a dictionary yields KeyValuePair(key, value) in hash insertion
    order, then bucket insertion order.
    """

    def __init__(self, comparer: Optional[EqualityComparer] = None):
        super().__init__(lambda: DictionaryIterator(self))
        self._comparer = resolve_comparer(comparer)
        # insertion ordered: the key order is the hash order
        self._buckets: Dict[Any, List[KeyValuePair]] = {}
        self._count = 0

    @property
    def comparer(self) -> EqualityComparer:
        return self._comparer

    # --- bucket access, also used by DictionaryIterator ---

    def _hash_order(self) -> List[Any]:
        return list(self._buckets)

    def _bucket(self, hash_value: Any) -> List[KeyValuePair]:
        return self._buckets.get(hash_value, [])

    def _find(self, hash_value: Any, key: K) -> int:
        """index of the pair matching key inside its bucket, or -1"""
        for i, pair in enumerate(self._buckets.get(hash_value, ())):
            if self._comparer.equals(pair.key, key):
                return i
        return -1

    # --- public api ---

    def add(self, key: K, value: V = None) -> None:
        hash_value = self._comparer.hash(key)
        if self._find(hash_value, key) != -1:
            raise DuplicateKeyError(key)
        self._buckets.setdefault(hash_value, []).append(KeyValuePair(key, value))
        self._count += 1

    def contains_key(self, key: K) -> bool:
        return self._find(self._comparer.hash(key), key) != -1

    def get(self, key: K) -> V:
        hash_value = self._comparer.hash(key)
        index = self._find(hash_value, key)
        if index == -1:
            raise KeyNotFoundError(key)
        return self._buckets[hash_value][index].value

    def remove(self, key: K) -> None:
        hash_value = self._comparer.hash(key)
        index = self._find(hash_value, key)
        if index == -1:
            raise KeyNotFoundError(key)
        bucket = self._buckets[hash_value]
        del bucket[index]
        if not bucket:
            del self._buckets[hash_value]
        self._count -= 1

    def get_keys(self) -> 'Enumerable[K]':
        """lazy view of the keys, in enumeration order"""
        return self.select(lambda pair: pair.key)

    def get_values(self) -> 'Enumerable[V]':
        """lazy view of the values, in enumeration order"""
        return self.select(lambda pair: pair.value)

    def count(self, predicate: Optional[Predicate[KeyValuePair]] = None) -> int:
        if predicate is None:
            return self._count
        return self.to.count(predicate)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __repr__(self) -> str:
        return f"Dictionary(count={self._count}, buckets={len(self._buckets)})"
