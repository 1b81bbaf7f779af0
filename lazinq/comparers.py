from collections.abc import Set as AbstractSet
from .types import *


def default_equals(x: Any, y: Any) -> bool:
    return x == y


def default_hash(obj: Any) -> Any:
    """
    hash key used to pick a dictionary bucket.
    none gets a fixed key, hashable objects use their own __hash__.
    unhashable ones (lists, dicts) share a bucket per type and are told apart
    by equals, since == may hold between values whose str() differs.
    """
    if obj is None:
        return "None"
    try:
        return hash(obj)
    except TypeError:
        pass
    if isinstance(obj, AbstractSet):
        # a set must land with the frozenset it equals
        try:
            return hash(frozenset(obj))
        except TypeError:
            pass
    return f"<{type(obj).__name__}>"


class EqualityComparer(Generic[T]):
    """
    defines element identity for set and dictionary operations.
    equals(a, b) must imply hash(a) == hash(b), otherwise equal elements
    can land in different buckets and never be compared.
    """

    __slots__ = ('_equals', '_hash')

    def __init__(self, equals: Optional[Callable[[T, T], bool]] = None,
                 hash: Optional[Callable[[T], Any]] = None):
        object.__setattr__(self, '_equals', equals or default_equals)
        object.__setattr__(self, '_hash', hash or default_hash)

    def __setattr__(self, name, value):
        raise AttributeError("equality comparers are immutable")

    def equals(self, x: T, y: T) -> bool:
        return bool(self._equals(x, y))

    def hash(self, obj: T) -> Any:
        return self._hash(obj)

    @classmethod
    def from_equals(cls, equals: Callable[[T, T], bool]) -> 'EqualityComparer[T]':
        """comparer from an equality function only; hashing stays the default"""
        return cls(equals=equals)

    @classmethod
    def by_key(cls, key_selector: KeySelector[T, K]) -> 'EqualityComparer[T]':
        """elements are equal when their selected keys are equal"""
        return cls(equals=lambda x, y: key_selector(x) == key_selector(y),
                   hash=lambda obj: default_hash(key_selector(obj)))

    def __repr__(self) -> str:
        if self is DEFAULT_COMPARER:
            return "EqualityComparer(default)"
        return f"EqualityComparer(equals={self._equals!r}, hash={self._hash!r})"


DEFAULT_COMPARER: EqualityComparer[Any] = EqualityComparer()


def resolve_comparer(comparer: Optional[EqualityComparer[T]]) -> EqualityComparer[T]:
    """normalize an optional comparer argument; called once per operation"""
    if comparer is None:
        return DEFAULT_COMPARER
    if isinstance(comparer, EqualityComparer):
        return comparer
    raise TypeError(
        f"expected an EqualityComparer or None, got {type(comparer).__name__}; "
        f"wrap equality functions with EqualityComparer.from_equals()")
