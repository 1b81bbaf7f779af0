from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]


class KeyValuePair(NamedTuple):
    """a key and its value, as yielded by dictionary enumeration"""
    key: Any
    value: Any


def always_true(item: Any, index: int = 0) -> bool:
    return True


def identity(item: T, index: int = 0) -> T:
    return item
