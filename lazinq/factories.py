import typing
from collections.abc import Sequence
from .types import *
from .iterators import SequenceIterator, ArrayIterator, IterableIterator

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    create enumerable from iterable.
    lists and other sequences are captured by reference and walked by index,
    so changing a list's length mid-enumeration is detected. other iterables are
    re-iterated on each enumeration; a generator object can only be walked once,
    use from_generator for a repeatable source.
    """
    from .enumerable import Enumerable
    if isinstance(data, Enumerable):
        return data
    if isinstance(data, Sequence):
        return Enumerable(lambda: ArrayIterator(data))
    return Enumerable(lambda: IterableIterator(iter(data)))

def from_iterator_factory(factory: Callable[[], SequenceIterator[T]]) -> 'Enumerable[T]':
    """create enumerable from a function returning a fresh SequenceIterator per call"""
    from .enumerable import Enumerable
    return Enumerable(factory)

def from_generator(generator_func: Callable[[], Iterator[T]]) -> 'Enumerable[T]':
    """create enumerable from a zero-argument function returning a new python iterator (e.g. a generator function)"""
    from .enumerable import Enumerable
    return Enumerable(lambda: IterableIterator(iter(generator_func())))

def of(*items: T) -> 'Enumerable[T]':
    """create enumerable from discrete elements"""
    return from_iterable(items)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    if count < 0: raise ValueError(f"count must be non-negative, got {count}")
    return from_iterable(range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    if count < 0: raise ValueError(f"count must be non-negative, got {count}")
    return from_generator(lambda: (item for _ in range(count)))

_EMPTY = None

def empty() -> 'Enumerable[Any]':
    """the shared empty enumerable"""
    global _EMPTY
    if _EMPTY is None:
        _EMPTY = from_iterable(())
    return _EMPTY

# --- aliases ---
lazinq = from_iterable
P = from_iterable
