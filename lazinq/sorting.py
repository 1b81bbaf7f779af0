"""
the ordering engine behind order_by / then_by.

an OrderedEnumerable is one link of a chain; sort_chain() walks the chain
back to its root, realizes the root source once and sorts it with a
comparator that consults each link from the root down.
"""
from __future__ import annotations

import logging
import typing
from functools import cmp_to_key
from .types import *
from .config import get_config

if typing.TYPE_CHECKING:
    from .enumerable import OrderedEnumerable

logger = logging.getLogger(__name__)


def compare_keys(a: Any, b: Any, comparer: Optional[Comparer[Any]] = None) -> int:
    """three-way compare; none sorts before everything and equals none."""
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1
    if comparer is not None:
        return comparer(a, b)
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def chain_links(ordered: 'OrderedEnumerable[T]') -> List['OrderedEnumerable[T]']:
    """the links of an ordering chain, root first, ending with `ordered`"""
    links = []
    link = ordered
    while link is not None:
        links.append(link)
        link = link._parent
    links.reverse()
    return links


def chain_comparer(links: List['OrderedEnumerable[T]']) -> Comparer[T]:
    def compare(x: T, y: T) -> int:
        for link in links:
            result = compare_keys(link._key_selector(x), link._key_selector(y), link._comparer)
            if result != 0:
                return result * link._direction
        return 0
    return compare


def stable_sort(items: List[T], comparer: Comparer[T]) -> List[T]:
    return sorted(items, key=cmp_to_key(comparer))


def partition_sort(items: List[T], comparer: Optional[Comparer[T]] = None) -> List[T]:
    """
    partitioning sort: the first element is the pivot, the rest splits into
    "<= pivot" and "> pivot", each part is sorted, and the result is
    smaller + [pivot] + larger. not stable. uses a work stack instead of
    recursion so presorted input cannot hit the recursion limit.
    """
    compare = comparer or compare_keys
    result: List[T] = []
    # each entry is either ('sort', part) or ('emit', pivot)
    stack: List[Tuple[str, Any]] = [('sort', list(items))]
    while stack:
        action, payload = stack.pop()
        if action == 'emit':
            result.append(payload)
            continue
        if len(payload) < 2:
            result.extend(payload)
            continue
        pivot, rest = payload[0], payload[1:]
        smaller = [item for item in rest if compare(item, pivot) <= 0]
        larger = [item for item in rest if compare(item, pivot) > 0]
        # pushed in reverse so smaller is handled first
        stack.append(('sort', larger))
        stack.append(('emit', pivot))
        stack.append(('sort', smaller))
    return result


_ALGORITHMS = {
    'stable': stable_sort,
    'partition': partition_sort,
}


def sort_chain(ordered: 'OrderedEnumerable[T]') -> List[T]:
    links = chain_links(ordered)
    source = links[0]._source
    items = source.to.list()
    algorithm = get_config().sort_algorithm
    logger.debug(f"ordering {len(items)} elements by {len(links)} key(s) using '{algorithm}' sort")
    return _ALGORITHMS[algorithm](items, chain_comparer(links))
