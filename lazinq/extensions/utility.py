from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returning a falsy value other than None from the action stops the loop;
        returning nothing keeps it going.
        returns the original enumerable to allow chaining.
        """
        iterator = self._enumerable.get_iterator()
        while iterator.move_next():
            keep_going = action(iterator.current)
            if keep_going is not None and not keep_going:
                break
        return self._enumerable

    def for_each_with_index(self, action: Callable[[T, int], Any]) -> 'Enumerable[T]':
        """for_each, with the element's position passed as the second argument"""
        iterator = self._enumerable.get_iterator()
        index = 0
        while iterator.move_next():
            keep_going = action(iterator.current, index)
            if keep_going is not None and not keep_going:
                break
            index += 1
        return self._enumerable

    def as_enumerable(self) -> 'Enumerable[T]':
        """
        hides the concrete sequence type (ordered, dictionary, list) behind a plain
        enumerable over the same elements. still lazy.
        """
        from ..enumerable import Enumerable
        return Enumerable(self._enumerable.get_iterator)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .pipe(my_custom_report, title='my data')
        """
        return func(self._enumerable, *args, **kwargs)

    def side_effect(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs a side-effect action for each element as it passes through the sequence
        without modifying it. this operation is lazy and is primarily used for debugging
        pipelines without materializing the data.
        example: .where(...).util.side_effect(print).select(...)
        """
        def tap(item, index):
            action(item)
            return item
        return self._enumerable.select_with_index(tap)
