from __future__ import annotations
import typing
from ..types import *
from ..errors import EmptySequenceError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class StatsAccessor(Generic[T]):
    """
    numeric folds over a sequence. values are combined with their own `+` and
    `/`, so no coercion happens: whatever the element type does is the result.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _fold(self, selector: Optional[Selector[T, Any]]) -> Tuple[int, Any]:
        """sum and count in a single pass. the sum is none for an empty sequence."""
        select = selector or identity
        count, total = 0, None
        for item in self._enumerable:
            value = select(item)
            total = value if count == 0 else total + value
            count += 1
        return count, total

    def sum(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """calc sum. an empty sequence sums to 0"""
        count, total = self._fold(selector)
        return total if count else 0

    def average(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """calc average"""
        count, total = self._fold(selector)
        if count == 0: raise EmptySequenceError("cannot calculate average of empty sequence")
        return total / count
