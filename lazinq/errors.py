"""
failure kinds raised by sequences and dictionaries.

each error derives from the builtin a caller would already catch, so
`except ValueError` around `first()` keeps working.
"""


class LinqError(Exception):
    """marker base for every error raised by lazinq."""
    pass


class CollectionModifiedError(LinqError, RuntimeError):
    """the backing collection changed size while it was being enumerated."""

    def __init__(self, message: str = "collection was modified; enumeration operation may not execute"):
        super().__init__(message)


class EmptySequenceError(LinqError, ValueError):
    """the sequence (or the elements matching a predicate) is empty."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class ElementIndexError(LinqError, IndexError):
    """an element index is outside the bounds of the sequence."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"index {index} was outside the bounds of the sequence")


class DuplicateKeyError(LinqError, ValueError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"key [{key!r}] is already present in the dictionary")


class KeyNotFoundError(LinqError, KeyError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"key [{key!r}] was not found in the dictionary")

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the message readable
        return self.args[0]
