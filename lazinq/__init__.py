r"""
'    .__                .__
'    |  | _____  _______|__| ____   ______
'    |  | \__  \ \___   /  |/    \ / ____/
'    |  |__/ __ \_/    /|  |   |  < <_|  |
'    |____(____  /_____ \__|___|  /\__   |
'              \/      \/       \/    |__|
"""

import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable
from .dictionary import Dictionary
from .lists import ArrayList
from .iterators import SequenceIterator

# expose the factory functions
from .factories import (
    from_iterable,
    from_iterator_factory,
    from_generator,
    of,
    from_range,
    repeat,
    empty,
    lazinq,
    P,
)

# expose supporting types
from .types import KeyValuePair
from .comparers import EqualityComparer, DEFAULT_COMPARER
from .config import QueryConfig, get_config, configure
from .errors import (
    LinqError,
    CollectionModifiedError,
    EmptySequenceError,
    ElementIndexError,
    DuplicateKeyError,
    KeyNotFoundError,
)

# library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Dictionary",
    "ArrayList",
    "SequenceIterator",
    "from_iterable",
    "from_iterator_factory",
    "from_generator",
    "of",
    "from_range",
    "repeat",
    "empty",
    "lazinq",
    "P",
    "KeyValuePair",
    "EqualityComparer",
    "DEFAULT_COMPARER",
    "QueryConfig",
    "get_config",
    "configure",
    "LinqError",
    "CollectionModifiedError",
    "EmptySequenceError",
    "ElementIndexError",
    "DuplicateKeyError",
    "KeyNotFoundError",
]
