from .exceptions import IndexException, DuplicateKeyError
from .index_node import IndexNode
from .ordered_index import OrderedIndex, populate

__all__ = [
    "IndexException",
    "DuplicateKeyError",
    "IndexNode",
    "OrderedIndex",
    "populate",
]
