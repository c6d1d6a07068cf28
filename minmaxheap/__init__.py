from .core import HeapSequence, HeapError, EmptyHeapError, HeapIndexError
from .levels import (
    level,
    is_min_level,
    has_parent,
    parent,
    has_grandparent,
    grandparent
)
from .engine import (
    sift_up,
    sift_down,
    init,
    push,
    pop,
    pop_max,
    remove,
    fix,
    max_index,
    is_heap
)
from .sequences import SEQUENCE_REGISTRY
from .sequences.list_sequence import ListSequence
from .sequences.array_sequence import ArraySequence
from .min_max_queue import MinMaxHeap

__version__ = "0.1.0"


__all__ = [
    "__version__",
    "HeapSequence",
    "HeapError",
    "EmptyHeapError",
    "HeapIndexError",
    "level",
    "is_min_level",
    "has_parent",
    "parent",
    "has_grandparent",
    "grandparent",
    "sift_up",
    "sift_down",
    "init",
    "push",
    "pop",
    "pop_max",
    "remove",
    "fix",
    "max_index",
    "is_heap",
    "SEQUENCE_REGISTRY",
    "ListSequence",
    "ArraySequence",
    "MinMaxHeap"
]
