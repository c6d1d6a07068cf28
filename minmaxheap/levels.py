"""Index arithmetic for the implicit tree of a min-max heap.

Levels alternate between min levels (even depth, starting with the root)
and max levels (odd depth).
"""


def level(i):
    """Depth of index ``i``, i.e. floor(log2(i+1))."""
    return (i + 1).bit_length() - 1


def is_min_level(i):
    return level(i) % 2 == 0


def has_parent(i):
    return i > 0


def parent(i):
    return (i - 1) // 2


def has_grandparent(i):
    return i > 2


def grandparent(i):
    return parent(parent(i))
