"""Min-max heap operations over a caller-owned ``HeapSequence``.

The functions mirror the ``heapq`` module: the caller keeps the sequence,
the functions keep it ordered. The minimum is always at index 0 and the
maximum at index 0, 1 or 2 (see ``max_index()``).

Implementation follows Atkinson, Sack, Santoro, and Strothotte (1986):
https://doi.org/10.1145/6617.6621
"""
import logging

from minmaxheap.core import EmptyHeapError, HeapIndexError
from minmaxheap.levels import (
    is_min_level, has_parent, parent, has_grandparent, grandparent)

# Relation of a sift_down candidate to the current node
SELF = 0
CHILD = 1
GRANDCHILD = 2


def sift_up(h, on):
    """Moves the element at ``on`` towards the root until it no longer
    violates the ordering of its ancestors.
    """
    on_min_level = is_min_level(on)

    # On a min level our parent sits on a max level and must not be
    # smaller than us (and vice versa). If it is, we swap and end up one
    # level higher, so the level type flips.
    if has_parent(on):
        p = parent(on)
        if on_min_level == h.less(p, on):
            h.swap(on, p)
            on = p
            on_min_level = not on_min_level

    # Ancestors on our own level type are two hops away.
    while has_grandparent(on):
        gp = grandparent(on)
        if on_min_level == h.less(on, gp):
            h.swap(on, gp)
            on = gp
        else:
            break


def sift_down(h, i0, n):
    """Moves the element at ``i0`` towards the leaves. Only positions
    below ``n`` are treated as part of the heap.

    Returns:
        bool. True if the element moved.
    """
    on = i0
    on_min_level = is_min_level(i0)

    while True:
        left = 2 * on + 1
        right = left + 1
        best, relation = on, SELF
        # Children and grandchildren in increasing index order
        for index, rel in ((left, CHILD),
                           (right, CHILD),
                           (2 * left + 1, GRANDCHILD),
                           (2 * left + 2, GRANDCHILD),
                           (2 * right + 1, GRANDCHILD),
                           (2 * right + 2, GRANDCHILD)):
            if index >= n:
                break
            if on_min_level == h.less(index, best):
                best, relation = index, rel

        if relation == SELF:
            break
        h.swap(on, best)
        on = best
        if relation == CHILD:
            break
        # We skipped a level; the parent in between may now be out of order
        p = parent(on)
        if on_min_level == h.less(p, on):
            h.swap(on, p)
    return on > i0


def _check_index(h, i):
    n = len(h)
    if not 0 <= i < n:
        raise HeapIndexError("heap index %d out of range [0, %d)" % (i, n))
    return n


def init(h):
    """Establishes the heap invariant over ``h`` in O(n). """
    n = len(h)
    for i in reversed(range(n // 2)):
        sift_down(h, i, n)


def push(h, value):
    """Adds ``value`` to the heap. Complexity: O(log(n)) """
    h.append(value)
    sift_up(h, len(h) - 1)


def pop(h):
    """Removes and returns the minimum element. Complexity: O(log(n))

    Raises:
        EmptyHeapError. If ``h`` is empty
    """
    n = len(h) - 1
    if n < 0:
        raise EmptyHeapError("pop from an empty heap")
    h.swap(0, n)
    sift_down(h, 0, n)
    return h.pop()


def max_index(h):
    """Returns the index of the maximum element, which is always 0, 1
    or 2. Complexity: O(1)

    Raises:
        EmptyHeapError. If ``h`` is empty
    """
    n = len(h)
    if n == 0:
        raise EmptyHeapError("max_index of an empty heap")
    if n == 1:
        return 0
    if n == 2:
        return 1
    if h.less(1, 2):
        return 2
    return 1


def remove(h, i):
    """Removes and returns the element at index ``i``.
    Complexity: O(log(n))

    Raises:
        HeapIndexError. If ``i`` is not a valid position
    """
    n = _check_index(h, i) - 1
    if n != i:
        h.swap(i, n)
        _repair(h, i, n)
    return h.pop()


def pop_max(h):
    """Removes and returns the maximum element. Complexity: O(log(n)) """
    return remove(h, max_index(h))


def fix(h, i):
    """Restores the heap invariant after the element at index ``i``
    changed its value. Complexity: O(log(n))

    Raises:
        HeapIndexError. If ``i`` is not a valid position
    """
    n = _check_index(h, i)
    _repair(h, i, n)


def _repair(h, i, n):
    """Restores the invariant over the first ``n`` elements when only
    the element at ``i`` may be out of place. The element moves either
    up or down, depending on how it compares with its parent.
    """
    on_min_level = is_min_level(i)
    if has_parent(i):
        p = parent(i)
        if h.less(p, i) if on_min_level else h.less(i, p):
            # The parent bounds our whole subtree, so after the swap it
            # sinks below i while the new value climbs from p.
            h.swap(i, p)
            sift_down(h, i, n)
            sift_up(h, p)
            return
    if not _sift_up_grandparents(h, i, on_min_level):
        sift_down(h, i, n)


def _sift_up_grandparents(h, on, on_min_level):
    # Strict comparisons: an equal swap would leave i unrepaired.
    moved = False
    while has_grandparent(on):
        gp = grandparent(on)
        if not (h.less(on, gp) if on_min_level else h.less(gp, on)):
            break
        h.swap(on, gp)
        on = gp
        moved = True
    return moved


def is_heap(h, n=None):
    """Checks the min-max heap property over the first ``n`` elements.
    Comparing each node with its children and grandchildren is enough
    since grandchildren are ordered against their own descendants.
    """
    if n is None:
        n = len(h)
    for i in range(n):
        on_min_level = is_min_level(i)
        first_child = 2 * i + 1
        first_grandchild = 4 * i + 3
        descendants = (list(range(first_child, min(first_child + 2, n)))
                       + list(range(first_grandchild, min(first_grandchild + 4, n))))
        for j in descendants:
            if (h.less(j, i) if on_min_level else h.less(i, j)):
                logging.debug("Heap property violated at %d (%s level): "
                              "%r vs. descendant %d: %r"
                              % (i, "min" if on_min_level else "max",
                                 h[i], j, h[j]))
                return False
    return True
