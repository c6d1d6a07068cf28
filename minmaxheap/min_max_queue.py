from minmaxheap import engine
from minmaxheap.core import EmptyHeapError, HeapError, HeapIndexError
from minmaxheap.sequences.list_sequence import ListSequence


class MinMaxHeap(object):
    """
    Double-ended priority queue backed by a min-max heap. The elements
    live in a ``HeapSequence`` (a ``ListSequence`` unless ``sequence``
    is given), accessible as ``a``.
    """
    def __init__(self, iterable=(), sequence=None):
        self.a = ListSequence() if sequence is None else sequence
        for value in iterable:
            self.a.append(value)
        engine.init(self.a)

    def __len__(self):
        return len(self.a)

    def __getitem__(self, index):
        return self.a[index]

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.popmin()
        except EmptyHeapError:
            raise StopIteration

    def insert(self, key):
        """
        Insert key into heap. Complexity: O(log(n))
        """
        engine.push(self.a, key)

    def peekmin(self):
        """
        Get minimum element. Complexity: O(1)
        """
        if not len(self.a):
            raise EmptyHeapError("peekmin on an empty heap")
        return self.a[0]

    def peekmax(self):
        """
        Get maximum element. Complexity: O(1)
        """
        return self.a[engine.max_index(self.a)]

    def popmin(self):
        """
        Remove and return minimum element. Complexity: O(log(n))
        """
        return engine.pop(self.a)

    def popmax(self):
        """
        Remove and return maximum element. Complexity: O(log(n))
        """
        return engine.pop_max(self.a)

    def replacemin(self, val):
        """
        Replace the minimum element with ``val`` and return the old
        minimum. Complexity: O(log(n))
        """
        if not len(self.a):
            raise EmptyHeapError("replacemin on an empty heap")
        return self._replace(0, val)

    def replacemax(self, val):
        """
        Replace the maximum element with ``val`` and return the old
        maximum. Complexity: O(log(n))
        """
        return self._replace(engine.max_index(self.a), val)

    def remove(self, index):
        """
        Remove and return the element at position ``index``.
        Complexity: O(log(n))
        """
        return engine.remove(self.a, index)

    def update(self, index, value):
        """
        Change the element at position ``index`` to ``value``.
        Complexity: O(log(n))
        """
        if not 0 <= index < len(self.a):
            raise HeapIndexError(
                "heap index %d out of range [0, %d)" % (index, len(self.a)))
        self.a[index] = value
        engine.fix(self.a, index)

    def check(self):
        if not engine.is_heap(self.a):
            raise HeapError("min-max heap property violated: %r" % self.a)

    def _replace(self, index, val):
        old = self.a[index]
        self.a[index] = val
        engine.fix(self.a, index)
        return old

    def __repr__(self):
        return "MinMaxHeap(%s)" % self.a.values()
