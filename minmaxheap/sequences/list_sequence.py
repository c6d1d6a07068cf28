from minmaxheap.core import HeapSequence


class ListSequence(HeapSequence):
    """Heap storage in a plain Python list. Elements are compared with
    ``<``, or by ``key(element)`` if a key function is given.
    """
    name = "list"

    def __init__(self, values=(), key=None):
        super(ListSequence, self).__init__()
        self.a = list(values)
        self.key = key

    def __len__(self):
        return len(self.a)

    def __getitem__(self, i):
        return self.a[i]

    def __setitem__(self, i, value):
        self.a[i] = value

    def less(self, i, j):
        if self.key is None:
            return self.a[i] < self.a[j]
        return self.key(self.a[i]) < self.key(self.a[j])

    def swap(self, i, j):
        self.a[i], self.a[j] = self.a[j], self.a[i]

    def append(self, value):
        self.a.append(value)

    def pop(self):
        return self.a.pop()

    def values(self):
        return list(self.a)
