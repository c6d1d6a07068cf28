import logging

import numpy as np

from minmaxheap.core import HeapSequence


class ArraySequence(HeapSequence):
    """Heap storage in a preallocated numpy array. Only the first
    ``size`` slots hold elements; the buffer doubles whenever an
    ``append()`` finds it full. Elements are handed out as Python
    scalars.
    """
    name = "array"

    def __init__(self, values=(), dtype=np.float64, reserve=0):
        super(ArraySequence, self).__init__()
        values = np.asarray(values).ravel()
        if np.dtype(dtype).kind in "iu" and values.dtype.kind == "f" \
                and not np.all(np.mod(values, 1) == 0):
            raise ValueError("non-integral values cannot be stored in a %s "
                             "array" % np.dtype(dtype))
        values = values.astype(dtype)
        self.size = len(values)
        self.a = np.empty(max(reserve, self.size), dtype=dtype)
        self.a[:self.size] = values

    @staticmethod
    def add_args(parser):
        parser.add_argument("--dtype", default=None,
                            help="numpy dtype of the array backend, e.g. "
                            "int64 or float32. Defaults to int64 for "
                            "--value_type int and to float64 otherwise.")
        parser.add_argument("--reserve", default=0, type=int,
                            help="Number of slots to preallocate in the "
                            "array backend. The buffer doubles when full.")

    @staticmethod
    def resolve_dtype(args):
        """Returns the numpy dtype for the ``--dtype`` and ``--value_type``
        options.

        Raises:
            TypeError. If ``--dtype`` is not a numpy dtype
        """
        # Options are missing if the backend was switched after parsing
        dtype = getattr(args, 'dtype', None)
        if dtype is None:
            dtype = 'int64' if getattr(args, 'value_type', None) == 'int' \
                else 'float64'
        return np.dtype(dtype)

    @classmethod
    def from_args(cls, args):
        return cls(dtype=cls.resolve_dtype(args),
                   reserve=getattr(args, 'reserve', 0))

    def __len__(self):
        return self.size

    def _check(self, i):
        if not 0 <= i < self.size:
            raise IndexError("array sequence index %d out of range" % i)

    def __getitem__(self, i):
        self._check(i)
        return self.a[i].item()

    def __setitem__(self, i, value):
        self._check(i)
        self.a[i] = self._lossless(value)

    def less(self, i, j):
        return bool(self.a[i] < self.a[j])

    def swap(self, i, j):
        self.a[[i, j]] = self.a[[j, i]]

    def append(self, value):
        if self.size == len(self.a):
            self._grow()
        self.a[self.size] = self._lossless(value)
        self.size += 1

    def pop(self):
        if self.size == 0:
            raise IndexError("pop from empty array sequence")
        self.size -= 1
        return self.a[self.size].item()

    def values(self):
        return self.a[:self.size].tolist()

    def _lossless(self, value):
        # numpy truncates floats silently when storing them as integers
        if self.a.dtype.kind in "iu" and isinstance(value, (float, np.floating)) \
                and not float(value).is_integer():
            raise ValueError("%r cannot be stored in a %s array without loss"
                             % (value, self.a.dtype))
        return value

    def _grow(self):
        capacity = max(1, 2 * len(self.a))
        logging.debug("Growing array sequence from %d to %d slots"
                      % (len(self.a), capacity))
        grown = np.empty(capacity, dtype=self.a.dtype)
        grown[:self.size] = self.a[:self.size]
        self.a = grown
