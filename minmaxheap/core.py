from abc import abstractmethod


class HeapError(Exception):
    """Base class for precondition violations of heap operations."""
    pass


class EmptyHeapError(HeapError, IndexError):
    """Raised when an element is requested from an empty heap."""
    pass


class HeapIndexError(HeapError, IndexError):
    """Raised when a position outside ``[0, len(h))`` is passed."""
    pass


class HeapSequence(object):
    """Interface for the sequences the heap engine operates on. The
    engine never stores elements itself: it reorders the elements of a
    ``HeapSequence`` through ``less()`` and ``swap()``, and grows or
    shrinks it through ``append()`` and ``pop()``.

    Positions are always absolute indices ``0..len(h)-1``. Concrete
    sequences register themselves in ``SEQUENCE_REGISTRY`` by their
    ``name`` attribute.
    """

    def __init__(self):
        """ Empty constructor """
        super(HeapSequence, self).__init__()

    @staticmethod
    def add_args(parser):
        """Add sequence-specific arguments to the parser."""
        pass

    @classmethod
    def from_args(cls, args):
        """Creates an empty sequence from the configuration object.

        Args:
            args (object): Configuration as returned by ``get_args``
        """
        return cls()

    @abstractmethod
    def __len__(self):
        raise NotImplementedError

    @abstractmethod
    def less(self, i, j):
        """Returns true if the element at ``i`` must be ordered before
        the element at ``j``. Must be a strict weak ordering.

        Args:
            i (int): Position of the first element
            j (int): Position of the second element
        """
        raise NotImplementedError

    @abstractmethod
    def swap(self, i, j):
        """Exchange the elements at positions ``i`` and ``j``. """
        raise NotImplementedError

    @abstractmethod
    def append(self, value):
        """Add ``value`` at the end of the sequence. """
        raise NotImplementedError

    @abstractmethod
    def pop(self):
        """Remove and return the last element of the sequence. """
        raise NotImplementedError

    @abstractmethod
    def __getitem__(self, i):
        raise NotImplementedError

    @abstractmethod
    def __setitem__(self, i, value):
        raise NotImplementedError

    def values(self):
        """Returns the elements in sequence (i.e. heap) order. """
        return [self[i] for i in range(len(self))]

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, self.values())
