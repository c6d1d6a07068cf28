import numpy as np
import pytest

from minmaxheap.core import EmptyHeapError, HeapError, HeapIndexError
from minmaxheap.min_max_queue import MinMaxHeap
from minmaxheap.sequences.array_sequence import ArraySequence
from minmaxheap.sequences.list_sequence import ListSequence


@pytest.mark.parametrize("n", [1, 10, 200])
def test_heap(n):
    rg = np.random.default_rng(seed=n)
    heap = MinMaxHeap()
    l = []
    for _ in range(n):
        x = int(rg.integers(0, 5 * n + 1))
        heap.insert(x)
        l.append(x)
        heap.check()

    assert len(heap) == len(l)

    while len(heap) > 0:
        assert min(l) == heap.peekmin()
        assert max(l) == heap.peekmax()
        if rg.integers(0, 2):
            e = heap.popmin()
            assert e == min(l)
        else:
            e = heap.popmax()
            assert e == max(l)
        l.remove(e)
        assert len(heap) == len(l)
        heap.check()


def test_iteration_is_ascending():
    heap = MinMaxHeap([5, 3, 8, 1, 9, 2])
    assert list(heap) == [1, 2, 3, 5, 8, 9]
    assert len(heap) == 0


def test_many_elements():
    heap = MinMaxHeap(range(20))
    for i in range(20):
        item = heap.popmin()
        assert item == i, '{} != {}'.format(item, i)

    heap = MinMaxHeap(range(20))
    for i in range(20):
        item = heap.popmax()
        assert item == 19 - i, '{} != {}'.format(item, 19 - i)


def test_same_priority():
    heap = MinMaxHeap(sequence=ListSequence(key=lambda item: item[0]))
    heap.insert((2, 'first'))
    for i in range(20):
        heap.insert((1, i))
    heap.insert((0, 'last'))

    assert heap.popmax() == (2, 'first')
    assert heap.popmin() == (0, 'last')
    assert len(heap) == 20
    heap.check()


def test_empty_heap():
    heap = MinMaxHeap()
    for method in (heap.peekmin, heap.peekmax, heap.popmin, heap.popmax):
        with pytest.raises(EmptyHeapError):
            method()
    with pytest.raises(EmptyHeapError):
        heap.replacemin(1)
    with pytest.raises(EmptyHeapError):
        heap.replacemax(1)
    assert list(heap) == []


def test_replacemin():
    heap = MinMaxHeap([4, 7, 1, 9])
    assert heap.replacemin(8) == 1
    heap.check()
    assert heap.peekmin() == 4
    assert heap.peekmax() == 9
    assert len(heap) == 4


def test_replacemax():
    heap = MinMaxHeap([4, 7, 1, 9])
    assert heap.replacemax(0) == 9
    heap.check()
    assert heap.peekmin() == 0
    assert heap.peekmax() == 7
    assert len(heap) == 4


def test_remove_and_update():
    heap = MinMaxHeap(range(10))
    value = heap[3]
    assert heap.remove(3) == value
    assert len(heap) == 9
    heap.check()

    heap.update(0, 100)
    heap.check()
    assert heap.peekmax() == 100
    heap.update(len(heap) - 1, -1)
    heap.check()
    assert heap.peekmin() == -1

    with pytest.raises(HeapIndexError):
        heap.update(len(heap), 5)
    with pytest.raises(HeapIndexError):
        heap.remove(-1)


def test_array_backend():
    heap = MinMaxHeap([5, 3, 8, 1, 9, 2], sequence=ArraySequence(dtype=np.int64))
    assert isinstance(heap.a, ArraySequence)
    assert heap.peekmin() == 1
    assert heap.peekmax() == 9
    heap.insert(10)
    assert heap.popmax() == 10
    assert list(heap) == [1, 2, 3, 5, 8, 9]


def test_check_detects_corruption():
    heap = MinMaxHeap(range(10))
    heap.a[0] = 100
    with pytest.raises(HeapError):
        heap.check()


def test_repr():
    assert repr(MinMaxHeap([1])) == "MinMaxHeap([1])"
