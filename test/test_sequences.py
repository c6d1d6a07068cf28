import argparse

import numpy as np
import pytest

from minmaxheap import engine
from minmaxheap.core import HeapSequence
from minmaxheap.sequences import SEQUENCE_REGISTRY
from minmaxheap.sequences.array_sequence import ArraySequence
from minmaxheap.sequences.list_sequence import ListSequence


def test_registry():
    assert SEQUENCE_REGISTRY["list"] is ListSequence
    assert SEQUENCE_REGISTRY["array"] is ArraySequence


def test_base_class_is_abstract():
    h = HeapSequence()
    with pytest.raises(NotImplementedError):
        h.less(0, 1)
    with pytest.raises(NotImplementedError):
        h.append(1)


def test_list_sequence_key():
    h = ListSequence([3, 1, 2, 5, 4], key=lambda x: -x)
    engine.init(h)
    assert [engine.pop(h) for _ in range(5)] == [5, 4, 3, 2, 1]


def test_list_sequence_priority_tuples():
    h = ListSequence(key=lambda item: item[0])
    engine.push(h, (10, 'foo'))
    engine.push(h, (9, 'bar'))
    engine.push(h, (11, 'baz'))
    engine.push(h, (10, object()))
    assert h[0] == (9, 'bar')
    assert h[engine.max_index(h)] == (11, 'baz')
    assert engine.pop(h)[1] == 'bar'
    assert engine.pop_max(h)[1] == 'baz'
    assert len(h) == 2


def test_array_sequence_grows():
    h = ArraySequence()
    for value in range(100, 0, -1):
        engine.push(h, value)
    assert len(h) == 100
    assert len(h.a) == 128
    assert engine.is_heap(h)
    assert [engine.pop(h) for _ in range(100)] == [float(v) for v in range(1, 101)]
    assert len(h) == 0


def test_array_sequence_reserve():
    h = ArraySequence(reserve=16)
    assert len(h) == 0
    assert len(h.a) == 16
    for value in range(16):
        engine.push(h, value)
    assert len(h.a) == 16


def test_array_sequence_returns_python_scalars():
    h = ArraySequence([3, 1, 2], dtype=np.int64)
    engine.init(h)
    assert type(h[0]) is int
    value = engine.pop(h)
    assert type(value) is int and value == 1

    h = ArraySequence([0.5, 0.25])
    engine.init(h)
    assert type(engine.pop(h)) is float


def test_array_sequence_index_checks():
    h = ArraySequence([1.0, 2.0], reserve=8)
    with pytest.raises(IndexError):
        h[2]
    with pytest.raises(IndexError):
        h[-1] = 3.0
    h.pop()
    h.pop()
    with pytest.raises(IndexError):
        h.pop()


def test_array_sequence_from_args():
    args = argparse.Namespace(dtype="int32", reserve=8)
    h = ArraySequence.from_args(args)
    assert len(h) == 0
    assert len(h.a) == 8
    assert h.a.dtype == np.int32

    h = ArraySequence.from_args(argparse.Namespace())
    assert h.a.dtype == np.float64
    h = ArraySequence.from_args(argparse.Namespace(value_type="int", dtype=None))
    assert h.a.dtype == np.int64


def test_integer_array_sequence_rejects_fractions():
    h = ArraySequence([3, 1.0], dtype=np.int64)
    h.append(2.0)
    assert h.values() == [3, 1, 2]
    with pytest.raises(ValueError):
        h.append(2.7)
    with pytest.raises(ValueError):
        h[0] = 1.5
    with pytest.raises(ValueError):
        h.append(float("nan"))
    assert h.values() == [3, 1, 2]
    with pytest.raises(ValueError):
        ArraySequence([2.7, 1.9], dtype=np.int64)
    # Float arrays store anything numeric
    h = ArraySequence([1], dtype=np.float32)
    h.append(0.5)
    assert h.values() == [1.0, 0.5]


@pytest.mark.parametrize("name", ["list", "array"])
def test_backends_agree(name):
    rg = np.random.default_rng(seed=4)
    values = rg.integers(0, 1000, size=300).tolist()
    h = SEQUENCE_REGISTRY[name]()
    for value in values:
        h.append(value)
    engine.init(h)
    assert engine.is_heap(h)
    assert h[engine.max_index(h)] == max(values)
    popped = [engine.pop(h) for _ in range(len(values))]
    assert popped == sorted(values)


def test_values_and_repr():
    h = ListSequence([2, 1])
    assert h.values() == [2, 1]
    assert repr(h) == "ListSequence([2, 1])"
    h = ArraySequence([2, 1], dtype=np.int64, reserve=4)
    assert h.values() == [2, 1]
