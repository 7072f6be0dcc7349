from hypothesis import given
from hypothesis import strategies as st
import pytest

from dskit.heap import HeapEmptyError, MaxHeap

SAMPLE = [1, 5, 2, 4, 6, 3, 9]


def test_create_small_heaps():
    single = MaxHeap([1])
    assert len(single) == 1
    assert single.peek() == 1

    pair = MaxHeap([1, 5])
    assert len(pair) == 2
    assert pair.pop() == 5
    assert pair.peek() == 1


def test_create_full_heap():
    heap = MaxHeap(SAMPLE)
    assert len(heap) == 7
    assert heap.peek() == 9


def test_add_new_maximum():
    heap = MaxHeap(SAMPLE)
    assert heap.add(12) == 12
    assert heap.peek() == 12
    assert len(heap) == 8
    assert heap.pop() == 12
    assert heap.peek() == 9


def test_add_duplicate_maximum():
    heap = MaxHeap(SAMPLE)
    heap.add(12)
    heap.add(12)
    assert heap.pop() == 12
    assert heap.pop() == 12
    assert heap.peek() == 9


def test_delete_sequence():
    heap = MaxHeap(SAMPLE)
    size = len(heap)
    assert heap.pop() == 9
    assert len(heap) == size - 1
    assert heap.peek() == 6

    size = len(heap)
    heap.add(12)
    assert len(heap) == size + 1
    assert heap.peek() == 12

    heap.pop()
    assert heap.peek() == 6
    heap.pop()
    assert heap.peek() == 5
    heap.pop()
    assert heap.peek() == 4


def test_height():
    heap = MaxHeap(SAMPLE)
    assert heap.height() == 3
    for _ in range(3):
        heap.pop()
        assert heap.height() == 3
    heap.pop()
    assert heap.height() == 2


def test_is_full():
    heap = MaxHeap(SAMPLE)
    assert heap.is_full() is True
    heap.pop()
    assert heap.is_full() is False


def test_empty_heap_errors():
    heap = MaxHeap()
    assert len(heap) == 0
    assert heap.height() == 0
    with pytest.raises(HeapEmptyError):
        heap.pop()
    with pytest.raises(HeapEmptyError):
        heap.peek()


def test_pop_until_empty_then_error():
    heap = MaxHeap([2])
    assert heap.pop() == 2
    with pytest.raises(HeapEmptyError):
        heap.pop()


@given(values=st.lists(st.integers()))
def test_pop_order_is_descending(values):
    heap = MaxHeap(values)
    drained = [heap.pop() for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)
    assert len(heap) == 0


@given(initial=st.lists(st.integers()), extra=st.lists(st.integers()))
def test_add_keeps_maximum_on_top(initial, extra):
    heap = MaxHeap(initial)
    for value in extra:
        heap.add(value)
    everything = initial + extra
    if everything:
        assert heap.peek() == max(everything)
    assert len(heap) == len(everything)