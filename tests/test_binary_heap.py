import pytest

from algocol.binary_heap import BinaryHeap, HeapType
from algocol.compare import int_compare, string_compare

NUM_TEST_VALUES = 10000


def test_new_heap_is_empty():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    assert len(heap) == 0


def test_insert_counts_entries():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    for i in range(NUM_TEST_VALUES):
        heap.insert(i)
    assert len(heap) == NUM_TEST_VALUES


def test_min_heap():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    for i in range(NUM_TEST_VALUES):
        heap.insert(i)

    previous = -1
    while len(heap) > 0:
        value = heap.pop()
        assert value == previous + 1
        previous = value
    assert previous == NUM_TEST_VALUES - 1

    assert len(heap) == 0
    with pytest.raises(IndexError):
        heap.pop()


def test_max_heap():
    heap = BinaryHeap(HeapType.MAX, int_compare)
    for i in range(NUM_TEST_VALUES):
        heap.insert(i)

    previous = NUM_TEST_VALUES
    while len(heap) > 0:
        value = heap.pop()
        assert value == previous - 1
        previous = value
    assert previous == 0


def test_descending_inserts_pop_ascending():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    values = [15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    for value in values:
        heap.insert(value)
    assert len(heap) == 16

    for i in range(16):
        assert heap.pop() == i
    assert len(heap) == 0


def test_pop_from_empty_max_heap_raises():
    heap = BinaryHeap(HeapType.MAX, int_compare)
    with pytest.raises(IndexError):
        heap.pop()


def test_duplicates_and_mixed_order():
    values = [89, 4, 23, 42, 4, 16, 15, 4, 8, 99, 50, 30, 4]
    heap = BinaryHeap(HeapType.MIN, int_compare)
    for value in values:
        heap.insert(value)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values)


def test_string_max_heap():
    heap = BinaryHeap(HeapType.MAX, string_compare)
    for word in ["Orange", "Apple", "Pear", "Banana"]:
        heap.insert(word)
    assert [heap.pop() for _ in range(4)] == ["Pear", "Orange", "Banana", "Apple"]


def test_heap_type_from_value():
    heap = BinaryHeap(1, int_compare)
    assert heap.heap_type is HeapType.MAX


def test_interleaved_insert_and_pop():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    heap.insert(5)
    heap.insert(3)
    assert heap.pop() == 3
    heap.insert(1)
    heap.insert(4)
    assert heap.pop() == 1
    assert heap.pop() == 4
    assert heap.pop() == 5
    assert len(heap) == 0