import pytest

from dskit.errors import CapacityError, UnderflowError
from dskit.heap import MaxHeap, PriorityHeap, is_max_heap

DATA = [2, 5, 4, 8, 9, 3, 7, 3]


def test_push_keeps_heap_property_and_max_at_root():
    heap = MaxHeap()
    for value in DATA:
        heap.push(value)
        assert is_max_heap([None, *heap])
    assert heap.peek() == max(DATA)
    assert len(heap) == len(DATA)


def test_pop_returns_descending_order():
    heap = MaxHeap()
    for value in DATA:
        heap.push(value)
    popped = []
    while not heap.is_empty():
        popped.append(heap.pop())
        assert is_max_heap([None, *heap])
    assert popped == sorted(DATA, reverse=True)


def test_pop_and_peek_on_empty_raise():
    heap = MaxHeap()
    with pytest.raises(UnderflowError):
        heap.pop()
    with pytest.raises(UnderflowError):
        heap.peek()


def test_capacity_leaves_slot_zero_unused():
    heap = MaxHeap(capacity=3)
    heap.push(1)
    heap.push(2)
    assert heap.is_full()
    with pytest.raises(CapacityError):
        heap.push(3)


def test_is_max_heap_on_source_arrays():
    a = [0, 9, 7, 6, 5, 4, 3, 2, 2, 1, 3]
    b = [0, 9, 7, 6, 5, 3, 3, 2, 2, 1, 4]
    assert is_max_heap(a, 11) is True
    assert is_max_heap(b, 11) is False


def test_is_max_heap_respects_length():
    values = [0, 9, 7, 6, 5, 3, 3, 2, 2, 1, 4]
    assert is_max_heap(values, 10) is True


def test_priority_heap_as_min_heap():
    heap = PriorityHeap(lambda a, b: b - a)
    for value in DATA:
        heap.push(value)
    assert heap.peek() == min(DATA)
    assert [heap.pop() for _ in range(len(DATA))] == sorted(DATA)
    assert heap.is_empty()


def test_priority_heap_with_records():
    heap = PriorityHeap(lambda a, b: b[0] - a[0])
    records = [(29, "ab"), (10, "af"), (16, "bc"), (12, "cd")]
    for record in records:
        heap.push(record)
    assert [heap.pop()[0] for _ in records] == sorted(r[0] for r in records)


def test_priority_heap_errors():
    heap = PriorityHeap(lambda a, b: a - b, capacity=2)
    with pytest.raises(UnderflowError):
        heap.pop()
    heap.push(1)
    with pytest.raises(CapacityError):
        heap.push(2)