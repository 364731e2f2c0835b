import pytest

from algobasics.containers import (
    IndexedLinkedList,
    Queue,
    Stack,
    TrackedHeap,
    previous_smaller,
    sliding_window_max,
    sliding_window_min,
)

WINDOW_VALUES = [4, -2, 7, 7, 0, 3, -5, 8]


def test_queue_fifo():
    q = Queue()
    q.push(1)
    q.push(2)
    assert q.query() == 1
    assert q.pop() == 1
    assert q.query() == 2
    q.pop()
    assert q.is_empty() is True


def test_queue_empty_errors():
    q = Queue()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.query()


def test_stack_lifo():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s.query() == 2
    assert s.pop() == 2
    assert s.query() == 1
    s.pop()
    assert s.is_empty() is True


def test_stack_empty_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.query()


def test_previous_smaller_example():
    assert previous_smaller([3, 4, 2, 7, 5]) == [-1, 3, -1, 2, 2]


def test_previous_smaller_invariant():
    values = [5, 1, 4, 4, 2, 9, 0, 3]
    for i, (x, found) in enumerate(zip(values, previous_smaller(values))):
        earlier = values[:i]
        if found == -1:
            assert all(e >= x for e in earlier)
        else:
            assert found < x and found in earlier


def test_window_examples():
    values = [1, 3, -1, -3, 5, 3, 6, 7]
    assert sliding_window_min(values, 3) == [-1, -3, -3, -3, 3, 3]
    assert sliding_window_max(values, 3) == [3, 3, 5, 5, 6, 7]


@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_window_min_invariant(k):
    result = sliding_window_min(WINDOW_VALUES, k)
    assert len(result) == len(WINDOW_VALUES) - k + 1
    for start, low in enumerate(result):
        window = WINDOW_VALUES[start:start + k]
        assert low in window and all(low <= v for v in window)


@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_window_max_invariant(k):
    result = sliding_window_max(WINDOW_VALUES, k)
    assert len(result) == len(WINDOW_VALUES) - k + 1
    for start, high in enumerate(result):
        window = WINDOW_VALUES[start:start + k]
        assert high in window and all(high >= v for v in window)


def test_window_of_one_is_identity():
    assert sliding_window_min(WINDOW_VALUES, 1) == WINDOW_VALUES


def test_window_larger_than_input():
    assert sliding_window_max([1, 2], 5) == []


def test_window_invalid_size():
    with pytest.raises(ValueError):
        sliding_window_min([1, 2], 0)


def test_indexed_list_operations():
    lst = IndexedLinkedList()
    assert lst.insert_head(1) == 1
    assert lst.insert_after(1, 2) == 2
    lst.insert_head(3)
    assert lst.values() == [3, 1, 2]
    lst.delete_after(1)
    assert lst.values() == [3, 1]
    lst.delete_after(0)
    assert lst.values() == [1]


def test_indexed_list_errors():
    lst = IndexedLinkedList()
    lst.insert_head(7)
    with pytest.raises(IndexError):
        lst.insert_after(5, 1)
    with pytest.raises(IndexError):
        lst.delete_after(1)


def test_heap_drains_sorted():
    values = [5, 1, 9, 3, 7, 3]
    heap = TrackedHeap()
    for v in values:
        heap.insert(v)
    drained = [heap.delete_min() for _ in values]
    assert drained == sorted(values)
    assert len(heap) == 0


def test_heap_delete_and_change():
    heap = TrackedHeap()
    for v in [5, 3, 8]:
        heap.insert(v)
    heap.delete(2)
    assert heap.minimum() == 5
    heap.change(3, 1)
    assert heap.minimum() == 1
    heap.change(3, 10)
    assert heap.minimum() == 5


def test_heap_errors():
    heap = TrackedHeap()
    with pytest.raises(IndexError):
        heap.minimum()
    with pytest.raises(IndexError):
        heap.delete_min()
    heap.insert(4)
    heap.delete(1)
    with pytest.raises(KeyError):
        heap.delete(1)