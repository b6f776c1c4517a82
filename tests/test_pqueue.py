import pytest

from spltoolkit.pqueue import PriorityQueue


def test_new_queue_is_empty():
    pq = PriorityQueue()
    assert len(pq) == 0
    assert pq.is_empty() is True


def test_source_scenario():
    pq = PriorityQueue()
    pq.enqueue("A", 1)
    assert pq.is_empty() is False
    assert pq.peek() == "A"
    pq.enqueue("D", 3)
    pq.enqueue("C", 2)
    pq.enqueue("B", 1)
    assert pq.peek() == "A"
    assert len(pq) == 4
    pq2 = pq.clone()
    assert pq.dequeue() == "A"
    assert pq.peek() == "B"
    assert pq.dequeue() == "B"
    assert pq.dequeue() == "C"
    assert pq.dequeue() == "D"
    assert pq.is_empty() is True
    assert pq2.dequeue() == "A"
    assert pq2.dequeue() == "B"
    assert pq2.dequeue() == "C"
    assert pq2.dequeue() == "D"


def test_ties_leave_in_arrival_order():
    pq = PriorityQueue()
    names = [f"item{i}" for i in range(20)]
    for name in names:
        pq.enqueue(name, 5)
    assert [pq.dequeue() for _ in names] == names


def test_output_is_sorted_by_priority():
    pq = PriorityQueue()
    priorities = [7, 3, 9, 1, 4, 4, 8, 2, 6, 0, 5, 3]
    for index, priority in enumerate(priorities):
        pq.enqueue(index, priority)
    seen = []
    while not pq.is_empty():
        seen.append(pq.peek_priority())
        pq.dequeue()
    assert seen == sorted(priorities)


def test_peek_priority_tracks_front():
    pq = PriorityQueue()
    pq.enqueue("x", 2.5)
    pq.enqueue("y", -1.0)
    assert pq.peek_priority() == -1.0
    assert pq.peek() == "y"


@pytest.mark.parametrize(
    "operation",
    [
        lambda pq: pq.dequeue(),
        lambda pq: pq.peek(),
        lambda pq: pq.peek_priority(),
    ],
    ids=["dequeue", "peek", "peek_priority"],
)
def test_empty_queue_raises(operation):
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        operation(pq)
    assert len(pq) == 0
    assert pq.is_empty() is True


def test_failed_dequeue_leaves_queue_usable():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.dequeue()
    pq.enqueue("A", 1)
    assert len(pq) == 1
    assert pq.dequeue() == "A"


def test_clear_empties_queue():
    pq = PriorityQueue()
    pq.enqueue("A", 1)
    pq.enqueue("B", 2)
    pq.clear()
    assert len(pq) == 0
    with pytest.raises(IndexError):
        pq.dequeue()


def test_clone_is_independent_and_keeps_tie_order():
    pq = PriorityQueue()
    pq.enqueue("first", 1)
    copy = pq.clone()
    pq.enqueue("second", 1)
    copy.enqueue("other", 1)
    assert len(pq) == 2
    assert len(copy) == 2
    assert [pq.dequeue(), pq.dequeue()] == ["first", "second"]
    assert [copy.dequeue(), copy.dequeue()] == ["first", "other"]


def test_unorderable_values_are_fine():
    pq = PriorityQueue()
    a, b = object(), object()
    pq.enqueue(a, 1)
    pq.enqueue(b, 1)
    assert pq.dequeue() is a
    assert pq.dequeue() is b