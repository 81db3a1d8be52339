import pytest

from dstructs.stack_queue import (
    ArrayQueue,
    ArrayStack,
    CircularQueue,
    LinkedStack,
    QueueEmptyError,
    QueueFullError,
    StackEmptyError,
    StackFullError,
)


def test_array_stack_is_lifo():
    stack = ArrayStack()
    for value in (4, 8, 15):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [15, 8, 4]
    assert stack.is_empty()


def test_array_stack_top_index_tracks_size():
    stack = ArrayStack()
    assert stack.top == -1
    stack.push(1)
    stack.push(2)
    assert stack.top == 1


def test_array_stack_full():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)


def test_array_stack_empty_pop():
    with pytest.raises(StackEmptyError):
        ArrayStack().pop()


def test_array_stack_render():
    stack = ArrayStack()
    stack.push(7)
    stack.push(9)
    text = stack.render()
    lines = text.splitlines()
    assert lines[0].startswith("top = 1")
    assert "S[1]" in text and "S[0]" in text
    assert text.index("S[1]") < text.index("S[0]")
    assert " 9 " in text


def test_array_stack_render_empty():
    assert "empty" in ArrayStack().render()


def test_array_queue_is_fifo():
    queue = ArrayQueue()
    for value in (3, 6, 9):
        queue.add(value)
    assert [queue.delete(), queue.delete(), queue.delete()] == [3, 6, 9]
    assert queue.is_empty()


def test_array_queue_slots_are_not_reused():
    queue = ArrayQueue(capacity=2)
    queue.add(1)
    queue.add(2)
    assert queue.delete() == 1
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.add(3)


def test_array_queue_empty_delete():
    with pytest.raises(QueueEmptyError):
        ArrayQueue().delete()


def test_array_queue_render_marks_used_slots():
    queue = ArrayQueue()
    queue.add(11)
    queue.add(22)
    queue.delete()
    text = queue.render()
    assert "front = 0, rear = 1" in text
    assert "22" in text
    assert "11" not in text.splitlines()[-1]


def test_circular_queue_holds_size_minus_one():
    queue = CircularQueue(size=5)
    for value in range(4):
        queue.add(value)
    with pytest.raises(QueueFullError):
        queue.add(99)


def test_circular_queue_wraps_around():
    queue = CircularQueue(size=3)
    delivered = []
    for value in range(10):
        queue.add(value)
        delivered.append(queue.delete())
    assert delivered == list(range(10))
    assert queue.is_empty()


def test_circular_queue_empty_delete():
    with pytest.raises(QueueEmptyError):
        CircularQueue().delete()


def test_circular_queue_render():
    queue = CircularQueue(size=5)
    queue.add(42)
    text = queue.render()
    assert "CQ[4]" in text
    assert "N" in text.splitlines()[-1]
    assert "42" in text


def test_linked_stack_is_lifo():
    stack = LinkedStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert stack.pop() == 3
    assert list(stack) == [2, 1]


def test_linked_stack_empty_pop():
    with pytest.raises(StackEmptyError):
        LinkedStack().pop()


def test_linked_stack_render():
    stack = LinkedStack()
    assert stack.render() == "top|bottom"
    stack.push(5)
    stack.push(6)
    assert stack.render() == "top|6|5|bottom"