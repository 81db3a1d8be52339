"""Array and linked stacks, a linear array queue and a circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dstructs.linked_list import Node


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class QueueFullError(OverflowError):
    """Raised when adding to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when deleting from an empty queue."""


_RULE = "      ------ "


class ArrayStack:
    """A stack held in a fixed-capacity array; ``top`` is -1 when empty."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    @property
    def top(self) -> int:
        """Index of the top element, -1 for an empty stack."""
        return len(self._items) - 1

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self.top < 0

    def is_full(self) -> bool:
        """Return True when no more items fit."""
        return self.top >= self.capacity - 1

    def push(self, item: Any) -> None:
        """Place item on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def render(self) -> str:
        """Draw the stack from top to bottom."""
        lines = [f"top = {self.top}, stack contents:"]
        if self.is_empty():
            lines.append("stack is empty")
            return "\n".join(lines)
        lines.append("     |   :  |")
        lines.append(_RULE)
        for index in range(self.top, -1, -1):
            lines.append(f"S[{index}] |  {self._items[index]!s:>2}  |")
            lines.append(_RULE)
        return "\n".join(lines)


class ArrayQueue:
    """A linear queue in an array: slots are never reused once passed."""

    _SHOWN = 6

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = []
        self.front = -1
        self.rear = -1

    def is_empty(self) -> bool:
        """Return True when no items wait in the queue."""
        return self.front >= self.rear

    def is_full(self) -> bool:
        """Return True when the rear has reached the last slot."""
        return self.rear >= self.capacity - 1

    def add(self, item: Any) -> None:
        """Append item at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self.rear += 1
        self._slots.append(item)

    def delete(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self.front += 1
        return self._slots[self.front]

    def render(self) -> str:
        """Draw the first slots of the queue, marking unused ones."""
        lines = [f"front = {self.front}, rear = {self.rear}, queue contents:"]
        if self.is_empty():
            lines.append("queue is empty")
            return "\n".join(lines)
        lines.append("".join(f"  Q[{i}]  " for i in range(self._SHOWN)) + ".....")
        cells = []
        for i in range(self._SHOWN):
            if i <= self.front or i > self.rear:
                cells.append("|  ==\t")
            else:
                cells.append(f"|  {self._slots[i]!s:>2}\t")
        lines.append("".join(cells) + "|.....")
        return "\n".join(lines)


class CircularQueue:
    """A circular queue of ``size`` slots holding at most ``size - 1`` items."""

    def __init__(self, size: int = 5) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self.size = size
        self._slots: list[Any] = [0] * size
        self.front = 0
        self.rear = 0

    def is_empty(self) -> bool:
        """Return True when front and rear meet."""
        return self.front == self.rear

    def add(self, item: Any) -> None:
        """Append item at the rear."""
        rear = (self.rear + 1) % self.size
        if rear == self.front:
            raise QueueFullError("circular queue is full")
        self.rear = rear
        self._slots[rear] = item

    def delete(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self.front = (self.front + 1) % self.size
        return self._slots[self.front]

    def render(self) -> str:
        """Draw every slot; the slot at ``front`` is marked N."""
        lines = [f"front = {self.front}, rear = {self.rear}, circular queue contents:"]
        if self.is_empty():
            lines.append("queue is empty")
            return "\n".join(lines)
        lines.append("".join(f"  CQ[{i}] " for i in range(self.size)))
        cells = []
        for i, value in enumerate(self._slots):
            if i == self.front:
                cells.append("|   N\t")
            else:
                cells.append(f"|{value!s:>4}\t")
        lines.append("".join(cells) + "|")
        return "\n".join(lines)


class LinkedStack:
    """A stack of linked nodes; ``top`` is None when empty."""

    def __init__(self) -> None:
        self.top: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        node = self.top
        while node is not None:
            yield node.data
            node = node.link

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def push(self, item: Any) -> None:
        """Place item on top of the stack."""
        self.top = Node(item, self.top)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.top is None:
            raise StackEmptyError("stack is empty")
        node = self.top
        self.top = node.link
        node.link = None
        return node.data

    def render(self) -> str:
        """Show the stack from top to bottom on one line."""
        return "top|" + "".join(f"{item}|" for item in self) + "bottom"