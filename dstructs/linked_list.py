"""Singly, circular, doubly and header-doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    link: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list of nodes reached from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.head = Node(value, self.head)

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.link

    def concatenate(self, other: LinkedList) -> LinkedList:
        """Link the nodes of other onto the end of this list and return this list."""
        if self.head is None:
            self.head = other.head
            return self
        tail = self.head
        while tail.link is not None:
            tail = tail.link
        tail.link = other.head
        return self

    def insert_after(self, node: Node | None, value: Any) -> Node:
        """Insert value after node, or at the front when node is None; return the new node."""
        new = Node(value)
        if node is not None:
            new.link = node.link
            node.link = new
        else:
            new.link = self.head
            self.head = new
        return new

    def predecessor(self, node: Node | None) -> Node | None:
        """Return the node whose link is node, or None when there is none."""
        current = self.head
        while current is not None and current.link is not node:
            current = current.link
        return current

    def delete(self, node: Node) -> None:
        """Remove node from the list; the head and foreign nodes cannot be removed."""
        if node is self.head:
            raise ValueError("the first node of the list cannot be deleted")
        before = self.predecessor(node)
        if before is None:
            raise ValueError("node is not in the list")
        before.link = node.link
        node.link = None

    def invert(self) -> LinkedList:
        """Reverse the list in place and return it."""
        reversed_head: Node | None = None
        lead = self.head
        while lead is not None:
            following = lead.link
            lead.link = reversed_head
            reversed_head = lead
            lead = following
        self.head = reversed_head
        return self


class CircularList:
    """A singly linked list whose last node links back to ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        items = list(values)
        if not items:
            return
        for value in reversed(items):
            self.head = Node(value, self.head)
        tail = self.head
        while tail.link is not None:
            tail = tail.link
        tail.link = self.head

    def __iter__(self) -> Iterator[Any]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.data
            node = node.link
            if node is self.head:
                break


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: Any
    llink: DNode | None = field(default=None, repr=False)
    rlink: DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list with None at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DNode | None = None
        tail: DNode | None = None
        for value in values:
            node = DNode(value, llink=tail)
            if tail is None:
                self.head = node
            else:
                tail.rlink = node
            tail = node

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def nodes(self) -> Iterator[DNode]:
        """Yield the nodes from left to right."""
        node = self.head
        while node is not None:
            yield node
            node = node.rlink

    def insert_after(self, node: DNode | None, value: Any) -> DNode:
        """Insert value after node, or at the front when node is None; return the new node."""
        new = DNode(value)
        if node is not None:
            new.llink = node
            new.rlink = node.rlink
            if node.rlink is not None:
                node.rlink.llink = new
            node.rlink = new
        else:
            new.rlink = self.head
            if self.head is not None:
                self.head.llink = new
            self.head = new
        return new

    def delete(self, node: DNode) -> None:
        """Remove node; only a lone node or a node with both neighbours can be removed."""
        if node.llink is None and node.rlink is None:
            if node is not self.head:
                raise ValueError("node is not in the list")
            self.head = None
            return
        if node.llink is None or node.rlink is None:
            raise ValueError("an end node with a neighbour cannot be deleted")
        node.llink.rlink = node.rlink
        node.rlink.llink = node.llink
        node.llink = node.rlink = None


class HeaderDoublyList:
    """A circular doubly linked list with a header node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.header = DNode(None)
        self.header.llink = self.header
        self.header.rlink = self.header
        for value in values:
            last = self.header.llink
            node = DNode(value, llink=last, rlink=self.header)
            last.rlink = node
            self.header.llink = node

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def nodes(self) -> Iterator[DNode]:
        """Yield the data nodes from left to right, skipping the header."""
        node = self.header.rlink
        while node is not self.header:
            yield node
            node = node.rlink

    def delete(self, node: DNode) -> None:
        """Remove a data node; the header cannot be removed."""
        if node is self.header:
            raise ValueError("the header node cannot be deleted")
        node.llink.rlink = node.rlink
        node.rlink.llink = node.llink
        node.llink = node.rlink = None