"""Binary trees: building and traversal, threaded trees, max heaps and search trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def build_tree(spec: str) -> TreeNode | None:
    """Build a tree from a preorder string in which '0' marks an empty subtree."""
    chars = iter(spec)

    def _build() -> TreeNode | None:
        ch = next(chars, None)
        if ch is None or ch == "0":
            return None
        node = TreeNode(ch)
        node.left = _build()
        node.right = _build()
        return node

    return _build()


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the data in inorder (left, node, right)."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the data in preorder (node, left, right)."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the data in postorder (left, right, node)."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def iterative_inorder(root: TreeNode | None) -> list[Any]:
    """Return the inorder data using an explicit stack instead of recursion."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            break
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


@dataclass(eq=False)
class ThreadedNode:
    """A node whose empty links are threads to its inorder neighbours."""

    data: Any
    left: ThreadedNode | None = field(default=None, repr=False)
    right: ThreadedNode | None = field(default=None, repr=False)
    left_thread: bool = True
    right_thread: bool = True


class ThreadedTree:
    """An inorder-threaded binary tree reached through a header node."""

    def __init__(self) -> None:
        self.header = ThreadedNode(None)
        self.header.left = self.header
        self.header.right = self.header

    def successor(self, node: ThreadedNode) -> ThreadedNode:
        """Return the inorder successor of node (the header after the last node)."""
        following = node.right
        if not node.right_thread:
            while not following.left_thread:
                following = following.left
        return following

    def insert_right(self, parent: ThreadedNode, child: ThreadedNode) -> None:
        """Make child the right child of parent; parent's old right subtree goes under child."""
        child.right = parent.right
        child.right_thread = parent.right_thread
        child.left = parent
        child.left_thread = True
        parent.right = child
        parent.right_thread = False
        if not child.right_thread:
            self.successor(child).left = child

    def __iter__(self) -> Iterator[Any]:
        node = self.header
        while True:
            node = self.successor(node)
            if node is self.header:
                return
            yield node.data


class HeapEmptyError(IndexError):
    """Raised when removing from an empty heap."""


class HeapFullError(OverflowError):
    """Raised when adding to a full heap."""


class MaxHeap:
    """A max heap of keys in a 1-based array of fixed capacity."""

    def __init__(self, capacity: int = 200) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._heap: list[Any] = [None]

    def __len__(self) -> int:
        return len(self._heap) - 1

    def push(self, key: Any) -> None:
        """Insert key, moving smaller parents down."""
        if len(self) >= self.capacity:
            raise HeapFullError("heap is full")
        heap = self._heap
        heap.append(key)
        i = len(self)
        while i != 1 and key > heap[i // 2]:
            heap[i] = heap[i // 2]
            i //= 2
        heap[i] = key

    def pop(self) -> Any:
        """Remove and return the largest key."""
        if not len(self):
            raise HeapEmptyError("heap is empty")
        heap = self._heap
        largest = heap[1]
        last = heap.pop()
        n = len(self)
        if n == 0:
            return largest
        parent, child = 1, 2
        while child <= n:
            if child < n and heap[child] < heap[child + 1]:
                child += 1
            if last >= heap[child]:
                break
            heap[parent] = heap[child]
            parent = child
            child *= 2
        heap[parent] = last
        return largest


class BinarySearchTree:
    """A binary search tree of distinct keys; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def search(self, key: Any) -> TreeNode | None:
        """Return the node holding key, found recursively, or None."""

        def _search(node: TreeNode | None) -> TreeNode | None:
            if node is None:
                return None
            if key == node.data:
                return node
            return _search(node.left if key < node.data else node.right)

        return _search(self.root)

    def iterative_search(self, key: Any) -> TreeNode | None:
        """Return the node holding key, found with a loop, or None."""
        node = self.root
        while node is not None:
            if key == node.data:
                return node
            node = node.left if key < node.data else node.right
        return None

    def _insertion_parent(self, key: Any) -> TreeNode | None:
        node = self.root
        while node is not None:
            if key == node.data:
                return None
            if key < node.data:
                if node.left is None:
                    break
                node = node.left
            else:
                if node.right is None:
                    break
                node = node.right
        return node

    def insert(self, key: Any) -> bool:
        """Insert key; return False when it was already present."""
        if self.root is None:
            self.root = TreeNode(key)
            return True
        parent = self._insertion_parent(key)
        if parent is None:
            return False
        if key < parent.data:
            parent.left = TreeNode(key)
        else:
            parent.right = TreeNode(key)
        return True

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list[Any]:
        """Return the keys in preorder."""
        return preorder(self.root)