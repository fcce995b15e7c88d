"""A binary search tree of unique, ordered values."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class DuplicateValueError(ValueError):
    """Raised when inserting a value that is already in the tree."""


class EmptyTreeError(LookupError):
    """Raised when an operation needs at least one node but the tree is empty."""


class Traversal(Enum):
    """Depth-first visiting orders."""

    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"


@dataclass(slots=True)
class Node:
    """One tree node holding a value and its two subtrees."""

    value: Any
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _preorder_nodes(root: Node | None) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder_nodes(root: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _postorder_nodes(root: Node | None) -> Iterator[Node]:
    # Root-right-left order, reversed, is left-right-root.
    collected: list[Node] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        collected.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed(collected)


_WALKERS: dict[Traversal, Callable[[Node | None], Iterable[Node]]] = {
    Traversal.INORDER: _inorder_nodes,
    Traversal.PREORDER: _preorder_nodes,
    Traversal.POSTORDER: _postorder_nodes,
}


class BinarySearchTree:
    """A binary search tree that rejects duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` in its ordered place; duplicates are refused."""
        if self.root is None:
            self.root = Node(value)
            self._size += 1
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                raise DuplicateValueError(f"duplicate value {value!r} is not allowed")
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove ``value`` from the tree.

        A node with a right subtree is replaced by that subtree, with its left
        subtree hung under the right subtree's smallest node; otherwise it is
        replaced by its left subtree.
        """
        if self.root is None:
            raise EmptyTreeError("tree is empty")
        parent: Node | None = None
        node: Node | None = self.root
        while node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
            if node is None:
                raise KeyError(value)
        replacement = self._detach(node)
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1

    @staticmethod
    def _detach(node: Node) -> Node | None:
        if node.right is None:
            return node.left
        leftmost = node.right
        while leftmost.left is not None:
            leftmost = leftmost.left
        leftmost.left = node.left
        return node.right

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in ascending order."""
        return (node.value for node in _inorder_nodes(self.root))

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.preorder()!r})"

    def traverse(self, order: Traversal | str = Traversal.INORDER) -> list[Any]:
        """Return the values in the given traversal order."""
        walker = _WALKERS[Traversal(order)]
        return [node.value for node in walker(self.root)]

    def inorder(self) -> list[Any]:
        return self.traverse(Traversal.INORDER)

    def preorder(self) -> list[Any]:
        return self.traverse(Traversal.PREORDER)

    def postorder(self) -> list[Any]:
        return self.traverse(Traversal.POSTORDER)

    def _count(self, predicate: Callable[[Node], bool]) -> int:
        return sum(1 for node in _preorder_nodes(self.root) if predicate(node))

    def count_leaves(self) -> int:
        return self._count(Node.is_leaf)

    def count_only_left_child(self) -> int:
        return self._count(lambda n: n.left is not None and n.right is None)

    def count_only_right_child(self) -> int:
        return self._count(lambda n: n.left is None and n.right is not None)

    def count_one_child(self) -> int:
        return self._count(lambda n: (n.left is None) != (n.right is None))

    def count_both_children(self) -> int:
        return self._count(lambda n: n.left is not None and n.right is not None)

    def count_with_parent(self) -> int:
        """Number of nodes that have a parent, i.e. every node but the root."""
        return max(self._size - 1, 0)

    def count_siblings(self) -> int:
        """Number of nodes that share their parent with another node."""
        return 2 * self.count_both_children()

    def _require_root(self) -> Node:
        if self.root is None:
            raise EmptyTreeError("tree is empty")
        return self.root

    def count_left_side(self) -> int:
        """Number of nodes in the root's left subtree."""
        return sum(1 for _ in _preorder_nodes(self._require_root().left))

    def count_right_side(self) -> int:
        """Number of nodes in the root's right subtree."""
        return sum(1 for _ in _preorder_nodes(self._require_root().right))

    def highest(self) -> Any:
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.value

    def least(self) -> Any:
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.value

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        levels = 0
        level = deque([self.root] if self.root is not None else [])
        while level:
            levels += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return levels

    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 when empty."""
        return self.height() - 1

    def find_parent(self, value: Any) -> Any:
        """Return the value of the parent of ``value``, or None for the root."""
        node: Node | None = self._require_root()
        parent: Node | None = None
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            else:
                return None if parent is None else parent.value
        raise KeyError(value)