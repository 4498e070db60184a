"""Binary search tree with recursive and iterative insertion and two deletions."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from dslabs.tree import TreeNode

DEFAULT_LAYOUT_X = 45
DEFAULT_LAYOUT_Y = 2


class DuplicateKeyError(ValueError):
    """Raised when inserting a value that is already in a search tree."""


def _preorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is not None:
        yield node
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is not None:
        yield from _inorder(node.left)
        yield node
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node


def _height(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _insert(node: Optional[TreeNode], value: Any) -> TreeNode:
    if node is None:
        return TreeNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        raise DuplicateKeyError(f"{value!r} is already in the tree")
    return node


def _remove(node: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Delete value below node, replacing a two-child node by its predecessor."""
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _remove(node.left, value)
        return node
    if value > node.value:
        node.right = _remove(node.right, value)
        return node
    if node.right is None:
        return node.left
    if node.left is None:
        return node.right
    parent, predecessor = node, node.left
    while predecessor.right is not None:
        parent, predecessor = predecessor, predecessor.right
    node.value = predecessor.value
    if parent is node:
        node.left = predecessor.left
    else:
        parent.right = predecessor.left
    return node


def _splice_root(node: TreeNode) -> Optional[TreeNode]:
    """Drop node and move its in-order predecessor into its place."""
    if node.left is None:
        return node.right
    parent, predecessor = node, node.left
    while predecessor.right is not None:
        parent, predecessor = predecessor, predecessor.right
    if parent is not node:
        parent.right = predecessor.left
        predecessor.left = node.left
    predecessor.right = node.right
    return predecessor


class BinarySearchTree:
    """Binary search tree of mutually comparable values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert a value; DuplicateKeyError if it is already present."""
        self.root = _insert(self.root, value)

    def insert_iterative(self, value: Any) -> None:
        """Insert by walking down a loop; an equal value goes to the right."""
        new = TreeNode(value)
        if self.root is None:
            self.root = new
            return
        node: Optional[TreeNode] = self.root
        parent = self.root
        while node is not None:
            parent = node
            node = node.left if value < node.value else node.right
        if parent.value > value:
            parent.left = new
        else:
            parent.right = new

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None and node.value != value:
            node = node.left if node.value > value else node.right
        return node is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _inorder(self.root))

    def __len__(self) -> int:
        return sum(1 for _ in _preorder(self.root))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.preorder()!r})"

    def preorder(self) -> list[Any]:
        return [node.value for node in _preorder(self.root)]

    def inorder(self) -> list[Any]:
        return [node.value for node in _inorder(self.root)]

    def postorder(self) -> list[Any]:
        return [node.value for node in _postorder(self.root)]

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self.root)

    def count_leaves(self) -> int:
        return sum(1 for node in _preorder(self.root) if node.is_leaf)

    def maximum(self) -> Any:
        """Largest value; ValueError when the tree is empty."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def minimum(self) -> Any:
        """Smallest value; ValueError when the tree is empty."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def remove(self, value: Any) -> None:
        """Delete a value; KeyError if absent.

        A node with two children takes its in-order predecessor's value.
        """
        self.root = _remove(self.root, value)

    def remove_root(self) -> Any:
        """Delete the root by splicing in its predecessor; return its value."""
        if self.root is None:
            raise IndexError("remove the root of an empty tree")
        value = self.root.value
        self.root = _splice_root(self.root)
        return value

    def remove_with_root_splice(self, value: Any) -> None:
        """Delete a value, splicing if it is at the root; KeyError if absent."""
        if self.root is None:
            raise KeyError(value)
        if value == self.root.value:
            self.remove_root()
        else:
            self.remove(value)

    def clear(self) -> None:
        self.root = None

    def render(self) -> str:
        """Sideways drawing: right subtree on top, four spaces per level."""
        lines: list[str] = []

        def walk(node: Optional[TreeNode], level: int) -> None:
            if node is None:
                return
            walk(node.right, level + 1)
            lines.append("    " * level + f"{node.value}\n")
            walk(node.left, level + 1)

        walk(self.root, 0)
        return "".join(lines)

    def layout(
        self, x: int = DEFAULT_LAYOUT_X, y: int = DEFAULT_LAYOUT_Y
    ) -> list[tuple[int, int, Any]]:
        """Screen positions (column, row, value) of every node, in preorder.

        Children sit two rows down, shifted by 15 columns less 6 per level.
        """
        points: list[tuple[int, int, Any]] = []

        def walk(node: Optional[TreeNode], col: int, row: int, level: int) -> None:
            if node is None:
                return
            points.append((col, row, node.value))
            shift = 15 - level * 6
            walk(node.left, col - shift, row + 2, level + 1)
            walk(node.right, col + shift, row + 2, level + 1)

        walk(self.root, x, y, 0)
        return points