"""Height-balanced (AVL) search tree kept in shape by balance factors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from dslabs.bst import DuplicateKeyError

DEFAULT_LAYOUT_X = 60
DEFAULT_LAYOUT_Y = 2


@dataclass(eq=False)
class AVLNode:
    """Node whose balance is height(right) - height(left)."""

    value: Any
    balance: int = 0
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None


def _rebalance_left_heavy(node: AVLNode) -> AVLNode:
    child = node.left
    assert child is not None
    if child.balance <= 0:
        node.left = child.right
        child.right = node
        node.balance = 0
        top = child
    else:
        grand = child.right
        assert grand is not None
        node.left = grand.right
        grand.right = node
        child.right = grand.left
        grand.left = child
        node.balance = 1 if grand.balance == -1 else 0
        child.balance = -1 if grand.balance == 1 else 0
        top = grand
    top.balance = 0
    return top


def _rebalance_right_heavy(node: AVLNode) -> AVLNode:
    child = node.right
    assert child is not None
    if child.balance >= 0:
        node.right = child.left
        child.left = node
        node.balance = 0
        top = child
    else:
        grand = child.left
        assert grand is not None
        node.right = grand.left
        grand.left = node
        child.left = grand.right
        grand.right = child
        node.balance = -1 if grand.balance == 1 else 0
        child.balance = 1 if grand.balance == -1 else 0
        top = grand
    top.balance = 0
    return top


def _insert(node: Optional[AVLNode], value: Any) -> tuple[AVLNode, bool]:
    """Insert below node; return the new subtree and whether it grew."""
    if node is None:
        return AVLNode(value), True
    if value < node.value:
        node.left, grew = _insert(node.left, value)
        if not grew:
            return node, False
        if node.balance == 1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = -1
            return node, True
        return _rebalance_left_heavy(node), False
    if value > node.value:
        node.right, grew = _insert(node.right, value)
        if not grew:
            return node, False
        if node.balance == -1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = 1
            return node, True
        return _rebalance_right_heavy(node), False
    raise DuplicateKeyError(f"{value!r} is already in the tree")


def _left_shrunk(node: AVLNode) -> tuple[AVLNode, bool]:
    """Restore balance after the left subtree lost a level."""
    if node.balance == 0:
        node.balance = 1
        return node, False
    if node.balance == -1:
        node.balance = 0
        return node, True
    child = node.right
    assert child is not None
    if child.balance >= 0:
        node.right = child.left
        child.left = node
        if child.balance == 0:
            node.balance, child.balance = 1, -1
            return child, False
        node.balance = child.balance = 0
        return child, True
    grand = child.left
    assert grand is not None
    node.right = grand.left
    grand.left = node
    child.left = grand.right
    grand.right = child
    node.balance = -1 if grand.balance == 1 else 0
    child.balance = 1 if grand.balance == -1 else 0
    grand.balance = 0
    return grand, True


def _right_shrunk(node: AVLNode) -> tuple[AVLNode, bool]:
    """Restore balance after the right subtree lost a level."""
    if node.balance == 0:
        node.balance = -1
        return node, False
    if node.balance == 1:
        node.balance = 0
        return node, True
    child = node.left
    assert child is not None
    if child.balance <= 0:
        node.left = child.right
        child.right = node
        if child.balance == 0:
            node.balance, child.balance = -1, 1
            return child, False
        node.balance = child.balance = 0
        return child, True
    grand = child.right
    assert grand is not None
    node.left = grand.right
    grand.right = node
    child.right = grand.left
    grand.left = child
    node.balance = 1 if grand.balance == -1 else 0
    child.balance = -1 if grand.balance == 1 else 0
    grand.balance = 0
    return grand, True


def _remove_max(node: AVLNode) -> tuple[Optional[AVLNode], bool, Any]:
    """Cut the largest value out of a subtree: (subtree, shrunk, value)."""
    if node.right is None:
        return node.left, True, node.value
    subtree, shrunk, value = _remove_max(node.right)
    node.right = subtree
    if shrunk:
        node, shrunk = _right_shrunk(node)
    return node, shrunk, value


def _remove(node: Optional[AVLNode], value: Any) -> tuple[Optional[AVLNode], bool]:
    """Delete value below node; return the new subtree and whether it shrank."""
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left, shrunk = _remove(node.left, value)
        return _left_shrunk(node) if shrunk else (node, False)
    if value > node.value:
        node.right, shrunk = _remove(node.right, value)
        return _right_shrunk(node) if shrunk else (node, False)
    if node.right is None:
        return node.left, True
    if node.left is None:
        return node.right, True
    subtree, shrunk, predecessor = _remove_max(node.left)
    node.left = subtree
    node.value = predecessor
    return _left_shrunk(node) if shrunk else (node, False)


def _inorder(node: Optional[AVLNode]) -> Iterator[AVLNode]:
    if node is not None:
        yield from _inorder(node.left)
        yield node
        yield from _inorder(node.right)


def _height(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


class AVLTree:
    """Self-balancing binary search tree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert a value; DuplicateKeyError if it is already present."""
        self.root, _ = _insert(self.root, value)

    def remove(self, value: Any) -> None:
        """Delete a value; KeyError if absent."""
        self.root, _ = _remove(self.root, value)

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _inorder(self.root))

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self.root))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self.root)

    def balance_factors(self) -> dict[Any, int]:
        """Each value's balance factor, in ascending order of value."""
        return {node.value: node.balance for node in _inorder(self.root)}

    def render(self) -> str:
        """Sideways drawing: right subtree on top, four spaces per level."""
        lines: list[str] = []

        def walk(node: Optional[AVLNode], level: int) -> None:
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
        """Screen positions (column, row, value), right subtree first.

        Children sit two rows down, 32 >> level columns aside, at least 2.
        """
        points: list[tuple[int, int, Any]] = []

        def walk(node: Optional[AVLNode], col: int, row: int, level: int) -> None:
            if node is None:
                return
            shift = max(32 >> level, 2)
            walk(node.right, col + shift, row + 2, level + 1)
            points.append((col, row, node.value))
            walk(node.left, col - shift, row + 2, level + 1)

        walk(self.root, x, y, 0)
        return points