"""A general binary tree built by asking, node by node, what goes where."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


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


class BinaryTree:
    """Binary tree with traversals and shape queries."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    def preorder(self) -> list[Any]:
        return [node.value for node in _preorder(self.root)]

    def inorder(self) -> list[Any]:
        return [node.value for node in _inorder(self.root)]

    def postorder(self) -> list[Any]:
        return [node.value for node in _postorder(self.root)]

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in _preorder(self.root))

    def leaves(self) -> list[Any]:
        """Values of the leaves, in preorder."""
        return [node.value for node in _preorder(self.root) if node.is_leaf]

    def count_leaves(self) -> int:
        return sum(1 for node in _preorder(self.root) if node.is_leaf)

    def is_complete(self) -> bool:
        """True when every level is full: n == 2**height - 1."""
        return len(self) == 2 ** self.height() - 1

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

    def clear(self) -> None:
        self.root = None


def build_tree(
    ask_value: Callable[[], Any], ask_child: Callable[[str], bool]
) -> TreeNode:
    """Build a tree in preorder.

    ``ask_value`` supplies each node's value; ``ask_child`` is asked with
    "left" and then "right" whether that child exists. The left subtree is
    built completely before the right one is asked about.
    """
    node = TreeNode(ask_value())
    if ask_child("left"):
        node.left = build_tree(ask_value, ask_child)
    if ask_child("right"):
        node.right = build_tree(ask_value, ask_child)
    return node