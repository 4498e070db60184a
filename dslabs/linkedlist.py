"""A doubly linked list with head and tail references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """Doubly linked list that can be walked from either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    # -- iteration -------------------------------------------------------

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # -- internal helpers --------------------------------------------------

    def _find(self, target: Any) -> _Node:
        for node in self._nodes():
            if node.value == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    # -- insertion ---------------------------------------------------------

    def insert_first(self, value: Any) -> None:
        """Put a value at the front."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_last(self, value: Any) -> None:
        """Put a value at the back."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_before(self, value: Any, target: Any) -> None:
        """Insert before the first node holding target; ValueError if absent."""
        anchor = self._find(target)
        node = _Node(value, prev=anchor.prev, next=anchor)
        if anchor.prev is None:
            self._head = node
        else:
            anchor.prev.next = node
        anchor.prev = node
        self._size += 1

    def insert_after(self, value: Any, target: Any) -> None:
        """Insert after the first node holding target; ValueError if absent."""
        anchor = self._find(target)
        node = _Node(value, prev=anchor, next=anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    # -- queries -----------------------------------------------------------

    def count(self, value: Any) -> int:
        """Number of nodes equal to value."""
        return sum(1 for item in self if item == value)

    # -- rearranging -------------------------------------------------------

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        for node in self._nodes():
            node.prev, node.next = node.next, node.prev
        self._head, self._tail = self._tail, self._head

    def move_min_to_front(self) -> bool:
        """Move the first smallest value to the front.

        Returns False when it is already there. Raises ValueError when empty.
        """
        if self._head is None:
            raise ValueError("minimum of an empty list")
        smallest = self._head
        for node in self._nodes():
            if node.value < smallest.value:
                smallest = node
        if smallest is self._head:
            return False
        self.insert_first(self._unlink(smallest))
        return True

    def move_max_to_back(self) -> bool:
        """Move the first largest value to the back.

        Returns False when it is already there. Raises ValueError when empty.
        """
        if self._head is None:
            raise ValueError("maximum of an empty list")
        largest = self._head
        for node in self._nodes():
            if node.value > largest.value:
                largest = node
        if largest is self._tail:
            return False
        self.insert_last(self._unlink(largest))
        return True

    # -- removal -----------------------------------------------------------

    def remove_first(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        if self._head is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self._head)

    def remove_last(self) -> Any:
        """Remove and return the last value; IndexError if empty."""
        if self._tail is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self._tail)

    def remove(self, value: Any) -> None:
        """Remove the first node holding value; ValueError if absent."""
        self._unlink(self._find(value))

    def remove_before(self, target: Any) -> Any:
        """Remove and return the value before the first target.

        ValueError if target is absent, IndexError if it is the first node.
        """
        anchor = self._find(target)
        if anchor.prev is None:
            raise IndexError(f"no node before {target!r}")
        return self._unlink(anchor.prev)

    def remove_after(self, target: Any) -> Any:
        """Remove and return the value after the first target.

        ValueError if target is absent, IndexError if it is the last node.
        """
        anchor = self._find(target)
        if anchor.next is None:
            raise IndexError(f"no node after {target!r}")
        return self._unlink(anchor.next)

    def remove_adjacent_duplicates(self) -> int:
        """Collapse runs of equal neighbouring values; return how many went."""
        removed = 0
        for node in self._nodes():
            if node.next is not None and node.value == node.next.value:
                self._unlink(node)
                removed += 1
        return removed

    def remove_all(self, value: Any) -> int:
        """Remove every node holding value; return how many went."""
        removed = 0
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                removed += 1
        return removed

    # -- rendering ---------------------------------------------------------

    def render(self) -> str:
        """Values from head to tail, as 'a -> b -> NULL'."""
        return "".join(f"{value} -> " for value in self) + "NULL"

    def render_backward(self) -> str:
        """Values from tail to head, as 'b -> a -> NULL'."""
        return "".join(f"{value} -> " for value in reversed(self)) + "NULL"