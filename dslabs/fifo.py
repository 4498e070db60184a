"""A bounded array-style queue and two small simulations built on it."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Callable, Iterable, Iterator

from dslabs.stacks import BoundedStack

QUEUE_CAPACITY = 10

DEFAULT_PRIORITY = ("Anciano", "Niño", "Embarazada")
DEFAULT_REGULAR = ("Pasajero1", "Pasajero2", "Pasajero3")
DEFAULT_CREW = ("Piloto", "Copiloto", "Azafata1", "Azafata2")
DEFAULT_PLAYERS = ("Sandra", "Felipe", "Miguel", "Julieta")


class QueueFullError(Exception):
    """Raised when enqueueing into a queue with no free slot at its end."""


class QueueEmptyError(IndexError):
    """Raised when taking from or inspecting an empty queue."""


class BoundedQueue:
    """Fixed-capacity queue laid out like an array.

    Slots freed at the front are not reused until the queue is emptied, so
    the queue can report itself full while holding fewer than ``capacity``
    values.
    """

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._offset = 0

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._offset + len(self._items) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add a value at the back; QueueFullError when no slot is left."""
        if self.is_full():
            raise QueueFullError("enqueue into a full queue")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        value = self._items.popleft()
        if self._items:
            self._offset += 1
        else:
            self._offset = 0
        return value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmptyError("front of an empty queue")
        return self._items[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self._items)!r})"

    def reverse(self) -> None:
        """Reverse the order by draining into a stack and refilling."""
        if not self._items:
            raise QueueEmptyError("reverse an empty queue")
        stack = BoundedStack(self.capacity)
        while not self.is_empty():
            stack.push(self.dequeue())
        while not stack.is_empty():
            self.enqueue(stack.pop())

    def remove_all(self, value: Any) -> int:
        """Drop every value equal to ``value``, keeping the order; return how many went."""
        if not self._items:
            raise QueueEmptyError("remove from an empty queue")
        kept = [item for item in self._items if item != value]
        removed = len(self._items) - len(kept)
        self._items = deque(kept)
        if not self._items:
            self._offset = 0
        return removed


class EvacuationGroup(Enum):
    PRIORITY = "priority"
    REGULAR = "regular"
    CREW = "crew"


class TurnOutcome(Enum):
    PLAYED = "played"
    RETIRED = "retired"
    LOST = "lost"


def _filled(names: Iterable[Any]) -> BoundedQueue:
    queue = BoundedQueue()
    for name in names:
        queue.enqueue(name)
    return queue


def evacuation_order(
    priority: Iterable[str] = DEFAULT_PRIORITY,
    regular: Iterable[str] = DEFAULT_REGULAR,
    crew: Iterable[str] = DEFAULT_CREW,
) -> list[tuple[EvacuationGroup, str]]:
    """Evacuate priority passengers, then regular ones, then the crew."""
    queues = [
        (EvacuationGroup.PRIORITY, _filled(priority)),
        (EvacuationGroup.REGULAR, _filled(regular)),
        (EvacuationGroup.CREW, _filled(crew)),
    ]
    order: list[tuple[EvacuationGroup, str]] = []
    for group, queue in queues:
        while not queue.is_empty():
            order.append((group, queue.dequeue()))
    return order


def take_turns(
    players: Iterable[str] = DEFAULT_PLAYERS,
    keeps_playing: Callable[[str], bool] = lambda name: False,
) -> Iterator[tuple[str, TurnOutcome]]:
    """Serve players in turn until none is left.

    A player who keeps playing rejoins the back of the queue; if the queue
    has no free slot the player is lost after the turn.
    """
    queue = _filled(players)
    while not queue.is_empty():
        name = queue.dequeue()
        if not keeps_playing(name):
            yield name, TurnOutcome.RETIRED
            continue
        try:
            queue.enqueue(name)
        except QueueFullError:
            yield name, TurnOutcome.LOST
        else:
            yield name, TurnOutcome.PLAYED