"""Frontier structures for best-first search.

``QueueSet`` is the open list used by graph search: a binary min-heap that
also answers "is this state on the frontier, and where?" in constant time,
which is what duplicate detection and decrease-key need. Entries live in an
arena of slots with stable integer ids; the heap orders slot ids and a
separate table tracks each slot's heap position, so a location handed out by
``push`` stays valid however often the heap is reshuffled.

``PriorityFrontier`` is the plain heap used by tree search, where duplicate
states are allowed on the frontier.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from informed_search.core.data_models import Node, State
from .evaluation import fifo

Key = Tuple[float, Any, int]


@dataclass
class _Entry:
    key: Key
    node: Node


class QueueSet:
    """Priority queue with state-keyed lookup and decrease-key.

    Args:
        evaluate: f-value of a node; lower values are popped first
        tie_policy: secondary sort key for equal f-values (lower first)
    """

    def __init__(self,
                 evaluate: Callable[[Node], float],
                 tie_policy: Optional[Callable[[Node], Any]] = None):
        self.evaluate = evaluate
        self.tie_policy = tie_policy or fifo
        self._slots: Dict[int, _Entry] = {}
        self._heap: List[int] = []
        self._position: Dict[int, int] = {}
        self._lookup: Dict[State, int] = {}
        self._next_slot = itertools.count()
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, state: State) -> bool:
        return state in self._lookup

    def __iter__(self) -> Iterator[Node]:
        """Iterate over frontier nodes in heap (not priority) order."""
        return (self._slots[slot].node for slot in self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def _make_key(self, node: Node) -> Key:
        return (self.evaluate(node), self.tie_policy(node), next(self._sequence))

    def push(self, node: Node) -> int:
        """Insert a node whose state is not yet on the frontier.

        Returns:
            Stable location of the new entry
        """
        if node.state in self._lookup:
            raise ValueError(f"State already on frontier: {node.state!r}")
        slot = next(self._next_slot)
        self._slots[slot] = _Entry(self._make_key(node), node)
        self._heap.append(slot)
        self._position[slot] = len(self._heap) - 1
        self._lookup[node.state] = slot
        self._sift_up(len(self._heap) - 1)
        return slot

    def find(self, state: State) -> Optional[int]:
        """Location of the entry holding ``state``, or None."""
        return self._lookup.get(state)

    def get(self, location: int) -> Node:
        return self._slots[location].node

    def decrease_key(self, location: int, node: Node) -> Node:
        """Replace the entry at ``location`` with ``node`` and restore heap order.

        ``node`` must hold the same state as the entry it replaces.

        Returns:
            The node that was replaced
        """
        entry = self._slots[location]
        if node.state != entry.node.state:
            raise ValueError(
                f"Replacement state {node.state!r} does not match {entry.node.state!r}"
            )
        old = entry.node
        entry.node = node
        entry.key = self._make_key(node)
        self._lookup[node.state] = location
        index = self._position[location]
        self._sift_up(index)
        self._sift_down(self._position[location])
        return old

    def peek(self) -> Node:
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._slots[self._heap[0]].node

    def pop(self) -> Node:
        """Remove and return the node with the lowest key."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        top = self._heap[0]
        last = self._heap.pop()
        del self._position[top]
        if last != top:
            self._heap[0] = last
            self._position[last] = 0
            self._sift_down(0)
        entry = self._slots.pop(top)
        del self._lookup[entry.node.state]
        return entry.node

    def _less(self, i: int, j: int) -> bool:
        return self._slots[self._heap[i]].key < self._slots[self._heap[j]].key

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i]] = i
        self._position[heap[j]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def check_invariants(self) -> None:
        """Raise AssertionError if heap, positions and lookup disagree."""
        assert len(self._heap) == len(self._slots) == len(self._position) == len(self._lookup)
        for index, slot in enumerate(self._heap):
            assert self._position[slot] == index
            assert self._lookup[self._slots[slot].node.state] == slot
            if index > 0:
                assert not self._less(index, (index - 1) // 2)


class PriorityFrontier:
    """Min-heap of nodes without duplicate detection."""

    def __init__(self,
                 evaluate: Callable[[Node], float],
                 tie_policy: Optional[Callable[[Node], Any]] = None):
        self.evaluate = evaluate
        self.tie_policy = tie_policy or fifo
        self._heap: List[Tuple[float, Any, int, Node]] = []
        self._counter = itertools.count()  # insertion order breaks remaining ties

    def push(self, node: Node) -> None:
        heapq.heappush(
            self._heap,
            (self.evaluate(node), self.tie_policy(node), next(self._counter), node)
        )

    def pop(self) -> Node:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[3]

    def peek(self) -> Node:
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._heap[0][3]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap


class ClosedSet:
    """States already expanded by graph search. Only ever grows."""

    def __init__(self):
        self._states: Set[State] = set()

    def add(self, state: State) -> None:
        self._states.add(state)

    def __contains__(self, state: State) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)
