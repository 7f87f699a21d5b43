"""Problem boundary consumed by the search algorithms.

A problem supplies the initial state, the goal test, the actions available in
a state, the transition (result) function and the step cost. Node
construction goes through the ``create`` and ``child`` policies, which
subclasses may override, e.g. to attach domain data to nodes.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .data_models import Action, Node, State


class Problem(ABC):
    """Abstract search problem."""

    def __init__(self, initial: State):
        self.initial = initial

    @abstractmethod
    def goal_test(self, state: State) -> bool:
        """Return True if ``state`` is a goal state."""

    @abstractmethod
    def actions(self, state: State) -> Sequence[Action]:
        """Return the actions applicable in ``state`` (finite, may be empty)."""

    @abstractmethod
    def result(self, state: State, action: Action) -> State:
        """Return the state reached by applying ``action`` in ``state``."""

    def step_cost(self, state: State, action: Action, successor: State) -> float:
        """Cost of moving from ``state`` to ``successor`` via ``action``."""
        return 1.0

    def heuristic(self, state: State) -> float:
        """Estimated remaining cost from ``state`` to a goal."""
        return 0.0

    def create(self, state: State, parent: Optional[Node], action: Action, cost: float) -> Node:
        """Build a node. ``cost`` is the full path cost of the new node."""
        depth = 0 if parent is None else parent.depth + 1
        return Node(state=state, parent=parent, action=action, path_cost=cost, depth=depth)

    def root(self) -> Node:
        """Build the root node for the initial state."""
        return self.create(self.initial, None, None, 0.0)

    def child(self, parent: Node, action: Action, successor: Optional[State] = None) -> Node:
        """Build the child of ``parent`` reached by ``action``.

        The successor state is computed with ``result`` unless the caller
        already has it.
        """
        if successor is None:
            successor = self.result(parent.state, action)
        cost = self.step_cost(parent.state, action, successor)
        if cost is None:
            raise ValueError(
                f"step_cost returned None for ({parent.state!r}, {action!r}, {successor!r})"
            )
        return self.create(successor, parent, action, parent.path_cost + float(cost))
