"""Core data models for the search engine."""

from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Tuple

State = Hashable
Action = Any


@dataclass(frozen=True, eq=False)
class Node:
    """Node in the search tree.

    Nodes are immutable and compare by identity: two nodes holding the same
    state on different paths are distinct. Parents are shared between
    siblings and always exist before their children, so the parent chain
    is acyclic.
    """
    state: State
    parent: Optional['Node'] = None
    action: Action = None
    path_cost: float = 0.0
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def ancestors(self):
        """Yield this node and each ancestor up to the root (goal-to-root order)."""
        node = self
        while node is not None:
            yield node
            node = node.parent

    def path(self) -> List['Node']:
        """Get the nodes from the root to this node."""
        return list(reversed(list(self.ancestors())))

    def get_state_sequence(self) -> List[State]:
        """Get the states from the root to this node."""
        return [node.state for node in self.path()]

    def get_action_sequence(self) -> List[Action]:
        """Get the actions that lead from the root to this node."""
        return [node.action for node in self.path()[1:]]

    def __repr__(self) -> str:
        return f"Node(state={self.state!r}, path_cost={self.path_cost}, depth={self.depth})"


def reconstruct_path(node: Node) -> Tuple[List[State], List[Action], float]:
    """Reconstruct the start-to-goal states and actions leading to ``node``.

    Returns:
        Tuple of (states, actions, path cost)
    """
    path = node.path()
    states = [n.state for n in path]
    actions = [n.action for n in path[1:]]
    return states, actions, float(node.path_cost)
