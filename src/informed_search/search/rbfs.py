"""Recursive best-first search (Korf, 1993).

RBFS explores like best-first search but keeps only the current path and the
siblings of each node on it, so memory grows linearly with depth. Every frame
remembers, for each child, the best f-value known for that child's subtree.
When a subtree turns out to be worse than the best alternative, the search
unwinds and the backed-up value is stored on the child, so that a later
re-expansion starts from an accurate bound.

The recursion depth equals the depth of the path being explored, so
solutions deeper than Python's recursion limit cannot be found.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from informed_search.core.data_models import Node
from informed_search.core.exceptions import GoalNotFound
from informed_search.core.problem import Problem
from .evaluation import CostFunction, default_cost_function, fifo
from .statistics import SearchStatistics

logger = logging.getLogger(__name__)

INFINITY = math.inf

SearchResult = Tuple[Optional[Node], float]


@dataclass
class NodeCost:
    """A child node paired with its backed-up cost.

    ``cost`` is the f bound currently known for the subtree below ``node``;
    it starts at the child's propagated f-value and is revised whenever a
    recursive call into the child returns.
    """
    node: Node
    cost: float


class SiblingCosts:
    """The children of one RBFS frame, ordered by ascending cost.

    Children keep the handle (index) they were added under, so a child's cost
    can be revised without disturbing the others. Equal costs are ordered by
    the tie policy and then by handle.
    """

    def __init__(self, tie_policy: Optional[Callable[[Node], Any]] = None):
        self.tie_policy = tie_policy or fifo
        self._entries: List[NodeCost] = []
        self._order: List[int] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, handle: int) -> NodeCost:
        return self._entries[handle]

    def _sort_key(self, handle: int):
        entry = self._entries[handle]
        return (entry.cost, self.tie_policy(entry.node), handle)

    def add(self, node: Node, cost: float) -> int:
        handle = len(self._entries)
        self._entries.append(NodeCost(node, cost))
        self._order.append(handle)
        self._order.sort(key=self._sort_key)
        return handle

    def best_handle(self) -> int:
        if not self._order:
            raise IndexError("no children")
        return self._order[0]

    def best(self) -> NodeCost:
        return self._entries[self.best_handle()]

    def second_best_cost(self) -> float:
        """Cost of the runner-up, or infinity for a single child."""
        if len(self._order) < 2:
            return INFINITY
        return self._entries[self._order[1]].cost

    def revise(self, handle: int, cost: float) -> None:
        """Set the cost of one child and restore the ordering."""
        self._entries[handle].cost = cost
        self._order.sort(key=self._sort_key)

    def ordered(self) -> List[NodeCost]:
        return [self._entries[handle] for handle in self._order]


def rbfs(problem: Problem,
         cost_function: CostFunction,
         node: Node,
         F: float,
         bound: float,
         tie_policy: Optional[Callable[[Node], Any]] = None,
         statistics: Optional[SearchStatistics] = None) -> SearchResult:
    """One RBFS frame.

    Args:
        problem: Problem to solve
        cost_function: Evaluation function f
        node: Node to search below
        F: Stored (possibly backed-up) cost of ``node``
        bound: Upper bound B on acceptable f-values

    Returns:
        (goal, 0) when a goal was found, otherwise (None, revised cost of
        ``node``). A revised cost is always greater than ``bound``.
    """
    logger.debug(f"rbfs({node.state!r}, F={F}, B={bound})")

    f = cost_function.f(node)
    if f > bound:
        return None, f

    if problem.goal_test(node.state):
        return node, 0

    actions = list(problem.actions(node.state))
    if statistics is not None:
        statistics.record_expansion(node.depth, len(actions))
    if not actions:
        return None, INFINITY

    children = SiblingCosts(tie_policy)
    for action in actions:
        child = problem.child(node, action)
        f_child = cost_function.f(child)
        # A node whose stored F exceeds its static f has been expanded before;
        # its children inherit F so the search does not re-explore below it.
        children.add(child, max(F, f_child) if f < F else f_child)

    best = children.best()
    while best.cost <= bound and best.cost < INFINITY:
        handle = children.best_handle()
        result, revised = rbfs(problem, cost_function, best.node, best.cost,
                               min(bound, children.second_best_cost()),
                               tie_policy, statistics)
        if result is not None:
            return result, revised
        children.revise(handle, revised)
        best = children.best()

    return None, best.cost


def recursive_best_first_search(problem: Problem,
                                cost_function: Optional[CostFunction] = None,
                                tie_policy: Optional[Callable[[Node], Any]] = None,
                                statistics: Optional[SearchStatistics] = None) -> Node:
    """Run RBFS from the initial state.

    Returns:
        A goal node from which the path can be reconstructed

    Raises:
        GoalNotFound: If the search returns without a goal
    """
    cost_function = cost_function or default_cost_function(problem)
    root = problem.root()

    goal, _ = rbfs(problem, cost_function, root, cost_function.f(root), INFINITY,
                   tie_policy, statistics)
    if goal is None:
        raise GoalNotFound(f"no goal reachable from {problem.initial!r}")
    return goal
