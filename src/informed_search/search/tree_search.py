"""Best-first tree search.

No closed set and no duplicate detection: every generated child goes onto the
frontier, so a state reachable along several paths may be expanded several
times. Useful when a closed set would not fit in memory or state equality is
expensive. On graphs with zero- or negative-cost cycles it may not terminate.
"""

import logging
from typing import Any, Callable, Optional

from informed_search.core.data_models import Node
from informed_search.core.exceptions import GoalNotFound
from informed_search.core.problem import Problem
from .evaluation import CostFunction, default_cost_function
from .frontier import PriorityFrontier
from .statistics import SearchStatistics

logger = logging.getLogger(__name__)


def tree_search(problem: Problem,
                cost_function: Optional[CostFunction] = None,
                tie_policy: Optional[Callable[[Node], Any]] = None,
                statistics: Optional[SearchStatistics] = None) -> Node:
    """Search the tree of paths from ``problem.initial`` for a goal.

    Returns:
        The goal node; follow its parents (or call ``Node.path``) for the path

    Raises:
        GoalNotFound: If the frontier empties without reaching a goal
    """
    cost_function = cost_function or default_cost_function(problem)
    frontier = PriorityFrontier(cost_function.f, tie_policy)
    frontier.push(problem.root())

    while frontier:
        node = frontier.pop()
        if statistics is not None:
            statistics.popped += 1

        if problem.goal_test(node.state):
            logger.debug(f"frontier: {len(frontier)}")
            return node

        actions = list(problem.actions(node.state))
        if statistics is not None:
            statistics.record_expansion(node.depth, len(actions))
            statistics.pushed += len(actions)

        for action in actions:
            frontier.push(problem.child(node, action))

    raise GoalNotFound(f"no goal reachable from {problem.initial!r}")
