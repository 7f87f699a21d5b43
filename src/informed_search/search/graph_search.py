"""Best-first graph search with duplicate detection.

Each state is expanded at most once: expanded states go into a closed set and
the frontier never holds two entries for the same state. When a cheaper path
to a state already on the frontier turns up, the frontier entry is replaced
in place (decrease-key).
"""

import logging
from typing import Any, Callable, Optional

from informed_search.core.data_models import Node
from informed_search.core.exceptions import GoalNotFound
from informed_search.core.problem import Problem
from .duplicates import handle_child
from .evaluation import CostFunction, default_cost_function
from .frontier import ClosedSet, QueueSet
from .statistics import SearchStatistics

logger = logging.getLogger(__name__)


def write_path(node: Node, path: Any) -> Any:
    """Append the states from the root to ``node`` onto ``path``, start first."""
    for ancestor in node.path():
        path.append(ancestor.state)
    return path


def graph_search_node(problem: Problem,
                      cost_function: Optional[CostFunction] = None,
                      tie_policy: Optional[Callable[[Node], Any]] = None,
                      statistics: Optional[SearchStatistics] = None) -> Node:
    """Run graph search and return the goal node itself.

    Same search as ``graph_search``; callers that want the actions or the
    node chain use this instead of a path sink.

    Raises:
        GoalNotFound: If the frontier empties without reaching a goal
    """
    cost_function = cost_function or default_cost_function(problem)
    frontier = QueueSet(cost_function.f, tie_policy)
    closed = ClosedSet()

    frontier.push(problem.root())

    while frontier:
        node = frontier.pop()
        logger.debug(f"{node.state!r} <= frontier")
        if statistics is not None:
            statistics.popped += 1

        if problem.goal_test(node.state):
            logger.debug(f"frontier: {len(frontier)}, closed: {len(closed)}")
            return node

        closed.add(node.state)
        actions = list(problem.actions(node.state))
        if statistics is not None:
            statistics.record_expansion(node.depth, len(actions))

        for action in actions:
            successor = problem.result(node.state, action)
            if successor not in closed:
                handle_child(frontier, problem.child(node, action, successor), statistics)

    raise GoalNotFound(f"no goal reachable from {problem.initial!r}")


def graph_search(problem: Problem,
                 path: Optional[Any] = None,
                 cost_function: Optional[CostFunction] = None,
                 tie_policy: Optional[Callable[[Node], Any]] = None,
                 statistics: Optional[SearchStatistics] = None) -> float:
    """Find the cheapest path from ``problem.initial`` to a goal state.

    Args:
        problem: Problem to solve
        path: Sink with an ``append`` method; receives the states of the
            solution from the initial state to the goal
        cost_function: Evaluation function ordering the frontier
            (default: A* with the problem's heuristic)
        tie_policy: Secondary ordering for equal f-values
        statistics: Optional counters to update

    Returns:
        Path cost of the goal node

    Raises:
        GoalNotFound: If the frontier empties without reaching a goal
    """
    goal = graph_search_node(problem, cost_function, tie_policy, statistics)
    if path is not None:
        write_path(goal, path)
    return goal.path_cost
