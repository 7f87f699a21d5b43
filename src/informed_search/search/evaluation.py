"""Evaluation (cost) functions and tie-break policies.

A cost function maps a node to its f-value; the frontier and RBFS order nodes
by ascending f. A tie-break policy maps a node to a secondary sort key that
decides between nodes of equal f, smaller keys first. Whatever remains tied
after that is resolved by insertion order, so every policy yields a total
order and a deterministic search.
"""

from typing import Any, Callable, Dict, Optional

from informed_search.core.data_models import Node, State
from informed_search.core.problem import Problem

Heuristic = Callable[[State], float]
TiePolicy = Callable[[Node], Any]


class CostFunction:
    """Base evaluation function: f(n) = g(n)."""

    name = "uniform"

    def f(self, node: Node) -> float:
        return node.path_cost

    def __call__(self, node: Node) -> float:
        return self.f(node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UniformCost(CostFunction):
    """Uniform-cost ordering, lowest path cost first."""
    pass


class AStarCost(CostFunction):
    """A* ordering: f(n) = g(n) + h(n)."""

    name = "astar"

    def __init__(self, heuristic: Optional[Heuristic] = None):
        self.heuristic = heuristic

    def h(self, node: Node) -> float:
        if self.heuristic is None:
            return 0.0
        value = self.heuristic(node.state)
        return 0.0 if value is None else float(value)

    def f(self, node: Node) -> float:
        return node.path_cost + self.h(node)


class GreedyCost(AStarCost):
    """Greedy best-first ordering: f(n) = h(n). Not optimal."""

    name = "greedy"

    def f(self, node: Node) -> float:
        return self.h(node)


class WeightedAStarCost(AStarCost):
    """Weighted A*: f(n) = g(n) + w * h(n), bounded-suboptimal for w >= 1."""

    name = "weighted"

    def __init__(self, heuristic: Optional[Heuristic] = None, weight: float = 1.0):
        super().__init__(heuristic)
        if weight < 1.0:
            raise ValueError(f"weight must be >= 1.0, got {weight}")
        self.weight = float(weight)

    def f(self, node: Node) -> float:
        return node.path_cost + self.weight * self.h(node)

    def __repr__(self) -> str:
        return f"WeightedAStarCost(weight={self.weight})"


def default_cost_function(problem: Problem) -> CostFunction:
    """A* with the problem's own heuristic (uniform cost when it is zero)."""
    return AStarCost(problem.heuristic)


def create_cost_function(name: str,
                         problem: Optional[Problem] = None,
                         weight: float = 1.0) -> CostFunction:
    """Factory function to create a cost function by name.

    Args:
        name: One of 'uniform', 'astar', 'greedy', 'weighted'
        problem: Problem supplying the heuristic (ignored for 'uniform')
        weight: Heuristic weight for 'weighted'

    Returns:
        Configured cost function
    """
    heuristic = problem.heuristic if problem is not None else None
    if name == 'uniform':
        return UniformCost()
    if name == 'astar':
        return AStarCost(heuristic)
    if name == 'greedy':
        return GreedyCost(heuristic)
    if name == 'weighted':
        return WeightedAStarCost(heuristic, weight)
    raise ValueError(f"Unknown cost function: {name}")


# Tie-break policies

def fifo(node: Node) -> int:
    """Leave ties to insertion order."""
    return 0


def deeper(node: Node) -> int:
    """Prefer deeper nodes."""
    return -node.depth


def shallower(node: Node) -> int:
    """Prefer shallower nodes."""
    return node.depth


def lower_path_cost(node: Node) -> float:
    """Prefer the node with less cost already paid (g)."""
    return node.path_cost


def higher_path_cost(node: Node) -> float:
    """Prefer the node with more cost already paid, i.e. closer to a goal under A*."""
    return -node.path_cost


TIE_POLICIES: Dict[str, TiePolicy] = {
    'fifo': fifo,
    'deeper': deeper,
    'shallower': shallower,
    'lower_path_cost': lower_path_cost,
    'higher_path_cost': higher_path_cost,
}


def get_tie_policy(name: str) -> TiePolicy:
    """Look up a tie-break policy by name."""
    try:
        return TIE_POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown tie-break policy: {name} (expected one of {sorted(TIE_POLICIES)})"
        ) from None
