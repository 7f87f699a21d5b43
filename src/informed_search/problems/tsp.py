"""Travelling salesman as a path-finding problem.

A state is the city the salesman stands in together with the set of cities
visited so far. From the start city every unvisited city is an action; once
all cities are visited the only action left is the return to the start, and
the goal is to stand in the start city with every city visited. The cheapest
path to the goal is therefore the cheapest tour.

The heuristic is the weight of a minimum spanning tree over the cities the
tour still has to connect (the current city, the unvisited cities and the
start), measured with ``min(d[i, j], d[j, i])``. Any completion of the tour
is a spanning path over those cities, so the bound is admissible, and it is
consistent because dropping the current city shrinks the tree by at most the
edge just travelled.
"""

import logging
from typing import Any, Dict, FrozenSet, List, NamedTuple, Optional, Sequence

import numpy as np

from informed_search.core.problem import Problem

logger = logging.getLogger(__name__)


class TSPState(NamedTuple):
    city: int
    visited: FrozenSet[int]


def mst_weight(distances: np.ndarray, cities: Sequence[int]) -> float:
    """Weight of a minimum spanning tree over ``cities`` (Prim's algorithm)."""
    cities = list(cities)
    if len(cities) < 2:
        return 0.0
    sub = distances[np.ix_(cities, cities)]
    in_tree = np.zeros(len(cities), dtype=bool)
    in_tree[0] = True
    best = sub[0].copy()
    total = 0.0
    for _ in range(len(cities) - 1):
        candidates = np.where(in_tree, np.inf, best)
        nearest = int(np.argmin(candidates))
        total += float(candidates[nearest])
        in_tree[nearest] = True
        best = np.minimum(best, sub[nearest])
    return total


class TSPProblem(Problem):
    """Cheapest closed tour through every city of a distance matrix.

    Args:
        distances: Square matrix, ``distances[i, j]`` is the cost of going
            from city ``i`` to city ``j``. It need not be symmetric.
        start: City the tour starts and ends in
    """

    def __init__(self, distances: Any, start: int = 0):
        self.distances = np.asarray(distances, dtype=np.float64)
        if self.distances.ndim != 2 or self.distances.shape[0] != self.distances.shape[1]:
            raise ValueError(f"Distance matrix must be square, got shape {self.distances.shape}")
        self.n = self.distances.shape[0]
        if self.n < 1:
            raise ValueError("A tour needs at least one city")
        if not np.all(np.isfinite(self.distances)) or np.any(self.distances < 0):
            raise ValueError("Distances must be finite and non-negative")
        if not 0 <= start < self.n:
            raise ValueError(f"Start city {start} is not in 0 .. {self.n - 1}")

        self.start = start
        self.cities = frozenset(range(self.n))
        self._symmetric = np.minimum(self.distances, self.distances.T)
        self._mst_cache: Dict[FrozenSet[int], float] = {}
        # City positions, when the distances were generated from points.
        self.points: Optional[np.ndarray] = None
        super().__init__(TSPState(start, frozenset({start})))

    def goal_test(self, state: TSPState) -> bool:
        return state.city == self.start and state.visited == self.cities

    def actions(self, state: TSPState) -> List[int]:
        if state.visited == self.cities:
            return [] if state.city == self.start else [self.start]
        return sorted(self.cities - state.visited)

    def result(self, state: TSPState, action: int) -> TSPState:
        if action not in self.actions(state):
            raise ValueError(f"Cannot move to city {action!r} from {state}")
        return TSPState(action, state.visited | {action})

    def step_cost(self, state: TSPState, action: int, successor: TSPState) -> float:
        return float(self.distances[state.city, successor.city])

    def heuristic(self, state: TSPState) -> float:
        if self.goal_test(state):
            return 0.0
        remaining = (self.cities - state.visited) | {state.city, self.start}
        if remaining not in self._mst_cache:
            self._mst_cache[remaining] = mst_weight(self._symmetric, sorted(remaining))
        return self._mst_cache[remaining]

    def tour(self, states: Sequence[TSPState]) -> List[int]:
        """Cities visited along a state sequence, start city at both ends."""
        return [state.city for state in states]

    def tour_cost(self, cities: Sequence[int]) -> float:
        return float(sum(self.distances[a, b] for a, b in zip(cities, cities[1:])))

    @classmethod
    def random(cls, n: int, seed: Optional[int] = None) -> 'TSPProblem':
        """``n`` random cities in a 100 x 100 square with Euclidean distances."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        rng = np.random.default_rng(seed)
        points = rng.random((n, 2)) * 100.0
        distances = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
        logger.debug(f"Generated {n} random cities")
        problem = cls(distances)
        problem.points = points
        return problem

    def __repr__(self) -> str:
        return f"TSPProblem(cities={self.n}, start={self.start})"
