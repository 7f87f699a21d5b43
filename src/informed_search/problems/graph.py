"""Route finding on an explicit weighted graph.

States are vertex labels; the action to take in a vertex is the neighbour to
move to, so ``result(s, a) == a`` and the step cost is the edge weight.
Heuristic values come either from a lookup table or from vertex coordinates
(straight-line distance to the nearest goal).
"""

import logging
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from informed_search.core.problem import Problem

logger = logging.getLogger(__name__)

Edge = Tuple[Hashable, Hashable, float]


class GraphProblem(Problem):
    """Shortest path between vertices of a weighted graph.

    Args:
        edges: (source, target, cost) triples
        initial: Start vertex
        goals: One goal vertex or an iterable of goal vertices
        directed: If False, every edge can be travelled both ways
        heuristic: Optional table of heuristic values per vertex
        coordinates: Optional vertex positions for a straight-line heuristic
    """

    def __init__(self,
                 edges: Iterable[Edge],
                 initial: Hashable,
                 goals: Any,
                 directed: bool = False,
                 heuristic: Optional[Mapping[Hashable, float]] = None,
                 coordinates: Optional[Mapping[Hashable, Sequence[float]]] = None):
        super().__init__(initial)
        if isinstance(goals, (str, bytes)) or not isinstance(goals, Iterable):
            goals = [goals]
        self.goals = frozenset(goals)
        self.directed = directed
        self.graph: Dict[Hashable, Dict[Hashable, float]] = {}

        self.add_vertex(initial)
        for goal in self.goals:
            self.add_vertex(goal)
        for source, target, cost in edges:
            self.add_edge(source, target, cost)

        self.heuristic_table = dict(heuristic) if heuristic is not None else None
        self.coordinates: Optional[Dict[Hashable, np.ndarray]] = None
        self._goal_coordinates: Optional[np.ndarray] = None
        if coordinates is not None:
            self.coordinates = {v: np.asarray(p, dtype=np.float64) for v, p in coordinates.items()}
            missing = [g for g in self.goals if g not in self.coordinates]
            if missing:
                raise ValueError(f"Goal vertices without coordinates: {missing}")
            self._goal_coordinates = np.stack([self.coordinates[g] for g in self.goals])

    def add_vertex(self, vertex: Hashable) -> None:
        self.graph.setdefault(vertex, {})

    def add_edge(self, source: Hashable, target: Hashable, cost: float) -> None:
        cost = float(cost)
        if cost < 0:
            raise ValueError(f"Negative edge cost {cost} on {source!r} -> {target!r}")
        self.add_vertex(source)
        self.add_vertex(target)
        self.graph[source][target] = cost
        if not self.directed:
            self.graph[target][source] = cost

    @property
    def vertices(self) -> List[Hashable]:
        return list(self.graph)

    def edges(self) -> Iterator[Edge]:
        for source, neighbours in self.graph.items():
            for target, cost in neighbours.items():
                yield source, target, cost

    def goal_test(self, state: Hashable) -> bool:
        return state in self.goals

    def actions(self, state: Hashable) -> List[Hashable]:
        return list(self.graph.get(state, ()))

    def result(self, state: Hashable, action: Hashable) -> Hashable:
        if action not in self.graph.get(state, ()):
            raise ValueError(f"No edge {state!r} -> {action!r}")
        return action

    def step_cost(self, state: Hashable, action: Hashable, successor: Hashable) -> float:
        return self.graph[state][successor]

    def heuristic(self, state: Hashable) -> float:
        if self.heuristic_table is not None:
            return float(self.heuristic_table.get(state, 0.0))
        if self.coordinates is not None and state in self.coordinates:
            distances = np.linalg.norm(self._goal_coordinates - self.coordinates[state], axis=1)
            return float(distances.min())
        return 0.0

    def path_cost(self, states: Sequence[Hashable]) -> float:
        """Total cost of walking ``states`` in order."""
        return sum(self.graph[a][b] for a, b in zip(states, states[1:]))

    @classmethod
    def from_matrix(cls,
                    labels: Sequence[Hashable],
                    matrix: Any,
                    initial: Hashable,
                    goals: Any,
                    **kwargs) -> 'GraphProblem':
        """Build a directed problem from an adjacency matrix.

        ``matrix[i][j]`` is the cost of the edge from ``labels[i]`` to
        ``labels[j]``; ``inf`` or ``nan`` means there is no edge.
        """
        costs = np.asarray(matrix, dtype=np.float64)
        if costs.shape != (len(labels), len(labels)):
            raise ValueError(
                f"Adjacency matrix shape {costs.shape} does not match {len(labels)} labels"
            )
        edges = [(labels[i], labels[j], costs[i, j]) for i, j in np.argwhere(np.isfinite(costs))]
        problem = cls(edges, initial, goals, directed=True, **kwargs)
        for label in labels:
            problem.add_vertex(label)
        return problem

    @classmethod
    def random(cls,
               n: int,
               density: float = 0.3,
               seed: Optional[int] = None,
               directed: bool = True,
               detour: float = 0.5) -> 'GraphProblem':
        """Generate a random graph on vertices ``0 .. n-1`` in the plane.

        Each edge costs its Euclidean length times a random factor in
        ``[1, 1 + detour]``, so the straight-line heuristic is admissible
        and consistent. The search runs from vertex 0 to vertex ``n - 1``.
        """
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        rng = np.random.default_rng(seed)
        points = rng.random((n, 2)) * 100.0
        mask = rng.random((n, n)) < density
        np.fill_diagonal(mask, False)
        lengths = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
        costs = np.round(lengths * (1.0 + detour * rng.random((n, n))), 3)
        # Rounding must not bring a cost below the straight-line distance.
        costs = np.maximum(costs, np.ceil(lengths * 1000.0) / 1000.0)

        edges = [(int(i), int(j), float(costs[i, j])) for i, j in np.argwhere(mask)]
        coordinates = {i: points[i] for i in range(n)}
        logger.debug(f"Generated random graph with {n} vertices and {len(edges)} edges")
        problem = cls(edges, 0, n - 1, directed=directed, coordinates=coordinates)
        for i in range(n):
            problem.add_vertex(i)
        return problem

    def __repr__(self) -> str:
        return (f"GraphProblem(vertices={len(self.graph)}, initial={self.initial!r}, "
                f"goals={sorted(self.goals, key=repr)})")
