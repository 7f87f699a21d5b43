"""Shared fixtures for the search tests."""

from collections import Counter

import pytest

from informed_search.problems.graph import GraphProblem


class CountingGraphProblem(GraphProblem):
    """GraphProblem that counts how often each state is expanded."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.expansions = Counter()

    def actions(self, state):
        self.expansions[state] += 1
        return super().actions(state)


@pytest.fixture
def scenario_graph():
    """A->B (1), A->C (4), B->C (1); goal C. Cheapest path A, B, C costs 2."""
    edges = [("A", "B", 1), ("A", "C", 4), ("B", "C", 1)]
    return CountingGraphProblem(edges, "A", "C", directed=True)


@pytest.fixture
def dead_end_problem():
    """Initial state has no actions and is not a goal."""
    return GraphProblem([("X", "Y", 1)], "A", "Y", directed=True)


@pytest.fixture
def equal_cost_graph():
    """Two different paths of cost 2 from S to G."""
    edges = [("S", "L", 1), ("S", "R", 1), ("L", "G", 1), ("R", "G", 1)]
    return GraphProblem(edges, "S", "G", directed=True)


@pytest.fixture
def cyclic_graph():
    """D is reachable via A and via B, and D and E form a cycle.

    S->A (1), S->B (2), A->D (2), B->D (1), D->E (1), E->D (1), E->G (10).
    The cheapest paths, via A or via B, cost 14.
    """
    edges = [
        ("S", "A", 1), ("S", "B", 2), ("A", "D", 2), ("B", "D", 1),
        ("D", "E", 1), ("E", "D", 1), ("E", "G", 10),
    ]
    return CountingGraphProblem(edges, "S", "G", directed=True)
