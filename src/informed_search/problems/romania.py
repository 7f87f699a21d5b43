"""The Romania road map from Russell & Norvig, AIMA (Fig. 3.2 and 3.22)."""

from typing import Dict, List, Tuple

from .graph import GraphProblem

ROADS: List[Tuple[str, str, int]] = [
    ("Arad", "Zerind", 75),
    ("Arad", "Sibiu", 140),
    ("Arad", "Timisoara", 118),
    ("Zerind", "Oradea", 71),
    ("Oradea", "Sibiu", 151),
    ("Timisoara", "Lugoj", 111),
    ("Lugoj", "Mehadia", 70),
    ("Mehadia", "Drobeta", 75),
    ("Drobeta", "Craiova", 120),
    ("Craiova", "Rimnicu Vilcea", 146),
    ("Craiova", "Pitesti", 138),
    ("Sibiu", "Fagaras", 99),
    ("Sibiu", "Rimnicu Vilcea", 80),
    ("Rimnicu Vilcea", "Pitesti", 97),
    ("Fagaras", "Bucharest", 211),
    ("Pitesti", "Bucharest", 101),
    ("Bucharest", "Giurgiu", 90),
    ("Bucharest", "Urziceni", 85),
    ("Urziceni", "Hirsova", 98),
    ("Urziceni", "Vaslui", 142),
    ("Hirsova", "Eforie", 86),
    ("Vaslui", "Iasi", 92),
    ("Iasi", "Neamt", 87),
]

# Straight-line distance to Bucharest
STRAIGHT_LINE_TO_BUCHAREST: Dict[str, int] = {
    "Arad": 366, "Bucharest": 0, "Craiova": 160, "Drobeta": 242, "Eforie": 161,
    "Fagaras": 176, "Giurgiu": 77, "Hirsova": 151, "Iasi": 226, "Lugoj": 244,
    "Mehadia": 241, "Neamt": 234, "Oradea": 380, "Pitesti": 100, "Rimnicu Vilcea": 193,
    "Sibiu": 253, "Timisoara": 329, "Urziceni": 80, "Vaslui": 199, "Zerind": 374,
}

CITIES = sorted(STRAIGHT_LINE_TO_BUCHAREST)


def romania_problem(initial: str = "Arad") -> GraphProblem:
    """Drive from ``initial`` to Bucharest, guided by straight-line distance."""
    if initial not in STRAIGHT_LINE_TO_BUCHAREST:
        raise ValueError(f"Unknown city: {initial}")
    return GraphProblem(ROADS, initial, "Bucharest", heuristic=STRAIGHT_LINE_TO_BUCHAREST)
