"""Example problems: explicit weighted graphs, the AIMA Romania map and the travelling salesman."""

from .graph import GraphProblem
from .romania import romania_problem, ROADS, STRAIGHT_LINE_TO_BUCHAREST
from .tsp import TSPProblem, TSPState, mst_weight

__all__ = [
    'GraphProblem',
    'romania_problem',
    'ROADS',
    'STRAIGHT_LINE_TO_BUCHAREST',
    'TSPProblem',
    'TSPState',
    'mst_weight'
]
