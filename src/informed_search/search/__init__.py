"""Search algorithms.

Graph search (duplicate detection with decrease-key), tree search (no
duplicate detection) and recursive best-first search, plus the frontier
structures, evaluation functions and tie-break policies they share.
"""

from .frontier import QueueSet, PriorityFrontier, ClosedSet
from .duplicates import handle_child, ChildFate, ChildOutcome
from .evaluation import (
    CostFunction, UniformCost, AStarCost, GreedyCost, WeightedAStarCost,
    create_cost_function, get_tie_policy
)
from .graph_search import graph_search, graph_search_node
from .tree_search import tree_search
from .rbfs import NodeCost, SiblingCosts, recursive_best_first_search
from .statistics import SearchStatistics
from .searcher import Searcher, SearchConfig, SearchOutcome, create_searcher

__all__ = [
    'QueueSet',
    'PriorityFrontier',
    'ClosedSet',
    'handle_child',
    'ChildFate',
    'ChildOutcome',
    'CostFunction',
    'UniformCost',
    'AStarCost',
    'GreedyCost',
    'WeightedAStarCost',
    'create_cost_function',
    'get_tie_policy',
    'graph_search',
    'graph_search_node',
    'tree_search',
    'NodeCost',
    'SiblingCosts',
    'recursive_best_first_search',
    'SearchStatistics',
    'Searcher',
    'SearchConfig',
    'SearchOutcome',
    'create_searcher'
]
