"""Domain-independent informed search.

Graph search, tree search and recursive best-first search over any problem
that implements :class:`informed_search.core.Problem`.
"""

from .core import Node, Problem, GoalNotFound, SearchError, reconstruct_path
from .search import (
    graph_search, tree_search, recursive_best_first_search,
    Searcher, SearchConfig, SearchOutcome, create_searcher
)

__version__ = "0.1.0"

__all__ = [
    'Node',
    'Problem',
    'GoalNotFound',
    'SearchError',
    'reconstruct_path',
    'graph_search',
    'tree_search',
    'recursive_best_first_search',
    'Searcher',
    'SearchConfig',
    'SearchOutcome',
    'create_searcher'
]
