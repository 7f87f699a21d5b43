"""Core data models and the problem boundary consumed by the search engine."""

from .data_models import Node, reconstruct_path
from .exceptions import SearchError, GoalNotFound
from .problem import Problem

__all__ = [
    'Node',
    'reconstruct_path',
    'SearchError',
    'GoalNotFound',
    'Problem'
]
