"""File I/O for graph problems and search results."""

from .io import load_graph_problem, graph_problem_from_dict, read_graph_document, save_results

__all__ = [
    'load_graph_problem',
    'graph_problem_from_dict',
    'read_graph_document',
    'save_results'
]
