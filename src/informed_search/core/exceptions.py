"""Exceptions raised by the search engine."""


class SearchError(Exception):
    """Base class for search engine errors."""
    pass


class GoalNotFound(SearchError):
    """Raised when no goal state is reachable from the initial state.

    Graph and tree search raise it when the frontier runs empty; recursive
    best-first search raises it when the top-level call returns no goal.
    """

    def __init__(self, message: str = "goal not found"):
        super().__init__(message)
