"""Diagnostic counters for search runs.

The algorithms only touch these counters when a ``SearchStatistics`` instance
is passed in; they never influence the search itself.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class SearchStatistics:
    """Counters collected during a search."""
    popped: int = 0
    pushed: int = 0
    decreased: int = 0
    discarded: int = 0
    expanded: int = 0
    generated: int = 0
    max_depth_reached: int = 0

    def record_expansion(self, depth: int, successors: int) -> None:
        """Count one node expansion producing ``successors`` children."""
        self.expanded += 1
        self.generated += successors
        if depth > self.max_depth_reached:
            self.max_depth_reached = depth

    @property
    def average_branching_factor(self) -> float:
        if self.expanded == 0:
            return 0.0
        return self.generated / self.expanded

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result['average_branching_factor'] = self.average_branching_factor
        return result
