"""Configuration-driven entry point to the search algorithms."""

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from omegaconf import DictConfig

from informed_search.core.data_models import Node
from informed_search.core.exceptions import GoalNotFound
from informed_search.core.problem import Problem
from .evaluation import create_cost_function, get_tie_policy
from .graph_search import graph_search_node
from .rbfs import recursive_best_first_search
from .statistics import SearchStatistics
from .tree_search import tree_search

logger = logging.getLogger(__name__)

ALGORITHMS = ('graph', 'tree', 'rbfs')


@dataclass
class SearchConfig:
    """Configuration for a search run."""
    algorithm: str = 'graph'  # graph, tree or rbfs
    cost_function: str = 'astar'  # uniform, astar, greedy or weighted
    weight: float = 1.0  # heuristic weight for weighted A*
    tie_break: str = 'fifo'
    collect_statistics: bool = False

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm: {self.algorithm} (expected one of {ALGORITHMS})")

    @classmethod
    def from_config(cls, cfg: Optional[DictConfig]) -> 'SearchConfig':
        """Build a SearchConfig from the ``search`` section of a Hydra config."""
        if cfg is None:
            return cls()
        search_cfg = cfg.get('search', cfg)
        defaults = cls()
        return cls(
            algorithm=str(search_cfg.get('algorithm', defaults.algorithm)),
            cost_function=str(search_cfg.get('cost_function', defaults.cost_function)),
            weight=float(search_cfg.get('weight', defaults.weight)),
            tie_break=str(search_cfg.get('tie_break', defaults.tie_break)),
            collect_statistics=bool(search_cfg.get('collect_statistics', defaults.collect_statistics))
        )


@dataclass
class SearchOutcome:
    """Result of a search run.

    ``termination_reason`` is "goal_found", "goal_not_found" or, for RBFS,
    "recursion_limit". ``goal`` is the goal node of a successful run.
    """
    success: bool
    algorithm: str
    path: List[Any] = field(default_factory=list)  # states, start to goal
    actions: List[Any] = field(default_factory=list)
    cost: float = float('inf')
    goal: Optional[Node] = None
    nodes_expanded: int = 0
    statistics: Optional[Dict[str, Any]] = None
    computation_time: float = 0.0
    termination_reason: str = "unknown"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'algorithm': self.algorithm,
            'path': list(self.path),
            'actions': list(self.actions),
            'cost': self.cost,
            'nodes_expanded': self.nodes_expanded,
            'statistics': self.statistics,
            'computation_time': self.computation_time,
            'termination_reason': self.termination_reason
        }


class Searcher:
    """Runs one of the search algorithms as configured."""

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        # Fail early on unknown names rather than at search time.
        self.tie_policy = get_tie_policy(self.config.tie_break)
        create_cost_function(self.config.cost_function, None, self.config.weight)
        logger.info(f"Searcher initialized with algorithm={self.config.algorithm}, "
                    f"cost_function={self.config.cost_function}, tie_break={self.config.tie_break}")

    def search(self, problem: Problem) -> SearchOutcome:
        """Search ``problem`` and report the outcome.

        ``GoalNotFound`` is reported as an unsuccessful outcome rather than
        raised. So is an RBFS run whose path outgrows the interpreter's
        recursion limit.
        """
        config = self.config
        cost_function = create_cost_function(config.cost_function, problem, config.weight)
        # Expansions are always counted; the full record is only reported on request.
        statistics = SearchStatistics()
        start_time = time.perf_counter()

        try:
            if config.algorithm == 'graph':
                goal = graph_search_node(problem, cost_function, self.tie_policy, statistics)
            elif config.algorithm == 'tree':
                goal = tree_search(problem, cost_function, self.tie_policy, statistics)
            else:
                goal = recursive_best_first_search(problem, cost_function, self.tie_policy, statistics)
        except GoalNotFound as e:
            logger.info(f"Search failed after {statistics.expanded} expansions: {e}")
            return self._failure(statistics, start_time, "goal_not_found")
        except RecursionError:
            if config.algorithm != 'rbfs':
                raise
            logger.warning(f"RBFS exceeded the recursion limit ({sys.getrecursionlimit()}) "
                           f"after {statistics.expanded} expansions")
            return self._failure(statistics, start_time, "recursion_limit")

        elapsed = time.perf_counter() - start_time
        logger.info(f"Search succeeded: cost={goal.path_cost}, expanded={statistics.expanded}, "
                    f"time={elapsed:.4f}s")
        return SearchOutcome(
            success=True,
            algorithm=config.algorithm,
            path=goal.get_state_sequence(),
            actions=goal.get_action_sequence(),
            cost=goal.path_cost,
            goal=goal,
            nodes_expanded=statistics.expanded,
            statistics=statistics.to_dict() if self.config.collect_statistics else None,
            computation_time=elapsed,
            termination_reason="goal_found"
        )

    def _failure(self, statistics: SearchStatistics, start_time: float, reason: str) -> SearchOutcome:
        return SearchOutcome(
            success=False,
            algorithm=self.config.algorithm,
            nodes_expanded=statistics.expanded,
            statistics=statistics.to_dict() if self.config.collect_statistics else None,
            computation_time=time.perf_counter() - start_time,
            termination_reason=reason
        )


def create_searcher(algorithm: str = 'graph',
                    cost_function: str = 'astar',
                    weight: float = 1.0,
                    tie_break: str = 'fifo',
                    collect_statistics: bool = False) -> Searcher:
    """Factory function to create a searcher with custom configuration."""
    config = SearchConfig(
        algorithm=algorithm,
        cost_function=cost_function,
        weight=weight,
        tie_break=tie_break,
        collect_statistics=collect_statistics
    )
    return Searcher(config)
