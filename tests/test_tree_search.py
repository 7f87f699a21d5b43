"""Tests for best-first tree search."""

import pytest

from informed_search.core import GoalNotFound
from informed_search.problems.romania import romania_problem
from informed_search.search.evaluation import UniformCost
from informed_search.search.graph_search import graph_search
from informed_search.search.statistics import SearchStatistics
from informed_search.search.tree_search import tree_search


class TestTreeSearch:
    """Test tree search without duplicate detection."""

    def test_cheapest_path(self, scenario_graph):
        goal = tree_search(scenario_graph)

        assert goal.path_cost == 2
        assert goal.get_state_sequence() == ["A", "B", "C"]
        assert goal.get_action_sequence() == ["B", "C"]

    def test_dead_end(self, dead_end_problem):
        with pytest.raises(GoalNotFound):
            tree_search(dead_end_problem)

    def test_initial_state_is_goal(self, scenario_graph):
        scenario_graph.goals = frozenset({"A"})
        goal = tree_search(scenario_graph)

        assert goal.is_root
        assert goal.path_cost == 0

    def test_reexpands_states(self, cyclic_graph):
        """Test a state reached along two paths is expanded more than once."""
        goal = tree_search(cyclic_graph)

        assert goal.path_cost == 14
        assert cyclic_graph.expansions["D"] >= 2

    def test_graph_search_expands_less(self, cyclic_graph):
        """Test the same problem under graph search expands D only once."""
        graph_search(cyclic_graph)
        assert cyclic_graph.expansions["D"] == 1

    def test_statistics(self, scenario_graph):
        stats = SearchStatistics()
        tree_search(scenario_graph, statistics=stats)

        # A generates B and C; B generates another C.
        assert stats.expanded == 2
        assert stats.pushed == 3
        assert stats.popped == 3
        assert stats.max_depth_reached == 1

    def test_romania(self):
        """Test the optimal Arad to Bucharest route."""
        goal = tree_search(romania_problem("Arad"))

        assert goal.path_cost == 418
        assert goal.get_state_sequence() == ["Arad", "Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]

    def test_same_cost_as_graph_search(self, equal_cost_graph):
        goal = tree_search(equal_cost_graph, cost_function=UniformCost())
        assert goal.path_cost == graph_search(equal_cost_graph, cost_function=UniformCost())
