"""Tests for cost functions and tie-break policies."""

import pytest

from informed_search.core import Node
from informed_search.problems.romania import romania_problem
from informed_search.search.evaluation import (
    UniformCost, AStarCost, GreedyCost, WeightedAStarCost,
    create_cost_function, default_cost_function, get_tie_policy, TIE_POLICIES
)
from informed_search.search.graph_search import graph_search


def heuristic(state):
    return {"a": 4.0, "b": 1.0}.get(state, 0.0)


class TestCostFunctions:
    """Test f-value computation."""

    @pytest.fixture
    def node(self):
        return Node("a", path_cost=3.0, depth=2)

    def test_uniform(self, node):
        assert UniformCost().f(node) == 3.0
        assert UniformCost()(node) == 3.0

    def test_astar(self, node):
        cost = AStarCost(heuristic)
        assert cost.h(node) == 4.0
        assert cost.f(node) == 7.0

    def test_astar_without_heuristic(self, node):
        assert AStarCost().f(node) == 3.0

    def test_greedy(self, node):
        assert GreedyCost(heuristic).f(node) == 4.0

    def test_weighted(self, node):
        cost = WeightedAStarCost(heuristic, weight=2.5)
        assert cost.f(node) == 3.0 + 2.5 * 4.0

    def test_weight_one_is_astar(self, node):
        assert WeightedAStarCost(heuristic, 1.0).f(node) == AStarCost(heuristic).f(node)

    def test_weight_below_one_rejected(self):
        with pytest.raises(ValueError, match="weight"):
            WeightedAStarCost(heuristic, weight=0.5)

    def test_none_heuristic_value_is_zero(self, node):
        assert AStarCost(lambda state: None).f(node) == 3.0

    def test_names(self):
        assert UniformCost.name == "uniform"
        assert AStarCost.name == "astar"
        assert GreedyCost.name == "greedy"
        assert WeightedAStarCost.name == "weighted"


class TestCostFunctionFactory:
    """Test creating cost functions by name."""

    @pytest.mark.parametrize("name,cls", [
        ("uniform", UniformCost),
        ("astar", AStarCost),
        ("greedy", GreedyCost),
        ("weighted", WeightedAStarCost),
    ])
    def test_create(self, name, cls):
        assert type(create_cost_function(name, romania_problem(), 1.5)) is cls

    def test_uses_problem_heuristic(self):
        problem = romania_problem("Arad")
        cost = create_cost_function("astar", problem)
        assert cost.f(problem.root()) == 366

    def test_default_is_astar(self):
        problem = romania_problem("Sibiu")
        cost = default_cost_function(problem)
        assert isinstance(cost, AStarCost)
        assert cost.f(problem.root()) == 253

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown cost function"):
            create_cost_function("dijkstra")

    def test_greedy_is_not_optimal(self):
        """Test greedy search follows the heuristic through Fagaras."""
        problem = romania_problem("Arad")
        path = []
        cost = graph_search(problem, path, cost_function=GreedyCost(problem.heuristic))

        assert path == ["Arad", "Sibiu", "Fagaras", "Bucharest"]
        assert cost == 450

    def test_weighted_bound(self):
        """Test weighted A* stays within the weight of the optimum."""
        problem = romania_problem("Arad")
        cost = graph_search(problem, cost_function=WeightedAStarCost(problem.heuristic, 2.0))
        assert 418 <= cost <= 2.0 * 418


class TestTiePolicies:
    """Test tie-break keys."""

    def test_registry(self):
        assert set(TIE_POLICIES) == {
            "fifo", "deeper", "shallower", "lower_path_cost", "higher_path_cost"
        }

    def test_keys(self):
        shallow = Node("s", path_cost=5.0, depth=1)
        deep = Node("d", path_cost=2.0, depth=4)

        assert get_tie_policy("fifo")(shallow) == get_tie_policy("fifo")(deep)
        assert get_tie_policy("deeper")(deep) < get_tie_policy("deeper")(shallow)
        assert get_tie_policy("shallower")(shallow) < get_tie_policy("shallower")(deep)
        assert get_tie_policy("lower_path_cost")(deep) < get_tie_policy("lower_path_cost")(shallow)
        assert get_tie_policy("higher_path_cost")(shallow) < get_tie_policy("higher_path_cost")(deep)

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match="Unknown tie-break policy"):
            get_tie_policy("random")
