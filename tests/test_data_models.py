"""Tests for search nodes and the problem boundary."""

import pytest

from informed_search.core import Node, Problem, reconstruct_path
from informed_search.problems.graph import GraphProblem


class LineProblem(Problem):
    """States 0..n on a line; each step right costs 2."""

    def __init__(self, length: int = 3):
        super().__init__(0)
        self.length = length

    def goal_test(self, state):
        return state == self.length

    def actions(self, state):
        return ['right'] if state < self.length else []

    def result(self, state, action):
        return state + 1

    def step_cost(self, state, action, successor):
        return 2


class TestNode:
    """Test Node functionality."""

    def test_root_node(self):
        """Test default values of a root node."""
        node = Node("A")

        assert node.state == "A"
        assert node.parent is None
        assert node.action is None
        assert node.path_cost == 0.0
        assert node.depth == 0
        assert node.is_root

    def test_nodes_are_immutable(self):
        """Test that node fields cannot be reassigned."""
        node = Node("A")
        with pytest.raises(AttributeError):
            node.path_cost = 3.0

    def test_identity_equality(self):
        """Test that nodes with equal states are still distinct nodes."""
        node1 = Node("A")
        node2 = Node("A")

        assert node1 != node2
        assert node1 == node1
        assert len({node1, node2}) == 2

    def test_path_reconstruction(self):
        """Test reconstruction of the path from a node chain."""
        root = Node("A")
        child = Node("B", parent=root, action="go-B", path_cost=1.0, depth=1)
        grandchild = Node("C", parent=child, action="go-C", path_cost=3.0, depth=2)

        assert [n.state for n in grandchild.path()] == ["A", "B", "C"]
        assert grandchild.get_state_sequence() == ["A", "B", "C"]
        assert grandchild.get_action_sequence() == ["go-B", "go-C"]
        assert [n.state for n in grandchild.ancestors()] == ["C", "B", "A"]

        states, actions, cost = reconstruct_path(grandchild)
        assert states == ["A", "B", "C"]
        assert actions == ["go-B", "go-C"]
        assert cost == 3.0

    def test_shared_parent(self):
        """Test that siblings share their parent."""
        root = Node("A")
        left = Node("B", parent=root, path_cost=1.0, depth=1)
        right = Node("C", parent=root, path_cost=1.0, depth=1)

        assert left.parent is right.parent
        assert left.path()[0] is right.path()[0]


class TestProblemPolicies:
    """Test the default create and child policies."""

    def test_root(self):
        """Test root construction from the initial state."""
        problem = LineProblem()
        root = problem.root()

        assert root.state == 0
        assert root.path_cost == 0.0
        assert root.depth == 0
        assert root.parent is None

    def test_child_path_cost_invariant(self):
        """Test path_cost(child) == path_cost(parent) + step_cost."""
        problem = LineProblem()
        node = problem.root()
        for depth in range(1, 4):
            child = problem.child(node, 'right')
            assert child.parent is node
            assert child.state == depth
            assert child.depth == depth
            assert child.path_cost == node.path_cost + problem.step_cost(node.state, 'right', child.state)
            node = child

    def test_child_with_known_successor(self):
        """Test that a supplied successor is used as is."""
        problem = GraphProblem([("A", "B", 5)], "A", "B")
        child = problem.child(problem.root(), "B", "B")

        assert child.state == "B"
        assert child.path_cost == 5.0

    def test_default_step_cost_and_heuristic(self):
        """Test the unit step cost and zero heuristic defaults."""
        class Minimal(Problem):
            def goal_test(self, state):
                return False

            def actions(self, state):
                return []

            def result(self, state, action):
                return state

        problem = Minimal("s")
        assert problem.step_cost("s", None, "s") == 1.0
        assert problem.heuristic("s") == 0.0

    def test_step_cost_none_raises(self):
        """Test that a missing step cost is reported."""
        class Broken(LineProblem):
            def step_cost(self, state, action, successor):
                return None

        problem = Broken()
        with pytest.raises(ValueError, match="step_cost returned None"):
            problem.child(problem.root(), 'right')

    def test_custom_create_policy(self):
        """Test that child construction goes through create."""
        created = []

        class Recording(LineProblem):
            def create(self, state, parent, action, cost):
                node = super().create(state, parent, action, cost)
                created.append(node)
                return node

        problem = Recording()
        root = problem.root()
        child = problem.child(root, 'right')

        assert created == [root, child]

    def test_problem_is_abstract(self):
        """Test that Problem cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Problem("A")
