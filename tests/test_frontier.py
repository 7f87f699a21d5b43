"""Tests for frontier structures."""

import random

import pytest

from informed_search.core import Node
from informed_search.search.frontier import QueueSet, PriorityFrontier, ClosedSet


def by_cost(node):
    return node.path_cost


class TestQueueSet:
    """Test the priority queue with state lookup."""

    @pytest.fixture
    def frontier(self):
        return QueueSet(by_cost)

    def test_pop_order(self, frontier):
        """Test nodes come out in ascending f order."""
        for state, cost in [("a", 5), ("b", 1), ("c", 3), ("d", 4), ("e", 2)]:
            frontier.push(Node(state, path_cost=cost))

        popped = [frontier.pop().state for _ in range(5)]
        assert popped == ["b", "e", "c", "d", "a"]
        assert frontier.is_empty()
        assert not frontier

    def test_find_and_get(self, frontier):
        """Test state lookup returns the location of the entry."""
        node = Node("x", path_cost=2)
        location = frontier.push(node)

        assert frontier.find("x") == location
        assert frontier.get(location) is node
        assert "x" in frontier
        assert frontier.find("y") is None
        assert "y" not in frontier

    def test_pop_removes_lookup(self, frontier):
        """Test popping erases the state from the lookup table."""
        frontier.push(Node("x", path_cost=2))
        frontier.pop()

        assert frontier.find("x") is None
        assert len(frontier) == 0

    def test_decrease_key(self, frontier):
        """Test replacing an entry with a cheaper node."""
        frontier.push(Node("a", path_cost=1))
        location = frontier.push(Node("b", path_cost=10))
        frontier.push(Node("c", path_cost=5))

        better = Node("b", path_cost=0.5)
        old = frontier.decrease_key(location, better)

        assert old.path_cost == 10
        assert frontier.find("b") == location
        assert frontier.get(location) is better
        assert frontier.peek() is better
        assert len(frontier) == 3
        frontier.check_invariants()

    def test_decrease_key_rejects_other_state(self, frontier):
        """Test that decrease-key keeps the state of the entry."""
        location = frontier.push(Node("a", path_cost=3))
        with pytest.raises(ValueError):
            frontier.decrease_key(location, Node("b", path_cost=1))

    def test_push_duplicate_state_rejected(self, frontier):
        """Test at most one entry per state."""
        frontier.push(Node("a", path_cost=3))
        with pytest.raises(ValueError):
            frontier.push(Node("a", path_cost=1))

    def test_locations_are_stable(self, frontier):
        """Test locations survive reheapification."""
        locations = {}
        for i, cost in enumerate([9, 8, 7, 6, 5, 4, 3, 2, 1]):
            locations[i] = frontier.push(Node(i, path_cost=cost))

        frontier.pop()
        frontier.pop()
        frontier.decrease_key(locations[0], Node(0, path_cost=0))

        for state in range(7):
            assert frontier.find(state) == locations[state]
            assert frontier.get(locations[state]).state == state
        frontier.check_invariants()

    def test_empty_frontier_errors(self, frontier):
        """Test pop and peek on an empty frontier."""
        with pytest.raises(IndexError):
            frontier.pop()
        with pytest.raises(IndexError):
            frontier.peek()

    def test_equal_keys_are_fifo(self, frontier):
        """Test insertion order decides between equal f-values."""
        for state in "abcd":
            frontier.push(Node(state, path_cost=1))

        assert [frontier.pop().state for _ in range(4)] == list("abcd")

    def test_tie_policy(self):
        """Test the tie policy orders equal f-values."""
        frontier = QueueSet(by_cost, tie_policy=lambda node: -node.depth)
        frontier.push(Node("shallow", path_cost=1, depth=1))
        frontier.push(Node("deep", path_cost=1, depth=5))
        frontier.push(Node("cheap", path_cost=0, depth=0))

        assert [frontier.pop().state for _ in range(3)] == ["cheap", "deep", "shallow"]

    def test_iteration(self, frontier):
        """Test iterating over the frontier yields every node."""
        for state, cost in [("a", 2), ("b", 1)]:
            frontier.push(Node(state, path_cost=cost))

        assert sorted(node.state for node in frontier) == ["a", "b"]

    def test_random_operations_keep_consistency(self):
        """Test heap and lookup agree after any sequence of operations."""
        rng = random.Random(7)
        frontier = QueueSet(by_cost)
        live = {}

        for _ in range(2000):
            op = rng.random()
            if op < 0.45:
                state = rng.randrange(60)
                if state not in live:
                    node = Node(state, path_cost=rng.uniform(0, 100))
                    frontier.push(node)
                    live[state] = node
            elif op < 0.75 and live:
                state = rng.choice(sorted(live))
                location = frontier.find(state)
                better = Node(state, path_cost=live[state].path_cost * rng.random())
                frontier.decrease_key(location, better)
                live[state] = better
                assert frontier.get(frontier.find(state)) is better
            elif live:
                node = frontier.pop()
                assert node.path_cost == min(n.path_cost for n in live.values())
                assert live.pop(node.state) is node

            frontier.check_invariants()
            assert len(frontier) == len(live)
            assert all(frontier.find(state) is not None for state in live)

        costs = [frontier.pop().path_cost for _ in range(len(frontier))]
        assert costs == sorted(costs)


class TestPriorityFrontier:
    """Test the plain priority frontier used by tree search."""

    def test_duplicates_allowed(self):
        """Test the same state can be pushed twice."""
        frontier = PriorityFrontier(by_cost)
        frontier.push(Node("a", path_cost=3))
        frontier.push(Node("a", path_cost=1))

        assert len(frontier) == 2
        assert frontier.pop().path_cost == 1
        assert frontier.pop().path_cost == 3
        assert frontier.is_empty()

    def test_order_and_peek(self):
        """Test ascending order, FIFO among equals."""
        frontier = PriorityFrontier(by_cost)
        for state, cost in [("a", 2), ("b", 1), ("c", 2)]:
            frontier.push(Node(state, path_cost=cost))

        assert frontier.peek().state == "b"
        assert [frontier.pop().state for _ in range(3)] == ["b", "a", "c"]

    def test_empty_frontier_errors(self):
        """Test pop and peek on an empty frontier."""
        frontier = PriorityFrontier(by_cost)
        with pytest.raises(IndexError):
            frontier.pop()
        with pytest.raises(IndexError):
            frontier.peek()


class TestClosedSet:
    """Test the closed set."""

    def test_membership(self):
        closed = ClosedSet()
        closed.add("a")
        closed.add("a")
        closed.add("b")

        assert "a" in closed
        assert "c" not in closed
        assert len(closed) == 2
