"""Tests for the exploration managers driven by Searcher."""

from __future__ import annotations

from decimal import Decimal

import pytest

from helpers import Graph, is_valid_route, names
from space_search.core.context import StateParent
from space_search.core.searcher import Searcher
from space_search.problems.grid import Grid
from space_search.problems.romania import romania_start
from space_search.search import a_star, guided, unguided

ALL_MODULES = [unguided, guided, a_star]
HASHABLE = [(m, c) for m in ALL_MODULES for c in (m.HashableManager, m.HashableRouteManager)]


@pytest.fixture
def origin():
    return Grid(goal=(5, 5)).at(0, 0)


@pytest.fixture
def branching():
    # a -> b -> d ; a -> c -> e ; d and e are solutions
    return Graph.unweighted({"a": ["b", "c"], "b": ["d"], "c": ["e"]}, goals={"d", "e"})


class TestGridScenario:

    @pytest.mark.parametrize("module", ALL_MODULES)
    def test_solution_only_yields_goal(self, module, origin) -> None:
        searcher = Searcher(module.HashableManager, origin)
        assert next(searcher).coord == (5, 5)

    def test_breadth_first_route_is_shortest(self, origin) -> None:
        route = next(Searcher(unguided.HashableRouteManager, origin))
        assert len(route) == 11
        assert route[0].coord == (0, 0) and route[-1].coord == (5, 5)
        for a, b in zip(route, route[1:]):
            assert abs(a.x - b.x) + abs(a.y - b.y) == 1

    def test_guided_explores_no_more_than_unguided(self, origin) -> None:
        plain = Searcher(unguided.HashableManager, origin)
        greedy = Searcher(guided.HashableManager, origin)
        assert next(plain).coord == next(greedy).coord == (5, 5)
        assert greedy.expanded <= plain.expanded

    @pytest.mark.parametrize("manager", [a_star.HashableRouteManager, a_star.UnhashableRouteManager])
    def test_a_star_route_matches_shortest(self, manager, origin) -> None:
        route = next(Searcher(manager, origin))
        assert len(route) == 11
        assert is_valid_route(route)

    def test_guided_unhashable_heads_straight_for_goal(self, origin) -> None:
        searcher = Searcher(guided.UnhashableRouteManager, origin)
        route = next(searcher)
        assert len(route) == 11
        assert searcher.expanded == 10

    def test_unhashable_breadth_first_on_small_distance(self) -> None:
        start = Grid(goal=(1, 1)).at(0, 0)
        route = next(Searcher(unguided.UnhashableRouteManager, start))
        assert len(route) == 3
        assert is_valid_route(route)

    def test_depth_first_on_bounded_grid(self) -> None:
        start = Grid(goal=(3, 3), shape=(4, 4)).at(0, 0)
        route = next(Searcher(unguided.HashableRouteManager, start, depth_first=True))
        assert route[0] == start and route[-1].coord == (3, 3)
        assert is_valid_route(route)
        assert len(set(route)) == len(route)


class TestDeduplication:

    @pytest.mark.parametrize("module,manager", HASHABLE)
    def test_no_state_admitted_twice(self, module, manager) -> None:
        placed = []

        class Spy(manager):
            def place_state(self, item):
                placed.append(item.state)
                super().place_state(item)

        graph = Graph.unweighted({"a": ["b", "b", "c"], "b": ["c", "a"], "c": ["a", "b"]})
        spy = Spy(graph.node("a"))
        placed.clear()
        assert list(Searcher.from_manager(spy)) == []
        assert sorted(names(placed)) == ["b", "c"]

    def test_first_seen_wins(self) -> None:
        graph = Graph.unweighted({"a": ["b", "c"], "b": ["d"], "c": ["d"]}, goals={"d"})
        route = next(Searcher(unguided.HashableRouteManager, graph.node("a")))
        assert names(route) == ["a", "b", "d"]

    def test_start_marked_visited_on_construction(self) -> None:
        start = Grid(goal=(9, 9)).at(0, 0)
        manager = unguided.HashableManager(start)
        assert start in manager.explored
        assert len(manager) == 1

    def test_unhashable_admits_everything(self) -> None:
        graph = Graph.unweighted({"a": ["b", "b"]})
        manager = unguided.UnhashableManager(graph.node("a"))
        assert list(Searcher.from_manager(manager)) == []
        assert manager.valid_state(manager.prepare_state(None, graph.node("b")))


class TestRoutes:

    def test_arena_entry_zero_is_start(self, origin) -> None:
        manager = guided.HashableRouteManager(origin)
        assert manager.parents[0] == StateParent(origin, None)

    def test_route_of_start_that_is_a_solution(self) -> None:
        start = Grid(goal=(0, 0)).at(0, 0)
        for module in ALL_MODULES:
            assert next(Searcher(module.HashableRouteManager, start)) == [start]
            assert next(Searcher(module.UnhashableManager, start)) == start

    def test_unguided_unhashable_route_on_tree(self, branching) -> None:
        route = next(Searcher(unguided.UnhashableRouteManager, branching.node("a")))
        assert names(route) == ["a", "b", "d"]


class TestDriver:

    def test_depth_first_flag_can_flip_after_construction(self, branching) -> None:
        manager = unguided.HashableManager(branching.node("a"))
        manager.depth_first = True
        assert next(Searcher.from_manager(manager)).name == "e"
        assert next(Searcher(unguided.HashableManager, branching.node("a"))).name == "d"

    def test_enumerates_every_solution_then_exhausts(self, branching) -> None:
        searcher = Searcher(unguided.HashableManager, branching.node("a"))
        assert [s.name for s in searcher] == ["d", "e"]
        assert searcher.exhausted
        assert searcher.first() is None

    @pytest.mark.parametrize("manager", [m for module in ALL_MODULES for m in (
        module.HashableManager, module.HashableRouteManager)])
    def test_exhausts_when_no_solution_reachable(self, manager) -> None:
        start = Grid(goal=(10, 10), shape=(3, 3)).at(0, 0)
        searcher = Searcher(manager, start)
        with pytest.raises(StopIteration):
            next(searcher)
        with pytest.raises(StopIteration):
            next(searcher)
        assert searcher.expanded == 9

    @pytest.mark.parametrize("manager", [m for module in ALL_MODULES for m in (
        module.UnhashableManager, module.UnhashableRouteManager)])
    def test_unhashable_exhausts_on_finite_tree(self, manager) -> None:
        tree = Graph.unweighted({"a": ["b", "c"], "b": ["d"]})
        searcher = Searcher(manager, tree.node("a"))
        assert list(searcher) == []
        assert searcher.expanded == 4

    def test_expansion_budget_truncates(self) -> None:
        searcher = Searcher(unguided.HashableManager, Grid(goal=(50, 50)).at(0, 0), max_expansions=10)
        assert searcher.first() is None
        assert searcher.truncated
        assert searcher.expanded == 10

    def test_rejects_non_manager(self, origin) -> None:
        with pytest.raises(TypeError):
            Searcher(object, origin)
        with pytest.raises(TypeError):
            Searcher.from_manager(object())


class TestAStar:

    @pytest.fixture
    def diamond(self):
        # a-b-d costs 6, a-c-d costs 5
        return Graph({"a": [("b", 1), ("c", 4)], "b": [("d", 5)], "c": [("d", 1)]}, goals={"d"})

    def test_unhashable_finds_cheapest_route(self, diamond) -> None:
        route = next(Searcher(a_star.UnhashableRouteManager, diamond.node("a")))
        assert names(route) == ["a", "c", "d"]

    def test_hashable_keeps_first_discovered_route(self, diamond) -> None:
        route = next(Searcher(a_star.HashableRouteManager, diamond.node("a")))
        assert names(route) == ["a", "b", "d"]

    def test_romania_exact(self) -> None:
        route = next(Searcher(a_star.UnhashableRouteManager, romania_start()))
        assert [c.name for c in route] == ["Arad", "Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]

    def test_romania_hashable_and_greedy(self) -> None:
        expected = ["Arad", "Sibiu", "Fagaras", "Bucharest"]
        assert [c.name for c in next(Searcher(a_star.HashableRouteManager, romania_start()))] == expected
        assert [c.name for c in next(Searcher(guided.HashableRouteManager, romania_start()))] == expected
        assert [c.name for c in next(Searcher(unguided.HashableRouteManager, romania_start()))] == expected

    def test_custom_zero(self) -> None:
        graph = Graph({"a": [("b", Decimal("0.5"))], "b": [("c", Decimal("0.25"))]}, goals={"c"})
        manager = a_star.UnhashableManager(graph.node("a"), zero=Decimal("0"))
        assert next(Searcher.from_manager(manager)).name == "c"

    def test_cumulative_cost_is_threaded(self, diamond) -> None:
        manager = a_star.UnhashableManager(diamond.node("a"))
        start = manager.pop_state()
        assert start.cumulative_cost == 0
        context = manager.register_current_state(start)
        children = [manager.prepare_state(context, s) for s in manager.next_states_iter(start.state)]
        assert [(c.state.name, c.cumulative_cost) for c in children] == [("b", 1), ("c", 4)]

    def test_none_edge_cost_is_rejected(self) -> None:
        graph = Graph({"a": [("b", None)]}, goals={"b"})
        with pytest.raises(ValueError):
            next(Searcher(a_star.HashableManager, graph.node("a")))

    @pytest.mark.parametrize("cls", [a_star.UnhashableManager, a_star.UnhashableRouteManager])
    def test_solution_cost_is_recorded(self, diamond, cls) -> None:
        manager = cls(diamond.node("a"))
        assert manager.solution_cost is None
        next(Searcher.from_manager(manager))
        assert manager.solution_cost == 5
