# space_search/search/a_star.py
"""
A* managers: frontier entries are ordered by f = g + h, where g is the cost
accumulated along the discovered path and h = state.score() is the estimated
remaining cost. States implement CostSearchable.

Costs only need `+`; pass `zero=` for the additive identity when plain 0 is not
right for your cost type (Decimal, numpy scalars, vectors, ...).

Note on the hashable variants: a state is closed the first time it is
generated, so a later, cheaper path to the same state is discarded. On
weighted graphs the route found may cost more than the cheapest one; use the
unhashable variants when that matters.

Every manager keeps the path cost of the last solution it returned in
`solution_cost`, so callers never have to re-derive it from the route.
"""
from __future__ import annotations
from typing import Any, Tuple

from ..core.context import StateCumulativeCost, StateParentCumulativeCost
from ..core.frontiers import MaxHeap
from ..core.manager import ExplorationManager, HashableMixin, RouteMixin, UnhashableMixin
from ..core.ordering import ScoredEntry
from ..core.problem import Additive


def _edge_cost(successor: Tuple[Any, Any]):
    state, cost = successor
    if cost is None:
        raise ValueError(f"Edge cost is None for successor {state!r}.")
    return state, cost


class _AStarManager(ExplorationManager):

    def __init__(self, initial_state, zero: Additive = 0):
        self.zero = zero
        self.solution_cost = None  # g of the last solution handed back
        self.fringe = MaxHeap()
        self.place_state(self._initial_item(initial_state))

    def _initial_item(self, initial_state):
        return StateCumulativeCost(initial_state, self.zero)

    def next_states_iter(self, state):
        return state.next_states_with_costs()

    def pop_state(self):
        return self.fringe.pop().item if self.fringe else None

    def prepare_result_from(self, item):
        self.solution_cost = item.cumulative_cost
        return item.state

    def place_state(self, item) -> None:
        f = item.cumulative_cost + item.state.score()
        self.fringe.push(ScoredEntry(item, f))

    def register_current_state(self, item):
        return item.cumulative_cost

    def prepare_state(self, context, successor):
        state, cost = _edge_cost(successor)
        return StateCumulativeCost(state, context + cost)

    def __len__(self) -> int:
        return len(self.fringe)


class _AStarRouteManager(RouteMixin, _AStarManager):

    def _initial_item(self, initial_state):
        self._init_parents(initial_state)
        return StateParentCumulativeCost(initial_state, None, self.zero)

    def prepare_result_from(self, item: StateParentCumulativeCost):
        self.solution_cost = item.cumulative_cost
        return super().prepare_result_from(item)

    def register_current_state(self, item: StateParentCumulativeCost):
        return self.parents.push(item.to_state_parent()), item.cumulative_cost

    def prepare_state(self, context, successor) -> StateParentCumulativeCost:
        parent, cumulative_cost = context
        state, cost = _edge_cost(successor)
        return StateParentCumulativeCost(state, parent, cumulative_cost + cost)


class HashableManager(HashableMixin, _AStarManager):
    """A* based, solution-only yielding, prior state exploration culling search manager."""

    def __init__(self, initial_state, zero: Additive = 0):
        super().__init__(initial_state, zero=zero)
        self._init_explored(initial_state)


class UnhashableManager(UnhashableMixin, _AStarManager):
    """A* based, solution-only yielding, unoptimized search manager."""


class HashableRouteManager(HashableMixin, _AStarRouteManager):
    """A* based, solution-route yielding, prior state exploration culling search manager."""

    def __init__(self, initial_state, zero: Additive = 0):
        super().__init__(initial_state, zero=zero)
        self._init_explored(initial_state)


class UnhashableRouteManager(UnhashableMixin, _AStarRouteManager):
    """A* based, solution-route yielding, unoptimized search manager."""
