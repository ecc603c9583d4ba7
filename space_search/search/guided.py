# space_search/search/guided.py
# Greedy best-first managers: the frontier is a heap of ScoredEntry, lowest state.score() first.
# States must implement ScoredSearchable, with scores decreasing toward a solution.
from __future__ import annotations

from ..core.context import NoContext, StateParent
from ..core.frontiers import MaxHeap
from ..core.manager import ExplorationManager, HashableMixin, RouteMixin, UnhashableMixin
from ..core.ordering import ScoredEntry


class _GuidedManager(ExplorationManager):

    def __init__(self, initial_state):
        self.fringe = MaxHeap()
        self.place_state(self._initial_item(initial_state))

    def _initial_item(self, initial_state):
        return NoContext(initial_state)

    def pop_state(self):
        return self.fringe.pop().item if self.fringe else None

    def prepare_result_from(self, item):
        return item.state

    def place_state(self, item) -> None:
        self.fringe.push(ScoredEntry(item, item.state.score()))

    def register_current_state(self, item) -> None:
        return None

    def prepare_state(self, context, successor):
        return NoContext(successor)

    def __len__(self) -> int:
        return len(self.fringe)


class _GuidedRouteManager(RouteMixin, _GuidedManager):

    def _initial_item(self, initial_state):
        return self._init_parents(initial_state)

    def register_current_state(self, item: StateParent) -> int:
        return self.parents.push(item)

    def prepare_state(self, context: int, successor) -> StateParent:
        return StateParent(successor, context)


class HashableManager(HashableMixin, _GuidedManager):
    """guided, solution-only yielding, prior state exploration culling search manager."""

    def __init__(self, initial_state):
        super().__init__(initial_state)
        self._init_explored(initial_state)


class UnhashableManager(UnhashableMixin, _GuidedManager):
    """guided, solution-only yielding, unoptimized search manager."""


class HashableRouteManager(HashableMixin, _GuidedRouteManager):
    """guided, solution-route yielding, prior state exploration culling search manager."""

    def __init__(self, initial_state):
        super().__init__(initial_state)
        self._init_explored(initial_state)


class UnhashableRouteManager(UnhashableMixin, _GuidedRouteManager):
    """guided, solution-route yielding, unoptimized search manager."""
