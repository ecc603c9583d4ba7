# space_search/search/unguided.py
# Breadth-first / depth-first managers. Order is set by the `depth_first` flag,
# which may be flipped between pulls; the default is breadth-first.
from __future__ import annotations

from ..core.context import NoContext, StateParent
from ..core.frontiers import DequeFrontier
from ..core.manager import ExplorationManager, HashableMixin, RouteMixin, UnhashableMixin


class _UnguidedManager(ExplorationManager):

    def __init__(self, initial_state, depth_first: bool = False):
        self.fringe = DequeFrontier([self._initial_item(initial_state)], depth_first=depth_first)

    @property
    def depth_first(self) -> bool:
        return self.fringe.depth_first

    @depth_first.setter
    def depth_first(self, value: bool) -> None:
        self.fringe.depth_first = value

    def _initial_item(self, initial_state):
        return NoContext(initial_state)

    def pop_state(self):
        return self.fringe.pop() if self.fringe else None

    def prepare_result_from(self, item):
        return item.state

    def place_state(self, item) -> None:
        self.fringe.push(item)

    def register_current_state(self, item) -> None:
        return None

    def prepare_state(self, context, successor):
        return NoContext(successor)

    def __len__(self) -> int:
        return len(self.fringe)


class _UnguidedRouteManager(RouteMixin, _UnguidedManager):

    def _initial_item(self, initial_state):
        return self._init_parents(initial_state)

    def register_current_state(self, item: StateParent) -> int:
        return self.parents.push(item)

    def prepare_state(self, context: int, successor) -> StateParent:
        return StateParent(successor, context)


class HashableManager(HashableMixin, _UnguidedManager):
    """unguided, solution-only yielding, prior state exploration culling search manager."""

    def __init__(self, initial_state, depth_first: bool = False):
        super().__init__(initial_state, depth_first=depth_first)
        self._init_explored(initial_state)


class UnhashableManager(UnhashableMixin, _UnguidedManager):
    """unguided, solution-only yielding, unoptimized search manager."""


class HashableRouteManager(HashableMixin, _UnguidedRouteManager):
    """unguided, solution-route yielding, prior state exploration culling search manager."""

    def __init__(self, initial_state, depth_first: bool = False):
        super().__init__(initial_state, depth_first=depth_first)
        self._init_explored(initial_state)


class UnhashableRouteManager(UnhashableMixin, _UnguidedRouteManager):
    """unguided, solution-route yielding, unoptimized search manager."""
