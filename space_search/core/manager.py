# space_search/core/manager.py
"""
Exploration-manager contract.

A manager owns the frontier (and, depending on the strategy, a visited set and a
parent arena) and answers the driver's questions: what to look at next, whether a
freshly generated state is worth keeping, and what to hand back once a solution
is found. The driver itself never knows which strategy it is running.

Three independent axes produce the concrete managers in `space_search.search`:

* ordering: unguided deque (breadth-/depth-first) vs. score-ordered heap
* deduplication: `HashableMixin` (visited set) vs. `UnhashableMixin` (none)
* result shape: solution state only vs. route from the start (`RouteMixin`)
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Optional, Set, TypeVar

from .arena import ParentArena
from .context import StateParent

S = TypeVar("S")
Item = TypeVar("Item")


class ExplorationManager(ABC, Generic[S, Item]):

    @abstractmethod
    def __init__(self, initial_state: S):
        """Seed the frontier with exactly one entry derived from `initial_state`."""

    @abstractmethod
    def pop_state(self) -> Optional[Item]:
        """Remove and return the next frontier item, or None when the frontier is empty."""

    @abstractmethod
    def prepare_result_from(self, item: Item) -> Any:
        """Turn a solution item into what the searcher yields."""

    @abstractmethod
    def valid_state(self, item: Item) -> bool:
        """Decide whether a freshly prepared item should enter the frontier."""

    @abstractmethod
    def place_state(self, item: Item) -> None:
        """Insert an admitted item into the frontier."""

    @abstractmethod
    def register_current_state(self, item: Item) -> Any:
        """Called once per expanded item; returns the context handed to its children."""

    @abstractmethod
    def prepare_state(self, context: Any, successor: Any) -> Item:
        """Wrap a raw successor (and, for A*, its edge cost) into a frontier item."""

    def next_states_iter(self, state: S) -> Iterable[Any]:
        return state.next_states()

    @abstractmethod
    def __len__(self) -> int:
        """Number of items waiting in the frontier."""


class HashableMixin:
    """Visited-set deduplication: each distinct state is admitted once, first-seen wins.

    States must be hashable and must not be mutated once handed to the manager.
    """
    explored: Set[Any]

    def _init_explored(self, initial_state) -> None:
        self.explored = {initial_state}

    def valid_state(self, item) -> bool:
        if item.state in self.explored:
            return False
        self.explored.add(item.state)
        return True


class UnhashableMixin:
    """No deduplication; cyclic spaces may never terminate."""

    def valid_state(self, item) -> bool:
        return True


class RouteMixin:
    """Keeps a parent arena and yields the route from the start to the solution."""
    parents: ParentArena

    def _init_parents(self, initial_state) -> StateParent:
        root = StateParent(initial_state, None)
        self.parents = ParentArena(root)
        return root

    def prepare_result_from(self, item):
        return self.parents.reconstruct_route(StateParent(item.state, item.parent))
