# space_search/core/searcher.py
# Strategy-agnostic driver: pulls the manager's hooks in order and yields one solution per next().
from __future__ import annotations
import logging
from typing import Any, Generic, Iterator, Optional, Type, TypeVar

from .manager import ExplorationManager

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Searcher(Generic[R]):
    """
    Iterator over the solutions reachable from an initial state.

    Each call to next() resumes from where the frontier was left and runs until
    the next solution or until the frontier is empty. Exhaustion is permanent.

        searcher = Searcher(unguided.HashableRouteManager, start)
        route = next(searcher)

    Keyword arguments other than `max_expansions` are forwarded to the manager
    (e.g. `depth_first=True`, `zero=Decimal(0)`).
    """

    def __init__(
        self,
        manager_cls: Type[ExplorationManager],
        initial_state: Any,
        max_expansions: Optional[int] = None,
        **manager_kwargs: Any,
    ):
        if not (isinstance(manager_cls, type) and issubclass(manager_cls, ExplorationManager)):
            raise TypeError(f"Expected an ExplorationManager subclass, got {manager_cls!r}")
        self._setup(manager_cls(initial_state, **manager_kwargs), max_expansions)

    @classmethod
    def from_manager(cls, manager: ExplorationManager, max_expansions: Optional[int] = None) -> "Searcher":
        """Drive an already constructed manager."""
        if not isinstance(manager, ExplorationManager):
            raise TypeError(f"Expected an ExplorationManager, got {manager!r}")
        self = cls.__new__(cls)
        self._setup(manager, max_expansions)
        return self

    def _setup(self, manager: ExplorationManager, max_expansions: Optional[int]) -> None:
        self.manager = manager
        self.max_expansions = max_expansions
        self.expanded = 0
        self.generated = 0
        self.exhausted = False
        self.truncated = False

    def __iter__(self) -> Iterator[R]:
        return self

    def __next__(self) -> R:
        if self.exhausted:
            raise StopIteration
        manager = self.manager
        while True:
            current = manager.pop_state()
            if current is None:
                logger.debug("Frontier empty after %d expansions", self.expanded)
                self.exhausted = True
                raise StopIteration

            if current.state.is_solution():
                logger.debug("Solution found after %d expansions (%d generated): %r",
                             self.expanded, self.generated, current.state)
                return manager.prepare_result_from(current)

            if self.max_expansions is not None and self.expanded >= self.max_expansions:
                logger.warning("Expansion budget of %d reached; stopping search", self.max_expansions)
                self.exhausted = True
                self.truncated = True
                raise StopIteration

            context = manager.register_current_state(current)
            self.expanded += 1
            for successor in manager.next_states_iter(current.state):
                self.generated += 1
                item = manager.prepare_state(context, successor)
                if manager.valid_state(item):
                    manager.place_state(item)

    def first(self) -> Optional[R]:
        """Next solution, or None if the space is exhausted."""
        return next(self, None)
