# space_search/core/context.py
# Frontier item shapes: a state plus whatever metadata a strategy needs to carry.
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

S = TypeVar("S")
C = TypeVar("C")


@dataclass(frozen=True)
class NoContext(Generic[S]):
    state: S


@dataclass(frozen=True)
class StateParent(Generic[S]):
    state: S
    parent: Optional[int] = None  # arena index; None marks the root


@dataclass(frozen=True)
class StateCumulativeCost(Generic[S, C]):
    state: S
    cumulative_cost: C


@dataclass(frozen=True)
class StateParentCumulativeCost(Generic[S, C]):
    state: S
    parent: Optional[int]
    cumulative_cost: C

    def to_state_parent(self) -> StateParent[S]:
        return StateParent(self.state, self.parent)
