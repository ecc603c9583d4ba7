# Defines the interface a state must offer to be explored (successors, goal test, score, edge costs).
# space_search/core/problem.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Iterator, Protocol, Tuple, runtime_checkable

Action = Hashable
State = Hashable


@runtime_checkable
class SolutionIdentifiable(Protocol):
    def is_solution(self) -> bool: ...


@runtime_checkable
class Searchable(SolutionIdentifiable, Protocol):
    """Minimal state contract for breadth-first / depth-first exploration."""
    def next_states(self) -> Iterable[Any]: ...


@runtime_checkable
class Scoreable(Protocol):
    """Scores must decrease with proximity to a solution; lowest is explored first.

    A NaN score is accepted and ranks after every number.
    """
    def score(self) -> Any: ...


@runtime_checkable
class ScoredSearchable(Searchable, Scoreable, Protocol):
    pass


@runtime_checkable
class CostSearchable(SolutionIdentifiable, Scoreable, Protocol):
    """State contract for A*: successors come paired with the cost of the edge taken.

    score() is the estimated remaining cost; it should never overestimate it.
    """
    def next_states_with_costs(self) -> Iterable[Tuple[Any, Any]]: ...


class Additive(Protocol):
    """Numeric capability needed for cost accumulation; the zero is passed to managers."""
    def __add__(self, other: Any) -> Any: ...


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view)."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> float: return 0.0


@dataclass(frozen=True)
class ProblemState:
    """Adapts a `Problem` formulation into a searchable state.

    Equality and hashing only look at the wrapped state, so two adapters over the
    same problem compare equal exactly when their underlying states do.
    """
    state: State
    problem: Problem = field(compare=False, repr=False)

    @classmethod
    def initial(cls, problem: Problem) -> "ProblemState":
        return cls(problem.initial_state(), problem)

    def is_solution(self) -> bool:
        return self.problem.is_goal(self.state)

    def next_states(self) -> Iterator["ProblemState"]:
        for s2, _ in self.next_states_with_costs():
            yield s2

    def next_states_with_costs(self) -> Iterator[Tuple["ProblemState", float]]:
        s = self.state
        for a in self.problem.actions(s):
            s2 = self.problem.result(s, a)
            cost = self.problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(
                    f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Check your problem's ACTIONS/RESULT/cost mapping."
                )
            yield ProblemState(s2, self.problem), cost

    def score(self) -> float:
        h = getattr(self.problem, "heuristic", None)
        if h is None:
            return 0.0
        val = h(self.state)
        return 0.0 if val is None else val
