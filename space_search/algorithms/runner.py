# space_search/algorithms/runner.py
# Runs a manager to its first solution under MeasuredRun and packages a SearchResult.
from __future__ import annotations
from typing import Any, Callable, Optional, Type

from ..core.manager import ExplorationManager, RouteMixin
from ..core.metrics import MeasuredRun, SearchResult, route_cost
from ..core.searcher import Searcher


def edge_cost(s: Any, s2: Any) -> Any:
    """Cost of the edge s -> s2 as reported by s.next_states_with_costs(); 1 for plain states."""
    if not hasattr(s, "next_states_with_costs"):
        return 1
    for nxt, cost in s.next_states_with_costs():
        if nxt == s2:
            return cost
    raise ValueError(f"{s2!r} is not a successor of {s!r}")


def run_search(
    manager_cls: Type[ExplorationManager],
    start: Any,
    name: str,
    max_expansions: Optional[int] = None,
    step_cost: Callable[[Any, Any], Any] = edge_cost,
    trace_memory: bool = True,
    **manager_kwargs: Any,
) -> SearchResult:
    searcher = Searcher(manager_cls, start, max_expansions=max_expansions, **manager_kwargs)

    with MeasuredRun(trace_memory=trace_memory) as meter:
        found = searcher.first()
        elapsed, peak = meter.elapsed, meter.peak_kb

    if found is None:
        return SearchResult(name, False, [], float("inf"), searcher.expanded, elapsed, peak,
                            truncated=searcher.truncated, generated=searcher.generated)

    has_route = issubclass(manager_cls, RouteMixin)
    route = found if has_route else [found]
    if hasattr(searcher.manager, "solution_cost"):
        # A* threads g along the exact edges it took; parallel edges make the route ambiguous
        cost = searcher.manager.solution_cost
    elif has_route:
        cost = route_cost(found, step_cost, zero=manager_kwargs.get("zero", 0))
    else:
        # solution-only managers do not know the path, hence no cost
        cost = None
    return SearchResult(name, True, route, cost, searcher.expanded, elapsed, peak,
                        generated=searcher.generated)
