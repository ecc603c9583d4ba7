from __future__ import annotations
from typing import Optional
from ..search import guided
from .runner import run_search

def greedy_best_first_search(start, hashable: bool = True, route: bool = True, max_expansions: Optional[int] = None):
    # greedy: f = h, lowest state.score() first
    if hashable:
        manager = guided.HashableRouteManager if route else guided.HashableManager
    else:
        manager = guided.UnhashableRouteManager if route else guided.UnhashableManager
    return run_search(manager, start, name="Greedy", max_expansions=max_expansions)
