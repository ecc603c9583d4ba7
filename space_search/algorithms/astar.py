# space_search/algorithms/astar.py
from __future__ import annotations
from typing import Any, Optional
from ..search import a_star
from .runner import run_search

def a_star_search(start, hashable: bool = True, route: bool = True, zero: Any = 0,
                  max_expansions: Optional[int] = None):
    """f = g + h. Pass hashable=False on weighted graphs to guarantee the cheapest route."""
    if hashable:
        manager = a_star.HashableRouteManager if route else a_star.HashableManager
    else:
        manager = a_star.UnhashableRouteManager if route else a_star.UnhashableManager
    return run_search(manager, start, name="A*", max_expansions=max_expansions, zero=zero)
