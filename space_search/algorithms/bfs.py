from __future__ import annotations
from typing import Optional
from ..search import unguided
from .runner import run_search

def breadth_first_search(start, hashable: bool = True, route: bool = True, max_expansions: Optional[int] = None):
    manager = _pick_unguided(hashable, route)
    return run_search(manager, start, name="BFS", max_expansions=max_expansions, depth_first=False)

def _pick_unguided(hashable: bool, route: bool):
    if hashable:
        return unguided.HashableRouteManager if route else unguided.HashableManager
    return unguided.UnhashableRouteManager if route else unguided.UnhashableManager
