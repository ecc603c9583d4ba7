# space_search/algorithms/dfs.py
# Depth-first search: the unguided managers with their deque popped from the back.
# Without deduplication DFS does not terminate on cyclic spaces; keep hashable=True there.
from __future__ import annotations
from typing import Optional
from .bfs import _pick_unguided
from .runner import run_search

def depth_first_search(start, hashable: bool = True, route: bool = True, max_expansions: Optional[int] = None):
    manager = _pick_unguided(hashable, route)
    return run_search(manager, start, name="DFS", max_expansions=max_expansions, depth_first=True)
