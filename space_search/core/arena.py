# space_search/core/arena.py
# Append-only store of expanded states; children point at parents by index, so routes
# can be rebuilt without any node holding a reference to its parent object.
from __future__ import annotations
from typing import Generic, List, Optional, TypeVar

from .context import StateParent

S = TypeVar("S")


class ParentArena(Generic[S]):
    def __init__(self, root: Optional[StateParent[S]] = None):
        self._entries: List[StateParent[S]] = []
        if root is not None:
            self.push(root)

    def push(self, entry: StateParent[S]) -> int:
        """Append an expanded state's context and return its index."""
        self._entries.append(entry)
        return len(self._entries) - 1

    def __getitem__(self, index: int) -> StateParent[S]:
        if not 0 <= index < len(self._entries):
            # Parents are always pushed before their children, so this is a bug in the core.
            raise AssertionError(
                f"Parent index {index} missing from arena of size {len(self._entries)}"
            )
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def reconstruct_route(self, terminal: StateParent[S]) -> List[S]:
        """Walk parent indices back to the root; returns [root, ..., terminal.state]."""
        route = []
        state, parent = terminal.state, terminal.parent
        while parent is not None:
            route.append(state)
            entry = self[parent]
            state, parent = entry.state, entry.parent
        route.append(state)
        route.reverse()
        return route
