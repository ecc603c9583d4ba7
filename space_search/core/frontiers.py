# space_search/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque


class DequeFrontier:
    """Double-ended queue: pops the head (breadth-first) or the tail (depth-first)."""
    def __init__(self, items=(), depth_first: bool = False):
        self.q = deque(items)
        self.depth_first = depth_first
    def push(self, x): self.q.append(x)
    def pop(self):
        return self.q.pop() if self.depth_first else self.q.popleft()
    def __len__(self): return len(self.q)


class _Slot:
    # heapq is a min-heap; flipping the comparison turns it into "pop largest".
    __slots__ = ("item", "seq")
    def __init__(self, item, seq):
        self.item = item
        self.seq = seq
    def __lt__(self, other):
        if self.item == other.item:
            return self.seq < other.seq  # equal items leave in insertion order
        return other.item < self.item


class MaxHeap:
    """Pops the largest item; ties are broken first-in, first-out."""
    def __init__(self, items=()):
        self.h = []
        self.counter = 0  # tie-breaker for stability
        for x in items:
            self.push(x)
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, _Slot(x, self.counter))
    def pop(self):
        return heapq.heappop(self.h).item
    def __len__(self): return len(self.h)
