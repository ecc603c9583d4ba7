"""Small explicit-graph domain used across the tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple


class Graph:
    """edges: name -> [(neighbor, cost)]; h: name -> heuristic (0 when missing)."""

    def __init__(self, edges: Mapping[str, List[Tuple[str, Any]]], goals: Iterable[str] = (), h=None):
        self.edges = edges
        self.goals = frozenset(goals)
        self.h = h or {}

    def node(self, name: str) -> "GraphNode":
        return GraphNode(name, self)

    @classmethod
    def unweighted(cls, adjacency: Mapping[str, List[str]], goals: Iterable[str] = (), h=None) -> "Graph":
        return cls({k: [(v, 1) for v in vs] for k, vs in adjacency.items()}, goals, h)


@dataclass(frozen=True)
class GraphNode:
    name: str
    graph: Graph = field(compare=False, repr=False)

    def next_states(self):
        for nxt, _ in self.next_states_with_costs():
            yield nxt

    def next_states_with_costs(self):
        for name, cost in self.graph.edges.get(self.name, []):
            yield GraphNode(name, self.graph), cost

    def is_solution(self) -> bool:
        return self.name in self.graph.goals

    def score(self):
        return self.graph.h.get(self.name, 0)


def names(route) -> List[str]:
    return [s.name for s in route]


def is_valid_route(route) -> bool:
    return all(b in list(a.next_states()) for a, b in zip(route, route[1:]))
