# space_search/problems/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from ..core.problem import Problem

Coord = Tuple[int, int]

_MOVES = {
    "Left": (-1, 0),
    "Down": (0, -1),
    "Right": (1, 0),
    "Up": (0, 1),
}


class Grid:
    """
    4-neighbor grid with unit step costs.

    - walls: optional boolean numpy array; walls[x, y] True means blocked. Its shape
      also bounds the grid to 0 <= x < shape[0], 0 <= y < shape[1].
    - shape: bounds for an open grid without walls.
    - Neither given: the grid is unbounded.
    """
    def __init__(self, goal: Coord, walls: Optional[np.ndarray] = None, shape: Optional[Tuple[int, int]] = None):
        if walls is not None:
            walls = np.asarray(walls, dtype=bool)
            if walls.ndim != 2:
                raise ValueError(f"walls must be a 2-D mask, got shape {walls.shape}")
            shape = walls.shape
        elif shape is not None:
            walls = np.zeros(shape, dtype=bool)
        self.goal = tuple(goal)
        self.walls = walls
        self.shape = shape

    def passable(self, coord: Coord) -> bool:
        if self.walls is None:
            return True
        x, y = coord
        w, h = self.shape
        return 0 <= x < w and 0 <= y < h and not self.walls[x, y]

    def neighbors(self, coord: Coord) -> Iterator[Tuple[str, Coord]]:
        x, y = coord
        for name, (dx, dy) in _MOVES.items():
            nxt = (x + dx, y + dy)
            if self.passable(nxt):
                yield name, nxt

    def manhattan(self, coord: Coord) -> int:
        return abs(coord[0] - self.goal[0]) + abs(coord[1] - self.goal[1])

    def at(self, x: int, y: int) -> "GridPos":
        return GridPos(x, y, self)


@dataclass(frozen=True)
class GridPos:
    """A cell of a Grid; usable with every manager (Manhattan distance as score, unit edge costs)."""
    x: int
    y: int
    grid: Grid = field(compare=False, repr=False)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def next_states(self) -> Iterator["GridPos"]:
        for _, (nx, ny) in self.grid.neighbors(self.coord):
            yield GridPos(nx, ny, self.grid)

    def next_states_with_costs(self) -> Iterator[Tuple["GridPos", int]]:
        for s in self.next_states():
            yield s, 1

    def is_solution(self) -> bool:
        return self.coord == self.grid.goal

    def score(self) -> int:
        return self.grid.manhattan(self.coord)


class GridProblem(Problem):
    """
    The same grid as an AIMA-style problem, for use through ProblemState.

    - State: (x, y) tuple
    - ACTIONS(s): subset of {'Left','Down','Right','Up'} that keep you in-bounds and off walls
    - RESULT(s,a): next (x, y)
    - c(s,a,s'): 1.0
    - heuristic(s): Manhattan distance (admissible on 4-neighbor grid)
    """
    def __init__(self, grid: Grid, start: Coord):
        self.grid = grid
        self._start = tuple(start)

    def initial_state(self) -> Coord:
        return self._start

    def is_goal(self, state: Coord) -> bool:
        return state == self.grid.goal

    def actions(self, state: Coord) -> Iterable[str]:
        return [name for name, _ in self.grid.neighbors(state)]

    def result(self, state: Coord, action: str) -> Coord:
        dx, dy = _MOVES[action]
        return (state[0] + dx, state[1] + dy)

    def step_cost(self, state: Coord, action: str, next_state: Coord) -> float:
        return 1.0

    def heuristic(self, state: Coord) -> float:
        return float(self.grid.manhattan(state))


def make_walled_grid(size: int = 12) -> Grid:
    """Square grid with a wall across the middle, open at one end; goal in the far corner."""
    walls = np.zeros((size, size), dtype=bool)
    mid = size // 2
    walls[1:, mid] = True
    return Grid(goal=(size - 1, size - 1), walls=walls)
