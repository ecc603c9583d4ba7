# space_search/core/ordering.py
# Pairs a frontier item with a precomputed score so a priority structure can order it.
from __future__ import annotations
from functools import total_ordering
from typing import Any, Generic, Tuple, TypeVar

T = TypeVar("T")


def _rank(score: Any) -> Tuple[bool, Any]:
    # NaN never compares, so it is ranked after every real score
    if score != score:
        return True, 0
    return False, score


@total_ordering
class ScoredEntry(Generic[T]):
    """
    Frontier item plus its score. Comparisons look at the score only and are
    inverted: the entry with the *lower* score is the *greater* one, so a
    max-oriented heap pops the lowest score first.

    A NaN score is treated as worse than any number (explored last), and all
    NaN scores tie with each other.
    """
    __slots__ = ("item", "score")

    def __init__(self, item: T, score: Any):
        self.item = item
        self.score = score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScoredEntry):
            return NotImplemented
        return _rank(self.score) == _rank(other.score)

    def __lt__(self, other: "ScoredEntry") -> bool:
        if not isinstance(other, ScoredEntry):
            return NotImplemented
        return _rank(other.score) < _rank(self.score)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ScoredEntry(item={self.item!r}, score={self.score!r})"
