"""
topk.py
=======
Bounded top-K selection of the most similar profiles.

A min-heap of at most K entries keeps the best scores seen so far: the heap root
is the weakest retained entry, and a new entry replaces it only when its score is
strictly larger. Memory stays O(K) and the cost is O(N log K) for N profiles.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from .profile import Profile, build_profile
from .similarity import similarity

if TYPE_CHECKING:
    from .ingest import ProfileTable


@dataclass(frozen=True)
class SimilarityResult:
    score: float  # weighted Jaccard similarity in [0, 1]
    name: str  # record name (FASTA header)
    index: int  # position in the profile table


class BoundedTopK:
    """Keeps the K highest-scoring entries pushed into it.

    On equal scores the entry pushed first wins, so results are deterministic
    and follow table order.
    """

    def __init__(self, k: int) -> None:
        if k <= 0:
            raise ValueError("k must be positive")
        self.k = k
        # (score, -index, name): among equal scores the latest index sits at the root.
        self._heap: list[tuple[float, int, str]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def min_score(self) -> float | None:
        return self._heap[0][0] if self._heap else None

    def push(self, score: float, name: str, index: int) -> bool:
        """Offer an entry. Returns True if it was retained."""
        item = (score, -index, name)
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, item)
            return True
        if score > self._heap[0][0]:
            heapq.heapreplace(self._heap, item)
            return True
        return False

    def results(self) -> list[SimilarityResult]:
        """Retained entries, best first."""
        ordered = sorted(self._heap, key=lambda it: (-it[0], -it[1]))
        return [SimilarityResult(score=s, name=n, index=-neg_i) for s, neg_i, n in ordered]


def select_top_k(query: Profile, table: ProfileTable | Iterable[tuple[str, Profile]], k: int) -> list[SimilarityResult]:
    """Score every table entry against the query and keep the K best, best first.

    Returns min(k, len(table)) results.
    """
    top = BoundedTopK(k)
    for i, (name, profile) in enumerate(table):
        top.push(similarity(query, profile), name, i)
    return top.results()


def find_similar(query_sequence: str, table: ProfileTable | Iterable[tuple[str, Profile]], k: int) -> list[SimilarityResult]:
    """Profile a query sequence and return its top-K most similar table entries."""
    return select_top_k(build_profile(query_sequence), table, k)
