"""
batch.py
========
Parallel construction of bigram profiles for one batch (chunk) of sequences.

- The output list is sized before any work starts; task i only writes slot i.
- A thread pool of max_workers threads bounds how many profiles are built at once.
- The call returns only after every task has finished, even when some failed.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Sequence

from .errors import BatchBuildError
from .profile import Profile, build_profile


def build_profiles_parallel(
    sequences: Sequence[str],
    max_workers: int,
    profiler: Callable[[str], Profile] = build_profile,
) -> list[Profile]:
    """Return [profiler(s) for s in sequences], computed by at most max_workers threads.

    Output order always matches input order. If any sequence fails, every other
    task still runs to completion, then BatchBuildError is raised for the lowest
    failing index with the original exception chained.
    """
    if max_workers <= 0:
        raise ValueError("max_workers must be positive")

    n = len(sequences)
    profiles: list[Profile | None] = [None] * n
    if n == 0:
        return []

    def _worker(index: int, sequence: str) -> None:
        profiles[index] = profiler(sequence)

    futures: list[Future] = []
    # Leaving the with-block waits for all submitted tasks.
    with ThreadPoolExecutor(max_workers=min(max_workers, n)) as ex:
        for i, seq in enumerate(sequences):
            futures.append(ex.submit(_worker, i, seq))

    errors = [(i, f.exception()) for i, f in enumerate(futures) if f.exception() is not None]
    if errors:
        first_idx, first_exc = errors[0]
        raise BatchBuildError(
            f"Profiling failed for sequence {first_idx} of batch ({len(errors)} failed): {first_exc}",
            index=first_idx,
            failed=len(errors),
        ) from first_exc

    return profiles  # type: ignore[return-value]
