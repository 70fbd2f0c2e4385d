import random
import threading
import time

import pytest

from protein_bigram.batch import build_profiles_parallel
from protein_bigram.errors import BatchBuildError, InvalidAlphabetError
from protein_bigram.profile import build_profile


def _seqs(n, seed=11):
    rng = random.Random(seed)
    alphabet = "ACDEFGHIKLMNPQRSTVWY"
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40))) for _ in range(n)]


@pytest.mark.parametrize("max_workers", [1, 2, 6, 64])
def test_matches_sequential(max_workers):
    seqs = _seqs(150)
    expected = [build_profile(s) for s in seqs]
    assert build_profiles_parallel(seqs, max_workers) == expected


def test_order_kept_when_completion_order_differs():
    seqs = ["MA", "KL", "QQ", "WY", "AC"]
    delays = {"MA": 0.05, "KL": 0.0, "QQ": 0.03, "WY": 0.0, "AC": 0.01}

    def slow_profiler(seq):
        time.sleep(delays[seq])
        return build_profile(seq)

    out = build_profiles_parallel(seqs, 5, profiler=slow_profiler)
    assert out == [build_profile(s) for s in seqs]


def test_concurrency_limit():
    lock = threading.Lock()
    running = 0
    peak = 0

    def tracking_profiler(seq):
        nonlocal running, peak
        with lock:
            running += 1
            peak = max(peak, running)
        time.sleep(0.005)
        with lock:
            running -= 1
        return build_profile(seq)

    build_profiles_parallel(_seqs(40), 3, profiler=tracking_profiler)
    assert 1 <= peak <= 3


def test_empty_batch():
    assert build_profiles_parallel([], 4) == []


def test_failure_waits_for_all_and_reports_first_index():
    seqs = ["MA", "Mx", "KL", "k", "WY"]
    finished = []

    def recording_profiler(seq):
        prof = build_profile(seq)
        finished.append(seq)
        return prof

    with pytest.raises(BatchBuildError) as exc:
        build_profiles_parallel(seqs, 2, profiler=recording_profiler)
    assert exc.value.index == 1
    assert exc.value.failed == 2
    assert isinstance(exc.value.__cause__, InvalidAlphabetError)
    assert sorted(finished) == ["KL", "MA", "WY"]


def test_invalid_max_workers():
    with pytest.raises(ValueError):
        build_profiles_parallel(["MA"], 0)
