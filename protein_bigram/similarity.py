from __future__ import annotations

import numpy as np

from .profile import Profile


def shared_bigrams(x: Profile, y: Profile) -> int:
    """Sum over all bigrams of min(x[i], y[i])."""
    return int(np.minimum(x.counts, y.counts).sum(dtype=np.uint64))


def similarity(x: Profile, y: Profile) -> float:
    """Weighted Jaccard similarity of two profiles, in [0, 1].

    shared / (x.total + y.total - shared). Two empty profiles score 0.0.
    """
    shared = shared_bigrams(x, y)
    union = x.total + y.total - shared
    if union == 0:
        return 0.0
    return shared / float(union)
