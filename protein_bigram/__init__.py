"""Protein similarity search over bigram frequency profiles.

This package contains reusable modules for:
- FASTA I/O (streaming record source)
- Bigram profiles (26x26 counts per sequence)
- Weighted Jaccard similarity between profiles
- Parallel, chunked profile construction
- Bounded top-K selection and the text report
"""

from .errors import BatchBuildError, BigramSearchError, InvalidAlphabetError, SourceError
from .ingest import ProfileTable, ingest_fasta, ingest_records
from .profile import Profile, build_profile, empty_profile
from .similarity import similarity
from .topk import BoundedTopK, SimilarityResult, find_similar, select_top_k

__all__ = [
    "BatchBuildError",
    "BigramSearchError",
    "BoundedTopK",
    "InvalidAlphabetError",
    "Profile",
    "ProfileTable",
    "SimilarityResult",
    "SourceError",
    "build_profile",
    "empty_profile",
    "find_similar",
    "ingest_fasta",
    "ingest_records",
    "select_top_k",
    "similarity",
]
