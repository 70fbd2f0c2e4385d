"""
profile.py
==========
Bigram profile of a protein sequence.

Each ordered pair of adjacent letters (c1, c2) from A-Z is mapped to the index
(c1 - 'A') * 26 + (c2 - 'A') of a fixed 676-entry count vector. The profile keeps
that vector plus the total number of counted bigrams (len(sequence) - 1).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidAlphabetError

ALPHABET_SIZE = 26
N_BIGRAMS = ALPHABET_SIZE * ALPHABET_SIZE  # 676

_ORD_A = ord("A")
_ORD_Z = ord("Z")


@dataclass(frozen=True, eq=False)
class Profile:
    """Immutable bigram count vector (uint32, shape (676,)) and its total."""

    counts: np.ndarray
    total: int

    def __post_init__(self) -> None:
        counts = np.asarray(self.counts, dtype=np.uint32)
        if counts.shape != (N_BIGRAMS,):
            raise ValueError(f"counts must have shape ({N_BIGRAMS},)")
        if int(counts.sum(dtype=np.uint64)) != int(self.total):
            raise ValueError("total must equal the sum of counts")
        if counts is self.counts:
            counts = counts.copy()
        counts.flags.writeable = False
        object.__setattr__(self, "counts", counts)
        object.__setattr__(self, "total", int(self.total))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self.total == other.total and np.array_equal(self.counts, other.counts)

    def count(self, bigram: str) -> int:
        """Count of a two-letter bigram, e.g. profile.count("MA")."""
        if len(bigram) != 2:
            raise ValueError("bigram must have exactly 2 characters")
        return int(self.counts[bigram_index(bigram[0], bigram[1])])


def bigram_index(c1: str, c2: str) -> int:
    for pos, c in enumerate((c1, c2)):
        if not ("A" <= c <= "Z"):
            raise InvalidAlphabetError(c, pos)
    return (ord(c1) - _ORD_A) * ALPHABET_SIZE + (ord(c2) - _ORD_A)


def empty_profile() -> Profile:
    return Profile(counts=np.zeros((N_BIGRAMS,), dtype=np.uint32), total=0)


def _encode_checked(sequence: str) -> np.ndarray:
    """Return the sequence as uint8 codes, or raise on the first non A-Z character."""
    try:
        raw = sequence.encode("ascii")
    except UnicodeEncodeError as e:
        raise InvalidAlphabetError(sequence[e.start], e.start) from None

    codes = np.frombuffer(raw, dtype=np.uint8)
    bad = np.flatnonzero((codes < _ORD_A) | (codes > _ORD_Z))
    if bad.size:
        pos = int(bad[0])
        raise InvalidAlphabetError(sequence[pos], pos)
    return codes


def build_profile(sequence: str) -> Profile:
    """Build the bigram profile of an uppercase A-Z sequence.

    Sequences shorter than 2 give the all-zero profile.
    Raises InvalidAlphabetError for lowercase letters or any other character.
    """
    codes = _encode_checked(sequence)
    if codes.size < 2:
        return empty_profile()

    letters = codes.astype(np.intp) - _ORD_A
    idx = letters[:-1] * ALPHABET_SIZE + letters[1:]
    counts = np.bincount(idx, minlength=N_BIGRAMS).astype(np.uint32, copy=False)
    return Profile(counts=counts, total=int(idx.size))
