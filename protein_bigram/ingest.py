"""
ingest.py
=========
Chunked ingestion: record source -> bigram profiles.

Records are buffered in chunks of chunk_size. Each full chunk (and the partial
last one) goes through the parallel batch builder, then its names and profiles
are appended to the ProfileTable in input order. Chunks run strictly one after
the other, so only the sequences of one chunk are held in memory at a time.
"""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from tqdm import tqdm

from .batch import build_profiles_parallel
from .errors import BatchBuildError, SourceError
from .fasta import count_fasta_records, read_fasta
from .profile import Profile

BatchBuilder = Callable[[Sequence[str], int], "list[Profile]"]


class ProfileTable:
    """Names and profiles, parallel-indexed, in ingestion order.

    complete is False when ingestion was stopped early.
    extend() is the only way to grow the table; names and profiles are read-only views.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._profiles: list[Profile] = []
        self.complete = True

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def profiles(self) -> tuple[Profile, ...]:
        return tuple(self._profiles)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[tuple[str, Profile]]:
        return iter(zip(self._names, self._profiles))

    def __getitem__(self, i: int) -> tuple[str, Profile]:
        return self._names[i], self._profiles[i]

    def extend(self, names: Sequence[str], profiles: Sequence[Profile]) -> None:
        if len(names) != len(profiles):
            raise ValueError("names and profiles must have the same length")
        self._names.extend(names)
        self._profiles.extend(profiles)


def _name_and_sequence(rec: object) -> tuple[str, str]:
    """Record -> (name, sequence). Accepts objects with name/id and sequence, or pairs."""
    seq = getattr(rec, "sequence", None)
    if seq is not None:
        name = getattr(rec, "name", None)
        if name is None:
            name = getattr(rec, "id")
        return name, seq
    name, seq = rec  # type: ignore[misc]
    return name, seq


def _log(msg: str, verbose: bool) -> None:
    if verbose:
        print(msg, file=sys.stderr, flush=True)


def ingest_records(
    records: Iterable[object],
    chunk_size: int = 10000,
    max_workers: int = 6,
    *,
    builder: BatchBuilder = build_profiles_parallel,
    stop: threading.Event | None = None,
    progress: bool = False,
    total: int | None = None,
    verbose: bool = False,
) -> ProfileTable:
    """Profile every record and return the ProfileTable.

    Records are (name, sequence) pairs or objects with a sequence and a name (or id).

    stop is checked before each chunk is built; once set, the remaining records
    are not profiled and the table comes back with complete=False.
    A SourceError from the records aborts ingestion (partial table discarded)
    and gets records_ingested set. A BatchBuildError is re-raised with the
    global record index.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    if max_workers <= 0:
        raise ValueError("max_workers must be positive")

    table = ProfileTable()
    chunk_names: list[str] = []
    chunk_seqs: list[str] = []
    n_chunks = 0

    pbar = tqdm(total=total, desc="Profiling proteins", unit="seq") if progress else None

    def _flush() -> bool:
        nonlocal n_chunks
        if stop is not None and stop.is_set():
            table.complete = False
            _log(f"[ingest] stop requested, {len(table)} records profiled", verbose)
            return False

        offset = len(table)
        try:
            profiles = builder(chunk_seqs, max_workers)
        except BatchBuildError as e:
            gi = offset + e.index
            raise BatchBuildError(
                f"Profiling failed for record {gi} ({chunk_names[e.index]!r}): {e.__cause__}",
                index=gi,
                failed=e.failed,
            ) from e.__cause__

        table.extend(chunk_names, profiles)
        n_chunks += 1
        _log(f"[ingest] chunk {n_chunks}: {len(chunk_seqs)} records (total {len(table)})", verbose)
        if pbar is not None:
            pbar.update(len(chunk_seqs))
        return True

    try:
        for rec in records:
            name, seq = _name_and_sequence(rec)
            chunk_names.append(name)
            chunk_seqs.append(seq)
            if len(chunk_seqs) >= chunk_size:
                if not _flush():
                    return table
                chunk_names, chunk_seqs = [], []

        # partial last chunk
        if chunk_seqs:
            _flush()
    except SourceError as e:
        e.records_ingested = len(table)
        raise
    finally:
        if pbar is not None:
            pbar.close()

    return table


def ingest_fasta(
    path: str | Path,
    chunk_size: int = 10000,
    max_workers: int = 6,
    *,
    stop: threading.Event | None = None,
    progress: bool = False,
    verbose: bool = False,
) -> ProfileTable:
    """Read a FASTA file and build its ProfileTable."""
    total = count_fasta_records(path) if progress else None
    return ingest_records(
        read_fasta(path),
        chunk_size=chunk_size,
        max_workers=max_workers,
        stop=stop,
        progress=progress,
        total=total,
        verbose=verbose,
    )
