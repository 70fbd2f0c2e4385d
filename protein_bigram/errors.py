from __future__ import annotations


class BigramSearchError(Exception):
    """Base class for errors raised by protein_bigram."""


class SourceError(BigramSearchError):
    """The record source could not be read or is malformed.

    Ingestion stops and the partially built table is dropped.
    ``records_ingested`` tells how many records had been profiled before the failure.
    """

    def __init__(self, message: str, records_ingested: int = 0) -> None:
        super().__init__(message)
        self.records_ingested = records_ingested


class InvalidAlphabetError(BigramSearchError, ValueError):
    """A sequence contains a character outside A-Z."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid character {char!r} at position {position} (expected A-Z)")
        self.char = char
        self.position = position


class BatchBuildError(BigramSearchError):
    """Profiling failed for at least one sequence of a batch.

    ``index`` is the first failing slot, ``failed`` the number of failing slots.
    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, index: int, failed: int = 1) -> None:
        super().__init__(message)
        self.index = index
        self.failed = failed
