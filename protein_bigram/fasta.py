from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .errors import SourceError


@dataclass(frozen=True)
class FastaRecord:
    """A FASTA record: header text (without '>') and the joined sequence."""

    name: str
    sequence: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.name, self.sequence))


def _finish(header: str, seq_chunks: list[str]) -> FastaRecord:
    seq = "".join(seq_chunks).replace(" ", "").upper()
    return FastaRecord(name=header, sequence=seq)


def parse_fasta_stream(handle: TextIO) -> Iterator[FastaRecord]:
    """Yield records from line-oriented FASTA text.

    A '>' line starts a new record and closes the previous one; end of input
    closes the last one. Sequence text before the first header is malformed.
    """
    header: str | None = None
    seq_chunks: list[str] = []

    for lineno, raw in enumerate(handle, start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith(">"):
            if header is not None:
                yield _finish(header, seq_chunks)
            header = line[1:].strip()
            seq_chunks = []
        elif header is None:
            raise SourceError(f"Sequence data before the first '>' header (line {lineno})")
        else:
            seq_chunks.append(line)

    if header is not None:
        yield _finish(header, seq_chunks)


def read_fasta(path: str | Path) -> Iterator[FastaRecord]:
    """Stream FASTA records from a file."""
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            yield from parse_fasta_stream(f)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read FASTA file {p}: {e}") from e


def count_fasta_records(path: str | Path) -> int:
    """Count FASTA records quickly by counting '>' header lines (stripped, like the parser)."""
    p = Path(path)
    n = 0
    try:
        with p.open("r", encoding="utf-8") as f:
            for raw in f:
                if raw.strip().startswith(">"):
                    n += 1
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read FASTA file {p}: {e}") from e
    return n


def write_fasta(path: str | Path, records: Iterable[FastaRecord]) -> None:
    """Write FASTA records to a file (test fixtures, database subsets)."""
    p = Path(path)
    with p.open("w", encoding="utf-8", newline="\n") as f:
        for rec in records:
            f.write(f">{rec.name}\n")
            # Wrap at 60 chars for readability.
            seq = rec.sequence.strip().replace(" ", "")
            for i in range(0, len(seq), 60):
                f.write(seq[i : i + 60] + "\n")
