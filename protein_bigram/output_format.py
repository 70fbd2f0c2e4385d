"""
output_format.py
================
Text report of a search (results.txt):
- how many proteins were read from the database FASTA
- for each query, a header and the top-K list
  "rank. name (similarity: 0.1234)", rank 1 = most similar
"""

from __future__ import annotations

from typing import Iterable, TextIO

from .topk import SimilarityResult


def format_result_line(rank: int, result: SimilarityResult) -> str:
    return f"{rank}. {result.name} (similarity: {result.score:.4f})"


def write_record_count(out: TextIO, n_records: int, complete: bool = True) -> None:
    out.write(f"Successfully read {n_records} proteins.\n")
    if not complete:
        out.write("WARNING: ingestion was stopped early, the database is incomplete.\n")
    out.write("\n")


def write_query_header(out: TextIO, query_name: str, top_k: int) -> None:
    out.write(f"Query Protein: <{query_name}>\n")
    out.write(f"Top {top_k} most similar proteins:\n")


def write_top_k(out: TextIO, results: Iterable[SimilarityResult]) -> None:
    """Write results in the given order (best first), ranks starting at 1."""
    for rank, r in enumerate(results, start=1):
        out.write(format_result_line(rank, r) + "\n")
    out.write("\n")
