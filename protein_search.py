#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

_THIS_DIR = Path(__file__).resolve().parent
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))

from protein_bigram.cli import SearchParams, add_common_io_args, add_search_params_args
from protein_bigram.fasta import FastaRecord, read_fasta
from protein_bigram.ingest import ingest_fasta
from protein_bigram.output_format import format_result_line, write_query_header, write_record_count, write_top_k
from protein_bigram.topk import find_similar


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the proteins most similar to a query by bigram profile similarity."
    )
    parser.add_argument(
        "-i",
        "--input",
        dest="input_fasta",
        required=True,
        help="Database proteins FASTA file",
    )
    query = parser.add_mutually_exclusive_group(required=True)
    query.add_argument(
        "-q",
        "--query",
        dest="query_sequence",
        help="Query protein sequence (A-Z letters)",
    )
    query.add_argument(
        "--query-fasta",
        dest="query_fasta",
        help="FASTA file with one or more query proteins",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        default="output.txt",
        help="Output results file (default: output.txt)",
    )
    add_search_params_args(parser)
    add_common_io_args(parser)
    return parser.parse_args(argv)


def _load_queries(args: argparse.Namespace) -> list[FastaRecord]:
    if args.query_fasta is not None:
        queries = list(read_fasta(args.query_fasta))
        if not queries:
            raise ValueError(f"No queries found in FASTA: {args.query_fasta}")
        return queries
    seq = args.query_sequence.strip().replace(" ", "").upper()
    return [FastaRecord(name="query", sequence=seq)]


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    params = SearchParams.from_args(args)

    input_fasta = Path(args.input_fasta)
    if not input_fasta.exists():
        raise FileNotFoundError(f"Input FASTA not found: {args.input_fasta}")

    queries = _load_queries(args)

    out_path = Path(args.output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    table = ingest_fasta(
        input_fasta,
        chunk_size=params.chunk_size,
        max_workers=params.max_workers,
        progress=args.progress,
        verbose=args.verbose,
    )
    print(f"[protein_search] Read {len(table)} proteins.")

    with out_path.open("w", encoding="utf-8", newline="\n") as out:
        write_record_count(out, len(table), complete=table.complete)
        for q in queries:
            results = find_similar(q.sequence, table, params.top_k)
            write_query_header(out, q.name, params.top_k)
            write_top_k(out, results)

            print(f"[protein_search] Top {params.top_k} for <{q.name}>:")
            for rank, r in enumerate(results, start=1):
                print(format_result_line(rank, r))

    print(f"[protein_search] Wrote results to: {out_path}")


if __name__ == "__main__":
    main()
