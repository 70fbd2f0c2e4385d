from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchParams:
    chunk_size: int = 10000  # records profiled per batch
    max_workers: int = 6  # concurrent profiling threads per batch
    top_k: int = 100  # size of the result list

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if self.max_workers <= 0:
            raise ValueError("max_workers must be positive")
        if self.top_k <= 0:
            raise ValueError("top_k must be positive")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SearchParams":
        return cls(chunk_size=args.chunk_size, max_workers=args.max_workers, top_k=args.top_k)


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {n}")
    return n


def add_common_io_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging (per-chunk status on stderr)",
    )
    parser.add_argument(
        "--no-progress",
        dest="progress",
        action="store_false",
        help="Disable the progress bar",
    )


def add_search_params_args(parser: argparse.ArgumentParser) -> None:
    defaults = SearchParams()
    parser.add_argument(
        "--chunk-size",
        type=positive_int,
        default=defaults.chunk_size,
        help=f"Records profiled per batch (default: {defaults.chunk_size})",
    )
    parser.add_argument(
        "--max-workers",
        type=positive_int,
        default=defaults.max_workers,
        help=f"Concurrent profiling threads per batch (default: {defaults.max_workers})",
    )
    parser.add_argument(
        "--top-k",
        type=positive_int,
        default=defaults.top_k,
        help=f"How many similar proteins to report (default: {defaults.top_k})",
    )
