"""
Insertion and search timing for OrderedTree vs BalancedTree.

Both trees are filled once in sorted key order and once in shuffled order,
then every original record is searched for. Sorted insertion turns the
unbalanced tree into a linked chain, which is what the comparison shows.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from balanced_tree import BalancedTree
from ordered_tree import OrderedTree
from records import Pokemon, load_records

DEFAULT_RESULTS = "output.txt"
CSV_COLUMNS = (
    "n",
    "bst_sorted_insert", "bst_random_insert",
    "avl_sorted_insert", "avl_random_insert",
    "bst_sorted_search", "bst_random_search",
    "avl_sorted_search", "avl_random_search",
)


class BenchmarkResult:
    def __init__(self, n: int) -> None:
        self.n = n
        self.bst_sorted_insert = 0.0
        self.bst_random_insert = 0.0
        self.avl_sorted_insert = 0.0
        self.avl_random_insert = 0.0
        self.bst_sorted_search = 0.0
        self.bst_random_search = 0.0
        self.avl_sorted_search = 0.0
        self.avl_random_search = 0.0
        self.bst_sorted_height = 0
        self.bst_random_height = 0
        self.avl_sorted_height = 0
        self.avl_random_height = 0

    def timings(self) -> List[float]:
        return [getattr(self, column) for column in CSV_COLUMNS[1:]]

    def __repr__(self) -> str:
        return f"BenchmarkResult(n={self.n})"


def measure_insertion_time(tree, data: Iterable) -> float:
    start = time.perf_counter()
    for value in data:
        tree.insert(value)
    return time.perf_counter() - start


def measure_search_time(tree, data: Iterable) -> float:
    start = time.perf_counter()
    for value in data:
        tree.search(value)
    return time.perf_counter() - start


def run_benchmark(records: Sequence[Pokemon], seed: Optional[int] = None) -> BenchmarkResult:
    sorted_records = sorted(records)
    rng = np.random.default_rng(seed)
    shuffled_records = [records[i] for i in rng.permutation(len(records))]

    bst_sorted: OrderedTree[Pokemon] = OrderedTree()
    bst_random: OrderedTree[Pokemon] = OrderedTree()
    avl_sorted: BalancedTree[Pokemon] = BalancedTree()
    avl_random: BalancedTree[Pokemon] = BalancedTree()

    result = BenchmarkResult(len(records))
    result.bst_sorted_insert = measure_insertion_time(bst_sorted, sorted_records)
    result.bst_random_insert = measure_insertion_time(bst_random, shuffled_records)
    result.avl_sorted_insert = measure_insertion_time(avl_sorted, sorted_records)
    result.avl_random_insert = measure_insertion_time(avl_random, shuffled_records)

    result.bst_sorted_search = measure_search_time(bst_sorted, records)
    result.bst_random_search = measure_search_time(bst_random, records)
    result.avl_sorted_search = measure_search_time(avl_sorted, records)
    result.avl_random_search = measure_search_time(avl_random, records)

    result.bst_sorted_height = bst_sorted.height()
    result.bst_random_height = bst_random.height()
    result.avl_sorted_height = avl_sorted.height()
    result.avl_random_height = avl_random.height()
    return result


def format_report(result: BenchmarkResult) -> str:
    lines = [
        f"Results for {result.n} lines:",
        "-" * 43,
        f"BST (Sorted Insert): {result.bst_sorted_insert:.6f} s",
        f"BST (Random Insert): {result.bst_random_insert:.6f} s",
        f"AVL (Sorted Insert): {result.avl_sorted_insert:.6f} s",
        f"AVL (Random Insert): {result.avl_random_insert:.6f} s",
        f"BST (Sorted Search): {result.bst_sorted_search:.6f} s",
        f"BST (Random Search): {result.bst_random_search:.6f} s",
        f"AVL (Sorted Search): {result.avl_sorted_search:.6f} s",
        f"AVL (Random Search): {result.avl_random_search:.6f} s",
        f"Heights: BST sorted={result.bst_sorted_height}, BST random={result.bst_random_height}, "
        f"AVL sorted={result.avl_sorted_height}, AVL random={result.avl_random_height}",
        "-" * 43,
    ]
    return "\n".join(lines)


def format_csv_line(result: BenchmarkResult) -> str:
    return ",".join([str(result.n)] + [repr(t) for t in result.timings()])


def append_results(path: Union[str, Path], result: BenchmarkResult) -> None:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_csv_line(result) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time BST vs AVL insertion and search")
    parser.add_argument("input", type=Path, help="Pokemon CSV file (first line is a header)")
    parser.add_argument("lines", type=int, help="Number of records to load")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_RESULTS),
        help=f"CSV results file to append to (default: {DEFAULT_RESULTS})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    args = parser.parse_args(argv)

    if args.lines < 0:
        parser.error("number of lines must be non-negative")

    try:
        records = load_records(args.input, limit=args.lines)
    except FileNotFoundError:
        print(f"CSV file not found: {args.input}", file=sys.stderr)
        return 1

    result = run_benchmark(records, seed=args.seed)
    print()
    print(format_report(result))
    print()
    append_results(args.output, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
