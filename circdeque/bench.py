#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2025 Nathan Juraj Michlo
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~

__all__ = [
    "BenchResult",
    "bench_operation_pair",
    "run_benchmarks",
]

import dataclasses
import logging
import time
from collections import deque
from typing import Callable, List

import numpy as np
from tqdm import tqdm

from circdeque.deque import CircularDeque


logger = logging.getLogger(__name__)


# ========================================================================= #
# Results                                                                   #
# ========================================================================= #


@dataclasses.dataclass(frozen=True)
class BenchResult:
    name: str
    n: int
    repeats: int
    mean_ns: float  # per operation
    std_ns: float
    min_ns: float

    def __str__(self):
        return (
            f"{self.name:>24s}: {self.mean_ns:8.1f} ns/op "
            f"(std={self.std_ns:.1f}, min={self.min_ns:.1f}, n={self.n}, repeats={self.repeats})"
        )


# ========================================================================= #
# Benchmarks                                                                #
# ========================================================================= #


def bench_operation_pair(
    name: str,
    make: Callable[[], object],
    fill: Callable[[object, int], None],
    drain: Callable[[object], object],
    *,
    n: int = 100_000,
    repeats: int = 5,
    progress: bool = True,
) -> BenchResult:
    """
    Time `n` calls to `fill` followed by `n` calls to `drain` on a fresh
    container for every repeat. The container starts at its minimum size
    so growth is included in the cost.
    """
    assert n > 0, f"n must be positive, got: {n}"
    assert repeats > 0, f"repeats must be positive, got: {repeats}"
    timings = []
    for _ in tqdm(range(repeats), desc=f"Benchmarking {name}", disable=not progress):
        container = make()
        t0 = time.perf_counter_ns()
        for i in range(n):
            fill(container, i)
        for _ in range(n):
            drain(container)
        t1 = time.perf_counter_ns()
        timings.append((t1 - t0) / (2 * n))
    timings = np.asarray(timings, dtype="float64")
    result = BenchResult(
        name=name,
        n=n,
        repeats=repeats,
        mean_ns=float(timings.mean()),
        std_ns=float(timings.std()),
        min_ns=float(timings.min()),
    )
    logger.debug(f"[BENCH] {result}")
    return result


def run_benchmarks(*, n: int = 100_000, repeats: int = 5, progress: bool = True) -> List[BenchResult]:
    pairs = [
        ("enqueue/dequeue", CircularDeque, CircularDeque.enqueue, CircularDeque.dequeue),
        ("push/remove", CircularDeque, CircularDeque.push, CircularDeque.remove),
        ("deque.append/popleft", deque, deque.append, deque.popleft),
    ]
    results = []
    for name, make, fill, drain in pairs:
        results.append(bench_operation_pair(name, make, fill, drain, n=n, repeats=repeats, progress=progress))
    logger.info(f"benchmarked {len(results)} operation pairs with n={n}")
    return results


# ========================================================================= #
# CLI                                                                       #
# ========================================================================= #


def _make_parser_bench(parser=None):
    # make default parser
    if parser is None:
        import argparse

        parser = argparse.ArgumentParser()
    parser.add_argument("-n", "--n", type=int, default=100_000, help="number of insertions (and removals) per repeat")
    parser.add_argument("-r", "--repeats", type=int, default=5, help="number of timed repeats")
    parser.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    return parser


def _run_bench(args):
    results = run_benchmarks(n=args.n, repeats=args.repeats, progress=not args.no_progress)
    for result in results:
        print(result)
    return results


# ========================================================================= #
# ENTRY POINT                                                               #
# ========================================================================= #


if __name__ == "__main__":
    # initialise logging
    logging.basicConfig(level=logging.INFO)
    # run application
    _run_bench(_make_parser_bench().parse_args())


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
