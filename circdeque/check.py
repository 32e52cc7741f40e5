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
    "OPERATIONS",
    "ReferenceDeque",
    "random_trace",
    "check_invariants",
    "check_trace",
    "run_checks",
]

import logging
from collections import Counter
from collections import deque
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from circdeque.deque import CircularDeque
from circdeque.deque import DequeEmptyError


logger = logging.getLogger(__name__)


Step = Tuple[str, Optional[int]]


# ========================================================================= #
# Operations                                                                #
# ========================================================================= #


# operations that take an element argument
_ARG_OPS = ("push", "enqueue", "index_of", "last_index_of")
# operations that fail on an empty deque
_NON_EMPTY_OPS = ("peek", "remove", "element", "dequeue")
# read only queries
_QUERY_OPS = ("size", "is_empty")

OPERATIONS = _ARG_OPS + _NON_EMPTY_OPS + _QUERY_OPS + ("clear",)

# insertions are weighted up so traces regularly wrap and grow the buffer,
# clear is rare so traces get a chance to build up longer windows
_DEFAULT_WEIGHTS = {
    "push": 4.0,
    "enqueue": 4.0,
    "index_of": 1.0,
    "last_index_of": 1.0,
    "peek": 1.0,
    "remove": 2.5,
    "element": 1.0,
    "dequeue": 2.5,
    "size": 0.5,
    "is_empty": 0.5,
    "clear": 0.1,
}


# ========================================================================= #
# Reference Model                                                           #
# ========================================================================= #


class ReferenceDeque(object):
    """
    The same operation set as `CircularDeque`, built on `collections.deque`.
    """

    def __init__(self):
        self._items = deque()

    def _check_not_empty(self, op: str):
        if not self._items:
            raise DequeEmptyError(f"{op} from empty deque")

    def push(self, element):
        self._items.appendleft(element)

    def peek(self):
        self._check_not_empty("peek")
        return self._items[-1]

    def remove(self):
        self._check_not_empty("remove")
        return self._items.pop()

    def index_of(self, element):
        try:
            return self._items.index(element)
        except ValueError:
            return -1

    def last_index_of(self, element):
        for i in range(len(self._items) - 1, -1, -1):
            if self._items[i] == element:
                return i
        return -1

    def enqueue(self, element):
        self._items.append(element)

    def element(self):
        self._check_not_empty("element")
        return self._items[0]

    def dequeue(self):
        self._check_not_empty("dequeue")
        return self._items.popleft()

    def size(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def clear(self):
        self._items.clear()

    def to_list(self) -> list:
        return list(self._items)


# ========================================================================= #
# Traces                                                                    #
# ========================================================================= #


def random_trace(
    num_ops: int,
    *,
    seed: int = 42,
    num_values: int = 8,
    weights: Optional[dict] = None,
) -> List[Step]:
    """
    Generate a random list of `(op, arg)` steps, `arg` is None for ops
    that do not take an element.
    """
    assert num_ops >= 0, f"num_ops must be non-negative, got: {num_ops}"
    assert num_values >= 1, f"num_values must be positive, got: {num_values}"
    # normalise weights
    weights = {**_DEFAULT_WEIGHTS, **(weights or {})}
    unknown = set(weights) - set(OPERATIONS)
    assert not unknown, f"unknown operations in weights: {sorted(unknown)}"
    p = np.asarray([weights[op] for op in OPERATIONS], dtype="float64")
    assert np.all(p >= 0) and p.sum() > 0, f"invalid weights: {weights}"
    p = p / p.sum()
    # sample ops and values together
    rng = np.random.default_rng(seed)
    ops = rng.choice(len(OPERATIONS), size=num_ops, p=p)
    values = rng.integers(0, num_values, size=num_ops)
    return [
        (OPERATIONS[o], int(v) if OPERATIONS[o] in _ARG_OPS else None)
        for o, v in zip(ops, values)
    ]


def _apply(target, op: str, arg: Optional[int]):
    fn = getattr(target, op)
    try:
        result = fn(arg) if op in _ARG_OPS else fn()
    except DequeEmptyError:
        return ("error", DequeEmptyError)
    return ("ok", result)


# ========================================================================= #
# Checking                                                                  #
# ========================================================================= #


def check_invariants(dq: CircularDeque):
    buffer, head, count = dq._buffer, dq._head, dq._count
    capacity = len(buffer)
    assert capacity >= 2, f"capacity below minimum: {capacity}"
    assert capacity & (capacity - 1) == 0, f"capacity is not a power of two: {capacity}"
    assert 0 <= count <= capacity, f"count out of range: {count} (capacity={capacity})"
    assert 0 <= head < capacity, f"head out of range: {head} (capacity={capacity})"
    window = {(head + i) % capacity for i in range(count)}
    for i, item in enumerate(buffer):
        if i in window:
            assert item is not None, f"empty slot {i} inside the window"
        else:
            assert item is None, f"stale reference in slot {i} outside the window: {item!r}"


def check_trace(trace: Sequence[Step]) -> Counter:
    """
    Replay the trace on a `CircularDeque` and the reference model, asserting
    that every step agrees and that the buffer invariants hold throughout.
    """
    dq = CircularDeque()
    ref = ReferenceDeque()
    counts = Counter()
    for i, (op, arg) in enumerate(trace):
        got = _apply(dq, op, arg)
        expected = _apply(ref, op, arg)
        assert got == expected, f"step {i} ({op}, {arg}): expected {expected}, got {got}"
        assert dq.size() == ref.size(), f"step {i} ({op}, {arg}): size {dq.size()} != {ref.size()}"
        assert dq.is_empty() == ref.is_empty(), f"step {i} ({op}, {arg}): is_empty mismatch"
        check_invariants(dq)
        counts[op] += 1
    # the final logical contents must also agree
    remaining = [dq.dequeue() for _ in range(dq.size())]
    assert remaining == ref.to_list(), f"final contents differ: {remaining} != {ref.to_list()}"
    return counts


def run_checks(
    *,
    num_traces: int = 100,
    num_ops: int = 1000,
    seed: int = 42,
    num_values: int = 8,
    progress: bool = True,
) -> Counter:
    counts = Counter()
    for i in tqdm(range(num_traces), desc="Checking traces", disable=not progress):
        trace = random_trace(num_ops, seed=seed + i, num_values=num_values)
        counts.update(check_trace(trace))
        logger.debug(f"[CHECKED] trace {i} (seed={seed + i}) with {len(trace)} steps")
    logger.info(f"checked {num_traces} traces, {sum(counts.values())} operations")
    return counts


# ========================================================================= #
# CLI                                                                       #
# ========================================================================= #


def _make_parser_check(parser=None):
    # make default parser
    if parser is None:
        import argparse

        parser = argparse.ArgumentParser()
    parser.add_argument("-t", "--traces", type=int, default=100, help="number of random traces to replay")
    parser.add_argument("-o", "--ops", type=int, default=1000, help="number of operations per trace")
    parser.add_argument("-s", "--seed", type=int, default=42, help="seed of the first trace, trace i uses seed + i")
    parser.add_argument("-v", "--values", type=int, default=8, help="size of the pool that elements are drawn from")
    parser.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    return parser


def _run_check(args):
    counts = run_checks(
        num_traces=args.traces,
        num_ops=args.ops,
        seed=args.seed,
        num_values=args.values,
        progress=not args.no_progress,
    )
    for op in OPERATIONS:
        print(f"{op:>14s}: {counts[op]}")
    return counts


# ========================================================================= #
# ENTRY POINT                                                               #
# ========================================================================= #


if __name__ == "__main__":
    # initialise logging
    logging.basicConfig(level=logging.INFO)
    # run application
    _run_check(_make_parser_check().parse_args())


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
