from collections import deque

from circdeque import BenchResult
from circdeque import CircularDeque
from circdeque.bench import bench_operation_pair
from circdeque.bench import run_benchmarks


def test_bench_operation_pair():
    result = bench_operation_pair(
        "enqueue/dequeue", CircularDeque, CircularDeque.enqueue, CircularDeque.dequeue,
        n=100, repeats=3, progress=False,
    )
    assert isinstance(result, BenchResult)
    assert result.n == 100
    assert result.repeats == 3
    assert result.mean_ns > 0
    assert result.min_ns <= result.mean_ns
    assert result.std_ns >= 0
    assert "enqueue/dequeue" in str(result)


def test_bench_drains_container():
    seen = []

    def make():
        d = deque()
        seen.append(d)
        return d

    bench_operation_pair("deque", make, deque.append, deque.popleft, n=10, repeats=2, progress=False)
    assert len(seen) == 2
    assert all(len(d) == 0 for d in seen)


def test_run_benchmarks():
    results = run_benchmarks(n=50, repeats=1, progress=False)
    assert [r.name for r in results] == ["enqueue/dequeue", "push/remove", "deque.append/popleft"]
