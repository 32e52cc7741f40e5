import pytest

from circdeque import CircularDeque
from circdeque import DequeEmptyError
from circdeque.check import OPERATIONS
from circdeque.check import ReferenceDeque
from circdeque.check import check_invariants
from circdeque.check import check_trace
from circdeque.check import random_trace
from circdeque.check import run_checks


# ========================================================================= #
# traces                                                                    #
# ========================================================================= #


def test_random_trace_is_deterministic():
    assert random_trace(200, seed=7) == random_trace(200, seed=7)
    assert random_trace(200, seed=7) != random_trace(200, seed=8)


def test_random_trace_steps():
    trace = random_trace(500, seed=1, num_values=3)
    assert len(trace) == 500
    for op, arg in trace:
        assert op in OPERATIONS
        if op in ("push", "enqueue", "index_of", "last_index_of"):
            assert isinstance(arg, int)
            assert 0 <= arg < 3
        else:
            assert arg is None


def test_random_trace_weights():
    trace = random_trace(100, seed=0, weights={op: 0.0 for op in OPERATIONS if op != "push"})
    assert {op for op, _ in trace} == {"push"}
    with pytest.raises(AssertionError):
        random_trace(10, weights={"pop": 1.0})


def test_random_trace_empty():
    assert random_trace(0) == []


# ========================================================================= #
# reference                                                                 #
# ========================================================================= #


def test_reference_deque():
    ref = ReferenceDeque()
    for x in ["a", "b", "a", "c"]:
        ref.enqueue(x)
    ref.push("z")
    assert ref.to_list() == ["z", "a", "b", "a", "c"]
    assert ref.index_of("a") == 1
    assert ref.last_index_of("a") == 3
    assert ref.index_of("q") == -1
    assert ref.peek() == "c"
    assert ref.element() == "z"
    ref.clear()
    assert ref.is_empty()
    with pytest.raises(DequeEmptyError):
        ref.dequeue()


# ========================================================================= #
# checking                                                                  #
# ========================================================================= #


@pytest.mark.parametrize("seed", range(20))
def test_check_trace_passes(seed):
    counts = check_trace(random_trace(400, seed=seed, num_values=4))
    assert sum(counts.values()) == 400


def test_check_trace_handles_empty_errors():
    counts = check_trace([("dequeue", None), ("peek", None), ("enqueue", 1), ("remove", None), ("element", None)])
    assert counts["dequeue"] == 1
    assert counts["element"] == 1


def test_run_checks():
    counts = run_checks(num_traces=5, num_ops=200, seed=3, progress=False)
    assert sum(counts.values()) == 1000


def test_check_invariants_detects_stale_reference():
    dq = CircularDeque()
    dq.enqueue(1)
    dq.enqueue(2)
    dq.dequeue()
    check_invariants(dq)
    dq._buffer[0] = "stale"
    with pytest.raises(AssertionError, match="stale"):
        check_invariants(dq)


class _BrokenDeque(CircularDeque):
    # forgets to clear the slot it removes from
    def remove(self):
        self._check_not_empty("remove")
        cur = self._resolve(self._count - 1)
        self._count -= 1
        return self._buffer[cur]


def test_check_trace_detects_bug(monkeypatch):
    import circdeque.check

    monkeypatch.setattr(circdeque.check, "CircularDeque", _BrokenDeque)
    with pytest.raises(AssertionError):
        check_trace([("enqueue", 1), ("enqueue", 2), ("remove", None)])
