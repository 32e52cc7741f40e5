import pytest

from circdeque.__main__ import _make_parser
from circdeque.bench import _make_parser_bench
from circdeque.check import _make_parser_check


def test_check_parser_defaults():
    args = _make_parser_check().parse_args([])
    assert args.traces == 100
    assert args.ops == 1000
    assert args.seed == 42
    assert args.values == 8
    assert not args.no_progress


def test_bench_parser_defaults():
    args = _make_parser_bench().parse_args([])
    assert args.n == 100_000
    assert args.repeats == 5


def test_cli_requires_subcommand():
    with pytest.raises(SystemExit):
        _make_parser().parse_args([])


def test_cli_check(capsys):
    args = _make_parser().parse_args(["check", "-t", "2", "-o", "50", "--no-progress"])
    counts = args._run_fn_(args)
    assert sum(counts.values()) == 100
    out = capsys.readouterr().out
    assert "enqueue" in out


def test_cli_bench(capsys):
    args = _make_parser().parse_args(["bench", "-n", "20", "-r", "1", "--no-progress"])
    results = args._run_fn_(args)
    assert len(results) == 3
    assert "push/remove" in capsys.readouterr().out
