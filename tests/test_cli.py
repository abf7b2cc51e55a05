import pytest

from actsel import cli
from actsel.bench import Comparison, Measurement
from actsel.cli import main, parse_tasks
from actsel.interval import Interval


def test_parse_tasks() -> None:
    assert parse_tasks("1:3, 2:5,0.5:1.5,") == [
        Interval(start=1, end=3),
        Interval(start=2, end=5),
        Interval(start=0.5, end=1.5),
    ]


@pytest.mark.parametrize(
    "text", ["1-3", "a:3", "5:1", "nan:1", "nan:nan,1:2", "0:inf"]
)
def test_parse_tasks_rejects_malformed(text) -> None:
    with pytest.raises(ValueError):
        parse_tasks(text)


def test_benchmark_report(capsys) -> None:
    code = main(["--sizes", "5", "25", "--seed", "3"])
    out = capsys.readouterr().out

    assert code == 0
    assert "STEP 1: VALIDATE CORRECTNESS WITH SAMPLE INPUT" in out
    assert "Testing with 5 tasks:" in out
    assert "Exhaustive: SKIPPED (25 > limit of 20" in out
    assert "Tasks selected: 100 out of 100" in out
    assert "RECOMMENDATION: GREEDY ALGORITHM" in out


def test_explicit_tasks(capsys) -> None:
    code = main(["--tasks", "1:3,2:5,4:6,6:7,5:9,8:10"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Exhaustive (4): [(1, 3), (4, 6), (6, 7), (8, 10)]" in out
    assert "Greedy (4): [(1, 3), (4, 6), (6, 7), (8, 10)]" in out


def test_explicit_tasks_above_limit(capsys) -> None:
    code = main(["--exhaustive-limit", "1", "--tasks", "1:2,3:4"])
    err = capsys.readouterr().err

    assert code == 2
    assert "exceeds the limit of 1" in err


def test_malformed_tasks(capsys) -> None:
    assert main(["--tasks", "1:3,oops"]) == 2
    assert "START:END" in capsys.readouterr().err


def test_invalid_configuration(capsys) -> None:
    assert main(["--exhaustive-limit", "30"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_environment_feeds_defaults(monkeypatch, capsys) -> None:
    monkeypatch.setenv("ACTSEL_SIZES", "[4]")
    monkeypatch.setenv("ACTSEL_EDGE_CASE_SIZE", "5")

    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Testing with 4 tasks:" in out
    assert "Tasks selected: 5 out of 5" in out


def test_non_finite_tasks_are_rejected(capsys) -> None:
    assert main(["--tasks", "nan:nan,1:2"]) == 2
    assert "finite" in capsys.readouterr().err


def test_explicit_tasks_require_exhaustive_result(monkeypatch, capsys) -> None:
    def greedy_only(tasks, exhaustive_limit):
        greedy = Measurement(label="greedy", result=list(tasks), elapsed_ms=0.0)
        return Comparison(size=len(tasks), greedy=greedy, exhaustive=None)

    monkeypatch.setattr(cli, "compare", greedy_only)

    assert main(["--tasks", "1:2,3:4"]) == 2
    assert "Exhaustive search was skipped" in capsys.readouterr().err
