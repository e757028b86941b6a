import io

import pytest

from psoswarm.cli import main


def run_args(function="2", max_iter="5", tol="100", particles="10", swarms="2"):
    return [
        "--dimension", "2",
        "--function", function,
        "--max-iter", max_iter,
        "--tol", tol,
        "--particles", particles,
        "--swarms", swarms,
        "--seed", "1",
    ]


def test_converging_run(capsys):
    assert main(run_args()) == 0
    out = capsys.readouterr().out
    assert "PSO algorithm" in out
    assert "Swarm 0 --> Convergence achieved in 1 iterations" in out
    assert "Swarm 1 --> Convergence achieved in 1 iterations" in out
    assert out.count("ms for initialization") == 2
    assert out.count("Elapsed time :") == 2


def test_run_hitting_iteration_limit(capsys):
    assert main(run_args(function="5", max_iter="3", tol="0", swarms="1")) == 0
    out = capsys.readouterr().out
    assert "Maximum number of iterations reached" in out
    assert "Tolerance achieved:" in out
    assert "Convergence achieved" not in out


def test_info_names_the_function(capsys):
    assert main(run_args(function="3", swarms="1")) == 0
    out = capsys.readouterr().out
    assert " Function            : Ackley" in out
    assert " Number of Particles : 10" in out


def test_invalid_function(capsys):
    assert main(run_args(function="9")) == 1
    assert "Invalid function name. Exiting." in capsys.readouterr().err


def test_zero_swarms_rejected(capsys):
    assert main(run_args(swarms="0")) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_interactive_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n5\n100\n10\n1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter the problem dimension" in out
    assert "Enter the number of sub-swarms" in out
    assert "Swarm 0 --> Convergence achieved in 1 iterations" in out


def test_interactive_input_on_one_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 4 100 8 1\n"))
    assert main([]) == 0
    assert "Convergence achieved" in capsys.readouterr().out


def test_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n"))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_non_numeric_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("two\n"))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().err


@pytest.mark.parametrize("choice", ["1", "2", "3", "4", "5", "6"])
def test_every_function_runs(choice, capsys):
    assert main(run_args(function=choice, max_iter="2", tol="1000", swarms="1")) == 0
    assert "Convergence achieved in 1 iterations" in capsys.readouterr().out