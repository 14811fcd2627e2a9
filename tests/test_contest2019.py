import pytest

from cccsolve.contest2019 import run, solve_substitutions

RULES = [("A", "B"), ("B", "C"), ("C", "D")]


def test_two_step_solution():
    assert solve_substitutions(RULES, "A", "C", 2) == [(1, 1, "B"), (2, 1, "C")]


def test_solution_invariants():
    found = solve_substitutions(RULES, "AB", "DD", 5)
    assert found is not None
    assert len(found) == 5
    assert found[-1][2] == "DD"
    assert all(1 <= rule <= len(RULES) for rule, _, _ in found)


def test_zero_steps():
    assert solve_substitutions(RULES, "A", "A", 0) == []
    assert solve_substitutions(RULES, "A", "B", 0) is None


def test_no_solution():
    assert solve_substitutions(RULES, "A", "A", 1) is None


def test_later_occurrence_applies_to_rewritten_string():
    assert solve_substitutions(RULES, "AA", "BB", 1) == [(1, 2, "BB")]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        solve_substitutions(RULES, "A", "B", -1)
    with pytest.raises(ValueError):
        solve_substitutions([("", "A")], "A", "A", 1)


def test_run_prints_steps():
    assert run(1, "A B\nB C\nC D\n2 A C\n") == "1 1 B\n2 1 C\n"


def test_run_without_solution_prints_nothing():
    assert run(1, "A B\nB C\nC D\n1 A A\n") == ""


def test_run_errors():
    with pytest.raises(ValueError):
        run(2, "")
    with pytest.raises(ValueError):
        run(1, "A B")