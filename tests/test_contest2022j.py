import pytest

from cccsolve.contest2022j import (
    count_gold_players,
    count_violations,
    cupcake_leftover,
    harp_instructions,
    run,
)


def test_cupcakes_without_boxes():
    assert cupcake_leftover(0, 0) == -28


def test_cupcake_box_sizes():
    assert cupcake_leftover(3, 2) - cupcake_leftover(2, 2) == 8
    assert cupcake_leftover(2, 3) - cupcake_leftover(2, 2) == 3


def test_gold_threshold_is_strict():
    assert count_gold_players([(8, 0)]) == 0
    assert count_gold_players([(9, 0)]) == 1


def test_run_players_all_gold():
    assert run(2, "3\n12 4\n10 3\n9 1\n") == "3+"


def test_run_players_not_all_gold():
    assert run(2, "2\n12 4\n8 0\n") == str(count_gold_players([(12, 4), (8, 0)]))


def test_harp_example():
    assert harp_instructions("AFB+8HC-4") == "AFB tighten 8\nHC loosen 4"


def test_harp_letters_only():
    assert harp_instructions("ABC") == "ABC"


def test_harp_stops_at_newline():
    assert harp_instructions("AB\nCD") == "AB"


def test_run_harp():
    assert run(3, "AFB+8HC-4\n") == harp_instructions("AFB+8HC-4")


def test_no_constraints():
    assert count_violations([], [], [("A", "B", "C")]) == 0


def test_together_satisfied():
    assert count_violations([("A", "B")], [], [("A", "B", "C")]) == 0


def test_apart_pair_adds_one():
    groups = [("A", "B", "C")]
    before = count_violations([], [], groups)
    after = count_violations([], [("A", "B")], groups)
    assert after == before + 1


def test_missing_single_partner():
    assert count_violations([("A", "B")], [], [("A", "C", "D")]) == 1


def test_missing_two_partners():
    together = [("A", "B"), ("A", "C")]
    assert count_violations(together, [], [("A", "D", "E")]) == 2


def test_run_groups():
    text = "1\nELODIE CHI\n0\n2\nDWAYNE BEN ANJALI\nCHI FRANCOIS ELODIE\n"
    expected = count_violations(
        [("ELODIE", "CHI")],
        [],
        [("DWAYNE", "BEN", "ANJALI"), ("CHI", "FRANCOIS", "ELODIE")],
    )
    assert run(4, text) == str(expected)


def test_run_errors():
    with pytest.raises(ValueError):
        run(7, "")
    with pytest.raises(ValueError):
        run(1, "3")