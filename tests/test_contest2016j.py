import pytest

from cccsolve.contest2016j import (
    advance_commute,
    format_clock,
    parse_clock,
    run,
    total_speed,
)


@pytest.mark.parametrize("clock", ["07:00", "23:59", "00:05", "12:30"])
def test_clock_round_trip(clock):
    assert format_clock(parse_clock(clock)) == clock


def test_format_clock_pads():
    assert format_clock(0) == "00:00"
    assert format_clock(24 * 60) == "24:00"


def test_parse_clock_other_separator():
    assert parse_clock("07-00") == parse_clock("07:00")


@pytest.mark.parametrize("bad", ["noon", "", "0700"])
def test_parse_clock_rejects(bad):
    with pytest.raises(ValueError):
        parse_clock(bad)


def test_format_clock_rejects_negative():
    with pytest.raises(ValueError):
        format_clock(-1)


def test_zero_travel_returns_start():
    assert advance_commute(345, 0) == 345


@pytest.mark.parametrize("start", [0, 60, 125, 299])
def test_early_commute_is_uncongested(start):
    assert advance_commute(start, 120) == start + 120


def test_overshoot_raises():
    with pytest.raises(ValueError):
        advance_commute(23 * 60, 120)


def test_negative_finish_raises():
    with pytest.raises(ValueError):
        advance_commute(0, -10)


def test_total_speed_samples():
    assert total_speed(1, [5, 1, 4], [6, 2, 4]) == 12
    assert total_speed(2, [5, 1, 4], [6, 2, 4]) == 15


def test_total_speed_order_independent():
    assert total_speed(2, [3, 9, 1, 7], [2, 8, 4, 6]) == total_speed(
        2, [9, 7, 3, 1], [6, 4, 2, 8]
    )


def test_max_not_below_min():
    a, b = [3, 9, 1, 7], [2, 8, 4, 6]
    assert total_speed(2, a, b) >= total_speed(1, a, b)


def test_total_speed_size_mismatch():
    with pytest.raises(ValueError):
        total_speed(1, [1, 2], [3])


def test_run_commute():
    assert run(4, "00:00\n") == "02:00\n"


def test_run_tandem_matches_function():
    assert run(5, "1\n3\n5 1 4\n6 2 4\n") == f"{total_speed(1, [5, 1, 4], [6, 2, 4])}\n"


def test_run_truncated_input():
    with pytest.raises(ValueError):
        run(5, "1\n3\n5 1\n")


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run(1, "")