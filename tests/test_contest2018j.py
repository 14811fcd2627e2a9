import pytest

from cccsolve.contest2018j import (
    Rotation,
    all_reachable,
    distance_matrix,
    rotate,
    rotation_for,
    run,
    shortest_path,
)

SORTED = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


@pytest.mark.parametrize("rotation", list(Rotation))
def test_rotation_for_restores_sorted_table(rotation):
    scrambled = rotate(SORTED, rotation)
    assert rotate(scrambled, rotation_for(scrambled)) == SORTED


def test_sorted_table_needs_no_rotation():
    assert rotation_for(SORTED) is Rotation.NONE


def test_four_clockwise_turns_are_identity():
    table = SORTED
    for _ in range(4):
        table = rotate(table, Rotation.CLOCKWISE)
    assert table == SORTED


def test_clockwise_then_counter_clockwise():
    turned = rotate(SORTED, Rotation.CLOCKWISE)
    assert rotate(turned, Rotation.COUNTER_CLOCKWISE) == SORTED


def test_bottomed_twice_is_identity():
    assert rotate(rotate(SORTED, Rotation.BOTTOMED), Rotation.BOTTOMED) == SORTED


def test_empty_table():
    assert rotation_for([]) is Rotation.NONE
    assert rotate([], Rotation.CLOCKWISE) == []


def test_non_square_table_rejected():
    with pytest.raises(ValueError):
        rotation_for([[1, 2], [3]])


def test_reachability():
    assert all_reachable([[2], [3], []]) is True
    assert all_reachable([[2], [], [1]]) is False


def test_shortest_path_chain_visits_every_page():
    chain = [[2], [3], [4], []]
    assert shortest_path(chain) == len(chain)


def test_shortest_path_single_page():
    assert shortest_path([[]]) == 1


def test_shortest_path_star():
    assert shortest_path([[2, 3], [], []]) == 2


def test_shortest_path_without_ending_raises():
    with pytest.raises(ValueError):
        shortest_path([[2], [1]])


def test_missing_target_raises():
    with pytest.raises(ValueError):
        all_reachable([[5], []])


def test_no_pages_raises():
    with pytest.raises(ValueError):
        shortest_path([])


def test_distance_matrix_invariants():
    gaps = [3, 10, 12, 5]
    matrix = distance_matrix(gaps)
    size = len(gaps) + 1
    assert len(matrix) == size
    for i, row in enumerate(matrix):
        assert row[i] == 0
        for j, value in enumerate(row):
            assert value == matrix[j][i]
    assert [matrix[k][k + 1] for k in range(len(gaps))] == gaps
    assert matrix[0][-1] == sum(gaps)


def test_run_sunflowers_sorted():
    assert run(1, "2\n1 2\n3 4\n") == "1 2 \n3 4 \n"


def test_run_sunflowers_rotated():
    assert run(1, "2\n3 1\n4 2\n") == "1 2 \n3 4 \n"


def test_run_pages():
    assert run(2, "3\n1 2\n1 3\n0\n") == "Y\n3\n"


def test_run_distances_round_trip():
    output = run(3, "3 10 12 5")
    rows = [[int(value) for value in line.split()] for line in output.splitlines()]
    assert rows == distance_matrix([3, 10, 12, 5])


def test_run_errors():
    with pytest.raises(ValueError):
        run(9, "")
    with pytest.raises(ValueError):
        run(3, "1 2")