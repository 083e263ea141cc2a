import pytest

from cubcaster.errors import (
    EMPTY_MAP,
    INTERIOR_SPACES,
    INVALID_MAP,
    NOT_SURROUNDED,
    CubError,
    player_count_message,
)
from cubcaster.mapcheck import (
    check_interior_spaces,
    check_walls,
    count_players,
    find_player,
    is_map_line,
)

CLOSED = ["111111", "100101", "1000N1", "111111"]


@pytest.mark.parametrize("line", ["1111\n", "10 01\n", "  1N01", "1"])
def test_map_lines_accepted(line):
    assert is_map_line(line) is True


@pytest.mark.parametrize("line", ["", "   \n", "\n", "NO ./a.xpm\n", "F 1,2,3", "1021\n", "10x1"])
def test_non_map_lines_rejected(line):
    assert is_map_line(line) is False


def test_closed_map_passes_all_checks():
    check_walls(CLOSED)
    check_interior_spaces(CLOSED)
    x, y, orientation = find_player(CLOSED)
    assert CLOSED[y][x] == orientation


def test_empty_map_rejected():
    with pytest.raises(CubError) as info:
        check_walls([])
    assert info.value.message == EMPTY_MAP


def test_open_top_row_rejected():
    rows = ["110111", "100001", "1N0001", "111111"]
    with pytest.raises(CubError) as info:
        check_walls(rows)
    assert info.value.message == NOT_SURROUNDED
    assert info.value.detail == INVALID_MAP


def test_open_side_rejected():
    rows = ["111111", "100000", "1N0001", "111111"]
    with pytest.raises(CubError) as info:
        check_walls(rows)
    assert info.value.message == NOT_SURROUNDED


def test_open_bottom_row_rejected():
    rows = ["111111", "1N0001", "100001", "111101"]
    with pytest.raises(CubError) as info:
        check_walls(rows)
    assert info.value.message == NOT_SURROUNDED


def test_indented_rows_and_newlines_count_as_closed():
    rows = ["  1111\n", "  1N01\n", "111001\n", "111111\n"]
    check_walls(rows)
    check_interior_spaces(rows)
    x, y, orientation = find_player(rows)
    assert rows[y][x] == orientation


def test_interior_space_rejected():
    rows = ["111111", "10 001", "1000N1", "111111"]
    check_walls(rows)
    with pytest.raises(CubError) as info:
        check_interior_spaces(rows)
    assert info.value.message == INTERIOR_SPACES


def test_space_below_open_cell_rejected():
    rows = ["11111", "1N001", "11 11", "11111"]
    with pytest.raises(CubError) as info:
        check_interior_spaces(rows)
    assert info.value.message == INTERIOR_SPACES


def test_count_players_single():
    assert count_players(CLOSED) == {"N": 1, "S": 0, "E": 0, "W": 0}


def test_count_players_total_matches_markers():
    rows = ["1111111", "1NSEW01", "1111111"]
    counts = count_players(rows)
    assert set(counts) == set("NSEW")
    assert all(value == 1 for value in counts.values())


def test_find_player_position():
    assert find_player(["1111", "1W01", "1111"]) == (1, 1, "W")


def test_several_players_rejected():
    rows = ["11111", "1NS01", "11111"]
    with pytest.raises(CubError) as info:
        find_player(rows)
    assert info.value.message == INVALID_MAP
    assert info.value.detail == player_count_message(count_players(rows))


def test_no_player_rejected():
    rows = ["1111", "1001", "1111"]
    with pytest.raises(CubError) as info:
        find_player(rows)
    assert info.value.message == INVALID_MAP