import math

import pytest

from cubcaster.movement import Key, KeyState, move_player, rotate_camera
from cubcaster.raycast import Player

ROOM = ["11111", "10001", "10N01", "10001", "11111"]


def fresh():
    return Player.from_orientation("N", 2, 2)


def test_forward_moves_along_direction():
    player = fresh()
    move_player(player, ROOM, Key.W)
    assert player.pos_x == pytest.approx(2.5)
    assert player.pos_y == pytest.approx(2.5 - player.move_speed)


def test_backward_undoes_forward():
    player = fresh()
    move_player(player, ROOM, Key.W)
    move_player(player, ROOM, Key.S)
    assert player.pos_y == pytest.approx(2.5)


def test_strafe_moves_along_plane():
    player = fresh()
    move_player(player, ROOM, Key.D)
    assert player.pos_x > 2.5
    assert player.pos_y == pytest.approx(2.5)


def test_wall_blocks_movement():
    player = fresh()
    for _ in range(200):
        move_player(player, ROOM, Key.W)
    assert int(player.pos_y) == 1
    assert ROOM[int(player.pos_y)][int(player.pos_x)] != "1"


def test_unknown_key_does_nothing():
    player = fresh()
    move_player(player, ROOM, 42)
    rotate_camera(player, 42)
    assert player == fresh()


def test_integer_keycode_accepted():
    by_int, by_enum = fresh(), fresh()
    move_player(by_int, ROOM, 119)
    move_player(by_enum, ROOM, Key.W)
    assert by_int == by_enum


def test_rotate_left_then_right_restores():
    player = fresh()
    rotate_camera(player, Key.LEFT)
    rotate_camera(player, Key.RIGHT)
    start = fresh()
    assert player.dir_x == pytest.approx(start.dir_x, abs=1e-12)
    assert player.dir_y == pytest.approx(start.dir_y)
    assert player.plane_x == pytest.approx(start.plane_x)


def test_rotation_preserves_lengths():
    player = fresh()
    for _ in range(50):
        rotate_camera(player, Key.RIGHT)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)


def test_escape_requests_quit():
    keys = KeyState()
    assert keys.press(Key.ESC) is True
    assert keys.press(Key.W) is False
    assert keys.held == {Key.W}


def test_apply_held_keys_matches_direct_move():
    keys = KeyState()
    keys.press(Key.W)
    applied, direct = fresh(), fresh()
    keys.apply(applied, ROOM)
    move_player(direct, ROOM, Key.W)
    assert applied == direct


def test_released_key_no_longer_applies():
    keys = KeyState()
    keys.press(Key.A)
    keys.release(Key.A)
    player = fresh()
    keys.apply(player, ROOM)
    assert player == fresh()
    assert keys.held == set()