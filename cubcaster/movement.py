"""Keyboard state, player movement with wall collision and camera rotation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .raycast import Player

ROTATION_SPEED = 0.02


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def _walkable(grid: Sequence[str], y: int, x: int) -> bool:
    if not grid or not 0 <= y < len(grid) or not 0 <= x < len(grid[0]):
        return False
    row = grid[y]
    return x < len(row) and row[x] != "1"


def move_player(player: Player, grid: Sequence[str], key: int) -> None:
    """Step the player for a movement key, sliding along walls."""
    key = _as_key(key)
    speed = player.move_speed
    if key is Key.W:
        dx, dy = player.dir_x * speed, player.dir_y * speed
    elif key is Key.S:
        dx, dy = -player.dir_x * speed, -player.dir_y * speed
    elif key is Key.A:
        dx, dy = -player.plane_x * speed, -player.plane_y * speed
    elif key is Key.D:
        dx, dy = player.plane_x * speed, player.plane_y * speed
    else:
        return
    next_x = player.pos_x + dx
    next_y = player.pos_y + dy
    if _walkable(grid, int(next_y), int(player.pos_x)):
        player.pos_y = next_y
    if _walkable(grid, int(player.pos_y), int(next_x)):
        player.pos_x = next_x


def rotate_camera(player: Player, key: int) -> None:
    """Turn the view direction and camera plane for LEFT or RIGHT."""
    key = _as_key(key)
    if key is Key.LEFT:
        angle = -ROTATION_SPEED
    elif key is Key.RIGHT:
        angle = ROTATION_SPEED
    else:
        return
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    player.dir_x, player.dir_y = (
        player.dir_x * cos_a - player.dir_y * sin_a,
        player.dir_x * sin_a + player.dir_y * cos_a,
    )
    player.plane_x, player.plane_y = (
        player.plane_x * cos_a - player.plane_y * sin_a,
        player.plane_x * sin_a + player.plane_y * cos_a,
    )


_MOVE_KEYS = (Key.W, Key.S, Key.A, Key.D)
_TURN_KEYS = (Key.LEFT, Key.RIGHT)


@dataclass
class KeyState:
    """The set of keys currently held down."""

    held: set[Key] = field(default_factory=set)

    def press(self, key: int) -> bool:
        """Mark a key as held; return True if it asks to quit."""
        key = _as_key(key)
        if key is Key.ESC:
            return True
        if key is not None:
            self.held.add(key)
        return False

    def release(self, key: int) -> None:
        """Mark a key as no longer held."""
        key = _as_key(key)
        if key is not None:
            self.held.discard(key)

    def apply(self, player: Player, grid: Sequence[str]) -> None:
        """Apply every held key to the player for one frame."""
        for key in _MOVE_KEYS:
            if key in self.held:
                move_player(player, grid, key)
        for key in _TURN_KEYS:
            if key in self.held:
                rotate_camera(player, key)