"""Player camera state, DDA ray casting and textured frame rendering."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

WIDTH = 1600
HEIGHT = 800
TEXTURE_SIZE = 64
_FAR = 1e30

# orientation -> (dir_x, dir_y, plane_x, plane_y, move_speed)
_ORIENTATIONS = {
    "N": (0.0, -1.0, 0.66, 0.0, 0.06),
    "S": (0.0, 1.0, -0.66, 0.0, 0.04),
    "E": (1.0, 0.0, 0.0, 0.66, 0.04),
    "W": (-1.0, 0.0, 0.0, -0.66, 0.04),
}


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    move_speed: float

    @classmethod
    def from_orientation(cls, orientation: str, x: int, y: int) -> Player:
        """Place the player in the centre of cell (x, y) facing N, S, E or W."""
        try:
            dir_x, dir_y, plane_x, plane_y, speed = _ORIENTATIONS[orientation]
        except KeyError:
            raise ValueError(f"unknown orientation: {orientation!r}") from None
        return cls(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y, speed)


@dataclass(frozen=True)
class RayHit:
    """Result of casting one ray through the grid."""

    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    distance: float
    wall_x: float
    hit: bool


def _is_inside(grid: Sequence[str], y: int, x: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def cast_ray(grid: Sequence[str], player: Player, column: int, width: int) -> RayHit:
    """Cast the ray for a screen column and return where it meets a wall."""
    camera_x = 2 * column / float(width) - 1
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _FAR if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = _FAR if ray_dir_y == 0 else abs(1 / ray_dir_y)

    if ray_dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    hit = False
    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not _is_inside(grid, map_y, map_x):
            break
        if grid[map_y][map_x] == "1":
            hit = True
            break

    distance = side_x - delta_x if side == 0 else side_y - delta_y
    if side == 0:
        wall_x = player.pos_y + distance * ray_dir_y
    else:
        wall_x = player.pos_x + distance * ray_dir_x
    wall_x -= math.floor(wall_x)
    return RayHit(map_x, map_y, side, ray_dir_x, ray_dir_y, distance, wall_x, hit)


def select_texture(hit: RayHit) -> str:
    """Texture key used for the wall face a ray struck."""
    if hit.side == 0 and hit.ray_dir_x > 0:
        return "WE"
    if hit.side == 0 and hit.ray_dir_x < 0:
        return "EA"
    if hit.side == 1 and hit.ray_dir_y > 0:
        return "NO"
    return "SO"


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def render_frame(
    frame: np.ndarray,
    grid: Sequence[str],
    player: Player,
    textures: Mapping[str, np.ndarray],
    ceiling: int,
    floor: int,
) -> np.ndarray:
    """Draw ceiling, floor and textured walls into a (height, width) pixel array."""
    height, width = frame.shape[:2]
    half = height // 2
    frame[:half] = ceiling
    frame[half:] = floor

    for x in range(width):
        hit = cast_ray(grid, player, x, width)
        distance = max(hit.distance, 1e-6)
        line_height = int(height / distance)
        if line_height <= 0:
            continue
        start = _clamp(-(line_height // 2) + half, 0, height)
        end = _clamp(line_height // 2 + half, 0, height)
        if start >= end:
            continue

        texture = textures[select_texture(hit)]
        tex_height, tex_width = texture.shape[:2]
        tex_x = int(hit.wall_x * tex_width)
        if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
            tex_x = tex_width - tex_x - 1
        tex_x = _clamp(tex_x, 0, tex_width - 1)

        ys = np.arange(start, end, dtype=np.int64)
        d = ys * 256 - height * 128 + line_height * 128
        tex_y = np.clip((d * tex_height // line_height) // 256, 0, tex_height - 1)
        frame[start:end, x] = texture[tex_y, tex_x]
    return frame