"""Reading and validating a complete scene file."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import (
    EMPTY_FIRST_LINE,
    EMPTY_IDENTIFIER,
    EMPTY_MAP,
    FOREIGN_CHARS,
    INVALID_MAP_CHARS,
    NO_FILE,
    CubError,
)
from .lines import has_foreign_chars, is_empty_after_identifier, is_empty_line, read_lines
from .mapcheck import check_interior_spaces, check_walls, find_player, is_map_line
from .scene import COLOR_KEYS, TEXTURE_KEYS, SceneConfig


@dataclass
class Scene:
    """A validated scene: header settings, map rows and player start."""

    config: SceneConfig
    rows: list[str]
    player_x: int
    player_y: int
    orientation: str

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.rows)


def precheck_file(path: str | os.PathLike[str]) -> list[str]:
    """Read the file and check its characters and identifiers.

    Returns the lines, each keeping its newline.
    """
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise CubError(NO_FILE, str(path)) from exc
    for line in lines:
        if has_foreign_chars(line):
            raise CubError(FOREIGN_CHARS, line.rstrip("\n"))
    if not lines:
        raise CubError(EMPTY_MAP)
    if is_empty_line(lines[0]):
        raise CubError(EMPTY_FIRST_LINE)
    for line in lines:
        if is_empty_after_identifier(line):
            raise CubError(EMPTY_IDENTIFIER, line.rstrip("\n"))
    return lines


def _header_complete(config: SceneConfig) -> bool:
    return config.texture_count == len(TEXTURE_KEYS) and config.color_count == len(COLOR_KEYS)


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Load and fully validate a scene file, raising CubError on any problem."""
    lines = precheck_file(path)
    config = SceneConfig()
    rows: list[str] = []
    in_map = False
    for line in lines:
        config.scan_textures(line)
        config.scan_colors(line)
        if _header_complete(config) and is_map_line(line):
            in_map = True
            rows.append(line.rstrip("\n"))
        elif in_map:
            raise CubError(INVALID_MAP_CHARS, line.rstrip("\n"))
    config.check_counts()
    check_walls(rows)
    check_interior_spaces(rows)
    x, y, orientation = find_player(rows)
    return Scene(config=config, rows=rows, player_x=x, player_y=y, orientation=orientation)