"""Validation of the map grid that follows the scene header."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import (
    EMPTY_MAP,
    INTERIOR_SPACES,
    INVALID_MAP,
    NOT_SURROUNDED,
    PLAYER_NOT_FOUND,
    CubError,
    player_count_message,
)
from .lines import is_identifier_line, is_map_char, is_space

PLAYER_MARKERS = "NSEW"
_OPEN_CELLS = frozenset("0" + PLAYER_MARKERS)
_WHITESPACE = " \t\n\v\f\r"


def is_map_line(line: str) -> bool:
    """Return True for a non-blank line made only of map characters."""
    if not line or is_identifier_line(line):
        return False
    if not all(is_map_char(ch) for ch in line):
        return False
    return any(not is_space(ch) for ch in line)


def _is_wall_row(row: str) -> bool:
    return all(is_space(ch) or ch == "1" for ch in row)


def _is_closed_row(row: str) -> bool:
    content = row.strip(_WHITESPACE)
    return not content or (content[0] == "1" and content[-1] == "1")


def check_walls(rows: Sequence[str]) -> None:
    """Raise CubError unless the map is closed by walls on every side."""
    if not rows:
        raise CubError(EMPTY_MAP)
    closed = (
        _is_wall_row(rows[0])
        and _is_wall_row(rows[-1])
        and all(_is_closed_row(row) for row in rows[1:-1])
    )
    if not closed:
        raise CubError(NOT_SURROUNDED, INVALID_MAP)


def _cell(rows: Sequence[str], y: int, x: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def check_interior_spaces(rows: Sequence[str]) -> None:
    """Raise CubError if any open cell touches a space."""
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in _OPEN_CELLS:
                continue
            neighbours = (
                _cell(rows, y - 1, x),
                _cell(rows, y + 1, x),
                _cell(rows, y, x - 1),
                _cell(rows, y, x + 1),
            )
            if " " in neighbours:
                raise CubError(INTERIOR_SPACES)


def count_players(rows: Sequence[str]) -> dict[str, int]:
    """Count each player marker in the map."""
    counts = dict.fromkeys(PLAYER_MARKERS, 0)
    for row in rows:
        for char in row:
            if char in counts:
                counts[char] += 1
    return counts


def find_player(rows: Sequence[str]) -> tuple[int, int, str]:
    """Return (x, y, orientation) of the single player marker.

    Raises CubError unless exactly one marker is present.
    """
    counts = count_players(rows)
    if sum(counts.values()) != 1:
        raise CubError(INVALID_MAP, player_count_message(counts))
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in PLAYER_MARKERS:
                return x, y, char
    raise CubError(PLAYER_NOT_FOUND)