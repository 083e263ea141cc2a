"""Error type and user-facing messages for scene loading and the game."""

from __future__ import annotations

from collections.abc import Mapping

EXIT = "Closing the program."
NO_ARGUMENT = "Pass the path of a map."
NO_EXTENSION = "Unrecognised extension."
NO_FILE = "File does not exist."
INVALID_MAP = "Invalid map."
EMPTY_MAP = "Invalid or empty map."
PLAYER_MARKER_COUNT = "The map must have exactly one player marker! Found:"
PLAYER_NOT_FOUND = "Player not found on the map."
FAIL_IMAGE = "Failed to load image."
TOO_MANY_ELEMENTS = "There are repeated assets or colours."
TOO_FEW_ELEMENTS = "There are fewer assets or colours than required."
NOT_VALIDATED = "File not validated."
INVALID_MAP_CHARS = "Map with invalid characters."
BAD_ASSET_EXTENSION = "Wrong extension on one or more asset files."
BAD_RGB_COLOR = "One or both colours are not in RGB format."
EMPTY_FIRST_LINE = "The first line of the file is empty."
EMPTY_IDENTIFIER = "Identifier found without a value."
FOREIGN_CHARS = "Unexpected characters found."
NOT_SURROUNDED = "The map must be surrounded by walls."
INTERIOR_SPACES = "Spaces inside the map."


class CubError(Exception):
    """A scene or game error carrying a message and optional detail."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, detail)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        text = f"Error\n{self.message}"
        if self.detail:
            text += f"\n{self.detail}"
        return text


def player_count_message(counts: Mapping[str, int]) -> str:
    """Describe how many of each player marker were found."""
    found = ", ".join(f"{key}={counts.get(key, 0)}" for key in "NSEW")
    return f"{PLAYER_MARKER_COUNT} {found}"