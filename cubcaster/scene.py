"""Texture paths and colours declared in the header of a scene file."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import (
    BAD_ASSET_EXTENSION,
    BAD_RGB_COLOR,
    TOO_FEW_ELEMENTS,
    TOO_MANY_ELEMENTS,
    CubError,
)
from .lines import find_key, has_last_extension, is_digits

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
COLOR_KEYS = ("C", "F")
TEXTURE_EXTENSION = "xpm"


def extract_value(text: str) -> str:
    """Return text without leading blanks, cut at the first newline."""
    return text.lstrip(" \t").split("\n", 1)[0]


def _rgb_parts(text: str) -> list[str]:
    return [part for part in text.split(",") if part]


def is_rgb(text: str) -> bool:
    """Return True for three comma-separated integers in 0..255."""
    parts = _rgb_parts(text)
    if len(parts) != 3:
        return False
    return all(is_digits(part) and 0 <= int(part) <= 255 for part in parts)


def _pack_rgb(text: str) -> int:
    red, green, blue = (int(part) for part in _rgb_parts(text))
    return (red << 16) | (green << 8) | blue


@dataclass
class SceneConfig:
    """Textures and colours collected line by line from a scene file."""

    textures: dict[str, str] = field(default_factory=dict)
    ceiling: str | None = None
    floor: str | None = None
    texture_count: int = 0
    color_count: int = 0

    def scan_textures(self, line: str) -> None:
        """Record any texture identifiers found on the line."""
        for key in TEXTURE_KEYS:
            index = find_key(line, key)
            if index is None:
                continue
            rest = line[index + len(key):]
            if rest[:1] not in (" ", "\t") or not rest:
                continue
            path = extract_value(rest)
            if not has_last_extension(path, TEXTURE_EXTENSION):
                raise CubError(BAD_ASSET_EXTENSION, path)
            self.textures[key] = path
            self.texture_count += 1

    def scan_colors(self, line: str) -> None:
        """Record any ceiling or floor colour found on the line."""
        for key in COLOR_KEYS:
            index = find_key(line, key)
            if index is None:
                continue
            rest = line[index + len(key):]
            if rest[:1] not in (" ", "\t") or not rest:
                continue
            value = extract_value(rest)
            if not is_rgb(value):
                raise CubError(BAD_RGB_COLOR, value)
            if key == "C":
                self.ceiling = value
            else:
                self.floor = value
            self.color_count += 1

    def check_counts(self) -> None:
        """Raise CubError unless exactly four textures and two colours were seen."""
        if self.texture_count == len(TEXTURE_KEYS) and self.color_count == len(COLOR_KEYS):
            return
        if self.texture_count > len(TEXTURE_KEYS) or self.color_count > len(COLOR_KEYS):
            raise CubError(TOO_MANY_ELEMENTS)
        raise CubError(TOO_FEW_ELEMENTS)

    def ceiling_color(self) -> int:
        """Ceiling colour packed as 0xRRGGBB."""
        if self.ceiling is None:
            raise ValueError("ceiling colour is not set")
        return _pack_rgb(self.ceiling)

    def floor_color(self) -> int:
        """Floor colour packed as 0xRRGGBB."""
        if self.floor is None:
            raise ValueError("floor colour is not set")
        return _pack_rgb(self.floor)