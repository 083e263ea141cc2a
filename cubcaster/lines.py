"""Character and line classification for scene files."""

from __future__ import annotations

import os
from collections.abc import Iterator

_SPACES = frozenset(" \t\n\v\f\r")
_MAP_CHARS = frozenset("01NSEW")
_TWO_LETTER_IDS = ("NO", "SO", "EA", "WE")
_ONE_LETTER_IDS = ("F", "C")


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def is_space(char: str) -> bool:
    """Return True for a single whitespace character."""
    return len(char) == 1 and char in _SPACES


def is_digits(text: str) -> bool:
    """Return True if every character is an ASCII digit (True when empty)."""
    return all("0" <= ch <= "9" for ch in text)


def is_empty_line(line: str) -> bool:
    """Return True if the line holds only spaces, tabs and newlines."""
    return all(ch in " \t\n" for ch in line)


def _identifier_length(line: str) -> int:
    if line[:2] in _TWO_LETTER_IDS and is_space(_char_at(line, 2)):
        return 3
    if line[:1] in _ONE_LETTER_IDS and is_space(_char_at(line, 1)):
        return 2
    return 0


def is_identifier_line(line: str) -> bool:
    """Return True if the line starts with a texture or colour identifier."""
    return _identifier_length(line) > 0


def is_empty_after_identifier(line: str) -> bool:
    """Return True if the line is an identifier followed only by whitespace."""
    start = _identifier_length(line)
    if not start:
        return False
    return all(is_space(ch) for ch in line[start:])


def is_map_char(char: str) -> bool:
    """Return True for characters allowed in a map row."""
    return char in _MAP_CHARS or is_space(char)


def has_foreign_chars(line: str) -> bool:
    """Return True if a non-identifier line holds characters outside the map set."""
    if is_identifier_line(line):
        return False
    return any(not is_map_char(ch) for ch in line)


def find_key(line: str, key: str) -> int | None:
    """Index of the first occurrence of key, or None.

    Lines starting with a space or tab never match.
    """
    if not line or line[0] in " \t":
        return None
    index = line.find(key)
    return index if index >= 0 else None


def has_extension(name: str, ext: str) -> bool:
    """Return True if everything after the first dot equals ext."""
    dot = name.find(".")
    if dot <= 0:
        return False
    return name[dot + 1:] == ext


def has_last_extension(name: str, ext: str) -> bool:
    """Return True if everything after the last dot equals ext."""
    dot = name.rfind(".")
    if dot < 0 or dot == len(name) - 1:
        return False
    return name[dot + 1:] == ext


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a file, each keeping its trailing newline."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        yield from handle