"""Reading and validating ``.cub`` scene description files."""

from __future__ import annotations

import itertools
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from .textutil import (
    after_char,
    atoi,
    is_digit,
    is_printable,
    read_lines,
    split,
    starts_with,
    tail_matches,
    trim,
)

_PLAYER_CHARS = frozenset("NSEW")
_MAP_CHARS = frozenset("\n10NSWE ")
_TEXTURE_KEYS = {
    "NO": "north_texture",
    "SO": "south_texture",
    "EA": "east_texture",
    "WE": "west_texture",
}
_COLOR_KEYS = {"F ": "floor_color", "C ": "ceiling_color"}


class Direction(IntEnum):
    """The direction the player faces at the start."""

    MISSING = 0
    NORTH = 1
    SOUTH = 2
    EAST = 3
    WEST = 4


_DIRECTION_OF = {
    "N": Direction.NORTH,
    "S": Direction.SOUTH,
    "E": Direction.EAST,
    "W": Direction.WEST,
}


class MapParseError(ValueError):
    """Raised when a scene file is malformed."""


@dataclass
class MapData:
    """Everything a scene file defines.

    Grid rows are kept as read, trailing newline included, so the width
    counts that newline as well.
    """

    north_texture: str | None = None
    south_texture: str | None = None
    east_texture: str | None = None
    west_texture: str | None = None
    floor_color: int = -1
    ceiling_color: int = -1
    grid: list[str] = field(default_factory=list)
    n_players: int = 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    def is_complete(self) -> bool:
        """Tell whether all four textures and both colours are set."""
        return (
            self.north_texture is not None
            and self.south_texture is not None
            and self.east_texture is not None
            and self.west_texture is not None
            and self.floor_color != -1
            and self.ceiling_color != -1
        )


@dataclass
class PlayerStart:
    """Where the player starts (row, column) and which way it faces."""

    direction: Direction = Direction.MISSING
    pos_x: float = 0.0
    pos_y: float = 0.0


@dataclass
class ParsedMap:
    """A fully parsed and validated scene."""

    map: MapData
    player: PlayerStart


def rgb_to_int(r: int, g: int, b: int) -> int:
    """Pack three 0-255 components into a 0xRRGGBB integer."""
    if any(not 0 <= value <= 255 for value in (r, g, b)):
        raise MapParseError("Invalid rgb color")
    return (r << 16) | (g << 8) | b


def get_color(line: str) -> int:
    """Read the ``R,G,B`` triplet that follows the first space of ``line``."""
    triplet = after_char(line, " ")
    if triplet is None:
        raise MapParseError("Invalid rgb color")
    pieces = split(triplet, ",")
    if len(pieces) != 3:
        raise MapParseError("Invalid rgb color")
    for piece in pieces:
        number = trim(trim(piece, "\n"), " ")
        if not number or not all(is_digit(char) for char in number):
            raise MapParseError("Invalid rgb color")
    r, g, b = (atoi(piece) for piece in pieces)
    return rgb_to_int(r, g, b)


def check_printable(line: str) -> None:
    """Reject a line holding anything but printable ASCII and newlines."""
    if any(not is_printable(char) and char != "\n" for char in line):
        raise MapParseError("Invalid character found in map file")


def check_map_chars(line: str) -> None:
    """Reject a map row holding characters other than ``10NSEW``, space, newline."""
    if any(char not in _MAP_CHARS for char in line):
        raise MapParseError("Invalid character found in map")


def _is_duplicate(map_data: MapData, line: str) -> bool:
    for prefix, attr in _TEXTURE_KEYS.items():
        if starts_with(line, prefix):
            return getattr(map_data, attr) is not None
    for prefix, attr in _COLOR_KEYS.items():
        if starts_with(line, prefix):
            return getattr(map_data, attr) != -1
    return False


def set_map_texture(map_data: MapData, line: str) -> None:
    """Store the texture path or colour defined by one header line.

    Blank lines are accepted and ignored.
    """
    if _is_duplicate(map_data, line):
        raise MapParseError("Duplicate types found")
    for prefix, attr in _TEXTURE_KEYS.items():
        if starts_with(line, prefix):
            if not tail_matches(line, ".xpm\n", 5):
                raise MapParseError(f"Invalid texture extension: {line}")
            path = after_char(line, " ")
            if path is None:
                raise MapParseError(f"Missing texture path: {line}")
            setattr(map_data, attr, path.rstrip("\n"))
            return
    for prefix, attr in _COLOR_KEYS.items():
        if starts_with(line, prefix):
            setattr(map_data, attr, get_color(line))
            return
    if not starts_with(line, "\n"):
        raise MapParseError("Invalid type identifier")


def parse_textures(map_data: MapData, lines: Iterator[str]) -> str:
    """Read header lines until every texture and colour is known.

    Returns the first line that follows the header.
    """
    while not map_data.is_complete():
        line = next(lines, None)
        if line is None:
            raise MapParseError("Missing texture or color definition")
        check_printable(line)
        set_map_texture(map_data, line)
    line = next(lines, None)
    if line is None:
        raise MapParseError("Missing map")
    return line


def parse_map(map_data: MapData, lines: Iterable[str]) -> None:
    """Skip blank lines, copy the map rows into ``map_data`` and validate them."""
    rows = iter(lines)
    for line in rows:
        if "1" in line:
            map_data.grid = [line]
            break
        if not starts_with(line, "\n"):
            raise MapParseError(f"Invalid line found in map file: {line}")
    else:
        raise MapParseError("Missing map")
    check_printable(map_data.grid[0])
    check_map_chars(map_data.grid[0])
    for line in rows:
        check_printable(line)
        check_map_chars(line)
        map_data.grid.append(line)
    valid_map(map_data)


def _check_surroundings(grid: list[str], i: int, j: int) -> None:
    row = grid[i]
    if j < 1 or row[j - 1] in "\n ":
        raise MapParseError("Invalid map")
    if j + 1 >= len(row) or row[j + 1] in "\n ":
        raise MapParseError("Invalid map")
    if i < 1 or j >= len(grid[i - 1]) or grid[i - 1][j] == " ":
        raise MapParseError("Invalid map")
    if i + 1 >= len(grid) or j >= len(grid[i + 1]) or grid[i + 1][j] == " ":
        raise MapParseError("Invalid map")


def valid_map(map_data: MapData) -> None:
    """Check the map is closed by walls and holds exactly one player."""
    grid = map_data.grid
    for i, row in enumerate(grid):
        if map_data.n_players >= 2:
            break
        if starts_with(row, "\n"):
            raise MapParseError("Invalid map")
        for j, char in enumerate(row):
            if char == "0" or char in _PLAYER_CHARS:
                if char in _PLAYER_CHARS:
                    map_data.n_players += 1
                _check_surroundings(grid, i, j)
    if map_data.n_players != 1:
        raise MapParseError("Invalid number of players")


def find_player(grid: list[str]) -> PlayerStart:
    """Locate the first player marker in ``grid``."""
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char in _PLAYER_CHARS:
                return PlayerStart(_DIRECTION_OF[char], float(i), float(j))
    return PlayerStart()


def parse_map_file(path: str | os.PathLike[str]) -> ParsedMap:
    """Read, parse and validate a ``.cub`` file."""
    name = os.fspath(path)
    if not tail_matches(name, ".cub", 4):
        raise MapParseError("Invalid file extension")
    try:
        stream = open(name, encoding="latin-1", newline="")
    except OSError as exc:
        raise MapParseError("Can't read from file") from exc
    map_data = MapData()
    with stream:
        lines = read_lines(stream)
        first = parse_textures(map_data, lines)
        parse_map(map_data, itertools.chain([first], lines))
    return ParsedMap(map_data, find_player(map_data.grid))