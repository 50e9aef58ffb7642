"""The top-down minimap and the keyboard actions that move the player."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum

from .framebuffer import Framebuffer
from .game import Game
from .raycast import render_scene

_PLAYER_COLOR = 0xFF0000
_FLOOR_COLOR = 0xFFFFFF
_WALL_COLOR = 0x000000


class Key(Enum):
    """The keys the game reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    E = "e"
    Q = "q"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"


_ACTIONS: dict[Key, Callable[[Game], None]] = {
    Key.W: Game.move_front,
    Key.S: Game.move_back,
    Key.A: Game.strafe_left,
    Key.D: Game.strafe_right,
    Key.RIGHT: Game.rotate_right,
    Key.E: Game.rotate_right,
    Key.LEFT: Game.rotate_left,
    Key.Q: Game.rotate_left,
}


def pick_color(cell: str) -> int | None:
    """Return the minimap colour of a grid cell, or None if it is not drawn."""
    if cell in ("N", "S", "E", "W", "0"):
        return _FLOOR_COLOR
    if cell == "1":
        return _WALL_COLOR
    return None


def fill_cell(game: Game, frame: Framebuffer, color: int, x: float, y: float) -> None:
    """Paint the ``scale`` x ``scale`` square of map cell (row ``x``, column ``y``).

    Positions outside the map are ignored, as are pixels outside the frame.
    """
    data = game.map_data
    if x < 0 or x >= data.height or y < 0 or y >= data.width:
        return
    scale = game.scale
    for py in range(scale):
        row = int(x * scale + py)
        for px in range(scale):
            frame.put_pixel(int(y * scale + px), row, color)


def render_minimap(game: Game, frame: Framebuffer) -> None:
    """Draw the map grid and the player marker into the top-left corner."""
    for i, row in enumerate(game.map_data.grid):
        for j, cell in enumerate(row):
            color = pick_color(cell)
            if color is None:
                continue
            fill_cell(game, frame, color, float(i), float(j))
    game.minimap.pos_x = game.player.pos_x
    game.minimap.pos_y = game.player.pos_y
    fill_cell(game, frame, _PLAYER_COLOR, game.minimap.pos_x, game.minimap.pos_y)


def _rotate_minimap(game: Game, angle: float) -> None:
    mini = game.minimap
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    mini.ray_x, mini.ray_y = (mini.ray_x * cos_a - mini.ray_y * sin_a,
                              mini.ray_x * sin_a + mini.ray_y * cos_a)


def rotate_minimap_right(game: Game) -> None:
    """Turn the minimap marker clockwise by its rotation speed."""
    _rotate_minimap(game, -game.minimap.rot_speed)


def rotate_minimap_left(game: Game) -> None:
    """Turn the minimap marker anticlockwise by its rotation speed."""
    _rotate_minimap(game, game.minimap.rot_speed)


def apply_key(game: Game, frame: Framebuffer, key: Key) -> bool:
    """Move or turn the player for ``key`` and redraw the view and minimap.

    Returns whether the key triggered an action.
    """
    action = _ACTIONS.get(key)
    if action is None:
        return False
    action(game)
    render_scene(game, frame)
    render_minimap(game, frame)
    return True