"""Ray casting through the map grid and drawing of the wall columns."""

from __future__ import annotations

import time
from dataclasses import dataclass

from .framebuffer import WIN_HEIGHT, WIN_WIDTH, Framebuffer
from .game import Game

_FAR = 1e30
_MIN_DIST = 0.001
_FLOOR_COLOR = 0x222222
_WALL_COLOR = 0x0000FF
_OPEN_COLOR = 0xFF0000
_OTHER_COLOR = 0xFFFF00


@dataclass
class RayHit:
    """Where a ray stopped and how far the wall is from the camera plane."""

    map_x: int
    map_y: int
    side: int
    perp_wall_dist: float
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0


def current_time_ms() -> float:
    """Return the wall-clock time in milliseconds."""
    return time.time() * 1000.0


def _cell(grid: list[str], i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return ""


def cast_ray(game: Game, x: int) -> RayHit:
    """Step a ray for screen column ``x`` through the grid until it hits a wall.

    The ray also stops at the map border.
    """
    plr = game.player
    grid = game.map_data.grid
    height = game.map_data.height
    width = game.map_data.width
    map_x = int(plr.pos_x)
    map_y = int(plr.pos_y)
    camera_x = 2 * x / WIN_WIDTH - 1
    ray_dir_x = plr.ray_x + game.plane_x * camera_x
    ray_dir_y = plr.ray_y + game.plane_y * camera_x
    delta_x = _FAR if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = _FAR if ray_dir_y == 0 else abs(1 / ray_dir_y)
    if ray_dir_x < 0:
        step_x = -1
        dist_x = (plr.pos_x - map_x) * delta_x
    else:
        step_x = 1
        dist_x = (map_x + 1.0 - plr.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y = -1
        dist_y = (plr.pos_y - map_y) * delta_y
    else:
        step_y = 1
        dist_y = (map_y + 1.0 - plr.pos_y) * delta_y
    side = 0
    while True:
        if dist_x < dist_y:
            if not 0 <= map_x + step_x < height:
                break
            map_x += step_x
            dist_x += delta_x
            side = 0
        else:
            if not 0 <= map_y + step_y < width:
                break
            map_y += step_y
            dist_y += delta_y
            side = 1
        if _cell(grid, map_x, map_y) == "1":
            break
    perp = dist_y - delta_y if side else dist_x - delta_x
    return RayHit(map_x, map_y, side, perp, ray_dir_x, ray_dir_y)


def wall_span(perp_wall_dist: float) -> tuple[int, int, int]:
    """Return ``(wall_height, draw_start, draw_end)`` for a wall distance."""
    perp_wall_dist = max(perp_wall_dist, _MIN_DIST)
    wall_height = int(WIN_HEIGHT / perp_wall_dist)
    half = wall_height // 2
    draw_start = max(-half + WIN_HEIGHT // 2, 0)
    draw_end = min(half + WIN_HEIGHT // 2, WIN_HEIGHT - 1)
    return wall_height, draw_start, draw_end


def column_color(game: Game, hit: RayHit) -> int:
    """Return the wall colour for a hit, darkened on y-facing sides."""
    cell = _cell(game.map_data.grid, hit.map_x, hit.map_y)
    if not cell:
        color = 0x000000
    elif cell == "1":
        color = _WALL_COLOR
    elif cell == "0":
        color = _OPEN_COLOR
    else:
        color = _OTHER_COLOR
    if hit.side == 1:
        color //= 2
    return color


def draw_column(game: Game, frame: Framebuffer, x: int, hit: RayHit) -> None:
    """Paint ceiling, wall and floor for screen column ``x``."""
    if not 0 <= x < WIN_WIDTH:
        return
    _, draw_start, draw_end = wall_span(hit.perp_wall_dist)
    frame.fill_column(x, 0, min(draw_start, WIN_HEIGHT) - 1, game.map_data.ceiling_color)
    frame.fill_column(x, draw_start, draw_end, column_color(game, hit))
    frame.fill_column(x, draw_end + 1, WIN_HEIGHT - 1, _FLOOR_COLOR)


def render_scene(game: Game, frame: Framebuffer) -> None:
    """Cast one ray per screen column and draw the whole view."""
    for x in range(WIN_WIDTH):
        draw_column(game, frame, x, cast_ray(game, x))