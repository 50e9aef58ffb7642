"""Game state: the player, the minimap marker and player movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .parsing import Direction, MapData, ParsedMap

_WALL = "1"

_VECTORS = {
    Direction.NORTH: (-1.0, 0.0, 0.0, 0.66),
    Direction.SOUTH: (1.0, 0.0, 0.0, -0.66),
    Direction.EAST: (0.0, 1.0, 0.66, 0.0),
    Direction.WEST: (0.0, -1.0, -0.66, 0.0),
}


def direction_vectors(direction: Direction) -> tuple[float, float, float, float]:
    """Return ``(ray_x, ray_y, plane_x, plane_y)`` for a starting direction.

    Without a direction the view ray is null and the camera plane keeps
    its default of (0, 0.66).
    """
    return _VECTORS.get(direction, (0.0, 0.0, 0.0, 0.66))


def _cell(grid: list[str], i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return ""


@dataclass
class Player:
    """Position (row, column), view direction and speeds of the player."""

    direction: Direction = Direction.MISSING
    pos_x: float = 0.0
    pos_y: float = 0.0
    ray_x: float = 0.0
    ray_y: float = 0.0
    move_speed: float = 0.1
    rot_speed: float = 0.04


@dataclass
class MinimapState:
    """Position and direction of the marker drawn on the minimap."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    ray_x: float = 0.0
    ray_y: float = 0.0
    move_speed: float = 0.15
    rot_speed: float = 0.12
    sync_with_player: bool = False


@dataclass
class Game:
    """The map, the player, the camera plane and the minimap."""

    map_data: MapData
    player: Player = field(default_factory=Player)
    minimap: MinimapState = field(default_factory=MinimapState)
    plane_x: float = 0.0
    plane_y: float = 0.66
    scale: int = 10

    @classmethod
    def from_parsed(cls, parsed: ParsedMap, scale: int = 10) -> Game:
        """Build a game from a parsed scene, facing the start direction."""
        start = parsed.player
        ray_x, ray_y, plane_x, plane_y = direction_vectors(start.direction)
        player = Player(
            direction=start.direction,
            pos_x=start.pos_x,
            pos_y=start.pos_y,
            ray_x=ray_x,
            ray_y=ray_y,
        )
        game = cls(parsed.map, player, MinimapState(), plane_x, plane_y, scale)
        game.sync_minimap()
        return game

    def _try_move(self, new_x: float, new_y: float) -> None:
        grid = self.map_data.grid
        height = self.map_data.height
        width = self.map_data.width
        plr = self.player
        if not (0 <= new_x < height and 0 <= int(plr.pos_y) < width):
            return
        if not (0 <= new_y < width and 0 <= int(plr.pos_x) < height):
            return
        if _cell(grid, int(new_x), int(plr.pos_y)) != _WALL:
            plr.pos_x = new_x
        if _cell(grid, int(plr.pos_x), int(new_y)) != _WALL:
            plr.pos_y = new_y

    def move_front(self) -> None:
        """Step forward along the view direction, sliding along walls."""
        plr = self.player
        self._try_move(plr.pos_x + plr.ray_x * plr.move_speed,
                       plr.pos_y + plr.ray_y * plr.move_speed)

    def move_back(self) -> None:
        """Step backward against the view direction."""
        plr = self.player
        self._try_move(plr.pos_x - plr.ray_x * plr.move_speed,
                       plr.pos_y - plr.ray_y * plr.move_speed)

    def strafe_right(self) -> None:
        """Step sideways to the right of the view direction."""
        plr = self.player
        self._try_move(plr.pos_x + plr.ray_y * plr.move_speed,
                       plr.pos_y - plr.ray_x * plr.move_speed)

    def strafe_left(self) -> None:
        """Step sideways to the left of the view direction."""
        plr = self.player
        self._try_move(plr.pos_x - plr.ray_y * plr.move_speed,
                       plr.pos_y + plr.ray_x * plr.move_speed)

    def _rotate(self, angle: float) -> None:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        plr = self.player
        plr.ray_x, plr.ray_y = (plr.ray_x * cos_a - plr.ray_y * sin_a,
                                plr.ray_x * sin_a + plr.ray_y * cos_a)
        self.plane_x, self.plane_y = (self.plane_x * cos_a - self.plane_y * sin_a,
                                      self.plane_x * sin_a + self.plane_y * cos_a)

    def rotate_right(self) -> None:
        """Turn the view and camera plane clockwise by the rotation speed."""
        self._rotate(-self.player.rot_speed)

    def rotate_left(self) -> None:
        """Turn the view and camera plane anticlockwise by the rotation speed."""
        self._rotate(self.player.rot_speed)

    def sync_minimap(self) -> None:
        """Copy the player's position and direction to the minimap marker."""
        self.minimap.pos_x = self.player.pos_x
        self.minimap.pos_y = self.player.pos_y
        self.minimap.ray_x = self.player.ray_x
        self.minimap.ray_y = self.player.ray_y