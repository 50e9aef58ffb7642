import math

import pytest

from cubraycaster.game import Game, MinimapState, Player, direction_vectors
from cubraycaster.parsing import Direction, MapData, ParsedMap, PlayerStart

GRID = [
    "11111\n",
    "10001\n",
    "10N01\n",
    "10001\n",
    "11111\n",
]


def make_game(direction=Direction.NORTH):
    parsed = ParsedMap(
        MapData(
            north_texture="n.xpm",
            south_texture="s.xpm",
            east_texture="e.xpm",
            west_texture="w.xpm",
            floor_color=0x112233,
            ceiling_color=0x445566,
            grid=list(GRID),
            n_players=1,
        ),
        PlayerStart(direction, 2.0, 2.0),
    )
    return Game.from_parsed(parsed)


def test_direction_vectors_fixed_by_source():
    assert direction_vectors(Direction.NORTH) == (-1.0, 0.0, 0.0, 0.66)
    assert direction_vectors(Direction.SOUTH) == (1.0, 0.0, 0.0, -0.66)
    assert direction_vectors(Direction.EAST) == (0.0, 1.0, 0.66, 0.0)
    assert direction_vectors(Direction.WEST) == (0.0, -1.0, -0.66, 0.0)


def test_direction_vectors_missing_keeps_default_plane():
    assert direction_vectors(Direction.MISSING) == (0.0, 0.0, 0.0, 0.66)


def test_defaults():
    assert Player().move_speed == 0.1
    assert Player().rot_speed == 0.04
    assert MinimapState().move_speed == 0.15
    assert MinimapState().rot_speed == 0.12


def test_from_parsed_sets_state():
    game = make_game()
    assert (game.player.pos_x, game.player.pos_y) == (2.0, 2.0)
    assert (game.player.ray_x, game.player.ray_y) == (-1.0, 0.0)
    assert (game.plane_x, game.plane_y) == (0.0, 0.66)
    assert game.scale == 10
    assert (game.minimap.pos_x, game.minimap.pos_y) == (2.0, 2.0)
    assert (game.minimap.ray_x, game.minimap.ray_y) == (-1.0, 0.0)


def test_move_front_and_back_round_trip():
    game = make_game()
    game.move_front()
    assert game.player.pos_x == pytest.approx(2.0 - game.player.move_speed)
    assert game.player.pos_y == 2.0
    game.move_back()
    assert game.player.pos_x == pytest.approx(2.0)


def test_strafes_are_opposite():
    game = make_game()
    game.strafe_right()
    assert game.player.pos_y > 2.0
    assert game.player.pos_x == pytest.approx(2.0)
    game.strafe_left()
    assert game.player.pos_y == pytest.approx(2.0)


def test_walls_block_movement():
    game = make_game()
    for _ in range(50):
        game.move_front()
        game.strafe_left()
    row, col = int(game.player.pos_x), int(game.player.pos_y)
    assert GRID[row][col] != "1"
    assert game.player.pos_x >= 1.0
    assert game.player.pos_y >= 1.0


@pytest.mark.parametrize("direction", list(Direction)[1:])
def test_rotation_round_trip(direction):
    game = make_game(direction)
    before = (game.player.ray_x, game.player.ray_y, game.plane_x, game.plane_y)
    game.rotate_left()
    game.rotate_right()
    after = (game.player.ray_x, game.player.ray_y, game.plane_x, game.plane_y)
    assert after == pytest.approx(before, abs=1e-9)


def test_rotation_keeps_lengths_and_orthogonality():
    game = make_game()
    for _ in range(17):
        game.rotate_right()
    assert math.hypot(game.player.ray_x, game.player.ray_y) == pytest.approx(1.0)
    assert math.hypot(game.plane_x, game.plane_y) == pytest.approx(0.66)
    dot = game.player.ray_x * game.plane_x + game.player.ray_y * game.plane_y
    assert dot == pytest.approx(0.0, abs=1e-9)
    assert game.player.ray_x != -1.0


def test_sync_minimap_copies_player():
    game = make_game()
    game.move_front()
    game.rotate_left()
    assert game.minimap.pos_x == 2.0
    game.sync_minimap()
    assert game.minimap.pos_x == game.player.pos_x
    assert game.minimap.ray_x == game.player.ray_x
    assert game.minimap.ray_y == game.player.ray_y