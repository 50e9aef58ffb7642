import time

import pytest

from cubraycaster.framebuffer import WIN_HEIGHT, WIN_WIDTH, Framebuffer
from cubraycaster.game import Game
from cubraycaster.parsing import Direction, MapData, ParsedMap, PlayerStart
from cubraycaster.raycast import (
    RayHit,
    cast_ray,
    column_color,
    current_time_ms,
    draw_column,
    render_scene,
    wall_span,
)

GRID = [
    "1111111\n",
    "1000001\n",
    "1000001\n",
    "100N001\n",
    "1000001\n",
    "1111111\n",
]
CEILING = 0x445566


def make_game(direction=Direction.NORTH):
    parsed = ParsedMap(
        MapData(
            north_texture="n.xpm",
            south_texture="s.xpm",
            east_texture="e.xpm",
            west_texture="w.xpm",
            floor_color=0x112233,
            ceiling_color=CEILING,
            grid=list(GRID),
            n_players=1,
        ),
        PlayerStart(direction, 3.0, 3.0),
    )
    return Game.from_parsed(parsed)


def test_current_time_tracks_clock():
    before = time.time() * 1000.0
    value = current_time_ms()
    after = time.time() * 1000.0
    assert before <= value <= after


def test_wall_span_full_height_when_close():
    assert wall_span(0.0)[1:] == (0, WIN_HEIGHT - 1)
    assert wall_span(-5.0)[1:] == (0, WIN_HEIGHT - 1)


@pytest.mark.parametrize("dist", [1.5, 2.0, 3.0, 8.0])
def test_wall_span_is_centred(dist):
    height, start, end = wall_span(dist)
    assert height == int(WIN_HEIGHT / dist)
    assert start + end == WIN_HEIGHT
    assert 0 < start <= end < WIN_HEIGHT


def test_wall_span_shrinks_with_distance():
    near = wall_span(2.0)
    far = wall_span(4.0)
    assert far[0] < near[0]
    assert far[1] > near[1]
    assert far[2] < near[2]


def test_centre_ray_hits_wall_ahead():
    game = make_game()
    hit = cast_ray(game, WIN_WIDTH // 2)
    assert (hit.map_x, hit.map_y) == (0, 3)
    assert hit.side == 0
    assert hit.perp_wall_dist == pytest.approx(game.player.pos_x - (hit.map_x + 1))


@pytest.mark.parametrize("direction", list(Direction)[1:])
@pytest.mark.parametrize("x", [0, 300, 910, 1500, WIN_WIDTH - 1])
def test_every_ray_stops_on_a_wall(direction, x):
    game = make_game(direction)
    hit = cast_ray(game, x)
    assert GRID[hit.map_x][hit.map_y] == "1"
    assert hit.perp_wall_dist > 0


def test_ray_direction_follows_camera_plane():
    game = make_game()
    left = cast_ray(game, 0)
    right = cast_ray(game, WIN_WIDTH - 1)
    assert left.ray_dir_x == pytest.approx(game.player.ray_x - game.plane_x)
    assert left.ray_dir_y == pytest.approx(game.player.ray_y - game.plane_y)
    assert right.ray_dir_y > 0 > left.ray_dir_y


def test_column_color_by_cell_and_side():
    game = make_game()
    assert column_color(game, RayHit(0, 3, 0, 1.0)) == 0x0000FF
    assert column_color(game, RayHit(0, 3, 1, 1.0)) == 0x00007F
    assert column_color(game, RayHit(1, 1, 0, 1.0)) == 0xFF0000
    assert column_color(game, RayHit(3, 3, 0, 1.0)) == 0xFFFF00
    assert column_color(game, RayHit(1, 7, 0, 1.0)) == 0xFFFF00
    assert column_color(game, RayHit(1, 50, 0, 1.0)) == 0x000000


def test_draw_column_layers():
    game = make_game()
    frame = Framebuffer()
    hit = RayHit(0, 3, 0, 4.0)
    _, start, end = wall_span(hit.perp_wall_dist)
    draw_column(game, frame, 7, hit)
    assert frame.get_pixel(7, 0) == CEILING
    assert frame.get_pixel(7, start - 1) == CEILING
    assert frame.get_pixel(7, start) == 0x0000FF
    assert frame.get_pixel(7, end) == 0x0000FF
    assert frame.get_pixel(7, end + 1) == 0x222222
    assert frame.get_pixel(7, WIN_HEIGHT - 1) == 0x222222
    assert frame.get_pixel(8, 0) == 0


def test_draw_column_close_wall_fills_column():
    game = make_game()
    frame = Framebuffer()
    draw_column(game, frame, 0, RayHit(0, 3, 1, 0.0))
    column = {frame.get_pixel(0, y) for y in range(WIN_HEIGHT)}
    assert column == {0x00007F}


def test_render_scene_paints_every_column():
    game = make_game()
    frame = Framebuffer()
    render_scene(game, frame)
    for x in (0, 455, 910, 1365, WIN_WIDTH - 1):
        assert frame.get_pixel(x, WIN_HEIGHT - 1) == 0x222222
        assert frame.get_pixel(x, WIN_HEIGHT // 2) in (0x0000FF, 0x00007F)
        assert frame.get_pixel(x, 0) in (CEILING, 0x0000FF, 0x00007F)