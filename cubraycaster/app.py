"""The window, the event loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .framebuffer import Framebuffer  # noqa: E402
from .game import Game  # noqa: E402
from .minimap import Key, apply_key, render_minimap  # noqa: E402
from .parsing import MapParseError, parse_map_file  # noqa: E402
from .raycast import render_scene  # noqa: E402

_TITLE = "cub3D"
_MINIMAP_SCALE = 10

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_e: Key.E,
    pygame.K_q: Key.Q,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def key_from_pygame(code: int) -> Key | None:
    """Translate a pygame key code into a game key, or None if unused."""
    return _PYGAME_KEYS.get(code)


def build_game(path: str | os.PathLike[str]) -> tuple[Game, Framebuffer]:
    """Load a scene and draw its first frame, view and minimap."""
    parsed = parse_map_file(path)
    game = Game.from_parsed(parsed, scale=_MINIMAP_SCALE)
    frame = Framebuffer()
    render_scene(game, frame)
    render_minimap(game, frame)
    return game, frame


def _present(screen: pygame.Surface, frame: Framebuffer) -> None:
    image = pygame.image.frombuffer(frame.to_rgb_bytes(), (frame.width, frame.height), "RGB")
    screen.blit(image, (0, 0))
    pygame.display.flip()


def run(path: str | os.PathLike[str]) -> int:
    """Open the window and play until it is closed or Escape is pressed."""
    game, frame = build_game(path)
    pygame.init()
    try:
        screen = pygame.display.set_mode((frame.width, frame.height))
        pygame.display.set_caption(_TITLE)
        _present(screen, frame)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN:
                continue
            key = key_from_pygame(event.key)
            if key is Key.ESCAPE:
                break
            if key is None:
                continue
            render_minimap(game, frame)
            apply_key(game, frame, key)
            _present(screen, frame)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        return run(args[0])
    except MapParseError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())