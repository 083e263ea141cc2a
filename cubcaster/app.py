"""Command-line entry point and the game window loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import numpy as np
import pygame

from .errors import EXIT, FAIL_IMAGE, NO_ARGUMENT, NO_EXTENSION, CubError
from .lines import has_extension
from .loader import Scene, load_scene
from .movement import Key, KeyState
from .raycast import HEIGHT, WIDTH, Player, render_frame

SCENE_EXTENSION = "cub"
TITLE = "cubcaster"
FPS = 60

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def load_texture(path: str | os.PathLike[str]) -> np.ndarray:
    """Load an image as a (height, width) array of 0xRRGGBB pixels."""
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise CubError(FAIL_IMAGE, str(path)) from exc
    rgb = pygame.surfarray.array3d(surface).astype(np.uint32).transpose(1, 0, 2)
    packed = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    return np.ascontiguousarray(packed, dtype=np.uint32)


def _to_rgb(frame: np.ndarray) -> np.ndarray:
    rgb = np.stack(((frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF), axis=-1)
    return rgb.astype(np.uint8).transpose(1, 0, 2)


def run(scene: Scene) -> None:
    """Open the window and run the game until it is closed or ESC is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        textures = {key: load_texture(path) for key, path in scene.config.textures.items()}
        player = Player.from_orientation(scene.orientation, scene.player_x, scene.player_y)
        ceiling = scene.config.ceiling_color()
        floor = scene.config.floor_color()
        keys = KeyState()
        frame = np.zeros((HEIGHT, WIDTH), dtype=np.uint32)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    key = _PYGAME_KEYS.get(event.key)
                    if key is not None and keys.press(key):
                        return
                elif event.type == pygame.KEYUP:
                    key = _PYGAME_KEYS.get(event.key)
                    if key is not None:
                        keys.release(key)
            keys.apply(player, scene.rows)
            render_frame(frame, scene.rows, player, textures, ceiling, floor)
            pygame.surfarray.blit_array(screen, _to_rgb(frame))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def _report(error: CubError) -> None:
    print(error, file=sys.stderr)
    print(EXIT, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(CubError(NO_ARGUMENT), file=sys.stderr)
        return 0
    path = args[0]
    if not has_extension(path, SCENE_EXTENSION):
        _report(CubError(NO_EXTENSION, path))
        return 1
    try:
        scene = load_scene(path)
        run(scene)
    except CubError as error:
        _report(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())