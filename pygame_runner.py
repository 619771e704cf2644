# pygame_runner.py
"""
Pygame-CE frontend for the isometric terrain prototype.

Architecture:
- World space: 2D world coordinates (y-up); the terrain is centered on the origin
- Screen space: window pixels (y-down); the camera maps between the two

Each frame the mouse becomes a PointerState, the picking pass resolves it
to a cell, and the building preview snaps onto that cell.

Controls:
- Mouse: hover tiles
- ESC: quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

from config import MapSettings, NoiseSettings, default_map_settings, default_noise_settings
from main import Scene, build_scene, update_scene
from picking import PointerState
from render import load_atlas, render_hover, render_hud, render_preview, render_surface
from render.config import (
    ATLAS_PATH,
    COLOR_BG_DARK,
    FONT_SIZE,
    PREVIEW_SPRITE,
    PRIMARY_WINDOW,
    TARGET_FPS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from world.terrain import reference_table

MOUSE_POINTER = "mouse"

log = logging.getLogger("pygame_runner")


def read_pointers() -> List[PointerState]:
    """The mouse as a pointer; no position while it is outside the window."""
    position = pygame.mouse.get_pos() if pygame.mouse.get_focused() else None
    if position is not None:
        position = (float(position[0]), float(position[1]))
    return [PointerState(pointer_id=MOUSE_POINTER, target=PRIMARY_WINDOW, position=position)]


def load_sprite(path: str) -> Optional[pygame.Surface]:
    if not Path(path).is_file():
        return None
    return pygame.image.load(path).convert_alpha()


def render_frame(screen: pygame.Surface, font, scene: Scene, atlas, preview_sprite, seed: int) -> None:
    """Draw surfaces back to front, then hover, preview and HUD."""
    screen.fill(COLOR_BG_DARK)
    camera = scene.cameras[0]
    hovered = scene.hovered.get(MOUSE_POINTER)

    for surface in sorted(scene.surfaces, key=lambda s: s.z):
        render_surface(screen, surface, camera, atlas)
        if hovered is not None and hovered.surface_id == surface.surface_id:
            render_hover(screen, surface, camera, hovered.coord)

    render_preview(screen, scene.preview, camera, preview_sprite)
    render_hud(screen, font, hovered, scene.surfaces, seed)


def run(map_settings: MapSettings, noise_settings: NoiseSettings,
        atlas_path: str = ATLAS_PATH, with_platform: bool = False) -> None:
    """Main loop."""
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()

    scene = build_scene(
        map_settings,
        noise_settings,
        reference_table(),
        viewport_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
        primary_window=PRIMARY_WINDOW,
        preview_sprite=PREVIEW_SPRITE,
        with_platform=with_platform,
    )
    atlas = load_atlas(atlas_path, map_settings.tile_size)
    preview_sprite = load_sprite(scene.preview.sprite)

    running = True
    while running:
        clock.tick(TARGET_FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                for camera in scene.cameras:
                    camera.set_viewport_size(event.w, event.h)

        # Transforms are final for this frame; pick before anything reacts
        update_scene(scene, read_pointers(), MOUSE_POINTER)
        render_frame(screen, font, scene, atlas, preview_sprite, noise_settings.seed)
        pygame.display.flip()

    pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = default_map_settings()
    parser = argparse.ArgumentParser(description="Isometric terrain with tile picking")
    parser.add_argument("--seed", type=int, default=default_noise_settings().seed, help="Noise seed")
    parser.add_argument("--width", type=int, default=defaults.width, help="Map width in cells")
    parser.add_argument("--height", type=int, default=defaults.height, help="Map height in cells")
    parser.add_argument("--atlas", default=ATLAS_PATH, help="Texture atlas image (strip of tiles)")
    parser.add_argument("--platform", action="store_true", help="Add a blocking platform layer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    defaults = default_map_settings()
    map_settings = MapSettings(
        width=args.width,
        height=args.height,
        tile_size=defaults.tile_size,
        grid_spacing=defaults.grid_spacing,
        z=defaults.z,
        pick_offset=defaults.pick_offset,
    )
    noise_defaults = default_noise_settings()
    noise_settings = NoiseSettings(
        seed=args.seed,
        octaves=noise_defaults.octaves,
        frequency=noise_defaults.frequency,
        weighted_strength=noise_defaults.weighted_strength,
        lacunarity=noise_defaults.lacunarity,
        gain=noise_defaults.gain,
    )
    run(map_settings, noise_settings, args.atlas, args.platform)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
