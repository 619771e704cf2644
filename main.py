"""
Isometric terrain prototype.

Generates a noise-classified isometric map and resolves the pointer to the
cell under it each frame, moving a building preview onto that cell.

Frame order: cameras and surfaces are final -> picking pass -> hover focus
-> preview snap. Nothing here depends on pygame; pygame_runner.py drives it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from camera import CameraState, OrthographicProjection, Viewport
from config import (
    CAMERA_FAR,
    CAMERA_NEAR,
    CAMERA_ORDER,
    CAMERA_SCALE,
    MapSettings,
    NoiseSettings,
)
from picking import PointerHits, PointerState, hovered_cells, tile_picking
from picking.hits import HitRecord
from preview import PreviewBuilding, snap_preview
from surface_grid import SurfaceGrid
from transform import Transform2D
from world.generation import generate_world_map
from world.terrain import ClassificationTable, TerrainCategory

log = logging.getLogger("main")

# Platform layer shown above the terrain when requested
PLATFORM_SIZE = (6, 6)
PLATFORM_Z_LIFT = 1.0
PLATFORM_HEIGHT = 24.0


@dataclass
class Scene:
    """Everything the picking pass reads, plus what reacts to it."""
    surfaces: List[SurfaceGrid]
    cameras: List[CameraState]
    preview: PreviewBuilding
    primary_window: Optional[str]
    hovered: Dict[str, HitRecord] = field(default_factory=dict)
    last_events: List[PointerHits] = field(default_factory=list)


def build_camera(camera_id: str, viewport_size: Tuple[float, float], target: Optional[str] = None) -> CameraState:
    """Reference orthographic camera centered on the world origin."""
    return CameraState(
        camera_id=camera_id,
        is_active=True,
        target=target,
        viewport=Viewport(x=0.0, y=0.0, width=viewport_size[0], height=viewport_size[1]),
        transform=Transform2D.from_xyz(0.0, 0.0, 0.0),
        projection=OrthographicProjection(near=CAMERA_NEAR, far=CAMERA_FAR, scale=CAMERA_SCALE),
        order=CAMERA_ORDER,
    )


def build_platform(terrain: SurfaceGrid) -> SurfaceGrid:
    """
    A small blocking stone layer floating over the middle of the terrain.

    Pointers over the platform pick only the platform cell; the terrain
    under it is occluded.
    """
    t = terrain.transform
    platform = SurfaceGrid(
        surface_id="platform",
        size=PLATFORM_SIZE,
        tile_size=terrain.tile_size,
        grid_size=terrain.grid_size,
        transform=Transform2D(t.x, t.y + PLATFORM_HEIGHT + terrain.rows * terrain.grid_size[1] / 4,
                              t.z + PLATFORM_Z_LIFT, t.rotation, t.scale_x, t.scale_y),
        pick_offset=terrain.pick_offset,
    )
    for col in range(PLATFORM_SIZE[0]):
        for row in range(PLATFORM_SIZE[1]):
            platform.set_cell((col, row), TerrainCategory.STONE, visible=True, blocking=True)
    return platform


def build_scene(
    map_settings: MapSettings,
    noise_settings: NoiseSettings,
    table: ClassificationTable,
    viewport_size: Tuple[float, float],
    primary_window: Optional[str],
    preview_sprite: str,
    with_platform: bool = False,
) -> Scene:
    """Generate the world and set up the camera and preview."""
    terrain = generate_world_map(map_settings, noise_settings, table)
    surfaces = [terrain]
    if with_platform:
        surfaces.append(build_platform(terrain))

    preview = PreviewBuilding(sprite=preview_sprite, offset=(0.0, 0.0), position=(0.0, 0.0, 3.0))
    log.info("Scene ready: %d surface(s), seed %d", len(surfaces), noise_settings.seed)
    return Scene(
        surfaces=surfaces,
        cameras=[build_camera("main", viewport_size)],
        preview=preview,
        primary_window=primary_window,
    )


def update_scene(scene: Scene, pointers: Iterable[PointerState], preview_pointer: str) -> Optional[HitRecord]:
    """
    Run one frame of picking and react to it.

    Returns the hit under ``preview_pointer``, if any.
    """
    scene.last_events = tile_picking(pointers, scene.cameras, scene.surfaces, scene.primary_window)
    scene.hovered = hovered_cells(scene.last_events)
    hovered = scene.hovered.get(preview_pointer)
    snap_preview(scene.preview, hovered, scene.surfaces)
    return hovered
