# render/map.py
"""Isometric surface, hover and preview rendering with camera support.

Cells are drawn back to front (y-sorted): the cell farthest up the screen
first, so nearer tiles overlap it. Cell geometry is computed for the whole
surface at once with NumPy and then handed to pygame.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

import numpy as np
import pygame

from isometric import GridCoordinate, diamond_corners
from render.colors import blend_colors, color_for_category
from render.config import (
    COLOR_HOVER,
    COLOR_PREVIEW,
    COLOR_TILE_OUTLINE,
    HOVER_BLEND_WEIGHT,
)
from surface_grid import EMPTY_CELL

if TYPE_CHECKING:
    from camera import CameraState
    from preview import PreviewBuilding
    from surface_grid import SurfaceGrid

log = logging.getLogger("render.map")

# Scaled atlas tiles keyed by (atlas id, index, width, height)
_SCALED_TILE_CACHE: Dict[Tuple[int, int, int, int], pygame.Surface] = {}


def load_atlas(path: str, tile_size: Tuple[float, float]) -> Optional[List[pygame.Surface]]:
    """
    Split a horizontal strip atlas into tile images, indexed by texture index.

    Returns None if the file is missing; the map is then drawn with flat
    colors.
    """
    if not Path(path).is_file():
        log.info("No texture atlas at %s; drawing flat colors", path)
        return None
    image = pygame.image.load(path)
    tile_w, tile_h = int(tile_size[0]), int(tile_size[1])
    count = image.get_width() // tile_w
    return [image.subsurface(pygame.Rect(i * tile_w, 0, tile_w, tile_h)) for i in range(count)]


def world_to_viewport_array(points: np.ndarray, camera: "CameraState") -> Optional[np.ndarray]:
    """Vectorized CameraState.world_to_viewport for an (..., 2) array."""
    inv = camera.transform.inverse_matrix()
    scale = camera.projection.scale
    if inv is None or scale == 0:
        return None
    vp = camera.viewport
    view_x = inv[0, 0] * points[..., 0] + inv[0, 1] * points[..., 1] + inv[0, 2]
    view_y = inv[1, 0] * points[..., 0] + inv[1, 1] * points[..., 1] + inv[1, 2]
    return np.stack([
        vp.x + vp.width / 2 + view_x / scale,
        vp.y + vp.height / 2 - view_y / scale,
    ], axis=-1)


def surface_cell_geometry(surface: "SurfaceGrid") -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    World-space geometry of every drawable cell, in y-sorted draw order.

    Returns:
        coords: (N, 2) int array of (col, row)
        centers: (N, 2) world positions of cell centers
        corners: (N, 4, 2) world positions of diamond corners (top, right, bottom, left)
    """
    drawable = (surface.storage != EMPTY_CELL) & surface.cell_visible
    coords = np.argwhere(drawable)
    # Farthest (largest col + row, top of the screen) first
    coords = coords[np.argsort(-(coords[:, 0] + coords[:, 1]), kind="stable")]

    half_w = surface.grid_size[0] / 2
    half_h = surface.grid_size[1] / 2
    local = np.stack([
        (coords[:, 0] - coords[:, 1]) * half_w,
        (coords[:, 0] + coords[:, 1]) * half_h,
    ], axis=-1).astype(np.float64)

    offsets = np.array([[0.0, half_h], [half_w, 0.0], [0.0, -half_h], [-half_w, 0.0]])
    local_corners = local[:, None, :] + offsets[None, :, :]

    m = surface.transform.matrix()
    linear = m[:2, :2]
    translation = m[:2, 2]
    centers = local @ linear.T + translation
    corners = local_corners @ linear.T + translation
    return coords, centers, corners


def render_surface(
    target: pygame.Surface,
    surface: "SurfaceGrid",
    camera: "CameraState",
    atlas: Optional[List[pygame.Surface]] = None,
) -> None:
    """Draw every visible cell of ``surface`` as seen by ``camera``."""
    if not surface.visible:
        return
    coords, centers, corners = surface_cell_geometry(surface)
    if len(coords) == 0:
        return
    screen_centers = world_to_viewport_array(centers, camera)
    screen_corners = world_to_viewport_array(corners, camera)
    if screen_centers is None or screen_corners is None:
        return

    pixels_per_unit = 1.0 / camera.projection.scale
    tile_w = max(1, int(round(surface.tile_size[0] * pixels_per_unit)))
    tile_h = max(1, int(round(surface.tile_size[1] * pixels_per_unit)))

    for i, (col, row) in enumerate(coords):
        category = int(surface.categories[col, row])
        if atlas is not None and category < len(atlas):
            tile = _scaled_tile(atlas, category, tile_w, tile_h)
            cx, cy = screen_centers[i]
            target.blit(tile, (int(cx - tile_w / 2), int(cy - tile_h / 2)))
        else:
            points = [(float(x), float(y)) for x, y in screen_corners[i]]
            pygame.draw.polygon(target, color_for_category(category), points)
            pygame.draw.polygon(target, COLOR_TILE_OUTLINE, points, 1)


def _scaled_tile(atlas: List[pygame.Surface], index: int, width: int, height: int) -> pygame.Surface:
    key = (id(atlas), index, width, height)
    if key not in _SCALED_TILE_CACHE:
        _SCALED_TILE_CACHE[key] = pygame.transform.scale(atlas[index], (width, height))
    return _SCALED_TILE_CACHE[key]


def render_hover(
    target: pygame.Surface,
    surface: "SurfaceGrid",
    camera: "CameraState",
    coord: GridCoordinate,
) -> None:
    """Outline and tint the hovered cell."""
    center = surface.grid_to_local(coord)
    world = np.array([surface.local_to_world(c) for c in diamond_corners(center, surface.grid_size)])
    screen = world_to_viewport_array(world, camera)
    if screen is None:
        return
    points = [(float(x), float(y)) for x, y in screen]
    fill = blend_colors(color_for_category(int(surface.categories[coord])), COLOR_HOVER, HOVER_BLEND_WEIGHT)
    pygame.draw.polygon(target, fill, points)
    pygame.draw.polygon(target, COLOR_HOVER, points, 2)


def render_preview(
    target: pygame.Surface,
    preview: "PreviewBuilding",
    camera: "CameraState",
    sprite: Optional[pygame.Surface] = None,
) -> None:
    """Draw the placement preview at its world position."""
    screen = camera.world_to_viewport((preview.position[0], preview.position[1]))
    if screen is None:
        return
    x, y = int(screen[0]), int(screen[1])
    if sprite is None:
        pygame.draw.circle(target, COLOR_PREVIEW, (x, y), 6, 2)
        return
    target.blit(sprite, (x - sprite.get_width() // 2, y - sprite.get_height() // 2))
