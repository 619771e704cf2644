"""
Tile picking backend.

Resolves each pointer to the grid cells under it, across every visible
surface, once per frame:

    viewport position -> camera unprojection -> world position
        -> surface inverse transform -> local position -> grid cell

Surfaces are tested nearest first. A hit on a blocking cell stops the
search for that pointer, so farther surfaces under it are not reported.
Nothing here raises for a pointer that hits nothing; it just produces no
hits. Runs after camera and surface transforms are final for the frame.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from camera import CameraState
from isometric import GridCoordinate, Vec2
from picking.hits import HitRecord, PointerHits, PointerState
from surface_grid import SurfaceGrid

log = logging.getLogger("picking.backend")


def find_camera(
    pointer: PointerState,
    cameras: Iterable[CameraState],
    primary_window: Optional[str],
) -> Optional[CameraState]:
    """First active camera rendering to the pointer's target, if any."""
    for camera in cameras:
        if not camera.is_active:
            continue
        target = camera.normalize_target(primary_window)
        if target is not None and target == pointer.target:
            return camera
    return None


def ordered_surfaces(surfaces: Iterable[SurfaceGrid]) -> List[SurfaceGrid]:
    """
    Visible surfaces, nearest first (highest z).

    The sort is stable, so surfaces at the same z keep their registration
    order.
    """
    return sorted((s for s in surfaces if s.visible), key=lambda s: -s.z)


def pick_surface(surface: SurfaceGrid, world_pos: Vec2) -> Optional[Tuple[GridCoordinate, int]]:
    """
    Cell of ``surface`` under a world position.

    Returns (coord, cell_id), or None if the position is off the map, the
    cell is empty or hidden, or the surface transform cannot be inverted.
    """
    offset_x, offset_y = surface.pick_offset
    local = surface.world_to_local((world_pos[0] + offset_x, world_pos[1] + offset_y))
    if local is None:
        if not surface.singular_reported:
            surface.singular_reported = True
            log.warning("Surface %r has a singular transform; it cannot be picked", surface.surface_id)
        return None

    coord = surface.local_to_grid(local)
    if coord is None:
        return None

    cell_id = surface.get(coord)
    if cell_id is None or not surface.is_cell_visible(coord):
        return None
    return coord, cell_id


def hit_depth(camera: CameraState, surface: SurfaceGrid) -> float:
    """Depth of a hit on ``surface``; smaller is nearer."""
    return -camera.projection.near - surface.z


def pick_pointer(
    pointer: PointerState,
    cameras: Sequence[CameraState],
    surfaces: Sequence[SurfaceGrid],
    primary_window: Optional[str],
) -> Optional[PointerHits]:
    """
    Picking for a single pointer.

    Returns None when the pointer has no position, no camera renders to its
    target, or the camera cannot unproject; otherwise the (possibly empty)
    hits from the matched camera.
    """
    if pointer.position is None:
        return None

    camera = find_camera(pointer, cameras, primary_window)
    if camera is None:
        return None

    world_pos = camera.viewport_to_world_2d(pointer.position)
    if world_pos is None:
        return None

    picks: List[HitRecord] = []
    for surface in ordered_surfaces(surfaces):
        picked = pick_surface(surface, world_pos)
        if picked is None:
            continue
        coord, cell_id = picked
        picks.append(HitRecord(
            cell_id=cell_id,
            camera_id=camera.camera_id,
            depth=hit_depth(camera, surface),
            pointer_id=pointer.pointer_id,
            surface_id=surface.surface_id,
            coord=coord,
        ))
        if surface.is_cell_blocking(coord):
            break

    return PointerHits(pointer.pointer_id, picks, float(camera.order))


def tile_picking(
    pointers: Iterable[PointerState],
    cameras: Sequence[CameraState],
    surfaces: Sequence[SurfaceGrid],
    primary_window: Optional[str],
) -> List[PointerHits]:
    """
    Run the picking pass for every pointer.

    Pointers are independent of each other; the returned list is owned by
    the caller.
    """
    events: List[PointerHits] = []
    for pointer in pointers:
        hits = pick_pointer(pointer, cameras, surfaces, primary_window)
        if hits is not None:
            events.append(hits)
    return events
