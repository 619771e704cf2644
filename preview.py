# preview.py
"""
Placement preview that follows the hovered cell.

The preview reacts to picking results rather than to per-cell callbacks:
each frame the hovered hit for the preview's pointer is looked up and the
preview snaps to that cell's center, lifted above the surface.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from config import PREVIEW_Z_OFFSET
from picking.hits import HitRecord
from surface_grid import SurfaceGrid

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


@dataclass
class PreviewBuilding:
    """A building sprite shown where it would be placed."""
    sprite: str
    offset: Vec2
    position: Vec3
    z_offset: float = PREVIEW_Z_OFFSET


def preview_position(hit: HitRecord, surface: SurfaceGrid, z_offset: float) -> Vec3:
    """World position for a preview over the cell of ``hit``."""
    local = surface.grid_to_local(hit.coord)
    return surface.transform.transform_point_3d(local, z_offset)


def snap_preview(
    preview: PreviewBuilding,
    hovered: Optional[HitRecord],
    surfaces: Iterable[SurfaceGrid],
) -> bool:
    """
    Move ``preview`` over the hovered cell.

    Returns True if the preview moved. With nothing hovered, or a hit on a
    surface that is no longer registered, the preview stays where it was.
    """
    if hovered is None:
        return False
    by_id: Dict[str, SurfaceGrid] = {s.surface_id: s for s in surfaces}
    surface = by_id.get(hovered.surface_id)
    if surface is None:
        return False

    x, y, z = preview_position(hovered, surface, preview.z_offset)
    new_position = (x + preview.offset[0], y + preview.offset[1], z)
    moved = new_position != preview.position
    preview.position = new_position
    return moved
