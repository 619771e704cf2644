"""
Picking module: pointer-to-cell resolution over isometric surfaces.

Provides:
- Pointer and hit types (from hits.py)
- The per-frame picking pass (from backend.py)
- Merging and hover focus across cameras (from focus.py)
"""

from picking.hits import PointerState, HitRecord, PointerHits
from picking.backend import (
    find_camera,
    ordered_surfaces,
    pick_surface,
    pick_pointer,
    tile_picking,
)
from picking.focus import merge_pointer_hits, hits_for_pointer, hovered_cells

__all__ = [
    # Types
    "PointerState",
    "HitRecord",
    "PointerHits",
    # Backend
    "find_camera",
    "ordered_surfaces",
    "pick_surface",
    "pick_pointer",
    "tile_picking",
    # Focus
    "merge_pointer_hits",
    "hits_for_pointer",
    "hovered_cells",
]
