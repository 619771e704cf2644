"""Pointer input and hit result types exchanged with the picking pass."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from isometric import GridCoordinate

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class PointerState:
    """
    A pointer as reported by the input layer this frame.

    ``position`` is in viewport pixels of ``target``; None once the pointer
    has left every viewport.
    """
    pointer_id: str
    target: str
    position: Optional[Vec2]


@dataclass(frozen=True)
class HitRecord:
    """
    One picked cell.

    Smaller depth is nearer the camera. ``surface_id`` and ``coord`` let
    consumers react to the hit without looking the cell up again.
    """
    cell_id: int
    camera_id: str
    depth: float
    pointer_id: str
    surface_id: str
    coord: GridCoordinate


@dataclass
class PointerHits:
    """All hits for one pointer from one camera, nearest surface first."""
    pointer_id: str
    picks: List[HitRecord] = field(default_factory=list)
    order: float = 0.0
