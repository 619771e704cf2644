# isometric.py
"""
Diamond isometric grid math.

Converts between two coordinate spaces:
1. Grid space - integer (col, row) cell coordinates
2. Local space - 2D surface coordinates before the surface's placement
   transform is applied (y-up, same units as the grid spacing)

Cell (0, 0) sits at the local origin. Increasing col moves right and up,
increasing row moves left and up, so the map reads as a diamond:

    local.x = (col - row) * grid_w / 2
    local.y = (col + row) * grid_h / 2
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

from transform import Transform2D

GridCoordinate = Tuple[int, int]
Vec2 = Tuple[float, float]


def grid_to_local(coord: GridCoordinate, grid_size: Vec2) -> Vec2:
    """Center of a cell in local surface space."""
    col, row = coord
    half_w = grid_size[0] / 2
    half_h = grid_size[1] / 2
    return (col - row) * half_w, (col + row) * half_h


def local_to_grid_fractional(local: Vec2, grid_size: Vec2) -> Vec2:
    """Continuous (col, row) for a local point; integers land on cell centers."""
    x_term = local[0] / grid_size[0]
    y_term = local[1] / grid_size[1]
    return y_term + x_term, y_term - x_term


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def local_to_grid(local: Vec2, grid_size: Vec2, map_size: Tuple[int, int]) -> Optional[GridCoordinate]:
    """
    Cell containing a local point, or None if it falls outside the map.

    In (col, row) space every cell is a unit square centered on its integer
    coordinate, so rounding each axis picks the diamond the point is in.
    """
    col_f, row_f = local_to_grid_fractional(local, grid_size)
    col = round_half_up(col_f)
    row = round_half_up(row_f)
    if 0 <= col < map_size[0] and 0 <= row < map_size[1]:
        return col, row
    return None


def local_to_world(local: Vec2, transform: Transform2D) -> Vec2:
    return transform.transform_point(local)


def world_to_local(world: Vec2, transform: Transform2D) -> Optional[Vec2]:
    """Inverse of local_to_world; None if the transform cannot be inverted."""
    return transform.inverse_transform_point(world)


def centered_transform(map_size: Tuple[int, int], grid_size: Vec2, z: float) -> Transform2D:
    """
    Placement that centers a map on the world origin.

    Uses the centers of the first and last cells, so the midpoint between
    them lands on (0, 0).
    """
    low = grid_to_local((0, 0), grid_size)
    high = grid_to_local((map_size[0] - 1, map_size[1] - 1), grid_size)
    diff_x = high[0] - low[0]
    diff_y = high[1] - low[1]
    return Transform2D.from_xyz(-low[0] - diff_x / 2, -low[1] - diff_y / 2, z)


def diamond_corners(center: Vec2, grid_size: Vec2) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
    """Corners (top, right, bottom, left) of the diamond around a cell center."""
    cx, cy = center
    half_w = grid_size[0] / 2
    half_h = grid_size[1] / 2
    return (
        (cx, cy + half_h),
        (cx + half_w, cy),
        (cx, cy - half_h),
        (cx - half_w, cy),
    )
