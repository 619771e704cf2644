# surface_grid.py
"""
SurfaceGrid - one layer of isometric tiles.

Per-cell data lives in NumPy arrays indexed [col, row] (array-first, no
per-cell objects). Cell identifiers are plain ints derived from the
coordinate; ``storage`` maps a coordinate to its id, or EMPTY_CELL when
nothing occupies it.

Picking treats cell data as read-only for the duration of a frame. Other
systems (building placement, etc.) may change cells between frames through
set_cell / clear_cell, which keep each coordinate mapped to at most one id.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

import numpy as np

from isometric import (
    GridCoordinate,
    Vec2,
    grid_to_local,
    local_to_grid,
    local_to_world,
    world_to_local,
)
from transform import Transform2D
from world.terrain import TerrainCategory

EMPTY_CELL = -1


@dataclass
class SurfaceGrid:
    """
    A grid of diamond tiles placed in the world by ``transform``.

    Attributes:
        surface_id: Name used by consumers to tell surfaces apart
        size: (columns, rows)
        tile_size: Pixel size of a tile image (rendering only)
        grid_size: Spacing between neighboring cell centers in world units
        transform: World placement; its z orders overlapping surfaces
        pick_offset: World-space nudge applied to the cursor before picking
        visible: Whether the surface is drawn at all (culled surfaces are skipped)
    """
    surface_id: str
    size: Tuple[int, int]
    tile_size: Vec2
    grid_size: Vec2
    transform: Transform2D
    pick_offset: Vec2
    visible: bool = True

    storage: np.ndarray = field(init=False, repr=False)
    categories: np.ndarray = field(init=False, repr=False)
    cell_visible: np.ndarray = field(init=False, repr=False)
    blocking: np.ndarray = field(init=False, repr=False)
    # Set once picking has logged this surface's transform as singular
    singular_reported: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        columns, rows = self.size
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Surface {self.surface_id!r} has empty size {self.size}")
        if self.grid_size[0] <= 0 or self.grid_size[1] <= 0:
            raise ValueError(f"Surface {self.surface_id!r} has non-positive grid size {self.grid_size}")

        self.storage = np.full((columns, rows), EMPTY_CELL, dtype=np.int32)
        self.categories = np.full((columns, rows), int(TerrainCategory.DIRT), dtype=np.int8)
        self.cell_visible = np.zeros((columns, rows), dtype=bool)
        self.blocking = np.zeros((columns, rows), dtype=bool)

    # =========================================================================
    # Geometry
    # =========================================================================

    @property
    def columns(self) -> int:
        return self.size[0]

    @property
    def rows(self) -> int:
        return self.size[1]

    @property
    def z(self) -> float:
        return self.transform.z

    def in_bounds(self, coord: GridCoordinate) -> bool:
        return 0 <= coord[0] < self.columns and 0 <= coord[1] < self.rows

    def grid_to_local(self, coord: GridCoordinate) -> Vec2:
        return grid_to_local(coord, self.grid_size)

    def local_to_grid(self, local: Vec2) -> Optional[GridCoordinate]:
        return local_to_grid(local, self.grid_size, self.size)

    def local_to_world(self, local: Vec2) -> Vec2:
        return local_to_world(local, self.transform)

    def world_to_local(self, world: Vec2) -> Optional[Vec2]:
        return world_to_local(world, self.transform)

    def set_transform(self, transform: Transform2D) -> None:
        """Move the surface; a singular transform will be reported again."""
        self.transform = transform
        self.singular_reported = False

    def cell_center_world(self, coord: GridCoordinate) -> Vec2:
        """World position of a cell center."""
        return self.local_to_world(self.grid_to_local(coord))

    # =========================================================================
    # Cell storage
    # =========================================================================

    def cell_id_for(self, coord: GridCoordinate) -> int:
        """The id a cell at ``coord`` gets (row-major arena index)."""
        return coord[1] * self.columns + coord[0]

    def coord_of(self, cell_id: int) -> GridCoordinate:
        """Inverse of cell_id_for."""
        return cell_id % self.columns, cell_id // self.columns

    def get(self, coord: GridCoordinate) -> Optional[int]:
        """Cell id stored at ``coord``, or None if empty or out of bounds."""
        if not self.in_bounds(coord):
            return None
        cell_id = int(self.storage[coord])
        return None if cell_id == EMPTY_CELL else cell_id

    def set_cell(
        self,
        coord: GridCoordinate,
        category: TerrainCategory,
        visible: bool = True,
        blocking: bool = False,
    ) -> int:
        """Occupy ``coord`` (replacing any previous cell) and return its id."""
        if not self.in_bounds(coord):
            raise ValueError(f"{coord} is outside surface {self.surface_id!r} of size {self.size}")
        cell_id = self.cell_id_for(coord)
        self.storage[coord] = cell_id
        self.categories[coord] = int(category)
        self.cell_visible[coord] = visible
        self.blocking[coord] = blocking
        return cell_id

    def clear_cell(self, coord: GridCoordinate) -> None:
        if not self.in_bounds(coord):
            return
        self.storage[coord] = EMPTY_CELL
        self.cell_visible[coord] = False
        self.blocking[coord] = False

    def fill(self, categories: np.ndarray, visible: bool = True, blocking: bool = False) -> None:
        """Occupy every cell at once from a (columns, rows) category array."""
        if categories.shape != self.size:
            raise ValueError(f"Category grid {categories.shape} does not match surface size {self.size}")
        cols, rows = np.meshgrid(np.arange(self.columns), np.arange(self.rows), indexing="ij")
        self.storage[:] = rows * self.columns + cols
        self.categories[:] = categories
        self.cell_visible[:] = visible
        self.blocking[:] = blocking

    def category_at(self, coord: GridCoordinate) -> Optional[TerrainCategory]:
        if self.get(coord) is None:
            return None
        return TerrainCategory(int(self.categories[coord]))

    def is_cell_visible(self, coord: GridCoordinate) -> bool:
        return bool(self.cell_visible[coord])

    def is_cell_blocking(self, coord: GridCoordinate) -> bool:
        return bool(self.blocking[coord])

    def set_blocking(self, coord: GridCoordinate, blocking: bool) -> None:
        self.blocking[coord] = blocking

    def set_cell_visible(self, coord: GridCoordinate, visible: bool) -> None:
        self.cell_visible[coord] = visible

    def occupied_cells(self) -> Iterator[GridCoordinate]:
        """Occupied coordinates, col-major like the array layout."""
        for col, row in np.argwhere(self.storage != EMPTY_CELL):
            yield int(col), int(row)
