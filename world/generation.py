"""
World generation.

Handles:
- Sampling the noise field over the map
- Classifying samples into terrain categories
- Building the terrain SurfaceGrid, centered on the world origin
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

import numpy as np

from config import MapSettings, NoiseSettings
from isometric import centered_transform
from world.noise import NoiseField
from world.terrain import ClassificationTable, TerrainCategory, normalize_noise

if TYPE_CHECKING:
    from surface_grid import SurfaceGrid

log = logging.getLogger("world.generation")


def generate_category_grid(
    width: int,
    height: int,
    noise: NoiseField,
    table: ClassificationTable,
) -> np.ndarray:
    """
    Classify the noise field over a width x height grid.

    Each cell depends only on its own sample, so the whole grid is done in
    one vectorized pass.

    Returns:
        (width, height) int8 array of TerrainCategory values indexed [x, y]
    """
    # float64 so boundary comparisons match ClassificationTable.classify exactly.
    # Comparing in float32 instead can flip a sample lying exactly on a range edge.
    samples = noise.sample_grid(width, height).astype(np.float64)
    return table.classify_array(normalize_noise(samples))


def generate_world_map(
    map_settings: MapSettings,
    noise_settings: NoiseSettings,
    table: ClassificationTable,
    surface_id: str = "terrain",
    noise: Optional[NoiseField] = None,
) -> "SurfaceGrid":
    """
    Generate the terrain surface.

    Args:
        map_settings: Size, spacing and placement of the map
        noise_settings: Noise parameters (ignored if ``noise`` is given)
        table: Classification ranges
        surface_id: Name of the resulting surface
        noise: Pre-built noise field to reuse

    Returns:
        A fully occupied SurfaceGrid; every cell visible and non-blocking
    """
    from surface_grid import SurfaceGrid

    if noise is None:
        noise = NoiseField(noise_settings)

    size = (map_settings.width, map_settings.height)
    surface = SurfaceGrid(
        surface_id=surface_id,
        size=size,
        tile_size=map_settings.tile_size,
        grid_size=map_settings.grid_spacing,
        transform=centered_transform(size, map_settings.grid_spacing, map_settings.z),
        pick_offset=map_settings.pick_offset,
    )

    categories = generate_category_grid(map_settings.width, map_settings.height, noise, table)
    surface.fill(categories)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Generated %r %dx%d: %s", surface_id, size[0], size[1], category_histogram(categories))

    return surface


def category_histogram(categories: np.ndarray) -> Dict[str, int]:
    """Count of cells per terrain category name."""
    counts = np.bincount(categories.ravel().astype(np.int64), minlength=len(TerrainCategory))
    return {category.name: int(counts[category]) for category in TerrainCategory}
