# config.py
"""
Centralized configuration for the isometric terrain prototype.

This file contains high-level, cross-cutting constants.
Domain-specific constants are in:
- render/config.py (window size, colors, etc.)

The constants below are the reference configuration. Code that builds a
map or a camera takes explicit settings objects (see NoiseSettings and
MapSettings) so nothing relies on a silent default.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# =============================================================================
# MAP
# =============================================================================
GRID_WIDTH = 32
GRID_HEIGHT = 32

# Pixel size of one tile image in the texture atlas
TILE_SIZE: Tuple[float, float] = (16.0, 17.0)

# Diamond spacing between neighboring cell centers (world units)
GRID_SPACING: Tuple[float, float] = (16.0, 8.0)

# Layer z of the terrain surface; surfaces with larger z are nearer the camera
MAP_Z = 1.0

# Cursor nudge applied before picking (tile art is taller than its diamond)
PICK_OFFSET: Tuple[float, float] = (0.0, -4.0)

# =============================================================================
# NOISE
# =============================================================================
NOISE_SEED = 1325
NOISE_OCTAVES = 5
NOISE_FREQUENCY = 0.035
NOISE_WEIGHTED_STRENGTH = -0.5
NOISE_LACUNARITY = 2.0
NOISE_GAIN = 0.5

# =============================================================================
# TERRAIN CLASSIFICATION
# =============================================================================
# (category name, start, end) in declaration order; first match wins.
# The last range's end is treated as inclusive so [0, 1] is fully covered.
TERRAIN_RANGES: Tuple[Tuple[str, float, float], ...] = (
    ("WATER", 0.0, 0.2),
    ("SAND", 0.2, 0.375),
    ("DIRT", 0.375, 0.45),
    ("GRASS", 0.45, 0.81),
    ("STONE", 0.81, 1.0),
)
TERRAIN_FALLBACK = "DIRT"

# =============================================================================
# CAMERA
# =============================================================================
CAMERA_NEAR = -1000.0
CAMERA_FAR = 1000.0
CAMERA_SCALE = 0.5
CAMERA_ORDER = 0

# =============================================================================
# PREVIEW
# =============================================================================
PREVIEW_Z_OFFSET = 10.0     # Height above the surface the preview is drawn at


@dataclass(frozen=True)
class NoiseSettings:
    """Parameters of the fractal noise field."""
    seed: int
    octaves: int
    frequency: float
    weighted_strength: float
    lacunarity: float
    gain: float


@dataclass(frozen=True)
class MapSettings:
    """Parameters of one generated terrain surface."""
    width: int
    height: int
    tile_size: Tuple[float, float]
    grid_spacing: Tuple[float, float]
    z: float
    pick_offset: Tuple[float, float]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Map size must be positive, got {self.width}x{self.height}")
        if self.grid_spacing[0] <= 0 or self.grid_spacing[1] <= 0:
            raise ValueError(f"Grid spacing must be positive, got {self.grid_spacing}")


def default_noise_settings() -> NoiseSettings:
    """Reference noise parameters."""
    return NoiseSettings(
        seed=NOISE_SEED,
        octaves=NOISE_OCTAVES,
        frequency=NOISE_FREQUENCY,
        weighted_strength=NOISE_WEIGHTED_STRENGTH,
        lacunarity=NOISE_LACUNARITY,
        gain=NOISE_GAIN,
    )


def default_map_settings() -> MapSettings:
    """Reference map parameters."""
    return MapSettings(
        width=GRID_WIDTH,
        height=GRID_HEIGHT,
        tile_size=TILE_SIZE,
        grid_spacing=GRID_SPACING,
        z=MAP_Z,
        pick_offset=PICK_OFFSET,
    )
