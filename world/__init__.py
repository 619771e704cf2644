"""
World module: terrain categories, noise, and world generation.

Provides:
- Terrain categories and classification tables (from terrain.py)
- Seeded fractal noise (from noise.py)
- Map generation (from generation.py)
"""

# Core terrain types and utilities
from world.terrain import (
    TerrainCategory,
    TerrainRange,
    ClassificationTable,
    build_classification_table,
    reference_table,
    normalize_noise,
)

# Noise
from world.noise import NoiseField

# Map generation
from world.generation import generate_world_map, generate_category_grid, category_histogram

__all__ = [
    # Terrain
    "TerrainCategory",
    "TerrainRange",
    "ClassificationTable",
    "build_classification_table",
    "reference_table",
    "normalize_noise",
    # Noise
    "NoiseField",
    # Generation
    "generate_world_map",
    "generate_category_grid",
    "category_histogram",
]
