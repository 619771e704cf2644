# render/colors.py
"""Color lookups for terrain categories."""
from __future__ import annotations

from typing import Tuple, cast

from render.config import DEFAULT_COLOR, TERRAIN_COLORS
from world.terrain import TerrainCategory

Color = Tuple[int, int, int]


def color_for_category(category: int) -> Color:
    """Flat color for a TerrainCategory value."""
    try:
        name = TerrainCategory(category).name
    except ValueError:
        return DEFAULT_COLOR
    return TERRAIN_COLORS.get(name, DEFAULT_COLOR)


def blend_colors(color1: Color, color2: Color, weight: float = 0.5) -> Color:
    """Blend two colors with given weight (0 = all color1, 1 = all color2)."""
    return cast(Color, tuple(int(c1 * (1 - weight) + c2 * weight) for c1, c2 in zip(color1, color2)))
