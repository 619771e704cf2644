# render/config.py
"""
Configuration constants for the rendering domain.
Includes window dimensions, colors, font sizes, and other visual tuning values.
"""
from __future__ import annotations

from typing import Dict, Tuple

# =============================================================================
# WINDOW & LAYOUT
# =============================================================================
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Isometric terrain"
PRIMARY_WINDOW = "primary"

FONT_SIZE = 18
LINE_HEIGHT = 20
HUD_MARGIN = 12
TARGET_FPS = 60

# =============================================================================
# COLORS
# =============================================================================
COLOR_BG_DARK = (20, 20, 25)
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_GRAY = (160, 160, 160)
COLOR_TILE_OUTLINE = (30, 30, 30)
COLOR_HOVER = (255, 255, 200)
COLOR_PREVIEW = (200, 80, 60)

HOVER_BLEND_WEIGHT = 0.35

# Terrain category colors, keyed by TerrainCategory name (used without an atlas)
TERRAIN_COLORS: Dict[str, Tuple[int, int, int]] = {
    "DIRT": (150, 120, 90),
    "GRASS": (96, 160, 72),
    "STONE": (128, 128, 128),
    "SAND": (204, 174, 120),
    "WATER": (48, 133, 214),
}
DEFAULT_COLOR = (150, 120, 90)

# =============================================================================
# ASSETS
# =============================================================================
ATLAS_PATH = "assets/iso.png"
PREVIEW_SPRITE = "assets/h1(2x2).png"
