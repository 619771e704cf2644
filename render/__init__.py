# render/__init__.py
"""
Rendering module for the pygame frontend.

Provides rendering functions for isometric surfaces, hover feedback, the
placement preview and the HUD.
"""
from render.colors import Color, color_for_category, blend_colors
from render.map import (
    load_atlas,
    world_to_viewport_array,
    surface_cell_geometry,
    render_surface,
    render_hover,
    render_preview,
)
from render.hud import draw_text, describe_hit, render_hud

__all__ = [
    # Colors
    "Color",
    "color_for_category",
    "blend_colors",
    # Map
    "load_atlas",
    "world_to_viewport_array",
    "surface_cell_geometry",
    "render_surface",
    "render_hover",
    "render_preview",
    # HUD
    "draw_text",
    "describe_hit",
    "render_hud",
]
