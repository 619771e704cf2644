# render/hud.py
"""Text overlay describing what the pointer is over."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

import pygame

from render.config import COLOR_TEXT_GRAY, COLOR_TEXT_WHITE, HUD_MARGIN, LINE_HEIGHT
from world.terrain import TerrainCategory

if TYPE_CHECKING:
    from picking.hits import HitRecord
    from surface_grid import SurfaceGrid

Color = Tuple[int, int, int]

# Rendered text keyed by (font id, text, color)
_TEXT_CACHE: Dict[Tuple[int, str, Color], pygame.Surface] = {}


def draw_text(target: pygame.Surface, font, text: str, pos: Tuple[int, int],
              color: Color = COLOR_TEXT_WHITE) -> None:
    """Draw text at the given position, reusing rendered surfaces."""
    key = (id(font), text, color)
    if key not in _TEXT_CACHE:
        _TEXT_CACHE[key] = font.render(text, True, color)
    target.blit(_TEXT_CACHE[key], pos)


def describe_hit(hit: Optional["HitRecord"], surfaces: Iterable["SurfaceGrid"]) -> str:
    """One-line description of a hovered cell."""
    if hit is None:
        return "No cell under cursor"
    surface = next((s for s in surfaces if s.surface_id == hit.surface_id), None)
    category = surface.category_at(hit.coord) if surface is not None else None
    name = category.name.title() if isinstance(category, TerrainCategory) else "?"
    col, row = hit.coord
    return f"{hit.surface_id} ({col}, {row}) {name}  depth {hit.depth:.1f}"


def render_hud(target: pygame.Surface, font, hovered: Optional["HitRecord"],
               surfaces: Iterable["SurfaceGrid"], seed: int) -> None:
    """Seed and hovered-cell info in the top-left corner."""
    x, y = HUD_MARGIN, HUD_MARGIN
    draw_text(target, font, f"Seed {seed}", (x, y), COLOR_TEXT_GRAY)
    draw_text(target, font, describe_hit(hovered, surfaces), (x, y + LINE_HEIGHT))
