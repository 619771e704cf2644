# camera.py
"""
Orthographic camera state for viewport management.

Handles the transformation between two coordinate spaces:
1. Viewport space - pixel coordinates inside the camera's render target
   (origin top-left, y-down, as pointers report them)
2. World space - 2D world coordinates (y-up)

The camera transform places the center of the view in the world; the
projection scale says how many world units one viewport pixel spans.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from transform import Transform2D

log = logging.getLogger("camera")

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class OrthographicProjection:
    near: float
    far: float
    scale: float        # World units per viewport pixel (0.5 = 2x zoom)


@dataclass
class Viewport:
    """Rectangle of the render target a camera draws into, in pixels."""
    x: float
    y: float
    width: float
    height: float


@dataclass
class CameraState:
    """
    A camera as seen by the picking pass.

    ``target`` names the render target (window or texture) the camera draws
    to; None means the primary window and is resolved with normalize_target.
    ``order`` sequences cameras that share a target; higher draws on top.
    """
    camera_id: str
    is_active: bool
    target: Optional[str]
    viewport: Viewport
    transform: Transform2D
    projection: OrthographicProjection
    order: int

    def normalize_target(self, primary_window: Optional[str]) -> Optional[str]:
        """Concrete target id, or None if the primary window is unknown."""
        if self.target is None:
            return primary_window
        return self.target

    def set_viewport_size(self, width: float, height: float) -> None:
        """Set the viewport size in pixels."""
        self.viewport.width = width
        self.viewport.height = height

    def center_on(self, world_x: float, world_y: float) -> None:
        """Center the camera on a world position."""
        t = self.transform
        self.transform = Transform2D(world_x, world_y, t.z, t.rotation, t.scale_x, t.scale_y)

    def viewport_to_world_2d(self, position: Vec2) -> Optional[Vec2]:
        """
        Unproject a viewport position to world space.

        Returns None if the camera cannot map positions (empty viewport or
        singular transform). Positions outside the viewport still map.
        """
        vp = self.viewport
        if vp.width <= 0 or vp.height <= 0 or self.projection.scale == 0:
            return None

        # Normalized device coordinates, y flipped to point up
        ndc_x = (position[0] - vp.x) / vp.width * 2.0 - 1.0
        ndc_y = 1.0 - (position[1] - vp.y) / vp.height * 2.0

        # Inverse orthographic projection (view centered on the camera)
        view_x = ndc_x * vp.width * self.projection.scale / 2.0
        view_y = ndc_y * vp.height * self.projection.scale / 2.0

        if self.transform.inverse_matrix() is None:
            log.warning("Camera %r has a singular transform; no world position", self.camera_id)
            return None
        return self.transform.transform_point((view_x, view_y))

    def world_to_viewport(self, world: Vec2) -> Optional[Vec2]:
        """Project a world position to viewport pixels (inverse of viewport_to_world_2d)."""
        vp = self.viewport
        if vp.width <= 0 or vp.height <= 0 or self.projection.scale == 0:
            return None
        view = self.transform.inverse_transform_point(world)
        if view is None:
            return None
        ndc_x = view[0] * 2.0 / (vp.width * self.projection.scale)
        ndc_y = view[1] * 2.0 / (vp.height * self.projection.scale)
        return (
            vp.x + (ndc_x + 1.0) / 2.0 * vp.width,
            vp.y + (1.0 - ndc_y) / 2.0 * vp.height,
        )
