# transform.py
"""
2D placement transforms for surfaces, cameras and sprites.

A Transform2D is translation + rotation + non-uniform scale acting on the
x/y plane, with a z value carried alongside for layering. Points are
mapped with a 3x3 homogeneous matrix:

    world = T(x, y) * R(rotation) * S(sx, sy) * local
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Transform2D:
    x: float
    y: float
    z: float
    rotation: float     # Radians, counter-clockwise
    scale_x: float
    scale_y: float

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> "Transform2D":
        """Pure translation."""
        return cls(x=x, y=y, z=z, rotation=0.0, scale_x=1.0, scale_y=1.0)

    def matrix(self) -> np.ndarray:
        """Homogeneous 3x3 matrix mapping local points to world points."""
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        return np.array([
            [cos_r * self.scale_x, -sin_r * self.scale_y, self.x],
            [sin_r * self.scale_x, cos_r * self.scale_y, self.y],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    def inverse_matrix(self) -> Optional[np.ndarray]:
        """Inverse of matrix(), or None when the scale collapses an axis."""
        m = self.matrix()
        det = m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]
        if det == 0.0 or not np.isfinite(det):
            return None
        inv = np.linalg.inv(m)
        if not np.isfinite(inv).all():
            return None
        return inv

    def transform_point(self, point: Vec2) -> Vec2:
        """Map a local point into world space."""
        m = self.matrix()
        px, py = point
        return (
            float(m[0, 0] * px + m[0, 1] * py + m[0, 2]),
            float(m[1, 0] * px + m[1, 1] * py + m[1, 2]),
        )

    def inverse_transform_point(self, point: Vec2) -> Optional[Vec2]:
        """Map a world point into local space; None if the transform is singular."""
        inv = self.inverse_matrix()
        if inv is None:
            return None
        px, py = point
        return (
            float(inv[0, 0] * px + inv[0, 1] * py + inv[0, 2]),
            float(inv[1, 0] * px + inv[1, 1] * py + inv[1, 2]),
        )

    def transform_point_3d(self, point: Vec2, local_z: float) -> Tuple[float, float, float]:
        """Map a local point lifted to ``local_z`` into world space (z is additive)."""
        wx, wy = self.transform_point(point)
        return wx, wy, self.z + local_z


IDENTITY = Transform2D.from_xyz(0.0, 0.0, 0.0)
