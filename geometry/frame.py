# -*- coding: utf-8 -*-
# Wingmac/geometry/frame.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Map drawing coordinates into the symmetry-aligned frame and back.

Conventions
-----------
- angle = atan2(p2.y - p1.y, p2.x - p1.x) of the symmetry line.
- forward: translate by -p1, then rotate by -angle. The symmetry direction lands on
  +x (chordwise); y is the signed span distance from the centerline.
- inverse: rotate by +angle, then translate by +p1.

Notes
-----
- Pure NumPy; functions accept (N, 2) arrays or a single (2,) point.
"""

from dataclasses import dataclass
import math
import numpy as np

from .primitives import Point2D, SymmetryLine

__all__ = ["CoordinateTransformer"]


def _rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s], [s, c]], dtype=np.float64)


@dataclass(frozen=True)
class CoordinateTransformer:
    """
    Rigid transform tied to a symmetry line.

    Attributes
    ----------
    origin : Point2D
        Symmetry line p1 (frame origin).
    angle : float
        Rotation angle of the symmetry line in radians.
    """
    origin: Point2D
    angle: float

    @classmethod
    def from_symmetry_line(cls, line: SymmetryLine) -> "CoordinateTransformer":
        return cls(origin=line.p1, angle=line.angle)

    def forward(self, points) -> np.ndarray:
        """Drawing coordinates → aligned frame. Shape is preserved ((2,) or (N, 2))."""
        P = np.asarray(points, dtype=np.float64)
        shifted = P - self.origin.as_array()
        # row vectors: p' = R(-a) p  <=>  p'^T = p^T R(-a)^T
        return shifted @ _rotation(-self.angle).T

    def inverse(self, points) -> np.ndarray:
        """Aligned frame → drawing coordinates."""
        P = np.asarray(points, dtype=np.float64)
        return P @ _rotation(self.angle).T + self.origin.as_array()

    def forward_point(self, p: Point2D) -> Point2D:
        return Point2D.from_xy(self.forward(p.as_array()))

    def inverse_point(self, p: Point2D) -> Point2D:
        return Point2D.from_xy(self.inverse(p.as_array()))
