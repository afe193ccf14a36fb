# -*- coding: utf-8 -*-
# Wingmac/geometry/primitives.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Immutable value types for traced planform geometry: points, the symmetry line,
cubic Bezier pieces, and the two curve segment kinds an edge is drawn with.

Main Tasks
----------
    1. `Point2D`, `SymmetryLine`, `BezierPiece` value objects.
    2. `Polyline` and `Spline` segments; a `Spline` derives its Bezier pieces from
       its knots at construction (see geometry.spline.cubic).
    3. `CurveSegment` union and `EdgeCurve` alias.

Notes
-----
- `CurveSegment` is closed: exactly `Polyline | Spline`. Each case knows how to
  flatten itself in geometry.sampling.
- Coordinates are unit-agnostic (pixels until scaled).
"""

from dataclasses import dataclass, field
from typing import Sequence, Tuple, Union
import math

import numpy as np

__all__ = [
    "Point2D",
    "SymmetryLine",
    "BezierPiece",
    "Polyline",
    "Spline",
    "CurveSegment",
    "EdgeCurve",
]


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_xy(cls, xy) -> "Point2D":
        return cls(float(xy[0]), float(xy[1]))


@dataclass(frozen=True)
class SymmetryLine:
    """Aircraft centerline; p1 is the origin of the aligned frame."""
    p1: Point2D
    p2: Point2D

    @property
    def angle(self) -> float:
        """Rotation angle atan2(dy, dx) in radians."""
        return math.atan2(self.p2.y - self.p1.y, self.p2.x - self.p1.x)

    @property
    def length(self) -> float:
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)


@dataclass(frozen=True)
class BezierPiece:
    """Cubic Bezier piece: endpoints p1/p2 and control points cp1/cp2."""
    p1: Point2D
    cp1: Point2D
    cp2: Point2D
    p2: Point2D

    def control_polygon(self) -> np.ndarray:
        """Return the four control points as a (4, 2) array."""
        return np.array(
            [[self.p1.x, self.p1.y],
             [self.cp1.x, self.cp1.y],
             [self.cp2.x, self.cp2.y],
             [self.p2.x, self.p2.y]],
            dtype=np.float64,
        )


def _as_points(seq) -> Tuple[Point2D, ...]:
    return tuple(p if isinstance(p, Point2D) else Point2D.from_xy(p) for p in seq)


@dataclass(frozen=True)
class Polyline:
    """Straight-segment edge piece; vertices are used as-is."""
    points: Tuple[Point2D, ...]

    def __post_init__(self):
        object.__setattr__(self, "points", _as_points(self.points))

    @property
    def is_degenerate(self) -> bool:
        return len(self.points) < 2


@dataclass(frozen=True)
class Spline:
    """
    Interpolating cubic spline through `knots`.

    `pieces` is derived once from the knots by `fit_cubic_spline` and is empty for
    fewer than 2 knots.
    """
    knots: Tuple[Point2D, ...]
    pieces: Tuple[BezierPiece, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Local import: spline.cubic depends on the value types above.
        from .spline.cubic import fit_cubic_spline

        knots = _as_points(self.knots)
        object.__setattr__(self, "knots", knots)
        object.__setattr__(self, "pieces", tuple(fit_cubic_spline(knots)))

    @property
    def is_degenerate(self) -> bool:
        return len(self.knots) < 2


CurveSegment = Union[Polyline, Spline]
EdgeCurve = Sequence[CurveSegment]
