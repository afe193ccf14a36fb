# -*- coding: utf-8 -*-
# Wingmac/geometry/__init__.py

"""
Project: Wingmac
Date: 10/16/2026

Modules:
--------
- primitives: Immutable value types (Point2D, SymmetryLine, BezierPiece) and the
              closed segment union `CurveSegment = Polyline | Spline`.

- frame:      CoordinateTransformer: drawing coordinates ↔ symmetry-aligned frame
              (translate by -p1, rotate by -angle; exact inverse).

- spline:     Package for the knot-interpolating cubic:
                * tridiagonal: Thomas algorithm,
                * cubic: tangent system, Bezier conversion and evaluation.

- sampling:   Flatten an edge (list of segments) into a span-sorted point array and
              report folded (non-monotonic) segments.

All modules here are pure NumPy: no logging, plotting or file I/O.
"""

from .primitives import Point2D, SymmetryLine, BezierPiece, Polyline, Spline, CurveSegment, EdgeCurve
from .frame import CoordinateTransformer

__all__ = [
    "Point2D", "SymmetryLine", "BezierPiece", "Polyline", "Spline",
    "CurveSegment", "EdgeCurve", "CoordinateTransformer",
    "frame", "primitives", "sampling", "spline",
]
