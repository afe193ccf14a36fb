# -*- coding: utf-8 -*-
# Wingmac/geometry/spline/__init__.py

"""
Project: Wingmac
Date: 10/16/2026

Spline Subfolder:
-----------------
Knot-interpolating cubic used for freehand edge segments.

Modules:
--------
- tridiagonal: Thomas algorithm (no pivoting) for banded systems.
- cubic:       Tangent system assembly, Bezier conversion and Bezier evaluation.
"""

from .tridiagonal import solve_tridiagonal
from .cubic import knot_tangents, fit_cubic_spline, bezier_points

__all__ = ["solve_tridiagonal", "knot_tangents", "fit_cubic_spline", "bezier_points"]
