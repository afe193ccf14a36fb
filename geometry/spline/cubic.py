# -*- coding: utf-8 -*-
# Wingmac/geometry/spline/cubic.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Index-parameterized interpolating cubic spline through user knots, emitted as a chain
of cubic Bezier pieces, plus Bezier evaluation.

Main Tasks
----------
    1. Assemble one tridiagonal system per axis for the knot tangents D_i:
           2*D_0     + D_1               = 3*(P_1 - P_0)
           D_{i-1}   + 4*D_i + D_{i+1}   = 3*(P_{i+1} - P_{i-1})     (1 <= i <= n-1)
           D_{n-1}   + 2*D_n             = 3*(P_n - P_{n-1})
    2. Convert tangents to Bezier control points per knot span:
           cp1 = P_i + D_i / 3,   cp2 = P_{i+1} - D_{i+1} / 3
    3. Evaluate cubic Bezier pieces at parameter values t in [0, 1].

Notes
-----
- Knot spacing in the fitting parameter is always 1 (not arc-length).
- The end rows are clamped-tangent equations, so the curve interpolates every knot
  and is C1 across knots; curvature is not continuous in general.
- Fewer than 2 knots returns an empty list (no exception).
"""

from typing import List, Sequence
import numpy as np

from ..primitives import BezierPiece, Point2D
from .._validation import _as_xy
from .tridiagonal import solve_tridiagonal

__all__ = ["knot_tangents", "fit_cubic_spline", "bezier_points"]


def _tangent_system(n: int):
    """Diagonals (lower, main, upper) for n+1 knots."""
    lower = np.ones(n + 1)
    main = np.full(n + 1, 4.0)
    upper = np.ones(n + 1)
    main[0] = 2.0
    main[n] = 2.0
    lower[0] = 0.0  # unused by the solver
    upper[n] = 0.0  # unused by the solver
    return lower, main, upper


def knot_tangents(knots) -> np.ndarray:
    """
    Solve for the tangent vectors D_i at each knot.

    Parameters
    ----------
    knots : sequence of Point2D | (N, 2) array-like
        Ordered knots P_0..P_n, N = n+1 >= 2.

    Returns
    -------
    np.ndarray
        (N, 2) tangents; column 0 is D_x, column 1 is D_y.

    Raises
    ------
    ValueError
        If fewer than 2 knots are given or the knots are malformed.
    """
    P = _as_xy(knots)
    if P.shape[0] < 2:
        raise ValueError("Need at least 2 knots to fit tangents.")
    n = P.shape[0] - 1

    rhs = np.empty_like(P)
    rhs[0] = 3.0 * (P[1] - P[0])
    rhs[1:n] = 3.0 * (P[2:] - P[:-2])
    rhs[n] = 3.0 * (P[n] - P[n - 1])

    lower, main, upper = _tangent_system(n)
    dx = solve_tridiagonal(lower, main, upper, rhs[:, 0])
    dy = solve_tridiagonal(lower, main, upper, rhs[:, 1])
    return np.column_stack((dx, dy))


def fit_cubic_spline(knots: Sequence[Point2D]) -> List[BezierPiece]:
    """
    Fit the spline and return one Bezier piece per knot span.

    The piece endpoints are the input knots themselves, so the curve passes through
    every knot exactly. Degenerate input (< 2 knots) yields [].
    """
    knots = [k if isinstance(k, Point2D) else Point2D.from_xy(k) for k in knots]
    if len(knots) < 2:
        return []

    D = knot_tangents(knots)
    pieces: List[BezierPiece] = []
    for i in range(len(knots) - 1):
        p1, p2 = knots[i], knots[i + 1]
        cp1 = Point2D(p1.x + D[i, 0] / 3.0, p1.y + D[i, 1] / 3.0)
        cp2 = Point2D(p2.x - D[i + 1, 0] / 3.0, p2.y - D[i + 1, 1] / 3.0)
        pieces.append(BezierPiece(p1=p1, cp1=cp1, cp2=cp2, p2=p2))
    return pieces


def bezier_points(piece: BezierPiece, t) -> np.ndarray:
    """
    Evaluate a cubic Bezier piece with the Bernstein form.

    B(t) = (1-t)^3 P1 + 3(1-t)^2 t CP1 + 3(1-t) t^2 CP2 + t^3 P2

    Parameters
    ----------
    piece : BezierPiece
    t : array-like
        Parameter values in [0, 1].

    Returns
    -------
    np.ndarray
        (len(t), 2) points.
    """
    t = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
    mt = 1.0 - t
    C = piece.control_polygon()
    return (mt ** 3) * C[0] + 3.0 * (mt ** 2) * t * C[1] + 3.0 * mt * (t ** 2) * C[2] + (t ** 3) * C[3]
