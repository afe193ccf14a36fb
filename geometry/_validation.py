# -*- coding: utf-8 -*-
# Wingmac/geometry/_validation.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose:
--------
Shared validation utilities so that frame, sampling and spline modules check point
arrays the same way.

Main Tasks:
   1. Coerce point-like input (sequence of Point2D, (x, y) pairs, ndarray) to float64 (N, 2).
   2. Validate array structure with optional finite value checking.
"""

from typing import Optional
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default False

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def _as_xy(points, check_finite: bool = True) -> np.ndarray:
    """
    Return `points` as a float64 (N, 2) array.

    Accepts an ndarray, a sequence of (x, y) pairs, or a sequence of objects with
    `.x`/`.y` attributes (e.g. Point2D). An empty sequence yields shape (0, 2).
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64, copy=False)
    else:
        rows = [(p.x, p.y) if hasattr(p, "x") else tuple(p) for p in points]
        arr = np.asarray(rows, dtype=np.float64).reshape(-1, 2) if rows else np.empty((0, 2))
    _assert_xy(arr, check_finite=check_finite)
    return arr
