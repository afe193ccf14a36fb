# -*- coding: utf-8 -*-
# Wingmac/geometry/sampling.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Flatten an edge curve (a sequence of Polyline/Spline segments) into one point list in
the symmetry-aligned frame, sorted by span coordinate.

Main Tasks
----------
    1. Polyline → its vertices, transformed, in drawing order.
    2. Spline → for each Bezier piece, `subdivisions + 1` evenly spaced parameter
       values (t = 0, 1/subdivisions, ..., 1), transformed.
    3. Pool all segment samples and stable-sort ascending by transformed y.
    4. Count span direction reversals inside segments (folded edges).

Notes
-----
- Degenerate segments (< 2 points/knots) contribute nothing.
- No deduplication: shared endpoints between contiguous segments stay in the list
  and are handled by the chord interpolation (zero-width brackets).
- Sorting by span assumes each edge is monotonic in span. Sharply swept or S-shaped
  edges fold silently; `span_reversals` reports this, it does not repair it.
"""

from typing import Iterable
import numpy as np

from .frame import CoordinateTransformer
from .primitives import CurveSegment, Polyline, Spline
from .spline.cubic import bezier_points
from ._validation import _as_xy

__all__ = ["sample_segment", "sample_edge", "span_reversals"]

DEFAULT_SUBDIVISIONS = 10


def sample_segment(segment: CurveSegment,
                   transformer: CoordinateTransformer,
                   subdivisions: int = DEFAULT_SUBDIVISIONS) -> np.ndarray:
    """
    Sample one segment in drawing order and map it into the aligned frame.

    Returns
    -------
    np.ndarray
        (M, 2) transformed points; (0, 2) for degenerate segments.

    Raises
    ------
    TypeError
        If `segment` is neither a Polyline nor a Spline.
    """
    if isinstance(segment, Polyline):
        if segment.is_degenerate:
            return np.empty((0, 2))
        raw = _as_xy(segment.points)
    elif isinstance(segment, Spline):
        if segment.is_degenerate or not segment.pieces:
            return np.empty((0, 2))
        t = np.arange(subdivisions + 1, dtype=np.float64) / subdivisions
        raw = np.vstack([bezier_points(piece, t) for piece in segment.pieces])
    else:
        raise TypeError("Unsupported curve segment type: {}".format(type(segment).__name__))
    return transformer.forward(raw)


def sample_edge(edge: Iterable[CurveSegment],
                transformer: CoordinateTransformer,
                subdivisions: int = DEFAULT_SUBDIVISIONS) -> np.ndarray:
    """
    Flatten a whole edge into a span-sorted (N, 2) array of (chord, span) rows.

    Column 0 is the chordwise coordinate, column 1 the span coordinate. The sort is
    stable, so equal-span points keep their drawing order.
    """
    parts = [sample_segment(seg, transformer, subdivisions) for seg in edge]
    pts = np.vstack(parts) if parts else np.empty((0, 2))
    if pts.shape[0] == 0:
        return pts
    order = np.argsort(pts[:, 1], kind="stable")
    return pts[order]


def span_reversals(edge: Iterable[CurveSegment],
                   transformer: CoordinateTransformer,
                   subdivisions: int = DEFAULT_SUBDIVISIONS,
                   tol: float = 1e-12) -> int:
    """
    Count changes of span direction within each segment (drawing order).

    Zero means every segment is monotonic in span and the sorted profile is a
    faithful flattening.
    """
    count = 0
    for seg in edge:
        y = sample_segment(seg, transformer, subdivisions)[:, 1]
        d = np.diff(y)
        s = np.sign(d[np.abs(d) > tol])
        if s.size > 1:
            count += int(np.count_nonzero(s[1:] != s[:-1]))
    return count
