# -*- coding: utf-8 -*-
# Wingmac/mac/profile.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Chordwise position of one edge as a piecewise-linear function of span.

Query rules for a span value y
------------------------------
1) first.y <= y <= last.y: take the FIRST adjacent pair (i, i+1) with
   span[i] <= y <= span[i+1] and interpolate linearly. A zero-width pair returns
   the left sample's chord value.
2) Otherwise, within `endpoint_tol` of the first/last span: that sample's value.
3) Otherwise: 0.0 as an out-of-range sentinel (not an error).

Notes
-----
- Interpolation is written as (1-t)*x_i + t*x_{i+1}, so queries exactly at a
  sample's span return that sample's chord value bit-for-bit.
"""

from typing import Union
import numpy as np

from geometry._validation import _assert_xy

__all__ = ["ChordProfile"]


class ChordProfile:
    """
    Span-sorted samples of an edge in the aligned frame.

    Parameters
    ----------
    samples : np.ndarray
        (N, 2) array of (chord, span) rows sorted ascending by span (column 1).
    endpoint_tol : float, optional
        Snap tolerance for queries just outside [first.y, last.y]. Default 1e-9.

    Raises
    ------
    ValueError
        If samples are malformed or not sorted by span.
    """

    def __init__(self, samples: np.ndarray, endpoint_tol: float = 1e-9):
        S = np.asarray(samples, dtype=np.float64)
        _assert_xy(S, check_finite=True)
        if S.shape[0] > 1 and np.any(np.diff(S[:, 1]) < 0.0):
            raise ValueError("ChordProfile samples must be sorted ascending by span.")
        self._chord = S[:, 0].copy()
        self._span = S[:, 1].copy()
        self.endpoint_tol = float(endpoint_tol)

    def __len__(self) -> int:
        return int(self._span.shape[0])

    def __repr__(self) -> str:
        if len(self) == 0:
            return "ChordProfile(n=0)"
        return "ChordProfile(n={}, span=[{:.6g}, {:.6g}])".format(len(self), self.min_span, self.max_span)

    @property
    def is_usable(self) -> bool:
        return len(self) >= 2

    @property
    def samples(self) -> np.ndarray:
        return np.column_stack((self._chord, self._span))

    @property
    def min_span(self) -> float:
        return float(self._span[0])

    @property
    def max_span(self) -> float:
        return float(self._span[-1])

    @property
    def max_abs_span(self) -> float:
        """Largest |span| over all samples (0.0 when empty)."""
        if len(self) == 0:
            return 0.0
        return float(np.max(np.abs(self._span)))

    def chord_at_many(self, ys) -> np.ndarray:
        """Vectorized chord position query; see module docstring for the rules."""
        y = np.atleast_1d(np.asarray(ys, dtype=np.float64))
        out = np.zeros_like(y)
        n = len(self)
        if n == 0:
            return out

        span, chord = self._span, self._chord
        inside = (y >= span[0]) & (y <= span[-1]) if n >= 2 else np.zeros(y.shape, dtype=bool)

        if np.any(inside):
            yi = y[inside]
            # first index with span[j] >= y; the first bracketing pair starts at j-1
            j = np.searchsorted(span, yi, side="left")
            i = np.clip(j - 1, 0, n - 2)
            y0, y1 = span[i], span[i + 1]
            x0, x1 = chord[i], chord[i + 1]
            width = y1 - y0
            flat = width == 0.0
            t = np.where(flat, 0.0, (yi - y0) / np.where(flat, 1.0, width))
            out[inside] = np.where(flat, x0, (1.0 - t) * x0 + t * x1)

        outside = ~inside
        if np.any(outside):
            yo = y[outside]
            vals = np.zeros_like(yo)
            near_last = np.abs(yo - span[-1]) < self.endpoint_tol
            near_first = np.abs(yo - span[0]) < self.endpoint_tol
            vals = np.where(near_last, chord[-1], vals)
            vals = np.where(near_first, chord[0], vals)
            out[outside] = vals
        return out

    def chord_at(self, y: float) -> float:
        """Chord position at a single span value."""
        return float(self.chord_at_many([y])[0])

    def __call__(self, ys) -> Union[float, np.ndarray]:
        if np.ndim(ys) == 0:
            return self.chord_at(ys)
        return self.chord_at_many(ys)
