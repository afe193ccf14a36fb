# -*- coding: utf-8 -*-
# Wingmac/mac/integrator.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Integrate the local chord c(y) = |x_TE(y) - x_LE(y)| over the span interval that both
edges cover, and derive the mean aerodynamic chord and its spanwise centroid.

Main Tasks
----------
    1. Overlap: min_span = max(LE.first, TE.first), max_span = min(LE.last, TE.last).
    2. Sample y_k = min_span + k*dy, k = 0..n_steps (dy = span/n_steps, final point
       included) and accumulate with the left-rectangle rule:
           area      = Σ c dy
           moment    = Σ |y| c dy
           chord_sq  = Σ c² dy
    3. MAC = chord_sq / area,  Y_mac = moment / area.

Errors
------
- InsufficientPointsError: either profile has < 2 samples.
- ZeroSpanError: the overlap interval is empty (max_span - min_span <= 0).
- ZeroAreaError: the accumulated area is zero.

Notes
-----
- The per-step spans and chords are kept on the result so the MAC position search
  reuses them instead of re-interpolating.
"""

from dataclasses import dataclass
import logging
import numpy as np

from .errors import InsufficientPointsError, ZeroSpanError, ZeroAreaError
from .profile import ChordProfile

__all__ = ["Integration", "integrate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Integration:
    """Pixel-space integrals over the overlapping span (immutable)."""
    min_span: float
    max_span: float
    dy: float
    area: float
    moment: float
    chord_sq: float
    mac: float
    span_centroid: float
    spans: np.ndarray
    chords: np.ndarray

    @property
    def straddles_centerline(self) -> bool:
        """True when the span interval crosses zero (both wing halves drawn)."""
        return self.min_span * self.max_span < 0.0


def integrate(leading: ChordProfile, trailing: ChordProfile, n_steps: int = 1000) -> Integration:
    """
    Integrate area, first moment and chord-squared between two edge profiles.

    Parameters
    ----------
    leading, trailing : ChordProfile
        Edge profiles in the same aligned frame.
    n_steps : int
        Number of equal span steps (default 1000).

    Returns
    -------
    Integration
    """
    for name, prof in (("leading", leading), ("trailing", trailing)):
        if not prof.is_usable:
            raise InsufficientPointsError(
                "Insufficient points on the {} edge".format(name),
                {"edge": name, "n_samples": len(prof)},
            )

    min_span = max(leading.min_span, trailing.min_span)
    max_span = min(leading.max_span, trailing.max_span)
    if max_span - min_span <= 0.0:
        raise ZeroSpanError(
            "Zero span detected: leading and trailing edges do not overlap",
            {"min_span": min_span, "max_span": max_span},
        )

    dy = (max_span - min_span) / n_steps
    ys = min_span + dy * np.arange(n_steps + 1, dtype=np.float64)
    ys[-1] = max_span

    chords = np.abs(trailing.chord_at_many(ys) - leading.chord_at_many(ys))
    area = float(np.sum(chords) * dy)
    moment = float(np.sum(np.abs(ys) * chords) * dy)
    chord_sq = float(np.sum(chords * chords) * dy)

    if area == 0.0:
        raise ZeroAreaError("Zero area detected", {"min_span": min_span, "max_span": max_span})

    mac = chord_sq / area
    span_centroid = moment / area
    logger.debug(
        "[integrate] span=[%.6g, %.6g] steps=%d area=%.6g MAC=%.6g Y_mac=%.6g",
        min_span, max_span, n_steps, area, mac, span_centroid,
    )
    return Integration(
        min_span=min_span,
        max_span=max_span,
        dy=dy,
        area=area,
        moment=moment,
        chord_sq=chord_sq,
        mac=mac,
        span_centroid=span_centroid,
        spans=ys,
        chords=chords,
    )
