# -*- coding: utf-8 -*-
# Wingmac/mac/api.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Single entry point for the MAC pipeline. Takes traced edges, a symmetry line and the
real wingspan, and returns an immutable `MACResult`.

Pipeline
--------
validate inputs → resolve config → aligned frame (symmetry line)
  → flatten LE/TE edges (polyline vertices / spline Bezier samples), sort by span
  → ChordProfile ×2 → integrate (area, moment, ∫c²) → locate MAC station
  → scale to real units → MACResult

Notes
-----
- Pure function of its arguments: nothing is cached or retained between calls.
- Errors are raised synchronously as `MACError` subclasses; no partial result.
"""

import logging
import math
from typing import Any, Dict, Optional

from geometry.frame import CoordinateTransformer
from geometry.primitives import EdgeCurve, Polyline, Spline, SymmetryLine
from geometry.sampling import sample_edge, span_reversals
from .config import resolve_config
from .errors import InputError
from .integrator import integrate
from .locator import locate_mac_span
from .profile import ChordProfile
from .result import MACResult
from .scale import resolve_scale

__all__ = ["calculate_mac"]

logger = logging.getLogger(__name__)


def _as_edge(edge, name: str):
    if edge is None:
        raise InputError("Missing {} edge".format(name))
    if isinstance(edge, (Polyline, Spline)):
        return [edge]
    edge = list(edge)
    if not edge:
        raise InputError("Missing {} edge: no segments drawn".format(name))
    for seg in edge:
        if not isinstance(seg, (Polyline, Spline)):
            raise InputError(
                "The {} edge contains an unsupported segment".format(name),
                {"type": type(seg).__name__},
            )
    return edge


def _validate_wingspan(wingspan) -> float:
    try:
        value = float(wingspan)
    except (TypeError, ValueError):
        raise InputError("Wingspan must be a number", {"wingspan": wingspan})
    if not math.isfinite(value) or value <= 0.0:
        raise InputError("Wingspan must be a positive number", {"wingspan": wingspan})
    return value


def calculate_mac(
    leading_edge: EdgeCurve,
    trailing_edge: EdgeCurve,
    symmetry_line: SymmetryLine,
    wingspan: float,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> MACResult:
    """
    Compute the mean aerodynamic chord and planform area of a traced wing.

    Args
    ----
    leading_edge, trailing_edge : EdgeCurve
        Ordered Polyline/Spline segments for each edge, in drawing coordinates.
    symmetry_line : SymmetryLine
        Aircraft centerline; p1 becomes the origin of the aligned frame.
    wingspan : float
        Real tip-to-tip span (> 0), in the unit the results should be reported in.
    config : dict, optional
        Overrides for `mac.config.DEFAULTS` (sampling / integration / profile).

    Returns
    -------
    MACResult

    Raises
    ------
    InputError
        Missing edges/symmetry line, zero-length symmetry line, bad wingspan or config.
    InsufficientPointsError, ZeroSpanError, ZeroAreaError
        Degenerate geometry (see mac.integrator).
    """
    le_edge = _as_edge(leading_edge, "leading")
    te_edge = _as_edge(trailing_edge, "trailing")
    if symmetry_line is None:
        raise InputError("Missing symmetry line")
    if symmetry_line.length == 0.0:
        raise InputError(
            "Symmetry line endpoints coincide",
            {"p1": (symmetry_line.p1.x, symmetry_line.p1.y)},
        )
    span_real = _validate_wingspan(wingspan)
    cfg = resolve_config(config)

    transformer = CoordinateTransformer.from_symmetry_line(symmetry_line)
    subdivisions = cfg["sampling"]["bezier_subdivisions"]
    tol = cfg["profile"]["endpoint_tol"]

    profiles = {}
    for name, edge in (("leading", le_edge), ("trailing", te_edge)):
        folds = span_reversals(edge, transformer, subdivisions)
        if folds:
            logger.warning(
                "[calculate_mac] %s edge reverses span direction %d time(s); "
                "the span-sorted profile may fold.", name, folds,
            )
        profiles[name] = ChordProfile(sample_edge(edge, transformer, subdivisions), endpoint_tol=tol)

    leading, trailing = profiles["leading"], profiles["trailing"]
    logger.debug("[calculate_mac] Sampled LE=%r TE=%r angle=%.6g rad", leading, trailing, transformer.angle)

    integ = integrate(leading, trailing, n_steps=cfg["integration"]["n_steps"])
    span_of_mac, _ = locate_mac_span(integ)
    x_le = leading.chord_at(span_of_mac)

    scale = resolve_scale(leading, trailing, span_real)
    mirrored = not integ.straddles_centerline

    result = MACResult(
        mac=scale.length(integ.mac),
        area=scale.area(integ.area, mirrored),
        span_of_mac=span_of_mac,
        leading_edge_x_at_mac=x_le,
        scale_factor=scale.factor,
        rotation_angle=transformer.angle,
        origin=symmetry_line.p1,
        mac_pixels=integ.mac,
        area_pixels=integ.area,
        span_centroid=integ.span_centroid,
        min_span=integ.min_span,
        max_span=integ.max_span,
        mirrored=mirrored,
    )
    logger.info(
        "[calculate_mac] MAC=%.4g area=%.4g (scale=%.6g, mirrored=%s)",
        result.mac, result.area, result.scale_factor, mirrored,
    )
    return result
