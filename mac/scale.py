# -*- coding: utf-8 -*-
# Wingmac/mac/scale.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose:
--------
Convert pixel-space MAC and area to real units from the known wingspan.

Assumptions:
------------
   - The symmetry line is the aircraft centerline, so the largest |span| seen on
     either edge is the drawn half-span: scale = (wingspan / 2) / max|y|.
   - A span interval that does not cross zero means only one wing half was drawn;
     its area is doubled to represent the full aircraft.
"""

from dataclasses import dataclass

from .errors import InputError
from .profile import ChordProfile

__all__ = ["Scale", "resolve_scale"]


@dataclass(frozen=True)
class Scale:
    factor: float
    half_span_pixels: float

    def length(self, pixels: float) -> float:
        return pixels * self.factor

    def area(self, pixels_sq: float, mirrored: bool) -> float:
        return pixels_sq * self.factor * self.factor * (2.0 if mirrored else 1.0)


def resolve_scale(leading: ChordProfile, trailing: ChordProfile, wingspan: float) -> Scale:
    """
    Derive the pixel→real scale factor.

    Raises
    ------
    InputError
        If no sample lies off the centerline (max |y| == 0).
    """
    max_dist = max(leading.max_abs_span, trailing.max_abs_span)
    if max_dist <= 0.0:
        raise InputError("Cannot scale: every sample lies on the symmetry line", {"max_dist": max_dist})
    return Scale(factor=(wingspan / 2.0) / max_dist, half_span_pixels=max_dist)
