# -*- coding: utf-8 -*-
# Wingmac/mac/result.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose
-------
Immutable result of one MAC computation, plus helpers for the rendering/reporting side:
the MAC line in drawing coordinates, a short text summary and a JSON-ready dict.

Fields
------
Real units (scaled):   mac, area
Aligned frame (px):    span_of_mac, leading_edge_x_at_mac, mac_pixels, area_pixels,
                       span_centroid, min_span, max_span
Frame definition:      rotation_angle (rad), origin (symmetry line p1)
Scaling:               scale_factor, mirrored (area doubled for a single drawn half)
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from geometry.frame import CoordinateTransformer
from geometry.primitives import Point2D

__all__ = ["MACResult"]


@dataclass(frozen=True)
class MACResult:
    mac: float
    area: float
    span_of_mac: float
    leading_edge_x_at_mac: float
    scale_factor: float
    rotation_angle: float
    origin: Point2D
    mac_pixels: float
    area_pixels: float
    span_centroid: float
    min_span: float
    max_span: float
    mirrored: bool

    @property
    def transformer(self) -> CoordinateTransformer:
        return CoordinateTransformer(origin=self.origin, angle=self.rotation_angle)

    def mac_line(self) -> Tuple[Point2D, Point2D]:
        """
        Endpoints of the MAC line in the caller's drawing coordinates.

        Start is the leading edge at `span_of_mac`; end is one pixel-space MAC
        further along the chordwise axis.
        """
        tr = self.transformer
        start = tr.inverse_point(Point2D(self.leading_edge_x_at_mac, self.span_of_mac))
        end = tr.inverse_point(Point2D(self.leading_edge_x_at_mac + self.mac_pixels, self.span_of_mac))
        return start, end

    def summary(self, unit: str = "m") -> str:
        return "MAC: {:.3f} {u}\nEst. Project Area: {:.2f} {u}²".format(self.mac, self.area, u=unit)

    def to_dict(self) -> Dict[str, Any]:
        start, end = self.mac_line()
        return {
            "mac": self.mac,
            "area": self.area,
            "span_of_mac": self.span_of_mac,
            "leading_edge_x_at_mac": self.leading_edge_x_at_mac,
            "scale_factor": self.scale_factor,
            "rotation_angle": self.rotation_angle,
            "origin": [self.origin.x, self.origin.y],
            "mac_pixels": self.mac_pixels,
            "area_pixels": self.area_pixels,
            "span_centroid": self.span_centroid,
            "min_span": self.min_span,
            "max_span": self.max_span,
            "mirrored": self.mirrored,
            "mac_line": [[start.x, start.y], [end.x, end.y]],
        }
