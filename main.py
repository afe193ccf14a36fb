# -*- coding: utf-8 -*-
# Wingmac/main.py

"""
End-to-end driver:
  1) Describe a traced planform (leading/trailing edges + centerline)
  2) Compute MAC and area in real units
  3) Report the summary and the MAC line in drawing coordinates
"""

import json
import logging
import sys

from geometry.primitives import Point2D, Polyline, Spline, SymmetryLine
from mac.api import calculate_mac
from mac.errors import MACError


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Wingmac")

    # ------------------------------------------------------------------
    # 1) Traced geometry (drawing/pixel coordinates)
    #    Centerline along +x through the origin; one wing half drawn at y >= 0.
    #    Leading edge: straight; trailing edge: a straight inboard run followed
    #    by a spline towards the tip.
    # ------------------------------------------------------------------
    symmetry = SymmetryLine(Point2D(0.0, 0.0), Point2D(1.0, 0.0))
    leading = [Polyline([(0.0, 0.0), (0.0, 10.0)])]
    trailing = [
        Polyline([(2.0, 0.0), (1.8, 2.0)]),
        Spline([(1.8, 2.0), (1.5, 6.0), (1.0, 10.0)]),
    ]
    wingspan = 20.0  # real units (m), tip to tip

    # ------------------------------------------------------------------
    # 2) MAC computation
    #    config overrides follow mac.config.DEFAULTS, e.g.
    #    {"integration": {"n_steps": 2000}}
    # ------------------------------------------------------------------
    try:
        result = calculate_mac(leading, trailing, symmetry, wingspan, config=None)
    except MACError as e:
        log.error("Calculation failed: %s", e)
        sys.exit(1)

    # ------------------------------------------------------------------
    # 3) Report
    # ------------------------------------------------------------------
    log.info("Result:\n%s", result.summary())
    start, end = result.mac_line()
    log.info("MAC line: (%.3f, %.3f) -> (%.3f, %.3f)", start.x, start.y, end.x, end.y)

    print(json.dumps(result.to_dict(), indent=2))
