"""
Shared fixtures for Wingmac tests.

Geometry convention used throughout: centerline along +x through the origin,
chord measured along x, span along y.
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from geometry.primitives import Point2D, Polyline, SymmetryLine


def rotate_xy(points, angle, pivot=(0.0, 0.0), shift=(0.0, 0.0)):
    """Rotate (x, y) pairs by `angle` about `pivot`, then translate by `shift`."""
    c, s = math.cos(angle), math.sin(angle)
    out = []
    for x, y in points:
        dx, dy = x - pivot[0], y - pivot[1]
        out.append((pivot[0] + c * dx - s * dy + shift[0], pivot[1] + s * dx + c * dy + shift[1]))
    return out


def trapezoid_mac(cr, ct):
    return (2.0 / 3.0) * (cr + ct - cr * ct / (cr + ct))


# ============== Fixtures ==============

@pytest.fixture
def centerline():
    """Symmetry line along +x through the origin (identity frame)."""
    return SymmetryLine(Point2D(0.0, 0.0), Point2D(1.0, 0.0))


@pytest.fixture
def tapered_edges():
    """Linear taper c(y) = 2 - 0.1 y over y in [0, 10]."""
    leading = [Polyline([(0.0, 0.0), (0.0, 10.0)])]
    trailing = [Polyline([(2.0, 0.0), (1.0, 10.0)])]
    return leading, trailing


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
