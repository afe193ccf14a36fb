# -*- coding: utf-8 -*-
# Wingmac/mac/__init__.py

"""
Project: Wingmac
Date: 10/16/2026

Modules:
--------
- api:        calculate_mac(leading_edge, trailing_edge, symmetry_line, wingspan, config=None)
                → MACResult. The only entry point callers need.

- profile:    ChordProfile: span → chordwise position interpolation with endpoint
              snapping and an out-of-range sentinel.

- integrator: Overlap interval, 1000-step integration of area, |y|-moment and ∫c².

- locator:    Span station whose local chord best matches the MAC (first minimum).

- scale:      Pixel → real conversion from the wingspan (half-span assumption).

- result:     MACResult value object (MAC line endpoints, summary, to_dict).

- config:     DEFAULTS and right-biased deep merge for numerical knobs.

- errors:     MACError hierarchy (InsufficientPoints, ZeroSpan, ZeroArea, Input).

Usage:
    from mac.api import calculate_mac
"""

from .api import calculate_mac
from .errors import (
    MACError,
    InsufficientPointsError,
    ZeroSpanError,
    ZeroAreaError,
    InputError,
)
from .result import MACResult

__all__ = [
    "calculate_mac",
    "MACResult",
    "MACError",
    "InsufficientPointsError",
    "ZeroSpanError",
    "ZeroAreaError",
    "InputError",
]
