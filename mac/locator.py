# -*- coding: utf-8 -*-
# Wingmac/mac/locator.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose:
--------
Pick the span station used to draw the MAC line: the integration step whose local
chord is closest to the MAC.

Tie-breaking:
-------------
   - Steps are scanned in ascending span; only a strictly smaller |c - MAC| replaces
     the current best, so the earliest step wins ties (np.argmin semantics).
   - The result generally differs from the analytic centroid Y_mac.
"""

from typing import Tuple
import numpy as np

from .integrator import Integration

__all__ = ["locate_mac_span"]


def locate_mac_span(integration: Integration) -> Tuple[float, float]:
    """
    Return (span position, |local chord - MAC|) of the best-matching step.
    """
    diff = np.abs(integration.chords - integration.mac)
    k = int(np.argmin(diff))
    return float(integration.spans[k]), float(diff[k])
